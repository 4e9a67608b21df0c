# src/seo_auditor/engine.py
from typing import List, Optional, Set

from .config import AuditConfig
from .model import Page
from .rules.core import AuditRule
from .rules.registry import RuleRegistry


class PageEvaluator:
    """
    Runs the rule set against one page at a time.

    Warnings are collected in rule order and then folded into a set, so two
    rules (or two images) producing the same text report it once. Warnings are
    deduplicated by text, not by origin.
    """

    def __init__(self, config: AuditConfig, rules: Optional[List[AuditRule]] = None):
        """Uses the discovered rule set unless explicit rules are given."""
        self.config = config
        self.rules = rules if rules is not None else RuleRegistry.get_all_rules()

    def evaluate(self, page: Page) -> Set[str]:
        """
        Evaluates every enabled rule against `page`.

        Returns:
            Set[str]: The page's warnings; empty when nothing fired.
        """
        warnings: List[str] = []
        for rule in self.rules:
            warnings.extend(rule.evaluate(page, self.config))
        return set(warnings)
