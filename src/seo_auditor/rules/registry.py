# src/seo_auditor/rules/registry.py
import importlib
import logging
import pkgutil
from typing import List, Set

from .core import AuditRule, RuleDefinition

logger = logging.getLogger(__name__)


class RuleRegistry:
    """
    Central registry for audit rules.

    Discovers RuleDefinition modules in the 'seo_auditor.rules.checks' package
    and keeps their rules sorted by evaluation order.
    """

    _rules: List[AuditRule] = []
    _all_codes: Set[str] = set()
    _loaded: bool = False

    @classmethod
    def discover(cls) -> None:
        """
        Imports every module in `seo_auditor.rules.checks` that exposes a
        `DEFINITION` and registers its rules. Runs once per process.
        """
        if cls._loaded:
            return

        import seo_auditor.rules.checks as checks_pkg

        rules: List[AuditRule] = []
        for _, name, _ in pkgutil.iter_modules(checks_pkg.__path__):
            full_name = f"seo_auditor.rules.checks.{name}"
            try:
                module = importlib.import_module(full_name)
            except ImportError as e:
                logger.error(f"Error loading rule module {name}: {e}")
                continue

            defn = getattr(module, "DEFINITION", None)
            if not isinstance(defn, RuleDefinition):
                continue

            rules.extend(defn.rules)
            cls._all_codes.update(defn.codes)
            logger.debug(f"Rules loaded: {defn.name} ({', '.join(defn.codes)})")

        cls._rules = sorted(rules, key=lambda rule: rule.order)
        cls._loaded = True

    @classmethod
    def get_all_rules(cls) -> List[AuditRule]:
        """Returns every registered rule in evaluation order."""
        cls.discover()
        return list(cls._rules)

    @classmethod
    def get_all_codes(cls) -> List[str]:
        """Returns the issue codes of every registered rule, sorted."""
        cls.discover()
        return sorted(cls._all_codes)
