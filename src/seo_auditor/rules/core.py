from typing import Callable, List, Optional, Sequence

from ..config import AuditConfig
from ..model import Page

CheckFunc = Callable[[Page, AuditConfig], List[str]]


def audit_spec(codes: List[str], switches: Sequence[str], order: int):
    """
    Decorator declaring which issue codes a check reports, the config switches
    that enable it, and its position in the evaluation order.
    """
    def decorator(func):
        func.defined_codes = codes
        func.switches = tuple(switches)
        func.order = order
        return func
    return decorator


class AuditRule:
    """
    A single check bound to the config switches that enable it.

    A rule is skipped entirely (no warnings, no work) unless at least one of
    its switches is on.
    """

    def __init__(self, check: CheckFunc, codes: Sequence[str], switches: Sequence[str], order: int):
        self.check = check
        self.codes = tuple(codes)
        self.switches = tuple(switches)
        self.order = order

    @classmethod
    def from_check(cls, check: CheckFunc) -> "AuditRule":
        return cls(check, check.defined_codes, check.switches, check.order)

    def is_enabled(self, config: AuditConfig) -> bool:
        return any(getattr(config, switch) for switch in self.switches)

    def evaluate(self, page: Page, config: AuditConfig) -> List[str]:
        if not self.is_enabled(config):
            return []
        return list(self.check(page, config))

    def __repr__(self) -> str:
        return f"AuditRule({'/'.join(self.codes)}, order={self.order})"


class RuleDefinition:
    """Groups the checks one module contributes to the rule set."""

    def __init__(self, name: str, checks: Optional[List[CheckFunc]] = None):
        self.name = name
        self.rules = [AuditRule.from_check(check) for check in checks or []]
        self.codes = sorted({code for rule in self.rules for code in rule.codes})
