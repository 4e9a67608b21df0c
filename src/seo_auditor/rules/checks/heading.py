from typing import List

from ...config import AuditConfig
from ...model import Page
from ..core import RuleDefinition, audit_spec


@audit_spec(codes=["DUPLICATE_H1"], switches=["warn_duplicate_headings"], order=30)
def check_duplicate_h1(page: Page, config: AuditConfig) -> List[str]:
    """
    Rule: a page should have exactly one <h1>.
    Reports once per page no matter how many extra headings there are.
    """
    if page.document is None:
        return []

    h1_count = len(list(page.document.find_all("h1")))
    if h1_count > 1:
        return ["More than one <h1> tag. This is almost never what you want."]
    return []


DEFINITION = RuleDefinition(
    name="heading",
    checks=[check_duplicate_h1]
)
