from typing import List

from ...config import AuditConfig
from ...model import Page
from ..core import RuleDefinition, audit_spec


@audit_spec(codes=["TITLE_TOO_LONG"], switches=["warn_title_length"], order=10)
def check_title_length(page: Page, config: AuditConfig) -> List[str]:
    """Titles should stay under `threshold_length` characters."""
    if not page.title:
        return []

    if len(page.title) >= config.threshold_length:
        return [f"Title meets or exceeds {config.threshold_length} characters; less is more."]
    return []


@audit_spec(codes=["URL_TOO_LONG"], switches=["warn_url_length"], order=20)
def check_url_length(page: Page, config: AuditConfig) -> List[str]:
    """URLs get a fraction of the title budget."""
    max_length = config.url_length_limit
    if len(page.url) >= max_length:
        return [
            f"URL meets or exceeds {max_length:g} characters, which is "
            f"{config.threshold_length_percentage:g} of the title limit; consider shortening."
        ]
    return []


DEFINITION = RuleDefinition(
    name="length",
    checks=[check_title_length, check_url_length]
)
