from typing import List

from ...config import AuditConfig
from ...model import Page
from ..core import RuleDefinition, audit_spec

MISSING_ALT_MSG = "Image is missing alt attribute. This also breaks accessibility!"
MISSING_TITLE_MSG = "Image is missing title attribute; use image titles strategically."


@audit_spec(
    codes=["MISSING_IMG_ALT", "MISSING_IMG_TITLE"],
    switches=["warn_image_alt_attribute", "warn_image_title_attribute"],
    order=40
)
def check_image_attributes(page: Page, config: AuditConfig) -> List[str]:
    """
    Checks every <img> for alt and title attributes.

    The two checks are independent: one image can produce both warnings, and
    identical warnings from several images collapse later on.
    """
    if page.document is None:
        return []

    res = []
    for img in page.document.find_all("img"):
        if config.warn_image_alt_attribute and not img.has_attr("alt"):
            res.append(MISSING_ALT_MSG)
        if config.warn_image_title_attribute and not img.has_attr("title"):
            res.append(MISSING_TITLE_MSG)

    return res


DEFINITION = RuleDefinition(
    name="image",
    checks=[check_image_attributes]
)
