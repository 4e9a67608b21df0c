from typing import List

from ...config import AuditConfig
from ...model import Page
from ...utils.stopwords import common_word_ratio
from ..core import RuleDefinition, audit_spec


def _check_common_words(label: str, text: str, config: AuditConfig) -> List[str]:
    # Texts below the minimum length are never scored.
    if len(text) < config.threshold_length_for_cw_check:
        return []

    ratio = common_word_ratio(text)
    if ratio >= config.threshold_common_words_percent:
        return [f"{label} has a large percentage ({round(ratio, 2)}%) of common words; consider revising."]
    return []


@audit_spec(codes=["TITLE_COMMON_WORDS"], switches=["warn_title_common_words"], order=50)
def check_title_common_words(page: Page, config: AuditConfig) -> List[str]:
    if not page.title:
        return []
    return _check_common_words("Title", page.title, config)


@audit_spec(codes=["URL_COMMON_WORDS"], switches=["warn_url_common_words"], order=60)
def check_url_common_words(page: Page, config: AuditConfig) -> List[str]:
    if not page.url:
        return []
    return _check_common_words("URL", page.url, config)


DEFINITION = RuleDefinition(
    name="common_words",
    checks=[check_title_common_words, check_url_common_words]
)
