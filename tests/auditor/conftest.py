import pytest
from bs4 import BeautifulSoup

from seo_auditor.config import AuditConfig

ALL_SWITCHES = [
    "warn_title_length",
    "warn_url_length",
    "warn_duplicate_headings",
    "warn_image_alt_attribute",
    "warn_image_title_attribute",
    "warn_title_common_words",
    "warn_url_common_words",
]


@pytest.fixture
def only():
    """Builds a config with just the given rule switches turned on."""
    def _only(*switches, **overrides):
        options = {name: name in switches for name in ALL_SWITCHES}
        options.update(overrides)
        return AuditConfig(**options)
    return _only


@pytest.fixture
def soup():
    def _soup(body: str) -> BeautifulSoup:
        return BeautifulSoup(f"<html><body>{body}</body></html>", "html.parser")
    return _soup
