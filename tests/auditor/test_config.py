# tests/auditor/test_config.py
import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError

from seo_auditor.config import AuditConfig, ConsoleOutput, FileOutput, HandlerOutput
from seo_auditor.utils.config_loader import ConfigError, load_config


def test_defaults():
    config = AuditConfig()
    assert config.warn_title_length is True
    assert config.warn_image_title_attribute is True
    assert config.threshold_length == 80
    assert config.threshold_length_percentage == 0.7
    assert config.threshold_common_words_percent == 40
    assert config.threshold_length_for_cw_check == 35
    assert config.extensions == (".md", ".mdx")
    assert config.ignore == ("/404.html",)
    assert config.output is None


def test_option_names_and_field_names_are_interchangeable():
    by_alias = AuditConfig(warnTitleLength=False, thresholdLength=60)
    by_name = AuditConfig(warn_title_length=False, threshold_length=60)
    assert by_alias == by_name
    assert by_alias.threshold_length == 60


@pytest.mark.parametrize("overrides", [
    {"thresholdLength": -1},
    {"thresholdLengthForCWCheck": -5},
    {"thresholdLengthPercentage": 1.5},
    {"thresholdLengthPercentage": -0.1},
    {"thresholdCommonWordsPercent": 101},
    {"thresholdLength": 80.5},
    {"unknownOption": True},
    {"output": 42},
])
def test_invalid_options_are_rejected(overrides):
    with pytest.raises(ValidationError):
        AuditConfig(**overrides)


def test_config_is_read_only():
    config = AuditConfig()
    with pytest.raises(ValidationError):
        config.threshold_length = 10


def test_page_selection_lists_are_read_only():
    """A live config's ignore list and extensions cannot be changed in place."""
    config = AuditConfig(ignore=["/404.html"], extensions=["md"])
    with pytest.raises(AttributeError):
        config.ignore.append("/a")
    with pytest.raises(AttributeError):
        config.extensions.append(".html")
    assert config.ignore == ("/404.html",)


def test_extensions_are_normalized():
    assert AuditConfig(extensions=["md", ".html"]).extensions == (".md", ".html")


def test_output_target_variants(tmp_path):
    handler = MagicMock()
    assert AuditConfig().output_target == ConsoleOutput()
    assert AuditConfig(output=handler).output_target == HandlerOutput(handler)

    target = AuditConfig(output=str(tmp_path / "seo.json")).output_target
    assert isinstance(target, FileOutput)
    assert target.path == tmp_path / "seo.json"


def test_url_length_limit():
    assert AuditConfig(threshold_length=100, threshold_length_percentage=0.5).url_length_limit == 50


# --- Settings files ---

@pytest.fixture
def settings_file(tmp_path) -> Path:
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({
        "warnImageTitleAttribute": False,
        "thresholdLength": 70,
        "ignore": ["/404.html", "/drafts/"],
    }))
    return path


def test_load_config_from_file(settings_file):
    config = load_config(settings_file)
    assert config.warn_image_title_attribute is False
    assert config.threshold_length == 70
    assert config.ignore == ("/404.html", "/drafts/")


def test_overrides_win_over_file_and_file_over_defaults(settings_file):
    config = load_config(
        settings_file,
        defaults={"thresholdLength": 10, "extensions": [".html"]},
        threshold_length=90,
        output=None
    )
    assert config.threshold_length == 90
    assert config.extensions == (".html",)
    assert config.output is None


def test_load_config_without_file():
    assert load_config() == AuditConfig()


@pytest.mark.parametrize("content", ["{not json", "[1, 2, 3]"])
def test_bad_settings_file(tmp_path, content):
    path = tmp_path / "settings.json"
    path.write_text(content)
    with pytest.raises(ConfigError):
        load_config(path)


def test_missing_settings_file(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "nope.json")


def test_invalid_file_values_fail_fast(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"thresholdLength": -3}))
    with pytest.raises(ValidationError):
        load_config(path)
