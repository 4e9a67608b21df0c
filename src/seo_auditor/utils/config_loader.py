import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..config import AuditConfig

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised when a settings file cannot be read or has the wrong shape."""


def read_settings(path: Union[str, Path]) -> Dict[str, Any]:
    """Reads a JSON settings file and returns its top-level object."""
    config_path = Path(path)
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigError(f"Could not read settings file {config_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Settings file {config_path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Settings file {config_path} must contain a JSON object")

    logger.debug("Loaded %d option(s) from %s", len(data), config_path)
    return data


def load_config(
        path: Optional[Union[str, Path]] = None,
        defaults: Optional[Dict[str, Any]] = None,
        **overrides: Any
) -> AuditConfig:
    """
    Builds an AuditConfig from layered options.

    Precedence, lowest first: `defaults`, the settings file at `path`, then
    keyword overrides (None values are ignored). Keys may use either the option
    name ('warnTitleLength') or the field name ('warn_title_length').
    """
    merged: Dict[str, Any] = {}
    for layer in (defaults or {}, read_settings(path) if path else {}):
        merged.update({_field_name(key): value for key, value in layer.items()})
    merged.update({_field_name(key): value for key, value in overrides.items() if value is not None})
    return AuditConfig(**merged)


def _field_name(key: str) -> str:
    """Maps an option alias to its field name; unknown keys pass through."""
    for name, field in AuditConfig.model_fields.items():
        if key == field.alias:
            return name
    return key
