"""Settings loading with deterministic precedence.

The cascade is always:
1) CLI/init params
2) Environment variables
3) ~/.config/jres/jres.yaml (or an explicit ``config_path``)
4) Built-in model defaults

Environment variable format:
- Prefix: ``JRES_``
- Nested keys: ``__`` separator
- Example: ``JRES_LOGGING__LEVEL=DEBUG`` -> ``logging.level = "DEBUG"``
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import ValidationError
from pydantic_settings import SettingsConfigDict

from packages.jres.logging import get_logger

from .models import DEFAULT_CONFIG_PATH, JresSettings, ResponseSettings

logger = get_logger(__name__)


def load_settings(
    *,
    cli_params: Mapping[str, Any] | None = None,
    config_path: str | Path | None = None,
) -> JresSettings:
    """Load settings by applying the standard precedence cascade."""
    resolved = Path(config_path) if config_path is not None else DEFAULT_CONFIG_PATH

    class _ResolvedSettings(JresSettings):
        model_config = SettingsConfigDict(yaml_file=resolved)

    return _ResolvedSettings(**dict(cli_params or {}))


@lru_cache(maxsize=1)
def get_settings() -> JresSettings:
    """Return process-wide settings, loaded once."""
    return load_settings()


@lru_cache(maxsize=1)
def get_response_settings() -> ResponseSettings:
    """Return process-wide response settings without ever raising.

    Serialization must not fail because an unrelated section (or the YAML
    file itself) is invalid, so a broken configuration is logged once and
    replaced by the model defaults.
    """
    try:
        return get_settings().response
    except (ValidationError, yaml.YAMLError, OSError):
        logger.exception("Invalid jres configuration; using default response settings")
        return ResponseSettings()
