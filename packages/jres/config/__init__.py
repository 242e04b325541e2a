"""Public API for jres configuration."""

from .loader import get_response_settings, get_settings, load_settings
from .models import (
    DEFAULT_CONFIG_PATH,
    JresSettings,
    LoggingSettings,
    ResponseSettings,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "JresSettings",
    "LoggingSettings",
    "ResponseSettings",
    "get_response_settings",
    "get_settings",
    "load_settings",
]
