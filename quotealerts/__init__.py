# quotealerts/__init__.py
"""GitHub-style alert blocks for rendered Markdown."""

from .alerts import (
    DEFAULT_CONFIG,
    DEFAULT_CONFIG_FOR_LEGACY_TITLE,
    GITHUB_CONFIG,
    MKDOCS_CONFIG,
    AlertConfig,
    alert_transform,
)
from .exceptions import AlertConfigError, QuoteAlertsError

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_CONFIG_FOR_LEGACY_TITLE",
    "GITHUB_CONFIG",
    "MKDOCS_CONFIG",
    "AlertConfig",
    "AlertConfigError",
    "QuoteAlertsError",
    "alert_transform",
]
