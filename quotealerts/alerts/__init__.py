# quotealerts/alerts/__init__.py

from .config import (
    DEFAULT_CONFIG,
    DEFAULT_CONFIG_FOR_LEGACY_TITLE,
    AlertConfig,
    ClassNameMaps,
    DataMaps,
    TitleText,
)
from .filters import class_name_map, name_filter
from .plugin import TitleStrategy, alert_transform, handle_node
from .presets import GITHUB_CONFIG, MKDOCS_CONFIG

__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_CONFIG_FOR_LEGACY_TITLE",
    "GITHUB_CONFIG",
    "MKDOCS_CONFIG",
    "AlertConfig",
    "ClassNameMaps",
    "DataMaps",
    "TitleStrategy",
    "TitleText",
    "alert_transform",
    "class_name_map",
    "handle_node",
    "name_filter",
]
