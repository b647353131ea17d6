# quotealerts/alerts/config.py
"""
Configuration for the alert transform.

A configuration is assembled from zero or more partial fragments (mappings
keyed by option name, or full AlertConfig instances). Later fragments override
earlier ones, and the combined options are laid over the defaults:

    alert_transform({"title_filter": ["[!NOTE]", "[!TIP]"]},
                    {"class_name_maps": {"block": "callout"}})

Grouped options (class_name_maps, data_maps) are merged member by member, so
overriding only the block classes keeps the default title classes.

Loosely typed options are normalised here, once, into plain callables.
"""

from dataclasses import dataclass, field, fields, replace
from typing import Any, Callable, Dict, Iterable, List, Mapping, NamedTuple

from quotealerts.exceptions import AlertConfigError

from .filters import class_name_map, name_filter

DataMap = Callable[[Dict[str, Any]], Dict[str, Any]]


class TitleText(NamedTuple):
    """A raw title split into the label shown to readers and the lookup key."""

    display_title: str
    checked_title: str


def as_title_text(value) -> TitleText:
    """Accept a TitleText, a (display, checked) pair or a mapping."""
    if isinstance(value, Mapping):
        return TitleText(value["display_title"], value["checked_title"])
    display_title, checked_title = value
    return TitleText(display_title, checked_title)


def _identity(data: Dict[str, Any]) -> Dict[str, Any]:
    return data


def default_title_text_map(title: str) -> TitleText:
    # [!NOTE] -> NOTE, anything else passes through
    if title.startswith("[!") and title.endswith("]"):
        title = title[2:-1]
    return TitleText(title, title)


def default_block_classes(checked_title: str) -> List[str]:
    return ["markdown-alert", f"markdown-alert-{checked_title.lower()}"]


@dataclass(frozen=True)
class ClassNameMaps:
    block: Callable[[str], List[str]] = default_block_classes
    title: Callable[[str], List[str]] = class_name_map("markdown-alert-title")


@dataclass(frozen=True)
class DataMaps:
    block: DataMap = _identity
    title: DataMap = _identity


@dataclass(frozen=True)
class AlertConfig:
    """Fully populated, read-only alert options."""

    legacy_title: bool = False
    title_filter: Callable[[str], bool] = name_filter(None)
    title_keep_trailing_whitespace: bool = False
    title_text_map: Callable[[str], Any] = default_title_text_map
    class_name_maps: ClassNameMaps = field(default_factory=ClassNameMaps)
    data_maps: DataMaps = field(default_factory=DataMaps)


OPTION_NAMES = frozenset(f.name for f in fields(AlertConfig))
_GROUP_MEMBERS = ("block", "title")

DEFAULT_CONFIG = AlertConfig()

# GitHub's first alert syntax used a bold title word instead of a marker
DEFAULT_CONFIG_FOR_LEGACY_TITLE = replace(
    DEFAULT_CONFIG,
    legacy_title=True,
    title_filter=name_filter(["Note", "Warning"]),
)


def merge_fragments(fragments: Iterable[Any]) -> Dict[str, Any]:
    """
    Shallow-merge configuration fragments, later ones winning.

    Returns:
        Dict of the options that were explicitly provided
    """
    provided: Dict[str, Any] = {}
    for fragment in fragments:
        if fragment is None:
            continue
        if isinstance(fragment, AlertConfig):
            fragment = {name: getattr(fragment, name) for name in OPTION_NAMES}
        elif not isinstance(fragment, Mapping):
            raise AlertConfigError(f"Config fragment must be a mapping, got {type(fragment).__name__}")

        unknown = set(fragment) - OPTION_NAMES
        if unknown:
            raise AlertConfigError(f"Unknown alert option(s): {', '.join(sorted(unknown))}")
        provided.update(fragment)
    return provided


def _group_values(value, option: str) -> Dict[str, Any]:
    if isinstance(value, (ClassNameMaps, DataMaps)):
        return {member: getattr(value, member) for member in _GROUP_MEMBERS}
    if not isinstance(value, Mapping):
        raise AlertConfigError(f"{option} must be a mapping with 'block' and/or 'title'")
    unknown = set(value) - set(_GROUP_MEMBERS)
    if unknown:
        raise AlertConfigError(f"Unknown {option} member(s): {', '.join(sorted(unknown))}")
    return dict(value)


def _merge_class_name_maps(value, defaults: ClassNameMaps) -> ClassNameMaps:
    members = {name: class_name_map(spec) for name, spec in _group_values(value, "class_name_maps").items()}
    return replace(defaults, **members)


def _merge_data_maps(value, defaults: DataMaps) -> DataMaps:
    members = _group_values(value, "data_maps")
    for name, data_map in members.items():
        if not callable(data_map):
            raise AlertConfigError(f"data_maps.{name} must be callable")
    return replace(defaults, **members)


def resolve_config(provided: Mapping[str, Any], defaults: AlertConfig = DEFAULT_CONFIG) -> AlertConfig:
    """
    Lay provided options over a set of defaults and normalise them.

    Args:
        provided: Options returned by merge_fragments
        defaults: DEFAULT_CONFIG or DEFAULT_CONFIG_FOR_LEGACY_TITLE

    Returns:
        A frozen AlertConfig with no missing option
    """
    options: Dict[str, Any] = {}
    for name, value in provided.items():
        if name == "title_filter":
            value = name_filter(value)
        elif name == "title_text_map":
            if not callable(value):
                raise AlertConfigError("title_text_map must be callable")
        elif name == "class_name_maps":
            value = _merge_class_name_maps(value, defaults.class_name_maps)
        elif name == "data_maps":
            value = _merge_data_maps(value, defaults.data_maps)
        else:
            value = bool(value)
        options[name] = value
    return replace(defaults, **options)
