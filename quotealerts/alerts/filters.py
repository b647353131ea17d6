# quotealerts/alerts/filters.py
"""
Wrappers that turn the loosely typed filter and class-name options into plain
callables.

Both wrappers run once, when the alert configuration is merged, so the
visitor never has to inspect option types while walking a document.
"""

import re
from typing import Callable, Iterable, List, Union

from quotealerts.exceptions import AlertConfigError

NameFilterSpec = Union[None, str, "re.Pattern[str]", Iterable[str], Callable[[str], bool]]
ClassNameMapSpec = Union[str, Iterable[str], Callable[[str], Iterable[str]]]


def _always(title: str) -> bool:
    return True


def name_filter(spec: NameFilterSpec) -> Callable[[str], bool]:
    """
    Normalise a title filter into a predicate.

    Args:
        spec: None (match everything), a string (exact match), a compiled
            pattern (searched in the title), a collection of strings (exact
            match against any of them) or a predicate.

    Returns:
        A function taking the raw title and returning a bool
    """
    if spec is None:
        return _always

    if isinstance(spec, str):
        return lambda title: title == spec

    if isinstance(spec, re.Pattern):
        return lambda title: spec.search(title) is not None

    if callable(spec):
        return lambda title: bool(spec(title))

    if isinstance(spec, (list, tuple, set, frozenset)):
        names = frozenset(spec)
        if not all(isinstance(name, str) for name in names):
            raise AlertConfigError(f"Title filter entries must be strings: {spec!r}")
        return lambda title: title in names

    raise AlertConfigError(f"Unsupported title filter: {spec!r}")


def class_name_map(spec: ClassNameMapSpec) -> Callable[[str], List[str]]:
    """
    Normalise a class-name option into a function returning an ordered list.

    Order is kept as given, it decides CSS precedence when rendered.
    Duplicates are passed through untouched.
    """
    if isinstance(spec, str):
        return lambda title: [spec]

    if callable(spec):

        def classes_for(title: str) -> List[str]:
            classes = spec(title)
            # a bare string is one class name, not a sequence of letters
            if isinstance(classes, str):
                return [classes]
            return list(classes)

        return classes_for

    if isinstance(spec, (list, tuple)):
        classes = list(spec)
        if not all(isinstance(cls, str) for cls in classes):
            raise AlertConfigError(f"Class names must be strings: {spec!r}")
        return lambda title: list(classes)

    raise AlertConfigError(f"Unsupported class name map: {spec!r}")

