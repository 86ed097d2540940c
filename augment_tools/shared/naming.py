"""Naming utilities for synthesized wrapper types."""

from __future__ import annotations

import re
from functools import lru_cache

FUTURE_SUFFIX = "Future"
PAGE_SUFFIX = "Page"
ITERATOR_SUFFIX = "Iterator"
LIST_ALL_SUFFIX = "All"


@lru_cache(maxsize=1024)
def to_pascal_case(value: str) -> str:
    """Convert a string to PascalCase.

    Uses caching for repeated calls with the same input.

    Examples:
        >>> to_pascal_case("hello_world")
        'HelloWorld'
        >>> to_pascal_case("hello-world")
        'HelloWorld'
        >>> to_pascal_case("helloWorld")
        'HelloWorld'
    """
    # Handle already camelCase/PascalCase by inserting underscores before caps
    value = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", value)

    parts = [part for part in re.split(r"[^a-zA-Z0-9]+", value) if part]
    return "".join(part.capitalize() for part in parts)


@lru_cache(maxsize=1024)
def future_type_name(base: str) -> str:
    """Name of the polling handle synthesized for ``base`` (group + method)."""
    return f"{to_pascal_case(base)}{FUTURE_SUFFIX}"


@lru_cache(maxsize=1024)
def page_type_name(element_name: str) -> str:
    return f"{to_pascal_case(element_name)}{PAGE_SUFFIX}"


@lru_cache(maxsize=1024)
def iterator_type_name(element_name: str) -> str:
    return f"{to_pascal_case(element_name)}{ITERATOR_SUFFIX}"


def qualified_method_name(group: str, name: str) -> str:
    """Label used in error messages and reports, e.g. ``Widgets.List``."""
    return f"{group}.{name}" if group else name
