"""The single sanctioned way to add a wrapper type to a registry."""

from __future__ import annotations

from typing import TypeVar

from ..model.registry import TypeRegistry
from ..model.types import ModelType, PageIterator

T = TypeVar("T", bound=ModelType)


def get_or_register(registry: TypeRegistry, candidate: T) -> T:
    """Return the registered type equal to ``candidate``, registering it if new.

    A new PageIterator brings its Page companion along; the two are
    registered together, page first.
    """
    if registry.contains(candidate):
        return registry.canonical_of(candidate)  # type: ignore[return-value]

    if isinstance(candidate, PageIterator) and not registry.contains(candidate.page):
        registry.add(candidate.page)
    registry.add(candidate)
    return candidate
