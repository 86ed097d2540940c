"""Type registry keyed by structural fingerprint."""

from __future__ import annotations

from typing import Iterator, TypeVar

from ..shared.errors import NotFoundError
from .types import ModelType, fingerprint, type_name

T = TypeVar("T")


class TypeRegistry:
    """Every model type known to a service description.

    Membership is structural: two types with the same :func:`fingerprint`
    are the same member, whatever their object identity. ``add`` does not
    enforce uniqueness; callers check ``contains`` first, which is what
    :func:`augment_tools.augment.dedup.get_or_register` does.

    Not safe for concurrent mutation. A pass that runs rewrites in parallel
    must serialize ``get_or_register`` calls.
    """

    __slots__ = ("_members", "_canonical")

    def __init__(self, members: list[ModelType] | None = None) -> None:
        self._members: list[ModelType] = []
        self._canonical: dict[tuple, ModelType] = {}
        for member in members or ():
            self.add(member)

    def contains(self, candidate: ModelType) -> bool:
        return fingerprint(candidate) in self._canonical

    def canonical_of(self, candidate: ModelType) -> ModelType:
        """Return the registered instance structurally equal to ``candidate``.

        Raises:
            NotFoundError: If no such instance is registered.
        """
        try:
            return self._canonical[fingerprint(candidate)]
        except KeyError:
            raise NotFoundError(type_name(candidate)) from None

    def add(self, model_type: ModelType) -> None:
        """Insert unconditionally. The first member for a fingerprint stays canonical."""
        self._members.append(model_type)
        self._canonical.setdefault(fingerprint(model_type), model_type)

    def of_kind(self, kind: type[T]) -> list[T]:
        """Registered members of one variant, in insertion order."""
        return [m for m in self._members if isinstance(m, kind)]

    def __contains__(self, candidate: object) -> bool:
        try:
            return self.contains(candidate)  # type: ignore[arg-type]
        except TypeError:
            return False

    def __iter__(self) -> Iterator[ModelType]:
        return iter(self._members)

    def __len__(self) -> int:
        return len(self._members)
