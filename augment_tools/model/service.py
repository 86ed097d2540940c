"""Methods and the service description that owns them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from ..shared.errors import DescriptionError
from ..shared.naming import qualified_method_name, to_pascal_case
from .registry import TypeRegistry
from .types import ReturnType


class OperationKind(str, Enum):
    """How a method's result is delivered."""

    PLAIN = "plain"
    PAGINATED = "paginated"
    LONG_RUNNING = "long_running"
    PAGINATED_LONG_RUNNING = "paginated_long_running"

    @classmethod
    def from_flags(cls, paginated: bool, long_running: bool) -> OperationKind:
        if paginated and long_running:
            return cls.PAGINATED_LONG_RUNNING
        if paginated:
            return cls.PAGINATED
        if long_running:
            return cls.LONG_RUNNING
        return cls.PLAIN


@dataclass(slots=True)
class Method:
    """A client method, identified by ``(group, name)``.

    ``return_type`` is replaced in place by the rewriter and by nothing else.
    The pageable settings only matter for paginated kinds.
    """

    group: str
    name: str
    kind: OperationKind
    return_type: ReturnType
    item_name: str = "value"
    next_link_name: str | None = "nextLink"
    next_method_name: str | None = None

    @property
    def key(self) -> tuple[str, str]:
        return (self.group, self.name)

    @property
    def qualified_name(self) -> str:
        return qualified_method_name(self.group, self.name)

    @property
    def is_paginated(self) -> bool:
        return self.kind in (OperationKind.PAGINATED, OperationKind.PAGINATED_LONG_RUNNING)

    @property
    def is_long_running(self) -> bool:
        return self.kind in (OperationKind.LONG_RUNNING, OperationKind.PAGINATED_LONG_RUNNING)

    @property
    def preparer_needed(self) -> bool:
        """True when the pager must build next-page requests from the next link itself."""
        return self.next_method_name is None and self.next_link_name is not None


@dataclass
class ServiceDescription:
    """A parsed service: its methods in declaration order and its type registry."""

    namespace: str = ""
    api_version: str = ""
    methods: list[Method] = field(default_factory=list)
    registry: TypeRegistry = field(default_factory=TypeRegistry)

    def __post_init__(self) -> None:
        self.namespace = self.namespace.lower()
        seen: set[tuple[str, str]] = set()
        for method in self.methods:
            self._check_unique(method, seen)

    @staticmethod
    def _check_unique(method: Method, seen: set[tuple[str, str]]) -> None:
        if method.key in seen:
            raise DescriptionError("Duplicate method", method=method.qualified_name)
        seen.add(method.key)

    def add_method(self, method: Method) -> None:
        self._check_unique(method, {m.key for m in self.methods})
        self.methods.append(method)

    def method(self, group: str, name: str) -> Method:
        for method in self.methods:
            if method.key == (group, name):
                return method
        raise KeyError(qualified_method_name(group, name))

    @property
    def service_name(self) -> str:
        return to_pascal_case(self.namespace)

    @property
    def client_methods(self) -> list[Method]:
        """Methods that belong to no group and live on the base client."""
        return [m for m in self.methods if not m.group]
