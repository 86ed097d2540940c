"""
Model types known to a service description.

Every type is a frozen dataclass; identifying fields take part in equality
and hashing, descriptive fields are declared with ``compare=False``. The
registry does not rely on dataclass equality though, it keys members by
:func:`fingerprint`, which spells out the identity of each variant.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final, Union

PRIMITIVE_TYPES: Final[frozenset[str]] = frozenset({
    "any",
    "binary",
    "boolean",
    "date",
    "date-time",
    "integer",
    "number",
    "string",
    "uuid",
})


@dataclass(frozen=True, slots=True)
class Primitive:
    """A built-in scalar type."""

    name: str


@dataclass(frozen=True, slots=True)
class Sequence:
    """An ordered collection of ``element_type``."""

    element_type: ModelType


@dataclass(frozen=True, slots=True)
class Property:
    name: str
    type: ModelType


@dataclass(frozen=True, slots=True)
class Composite:
    """A named object type declared by the service description."""

    name: str
    properties: tuple[Property, ...] = ()

    def find_property(self, name: str) -> Property | None:
        for prop in self.properties:
            if prop.name == name:
                return prop
        return None


@dataclass(frozen=True, slots=True)
class PollingHandle:
    """Synthesized future for a long-running operation.

    Identity is the synthesized name plus the ``list_all`` marker, so the
    list-all future of a paginated long-running method never collapses into
    a primary future that happens to share its name.
    """

    name: str
    list_all: bool = False
    group: str = field(default="", compare=False)
    method_name: str = field(default="", compare=False)
    result: ModelType | None = field(default=None, compare=False)


@dataclass(frozen=True, slots=True)
class Page:
    """Single-page container; always created as the companion of a PageIterator."""

    name: str = field(compare=False)
    element_type: ModelType
    preparer_needed: bool
    content_type: Composite | None = field(default=None, compare=False)
    item_name: str = field(default="value", compare=False)
    next_link_name: str | None = field(default="nextLink", compare=False)


@dataclass(frozen=True, slots=True)
class PageIterator:
    """Synthesized pager walking successive pages of ``element_type``."""

    name: str = field(compare=False)
    element_type: ModelType
    preparer_needed: bool
    page: Page = field(compare=False)


ModelType = Union[Primitive, Sequence, Composite, PollingHandle, Page, PageIterator]


@dataclass(frozen=True, slots=True)
class Response:
    """A method's declared return shape: body plus response headers."""

    body: ModelType | None
    headers: ModelType | None = None


@dataclass(frozen=True, slots=True)
class LroPagedResponse:
    """Return shape of a method that is both paginated and long-running."""

    future: PollingHandle
    list_all_future: PollingHandle
    pager: PageIterator
    headers: ModelType | None = None


ReturnType = Union[Response, LroPagedResponse]


def fingerprint(model_type: ModelType) -> tuple:
    """Structural identity of a model type: variant tag plus identifying fields."""
    match model_type:
        case Primitive(name=name):
            return ("primitive", name)
        case Sequence(element_type=element):
            return ("sequence", fingerprint(element))
        case Composite(name=name, properties=properties):
            return (
                "composite",
                name,
                tuple((prop.name, fingerprint(prop.type)) for prop in properties),
            )
        case PollingHandle(name=name, list_all=list_all):
            return ("future", name, list_all)
        case Page(element_type=element, preparer_needed=preparer_needed):
            return ("page", fingerprint(element), preparer_needed)
        case PageIterator(element_type=element, preparer_needed=preparer_needed):
            return ("iterator", fingerprint(element), preparer_needed)
    raise TypeError(f"Not a model type: {model_type!r}")


def type_name(model_type: ModelType | None) -> str:
    """Short reference used in reports, e.g. ``string``, ``[Widget]``, ``WidgetIterator``."""
    match model_type:
        case None:
            return "none"
        case Primitive(name=name):
            return name
        case Sequence(element_type=element):
            return f"[{type_name(element)}]"
        case Composite(name=name) | PollingHandle(name=name) | Page(name=name) | PageIterator(name=name):
            return name
    raise TypeError(f"Not a model type: {model_type!r}")
