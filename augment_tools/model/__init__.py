"""Language-neutral service model: types, methods and the type registry."""

from .types import (
    Primitive,
    Sequence,
    Property,
    Composite,
    PollingHandle,
    Page,
    PageIterator,
    Response,
    LroPagedResponse,
    ModelType,
    fingerprint,
    type_name,
)
from .registry import TypeRegistry
from .service import Method, OperationKind, ServiceDescription
from .builder import build_service

__all__ = [
    "Primitive",
    "Sequence",
    "Property",
    "Composite",
    "PollingHandle",
    "Page",
    "PageIterator",
    "Response",
    "LroPagedResponse",
    "ModelType",
    "fingerprint",
    "type_name",
    "TypeRegistry",
    "Method",
    "OperationKind",
    "ServiceDescription",
    "build_service",
]
