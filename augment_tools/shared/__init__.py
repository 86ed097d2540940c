"""Shared utilities for the augmentation tools."""

from .schema_loader import (
    SchemaCache,
    load_schema,
    collect_schema_paths,
)
from .naming import (
    to_pascal_case,
    future_type_name,
    page_type_name,
    iterator_type_name,
    qualified_method_name,
)
from .errors import (
    AugmentError,
    PreconditionError,
    NotFoundError,
    DescriptionError,
)

__all__ = [
    # Description loading
    "SchemaCache",
    "load_schema",
    "collect_schema_paths",
    # Naming utilities
    "to_pascal_case",
    "future_type_name",
    "page_type_name",
    "iterator_type_name",
    "qualified_method_name",
    # Errors
    "AugmentError",
    "PreconditionError",
    "NotFoundError",
    "DescriptionError",
]
