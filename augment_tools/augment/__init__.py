"""Wrapper Augmenter - Adds future and pager types to service descriptions."""

from .factory import WrapperTypeFactory
from .dedup import get_or_register
from .rewriter import MethodRewriter, derive_list_all_name
from .main import (
    AugmentResult,
    GeneratorContext,
    augment,
    dump_model,
    find_name_collisions,
    find_page_conflicts,
    generate,
)

__all__ = [
    "WrapperTypeFactory",
    "get_or_register",
    "MethodRewriter",
    "derive_list_all_name",
    "AugmentResult",
    "GeneratorContext",
    "augment",
    "dump_model",
    "find_name_collisions",
    "find_page_conflicts",
    "generate",
]
