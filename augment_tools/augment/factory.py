"""Construction of polling handles and page iterators from a method."""

from __future__ import annotations

from ..model.service import Method
from ..model.types import (
    Composite,
    ModelType,
    Page,
    PageIterator,
    PollingHandle,
    Response,
    Sequence,
    type_name,
)
from ..shared.errors import PreconditionError
from ..shared.naming import future_type_name, iterator_type_name, page_type_name


class WrapperTypeFactory:
    """Builds wrapper types for a method without registering them.

    The same method shape always yields structurally equal wrappers, which is
    what lets the deduplicator share them across methods.
    """

    def build_page_iterator(self, method: Method) -> PageIterator:
        """Build the pager (and its page companion) over the method's list result.

        Raises:
            PreconditionError: If the method is not paginated, or its return
                body has no sequence property named ``method.item_name``.
        """
        if not method.is_paginated:
            raise PreconditionError(
                "build_page_iterator requires a paginated operation",
                method.qualified_name,
            )

        content = _list_result(method)
        element = _element_type(method, content)
        element_name = type_name(element)
        page = Page(
            name=page_type_name(element_name),
            element_type=element,
            preparer_needed=method.preparer_needed,
            content_type=content,
            item_name=method.item_name,
            next_link_name=method.next_link_name,
        )
        return PageIterator(
            name=iterator_type_name(element_name),
            element_type=element,
            preparer_needed=method.preparer_needed,
            page=page,
        )

    def build_polling_handle(
        self,
        method: Method,
        name_override: str | None = None,
        result: ModelType | None = None,
    ) -> PollingHandle:
        """Build the future returned by a long-running method.

        ``name_override`` is used for the list-all future of a paginated
        long-running method; such a handle carries the ``list_all`` marker.

        Raises:
            PreconditionError: If the method is not long-running.
        """
        if not method.is_long_running:
            raise PreconditionError(
                "build_polling_handle requires a long-running operation",
                method.qualified_name,
            )

        name = name_override or future_type_name(f"{method.group}{method.name}")
        return PollingHandle(
            name=name,
            list_all=name_override is not None,
            group=method.group,
            method_name=method.name,
            result=result,
        )


def _list_result(method: Method) -> Composite:
    return_type = method.return_type
    if not isinstance(return_type, Response) or not isinstance(return_type.body, Composite):
        raise PreconditionError(
            "Paginated operation must return an object body",
            method.qualified_name,
        )
    return return_type.body


def _element_type(method: Method, content: Composite) -> ModelType:
    prop = content.find_property(method.item_name)
    if prop is None or not isinstance(prop.type, Sequence):
        raise PreconditionError(
            f"'{content.name}' has no sequence property '{method.item_name}'",
            method.qualified_name,
        )
    return prop.type.element_type
