"""
Method return-type rewriting for long-running and paginated operations.

| kind                    | new return type                                     |
|-------------------------|-----------------------------------------------------|
| plain                   | unchanged                                           |
| paginated               | Response(pager, headers)                            |
| long_running            | Response(future, headers)                           |
| paginated_long_running  | LroPagedResponse(future, list_all, pager, headers)  |

Every wrapper goes through :func:`get_or_register` before the method is
touched, so a method never references a type missing from the registry.
"""

from __future__ import annotations

from ..model.registry import TypeRegistry
from ..model.service import Method, OperationKind
from ..model.types import LroPagedResponse, PageIterator, Response, ReturnType
from ..shared.errors import PreconditionError
from ..shared.naming import LIST_ALL_SUFFIX, future_type_name
from .dedup import get_or_register
from .factory import WrapperTypeFactory


def derive_list_all_name(method: Method) -> str:
    """Name of the list-all future, normalized exactly like the primary future's name."""
    return future_type_name(f"{method.group}{method.name}{LIST_ALL_SUFFIX}")


class MethodRewriter:
    """Rewrites method return types against one shared registry.

    Each method must be rewritten at most once: a second call wraps the
    already wrapped return type again.
    """

    def __init__(
        self,
        registry: TypeRegistry,
        factory: WrapperTypeFactory | None = None,
    ) -> None:
        self.registry = registry
        self.factory = factory or WrapperTypeFactory()

    def rewrite(self, method: Method) -> ReturnType:
        match method.kind:
            case OperationKind.PLAIN:
                return method.return_type
            case OperationKind.PAGINATED:
                return self.wrap_pageable(method)
            case OperationKind.LONG_RUNNING | OperationKind.PAGINATED_LONG_RUNNING:
                return self.wrap_long_running(method)
        raise PreconditionError(f"Unknown operation kind {method.kind!r}", method.qualified_name)

    def wrap_pageable(self, method: Method) -> ReturnType:
        """Wrap a paginated, non long-running method's body in a shared pager."""
        if not method.is_paginated:
            raise PreconditionError(
                "wrap_pageable requires a paginated operation",
                method.qualified_name,
            )
        if method.is_long_running:
            return self.wrap_long_running(method)

        pager = self._pager_for(method)
        method.return_type = Response(pager, method.return_type.headers)
        return method.return_type

    def wrap_long_running(self, method: Method) -> ReturnType:
        """Wrap a long-running method's body in a future.

        A paginated long-running method gets two futures: the primary one
        resolving to a single page and a list-all one resolving to the pager.
        """
        if not method.is_long_running:
            raise PreconditionError(
                "wrap_long_running requires a long-running operation",
                method.qualified_name,
            )

        headers = method.return_type.headers
        if not method.is_paginated:
            future = get_or_register(
                self.registry,
                self.factory.build_polling_handle(method, result=method.return_type.body),
            )
            method.return_type = Response(future, headers)
            return method.return_type

        pager = self._pager_for(method)
        future = get_or_register(
            self.registry,
            self.factory.build_polling_handle(method, result=pager.page),
        )
        list_all_future = get_or_register(
            self.registry,
            self.factory.build_polling_handle(
                method,
                name_override=derive_list_all_name(method),
                result=pager,
            ),
        )
        method.return_type = LroPagedResponse(future, list_all_future, pager, headers)
        return method.return_type

    def _pager_for(self, method: Method) -> PageIterator:
        return get_or_register(self.registry, self.factory.build_page_iterator(method))
