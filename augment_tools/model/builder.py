"""
Turn a loaded description mapping into a ServiceDescription.

Description layout::

    namespace: widgets
    api_version: "2024-01-01"
    types:
      Widget:
        properties: {id: string, name: string}
      WidgetListResult:
        properties: {value: "[Widget]", nextLink: string}
    methods:
      - group: Widgets
        name: List
        returns: WidgetListResult
        headers: {x-request-id: string}
        paginated: {item_name: value, next_link_name: nextLink}
        long_running: false

Type references are primitive names, ``[T]`` for a sequence of ``T``, or the
name of a declared type.
"""

from __future__ import annotations

from typing import Any

from ..shared.errors import DescriptionError
from ..shared.naming import qualified_method_name, to_pascal_case
from .registry import TypeRegistry
from .service import Method, OperationKind, ServiceDescription
from .types import PRIMITIVE_TYPES, Composite, ModelType, Primitive, Property, Response, Sequence


def _mapping(value: Any, what: str, source: str | None) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise DescriptionError(f"'{what}' must be a mapping", source)
    return value


def _normalize_ref(ref: Any) -> Any:
    """Unquoted ``[Widget]`` in YAML arrives as a one-item list."""
    if isinstance(ref, list) and len(ref) == 1:
        return f"[{_normalize_ref(ref[0])}]"
    return ref


def _base_ref(ref: Any) -> str:
    ref = str(_normalize_ref(ref))
    while ref.startswith("[") and ref.endswith("]"):
        ref = ref[1:-1].strip()
    return ref


def _topo_sort_types(declared: dict[str, Any], source: str | None) -> list[str]:
    """Order declared types so every type comes after the types it references."""
    deps: dict[str, set[str]] = {}
    for name, spec in declared.items():
        props = _mapping(_mapping(spec, name, source).get("properties"), f"{name}.properties", source)
        deps[name] = {
            _base_ref(ref)
            for ref in props.values()
            if _base_ref(ref) in declared
        }

    ordered: list[str] = []
    temporary: set[str] = set()
    permanent: set[str] = set()

    def visit(n: str) -> None:
        if n in permanent:
            return
        if n in temporary:
            raise DescriptionError(f"Type reference cycle through '{n}'", source)
        temporary.add(n)
        for d in sorted(deps[n]):
            visit(d)
        temporary.discard(n)
        permanent.add(n)
        ordered.append(n)

    for n in declared:
        visit(n)
    return ordered


def resolve_type_ref(
    ref: Any,
    composites: dict[str, Composite],
    source: str | None = None,
) -> ModelType:
    """Resolve a type reference against primitives and already built composites."""
    ref = _normalize_ref(ref)
    if not isinstance(ref, str) or not ref.strip():
        raise DescriptionError(f"Invalid type reference {ref!r}", source)
    ref = ref.strip()
    if ref.startswith("[") and ref.endswith("]"):
        return Sequence(resolve_type_ref(ref[1:-1], composites, source))
    if ref in PRIMITIVE_TYPES:
        return Primitive(ref)
    if ref in composites:
        return composites[ref]
    raise DescriptionError(f"Unknown type '{ref}'", source)


def _build_types(declared: dict[str, Any], source: str | None) -> dict[str, Composite]:
    composites: dict[str, Composite] = {}
    for name in _topo_sort_types(declared, source):
        props = _mapping(_mapping(declared[name], name, source).get("properties"), f"{name}.properties", source)
        composites[name] = Composite(
            name=name,
            properties=tuple(
                Property(prop_name, resolve_type_ref(ref, composites, source))
                for prop_name, ref in props.items()
            ),
        )
    return composites


def _build_method(
    entry: Any,
    composites: dict[str, Composite],
    source: str | None,
) -> Method:
    entry = _mapping(entry, "methods[]", source)
    name = entry.get("name")
    if not name:
        raise DescriptionError("Method entry without a name", source)
    name = str(name)
    group = str(entry.get("group") or "")
    label = qualified_method_name(group, name)

    body = None
    if entry.get("returns") is not None:
        body = resolve_type_ref(entry["returns"], composites, source)

    headers = None
    header_specs = _mapping(entry.get("headers"), f"{label}.headers", source)
    if header_specs:
        headers = Composite(
            name=f"{to_pascal_case(group + name)}Headers",
            properties=tuple(
                Property(h, resolve_type_ref(ref, composites, source))
                for h, ref in header_specs.items()
            ),
        )

    paging = entry.get("paginated")
    settings: dict[str, Any] = {}
    if isinstance(paging, dict):
        settings = paging
    elif paging is not None and not isinstance(paging, bool):
        raise DescriptionError(f"'{label}.paginated' must be a boolean or a mapping", source)

    long_running = entry.get("long_running")
    if long_running is not None and not isinstance(long_running, bool):
        raise DescriptionError(f"'{label}.long_running' must be a boolean", source)

    return Method(
        group=group,
        name=name,
        kind=OperationKind.from_flags(isinstance(paging, dict) or paging is True, long_running is True),
        return_type=Response(body, headers),
        item_name=settings.get("item_name", "value"),
        next_link_name=settings.get("next_link_name", "nextLink"),
        next_method_name=settings.get("next_method"),
    )


def build_service(data: dict[str, Any], source: str | None = None) -> ServiceDescription:
    """Build the model for one description.

    Declared types are registered up front and each method's header type
    after its method, so the registry enumerates every type the renderer
    will need before any wrapper is synthesized.

    Raises:
        DescriptionError: On unknown type references, reference cycles,
            malformed sections or duplicate methods.
    """
    declared = _mapping(data.get("types"), "types", source)
    composites = _build_types(declared, source)

    methods_data = data.get("methods") or []
    if not isinstance(methods_data, list):
        raise DescriptionError("'methods' must be a list", source)

    service = ServiceDescription(
        namespace=str(data.get("namespace") or ""),
        api_version=str(data.get("api_version") or ""),
        registry=TypeRegistry(list(composites.values())),
    )
    for entry in methods_data:
        method = _build_method(entry, composites, source)
        service.add_method(method)
        headers = method.return_type.headers
        if headers is not None and not service.registry.contains(headers):
            service.registry.add(headers)
    return service
