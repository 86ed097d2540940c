"""
Wrapper Augmenter - Adds future and pager types to parsed service descriptions.

Reads one or more service descriptions (YAML or JSON), rewrites the return
type of every long-running and paginated method, and writes the augmented
model as YAML for the renderer, optionally with a Markdown summary.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Final

import yaml
from jinja2 import Environment, FileSystemLoader, StrictUndefined

from ..config import DEFAULT_SDK_NAME, GenerationOptions
from ..model.builder import build_service
from ..model.registry import TypeRegistry
from ..model.service import Method, OperationKind, ServiceDescription
from ..model.types import (
    Composite,
    LroPagedResponse,
    ModelType,
    Page,
    PageIterator,
    PollingHandle,
    Response,
    ReturnType,
    fingerprint,
    type_name,
)
from ..shared.errors import AugmentError, DescriptionError
from ..shared.naming import qualified_method_name
from ..shared.schema_loader import SchemaCache, collect_schema_paths
from .rewriter import MethodRewriter

TEMPLATE_DIR: Final[Path] = Path(__file__).parent / "templates"


@dataclass
class AugmentResult:
    """What one augmentation pass changed."""

    rewritten: list[str] = field(default_factory=list)
    futures: list[PollingHandle] = field(default_factory=list)
    pagers: list[PageIterator] = field(default_factory=list)
    collisions: dict[str, list[str]] = field(default_factory=dict)
    page_conflicts: dict[str, list[str]] = field(default_factory=dict)

    @property
    def added_types(self) -> int:
        # Each new pager brings its page along
        return len(self.futures) + 2 * len(self.pagers)


@dataclass
class GeneratorContext:
    """Context for the augmentation pass with cached resources."""

    options: GenerationOptions = field(default_factory=GenerationOptions)
    schema_cache: SchemaCache = field(default_factory=SchemaCache)
    template_env: Environment = field(init=False)

    def __post_init__(self) -> None:
        self.template_env = Environment(
            loader=FileSystemLoader(TEMPLATE_DIR),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
            auto_reload=False,
        )
        self._summary_template = self.template_env.get_template("summary.md.jinja")

    @property
    def summary_template(self):
        return self._summary_template

    def load(self, path: Path) -> ServiceDescription:
        return build_service(self.schema_cache.get(path), str(path))


def find_name_collisions(registry: TypeRegistry) -> dict[str, list[str]]:
    """Names shared by structurally different registry members.

    A real method whose future name equals a synthesized list-all name ends up
    here; the registry keeps both, the renderer cannot. Returns name -> kinds.
    """
    by_name: dict[str, dict[tuple, str]] = {}
    for member in registry:
        by_name.setdefault(type_name(member), {})[fingerprint(member)] = _kind(member)
    return {
        name: sorted(kinds.values())
        for name, kinds in by_name.items()
        if len(kinds) > 1
    }


def find_page_conflicts(service: ServiceDescription) -> dict[str, list[str]]:
    """Paginated methods whose paging fields differ from the page they share.

    Pages are keyed by element type only, so the first method to create one
    fixes its ``item_name`` and ``next_link_name``. Returns page name ->
    qualified names of the methods that disagree with it.
    """
    conflicts: dict[str, list[str]] = {}
    for method in service.methods:
        match method.return_type:
            case LroPagedResponse(pager=pager) | Response(body=PageIterator() as pager):
                page = pager.page
            case _:
                continue
        if (page.item_name, page.next_link_name) != (method.item_name, method.next_link_name):
            conflicts.setdefault(page.name, []).append(method.qualified_name)
    return conflicts


def augment(service: ServiceDescription, rewriter: MethodRewriter | None = None) -> AugmentResult:
    """Rewrite every method of ``service`` once, in declaration order.

    The first PreconditionError aborts the pass and propagates.
    """
    rewriter = rewriter or MethodRewriter(service.registry)
    before = len(service.registry)
    result = AugmentResult()

    for method in service.methods:
        if method.kind is OperationKind.PLAIN:
            continue
        rewriter.rewrite(method)
        result.rewritten.append(method.qualified_name)

    added = list(service.registry)[before:]
    result.futures = [t for t in added if isinstance(t, PollingHandle)]
    result.pagers = [t for t in added if isinstance(t, PageIterator)]
    result.collisions = find_name_collisions(service.registry)
    result.page_conflicts = find_page_conflicts(service)
    return result


def _kind(model_type: ModelType) -> str:
    match model_type:
        case PollingHandle(list_all=True):
            return "list-all future"
        case PollingHandle():
            return "future"
        case PageIterator():
            return "iterator"
        case Page():
            return "page"
        case Composite():
            return "composite"
    return type(model_type).__name__.lower()


def describe_type(model_type: ModelType) -> dict[str, Any]:
    """Plain-dict view of one registry member."""
    match model_type:
        case Composite(name=name, properties=properties):
            return {
                "kind": "composite",
                "name": name,
                "properties": {p.name: type_name(p.type) for p in properties},
            }
        case PollingHandle():
            return {
                "kind": "future",
                "name": model_type.name,
                "list_all": model_type.list_all,
                "method": qualified_method_name(model_type.group, model_type.method_name),
                "result": type_name(model_type.result),
            }
        case PageIterator(name=name, element_type=element, page=page):
            return {
                "kind": "iterator",
                "name": name,
                "element": type_name(element),
                "page": page.name,
            }
        case Page():
            return {
                "kind": "page",
                "name": model_type.name,
                "element": type_name(model_type.element_type),
                "content_type": type_name(model_type.content_type),
                "item_name": model_type.item_name,
                "next_link_name": model_type.next_link_name,
                "preparer_needed": model_type.preparer_needed,
            }
    return {"kind": _kind(model_type), "name": type_name(model_type)}


def describe_return_type(return_type: ReturnType) -> dict[str, Any]:
    match return_type:
        case LroPagedResponse(future=future, list_all_future=list_all, pager=pager, headers=headers):
            return {
                "future": future.name,
                "list_all_future": list_all.name,
                "pager": pager.name,
                "headers": type_name(headers),
            }
        case Response(body=body, headers=headers):
            return {"body": type_name(body), "headers": type_name(headers)}
    raise TypeError(f"Not a return type: {return_type!r}")


def describe_method(method: Method) -> dict[str, Any]:
    return {
        "group": method.group,
        "name": method.name,
        "kind": method.kind.value,
        "returns": describe_return_type(method.return_type),
    }


def dump_model(service: ServiceDescription, options: GenerationOptions) -> dict[str, Any]:
    """The augmented model as plain data, ready for ``yaml.safe_dump``."""
    return {
        "service": {
            "namespace": service.namespace,
            "name": service.service_name,
            "api_version": service.api_version,
            "version": options.version,
            "user_agent": options.effective_user_agent(service.namespace, service.api_version),
            "client_side_validation": options.client_side_validation,
        },
        "types": [describe_type(t) for t in service.registry],
        "methods": [describe_method(m) for m in service.methods],
    }


def render_summary(
    ctx: GeneratorContext,
    service: ServiceDescription,
    result: AugmentResult,
) -> str:
    """Render the Markdown summary of one augmentation pass."""
    return ctx.summary_template.render(
        service=service,
        service_name=service.service_name or "(unnamed)",
        version=ctx.options.version,
        user_agent=ctx.options.effective_user_agent(service.namespace, service.api_version),
        methods=[describe_method(m) for m in service.methods],
        added_types=result.added_types,
        futures=[describe_type(f) for f in result.futures],
        pagers=[describe_type(p) for p in result.pagers],
        collisions=result.collisions,
        page_conflicts=result.page_conflicts,
        client_methods=[m.name for m in service.client_methods],
    )


def generate(
    paths: list[Path],
    output_dir: Path,
    ctx: GeneratorContext,
    *,
    summary: bool = False,
) -> dict[Path, AugmentResult]:
    """Augment every description and write the results into ``output_dir``.

    All descriptions are augmented before anything is written, so a failing
    pass leaves no partial output behind.

    Raises:
        DescriptionError: If two inputs would write the same output files.
    """
    stems: dict[str, Path] = {}
    for path in paths:
        first = stems.setdefault(path.stem, path)
        if first != path:
            raise DescriptionError(f"Output name '{path.stem}' is also produced by {first}", str(path))

    passes: list[tuple[Path, ServiceDescription, AugmentResult]] = []
    for path in paths:
        service = ctx.load(path)
        passes.append((path, service, augment(service)))

    output_dir.mkdir(parents=True, exist_ok=True)
    results: dict[Path, AugmentResult] = {}
    for path, service, result in passes:
        model = dump_model(service, ctx.options)
        (output_dir / f"{path.stem}.augmented.yaml").write_text(
            yaml.safe_dump(model, sort_keys=False),
            encoding="utf-8",
        )
        if summary:
            (output_dir / f"{path.stem}.summary.md").write_text(
                render_summary(ctx, service, result),
                encoding="utf-8",
            )
        results[path] = result
    return results


def _add_option_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--package-version", default=None, help="Version of the generated package")
    parser.add_argument("--user-agent", default=None, help="Explicit user agent for the generated client")
    parser.add_argument("--sdk-name", default=DEFAULT_SDK_NAME, help="SDK name used in the default user agent")
    parser.add_argument(
        "--no-client-side-validation",
        action="store_true",
        help="Disable client-side parameter validation in the generated client",
    )


def _options_from_args(args: argparse.Namespace) -> GenerationOptions:
    return GenerationOptions(
        package_version=args.package_version,
        user_agent=args.user_agent,
        sdk_name=args.sdk_name,
        client_side_validation=not args.no_client_side_validation,
    )


def _print_warnings(path: Path, result: AugmentResult) -> None:
    for name, kinds in result.collisions.items():
        print(f"Warning: {path.name}: type name '{name}' is shared by {', '.join(kinds)}")
    for page, methods in result.page_conflicts.items():
        print(
            f"Warning: {path.name}: page type '{page}' keeps the paging fields of its first method; "
            f"{', '.join(methods)} declare different ones"
        )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "paths",
        type=Path,
        nargs="+",
        help="Service description file(s) or directories containing them",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("generated/models"),
        help="Directory for the augmented model files",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Also write a Markdown summary per description",
    )
    _add_option_arguments(parser)
    args = parser.parse_args(argv)

    try:
        description_paths = collect_schema_paths(args.paths)
        if not description_paths:
            raise SystemExit("No service description files found")

        ctx = GeneratorContext(options=_options_from_args(args))
        results = generate(description_paths, args.output_dir, ctx, summary=args.summary)
    except (AugmentError, FileNotFoundError) as e:
        raise SystemExit(f"Error: {e}") from e

    for path, result in results.items():
        _print_warnings(path, result)
        print(
            f"Augmented {path.name}: {len(result.rewritten)} method(s) rewritten, "
            f"{len(result.futures)} future(s), {len(result.pagers)} pager(s) -> {args.output_dir}"
        )


def check_main(argv: list[str] | None = None) -> None:
    """Run the pass without writing anything; fail on name collisions with --strict."""
    parser = argparse.ArgumentParser(description="Check service descriptions for augmentation problems")
    parser.add_argument("paths", type=Path, nargs="+", help="Service description file(s) or directories")
    parser.add_argument("--strict", action="store_true", help="Treat name collisions and page conflicts as errors")
    args = parser.parse_args(argv)

    ctx = GeneratorContext()
    collided = False
    try:
        for path in collect_schema_paths(args.paths):
            result = augment(ctx.load(path))
            _print_warnings(path, result)
            collided = collided or bool(result.collisions or result.page_conflicts)
            print(f"  {path.name}: OK ({len(result.rewritten)} method(s) would be rewritten)")
    except (AugmentError, FileNotFoundError) as e:
        raise SystemExit(f"Error: {e}") from e

    if collided and args.strict:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
