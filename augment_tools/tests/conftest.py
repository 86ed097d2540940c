import pytest

from augment_tools.model.service import Method, OperationKind, ServiceDescription
from augment_tools.model.types import Composite, Primitive, Property, Response, Sequence


@pytest.fixture()
def widget():
    return Composite("Widget", (Property("id", Primitive("string")), Property("size", Primitive("integer"))))


@pytest.fixture()
def widget_list(widget):
    return Composite(
        "WidgetListResult",
        (Property("value", Sequence(widget)), Property("nextLink", Primitive("string"))),
    )


@pytest.fixture()
def headers():
    return Composite("RequestHeaders", (Property("x-request-id", Primitive("string")),))


@pytest.fixture()
def make_method(headers):
    def _make(name, kind=OperationKind.PLAIN, body=None, group="", **kwargs):
        return Method(
            group=group,
            name=name,
            kind=kind,
            return_type=Response(body, headers),
            **kwargs,
        )

    return _make


@pytest.fixture()
def service(widget, widget_list):
    svc = ServiceDescription(namespace="Widgets", api_version="2024-01-01")
    svc.registry.add(widget)
    svc.registry.add(widget_list)
    return svc
