import pytest

from augment_tools.augment.factory import WrapperTypeFactory
from augment_tools.model.service import OperationKind
from augment_tools.model.types import Composite, Primitive, Property, Sequence
from augment_tools.shared.errors import PreconditionError


class TestBuildPageIterator:
    def test_builds_iterator_and_page(self, make_method, widget, widget_list):
        method = make_method("List", OperationKind.PAGINATED, widget_list, group="Widgets")

        pager = WrapperTypeFactory().build_page_iterator(method)

        assert pager.name == "WidgetIterator"
        assert pager.element_type is widget
        assert pager.preparer_needed is True
        assert pager.page.name == "WidgetPage"
        assert pager.page.element_type is widget
        assert pager.page.content_type is widget_list
        assert pager.page.item_name == "value"
        assert pager.page.next_link_name == "nextLink"

    def test_deterministic(self, make_method, widget_list):
        method = make_method("List", OperationKind.PAGINATED, widget_list)
        factory = WrapperTypeFactory()

        first = factory.build_page_iterator(method)
        second = factory.build_page_iterator(method)
        assert first is not second
        assert first == second

    def test_next_method_disables_preparer(self, make_method, widget_list):
        method = make_method("List", OperationKind.PAGINATED, widget_list, next_method_name="ListNext")

        assert WrapperTypeFactory().build_page_iterator(method).preparer_needed is False

    def test_custom_item_name(self, make_method, widget):
        result = Composite("WidgetBatch", (Property("items", Sequence(widget)),))
        method = make_method("List", OperationKind.PAGINATED, result, item_name="items")

        assert WrapperTypeFactory().build_page_iterator(method).element_type is widget

    def test_requires_paginated(self, make_method, widget_list):
        method = make_method("Create", OperationKind.LONG_RUNNING, widget_list, group="Widgets")

        with pytest.raises(PreconditionError) as exc_info:
            WrapperTypeFactory().build_page_iterator(method)

        assert exc_info.value.method == "Widgets.Create"

    def test_requires_object_body(self, make_method):
        method = make_method("List", OperationKind.PAGINATED, Primitive("string"))

        with pytest.raises(PreconditionError):
            WrapperTypeFactory().build_page_iterator(method)

    def test_requires_sequence_item_property(self, make_method, widget):
        method = make_method("List", OperationKind.PAGINATED, widget)

        with pytest.raises(PreconditionError) as exc_info:
            WrapperTypeFactory().build_page_iterator(method)

        assert "no sequence property 'value'" in str(exc_info.value)


class TestBuildPollingHandle:
    def test_default_name(self, make_method, widget):
        method = make_method("Create", OperationKind.LONG_RUNNING, widget, group="Widgets")

        future = WrapperTypeFactory().build_polling_handle(method, result=widget)

        assert future.name == "WidgetsCreateFuture"
        assert future.list_all is False
        assert future.group == "Widgets"
        assert future.method_name == "Create"
        assert future.result is widget

    def test_name_override_marks_list_all(self, make_method, widget_list):
        method = make_method("ListWidgets", OperationKind.PAGINATED_LONG_RUNNING, widget_list)

        future = WrapperTypeFactory().build_polling_handle(method, name_override="ListWidgetsAllFuture")

        assert future.name == "ListWidgetsAllFuture"
        assert future.list_all is True

    def test_requires_long_running(self, make_method, widget_list):
        method = make_method("List", OperationKind.PAGINATED, widget_list)

        with pytest.raises(PreconditionError):
            WrapperTypeFactory().build_polling_handle(method)

    def test_plain_method_rejected(self, make_method):
        with pytest.raises(PreconditionError):
            WrapperTypeFactory().build_polling_handle(make_method("Get"))
