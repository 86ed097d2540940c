import pytest

from augment_tools.model.types import (
    Composite,
    Page,
    PageIterator,
    PollingHandle,
    Primitive,
    Property,
    Sequence,
    fingerprint,
    type_name,
)


def _pager(element, preparer_needed=True, name="WidgetIterator"):
    page = Page(name="WidgetPage", element_type=element, preparer_needed=preparer_needed)
    return PageIterator(name=name, element_type=element, preparer_needed=preparer_needed, page=page)


class TestFingerprint:
    def test_primitive(self):
        assert fingerprint(Primitive("string")) == ("primitive", "string")

    def test_sequence_is_recursive(self):
        assert fingerprint(Sequence(Primitive("integer"))) == ("sequence", ("primitive", "integer"))

    def test_composite_includes_properties(self, widget):
        other = Composite("Widget", (Property("id", Primitive("string")),))
        assert fingerprint(widget) != fingerprint(other)
        assert fingerprint(widget) == fingerprint(
            Composite("Widget", (Property("id", Primitive("string")), Property("size", Primitive("integer"))))
        )

    def test_polling_handle_ignores_origin_and_result(self):
        a = PollingHandle("CreateFuture", group="Widgets", method_name="Create", result=Primitive("string"))
        b = PollingHandle("CreateFuture", group="Gadgets", method_name="Other")
        assert fingerprint(a) == fingerprint(b)

    def test_polling_handle_list_all_marker(self):
        primary = PollingHandle("ListAllFuture")
        list_all = PollingHandle("ListAllFuture", list_all=True)
        assert fingerprint(primary) != fingerprint(list_all)

    def test_page_iterator_keyed_by_element(self, widget):
        assert fingerprint(_pager(widget, name="A")) == fingerprint(_pager(widget, name="B"))
        assert fingerprint(_pager(widget)) != fingerprint(_pager(Primitive("string")))

    def test_page_iterator_preparer_flag(self, widget):
        assert fingerprint(_pager(widget, True)) != fingerprint(_pager(widget, False))

    def test_page_and_iterator_differ(self, widget):
        pager = _pager(widget)
        assert fingerprint(pager) != fingerprint(pager.page)

    def test_not_a_model_type(self):
        with pytest.raises(TypeError):
            fingerprint("Widget")


class TestDataclassEquality:
    def test_equality_follows_identifying_fields(self, widget):
        assert _pager(widget, name="A") == _pager(widget, name="B")
        assert PollingHandle("F", group="x") == PollingHandle("F", group="y")
        assert hash(PollingHandle("F", result=widget)) == hash(PollingHandle("F"))


class TestTypeName:
    def test_names(self, widget):
        assert type_name(None) == "none"
        assert type_name(Primitive("string")) == "string"
        assert type_name(Sequence(widget)) == "[Widget]"
        assert type_name(widget) == "Widget"
        assert type_name(PollingHandle("CreateFuture")) == "CreateFuture"
        pager = _pager(widget)
        assert type_name(pager) == "WidgetIterator"
        assert type_name(pager.page) == "WidgetPage"
