import pytest

from augment_tools.shared.naming import (
    future_type_name,
    iterator_type_name,
    page_type_name,
    qualified_method_name,
    to_pascal_case,
)


class TestToPascalCase:
    @pytest.mark.parametrize(
        "input_str,expected",
        [
            ("hello_world", "HelloWorld"),
            ("hello-world", "HelloWorld"),
            ("helloWorld", "HelloWorld"),
            ("HelloWorld", "HelloWorld"),
            ("widgets", "Widgets"),
            ("WidgetsListAll", "WidgetsListAll"),
            ("[Widget]", "Widget"),
            ("date-time", "DateTime"),
            ("", ""),
        ],
    )
    def test_to_pascal_case(self, input_str, expected):
        assert to_pascal_case(input_str) == expected

    def test_to_pascal_case_caching(self):
        result1 = to_pascal_case("list_widgets")
        result2 = to_pascal_case("list_widgets")
        assert result1 == result2 == "ListWidgets"


class TestWrapperNames:
    def test_future_type_name(self):
        assert future_type_name("WidgetsCreate") == "WidgetsCreateFuture"
        assert future_type_name("widgets_create") == "WidgetsCreateFuture"

    def test_future_type_name_list_all(self):
        assert future_type_name("ListWidgetsAll") == "ListWidgetsAllFuture"

    def test_page_and_iterator_names(self):
        assert page_type_name("Widget") == "WidgetPage"
        assert iterator_type_name("Widget") == "WidgetIterator"

    def test_page_name_for_primitive_element(self):
        assert page_type_name("string") == "StringPage"


class TestQualifiedMethodName:
    def test_with_group(self):
        assert qualified_method_name("Widgets", "List") == "Widgets.List"

    def test_without_group(self):
        assert qualified_method_name("", "List") == "List"
