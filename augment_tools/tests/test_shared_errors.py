from augment_tools.shared.errors import (
    AugmentError,
    DescriptionError,
    NotFoundError,
    PreconditionError,
)


class TestAugmentError:
    def test_init_no_method(self):
        error = AugmentError("test message")
        assert str(error) == "test message"
        assert error.method is None

    def test_init_with_method(self):
        error = AugmentError("test message", "Widgets.List")
        assert str(error) == "[Widgets.List] test message"
        assert error.method == "Widgets.List"


class TestPreconditionError:
    def test_is_augment_error(self):
        error = PreconditionError("requires a paginated operation", "Widgets.Get")
        assert isinstance(error, AugmentError)
        assert str(error) == "[Widgets.Get] requires a paginated operation"


class TestNotFoundError:
    def test_init(self):
        error = NotFoundError("WidgetIterator")
        assert str(error) == "No registered type equal to 'WidgetIterator'"
        assert error.type_name == "WidgetIterator"
        assert error.method is None

    def test_init_with_method(self):
        error = NotFoundError("WidgetIterator", "Widgets.List")
        assert str(error) == "[Widgets.List] No registered type equal to 'WidgetIterator'"


class TestDescriptionError:
    def test_init_no_source(self):
        error = DescriptionError("Unknown type 'Gadget'")
        assert str(error) == "Unknown type 'Gadget'"
        assert error.source is None

    def test_init_with_source(self):
        error = DescriptionError("Unknown type 'Gadget'", "widgets.yaml")
        assert str(error) == "widgets.yaml: Unknown type 'Gadget'"
        assert error.source == "widgets.yaml"

    def test_init_with_source_and_method(self):
        error = DescriptionError("Duplicate method", "widgets.yaml", "Widgets.List")
        assert str(error) == "[Widgets.List] widgets.yaml: Duplicate method"
        assert error.method == "Widgets.List"
