import pytest

from inspector_button.core.button import ButtonAttribute, button, get_button_attribute


def test_button_without_arguments_marks_function() -> None:
    @button
    def reset() -> None:
        return None

    assert get_button_attribute(reset) == ButtonAttribute(name=None)


def test_button_accepts_positional_and_keyword_name() -> None:
    @button("Say Hello")
    def a() -> None:
        return None

    @button(name="Say Bye")
    def b() -> None:
        return None

    assert get_button_attribute(a).name == "Say Hello"
    assert get_button_attribute(b).name == "Say Bye"


def test_button_works_above_and_below_staticmethod() -> None:
    class Tools:
        @button
        @staticmethod
        def above() -> int:
            return 1

        @staticmethod
        @button("Below")
        def below() -> int:
            return 2

    assert get_button_attribute(vars(Tools)["above"]) is not None
    assert get_button_attribute(vars(Tools)["below"]).name == "Below"
    assert Tools.above() == 1
    assert Tools.below() == 2


def test_button_rejects_non_callables() -> None:
    with pytest.raises(TypeError):
        button(42)


def test_button_rejects_duplicate_names() -> None:
    with pytest.raises(ValueError):
        button("A", name="B")


def test_unmarked_function_has_no_attribute() -> None:
    def plain() -> None:
        return None

    assert get_button_attribute(plain) is None
    assert get_button_attribute("not a function") is None
