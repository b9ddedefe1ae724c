import enum

from inspector_button.core.scene import Component
from inspector_button.core.type_support import PlainComposite, Unsupported
from inspector_button.core.value_types import Color, LayerMask, Vector3
from inspector_button.interactive.value_editor import draw_and_edit, supported_type_classes


class Mode(enum.Enum):
    WALK = 1
    RUN = 2


class Layers(enum.Flag):
    GROUND = 1
    WATER = 2


class Target(Component):
    pass


def test_unchanged_primitive_returns_same_value(widgets) -> None:
    assert draw_and_edit(widgets, "Count", int, 7) == 7
    assert widgets.calls == [("int_field", "Count", 7, 0)]


def test_edited_primitive_returns_new_value(widgets) -> None:
    widgets.edits["Speed"] = 2.5

    assert draw_and_edit(widgets, "Speed", float, 1.0) == 2.5


def test_none_is_shown_as_zero_but_kept_until_edited(widgets) -> None:
    assert draw_and_edit(widgets, "Count", int, None) is None
    assert widgets.calls[-1][2] == 0

    assert draw_and_edit(widgets, "Name", str, None) is None
    assert widgets.calls[-1][2] == ""


def test_value_types_use_dedicated_widgets(widgets) -> None:
    widgets.edits["Pos"] = Vector3(1.0, 2.0, 3.0)

    assert draw_and_edit(widgets, "Pos", Vector3, Vector3()) == Vector3(1.0, 2.0, 3.0)
    assert draw_and_edit(widgets, "Tint", Color, None) is None
    assert draw_and_edit(widgets, "Layer", LayerMask, LayerMask(3)) == LayerMask(3)
    assert widgets.widgets_called() == ["vector3_field", "color_field", "layer_field"]
    # 色の未設定値は白で表示する。
    assert widgets.calls[1][2] == Color.white()


def test_enum_and_flags(widgets) -> None:
    widgets.edits["Mode"] = Mode.RUN

    assert draw_and_edit(widgets, "Mode", Mode, Mode.WALK) is Mode.RUN
    assert draw_and_edit(widgets, "Mask", Layers, None) is None
    assert widgets.widgets_called() == ["enum_popup", "enum_flags_field"]
    assert widgets.calls[1][2] == Layers(0)


def test_object_reference(widgets) -> None:
    target = Target("t")
    widgets.edits["Target"] = target

    assert draw_and_edit(widgets, "Target", Target, None) is target
    assert widgets.widgets_called() == ["object_field"]


def test_unsupported_type_is_read_only(widgets) -> None:
    value = {"a": 1}

    assert draw_and_edit(widgets, "Table", dict, value) is value
    assert widgets.calls == []
    assert widgets.labels == [("Table", "(Unsupported type: dict)", 0)]


def test_missing_annotation_is_read_only(widgets) -> None:
    import inspect

    assert draw_and_edit(widgets, "X", inspect.Parameter.empty, 3) == 3
    assert widgets.labels == [("X", "(Unsupported type: <missing annotation>)", 0)]


def test_every_classification_has_a_handler() -> None:
    handled = supported_type_classes()

    assert Unsupported not in handled
    assert PlainComposite in handled
    assert len(handled) == 6
