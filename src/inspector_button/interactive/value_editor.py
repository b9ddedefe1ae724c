# どこで: `src/inspector_button/interactive/value_editor.py`。
# 何を: 型注釈と現在値から編集ウィジェットを描き、編集後の値を返す再帰エンジンを提供する。
# なぜ: 分類（type_support）ごとに描画処理を 1 つずつ対応付け、対応判定と描画の食い違いを防ぐため。

from __future__ import annotations

import copy
from collections.abc import Callable
from typing import Any

from inspector_button.core.introspection import TypeIntrospector
from inspector_button.core.nicify import nicify_variable_name
from inspector_button.core.type_support import (
    EnumType,
    ObjectReference,
    PlainComposite,
    Primitive,
    SequenceType,
    TypeClass,
    Unsupported,
    VectorOrStruct,
    classify,
    is_value_semantic,
    type_display_name,
)
from inspector_button.core.value_types import (
    Bounds,
    Color,
    LayerMask,
    Rect,
    Vector2,
    Vector2Int,
    Vector3,
    Vector3Int,
    Vector4,
)

from .widgets import ValueWidgets, id_scope, indented

Handler = Callable[[ValueWidgets, str, Any, Any, Any, TypeIntrospector], Any]

# kind → (ウィジェット関数名, 値が None のときに表示する既定値)
_LEAF_WIDGETS: dict[str, tuple[str, Callable[[], Any]]] = {
    "int": ("int_field", lambda: 0),
    "float": ("float_field", lambda: 0.0),
    "bool": ("toggle", lambda: False),
    "str": ("text_field", lambda: ""),
    "vector2": ("vector2_field", Vector2),
    "vector3": ("vector3_field", Vector3),
    "vector4": ("vector4_field", Vector4),
    "vector2int": ("vector2int_field", Vector2Int),
    "vector3int": ("vector3int_field", Vector3Int),
    "color": ("color_field", Color.white),
    "rect": ("rect_field", Rect),
    "bounds": ("bounds_field", lambda: Bounds(Vector3(), Vector3(1.0, 1.0, 1.0))),
    "layer_mask": ("layer_field", LayerMask),
}


def unsupported_annotation_text(tp: Any) -> str:
    """非対応型の読み取り専用表示テキストを返す。"""

    return f"(Unsupported type: {type_display_name(tp)})"


def read_only_text(value: Any) -> str:
    """編集対象外（非公開）フィールドの読み取り専用表示テキストを返す。"""

    return f"{value!r} (read-only)"


def _values_equal(old: Any, new: Any) -> bool:
    return old is new or bool(old == new)


def _edit_leaf(widgets: ValueWidgets, label: str, kind: str, value: Any) -> Any:
    method_name, fallback = _LEAF_WIDGETS[kind]
    shown = fallback() if value is None else value
    changed, new_value = getattr(widgets, method_name)(label, shown)
    return new_value if changed else value


def _edit_primitive(widgets, label, tp, type_class: Primitive, value, introspector) -> Any:
    return _edit_leaf(widgets, label, type_class.kind, value)


def _edit_vector_or_struct(widgets, label, tp, type_class: VectorOrStruct, value, introspector) -> Any:
    return _edit_leaf(widgets, label, type_class.kind, value)


def _edit_enum(widgets, label, tp, type_class: EnumType, value, introspector) -> Any:
    shown = value
    if shown is None:
        outcome = introspector.default_construct(type_class.enum_type)
        if not outcome.ok:
            widgets.label_field(label, f"({type_class.enum_type.__name__} has no members)")
            return value
        shown = outcome.value
    if type_class.flags:
        changed, new_value = widgets.enum_flags_field(label, shown)
    else:
        changed, new_value = widgets.enum_popup(label, shown)
    return new_value if changed else value


def _edit_object_reference(widgets, label, tp, type_class: ObjectReference, value, introspector) -> Any:
    changed, new_value = widgets.object_field(label, value, type_class.base)
    return new_value if changed else value


def _new_element(type_class: SequenceType, introspector: TypeIntrospector) -> Any:
    if not is_value_semantic(type_class.element_class):
        return None
    outcome = introspector.default_construct(type_class.element)
    return outcome.value if outcome.ok else None


def _edit_sequence(widgets, label, tp, type_class: SequenceType, value, introspector) -> Any:
    original = list(value) if value is not None else []
    items = list(original)

    changed_size, size = widgets.int_field(f"{label} Size", len(items))
    if changed_size:
        size = max(0, int(size))
        if size < len(items):
            del items[size:]
        while len(items) < size:
            items.append(_new_element(type_class, introspector))

    with indented(widgets):
        for i, old in enumerate(items):
            with id_scope(widgets, str(i)):
                new = _draw(
                    widgets,
                    f"Element {i}",
                    type_class.element,
                    type_class.element_class,
                    old,
                    introspector,
                )
            if not _values_equal(old, new):
                items[i] = new

    if value is not None and len(items) == len(original):
        if all(a is b for a, b in zip(items, original)):
            return value
    elif value is None and not items:
        return value
    return type_class.container(items)


def _write_field(instance: Any, name: str, new_value: Any) -> Any:
    """instance のフィールドを書き換える。frozen dataclass は複製してから書く。"""

    params = getattr(type(instance), "__dataclass_params__", None)
    if params is not None and params.frozen:
        replaced = copy.copy(instance)
        object.__setattr__(replaced, name, new_value)
        return replaced
    setattr(instance, name, new_value)
    return instance


def _edit_composite(widgets, label, tp, type_class: PlainComposite, value, introspector) -> Any:
    type_name = type_class.composite_type.__name__
    widgets.label_field(label, f"({type_name})")
    with indented(widgets):
        instance = value
        if instance is None:
            outcome = introspector.default_construct(type_class.composite_type)
            if not outcome.ok:
                widgets.help_box(
                    f"Cannot create instance of {type_name}. "
                    "Ensure it has a parameterless constructor.",
                    "warning",
                )
                return value
            instance = outcome.value

        for f in type_class.fields:
            field_label = nicify_variable_name(f.name)
            if not f.editable:
                widgets.label_field(field_label, read_only_text(getattr(instance, f.name, None)))
                continue
            if isinstance(f.type_class, Unsupported):
                widgets.label_field(field_label, unsupported_annotation_text(f.annotation))
                continue
            old = getattr(instance, f.name, None)
            with id_scope(widgets, f.name):
                new = _draw(widgets, field_label, f.annotation, f.type_class, old, introspector)
            if not _values_equal(old, new):
                instance = _write_field(instance, f.name, new)
    return instance


def _edit_unsupported(widgets, label, tp, type_class: Unsupported, value, introspector) -> Any:
    widgets.label_field(label, unsupported_annotation_text(tp))
    return value


_HANDLERS: dict[type, Handler] = {
    Primitive: _edit_primitive,
    VectorOrStruct: _edit_vector_or_struct,
    EnumType: _edit_enum,
    ObjectReference: _edit_object_reference,
    SequenceType: _edit_sequence,
    PlainComposite: _edit_composite,
    Unsupported: _edit_unsupported,
}


def _draw(
    widgets: ValueWidgets,
    label: str,
    tp: Any,
    type_class: TypeClass,
    value: Any,
    introspector: TypeIntrospector,
) -> Any:
    handler = _HANDLERS[type(type_class)]
    return handler(widgets, label, tp, type_class, value, introspector)


def draw_and_edit(
    widgets: ValueWidgets,
    label: str,
    tp: Any,
    value: Any,
    *,
    introspector: TypeIntrospector | None = None,
) -> Any:
    """tp 型の値 value を編集するウィジェットを描画し、編集後の値を返す。

    Parameters
    ----------
    widgets : ValueWidgets
        描画プリミティブ。
    label : str
        表示ラベル。
    tp : Any
        静的な型注釈（`int`, `list[Vector3]`, dataclass など）。
    value : Any
        現在値。None 可。
    introspector : TypeIntrospector or None, optional
        既定インスタンス生成に使う実装。

    Returns
    -------
    Any
        編集後の値。変更が無ければ value そのもの（同一オブジェクト）。

    Notes
    -----
    非対応型は読み取り専用の注記を描き、value をそのまま返す（例外は送出しない）。
    """

    intro = introspector if introspector is not None else TypeIntrospector()
    return _draw(widgets, label, tp, classify(tp), value, intro)


def supported_type_classes() -> tuple[type, ...]:
    """描画ハンドラを持つ TypeClass 変種の一覧（Unsupported を除く）。"""

    return tuple(t for t in _HANDLERS if t is not Unsupported)


__all__ = [
    "draw_and_edit",
    "read_only_text",
    "supported_type_classes",
    "unsupported_annotation_text",
]
