# どこで: `src/inspector_button/core/type_support.py`。
# 何を: 型注釈を「編集方法」の閉じた分類（TypeClass）へ写す純粋関数を提供する。
# なぜ: 対応可否の判定とウィジェット分岐を同じ分類結果から導き、両者の食い違いを防ぐため。

from __future__ import annotations

import dataclasses
import enum
import inspect
import sys
import types
import typing
from dataclasses import dataclass
from typing import Any, Union

from .scene import SceneObject
from .value_types import (
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

SERIALIZE_METADATA_KEY = "serialize"

PRIMITIVE_KINDS: dict[type, str] = {
    int: "int",
    float: "float",
    bool: "bool",
    str: "str",
}

VALUE_TYPE_KINDS: dict[type, str] = {
    Vector2: "vector2",
    Vector3: "vector3",
    Vector4: "vector4",
    Vector2Int: "vector2int",
    Vector3Int: "vector3int",
    Color: "color",
    Rect: "rect",
    Bounds: "bounds",
    LayerMask: "layer_mask",
}


@dataclass(frozen=True, slots=True)
class Primitive:
    """int / float / bool / str。"""

    kind: str
    python_type: type


@dataclass(frozen=True, slots=True)
class VectorOrStruct:
    """専用ウィジェットを持つ組み込み値型。"""

    kind: str
    python_type: type


@dataclass(frozen=True, slots=True)
class EnumType:
    """Enum（flags=True なら enum.Flag）。"""

    enum_type: type[enum.Enum]
    flags: bool


@dataclass(frozen=True, slots=True)
class ObjectReference:
    """SceneObject 派生への参照。"""

    base: type[SceneObject]


@dataclass(frozen=True, slots=True)
class SequenceType:
    """`list[T]`（可変長リスト）または `tuple[T, ...]`（配列）。"""

    container: type
    element: Any
    element_class: TypeClass


@dataclass(frozen=True, slots=True)
class CompositeField:
    """PlainComposite の 1 フィールド。editable=False のフィールドは描画しない。"""

    name: str
    annotation: Any
    type_class: TypeClass
    editable: bool


@dataclass(frozen=True, slots=True)
class PlainComposite:
    """フィールドへ再帰して編集するユーザー定義 dataclass。"""

    composite_type: type
    fields: tuple[CompositeField, ...]


@dataclass(frozen=True, slots=True)
class Unsupported:
    """編集できない型。"""

    annotation: Any


TypeClass = Union[
    Primitive,
    VectorOrStruct,
    EnumType,
    ObjectReference,
    SequenceType,
    PlainComposite,
    Unsupported,
]


def serialize_field(**kwargs: Any) -> Any:
    """非公開（`_` 始まり）でも編集対象にする dataclass フィールドを作る。

    `dataclasses.field()` と同じ引数を受け取り、metadata に印を追加する。
    """

    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[SERIALIZE_METADATA_KEY] = True
    return dataclasses.field(metadata=metadata, **kwargs)


def strip_optional(tp: Any) -> Any:
    """`T | None` / `Optional[T]` を T へ剥がす。他の Union はそのまま返す。"""

    origin = typing.get_origin(tp)
    if origin is Union or origin is types.UnionType:
        args = [a for a in typing.get_args(tp) if a is not type(None)]
        if len(args) == 1 and len(args) != len(typing.get_args(tp)):
            return args[0]
    return tp


def resolve_annotation(
    annotation: Any,
    globalns: dict[str, Any],
    localns: dict[str, Any] | None = None,
) -> Any:
    """文字列（前方参照）の注釈を 1 つだけ評価して返す。評価できなければ元の注釈を返す。

    `typing.get_type_hints` は 1 つでも解決できない名前があると全体が失敗するため、
    その場合のフォールバックとして注釈ごとに使う。
    """

    if isinstance(annotation, typing.ForwardRef):
        annotation = annotation.__forward_arg__
    if not isinstance(annotation, str):
        return annotation
    try:
        return eval(annotation, globalns, localns)
    except Exception:
        return annotation


def _field_type_hints(cls: type) -> dict[str, Any]:
    """dataclass の型ヒントを解決して返す。一括で解決できなければフィールドごとに解決する。"""

    try:
        return typing.get_type_hints(cls)
    except Exception:
        module = sys.modules.get(cls.__module__)
        globalns = dict(vars(module)) if module is not None else {}
        localns = dict(vars(cls))
        return {f.name: resolve_annotation(f.type, globalns, localns) for f in dataclasses.fields(cls)}


def _is_field_editable(f: dataclasses.Field) -> bool:
    return not f.name.startswith("_") or bool(f.metadata.get(SERIALIZE_METADATA_KEY, False))


def _classify_sequence(tp: Any, active: frozenset[type]) -> TypeClass | None:
    origin = typing.get_origin(tp)
    args = typing.get_args(tp)
    if origin is list:
        if len(args) != 1:
            return Unsupported(tp)
        element = args[0]
    elif origin is tuple:
        if len(args) != 2 or args[1] is not Ellipsis:
            return Unsupported(tp)
        element = args[0]
    else:
        return None

    element_class = _classify(element, active)
    if isinstance(element_class, Unsupported):
        return Unsupported(tp)
    return SequenceType(container=origin, element=element, element_class=element_class)


def _classify_composite(tp: type, active: frozenset[type]) -> TypeClass:
    if tp in active:
        # 自己参照する dataclass は再帰させず、その位置を編集不可として扱う。
        return Unsupported(tp)
    nested = active | {tp}
    hints = _field_type_hints(tp)
    fields: list[CompositeField] = []
    for f in dataclasses.fields(tp):
        annotation = hints.get(f.name, f.type)
        fields.append(
            CompositeField(
                name=f.name,
                annotation=annotation,
                type_class=_classify(annotation, nested),
                editable=_is_field_editable(f),
            )
        )
    return PlainComposite(composite_type=tp, fields=tuple(fields))


def _classify(tp: Any, active: frozenset[type]) -> TypeClass:
    tp = strip_optional(tp)
    if tp is inspect.Parameter.empty or tp is Any or isinstance(tp, (str, typing.ForwardRef)):
        return Unsupported(tp)

    plain_class = isinstance(tp, type) and typing.get_origin(tp) is None
    if plain_class:
        kind = PRIMITIVE_KINDS.get(tp)
        if kind is not None:
            return Primitive(kind=kind, python_type=tp)
        kind = VALUE_TYPE_KINDS.get(tp)
        if kind is not None:
            return VectorOrStruct(kind=kind, python_type=tp)
        if issubclass(tp, enum.Enum):
            return EnumType(enum_type=tp, flags=issubclass(tp, enum.Flag))
        if issubclass(tp, SceneObject):
            return ObjectReference(base=tp)

    sequence = _classify_sequence(tp, active)
    if sequence is not None:
        return sequence

    if plain_class and dataclasses.is_dataclass(tp):
        return _classify_composite(tp, active)

    return Unsupported(tp)


def classify(tp: Any) -> TypeClass:
    """型注釈 tp を TypeClass に分類して返す（全域・決定的）。

    優先順位（先勝ち）:
    1) プリミティブ
    2) 組み込み値型（ベクトル/色/矩形など）
    3) Enum（Flag は flags=True）
    4) SceneObject 参照
    5) `list[T]` / `tuple[T, ...]`（要素型が非対応なら Unsupported）
    6) dataclass（PlainComposite）
    7) それ以外は Unsupported
    """

    return _classify(tp, frozenset())


def is_supported(tp: Any) -> bool:
    """tp が値エディタで編集できる型なら True を返す。"""

    return not isinstance(classify(tp), Unsupported)


def is_value_semantic(type_class: TypeClass) -> bool:
    """既定値として「ゼロ値インスタンス」を持つ分類なら True を返す。

    str / 参照 / シーケンス / dataclass / 非対応型は参照セマンティクス扱いで既定値 None。
    """

    if isinstance(type_class, Primitive):
        return type_class.kind != "str"
    return isinstance(type_class, (VectorOrStruct, EnumType))


def type_display_name(tp: Any) -> str:
    """注釈を UI / ログ用の短い名前にして返す。"""

    if tp is inspect.Parameter.empty:
        return "<missing annotation>"
    if isinstance(tp, str):
        return tp
    if isinstance(tp, typing.ForwardRef):
        return tp.__forward_arg__
    if typing.get_origin(tp) is not None:
        return repr(tp).replace("typing.", "")
    name = getattr(tp, "__name__", None)
    if name:
        return str(name)
    return repr(tp)


__all__ = [
    "CompositeField",
    "EnumType",
    "ObjectReference",
    "PlainComposite",
    "Primitive",
    "SequenceType",
    "TypeClass",
    "Unsupported",
    "VectorOrStruct",
    "classify",
    "is_supported",
    "is_value_semantic",
    "serialize_field",
    "resolve_annotation",
    "strip_optional",
    "type_display_name",
]
