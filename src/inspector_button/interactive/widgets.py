# どこで: `src/inspector_button/interactive/widgets.py`。
# 何を: 値エディタが使う葉ウィジェットの関数群（ValueWidgets）と、インデント/ID のスコープを定義する。
# なぜ: 型ごとの再帰編集を描画バックエンド（pyimgui）から切り離し、GUI 無しで検証できるようにするため。

from __future__ import annotations

import contextlib
import enum
from collections.abc import Iterator
from typing import Any, Literal, Protocol

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

HelpLevel = Literal["info", "warning", "error"]


class ValueWidgets(Protocol):
    """1 形状につき 1 関数の描画プリミティブ。

    値ウィジェットはいずれも `(label, value)` を受け取り `(changed, value)` を返す。
    """

    def int_field(self, label: str, value: int) -> tuple[bool, int]: ...

    def float_field(self, label: str, value: float) -> tuple[bool, float]: ...

    def toggle(self, label: str, value: bool) -> tuple[bool, bool]: ...

    def text_field(self, label: str, value: str) -> tuple[bool, str]: ...

    def vector2_field(self, label: str, value: Vector2) -> tuple[bool, Vector2]: ...

    def vector3_field(self, label: str, value: Vector3) -> tuple[bool, Vector3]: ...

    def vector4_field(self, label: str, value: Vector4) -> tuple[bool, Vector4]: ...

    def vector2int_field(self, label: str, value: Vector2Int) -> tuple[bool, Vector2Int]: ...

    def vector3int_field(self, label: str, value: Vector3Int) -> tuple[bool, Vector3Int]: ...

    def color_field(self, label: str, value: Color) -> tuple[bool, Color]: ...

    def rect_field(self, label: str, value: Rect) -> tuple[bool, Rect]: ...

    def bounds_field(self, label: str, value: Bounds) -> tuple[bool, Bounds]: ...

    def layer_field(self, label: str, value: LayerMask) -> tuple[bool, LayerMask]: ...

    def enum_popup(self, label: str, value: enum.Enum) -> tuple[bool, enum.Enum]: ...

    def enum_flags_field(self, label: str, value: enum.Flag) -> tuple[bool, enum.Flag]: ...

    def object_field(self, label: str, value: Any, base: type) -> tuple[bool, Any]: ...

    def label_field(self, label: str, text: str) -> None: ...

    def help_box(self, message: str, level: HelpLevel = "info") -> None: ...

    def header(self, text: str) -> None: ...

    def space(self) -> None: ...

    def foldout(self, is_open: bool, label: str) -> bool: ...

    def button(self, label: str) -> bool: ...

    def indent(self) -> None: ...

    def unindent(self) -> None: ...

    def push_id(self, key: str) -> None: ...

    def pop_id(self) -> None: ...


@contextlib.contextmanager
def indented(widgets: ValueWidgets) -> Iterator[None]:
    """インデントを 1 段深くし、途中で抜けても必ず戻す。"""

    widgets.indent()
    try:
        yield
    finally:
        widgets.unindent()


@contextlib.contextmanager
def id_scope(widgets: ValueWidgets, key: str) -> Iterator[None]:
    """同名ラベルの衝突を避けるため、ウィジェット ID の名前空間を 1 つ積む。"""

    widgets.push_id(str(key))
    try:
        yield
    finally:
        widgets.pop_id()


__all__ = ["HelpLevel", "ValueWidgets", "id_scope", "indented"]
