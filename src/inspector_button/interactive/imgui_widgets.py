# どこで: `src/inspector_button/interactive/imgui_widgets.py`。
# 何を: ValueWidgets を pyimgui の値ウィジェットで実装する。
# なぜ: 形状ごとの imgui 呼び出しを 1 箇所に閉じ込め、値エディタとインスペクターを backend 非依存に保つため。

from __future__ import annotations

import enum
from collections.abc import Callable, Sequence
from typing import Any

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

from .widgets import HelpLevel

N_LAYERS = 32

_HELP_COLORS: dict[str, tuple[float, float, float, float]] = {
    "info": (0.75, 0.85, 1.0, 1.0),
    "warning": (1.0, 0.8, 0.25, 1.0),
    "error": (1.0, 0.4, 0.4, 1.0),
}

ReferenceCandidates = Callable[[type], Sequence[Any]]


def _layer_names() -> list[str]:
    return [f"Layer {i}" for i in range(N_LAYERS)]


def _clamp_layer(value: int) -> int:
    return max(0, min(N_LAYERS - 1, int(value)))


class ImguiWidgets:
    """pyimgui による ValueWidgets 実装。

    ImGui の current context が有効なフレーム内（new_frame〜render の間）で使う。

    Parameters
    ----------
    reference_candidates : Callable[[type], Sequence[Any]] or None
        参照ピッカーに並べる候補を base 型から返す関数。シーン内オブジェクトを含めてよい。
    """

    def __init__(self, *, reference_candidates: ReferenceCandidates | None = None) -> None:
        import imgui  # type: ignore[import-untyped]

        self._imgui = imgui
        self._reference_candidates = reference_candidates

    # --- primitives ---

    def int_field(self, label: str, value: int) -> tuple[bool, int]:
        changed, out = self._imgui.input_int(label, int(value))
        return changed, int(out)

    def float_field(self, label: str, value: float) -> tuple[bool, float]:
        changed, out = self._imgui.input_float(label, float(value))
        return changed, float(out)

    def toggle(self, label: str, value: bool) -> tuple[bool, bool]:
        clicked, state = self._imgui.checkbox(label, bool(value))
        return clicked, bool(state)

    def text_field(self, label: str, value: str) -> tuple[bool, str]:
        changed, out = self._imgui.input_text(label, str(value))
        return changed, str(out)

    # --- vectors / structs ---

    def vector2_field(self, label: str, value: Vector2) -> tuple[bool, Vector2]:
        changed, out = self._imgui.input_float2(label, float(value.x), float(value.y))
        return changed, Vector2(float(out[0]), float(out[1]))

    def vector3_field(self, label: str, value: Vector3) -> tuple[bool, Vector3]:
        changed, out = self._imgui.input_float3(
            label, float(value.x), float(value.y), float(value.z)
        )
        return changed, Vector3(float(out[0]), float(out[1]), float(out[2]))

    def vector4_field(self, label: str, value: Vector4) -> tuple[bool, Vector4]:
        changed, out = self._imgui.input_float4(
            label, float(value.x), float(value.y), float(value.z), float(value.w)
        )
        return changed, Vector4(float(out[0]), float(out[1]), float(out[2]), float(out[3]))

    def vector2int_field(self, label: str, value: Vector2Int) -> tuple[bool, Vector2Int]:
        changed, out = self._imgui.input_int2(label, int(value.x), int(value.y))
        return changed, Vector2Int(int(out[0]), int(out[1]))

    def vector3int_field(self, label: str, value: Vector3Int) -> tuple[bool, Vector3Int]:
        changed, out = self._imgui.input_int3(label, int(value.x), int(value.y), int(value.z))
        return changed, Vector3Int(int(out[0]), int(out[1]), int(out[2]))

    def color_field(self, label: str, value: Color) -> tuple[bool, Color]:
        changed, out = self._imgui.color_edit4(
            label, float(value.r), float(value.g), float(value.b), float(value.a)
        )
        return changed, Color(float(out[0]), float(out[1]), float(out[2]), float(out[3]))

    def rect_field(self, label: str, value: Rect) -> tuple[bool, Rect]:
        changed, out = self._imgui.input_float4(
            label,
            float(value.x),
            float(value.y),
            float(value.width),
            float(value.height),
        )
        return changed, Rect(float(out[0]), float(out[1]), float(out[2]), float(out[3]))

    def bounds_field(self, label: str, value: Bounds) -> tuple[bool, Bounds]:
        imgui = self._imgui
        imgui.text(str(label))
        imgui.push_id(str(label))
        try:
            changed_c, center = self.vector3_field("Center", value.center)
            changed_s, size = self.vector3_field("Size", value.size)
        finally:
            imgui.pop_id()
        return changed_c or changed_s, Bounds(center=center, size=size)

    def layer_field(self, label: str, value: LayerMask) -> tuple[bool, LayerMask]:
        current = _clamp_layer(value.value)
        clicked, selected = self._imgui.combo(label, current, _layer_names())
        return clicked, LayerMask(_clamp_layer(selected))

    # --- enums ---

    def enum_popup(self, label: str, value: enum.Enum) -> tuple[bool, enum.Enum]:
        members = list(type(value))
        names = [m.name for m in members]
        current = members.index(value) if value in members else 0
        clicked, selected = self._imgui.combo(label, current, names)
        if not clicked:
            return False, value
        return True, members[int(selected)]

    def enum_flags_field(self, label: str, value: enum.Flag) -> tuple[bool, enum.Flag]:
        imgui = self._imgui
        enum_type = type(value)
        imgui.text(str(label))
        changed_any = False
        out = value
        imgui.push_id(str(label))
        try:
            for member in enum_type:
                if not member.value:
                    continue
                clicked, state = imgui.checkbox(str(member.name), bool(member in out))
                if clicked:
                    changed_any = True
                    out = (out | member) if state else (out & ~member)
                imgui.same_line(0.0, 6.0)
            imgui.new_line()
        finally:
            imgui.pop_id()
        return changed_any, out

    # --- references ---

    def object_field(self, label: str, value: Any, base: type) -> tuple[bool, Any]:
        provider = self._reference_candidates
        candidates = [c for c in (provider(base) if provider is not None else ()) if isinstance(c, base)]
        if value is not None and not any(c is value for c in candidates):
            candidates.insert(0, value)
        names = ["None"] + [f"{getattr(c, 'name', c)} ({type(c).__name__})" for c in candidates]
        current = 0
        for i, c in enumerate(candidates):
            if c is value:
                current = i + 1
                break
        clicked, selected = self._imgui.combo(label, current, names)
        if not clicked or int(selected) == current:
            return False, value
        return True, None if int(selected) == 0 else candidates[int(selected) - 1]

    # --- layout ---

    def label_field(self, label: str, text: str) -> None:
        self._imgui.label_text(str(label), str(text))

    def help_box(self, message: str, level: HelpLevel = "info") -> None:
        r, g, b, a = _HELP_COLORS.get(level, _HELP_COLORS["info"])
        self._imgui.text_colored(str(message), r, g, b, a)

    def header(self, text: str) -> None:
        self._imgui.separator()
        self._imgui.text(str(text))

    def space(self) -> None:
        self._imgui.spacing()

    def foldout(self, is_open: bool, label: str) -> bool:
        imgui = self._imgui
        imgui.set_next_item_open(bool(is_open), imgui.ALWAYS)
        expanded, _visible = imgui.collapsing_header(str(label))
        return bool(expanded)

    def button(self, label: str) -> bool:
        return bool(self._imgui.button(str(label)))

    def indent(self) -> None:
        self._imgui.indent()

    def unindent(self) -> None:
        self._imgui.unindent()

    def push_id(self, key: str) -> None:
        self._imgui.push_id(str(key))

    def pop_id(self) -> None:
        self._imgui.pop_id()


__all__ = ["ImguiWidgets", "N_LAYERS"]
