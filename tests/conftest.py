"""GUI 無しで値エディタ / インスペクターを駆動するためのテスト用フィクスチャ。"""

from __future__ import annotations

import logging
from typing import Any

import pytest


class ScriptedWidgets:
    """ValueWidgets の台本付きフェイク。

    - `edits` にラベル（または `id/.../label` のパス）があれば、その値を「編集結果」として返す
    - 無ければ入力値をそのまま返す（changed=False）
    - 描画呼び出しとインデント深さを記録する
    """

    def __init__(self) -> None:
        self.edits: dict[str, Any] = {}
        self.pressed: set[str] = set()
        self.foldout_clicks: dict[str, bool] = {}
        self.calls: list[tuple[str, str, Any, int]] = []
        self.labels: list[tuple[str, str, int]] = []
        self.help_boxes: list[tuple[str, str]] = []
        self.headers: list[str] = []
        self.buttons: list[str] = []
        self.foldouts: list[tuple[str, bool]] = []
        self.depth = 0
        self.max_depth = 0
        self._ids: list[str] = []

    def _path(self, label: str) -> str:
        return "/".join([*self._ids, label])

    def _field(self, widget: str, label: str, value: Any) -> tuple[bool, Any]:
        self.calls.append((widget, label, value, self.depth))
        path = self._path(label)
        if path in self.edits:
            return True, self.edits[path]
        if label in self.edits:
            return True, self.edits[label]
        return False, value

    def int_field(self, label, value):
        return self._field("int_field", label, value)

    def float_field(self, label, value):
        return self._field("float_field", label, value)

    def toggle(self, label, value):
        return self._field("toggle", label, value)

    def text_field(self, label, value):
        return self._field("text_field", label, value)

    def vector2_field(self, label, value):
        return self._field("vector2_field", label, value)

    def vector3_field(self, label, value):
        return self._field("vector3_field", label, value)

    def vector4_field(self, label, value):
        return self._field("vector4_field", label, value)

    def vector2int_field(self, label, value):
        return self._field("vector2int_field", label, value)

    def vector3int_field(self, label, value):
        return self._field("vector3int_field", label, value)

    def color_field(self, label, value):
        return self._field("color_field", label, value)

    def rect_field(self, label, value):
        return self._field("rect_field", label, value)

    def bounds_field(self, label, value):
        return self._field("bounds_field", label, value)

    def layer_field(self, label, value):
        return self._field("layer_field", label, value)

    def enum_popup(self, label, value):
        return self._field("enum_popup", label, value)

    def enum_flags_field(self, label, value):
        return self._field("enum_flags_field", label, value)

    def object_field(self, label, value, base):
        return self._field("object_field", label, value)

    def label_field(self, label, text):
        self.labels.append((label, text, self.depth))

    def help_box(self, message, level="info"):
        self.help_boxes.append((message, level))

    def header(self, text):
        self.headers.append(text)

    def space(self):
        pass

    def foldout(self, is_open, label):
        self.foldouts.append((label, is_open))
        return self.foldout_clicks.get(label, is_open)

    def button(self, label):
        self.buttons.append(label)
        return label in self.pressed

    def indent(self):
        self.depth += 1
        self.max_depth = max(self.max_depth, self.depth)

    def unindent(self):
        self.depth -= 1

    def push_id(self, key):
        self._ids.append(str(key))

    def pop_id(self):
        self._ids.pop()

    def widgets_called(self) -> list[str]:
        return [c[0] for c in self.calls]


class MemoryFlagStorage:
    """dict に保存する FlagStorage。"""

    def __init__(self, initial: dict[str, bool] | None = None) -> None:
        self.flags: dict[str, bool] = dict(initial or {})
        self.writes: list[tuple[str, bool]] = []
        self.reads: list[str] = []

    def get_bool(self, key: str, default: bool = False) -> bool:
        self.reads.append(key)
        return self.flags.get(key, default)

    def set_bool(self, key: str, value: bool) -> None:
        self.flags[key] = value
        self.writes.append((key, value))


@pytest.fixture
def widgets() -> ScriptedWidgets:
    return ScriptedWidgets()


@pytest.fixture
def flag_storage() -> MemoryFlagStorage:
    return MemoryFlagStorage()


@pytest.fixture
def capture_button_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    caplog.set_level(logging.WARNING, logger="inspector_button")
    return caplog
