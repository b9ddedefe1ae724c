# どこで: `src/inspector_button/interactive/__init__.py`。
# 何を: インスペクター GUI の公開 API を集約する。
# なぜ: 実装を責務ごとに分割しつつ、利用側の import パスを安定させるため。

from __future__ import annotations

from .inspector import ButtonInspector, applies_to
from .value_editor import draw_and_edit
from .widgets import ValueWidgets, id_scope, indented

__all__ = [
    "ButtonInspector",
    "ValueWidgets",
    "applies_to",
    "draw_and_edit",
    "id_scope",
    "indented",
]
