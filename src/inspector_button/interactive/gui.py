# どこで: `src/inspector_button/interactive/gui.py`。
# 何を: ButtonInspector を 1 枚の全面 ImGui ウィンドウとして描く InspectorGUI。
# なぜ: 選択表示やウィンドウ装飾をインスペクター本体（描画ロジック）から分けるため。

from __future__ import annotations

from typing import Any

from .inspector import ButtonInspector
from .pyglet_backend import ImguiSurface


def _selection_caption(targets: list[Any]) -> str:
    """選択対象の見出し（"Name (Type)" / 複数選択なら残り件数つき）。"""

    if not targets:
        return "(nothing selected)"
    first = targets[0]
    type_name = type(first).__name__
    name = getattr(first, "name", type_name)
    if len(targets) == 1:
        return f"{name} ({type_name})"
    return f"{name} (+{len(targets) - 1} more, {type_name})"


class InspectorGUI:
    """ImguiSurface の上で ButtonInspector を毎フレーム描画する。

    ImguiWidgets は current context を使うので、inspector は surface 生成後に作って attach する。
    """

    def __init__(self, surface: ImguiSurface, *, title: str = "Inspector") -> None:
        self._surface = surface
        self._title = str(title)
        self._inspector: ButtonInspector | None = None

    def attach(self, inspector: ButtonInspector) -> None:
        self._inspector = inspector

    def draw_frame(self) -> None:
        """1 フレーム分を描画する。ボタンが押されていればこの中で実行まで終わる。"""

        surface = self._surface
        if surface.closed:
            return
        imgui = surface.begin_frame()
        imgui.set_next_window_position(0, 0)
        imgui.set_next_window_size(surface.window.width, surface.window.height)
        imgui.begin(
            self._title,
            flags=imgui.WINDOW_NO_RESIZE | imgui.WINDOW_NO_COLLAPSE | imgui.WINDOW_NO_TITLE_BAR,
        )
        try:
            if self._inspector is not None:
                imgui.text(_selection_caption(self._inspector.targets))
                self._inspector.on_inspector_gui()
        finally:
            imgui.end()
        surface.end_frame()

    def close(self) -> None:
        """surface を破棄する（二重 close は無視）。"""

        self._surface.close()


__all__ = ["InspectorGUI"]
