# どこで: `src/inspector_button/interactive/pyglet_backend.py`。
# 何を: pyglet ウィンドウと、その上で pyimgui を描くためのコンテキスト/renderer をまとめて管理する。
# なぜ: InspectorGUI からウィンドウ生成や IO 同期などの backend 固有処理を切り離すため。

from __future__ import annotations

import time
from typing import Any

DEFAULT_WINDOW_SIZE = (480, 800)
CLEAR_COLOR = (0.12, 0.12, 0.12, 1.0)


def create_inspector_window(
    *,
    size: tuple[int, int] = DEFAULT_WINDOW_SIZE,
    position: tuple[int, int] | None = None,
    caption: str = "Inspector",
) -> Any:
    """サイズ固定のインスペクター用 pyglet ウィンドウを生成する。"""

    import pyglet

    window = pyglet.window.Window(  # type: ignore[abstract]
        width=int(size[0]),
        height=int(size[1]),
        caption=str(caption),
        resizable=False,
        vsync=False,
        config=pyglet.gl.Config(double_buffer=True),  # type: ignore[abstract]
    )
    if position is not None:
        window.set_location(*(int(v) for v in position))
    return window


class ImguiSurface:
    """1 つの pyglet ウィンドウに専用の ImGui コンテキストと renderer を張る。

    ImGui の current context はプロセス全体で 1 つなので、`frame()` のたびに切り替える。
    """

    def __init__(self, window: Any) -> None:
        import imgui  # type: ignore[import-untyped]

        try:
            from imgui.integrations.pyglet import create_renderer  # type: ignore[import-untyped]
        except ImportError as exc:
            raise RuntimeError(f"imgui の pyglet 連携を import できない: {exc}") from exc

        self.window = window
        self._imgui = imgui
        self._context = imgui.create_context()
        imgui.set_current_context(self._context)
        imgui.style_colors_dark()
        self._renderer = create_renderer(window)
        self._last = time.monotonic()
        self.closed = False

    def begin_frame(self) -> Any:
        """コンテキストを切り替えて new_frame し、imgui モジュールを返す。"""

        imgui = self._imgui
        imgui.set_current_context(self._context)
        imgui.new_frame()

        now = time.monotonic()
        io = imgui.get_io()
        io.delta_time = max(now - self._last, 1e-4)
        self._last = now

        # Retina では framebuffer がウィンドウより大きい。
        fb_w, fb_h = self.window.get_framebuffer_size()
        w, h = max(1, self.window.width), max(1, self.window.height)
        io.display_size = (float(w), float(h))
        io.display_fb_scale = (fb_w / w, fb_h / h)
        return imgui

    def end_frame(self) -> None:
        """ImGui の描画データをウィンドウへ流す（flip は pyglet 側）。"""

        import pyglet

        self._imgui.render()
        pyglet.gl.glClearColor(*CLEAR_COLOR)
        self.window.clear()
        self._renderer.render(self._imgui.get_draw_data())

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        shutdown = getattr(self._renderer, "shutdown", None)
        if callable(shutdown):
            shutdown()
        self._imgui.destroy_context(self._context)
        self.window.close()


__all__ = ["ImguiSurface", "create_inspector_window"]
