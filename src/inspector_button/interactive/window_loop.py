# どこで: `src/inspector_button/interactive/window_loop.py`。
# 何を: インスペクターのウィンドウを pyglet の app loop で一定間隔に再描画する。
# なぜ: イベント配送は pyglet に任せ、選択の同期と描画だけをフレームごとに差し込むため。

from __future__ import annotations

from collections.abc import Callable
from typing import Any


def run_window_loop(
    window: Any,
    draw_frame: Callable[[], None],
    *,
    fps: float,
    on_frame_start: Callable[[], None] | None = None,
) -> None:
    """window が閉じられるまでブロックして再描画を続ける。

    Parameters
    ----------
    window : pyglet.window.Window
        描画先。閉じると app loop を抜ける。
    draw_frame : Callable[[], None]
        flip しない描画処理（pyglet の on_draw に登録する）。
    fps : float
        目標フレームレート。`<=0` なら毎 tick 描画する。
    on_frame_start : Callable[[], None] | None
        描画前に毎回呼ぶ処理（選択変更の反映など）。
    """

    import pyglet

    window.push_handlers(on_draw=draw_frame, on_close=lambda: pyglet.app.exit())

    def tick(dt: float) -> None:
        if on_frame_start is not None:
            on_frame_start()
        if window in pyglet.app.windows:
            window.draw(dt)

    if fps > 0:
        pyglet.clock.schedule_interval(tick, 1.0 / float(fps))
    else:
        pyglet.clock.schedule(tick)
    try:
        pyglet.app.run(interval=None)
    finally:
        pyglet.clock.unschedule(tick)


__all__ = ["run_window_loop"]
