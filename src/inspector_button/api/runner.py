"""
どこで: `src/inspector_button/api/runner.py`。公開 API のランナー実装。
何を: pyglet + pyimgui のウィンドウで、選択オブジェクトの `@button` メソッドを操作するインスペクターを起動する。
なぜ: ホストエディタ無しでもボタンと引数フォームを実際に触れる経路を用意するため。
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

from inspector_button.core.fold_state import FoldStateStore, JsonFlagStorage
from inspector_button.core.host import EditorHost
from inspector_button.core.runtime_config import runtime_config, set_config_path
from inspector_button.core.scene import Scene
from inspector_button.interactive.gui import InspectorGUI
from inspector_button.interactive.imgui_widgets import ImguiWidgets
from inspector_button.interactive.inspector import ButtonInspector
from inspector_button.interactive.pyglet_backend import ImguiSurface, create_inspector_window
from inspector_button.interactive.window_loop import run_window_loop


def run(
    targets: Sequence[Any],
    *,
    scene: Scene | None = None,
    selection: Callable[[], Sequence[Any]] | None = None,
    is_playing: bool = False,
    config_path: str | Path | None = None,
    fps: float = 30.0,
) -> EditorHost:
    """インスペクターウィンドウを開き、閉じられるまでブロックする。

    Parameters
    ----------
    targets : Sequence[Any]
        最初に選択しておくオブジェクト（複数選択可）。
    scene : Scene or None
        参照ピッカーの候補と未保存フラグを持つシーン。None なら targets から作る。
    selection : Callable[[], Sequence[Any]] or None
        毎フレーム呼ばれ、現在の選択を返す関数。選択が変わるとカタログを作り直す。
    is_playing : bool
        True の場合、ボタン実行後にシーンを未保存にしない。
    config_path : str or Path or None
        明示する config.yaml のパス。
    fps : float
        再描画の目標フレームレート。

    Returns
    -------
    EditorHost
        ウィンドウを閉じた時点のホスト（Undo 履歴と dirty 状態を含む）。
    """

    if config_path is not None:
        set_config_path(config_path)
    cfg = runtime_config()

    if scene is None:
        scene = Scene()
        for t in targets:
            scene.add(t)
    host = EditorHost(scene=scene, is_playing=is_playing)
    fold_store = FoldStateStore(JsonFlagStorage(cfg.prefs_file))

    window = create_inspector_window(size=cfg.window_size, position=cfg.window_position)
    gui = InspectorGUI(ImguiSurface(window))
    inspector = ButtonInspector(
        targets,
        host=host,
        widgets=ImguiWidgets(reference_candidates=host.reference_candidates),
        fold_store=fold_store,
        config=cfg,
    )
    gui.attach(inspector)

    def sync_selection() -> None:
        if selection is None:
            return
        current = list(selection())
        previous = inspector.targets
        if len(current) != len(previous) or any(a is not b for a, b in zip(current, previous)):
            inspector.set_targets(current)

    try:
        run_window_loop(window, gui.draw_frame, fps=fps, on_frame_start=sync_selection)
    finally:
        gui.close()
    return host


__all__ = ["run"]
