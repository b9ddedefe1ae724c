# どこで: `src/inspector_button/core/host.py`。
# 何を: エディタホストのサービス（Undo 記録 / 変更フラグ / プレイモード / シーン未保存）を提供する。
# なぜ: ボタン実行の副作用（Undo 登録と dirty 管理）を、呼び出し側から注入できる形にするため。

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from typing import Any

from .scene import Scene, SceneObject

_logger = logging.getLogger(__name__)


@dataclass(slots=True)
class UndoRecord:
    """1 つの対象に対する Undo 記録。"""

    target: Any
    label: str
    state: dict[str, Any] | None


class UndoStack:
    """対象オブジェクト単位の状態スナップショットを積む Undo スタック。"""

    def __init__(self) -> None:
        self._records: list[UndoRecord] = []

    def record_object(self, target: Any, label: str) -> None:
        """target の現在状態を label 付きで記録する（実行前に呼ぶ）。

        状態を複製できない場合（ロックやファイルハンドルを持つ等）は警告を出し、
        状態なしの記録を積む。この場合 undo しても対象は復元されない。
        """

        attrs = getattr(target, "__dict__", None)
        state: dict[str, Any] | None = None
        if attrs is not None:
            try:
                state = copy.deepcopy(dict(attrs))
            except Exception as exc:
                _logger.warning("Undo snapshot of '%s' failed: %s", label, exc)
        self._records.append(UndoRecord(target=target, label=str(label), state=state))

    def undo(self) -> UndoRecord | None:
        """最後の記録を取り出して対象の状態を復元する。記録が無ければ None。"""

        if not self._records:
            return None
        record = self._records.pop()
        if record.state is not None:
            attrs = record.target.__dict__
            attrs.clear()
            attrs.update(record.state)
        return record

    def labels(self) -> list[str]:
        """記録済みラベルを古い順に返す。"""

        return [r.label for r in self._records]

    def __len__(self) -> int:
        return len(self._records)


class EditorHost:
    """ボタン実行時に使うホスト側サービス一式。"""

    def __init__(
        self,
        *,
        scene: Scene | None = None,
        undo: UndoStack | None = None,
        is_playing: bool = False,
    ) -> None:
        self.scene = scene if scene is not None else Scene()
        self.undo = undo if undo is not None else UndoStack()
        self.is_playing = bool(is_playing)
        self._dirty_ids: set[tuple[str, int]] = set()

    def record_undo(self, target: Any, label: str) -> None:
        self.undo.record_object(target, label)

    def set_dirty(self, target: Any) -> None:
        """target を「未保存の変更あり」にする。"""

        self._dirty_ids.add(_object_key(target))

    def is_dirty(self, target: Any) -> bool:
        return _object_key(target) in self._dirty_ids

    def clear_dirty(self) -> None:
        self._dirty_ids.clear()
        self.scene.clear_dirty()

    def mark_scene_dirty(self) -> None:
        self.scene.mark_dirty()

    def reference_candidates(self, base: type) -> list[SceneObject]:
        """参照ピッカーに並べる、base 互換のシーン内オブジェクトを返す。"""

        return self.scene.objects_of_type(base)


def _object_key(target: Any) -> tuple[str, int]:
    instance_id = getattr(target, "instance_id", None)
    if isinstance(instance_id, int):
        return ("instance", instance_id)
    return ("object", id(target))


__all__ = ["EditorHost", "UndoRecord", "UndoStack"]
