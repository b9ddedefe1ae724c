# どこで: `src/inspector_button/core/scene.py`。
# 何を: インスペクト対象となる SceneObject / Component と、それらを保持する Scene を定義する。
# なぜ: 参照ピッカーの候補列挙と「シーン未保存」フラグを 1 箇所で扱うため。

from __future__ import annotations

import itertools
from collections.abc import Iterator
from typing import TypeVar

T = TypeVar("T", bound="SceneObject")

_instance_ids = itertools.count(1)


class SceneObject:
    """エディタが参照として扱えるオブジェクトの基底。

    instance_id は生成順の一意な整数で、折りたたみ状態のキーにも使う。
    """

    def __init__(self, name: str | None = None) -> None:
        self.instance_id = next(_instance_ids)
        self.name = str(name) if name is not None else type(self).__name__

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r} #{self.instance_id}>"

    def __deepcopy__(self, memo: dict) -> SceneObject:
        # 参照は同一性で扱い、値として複製しない。
        return self


class Component(SceneObject):
    """シーンに置かれるスクリプト部品。既定ではボタン表示の対象はこの派生のみ。"""


class Scene:
    """SceneObject の集合と未保存フラグ。"""

    def __init__(self, name: str = "Untitled") -> None:
        self.name = str(name)
        self._objects: list[SceneObject] = []
        self.dirty = False

    def add(self, obj: T) -> T:
        """obj をシーンへ追加して返す（重複追加は無視する）。"""

        if not any(o is obj for o in self._objects):
            self._objects.append(obj)
        return obj

    def remove(self, obj: SceneObject) -> None:
        self._objects = [o for o in self._objects if o is not obj]

    def __iter__(self) -> Iterator[SceneObject]:
        return iter(list(self._objects))

    def __len__(self) -> int:
        return len(self._objects)

    def objects_of_type(self, base: type[T]) -> list[T]:
        """base と互換なオブジェクトを追加順で返す。"""

        return [o for o in self._objects if isinstance(o, base)]

    def mark_dirty(self) -> None:
        self.dirty = True

    def clear_dirty(self) -> None:
        self.dirty = False


__all__ = ["Component", "Scene", "SceneObject"]
