# どこで: `src/inspector_button/core/fold_state.py`。
# 何を: ボタンの引数フォームの折りたたみ状態を、注入可能なフラグ保存先で永続化する。
# なぜ: 同じパネルで別オブジェクトを表示しても状態が衝突せず、再起動後も開閉を復元できるようにするため。

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Protocol

_logger = logging.getLogger(__name__)

FOLDOUT_KEY_PREFIX = "InspectorButton_Foldout_"


class FlagStorage(Protocol):
    """文字列キー → bool の永続ストア。"""

    def get_bool(self, key: str, default: bool = False) -> bool: ...

    def set_bool(self, key: str, value: bool) -> None: ...


def fold_state_key(target: Any, declaring_type: type, method_name: str) -> str:
    """(対象インスタンス, 宣言クラス, メソッド名) から折りたたみキーを作る。"""

    instance_id = getattr(target, "instance_id", None)
    if instance_id is None:
        instance_id = id(target)
    type_name = f"{declaring_type.__module__}.{declaring_type.__qualname__}"
    return f"{FOLDOUT_KEY_PREFIX}{instance_id}_{type_name}.{method_name}"


class JsonFlagStorage:
    """フラグを JSON ファイルに保存する FlagStorage。

    読み込みは初回アクセス時に 1 回だけ行い、書き込みは set_bool のたびに即時行う。
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)
        self._flags: dict[str, bool] | None = None

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> dict[str, bool]:
        if self._flags is not None:
            return self._flags
        try:
            payload = self._path.read_text(encoding="utf-8")
        except OSError:
            self._flags = {}
            return self._flags

        try:
            data = json.loads(payload)
        except json.JSONDecodeError:
            # 破損したファイルは利便性のため無視して起動する。
            _logger.warning("壊れた折りたたみ状態ファイルを無視しました: %s", self._path)
            data = {}
        if not isinstance(data, dict):
            data = {}
        self._flags = {str(k): bool(v) for k, v in data.items() if isinstance(v, bool)}
        return self._flags

    def get_bool(self, key: str, default: bool = False) -> bool:
        return bool(self._load().get(str(key), default))

    def set_bool(self, key: str, value: bool) -> None:
        flags = self._load()
        flags[str(key)] = bool(value)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(
            json.dumps(flags, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
            encoding="utf-8",
        )


class FoldStateStore:
    """折りたたみ状態のキャッシュ付きビュー（後勝ち、即時書き込み）。"""

    def __init__(self, storage: FlagStorage) -> None:
        self._storage = storage
        self._cache: dict[str, bool] = {}

    def is_open(self, key: str) -> bool:
        """key の開閉状態を返す。未読込なら保存先から読む（既定は閉）。"""

        if key not in self._cache:
            self._cache[key] = bool(self._storage.get_bool(key, False))
        return self._cache[key]

    def set_open(self, key: str, is_open: bool) -> None:
        """key の開閉状態を更新し、変化があれば保存先へ即時に書く。"""

        value = bool(is_open)
        if self._cache.get(key) == value:
            return
        self._cache[key] = value
        self._storage.set_bool(key, value)


__all__ = [
    "FOLDOUT_KEY_PREFIX",
    "FlagStorage",
    "FoldStateStore",
    "JsonFlagStorage",
    "fold_state_key",
]
