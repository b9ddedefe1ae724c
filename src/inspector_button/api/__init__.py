# どこで: `src/inspector_button/api/__init__.py`。
# 何を: 公開 API パッケージのエントリポイントとして button / run を再エクスポートする。
# なぜ: ユーザーコードからシンプルに API を import できるようにするため。

from __future__ import annotations

from inspector_button.core.button import button
from inspector_button.core.type_support import serialize_field

__all__ = ["button", "run", "serialize_field"]


def run(*args, **kwargs):
    """公開 run API へのラッパ（遅延インポートで GUI 依存を後回しにする）。"""

    from .runner import run as _run

    return _run(*args, **kwargs)
