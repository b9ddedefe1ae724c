# どこで: `src/inspector_button/__init__.py`。
# 何を: ルート `inspector_button` パッケージを定義する。
# なぜ: import 起点を `inspector_button` に統一するため。

from __future__ import annotations

from inspector_button.api import button, run, serialize_field
from inspector_button.core.scene import Component, Scene, SceneObject

__all__ = ["Component", "Scene", "SceneObject", "button", "run", "serialize_field"]
