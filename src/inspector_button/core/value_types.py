# どこで: `src/inspector_button/core/value_types.py`。
# 何を: エディタ組み込みの値型（ベクトル / 色 / 矩形 / 境界箱 / レイヤーマスク）を定義する。
# なぜ: 専用ウィジェットで編集する値型を、値比較できる不変オブジェクトとして扱うため。

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Vector2:
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True, slots=True)
class Vector3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass(frozen=True, slots=True)
class Vector4:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0


@dataclass(frozen=True, slots=True)
class Vector2Int:
    x: int = 0
    y: int = 0


@dataclass(frozen=True, slots=True)
class Vector3Int:
    x: int = 0
    y: int = 0
    z: int = 0


@dataclass(frozen=True, slots=True)
class Color:
    """RGBA（各 0..1）。既定値は (0, 0, 0, 0)。"""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 0.0

    @classmethod
    def white(cls) -> Color:
        return cls(1.0, 1.0, 1.0, 1.0)


@dataclass(frozen=True, slots=True)
class Rect:
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0


@dataclass(frozen=True, slots=True)
class Bounds:
    """中心とサイズで表す軸平行境界箱。"""

    center: Vector3 = field(default_factory=Vector3)
    size: Vector3 = field(default_factory=Vector3)

    @property
    def extents(self) -> Vector3:
        return Vector3(self.size.x * 0.5, self.size.y * 0.5, self.size.z * 0.5)


@dataclass(frozen=True, slots=True)
class LayerMask:
    """レイヤー番号を保持する値型。"""

    value: int = 0


VALUE_TYPES: tuple[type, ...] = (
    Vector2,
    Vector3,
    Vector4,
    Vector2Int,
    Vector3Int,
    Color,
    Rect,
    Bounds,
    LayerMask,
)
"""専用ウィジェットを持つ組み込み値型の一覧。"""


__all__ = [
    "Bounds",
    "Color",
    "LayerMask",
    "Rect",
    "VALUE_TYPES",
    "Vector2",
    "Vector2Int",
    "Vector3",
    "Vector3Int",
    "Vector4",
]
