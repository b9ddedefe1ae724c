# どこで: `src/inspector_button/core/button.py`。
# 何を: メソッドをインスペクターのボタンとして公開する `@button` マーカーを提供する。
# なぜ: 走査側（catalog）が「印の付いた関数」だけを宣言情報から拾えるようにするため。

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

BUTTON_MARKER_ATTR = "__inspector_button__"


@dataclass(frozen=True, slots=True)
class ButtonAttribute:
    """`@button` が関数へ付与するマーカー情報。

    name が None または空文字の場合、表示名はメソッド名から導出する。
    """

    name: str | None = None


def _unwrap_descriptor(obj: Any) -> Callable[..., Any] | None:
    """staticmethod/classmethod を剥がして中身の関数を返す。"""

    if isinstance(obj, (staticmethod, classmethod)):
        return obj.__func__
    if callable(obj):
        return obj
    return None


def get_button_attribute(obj: Any) -> ButtonAttribute | None:
    """obj（関数 / staticmethod / classmethod）に付いたマーカーを返す。無ければ None。"""

    func = _unwrap_descriptor(obj)
    if func is None:
        return None
    attr = getattr(func, BUTTON_MARKER_ATTR, None)
    if isinstance(attr, ButtonAttribute):
        return attr
    return None


def button(func: Any = None, *, name: str | None = None):
    """メソッドをインスペクターのボタンとして表示するデコレータ。

    Parameters
    ----------
    func : callable or str or None
        デコレート対象。`@button("Say Hello")` の形では表示名として扱う。
    name : str or None, optional
        ボタンの表示名。未指定ならメソッド名から導出する。

    Examples
    --------
    class Greeter(Component):
        @button("Say Hello")
        def say_hello(self) -> None:
            ...

        @button
        @staticmethod
        def reset_all() -> None:
            ...
    """

    if isinstance(func, str):
        if name is not None:
            raise ValueError("button の表示名が位置引数と name の両方で指定されている")
        name, func = func, None

    attribute = ButtonAttribute(name=name)

    def decorator(f: Any) -> Any:
        target = _unwrap_descriptor(f)
        if target is None:
            raise TypeError(f"button はメソッドにのみ付与できる: got={f!r}")
        setattr(target, BUTTON_MARKER_ATTR, attribute)
        return f

    if func is None:
        return decorator
    return decorator(func)


__all__ = ["BUTTON_MARKER_ATTR", "ButtonAttribute", "button", "get_button_attribute"]
