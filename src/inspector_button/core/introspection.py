# どこで: `src/inspector_button/core/introspection.py`。
# 何を: クラスの宣言メソッド走査 / 呼び出し / 既定値生成を TypeIntrospector にまとめる。
# なぜ: リフレクション由来の失敗を Outcome で返し、呼び出し側が局所的に扱えるようにするため。

from __future__ import annotations

import enum
import inspect
import typing
from dataclasses import dataclass
from typing import Any, Callable

from .button import ButtonAttribute, get_button_attribute
from .type_support import classify, is_value_semantic, resolve_annotation, strip_optional


class TargetKind(enum.Enum):
    """ボタンの呼び出し対象。"""

    STATIC = "static"
    INSTANCE = "instance"


@dataclass(frozen=True, slots=True)
class Outcome:
    """失敗し得る操作の結果（ok なら value、そうでなければ error）。"""

    ok: bool
    value: Any = None
    error: BaseException | None = None

    @classmethod
    def success(cls, value: Any = None) -> Outcome:
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: BaseException) -> Outcome:
        return cls(ok=False, error=error)

    @property
    def message(self) -> str:
        """失敗理由の文字列（成功時は空文字）。"""

        if self.error is None:
            return ""
        return str(self.error) or type(self.error).__name__


@dataclass(frozen=True, slots=True)
class MethodHandle:
    """`@button` 付きメソッド 1 つ分の走査結果。"""

    declaring_type: type
    name: str
    func: Callable[..., Any]
    attribute: ButtonAttribute
    target_kind: TargetKind
    is_classmethod: bool = False


@dataclass(frozen=True, slots=True)
class ParameterInfo:
    """呼び出し引数 1 つ分の情報（self / cls は含まない）。"""

    name: str
    annotation: Any
    default: Any
    kind: inspect._ParameterKind

    @property
    def has_default(self) -> bool:
        return self.default is not inspect.Parameter.empty


class TypeIntrospector:
    """Python のイントロスペクションで TypeIntrospector 能力を提供する。"""

    def declared_methods_with_marker(self, cls: type) -> list[MethodHandle]:
        """cls 自身に宣言された（継承していない）`@button` メソッドを宣言順で返す。

        可視性（`_` 始まりかどうか）は問わない。
        """

        handles: list[MethodHandle] = []
        for name, raw in vars(cls).items():
            attribute = get_button_attribute(raw)
            if attribute is None:
                continue
            if isinstance(raw, (staticmethod, classmethod)):
                handles.append(
                    MethodHandle(
                        declaring_type=cls,
                        name=str(name),
                        func=raw.__func__,
                        attribute=attribute,
                        target_kind=TargetKind.STATIC,
                        is_classmethod=isinstance(raw, classmethod),
                    )
                )
            elif inspect.isfunction(raw):
                handles.append(
                    MethodHandle(
                        declaring_type=cls,
                        name=str(name),
                        func=raw,
                        attribute=attribute,
                        target_kind=TargetKind.INSTANCE,
                    )
                )
        return handles

    def parameters(self, handle: MethodHandle) -> list[ParameterInfo]:
        """handle の呼び出し引数（self / cls を除く）を宣言順で返す。"""

        sig = inspect.signature(handle.func)
        try:
            hints = typing.get_type_hints(handle.func)
        except Exception:
            # 1 つの未解決名で他の引数まで文字列注釈のまま残さないよう、個別に解決する。
            globalns = getattr(handle.func, "__globals__", {})
            localns = dict(vars(handle.declaring_type))
            hints = {
                p.name: resolve_annotation(p.annotation, globalns, localns)
                for p in sig.parameters.values()
                if p.annotation is not inspect.Parameter.empty
            }

        params = list(sig.parameters.values())
        if handle.target_kind is TargetKind.INSTANCE or handle.is_classmethod:
            params = params[1:]

        out: list[ParameterInfo] = []
        for p in params:
            out.append(
                ParameterInfo(
                    name=p.name,
                    annotation=hints.get(p.name, p.annotation),
                    default=p.default,
                    kind=p.kind,
                )
            )
        return out

    def invoke(
        self,
        handle: MethodHandle,
        receiver: Any,
        args: typing.Sequence[Any],
        kwargs: typing.Mapping[str, Any] | None = None,
    ) -> Outcome:
        """handle を呼び出し、戻り値または送出された例外を Outcome で返す。

        STATIC の場合 receiver は無視する（classmethod は宣言クラスを束縛する）。
        """

        kw = dict(kwargs or {})
        try:
            if handle.target_kind is TargetKind.STATIC:
                if handle.is_classmethod:
                    result = handle.func(handle.declaring_type, *args, **kw)
                else:
                    result = handle.func(*args, **kw)
            else:
                result = handle.func(receiver, *args, **kw)
        except Exception as exc:
            return Outcome.failure(exc)
        return Outcome.success(result)

    def default_construct(self, tp: Any) -> Outcome:
        """tp の既定インスタンスを生成する。引数なし生成できなければ failure。"""

        tp = strip_optional(tp)
        origin = typing.get_origin(tp)
        factory = origin if origin is not None else tp
        try:
            if isinstance(factory, type) and issubclass(factory, enum.Flag):
                return Outcome.success(factory(0))
            if isinstance(factory, type) and issubclass(factory, enum.Enum):
                members = list(factory)
                if not members:
                    raise ValueError(f"Enum '{factory.__name__}' にメンバーが無い")
                return Outcome.success(members[0])
            if not callable(factory):
                raise TypeError(f"生成できない型: {tp!r}")
            return Outcome.success(factory())
        except Exception as exc:
            return Outcome.failure(exc)

    def default_value(self, tp: Any) -> Any:
        """値セマンティクス型ならゼロ値、それ以外（参照セマンティクス）は None を返す。"""

        if not is_value_semantic(classify(tp)):
            return None
        outcome = self.default_construct(tp)
        return outcome.value if outcome.ok else None


__all__ = [
    "MethodHandle",
    "Outcome",
    "ParameterInfo",
    "TargetKind",
    "TypeIntrospector",
]
