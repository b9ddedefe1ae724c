# どこで: `src/inspector_button/core/catalog.py`。
# 何を: インスペクト対象のクラスから `@button` メソッドを拾い、ActionDescriptor の一覧を作る。
# なぜ: 表示名 / 引数 / 現在値 / 対応可否を選択ごとに 1 回だけ解決し、描画ループから分離するため。

from __future__ import annotations

import copy
import inspect
import logging
from dataclasses import dataclass, field
from typing import Any

from .introspection import MethodHandle, ParameterInfo, TargetKind, TypeIntrospector
from .nicify import nicify_variable_name
from .type_support import is_supported, type_display_name

_logger = logging.getLogger(__name__)

_VARIADIC_KINDS = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


@dataclass(slots=True)
class ParameterSlot:
    """ボタンの引数 1 つ分の現在値。value はフォーム編集で書き換わる。"""

    name: str
    annotation: Any
    value: Any
    keyword_only: bool = False

    @property
    def label(self) -> str:
        return nicify_variable_name(self.name)


@dataclass(slots=True)
class ActionDescriptor:
    """インスペクターのボタン 1 つ分の表示情報と引数状態。"""

    display_name: str
    handle: MethodHandle
    parameters: list[ParameterSlot] = field(default_factory=list)
    is_fully_supported: bool = True

    @property
    def target_kind(self) -> TargetKind:
        return self.handle.target_kind

    @property
    def declaring_type(self) -> type:
        return self.handle.declaring_type

    @property
    def method_name(self) -> str:
        return self.handle.name

    def call_arguments(self) -> tuple[list[Any], dict[str, Any]]:
        """現在の引数値を (positional, keyword) に振り分けて返す。"""

        args: list[Any] = []
        kwargs: dict[str, Any] = {}
        for slot in self.parameters:
            if slot.keyword_only:
                kwargs[slot.name] = slot.value
            else:
                args.append(slot.value)
        return args, kwargs


def resolve_display_name(handle: MethodHandle) -> str:
    """明示名があればそれを、無ければメソッド名を整形した名前を返す。"""

    explicit = handle.attribute.name
    if explicit:
        return str(explicit)
    return nicify_variable_name(handle.name)


def _initial_value(param: ParameterInfo, introspector: TypeIntrospector) -> Any:
    # 宣言デフォルトは複製し、ボタン間・選択間で共有しない。
    if param.has_default:
        try:
            return copy.deepcopy(param.default)
        except Exception:
            # 複製できないデフォルトはそのまま共有する。
            return param.default
    return introspector.default_value(param.annotation)


def _build_descriptor(handle: MethodHandle, introspector: TypeIntrospector) -> ActionDescriptor:
    descriptor = ActionDescriptor(display_name=resolve_display_name(handle), handle=handle)
    for param in introspector.parameters(handle):
        if param.kind in _VARIADIC_KINDS:
            _logger.warning(
                "Method '%s' has a variadic parameter '%s' which is not shown.",
                handle.name,
                param.name,
            )
            continue
        if not is_supported(param.annotation):
            descriptor.is_fully_supported = False
            _logger.warning(
                "Method '%s' has an unsupported parameter type: '%s'. "
                "Default value will be used if possible.",
                handle.name,
                type_display_name(param.annotation),
            )
        descriptor.parameters.append(
            ParameterSlot(
                name=param.name,
                annotation=param.annotation,
                value=_initial_value(param, introspector),
                keyword_only=param.kind is inspect.Parameter.KEYWORD_ONLY,
            )
        )
    return descriptor


def build_catalog(
    target_type: type,
    *,
    introspector: TypeIntrospector | None = None,
) -> list[ActionDescriptor]:
    """target_type に宣言された `@button` メソッドの ActionDescriptor を宣言順で返す。

    Parameters
    ----------
    target_type : type
        インスペクト対象の実行時クラス。継承元のメソッドは対象外。
    introspector : TypeIntrospector or None, optional
        走査と既定値生成に使う実装。None なら既定実装。

    Returns
    -------
    list[ActionDescriptor]
        印付きメソッドが無ければ空リスト。
    """

    intro = introspector if introspector is not None else TypeIntrospector()
    return [_build_descriptor(h, intro) for h in intro.declared_methods_with_marker(target_type)]


__all__ = ["ActionDescriptor", "ParameterSlot", "build_catalog", "resolve_display_name"]
