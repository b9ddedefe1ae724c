# どこで: `src/inspector_button/core/invoke.py`。
# 何を: ActionDescriptor を現在の引数値で実行する（static は 1 回、instance は選択対象ごと）。
# なぜ: 失敗を対象ごとに閉じ込めつつ、Undo 登録と dirty 管理の順序を 1 箇所で保証するため。

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from .catalog import ActionDescriptor
from .host import EditorHost
from .introspection import Outcome, TargetKind, TypeIntrospector

_logger = logging.getLogger(__name__)


@dataclass(slots=True)
class InvocationReport:
    """1 回のボタン押下で行った呼び出しの結果。"""

    succeeded: list[Any] = field(default_factory=list)
    failed: list[tuple[Any, Outcome]] = field(default_factory=list)

    @property
    def n_calls(self) -> int:
        return len(self.succeeded) + len(self.failed)


def _target_name(target: Any) -> str:
    name = getattr(target, "name", None)
    return str(name) if name is not None else repr(target)


def invoke_action(
    descriptor: ActionDescriptor,
    targets: Iterable[Any],
    *,
    host: EditorHost,
    introspector: TypeIntrospector | None = None,
) -> InvocationReport:
    """descriptor を実行して InvocationReport を返す（例外は送出しない）。

    Notes
    -----
    - STATIC: targets に関係なく receiver なしで 1 回だけ呼ぶ。
    - INSTANCE: targets の反復順に 1 回ずつ呼ぶ。呼び出し前に Undo を記録し、
      成功した対象だけ dirty にする。1 件の失敗は残りの呼び出しを止めない。
    - INSTANCE を 1 回以上呼んだ後、プレイ中でなければシーンを 1 回だけ dirty にする。
    """

    intro = introspector if introspector is not None else TypeIntrospector()
    args, kwargs = descriptor.call_arguments()
    report = InvocationReport()

    if descriptor.target_kind is TargetKind.STATIC:
        outcome = intro.invoke(descriptor.handle, None, args, kwargs)
        if outcome.ok:
            report.succeeded.append(None)
        else:
            report.failed.append((None, outcome))
            _logger.error(
                "Error executing static method '%s': %s",
                descriptor.display_name,
                outcome.message,
            )
        return report

    for target in targets:
        host.record_undo(target, f"Execute {descriptor.display_name} on {_target_name(target)}")
        outcome = intro.invoke(descriptor.handle, target, args, kwargs)
        if not outcome.ok:
            report.failed.append((target, outcome))
            _logger.error(
                "Error executing '%s' on '%s': %s",
                descriptor.display_name,
                _target_name(target),
                outcome.message,
            )
            continue
        report.succeeded.append(target)
        host.set_dirty(target)

    if report.n_calls > 0 and not host.is_playing:
        host.mark_scene_dirty()
    return report


__all__ = ["InvocationReport", "invoke_action"]
