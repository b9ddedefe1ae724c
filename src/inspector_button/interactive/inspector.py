# どこで: `src/inspector_button/interactive/inspector.py`。
# 何を: 選択中オブジェクトの `@button` メソッドをボタン（と引数フォーム）として描画する ButtonInspector。
# なぜ: カタログ構築 / 値編集 / 実行を「1 回の再描画」という単位でまとめ、ホストから 1 関数で呼べるようにするため。

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from inspector_button.core.catalog import ActionDescriptor, build_catalog
from inspector_button.core.fold_state import FoldStateStore, fold_state_key
from inspector_button.core.host import EditorHost
from inspector_button.core.introspection import TypeIntrospector
from inspector_button.core.invoke import InvocationReport, invoke_action
from inspector_button.core.runtime_config import RuntimeConfig
from inspector_button.core.scene import Component, SceneObject

from .value_editor import draw_and_edit
from .widgets import ValueWidgets, id_scope, indented

DEFAULT_SECTION_TITLE = "Custom Buttons"


def applies_to(obj: Any, *, all_objects: bool) -> bool:
    """obj がボタン表示の対象かを返す（all_objects=False なら Component のみ）。"""

    base = SceneObject if all_objects else Component
    return isinstance(obj, base)


class ButtonInspector:
    """インスペクター下部にカスタムボタンを描画する。

    `on_inspector_gui()` をインスペクターの再描画ごとに 1 回呼ぶ。
    ボタンが押されたフレームでは、戻る前に実行まで完了する。
    """

    def __init__(
        self,
        targets: Sequence[Any],
        *,
        host: EditorHost,
        widgets: ValueWidgets,
        fold_store: FoldStateStore,
        config: RuntimeConfig | None = None,
        introspector: TypeIntrospector | None = None,
    ) -> None:
        self._host = host
        self._widgets = widgets
        self._fold_store = fold_store
        self._introspector = introspector if introspector is not None else TypeIntrospector()
        self._section_title = (
            config.section_title if config is not None else DEFAULT_SECTION_TITLE
        )
        self._all_objects = bool(config.all_objects) if config is not None else False
        self._targets: list[Any] = list(targets)
        self._descriptors: list[ActionDescriptor] = []
        self.last_report: InvocationReport | None = None
        self.on_enable()

    @property
    def targets(self) -> list[Any]:
        return list(self._targets)

    @property
    def descriptors(self) -> list[ActionDescriptor]:
        return list(self._descriptors)

    def on_enable(self) -> None:
        """先頭の選択対象のクラスからカタログを作り直す（編集中の引数値は破棄）。"""

        self._descriptors = []
        if not self._targets:
            return
        target = self._targets[0]
        if not applies_to(target, all_objects=self._all_objects):
            return
        self._descriptors = build_catalog(type(target), introspector=self._introspector)
        # 折りたたみ状態はカタログ構築時に読み込み、描画中は保存先へ問い合わせない。
        for descriptor in self._descriptors:
            if descriptor.parameters:
                self._fold_store.is_open(self._fold_key(descriptor))

    def _fold_key(self, descriptor: ActionDescriptor) -> str:
        return fold_state_key(self._targets[0], descriptor.declaring_type, descriptor.method_name)

    def set_targets(self, targets: Sequence[Any]) -> None:
        """選択変更。カタログを再構築する。"""

        self._targets = list(targets)
        self.on_enable()

    def on_inspector_gui(self) -> None:
        """1 回分の再描画。押されたボタンはこの呼び出し内で実行する。"""

        if not self._descriptors:
            return

        widgets = self._widgets
        widgets.space()
        widgets.header(self._section_title)
        for descriptor in self._descriptors:
            with id_scope(widgets, f"{descriptor.declaring_type.__qualname__}.{descriptor.method_name}"):
                self._draw_descriptor(descriptor)
            widgets.space()

    def _draw_descriptor(self, descriptor: ActionDescriptor) -> None:
        widgets = self._widgets
        if not descriptor.is_fully_supported:
            widgets.help_box(
                f"Button '{descriptor.display_name}' has unsupported parameter types. "
                "Execution might fail or use default values.",
                "warning",
            )

        if not descriptor.parameters:
            if widgets.button(descriptor.display_name):
                self.execute(descriptor)
            return

        key = self._fold_key(descriptor)
        was_open = self._fold_store.is_open(key)
        is_open = widgets.foldout(was_open, descriptor.display_name)
        if is_open != was_open:
            self._fold_store.set_open(key, is_open)
        if not is_open:
            return

        with indented(widgets):
            for slot in descriptor.parameters:
                with id_scope(widgets, slot.name):
                    slot.value = draw_and_edit(
                        widgets,
                        slot.label,
                        slot.annotation,
                        slot.value,
                        introspector=self._introspector,
                    )
            if widgets.button(descriptor.display_name):
                self.execute(descriptor)

    def execute(self, descriptor: ActionDescriptor) -> InvocationReport:
        """descriptor を現在の選択対象すべてに対して実行する。"""

        report = invoke_action(
            descriptor,
            self._targets,
            host=self._host,
            introspector=self._introspector,
        )
        self.last_report = report
        return report


__all__ = ["ButtonInspector", "DEFAULT_SECTION_TITLE", "applies_to"]
