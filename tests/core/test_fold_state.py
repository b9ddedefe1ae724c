import json
import logging
from pathlib import Path

from inspector_button.core.fold_state import (
    FOLDOUT_KEY_PREFIX,
    FoldStateStore,
    JsonFlagStorage,
    fold_state_key,
)
from inspector_button.core.scene import Component


class Door(Component):
    pass


def test_fold_state_key_is_unique_per_instance_type_and_method() -> None:
    a, b = Door("a"), Door("b")

    key_a = fold_state_key(a, Door, "open")
    assert key_a.startswith(FOLDOUT_KEY_PREFIX)
    assert key_a == f"{FOLDOUT_KEY_PREFIX}{a.instance_id}_{__name__}.Door.open"
    assert key_a != fold_state_key(b, Door, "open")
    assert key_a != fold_state_key(a, Door, "close")


def test_store_defaults_to_closed_and_writes_on_change(flag_storage) -> None:
    store = FoldStateStore(flag_storage)

    assert store.is_open("k") is False
    store.set_open("k", False)
    assert flag_storage.writes == []

    store.set_open("k", True)
    store.set_open("k", True)
    assert store.is_open("k") is True
    assert flag_storage.writes == [("k", True)]


def test_json_storage_persists_across_instances(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "prefs.json"

    FoldStateStore(JsonFlagStorage(path)).set_open("k", True)

    assert json.loads(path.read_text(encoding="utf-8")) == {"k": True}
    assert FoldStateStore(JsonFlagStorage(path)).is_open("k") is True


def test_json_storage_ignores_broken_file(tmp_path: Path, caplog) -> None:
    path = tmp_path / "prefs.json"
    path.write_text("{not json", encoding="utf-8")
    caplog.set_level(logging.WARNING, logger="inspector_button")

    storage = JsonFlagStorage(path)

    assert storage.get_bool("k", True) is True
    assert any(r.levelno == logging.WARNING for r in caplog.records)
    storage.set_bool("k", False)
    assert json.loads(path.read_text(encoding="utf-8")) == {"k": False}
