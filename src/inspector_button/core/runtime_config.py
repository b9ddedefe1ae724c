# どこで: `src/inspector_button/core/runtime_config.py`。
# 何を: config.yaml による実行時設定（探索・重ね合わせ・検証・キャッシュ）を提供する。
# なぜ: 折りたたみ状態の保存先やインスペクターの表示方針を、ユーザーが外から指定できるようにするため。

from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any

CONFIG_VERSION = 1


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """inspector_button の実行時設定。"""

    config_path: Path | None
    prefs_file: Path
    window_position: tuple[int, int]
    window_size: tuple[int, int]
    section_title: str
    all_objects: bool


_explicit_path: Path | None = None
_cached: RuntimeConfig | None = None


def set_config_path(path: str | Path | None) -> None:
    """明示 config パスを設定し、キャッシュを捨てる。None で明示指定を解除する。"""

    global _explicit_path, _cached
    _explicit_path = None if path is None else Path(str(path)).expanduser()
    _cached = None


def _discovery_candidates() -> tuple[Path, ...]:
    return (
        Path.cwd() / ".inspector_button" / "config.yaml",
        Path.home() / ".config" / "inspector_button" / "config.yaml",
    )


def _parse_yaml(text: str, *, source: str) -> dict[str, Any]:
    import yaml  # type: ignore[import-untyped]

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise RuntimeError(f"config.yaml を解釈できません: source={source}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise RuntimeError(f"config.yaml のトップレベルは mapping である必要があります: source={source}")
    return data


def _packaged_defaults() -> dict[str, Any]:
    source = "inspector_button/resource/default_config.yaml"
    try:
        text = resources.files("inspector_button").joinpath("resource", "default_config.yaml").read_text(
            encoding="utf-8"
        )
    except OSError as exc:  # pragma: no cover
        raise RuntimeError(f"同梱設定を読めません（package-data を確認）: {source}") from exc
    return _parse_yaml(text, source=source)


def _overlay(base: dict[str, Any], top: dict[str, Any]) -> dict[str, Any]:
    """セクション（mapping）は 1 段だけキー単位で重ね、それ以外は top で置き換える。"""

    out = dict(base)
    for name, value in top.items():
        below = out.get(name)
        out[name] = {**below, **value} if isinstance(below, dict) and isinstance(value, dict) else value
    return out


# --- 値の変換（失敗は RuntimeError） ---


def _to_path(value: Any, key: str) -> Path:
    text = str(value).strip()
    if not text:
        raise RuntimeError(f"{key} が空です")
    return Path(os.path.expandvars(os.path.expanduser(text)))


def _to_int_pair(value: Any, key: str) -> tuple[int, int]:
    if isinstance(value, (list, tuple)) and len(value) == 2:
        try:
            return int(value[0]), int(value[1])
        except (TypeError, ValueError):
            pass
    raise RuntimeError(f"{key} は [a, b] の整数配列で指定してください: got={value!r}")


def _to_bool(value: Any, key: str) -> bool:
    if isinstance(value, bool):
        return value
    raise RuntimeError(f"{key} は true/false で指定してください: got={value!r}")


def _to_text(value: Any, key: str) -> str:
    return str(value)


def _read(payload: dict[str, Any], dotted: str, convert: Callable[[Any, str], Any]) -> Any:
    section_name, key = dotted.split(".", 1)
    section = payload.get(section_name)
    if section is None:
        section = {}
    if not isinstance(section, dict):
        raise RuntimeError(f"{section_name} は mapping である必要があります: got={section!r}")
    value = section.get(key)
    if value is None:
        raise RuntimeError(f"{dotted} が未設定です（同梱 default_config.yaml を確認してください）")
    return convert(value, dotted)


def _check_version(payload: dict[str, Any]) -> None:
    version = payload.get("version")
    try:
        ok = int(version) == CONFIG_VERSION  # type: ignore[arg-type]
    except (TypeError, ValueError):
        ok = False
    if not ok:
        raise RuntimeError(f"未対応の config.yaml version です: got={version!r}")


def runtime_config() -> RuntimeConfig:
    """実行時設定を返す（初回のみロード）。

    重ね合わせ順（後勝ち）:
    1) 同梱 default_config.yaml
    2) `./.inspector_button/config.yaml`、無ければ `~/.config/inspector_button/config.yaml`
    3) `set_config_path()` / `run(..., config_path=...)` の明示パス

    Raises
    ------
    FileNotFoundError
        明示パスが存在しない場合。
    RuntimeError
        YAML が壊れている / 値の型が合わない / version が未対応の場合。
    ValueError
        ui.window_size が正でない場合。
    """

    global _cached
    if _cached is not None:
        return _cached

    explicit = _explicit_path
    if explicit is not None and not explicit.is_file():
        raise FileNotFoundError(f"config.yaml が見つかりません: {explicit}")
    discovered = next((p for p in _discovery_candidates() if p.is_file()), None)

    payload = _packaged_defaults()
    for path in (discovered, explicit):
        if path is not None:
            payload = _overlay(payload, _parse_yaml(path.read_text(encoding="utf-8"), source=str(path)))

    _check_version(payload)
    window_size = _read(payload, "ui.window_size", _to_int_pair)
    if min(window_size) <= 0:
        raise ValueError(f"ui.window_size は正の値である必要があります: got={window_size}")

    _cached = RuntimeConfig(
        config_path=explicit if explicit is not None else discovered,
        prefs_file=_read(payload, "paths.prefs_file", _to_path),
        window_position=_read(payload, "ui.window_position", _to_int_pair),
        window_size=window_size,
        section_title=_read(payload, "inspector.section_title", _to_text),
        all_objects=_read(payload, "inspector.all_objects", _to_bool),
    )
    return _cached


def prefs_file_path() -> Path:
    """折りたたみ状態を保存する JSON ファイルのパスを返す。"""

    return runtime_config().prefs_file


__all__ = ["RuntimeConfig", "prefs_file_path", "runtime_config", "set_config_path"]
