# どこで: `src/inspector_button/core/nicify.py`。
# 何を: 変数名/メソッド名を人間向けの表示名（"say_hello" → "Say Hello"）へ整形する。
# なぜ: ボタン名とパラメータラベルの既定値を、1 つの決定的な規則で作るため。

from __future__ import annotations

import re

# 1) 小文字/数字 → 大文字、2) 連続大文字 → 大文字+小文字（頭字語の終端）、3) 英字 ↔ 数字。
_BOUNDARY_RE = re.compile(
    r"(?<=[a-z0-9])(?=[A-Z])"
    r"|(?<=[A-Z])(?=[A-Z][a-z])"
    r"|(?<=[A-Za-z])(?=[0-9])"
    r"|(?<=[0-9])(?=[A-Za-z])"
)


def nicify_variable_name(name: str) -> str:
    """名前を表示用に整形して返す。

    規則:
    - 先頭の `_` と `m_` 接頭辞を除去する
    - `_` は単語区切りとして扱う
    - 小文字→大文字 / 英字↔数字 / 頭字語→単語 の境界に空白を入れる
    - 各単語の先頭を大文字にする（頭字語はそのまま）

    Examples
    --------
    >>> nicify_variable_name("SayHello")
    'Say Hello'
    >>> nicify_variable_name("_spawn_enemy2")
    'Spawn Enemy 2'
    >>> nicify_variable_name("HTTPServer")
    'HTTP Server'
    """

    text = str(name)
    if text.startswith("m_"):
        text = text[2:]
    words: list[str] = []
    for chunk in text.split("_"):
        if not chunk:
            continue
        words.extend(w for w in _BOUNDARY_RE.split(chunk) if w)
    if not words:
        return str(name)
    return " ".join(w[0].upper() + w[1:] for w in words)


__all__ = ["nicify_variable_name"]
