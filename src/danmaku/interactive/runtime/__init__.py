# どこで: `src/danmaku/interactive/runtime/__init__.py`。
# 何を: 対話ウィンドウのループとサブシステム（描画・入力・保存）をまとめる。
# なぜ: `api.run` を配線だけに保つため。

from __future__ import annotations

__all__: list[str] = []
