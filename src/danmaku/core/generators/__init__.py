# どこで: `src/danmaku/core/generators/__init__.py`。
# 何を: 組み込み図形生成器モジュールを import してレジストリに登録させる。
# なぜ: `generate()` を呼ぶ前に 5 種類すべての生成器が揃っていることを保証するため。

from __future__ import annotations

from danmaku.core.generators import circle as _circle  # noqa: F401
from danmaku.core.generators import line as _line  # noqa: F401
from danmaku.core.generators import parallelepiped as _parallelepiped  # noqa: F401
from danmaku.core.generators import polygon as _polygon  # noqa: F401
from danmaku.core.generators import star as _star  # noqa: F401
