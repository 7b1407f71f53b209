"""
どこで: リポジトリ直下 `main.py`。
何を: 組み込みのデモパターンに自作の 1 パターンを加え、run でプレビュー表示する。
なぜ: 動作確認用の最小エントリポイントとして利用するため。
"""

from danmaku import Circle, Line, Point, Polygon, Vector, run
from danmaku.core.presets import preset_patterns


def spiral():
    return [
        Circle(Point(600, 400), 36, 240, spin=Vector(0, 0, 0.5)),
        Polygon(Point(600, 400), 3, 12, 160, is_star=False, spin=-1.0),
        Line(Point(360, 400), Point(840, 400), 25, include_end=True, scale=0.6),
    ]


if __name__ == "__main__":
    patterns = preset_patterns()
    patterns["spiral"] = spiral()
    run(patterns, initial="spiral")
