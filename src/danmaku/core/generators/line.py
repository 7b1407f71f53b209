"""
どこで: `src/danmaku/core/generators/line.py`。線分上のスタンプ位置生成。
何を: start/end 間を等分した number 個の点を返す。
なぜ: 多角形・星形・平行六面体の各辺を組み立てる最小単位として使うため。
"""

from __future__ import annotations

from danmaku.core.point import Point
from danmaku.core.shape_registry import shape_generator
from danmaku.core.shapes import Line


def line_points(
    start: Point,
    end: Point,
    number: int,
    *,
    include_end: bool = False,
) -> list[Point]:
    """start から end へ number 個の点を等間隔に並べる。

    Parameters
    ----------
    start, end : Point
        線分の端点。先頭の点は常に start。
    number : int
        点の個数。0 以下なら空。
    include_end : bool, optional
        True なら最後の点が end に一致する。False なら end は含めず、
        end の 1 つ手前までを number 分割した間隔で並べる。

    Returns
    -------
    list[Point]
        start 側から順に並んだ点列。
    """
    total = number - int(include_end)
    return [start.subdivide(end, i, total) for i in range(number)]


@shape_generator(Line)
def line(shape: Line) -> list[Point]:
    """Line 記述子のスタンプ位置を返す。"""
    return line_points(
        shape.start_pos,
        shape.end_pos,
        shape.number,
        include_end=shape.include_end,
    )
