"""
どこで: `src/danmaku/core/frame.py`。
何を: 1 フレーム分の図形列を「生成 → スタンプ → Spin」の順に処理するパイプラインと、
      名前付きパターン集合を切り替えながら進める PatternAnimator を提供する。
なぜ: interactive（pyglet 描画）と export（ヘッドレス出力）で共通のフレーム処理を共有するため。
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

import danmaku.core.generators  # noqa: F401  組み込み生成器を登録する
from danmaku.core.point import Point
from danmaku.core.renderer import Renderer, Sprite, Stamp
from danmaku.core.shape_registry import generate
from danmaku.core.shapes import Shape
from danmaku.core.spin import spin_shape

_logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RenderedShape:
    """1 図形分のフレーム処理結果。

    error が None でない場合、その図形はスタンプされず（生成失敗時）、姿勢も更新されていない。
    """

    shape: Shape
    points: tuple[Point, ...]
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def render_shape(shape: Shape, renderer: Renderer, sprite: Sprite) -> RenderedShape:
    """1 図形を生成・描画し、姿勢を 1 フレーム進める。

    生成に失敗した場合は何も描かず、Spin も適用しない。
    Spin に失敗した場合は描画済みのまま姿勢を据え置く。
    """
    try:
        points = generate(shape)
    except Exception as exc:
        return RenderedShape(shape=shape, points=(), error=exc)

    scale = float(shape.scale)
    for point in points:
        renderer.stamp_at(sprite, point, scale)

    try:
        spin_shape(shape)
    except Exception as exc:
        return RenderedShape(shape=shape, points=tuple(points), error=exc)
    return RenderedShape(shape=shape, points=tuple(points))


def render_frame(
    shapes: Sequence[Shape],
    renderer: Renderer,
    sprite: Sprite,
) -> list[RenderedShape]:
    """図形列を与えられた順に 1 フレーム分処理する。

    Parameters
    ----------
    shapes : Sequence[Shape]
        種類の混在した図形記述子列。描画順（重なり順）を兼ねる。
    renderer : Renderer
        スタンプの描画先。
    sprite : Sprite
        読み込み済みのスプライト。

    Returns
    -------
    list[RenderedShape]
        入力と同じ順の処理結果。1 図形の失敗は他の図形に影響しない。
    """
    return [render_shape(shape, renderer, sprite) for shape in shapes]


def capture_stamps(shapes: Sequence[Shape], sprite: Sprite) -> list[Stamp]:
    """姿勢を進めずに、現在のフレームのスタンプ列を返す。

    生成に失敗した図形は読み飛ばす（エクスポート用）。
    """
    out: list[Stamp] = []
    for shape in shapes:
        try:
            points = generate(shape)
        except Exception:
            _logger.warning("shape の生成に失敗したためスキップします: %r", shape, exc_info=True)
            continue
        out.extend(Stamp.from_point(sprite, p, shape.scale) for p in points)
    return out


class PatternAnimator:
    """名前付きパターン集合のうち 1 つを選び、毎フレーム描画して進める。"""

    def __init__(
        self,
        patterns: Mapping[str, Sequence[Shape]],
        *,
        initial: str | None = None,
    ) -> None:
        if not patterns:
            raise ValueError("patterns は少なくとも 1 つ必要")
        self._patterns = {str(name): list(shapes) for name, shapes in patterns.items()}
        self._names = tuple(self._patterns.keys())
        self._index = 0
        self._frame_index = 0
        self._reported: set[int] = set()
        if initial is not None:
            self.select(initial)

    @property
    def names(self) -> tuple[str, ...]:
        return self._names

    @property
    def current_name(self) -> str:
        return self._names[self._index]

    @property
    def shapes(self) -> list[Shape]:
        """現在選択中のパターンの図形列。"""
        return self._patterns[self.current_name]

    @property
    def frame_index(self) -> int:
        """これまでに進めたフレーム数を返す。"""
        return int(self._frame_index)

    def select(self, name: str) -> None:
        """名前でパターンを選択する。"""
        if name not in self._patterns:
            raise KeyError(f"未登録のパターン: {name!r} (available={list(self._names)})")
        self._index = self._names.index(name)

    def next_pattern(self) -> str:
        """次のパターンへ巡回的に切り替え、その名前を返す。"""
        self._index = (self._index + 1) % len(self._names)
        _logger.debug("pattern switched: %s", self.current_name)
        return self.current_name

    def step(self, renderer: Renderer, sprite: Sprite) -> list[RenderedShape]:
        """現在のパターンを 1 フレーム描画して進める。

        失敗した図形は最初の 1 回だけログに残す（毎フレームは出さない）。
        """
        results = render_frame(self.shapes, renderer, sprite)
        for result in results:
            if result.error is None:
                continue
            key = id(result.shape)
            if key in self._reported:
                continue
            self._reported.add(key)
            _logger.error(
                "shape の描画に失敗しました: pattern=%s kind=%s",
                self.current_name,
                type(result.shape).kind,
                exc_info=result.error,
            )
        self._frame_index += 1
        return results


__all__ = ["PatternAnimator", "RenderedShape", "capture_stamps", "render_frame", "render_shape"]
