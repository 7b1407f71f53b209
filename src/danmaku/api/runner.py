"""
どこで: `src/danmaku/api/runner.py`。公開 API のランナー実装。
何を: pyglet ウィンドウを開き、名前付きパターン集合を固定 fps でアニメーション描画する。
なぜ: `main.py` を実行して実際に弾幕パターンをプレビューできる経路を用意するため。
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path

import pyglet

from danmaku.core.frame import PatternAnimator
from danmaku.core.log import setup_default_logging
from danmaku.core.presets import preset_patterns
from danmaku.core.runtime_config import runtime_config, set_config_path
from danmaku.core.shapes import Shape
from danmaku.interactive.runtime.pattern_window_system import PatternWindowSystem
from danmaku.interactive.runtime.window_loop import WindowLoop
from danmaku.interactive.sprite import load_sprite, make_sprite

_logger = logging.getLogger(__name__)


def run(
    patterns: Mapping[str, Sequence[Shape]] | None = None,
    *,
    initial: str | None = None,
    sprite_path: str | Path | None = None,
    canvas_size: tuple[int, int] | None = None,
    fps: float | None = None,
    background_color: tuple[float, float, float] | None = None,
    config_path: str | Path | None = None,
) -> None:
    """pyglet ウィンドウを生成し、パターンをリアルタイム描画する。

    Parameters
    ----------
    patterns : Mapping[str, Sequence[Shape]] or None
        名前 → 図形記述子列。None の場合は組み込みのデモパターンを使う。
    initial : str or None
        最初に表示するパターン名。None の場合は config の `animation.initial_pattern`
        （patterns に無ければ先頭）を使う。
    sprite_path : str or Path or None
        スプライト画像のパス。None の場合は config の `sprite.path`、
        それも無ければぼかした点を生成する。
    canvas_size, fps, background_color : optional
        config の値を上書きする。
    config_path : str or Path or None
        明示 config パス。

    Returns
    -------
    None
        ウィンドウを閉じると制御を返す。
    """

    if config_path is not None:
        set_config_path(config_path)
    cfg = runtime_config()
    setup_default_logging(cfg.log_level)

    _canvas_size = cfg.canvas_size if canvas_size is None else canvas_size
    _fps = cfg.fps if fps is None else float(fps)
    _background = cfg.background_color if background_color is None else background_color

    _patterns = preset_patterns() if patterns is None else patterns
    _initial = initial
    if _initial is None and cfg.initial_pattern in _patterns:
        _initial = cfg.initial_pattern
    animator = PatternAnimator(_patterns, initial=_initial)

    pyglet.options["vsync"] = True

    system = PatternWindowSystem(
        animator,
        canvas_size=_canvas_size,
        background_color=_background,
        sprite_color=cfg.sprite_color,
    )
    system.window.set_location(*cfg.window_pos)

    try:
        # テクスチャ生成に GL コンテキストが要るため、ウィンドウ作成後に 1 度だけ読み込む。
        path = sprite_path if sprite_path is not None else cfg.sprite_path
        sprite = (
            load_sprite(path) if path is not None else make_sprite(cfg.sprite_size, cfg.sprite_color)
        )
        system.attach_sprite(sprite)
        _logger.info(
            "start: pattern=%s patterns=%s fps=%s", animator.current_name, list(animator.names), _fps
        )
        WindowLoop(system.window, system.draw_frame, fps=_fps).run()
    finally:
        system.close()
