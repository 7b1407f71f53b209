"""
どこで: `src/danmaku/export/svg.py`。
何を: 1 フレーム分のスタンプ列を SVG として保存する関数を提供する。
なぜ: interactive 依存なしの headless export（SVG）を用意し、パターンを静止画として残せるようにするため。
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from danmaku.core.renderer import Stamp

_SVG_NS = "http://www.w3.org/2000/svg"
_FLOAT_DECIMALS = 3
_DOT_GRADIENT_ID = "dot"


def _fmt(value: float, *, decimals: int = _FLOAT_DECIMALS) -> str:
    """SVG 出力向けに float を決定的な文字列へ変換して返す。"""
    text = f"{float(value):.{int(decimals)}f}"
    if text.startswith("-0") and float(text) == 0.0:
        return text[1:]
    return text


def rgb01_to_hex(rgb01: tuple[float, float, float]) -> str:
    """0..1 float RGB を #RRGGBB に変換して返す。"""

    def _to255(v: float) -> int:
        iv = int(round(float(v) * 255.0))
        return 0 if iv < 0 else 255 if iv > 255 else iv

    r, g, b = (_to255(v) for v in rgb01)
    return f"#{r:02X}{g:02X}{b:02X}"


def export_svg(
    stamps: Sequence[Stamp],
    path: str | Path,
    *,
    canvas_size: tuple[int, int] | None = None,
    background_color: tuple[float, float, float] = (0.0, 0.0, 0.0),
    sprite_color: tuple[float, float, float] = (1.0, 0.6, 0.25),
) -> Path:
    """スタンプ列を SVG として保存する。

    Parameters
    ----------
    stamps : Sequence[Stamp]
        描画順のスタンプ列。
    path : str or Path
        出力先パス。
    canvas_size : tuple[int, int] or None, optional
        キャンバス寸法。現在は None を許容しない。
    background_color : tuple[float, float, float], optional
        背景色 RGB（0..1）。
    sprite_color : tuple[float, float, float], optional
        スタンプ中心の色 RGB（0..1）。外周に向けて透明になる放射グラデーションで描く。

    Returns
    -------
    Path
        保存先パス。

    Raises
    ------
    ValueError
        canvas_size が None または正でない場合。

    Notes
    -----
    加算合成の近似として、背景と同じグループ内で ``mix-blend-mode: screen`` を使う。
    z 座標は描画に使わない（スクリーン平面への正射影）。
    """
    _path = Path(path)
    if canvas_size is None:
        raise ValueError("canvas_size=None は未対応（現在は必須）")

    canvas_w, canvas_h = canvas_size
    if canvas_w <= 0 or canvas_h <= 0:
        raise ValueError("canvas_size は正の値である必要がある")

    color = rgb01_to_hex(sprite_color)

    lines: list[str] = []
    lines.append('<?xml version="1.0" encoding="UTF-8"?>')
    lines.append(
        (
            f'<svg xmlns="{_SVG_NS}" viewBox="0 0 {int(canvas_w)} {int(canvas_h)}" '
            f'width="{int(canvas_w)}" height="{int(canvas_h)}">'
        )
    )
    lines.append("  <defs>")
    lines.append(f'    <radialGradient id="{_DOT_GRADIENT_ID}">')
    lines.append(f'      <stop offset="0" stop-color="{color}" stop-opacity="1" />')
    lines.append(f'      <stop offset="1" stop-color="{color}" stop-opacity="0" />')
    lines.append("    </radialGradient>")
    lines.append("  </defs>")
    lines.append('  <g style="isolation:isolate">')
    lines.append(
        f'    <rect x="0" y="0" width="{int(canvas_w)}" height="{int(canvas_h)}" '
        f'fill="{rgb01_to_hex(background_color)}" />'
    )

    for stamp in stamps:
        r = min(stamp.width, stamp.height) / 2.0
        if r <= 0:
            continue
        lines.append(
            (
                f'    <circle cx="{_fmt(stamp.x)}" cy="{_fmt(stamp.y)}" r="{_fmt(r)}" '
                f'fill="url(#{_DOT_GRADIENT_ID})" style="mix-blend-mode:screen" />'
            )
        )

    lines.append("  </g>")
    lines.append("</svg>")

    _path.parent.mkdir(parents=True, exist_ok=True)
    with _path.open("w", encoding="utf-8", newline="\n") as f:
        f.write("\n".join(lines) + "\n")

    return _path


__all__ = ["export_svg", "rgb01_to_hex"]
