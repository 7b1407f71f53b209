"""
どこで: `src/danmaku/export/image.py`。
何を: スタンプ列を SVG / PNG で保存し、SVG を外部ラスタライザ（resvg）で PNG に変換する関数を提供する。
なぜ: SVG を正（ソース）として保存し、PNG は任意の解像度で再生成できる導線を用意するため。
"""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from pathlib import Path

from danmaku.core.renderer import Stamp
from danmaku.core.runtime_config import output_root_dir, runtime_config
from danmaku.export.svg import export_svg, rgb01_to_hex


def export_image(
    stamps: Sequence[Stamp],
    path: str | Path,
    *,
    canvas_size: tuple[int, int] | None = None,
    background_color: tuple[float, float, float] = (0.0, 0.0, 0.0),
    sprite_color: tuple[float, float, float] = (1.0, 0.6, 0.25),
) -> Path:
    """スタンプ列を画像として保存する。

    Notes
    -----
    拡張子が `.svg` なら SVG のみ、`.png` なら同名の SVG を保存してから resvg でラスタライズする。
    """
    _path = Path(path)
    suffix = _path.suffix.lower()
    if canvas_size is None:
        raise ValueError("canvas_size=None は未対応（現在は必須）")

    if suffix == ".svg":
        return export_svg(
            stamps,
            _path,
            canvas_size=canvas_size,
            background_color=background_color,
            sprite_color=sprite_color,
        )

    if suffix == ".png":
        svg_path = _path.with_suffix(".svg")
        export_svg(
            stamps,
            svg_path,
            canvas_size=canvas_size,
            background_color=background_color,
            sprite_color=sprite_color,
        )
        return rasterize_svg_to_png(
            svg_path,
            _path,
            output_size=png_output_size(canvas_size),
            background_color_rgb01=background_color,
        )

    raise ValueError(f"未対応の画像フォーマット: {suffix!r}")


def default_output_path(pattern_name: str, frame_index: int, *, suffix: str = ".svg") -> Path:
    """パターン名とフレーム番号に基づく既定の保存パスを返す。

    Notes
    -----
    パスは `{output_root}/{suffix なし拡張子}/{pattern_name}_{frame_index:06d}{suffix}`。
    """
    kind = suffix.lstrip(".").lower()
    return output_root_dir() / kind / f"{pattern_name}_{int(frame_index):06d}{suffix}"


def png_output_size(canvas_size: tuple[int, int]) -> tuple[int, int]:
    """canvas_size を基準に PNG 出力ピクセルサイズを返す。"""

    canvas_w, canvas_h = canvas_size
    if int(canvas_w) <= 0 or int(canvas_h) <= 0:
        raise ValueError("canvas_size は正の (width, height) である必要がある")
    scale = float(runtime_config().png_scale)
    return int(int(canvas_w) * scale), int(int(canvas_h) * scale)


def _resvg_command(
    *,
    input_svg: Path,
    output_png: Path,
    output_size: tuple[int, int],
    background_color_rgb01: tuple[float, float, float],
) -> list[str]:
    out_w, out_h = output_size
    if int(out_w) <= 0 or int(out_h) <= 0:
        raise ValueError("output_size は正の (width, height) である必要がある")
    return [
        "resvg",
        "--width",
        str(int(out_w)),
        "--height",
        str(int(out_h)),
        "--background",
        rgb01_to_hex(background_color_rgb01),
        str(input_svg),
        str(output_png),
    ]


def rasterize_svg_to_png(
    svg_path: str | Path,
    png_path: str | Path,
    *,
    output_size: tuple[int, int],
    background_color_rgb01: tuple[float, float, float] = (0.0, 0.0, 0.0),
) -> Path:
    """SVG を PNG として保存する。

    Parameters
    ----------
    svg_path : str or Path
        入力 SVG パス。
    png_path : str or Path
        出力 PNG パス。
    output_size : tuple[int, int]
        出力 PNG の (width, height) ピクセルサイズ。
    background_color_rgb01 : tuple[float, float, float]
        背景色 RGB（0..1）。既定は黒。

    Returns
    -------
    Path
        出力 PNG パス。

    Raises
    ------
    RuntimeError
        resvg が見つからない、またはラスタライズに失敗した場合。
    """

    _svg_path = Path(svg_path)
    _png_path = Path(png_path)
    _png_path.parent.mkdir(parents=True, exist_ok=True)

    cmd = _resvg_command(
        input_svg=_svg_path,
        output_png=_png_path,
        output_size=output_size,
        background_color_rgb01=background_color_rgb01,
    )
    try:
        proc = subprocess.run(cmd, capture_output=True, text=True, check=False)
    except FileNotFoundError as e:
        raise RuntimeError(
            "resvg が見つかりません（`resvg` をインストールして PATH を通してください）"
        ) from e

    if proc.returncode != 0:
        details = (proc.stderr or proc.stdout or "").strip()
        raise RuntimeError(f"resvg が失敗しました (code={proc.returncode}). {details}".strip())

    return _png_path


__all__ = [
    "default_output_path",
    "export_image",
    "png_output_size",
    "rasterize_svg_to_png",
]
