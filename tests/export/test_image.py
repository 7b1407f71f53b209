from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from danmaku.core.renderer import Stamp
from danmaku.core.runtime_config import runtime_config, set_config_path
from danmaku.export import image


# `danmaku.export.image`（SVG/PNG 保存と resvg 呼び出し）をテストする。

@pytest.fixture(autouse=True)
def _reset_runtime_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    set_config_path(None)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    set_config_path(None)
    yield
    set_config_path(None)


_STAMPS = [Stamp(x=1.0, y=2.0, z=0.0, width=4.0, height=4.0)]


def test_default_output_path_uses_data_dir_pattern_and_frame():
    path = image.default_output_path("star", 42)
    assert path.parts[:3] == ("data", "output", "svg")
    assert path.name == "star_000042.svg"

    png = image.default_output_path("star", 7, suffix=".png")
    assert png.parts[2] == "png"
    assert png.name == "star_000007.png"


def test_png_output_size_scales_canvas_by_png_scale(tmp_path: Path):
    config = tmp_path / "scale.yaml"
    config.write_text("export:\n  png:\n    scale: 2.5\n", encoding="utf-8")
    set_config_path(config)

    assert runtime_config().png_scale == 2.5
    assert image.png_output_size((300, 200)) == (750, 500)


def test_export_image_svg_writes_only_svg(tmp_path: Path):
    out = tmp_path / "frame.svg"
    assert image.export_image(_STAMPS, out, canvas_size=(50, 50)) == out
    assert out.exists()


def test_export_image_png_writes_svg_then_invokes_resvg(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    out_png = tmp_path / "frame.png"
    calls: list[list[str]] = []

    def fake_run(cmd, *, capture_output: bool, text: bool, check: bool):
        assert capture_output is True
        assert text is True
        assert check is False
        calls.append(list(cmd))
        return subprocess.CompletedProcess(args=cmd, returncode=0, stdout="", stderr="")

    monkeypatch.setattr(image.subprocess, "run", fake_run)

    path = image.export_image(
        _STAMPS, out_png, canvas_size=(120, 80), background_color=(1.0, 1.0, 1.0)
    )
    assert path == out_png
    assert (tmp_path / "frame.svg").exists()

    (cmd,) = calls
    assert cmd[0] == "resvg"
    assert cmd[cmd.index("--width") + 1] == "120"
    assert cmd[cmd.index("--height") + 1] == "80"
    assert cmd[cmd.index("--background") + 1] == "#FFFFFF"
    assert Path(cmd[-2]) == tmp_path / "frame.svg"
    assert Path(cmd[-1]) == out_png


def test_export_image_rejects_unknown_suffix(tmp_path: Path):
    with pytest.raises(ValueError, match="未対応"):
        image.export_image(_STAMPS, tmp_path / "frame.jpg", canvas_size=(10, 10))


def test_rasterize_svg_to_png_reports_missing_resvg(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    def fake_run(cmd, **_kwargs):
        raise FileNotFoundError(cmd[0])

    monkeypatch.setattr(image.subprocess, "run", fake_run)

    with pytest.raises(RuntimeError, match="resvg が見つかりません"):
        image.rasterize_svg_to_png(tmp_path / "in.svg", tmp_path / "out.png", output_size=(10, 10))


def test_rasterize_svg_to_png_reports_failure(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    def fake_run(cmd, **_kwargs):
        return subprocess.CompletedProcess(args=cmd, returncode=2, stdout="", stderr="bad svg")

    monkeypatch.setattr(image.subprocess, "run", fake_run)

    with pytest.raises(RuntimeError, match="bad svg"):
        image.rasterize_svg_to_png(tmp_path / "in.svg", tmp_path / "out.png", output_size=(10, 10))
