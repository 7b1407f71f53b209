# どこで: `src/danmaku/core/runtime_config.py`。
# 何を: config.yaml による実行時設定（探索・ロード・キャッシュ）を提供する。
# なぜ: キャンバス寸法・fps・スプライト・出力先をコードを変えずにユーザーが指定できるようにするため。

from __future__ import annotations

import os
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any

import yaml

ColorRGB = tuple[float, float, float]


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """danmaku の実行時設定。"""

    config_path: Path | None
    output_dir: Path
    canvas_size: tuple[int, int]
    background_color: ColorRGB
    fps: float
    initial_pattern: str | None
    sprite_path: Path | None
    sprite_size: int
    sprite_color: ColorRGB
    window_pos: tuple[int, int]
    png_scale: float
    log_level: str


_EXPLICIT_CONFIG_PATH: Path | None = None
_CONFIG_CACHE: RuntimeConfig | None = None


def set_config_path(path: str | Path | None) -> None:
    """以降の設定探索で使う明示 config パスを設定する。

    Notes
    -----
    `path` を None にすると明示指定を解除し、既定の探索に戻る。
    """

    global _EXPLICIT_CONFIG_PATH, _CONFIG_CACHE
    if path is None:
        _EXPLICIT_CONFIG_PATH = None
        _CONFIG_CACHE = None
        return
    _EXPLICIT_CONFIG_PATH = Path(str(path)).expanduser()
    _CONFIG_CACHE = None


def _default_config_candidates() -> tuple[Path, ...]:
    cwd = Path.cwd()
    home = Path.home()
    return (
        cwd / ".danmaku" / "config.yaml",
        home / ".config" / "danmaku" / "config.yaml",
    )


def _as_optional_path(value: Any) -> Path | None:
    if value is None:
        return None
    s = str(value).strip()
    if not s:
        return None
    return Path(os.path.expandvars(os.path.expanduser(s)))


def _as_mapping(value: Any, *, key: str) -> dict[str, Any]:
    if value is None:
        return {}
    if isinstance(value, dict):
        return dict(value)
    raise RuntimeError(f"{key} は mapping である必要があります: got={value!r}")


def _as_int_pair(value: Any, *, key: str) -> tuple[int, int]:
    try:
        seq = list(value)
    except Exception as exc:
        raise RuntimeError(f"{key} は [x, y] の配列である必要があります: got={value!r}") from exc
    if len(seq) != 2:
        raise RuntimeError(f"{key} は [x, y] の配列である必要があります: got={value!r}")
    try:
        return int(seq[0]), int(seq[1])
    except Exception as exc:
        raise RuntimeError(f"{key} は [x, y] の整数配列である必要があります: got={value!r}") from exc


def _as_rgb(value: Any, *, key: str) -> ColorRGB:
    try:
        r, g, b = (float(v) for v in value)
    except Exception as exc:
        raise RuntimeError(f"{key} は [r, g, b] の数値配列である必要があります: got={value!r}") from exc
    return (r, g, b)


def _as_positive_float(value: Any, *, key: str) -> float:
    try:
        f = float(value)
    except Exception as exc:
        raise RuntimeError(f"{key} は数値である必要があります: got={value!r}") from exc
    if f <= 0:
        raise ValueError(f"{key} は正の値である必要があります: got={f}")
    return f


def _as_positive_int(value: Any, *, key: str) -> int:
    # YAML の 16.0 は許し、0.5 や true は拒否する。
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise RuntimeError(f"{key} は整数である必要があります: got={value!r}")
    if isinstance(value, float) and not value.is_integer():
        raise RuntimeError(f"{key} は整数である必要があります: got={value!r}")
    i = int(value)
    if i <= 0:
        raise ValueError(f"{key} は正の値である必要があります: got={i}")
    return i


def _load_yaml_text(text: str, *, source: str) -> dict[str, Any]:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise RuntimeError(f"config.yaml の読み込みに失敗しました: source={source}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise RuntimeError(f"config.yaml は mapping である必要があります: source={source}")
    return dict(data)


def _load_packaged_default_config() -> dict[str, Any]:
    """同梱デフォルト config をロードして dict を返す。"""

    try:
        blob = (
            resources.files("danmaku")
            .joinpath("resource", "default_config.yaml")
            .read_text(encoding="utf-8")
        )
    except Exception as exc:  # pragma: no cover
        raise RuntimeError(
            "同梱 default_config.yaml の読み込みに失敗しました"
            "（パッケージ配布物の package-data を確認してください）"
        ) from exc

    return _load_yaml_text(blob, source="danmaku/resource/default_config.yaml")


def _required(mapping: dict[str, Any], name: str, *, key: str) -> Any:
    value = mapping.get(name)
    if value is None:
        raise RuntimeError(f"{key} が未設定です（同梱 default_config.yaml を確認してください）")
    return value


def runtime_config() -> RuntimeConfig:
    """実行時設定をロードして返す（キャッシュ）。

    上書き順（後勝ち、トップレベルキー単位）:
    1) 同梱 default_config.yaml
    2) `./.danmaku/config.yaml` / `~/.config/danmaku/config.yaml`
    3) `set_config_path(...)` で指定したパス
    """

    global _CONFIG_CACHE
    if _CONFIG_CACHE is not None:
        return _CONFIG_CACHE

    explicit_path = _EXPLICIT_CONFIG_PATH
    if explicit_path is not None and not explicit_path.is_file():
        raise FileNotFoundError(f"config.yaml が見つかりません: {explicit_path}")

    discovered_path: Path | None = None
    for p in _default_config_candidates():
        if p.is_file():
            discovered_path = p
            break

    payload = _load_packaged_default_config()
    for path in (discovered_path, explicit_path):
        if path is not None:
            payload.update(_load_yaml_text(path.read_text(encoding="utf-8"), source=str(path)))

    version = payload.get("version")
    try:
        version_i = int(version)  # type: ignore[arg-type]
    except Exception as exc:
        raise RuntimeError(f"config.yaml の version は整数である必要があります: got={version!r}") from exc
    if version_i != 1:
        raise RuntimeError(f"未対応の config.yaml version です: got={version_i}")

    paths = _as_mapping(payload.get("paths"), key="paths")
    output_dir = _as_optional_path(_required(paths, "output_dir", key="paths.output_dir"))
    if output_dir is None:
        raise RuntimeError("paths.output_dir が空です")

    canvas = _as_mapping(payload.get("canvas"), key="canvas")
    canvas_size = _as_int_pair(_required(canvas, "size", key="canvas.size"), key="canvas.size")
    if canvas_size[0] <= 0 or canvas_size[1] <= 0:
        raise ValueError(f"canvas.size は正の値である必要があります: got={canvas_size}")
    background_color = _as_rgb(
        _required(canvas, "background_color", key="canvas.background_color"),
        key="canvas.background_color",
    )

    animation = _as_mapping(payload.get("animation"), key="animation")
    fps = _as_positive_float(_required(animation, "fps", key="animation.fps"), key="animation.fps")
    initial_pattern = animation.get("initial_pattern")

    sprite = _as_mapping(payload.get("sprite"), key="sprite")
    sprite_size = _as_positive_int(
        _required(sprite, "size", key="sprite.size"), key="sprite.size"
    )
    sprite_color = _as_rgb(_required(sprite, "color", key="sprite.color"), key="sprite.color")

    window = _as_mapping(payload.get("window"), key="window")
    window_pos = _as_int_pair(
        _required(window, "position", key="window.position"), key="window.position"
    )

    export = _as_mapping(payload.get("export"), key="export")
    png = _as_mapping(export.get("png"), key="export.png")
    png_scale = _as_positive_float(
        _required(png, "scale", key="export.png.scale"), key="export.png.scale"
    )

    logging_cfg = _as_mapping(payload.get("logging"), key="logging")
    log_level = str(logging_cfg.get("level") or "INFO").upper()

    cfg = RuntimeConfig(
        config_path=explicit_path or discovered_path,
        output_dir=output_dir,
        canvas_size=canvas_size,
        background_color=background_color,
        fps=fps,
        initial_pattern=None if initial_pattern is None else str(initial_pattern),
        sprite_path=_as_optional_path(sprite.get("path")),
        sprite_size=sprite_size,
        sprite_color=sprite_color,
        window_pos=window_pos,
        png_scale=png_scale,
        log_level=log_level,
    )
    _CONFIG_CACHE = cfg
    return cfg


def output_root_dir() -> Path:
    """出力ファイルを保存する既定ルートディレクトリを返す。"""

    return Path(runtime_config().output_dir)


__all__ = ["RuntimeConfig", "output_root_dir", "runtime_config", "set_config_path"]
