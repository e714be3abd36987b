from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from bubble_overlay._color import RGBA, normalize_color

CONFIG_ENV = "BUBBLE_OVERLAY_CONFIG_DIR"
CONFIG_NAME = "bubble_overlay.cfg"
DEFAULT_CONFIG: Dict[str, Any] = {
    "_comment": "Colors accept names, #rrggbb[aa] or RGB(A) lists. stripe_ratio is the stripe width as a fraction of the bubble radius.",
    "bubble_color": "orange",
    "stripe_color": [0, 0, 0, 0.3],
    "stripe_ratio": 0.1,
    "size": 200,
    "background": "white",
}


@dataclass(frozen=True)
class BubbleSettings:
    """Resolved drawing defaults from bubble_overlay.cfg."""

    bubble_color: RGBA
    stripe_color: RGBA
    stripe_ratio: float
    size: int
    background: RGBA


def config_dir() -> Path:
    override = os.environ.get(CONFIG_ENV)
    if override:
        return Path(override)
    return Path.home() / ".bubble_overlay"


def config_file() -> Path:
    return config_dir() / CONFIG_NAME


def ensure_user_config() -> None:
    """Ensure the config file exists with sane defaults."""

    directory = config_dir()
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError:
        return

    path = directory / CONFIG_NAME
    if path.exists():
        return

    try:
        path.write_text(json.dumps(DEFAULT_CONFIG, indent=2) + "\n")
    except OSError:
        return


def _load_user_config() -> Dict[str, Any]:
    ensure_user_config()
    try:
        raw = json.loads(config_file().read_text())
    except (OSError, json.JSONDecodeError):
        return DEFAULT_CONFIG.copy()
    if not isinstance(raw, dict):
        return DEFAULT_CONFIG.copy()
    return raw


def _color_setting(raw: Dict[str, Any], key: str) -> RGBA:
    try:
        return normalize_color(raw.get(key, DEFAULT_CONFIG[key]))
    except ValueError:
        return normalize_color(DEFAULT_CONFIG[key])


def _positive_setting(raw: Dict[str, Any], key: str, kind: type) -> Any:
    try:
        value = kind(raw.get(key, DEFAULT_CONFIG[key]))
    except (TypeError, ValueError):
        return DEFAULT_CONFIG[key]
    if not value > 0:
        return DEFAULT_CONFIG[key]
    return value


def get_settings() -> BubbleSettings:
    """Return configured drawing defaults, falling back per field on bad values."""

    raw_config = _load_user_config()
    return BubbleSettings(
        bubble_color=_color_setting(raw_config, "bubble_color"),
        stripe_color=_color_setting(raw_config, "stripe_color"),
        stripe_ratio=float(_positive_setting(raw_config, "stripe_ratio", float)),
        size=int(_positive_setting(raw_config, "size", int)),
        background=_color_setting(raw_config, "background"),
    )
