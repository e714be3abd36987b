from __future__ import annotations

from pathlib import Path

import pytest

from bubble_overlay.geometry import Rect


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the user config at a throwaway directory."""
    config_dir = tmp_path / "config"
    monkeypatch.setenv("BUBBLE_OVERLAY_CONFIG_DIR", str(config_dir))
    return config_dir


@pytest.fixture
def bubble_rect() -> Rect:
    return Rect.square(200.0)
