from __future__ import annotations

import pytest

from suckabunch.config import DEFAULT_CONFIG, Config


def test_default_config_matches_window_and_scene_constants() -> None:
    assert DEFAULT_CONFIG.title == "SuckaBunch"
    assert DEFAULT_CONFIG.window_size == (1280, 720)
    assert DEFAULT_CONFIG.centered is True
    assert DEFAULT_CONFIG.rect == (100, 100, 200, 150)


def test_frame_interval_is_one_sixtieth_of_a_second() -> None:
    assert DEFAULT_CONFIG.frame_interval == pytest.approx(1 / 60)
    assert Config(target_fps=30).frame_interval == pytest.approx(1 / 30)


def test_config_is_immutable() -> None:
    with pytest.raises(AttributeError):
        DEFAULT_CONFIG.title = "Other"  # type: ignore[misc]
