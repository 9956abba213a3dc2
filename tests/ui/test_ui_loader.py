"""
test_ui_loader.py
-----------------
Unit tests for YAML layout loading.
"""

import pytest

from corgi_run.ui.ui_loader import UILoader, load_hud_layout


def test_bundled_hud_layout_has_every_section():
    layout = load_hud_layout()
    for section in ("hud", "start_panel", "gameover_panel", "panel"):
        assert section in layout
    assert layout["hud"]["dimmed_heart_alpha"] == 51


def test_custom_directory(tmp_path):
    (tmp_path / "tiny.yaml").write_text("hud:\n  font_size: 12\n")
    assert UILoader(tmp_path).load("tiny.yaml") == {"hud": {"font_size": 12}}


def test_results_are_cached(tmp_path):
    path = tmp_path / "tiny.yaml"
    path.write_text("a: 1\n")
    loader = UILoader(tmp_path)
    first = loader.load("tiny.yaml")

    path.write_text("a: 2\n")
    assert loader.load("tiny.yaml") is first


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        UILoader(tmp_path).load("nope.yaml")


def test_non_mapping_rejected(tmp_path):
    (tmp_path / "list.yaml").write_text("- 1\n- 2\n")
    with pytest.raises(ValueError):
        UILoader(tmp_path).load("list.yaml")
