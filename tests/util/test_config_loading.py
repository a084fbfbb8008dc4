from __future__ import annotations

import logging
from pathlib import Path

from util.paths import ensure_screenshots_dir
from util.utils import _find_project_root, config_section, load_config


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def test_load_config_root_overrides_default_top_level(tmp_path: Path) -> None:
    _write(tmp_path / "configs" / "default.yaml", "canvas:\n  width: 10\nscene:\n  palette: '01'\n")
    _write(tmp_path / "config.yaml", "canvas:\n  height: 20\n")
    cfg = load_config(tmp_path)
    # トップレベルのみ上書き（canvas は丸ごと置換）
    assert cfg["canvas"] == {"height": 20}
    assert cfg["scene"] == {"palette": "01"}


def test_load_config_missing_files_is_empty(tmp_path: Path) -> None:
    assert load_config(tmp_path) == {}


def test_load_config_broken_yaml_warns_and_skips(tmp_path: Path, caplog) -> None:
    _write(tmp_path / "configs" / "default.yaml", "canvas: [unclosed\n")
    with caplog.at_level(logging.WARNING, logger="util.utils"):
        assert load_config(tmp_path) == {}
    assert any("config load failed" in r.getMessage() for r in caplog.records)


def test_project_default_config_has_canvas_section() -> None:
    cfg = load_config()
    canvas = config_section(cfg, "canvas")
    assert int(canvas["width"]) > 0
    assert int(canvas["height"]) > 0
    assert config_section(cfg, "scene")["palette"] == "01"


def test_config_section_tolerates_non_dicts() -> None:
    assert config_section(None, "x") == {}
    assert config_section({"x": 3}, "x") == {}
    assert config_section({"x": {"a": 1}}, "x") == {"a": 1}


def test_ensure_screenshots_dir_creates_nested_dir(tmp_path: Path) -> None:
    out = ensure_screenshots_dir(tmp_path)
    assert out == tmp_path / "data" / "screenshot"
    assert out.is_dir()
    # 2 回目も例外にならない
    assert ensure_screenshots_dir(tmp_path) == out


def test_project_root_is_nearest_dir_with_configs(tmp_path: Path) -> None:
    (tmp_path / "configs").mkdir()
    nested = tmp_path / "src" / "util"
    nested.mkdir(parents=True)
    assert _find_project_root(nested) == tmp_path
