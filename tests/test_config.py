from __future__ import annotations

import json
from pathlib import Path

import pytest

from leafsync.config import load_config, load_panels
from leafsync.contracts.config import HostBinding
from leafsync.contracts.exceptions import ConfigError


def _write_config(tmp_path: Path, payload: dict) -> Path:
    path = tmp_path / "lattice.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_load_config_resolves_relative_paths(tmp_path: Path) -> None:
    config_path = _write_config(
        tmp_path,
        {
            "panels": [{"path": "maps/a.html", "element_id": "a"}, {"path": "/abs/b.html", "element_id": "b"}],
            "options": {"ncol": 1, "sync": [[0, 1]], "sync_cursor": True},
            "output": "out/page.html",
            "binding": "globals",
        },
    )

    config = load_config(config_path)

    assert config.panels[0].path == (tmp_path / "maps" / "a.html").resolve()
    assert config.panels[0].element_id == "a"
    assert config.panels[1].path == Path("/abs/b.html")
    assert config.output == (tmp_path / "out" / "page.html").resolve()
    assert config.options.sync == [[0, 1]]
    assert config.options.sync_cursor is True
    assert config.binding is HostBinding.GLOBALS


def test_load_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="failed reading config file"):
        load_config(tmp_path / "nope.json")


def test_load_config_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "lattice.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ConfigError, match="invalid JSON in config file"):
        load_config(path)


def test_load_config_schema_mismatch(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path, {"panels": [], "options": {"ncol": 0}})

    with pytest.raises(ConfigError, match="invalid config"):
        load_config(config_path)


def test_load_panels_reads_fragments(tmp_path: Path) -> None:
    (tmp_path / "a.html").write_text("<p>a</p>", encoding="utf-8")
    config = load_config(_write_config(tmp_path, {"panels": [{"path": "a.html", "element_id": "map-a"}]}))

    widgets = load_panels(config)

    assert [(widget.html, widget.element_id) for widget in widgets] == [("<p>a</p>", "map-a")]


def test_load_panels_missing_fragment(tmp_path: Path) -> None:
    config = load_config(_write_config(tmp_path, {"panels": [{"path": "gone.html", "element_id": "gone"}]}))

    with pytest.raises(ConfigError, match="failed reading panel file"):
        load_panels(config)


def test_load_config_requires_panel_element_id(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path, {"panels": [{"path": "a.html"}]})

    with pytest.raises(ConfigError, match="element_id"):
        load_config(config_path)
