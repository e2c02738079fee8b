"""Config file loading."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from leafsync.contracts.config import LatticeConfig, PanelSource
from leafsync.contracts.exceptions import ConfigError
from leafsync.contracts.panel import HtmlWidget


def _resolve_path(value: Path, *, base_dir: Path) -> Path:
    if value.is_absolute():
        return value
    return (base_dir / value).resolve()


def load_config(path: str | Path) -> LatticeConfig:
    """Load and validate config from JSON, resolving relative paths against config directory."""
    config_path = Path(path).expanduser().resolve()
    config_dir = config_path.parent

    try:
        raw_payload: Any = json.loads(config_path.read_text(encoding="utf-8"))
        parsed = LatticeConfig.model_validate(raw_payload)
    except OSError as exc:
        raise ConfigError(f"failed reading config file: {config_path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in config file: {config_path}") from exc
    except ValidationError as exc:
        raise ConfigError(f"invalid config: {exc}") from exc

    resolved_panels = [
        PanelSource(path=_resolve_path(panel.path, base_dir=config_dir), element_id=panel.element_id)
        for panel in parsed.panels
    ]
    return parsed.model_copy(
        update={
            "panels": resolved_panels,
            "output": _resolve_path(parsed.output, base_dir=config_dir),
        }
    )


def load_panels(config: LatticeConfig) -> list[HtmlWidget]:
    widgets: list[HtmlWidget] = []
    for panel in config.panels:
        try:
            html = panel.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"failed reading panel file: {panel.path}") from exc
        widgets.append(HtmlWidget(html=html, element_id=panel.element_id))
    return widgets
