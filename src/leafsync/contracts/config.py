"""Configuration contracts."""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, StrictBool, StrictInt


class HostBinding(StrEnum):
    """How the bootstrap waits for rendering and finds live map instances.

    ``htmlwidgets`` runs as an HTMLWidgets post-render handler and resolves maps
    through ``HTMLWidgets.find(...).getMap()``. ``globals`` runs on window load
    and resolves maps declared as page globals named after their container id.
    """

    HTMLWIDGETS = "htmlwidgets"
    GLOBALS = "globals"

    @property
    def default_selector(self) -> str:
        return ".leaflet" if self is HostBinding.HTMLWIDGETS else ".folium-map"


class HtmlDependency(BaseModel):
    name: str
    version: str
    src: str
    script: str

    model_config = {"frozen": True}

    @property
    def script_url(self) -> str:
        return f"{self.src.rstrip('/')}/{self.script}"


def leaflet_sync_dependency(src: str = "lib/Leaflet.Sync-0.0.5") -> HtmlDependency:
    return HtmlDependency(name="Leaflet.Sync", version="0.0.5", src=src, script="L.Map.Sync.js")


class LatticeOptions(BaseModel):
    ncol: StrictInt = Field(default=2, ge=1)
    sync: Literal["all", "none"] | list[list[StrictInt]] = "none"
    sync_cursor: StrictBool = False
    no_initial_sync: StrictBool = True

    model_config = {"frozen": True}


class PanelSource(BaseModel):
    path: Path
    element_id: str


class LatticeConfig(BaseModel):
    panels: list[PanelSource]
    options: LatticeOptions = Field(default_factory=LatticeOptions)
    output: Path = Path("lattice.html")
    title: str = "leafsync"
    dependency_src: str = "lib/Leaflet.Sync-0.0.5"
    binding: HostBinding = HostBinding.HTMLWIDGETS
    container_selector: str | None = None

    model_config = {"frozen": True}
