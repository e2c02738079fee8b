"""Panel contracts."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict


@runtime_checkable
class MapWidget(Protocol):
    """Anything that renders as a map widget inside a DOM element named ``element_id``."""

    element_id: str | None

    def render_html(self) -> str: ...


WidgetConverter = Callable[[Any], MapWidget]


class PanelDescriptor(BaseModel):
    index: int
    id: str
    content: Any

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)


@dataclass
class HtmlWidget:
    """Map widget backed by a pre-rendered HTML fragment.

    The fragment is emitted unchanged. ``element_id`` must be the DOM id of the
    map container inside it (the htmlwidgets ``.leaflet`` div, or folium's
    ``.folium-map`` div), since that is the element the bootstrap resolves.
    """

    html: str
    element_id: str | None = None

    def render_html(self) -> str:
        return self.html
