"""Flatten widget input into uniquely addressable panels."""

from __future__ import annotations

import logging
import secrets
from collections.abc import Callable
from typing import Any

from leafsync.contracts.exceptions import PanelError
from leafsync.contracts.panel import MapWidget, PanelDescriptor, WidgetConverter

_LOG = logging.getLogger(__name__)
_ID_PREFIX = "htmlwidget"


def generate_element_id() -> str:
    """Return a random ``htmlwidget-<hex>`` DOM id."""
    return f"{_ID_PREFIX}-{secrets.token_hex(4)}"


class PanelNormalizer:
    """Turn variadic or list-style widget input into ordered panel descriptors.

    Widgets without an ``element_id`` receive a generated one, written back onto
    the widget so that its rendered container and the bootstrap agree on it.
    Passing the same widget object twice raises :class:`PanelError`.
    """

    def __init__(
        self,
        converter: WidgetConverter | None = None,
        *,
        id_factory: Callable[[], str] = generate_element_id,
    ) -> None:
        self._converter = converter
        self._id_factory = id_factory

    def normalize(self, *widgets: Any) -> list[PanelDescriptor]:
        items = self._flatten(widgets)
        converted = [self._as_widget(index, item) for index, item in enumerate(items)]

        first_seen: dict[int, int] = {}
        for index, widget in enumerate(converted):
            earlier = first_seen.setdefault(id(widget), index)
            if earlier != index:
                raise PanelError(f"panel {index} repeats the widget object of panel {earlier}")

        taken: set[str] = set()
        for index, widget in enumerate(converted):
            if widget.element_id is None:
                continue
            if widget.element_id in taken:
                raise PanelError(f"duplicate panel id '{widget.element_id}' at panel {index}")
            taken.add(widget.element_id)

        panels: list[PanelDescriptor] = []
        for index, widget in enumerate(converted):
            if widget.element_id is None:
                widget.element_id = self._fresh_id(taken)
                taken.add(widget.element_id)
            panels.append(PanelDescriptor(index=index, id=widget.element_id, content=widget))

        _LOG.debug("normalized %d panel(s)", len(panels))
        return panels

    @staticmethod
    def _flatten(widgets: tuple[Any, ...]) -> list[Any]:
        if len(widgets) == 1 and isinstance(widgets[0], (list, tuple)):
            return list(widgets[0])
        return list(widgets)

    def _as_widget(self, index: int, item: Any) -> MapWidget:
        if isinstance(item, MapWidget):
            return item
        if self._converter is None:
            raise PanelError(f"panel {index} is not a map widget: {type(item).__name__}")
        converted = self._converter(item)
        if not isinstance(converted, MapWidget):
            raise PanelError(f"converter returned a non-widget for panel {index}: {type(converted).__name__}")
        return converted

    def _fresh_id(self, taken: set[str]) -> str:
        while True:
            candidate = self._id_factory()
            if candidate not in taken:
                return candidate
