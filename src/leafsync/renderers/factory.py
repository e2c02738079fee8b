"""Renderer factory."""

from __future__ import annotations

from leafsync.contracts.exceptions import RenderError
from leafsync.contracts.renderer import ViewRenderer
from leafsync.renderers.html import HtmlRenderer

RENDERERS: dict[str, type[ViewRenderer]] = {"html": HtmlRenderer}


def create_renderer(name: str, **kwargs: object) -> ViewRenderer:
    renderer_cls = RENDERERS.get(name)
    if renderer_cls is None:
        raise RenderError(f"Unknown renderer: {name}")
    return renderer_cls(**kwargs)
