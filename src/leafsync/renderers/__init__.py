"""View renderer implementations and factory."""

from leafsync.renderers.factory import create_renderer
from leafsync.renderers.html import HtmlRenderer

__all__ = ["HtmlRenderer", "create_renderer"]
