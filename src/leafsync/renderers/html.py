"""HTML renderer implementation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from markupsafe import Markup

from leafsync.contracts.renderer import ViewRenderer
from leafsync.templating import get_template

if TYPE_CHECKING:
    from leafsync.view import LatticeView


class HtmlRenderer(ViewRenderer):
    """Render a lattice as floated panel containers plus the bootstrap script."""

    def __init__(self, *, title: str | None = None) -> None:
        self._title = title

    def render_fragment(self, view: LatticeView) -> str:
        panels = [
            {"index": panel.index, "id": panel.id, "html": Markup(panel.content.render_html())}
            for panel in view.panels
        ]
        return get_template("lattice_fragment.html.j2").render(
            ncol=view.layout.ncol,
            panels=panels,
            style=view.layout.container_style,
            dependencies=view.dependencies,
            bootstrap_script=Markup(view.bootstrap.render_script()),
        )

    def render(self, view: LatticeView) -> str:
        return get_template("lattice_page.html.j2").render(
            title=self._title or view.title,
            fragment=Markup(self.render_fragment(view)),
        )
