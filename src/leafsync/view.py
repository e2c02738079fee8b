"""Composition root: turn widgets and options into a :class:`LatticeView`."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from leafsync.bootstrap import BootstrapEmitter, BootstrapProgram
from leafsync.contracts.config import HostBinding, HtmlDependency, LatticeOptions, leaflet_sync_dependency
from leafsync.contracts.exceptions import ConfigError, RenderError
from leafsync.contracts.layout import LayoutPlan
from leafsync.contracts.panel import PanelDescriptor, WidgetConverter
from leafsync.contracts.renderer import ViewRenderer
from leafsync.contracts.sync import LinkCommand, SyncGroup, SyncSpec
from leafsync.layout import LayoutPlanner
from leafsync.linking import LinkCommandGenerator, SyncGroupResolver
from leafsync.panels import PanelNormalizer, generate_element_id
from leafsync.renderers import create_renderer

_LOG = logging.getLogger(__name__)


class LatticeView:
    """Composed, embeddable grid of map panels with its link bootstrap attached."""

    def __init__(
        self,
        *,
        panels: list[PanelDescriptor],
        layout: LayoutPlan,
        groups: list[SyncGroup],
        bootstrap: BootstrapProgram,
        dependencies: list[HtmlDependency],
        title: str = "leafsync",
    ) -> None:
        self.panels = panels
        self.layout = layout
        self.groups = groups
        self.bootstrap = bootstrap
        self.dependencies = dependencies
        self.title = title

    @property
    def commands(self) -> list[LinkCommand]:
        return self.bootstrap.commands

    def to_html(self, renderer: ViewRenderer | None = None) -> str:
        return (renderer or create_renderer("html")).render(self)

    def render_fragment(self, renderer: ViewRenderer | None = None) -> str:
        return (renderer or create_renderer("html")).render_fragment(self)

    def save(self, path: str | Path, renderer: ViewRenderer | None = None) -> Path:
        output = Path(path).expanduser()
        try:
            output.write_text(self.to_html(renderer), encoding="utf-8")
        except OSError as exc:
            raise RenderError(f"failed writing view: {output}") from exc
        _LOG.debug("wrote %d panel(s) to %s", len(self.panels), output)
        return output

    def _repr_html_(self) -> str:
        return self.render_fragment()

    def __repr__(self) -> str:
        return f"LatticeView(panels={len(self.panels)}, ncol={self.layout.ncol}, commands={len(self.commands)})"


def compose(
    widgets: tuple[Any, ...],
    options: LatticeOptions,
    *,
    converter: WidgetConverter | None = None,
    binding: HostBinding = HostBinding.HTMLWIDGETS,
    container_selector: str | None = None,
    dependency_src: str | None = None,
    id_factory: Callable[[], str] = generate_element_id,
    title: str = "leafsync",
) -> LatticeView:
    """Plan layout and sync wiring for ``widgets`` under validated ``options``.

    Raises:
        ConfigError: Invalid ``ncol``, sync specification or panel input. Raised
            before any layout or command is produced.
    """
    panels = PanelNormalizer(converter, id_factory=id_factory).normalize(*widgets)
    groups = SyncGroupResolver().resolve(options.sync, len(panels))
    layout = LayoutPlanner().plan(len(panels), options.ncol)
    commands = LinkCommandGenerator(panels).generate(
        groups,
        sync_cursor=options.sync_cursor,
        no_initial_sync=options.no_initial_sync,
    )
    bootstrap = BootstrapEmitter(binding=binding, container_selector=container_selector).emit(commands)
    dependency = leaflet_sync_dependency(dependency_src) if dependency_src else leaflet_sync_dependency()

    _LOG.debug(
        "composed %d panel(s) in %d column(s) with %d link command(s)", len(panels), layout.ncol, len(commands)
    )
    return LatticeView(
        panels=panels,
        layout=layout,
        groups=groups,
        bootstrap=bootstrap,
        dependencies=[dependency],
        title=title,
    )


def build_options(*, ncol: Any, sync: Any, sync_cursor: Any, no_initial_sync: Any) -> LatticeOptions:
    try:
        return LatticeOptions(ncol=ncol, sync=sync, sync_cursor=sync_cursor, no_initial_sync=no_initial_sync)
    except ValidationError as exc:
        raise ConfigError(f"invalid lattice options: {exc}") from exc


def lattice_view(
    *widgets: Any,
    ncol: int = 2,
    sync: SyncSpec = "none",
    sync_cursor: bool = False,
    no_initial_sync: bool = True,
    **kwargs: Any,
) -> LatticeView:
    """Lay out two or more map widgets in a grid, optionally syncing panels.

    ``sync`` is ``"all"``, ``"none"`` or a list of 0-based panel index groups,
    e.g. ``[[0, 2], [1, 3]]`` links panels 0 & 2 and panels 1 & 3. Panels are
    numbered left to right, top to bottom. Extra keyword arguments are passed to
    :func:`compose`.
    """
    options = build_options(ncol=ncol, sync=sync, sync_cursor=sync_cursor, no_initial_sync=no_initial_sync)
    return compose(widgets, options, **kwargs)


def sync(
    *widgets: Any,
    ncol: int = 2,
    sync: SyncSpec = "all",
    sync_cursor: bool = True,
    no_initial_sync: bool = True,
    **kwargs: Any,
) -> LatticeView:
    """Convenience wrapper of :func:`lattice_view` that links every panel by default."""
    return lattice_view(
        *widgets,
        ncol=ncol,
        sync=sync,
        sync_cursor=sync_cursor,
        no_initial_sync=no_initial_sync,
        **kwargs,
    )
