"""Bootstrap emission: registry build followed by link command application.

A :class:`BootstrapProgram` is a structured description of the one-shot step
that runs after the host signals that every widget has rendered. It can be
serialized to a browser script (:meth:`BootstrapProgram.render_script`) or
executed against any :class:`~leafsync.contracts.host.MapHost`
(:meth:`BootstrapProgram.run`), e.g. when the host is driven from Python.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, Field

from leafsync.contracts.config import HostBinding
from leafsync.contracts.exceptions import BootstrapError
from leafsync.contracts.host import MapHost, RenderCompletion, SyncableMap
from leafsync.contracts.sync import LinkCommand
from leafsync.templating import get_template

_LOG = logging.getLogger(__name__)
_SCRIPT_TEMPLATE = "bootstrap.js.j2"


class BootstrapReport(BaseModel):
    registered: list[str] = Field(default_factory=list)
    applied: list[LinkCommand] = Field(default_factory=list)
    skipped: list[LinkCommand] = Field(default_factory=list)


class BootstrapProgram:
    """Single-shot bootstrap for one composed view."""

    def __init__(
        self,
        commands: list[LinkCommand],
        *,
        binding: HostBinding = HostBinding.HTMLWIDGETS,
        container_selector: str | None = None,
    ) -> None:
        self._commands = list(commands)
        self._binding = binding
        self._container_selector = container_selector or binding.default_selector
        self._report: BootstrapReport | None = None

    @property
    def commands(self) -> list[LinkCommand]:
        return list(self._commands)

    @property
    def binding(self) -> HostBinding:
        return self._binding

    @property
    def container_selector(self) -> str:
        return self._container_selector

    @property
    def report(self) -> BootstrapReport | None:
        return self._report

    def render_script(self) -> str:
        return get_template(_SCRIPT_TEMPLATE).render(
            binding=self._binding.value,
            container_selector=self._container_selector,
            commands=[command.to_payload() for command in self._commands],
        )

    def attach(self, completion: RenderCompletion) -> None:
        """Run once ``completion`` resolves with the :class:`MapHost` to link.

        A cancelled or failed completion leaves the panels unlinked.
        """
        completion.add_done_callback(self._on_render_complete)

    def run(self, host: MapHost) -> BootstrapReport:
        if self._report is not None:
            raise BootstrapError("bootstrap program already ran")
        report = BootstrapReport()
        self._report = report

        registry = self._build_registry(host)
        report.registered = list(registry)

        for command in self._commands:
            source = registry.get(command.source_id)
            target = registry.get(command.target_id)
            if source is None or target is None:
                _LOG.warning(
                    "skipping link %s -> %s: panel not mounted",
                    command.source_id,
                    command.target_id,
                )
                report.skipped.append(command)
                continue
            source.sync(target, sync_cursor=command.sync_cursor, no_initial_sync=command.no_initial_sync)
            report.applied.append(command)

        _LOG.debug("bootstrap applied %d link(s), skipped %d", len(report.applied), len(report.skipped))
        return report

    def _on_render_complete(self, completion: Any) -> None:
        if completion.cancelled():
            _LOG.debug("render completion cancelled; panels stay unlinked")
            return
        exc = completion.exception()
        if exc is not None:
            _LOG.warning("render completion failed; panels stay unlinked: %s", exc)
            return
        self.run(completion.result())

    @staticmethod
    def _build_registry(host: MapHost) -> dict[str, SyncableMap]:
        registry: dict[str, SyncableMap] = {}
        for element_id in host.container_ids():
            live_map = host.find_map(element_id)
            if live_map is not None:
                registry[element_id] = live_map
        return registry


class BootstrapEmitter:
    def __init__(
        self,
        *,
        binding: HostBinding = HostBinding.HTMLWIDGETS,
        container_selector: str | None = None,
    ) -> None:
        self._binding = binding
        self._container_selector = container_selector

    def emit(self, commands: list[LinkCommand]) -> BootstrapProgram:
        return BootstrapProgram(commands, binding=self._binding, container_selector=self._container_selector)
