"""Expansion of sync groups into directed link commands."""

from __future__ import annotations

import itertools
import logging

from leafsync.contracts.panel import PanelDescriptor
from leafsync.contracts.sync import LinkCommand, SyncGroup

_LOG = logging.getLogger(__name__)


class LinkCommandGenerator:
    """Emit one directed link per ordered pair of distinct panels in each group.

    Both ``(a, b)`` and ``(b, a)`` are produced, so every link is effectively
    bidirectional. Self pairs are dropped. Commands from overlapping groups
    are concatenated without deduplication.
    """

    def __init__(self, panels: list[PanelDescriptor]) -> None:
        self._ids = [panel.id for panel in panels]

    def generate(
        self,
        groups: list[SyncGroup],
        *,
        sync_cursor: bool,
        no_initial_sync: bool,
    ) -> list[LinkCommand]:
        commands: list[LinkCommand] = []
        for group in groups:
            for source, target in itertools.product(group.indices, repeat=2):
                source_id, target_id = self._ids[source], self._ids[target]
                if source_id == target_id:
                    continue
                commands.append(
                    LinkCommand(
                        source_id=source_id,
                        target_id=target_id,
                        sync_cursor=sync_cursor,
                        no_initial_sync=no_initial_sync,
                    )
                )
        _LOG.debug("generated %d link command(s) from %d group(s)", len(commands), len(groups))
        return commands
