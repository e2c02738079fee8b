"""Grid layout planning."""

from __future__ import annotations

from leafsync.contracts.exceptions import ConfigError
from leafsync.contracts.layout import LayoutPlan, PanelPlacement

# Percent kept free per panel so bordered panels still fit on one line.
_GUTTER_PERCENT = 1


class LayoutPlanner:
    """Project ``(panel_count, ncol)`` into per-panel grid geometry."""

    def plan(self, panel_count: int, ncol: int) -> LayoutPlan:
        if isinstance(ncol, bool) or not isinstance(ncol, int) or ncol < 1:
            raise ConfigError(f"ncol must be a positive integer, got {ncol!r}")
        if panel_count < 0:
            raise ConfigError(f"panel_count must not be negative, got {panel_count}")

        placements = [
            PanelPlacement(index=index, row=index // ncol, column=index % ncol) for index in range(panel_count)
        ]
        return LayoutPlan(
            panel_count=panel_count,
            ncol=ncol,
            width_percent=max(100 // ncol - _GUTTER_PERCENT, 1),
            placements=placements,
        )
