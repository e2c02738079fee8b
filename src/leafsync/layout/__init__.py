"""Grid layout planning."""

from leafsync.layout.planner import LayoutPlanner

__all__ = ["LayoutPlanner"]
