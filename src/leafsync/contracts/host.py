"""Contracts for the environment that mounts widgets and runs the bootstrap."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol


class SyncableMap(Protocol):
    def sync(self, other: Any, *, sync_cursor: bool, no_initial_sync: bool) -> None: ...


class MapHost(Protocol):
    """Live view of mounted map containers after rendering completed."""

    def container_ids(self) -> list[str]: ...

    def find_map(self, element_id: str) -> SyncableMap | None: ...


class RenderCompletion(Protocol):
    """Future-like one-time signal fired by the host once every widget rendered.

    ``concurrent.futures.Future`` and ``asyncio.Future`` both satisfy it.
    """

    def add_done_callback(self, fn: Callable[[Any], object], /) -> None: ...
