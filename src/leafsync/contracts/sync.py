"""Sync grouping and link command contracts."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Literal, TypeAlias

from pydantic import BaseModel, Field, StrictInt

SyncSpec: TypeAlias = Literal["all", "none"] | Sequence[Sequence[int]]


class SyncGroup(BaseModel):
    indices: tuple[StrictInt, ...] = Field(default_factory=tuple)

    model_config = {"frozen": True}


class LinkCommand(BaseModel):
    """Make panel ``source_id`` follow and broadcast view changes to ``target_id``."""

    source_id: str
    target_id: str
    sync_cursor: bool
    no_initial_sync: bool

    model_config = {"frozen": True}

    def to_payload(self) -> dict[str, str | bool]:
        return {
            "source": self.source_id,
            "target": self.target_id,
            "syncCursor": self.sync_cursor,
            "noInitialSync": self.no_initial_sync,
        }
