"""Sync specification resolution."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from numbers import Integral
from typing import Any

from leafsync.contracts.exceptions import SyncSpecError
from leafsync.contracts.sync import SyncGroup

_LOG = logging.getLogger(__name__)


class SyncGroupResolver:
    """Resolve ``"all"``, ``"none"`` or an explicit list of index groups into sync groups.

    Groups are returned in the given order and are never merged or
    deduplicated; a panel listed in several groups is linked within each of them.
    """

    def resolve(self, spec: Any, panel_count: int) -> list[SyncGroup]:
        if isinstance(spec, str):
            if spec == "none":
                return []
            if spec == "all":
                return [SyncGroup(indices=tuple(range(panel_count)))]
            raise SyncSpecError([f"unknown sync mode '{spec}' (expected 'all', 'none' or a list of index groups)"])

        if not self._is_sequence(spec):
            raise SyncSpecError([f"sync must be 'all', 'none' or a list of index groups, got {type(spec).__name__}"])

        errors: list[str] = []
        groups: list[SyncGroup] = []
        for group_no, raw_group in enumerate(spec):
            if not self._is_sequence(raw_group):
                errors.append(f"group {group_no} must be a list of panel indices, got {type(raw_group).__name__}")
                continue
            before = len(errors)
            self._validate_indices(group_no, raw_group, panel_count, errors)
            if len(errors) == before:
                groups.append(SyncGroup(indices=tuple(int(index) for index in raw_group)))

        if errors:
            raise SyncSpecError(errors)

        _LOG.debug("resolved %d sync group(s) over %d panel(s)", len(groups), panel_count)
        return groups

    @staticmethod
    def _is_sequence(value: Any) -> bool:
        return isinstance(value, Sequence) and not isinstance(value, (str, bytes))

    @staticmethod
    def _validate_indices(group_no: int, group: Sequence[Any], panel_count: int, errors: list[str]) -> None:
        for index in group:
            if isinstance(index, bool) or not isinstance(index, Integral):
                errors.append(f"group {group_no} contains non-integer index {index!r}")
            elif not 0 <= index < panel_count:
                errors.append(f"group {group_no} index {index} out of range for {panel_count} panel(s)")
