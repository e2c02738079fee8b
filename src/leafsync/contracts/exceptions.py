"""Exception hierarchy for leafsync.

All leafsync exceptions inherit from :class:`LeafSyncError`, so callers can
catch any library error with a single ``except`` clause while still handling
specific failure modes.
"""

from __future__ import annotations


class LeafSyncError(Exception):
    """Base exception for all leafsync errors."""


class ConfigError(LeafSyncError):
    """Option or configuration file validation failure."""


class SyncSpecError(ConfigError):
    """Raised when a sync specification is malformed or addresses unknown panels.

    Attributes:
        errors: Individual validation error messages.
    """

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        joined = "\n".join(f"  - {e}" for e in errors)
        super().__init__(f"Sync specification invalid:\n{joined}")


class PanelError(ConfigError):
    """Panel input cannot be turned into a uniquely addressable map widget."""


class BootstrapError(LeafSyncError):
    """Bootstrap program misuse, e.g. running it a second time."""


class RenderError(LeafSyncError):
    """View rendering or output failure."""
