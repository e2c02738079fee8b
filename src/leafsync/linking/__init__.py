"""Sync group resolution and link command generation."""

from leafsync.linking.commands import LinkCommandGenerator
from leafsync.linking.resolver import SyncGroupResolver

__all__ = ["LinkCommandGenerator", "SyncGroupResolver"]
