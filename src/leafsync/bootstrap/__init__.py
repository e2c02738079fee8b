"""Deferred runtime bootstrap that links live map instances."""

from leafsync.bootstrap.emitter import BootstrapEmitter, BootstrapProgram, BootstrapReport

__all__ = ["BootstrapEmitter", "BootstrapProgram", "BootstrapReport"]
