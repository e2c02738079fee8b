"""Public API surface for leafsync."""

__version__ = "0.1.0"

from leafsync.bootstrap import BootstrapEmitter, BootstrapProgram, BootstrapReport
from leafsync.config import load_config, load_panels
from leafsync.contracts.config import HostBinding, HtmlDependency, LatticeConfig, LatticeOptions, PanelSource
from leafsync.contracts.exceptions import (
    BootstrapError,
    ConfigError,
    LeafSyncError,
    PanelError,
    RenderError,
    SyncSpecError,
)
from leafsync.contracts.host import MapHost, RenderCompletion, SyncableMap
from leafsync.contracts.layout import LayoutPlan, PanelPlacement
from leafsync.contracts.panel import HtmlWidget, MapWidget, PanelDescriptor
from leafsync.contracts.sync import LinkCommand, SyncGroup
from leafsync.layout import LayoutPlanner
from leafsync.linking import LinkCommandGenerator, SyncGroupResolver
from leafsync.panels import PanelNormalizer
from leafsync.renderers import HtmlRenderer, create_renderer
from leafsync.view import LatticeView, compose, lattice_view, sync

__all__ = [
    "BootstrapEmitter",
    "BootstrapError",
    "BootstrapProgram",
    "BootstrapReport",
    "ConfigError",
    "HostBinding",
    "HtmlDependency",
    "HtmlRenderer",
    "HtmlWidget",
    "LatticeConfig",
    "LatticeOptions",
    "LatticeView",
    "LayoutPlan",
    "LayoutPlanner",
    "LeafSyncError",
    "LinkCommand",
    "LinkCommandGenerator",
    "MapHost",
    "MapWidget",
    "PanelDescriptor",
    "PanelError",
    "PanelNormalizer",
    "PanelPlacement",
    "PanelSource",
    "RenderCompletion",
    "RenderError",
    "SyncGroup",
    "SyncGroupResolver",
    "SyncSpecError",
    "SyncableMap",
    "__version__",
    "compose",
    "create_renderer",
    "lattice_view",
    "load_config",
    "load_panels",
    "sync",
]
