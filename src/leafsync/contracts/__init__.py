"""Public contracts for leafsync."""

from leafsync.contracts.config import (
    HostBinding,
    HtmlDependency,
    LatticeConfig,
    LatticeOptions,
    PanelSource,
    leaflet_sync_dependency,
)
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
from leafsync.contracts.panel import HtmlWidget, MapWidget, PanelDescriptor, WidgetConverter
from leafsync.contracts.renderer import ViewRenderer
from leafsync.contracts.sync import LinkCommand, SyncGroup, SyncSpec

__all__ = [
    "BootstrapError",
    "HostBinding",
    "ConfigError",
    "HtmlDependency",
    "HtmlWidget",
    "LatticeConfig",
    "LatticeOptions",
    "LayoutPlan",
    "LeafSyncError",
    "LinkCommand",
    "MapHost",
    "MapWidget",
    "PanelDescriptor",
    "PanelError",
    "PanelPlacement",
    "PanelSource",
    "RenderCompletion",
    "RenderError",
    "SyncGroup",
    "SyncSpec",
    "SyncSpecError",
    "SyncableMap",
    "ViewRenderer",
    "WidgetConverter",
    "leaflet_sync_dependency",
]
