"""Shared test fixtures for leafsync tests."""

from __future__ import annotations

import pytest

from leafsync.contracts.panel import HtmlWidget, PanelDescriptor
from tests.fakes.panels import make_panels, make_widgets


@pytest.fixture
def four_widgets() -> list[HtmlWidget]:
    """Four widgets with ids m0..m3."""
    return make_widgets(4)


@pytest.fixture
def four_panels() -> list[PanelDescriptor]:
    """Four panel descriptors with ids m0..m3."""
    return make_panels(4)


@pytest.fixture
def counter_ids():
    """Deterministic id factory yielding id-0, id-1, ..."""
    state = {"next": 0}

    def factory() -> str:
        value = f"id-{state['next']}"
        state["next"] += 1
        return value

    return factory
