"""Renderer contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from leafsync.view import LatticeView


class ViewRenderer(ABC):
    @abstractmethod
    def render(self, view: LatticeView) -> str: ...  # pragma: no cover

    @abstractmethod
    def render_fragment(self, view: LatticeView) -> str: ...  # pragma: no cover
