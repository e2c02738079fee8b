"""Panel normalization."""

from leafsync.panels.normalizer import PanelNormalizer, generate_element_id

__all__ = ["PanelNormalizer", "generate_element_id"]
