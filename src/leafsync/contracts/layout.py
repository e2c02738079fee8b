"""Layout contracts."""

from __future__ import annotations

from pydantic import BaseModel, Field, computed_field

BORDER_COLOR = "#BEBEBE"


class PanelPlacement(BaseModel):
    index: int
    row: int
    column: int

    model_config = {"frozen": True}


class LayoutPlan(BaseModel):
    panel_count: int
    ncol: int
    width_percent: int
    placements: list[PanelPlacement] = Field(default_factory=list)

    model_config = {"frozen": True}

    @computed_field  # type: ignore[prop-decorator]
    @property
    def container_style(self) -> str:
        return (
            "display:inline;"
            f"width:{self.width_percent}%;"
            "float:left;"
            "border-style:solid;"
            f"border-color:{BORDER_COLOR};"
            "border-width:1px 1px 1px 1px;"
        )

    @property
    def rows(self) -> list[list[int]]:
        grouped: list[list[int]] = []
        for placement in self.placements:
            if placement.row == len(grouped):
                grouped.append([])
            grouped[placement.row].append(placement.index)
        return grouped
