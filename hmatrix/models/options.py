"""Render options (canvas size and edge overlay scaling)."""

from __future__ import annotations

from pydantic import BaseModel, Field, StrictBool, StrictFloat, model_validator


class RenderOptions(BaseModel):
    height: StrictFloat = Field(default=1000, description="Output canvas height")
    width: StrictFloat = Field(default=1000, description="Output canvas width")
    edge_min_val: StrictFloat = Field(default=0.0, description="Edge value mapped to opacity 0")
    edge_max_val: StrictFloat = Field(default=1.0, description="Edge value mapped to opacity 1")
    edge_offset: StrictFloat = Field(
        default=4, description="Horizontal clearance between the grid and the edge curves"
    )
    clamp_edge_opacity: StrictBool = Field(
        default=True, description="Clamp edge opacity to [0, 1]"
    )

    model_config = {"extra": "ignore", "frozen": True}

    @model_validator(mode="after")
    def _check_edge_range(self) -> RenderOptions:
        if self.edge_max_val == self.edge_min_val:
            raise ValueError("edge_min_val and edge_max_val must differ")
        return self
