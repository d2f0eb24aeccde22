"""Layout constants that shape the diamond grid."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LayoutConfig:
    """Fixed geometry constants. Defaults reproduce the reference rendering."""

    # Per-cluster spacing in grid units
    cluster_ofs: float = 0.25

    # Edge curves: intermediate control points sit at edge_tension * reach
    edge_tension: float = 0.7
    # Bundle straightening; 1.0 keeps the control points as they are
    bundle_tension: float = 1.0

    # Colorbar is drawn this far to the left of the grid
    colorbar_shift: float = -2.0
    tick_rotation: float = -45.0
    tick_decimals: int = 2

    # viewBox origin and vertical padding beyond the horizontal extent
    viewbox_origin: tuple[float, float] = (-0.25, -0.5)
    viewbox_extra_height: float = 0.25
