"""Geometry records produced by the layout engine.

Records are frozen. The SVG serializer (or any other renderer) turns a
Scene into markup; nothing in here knows about markup.
"""

from __future__ import annotations

from dataclasses import dataclass

Point = tuple[float, float]


@dataclass(frozen=True)
class Translate:
    dx: float
    dy: float


@dataclass(frozen=True)
class Rotate:
    angle: float
    cx: float
    cy: float


Transform = tuple[Translate | Rotate, ...]


@dataclass(frozen=True)
class PolygonRecord:
    """A filled rhombus: a heatmap cell or a colorbar swatch."""

    points: tuple[Point, ...]
    fill: str
    transform: Transform = ()
    # Item identifiers for hover-linking, e.g. ("n3", "n1")
    classes: tuple[str, ...] = ()


@dataclass(frozen=True)
class TextRecord:
    """A text placement: an item label or a colorbar tick."""

    x: float
    y: float
    text: str
    transform: Transform = ()
    anchor: str | None = None
    baseline: str = "central"
    classes: tuple[str, ...] = ()


@dataclass(frozen=True)
class PathSegment:
    """One path command. ``command`` is "M", "L" or "C"."""

    command: str
    points: tuple[Point, ...]


@dataclass(frozen=True)
class CurveRecord:
    """A bundled edge curve."""

    control_points: tuple[Point, ...]
    segments: tuple[PathSegment, ...]
    # Raw normalized edge value; may fall outside [0, 1]
    strength: float
    opacity: float
    classes: tuple[str, ...] = ()


@dataclass(frozen=True)
class Scene:
    """All geometry of one render, grouped in document order."""

    viewbox: tuple[float, float, float, float]
    width: float
    height: float
    cells: tuple[PolygonRecord, ...] = ()
    labels: tuple[TextRecord, ...] = ()
    # None when the input carries no edges at all
    edges: tuple[CurveRecord, ...] | None = None
    # None when the colorbar is not shown
    swatches: tuple[PolygonRecord, ...] | None = None
    ticks: tuple[TextRecord, ...] | None = None
    # Ids of the layout stages that produced this scene
    stages: tuple[str, ...] = ()

    @property
    def has_edges(self) -> bool:
        return self.edges is not None

    @property
    def has_colorbar(self) -> bool:
        return self.swatches is not None
