"""The built-in layout stages, in document order."""

from __future__ import annotations

from hmatrix.engine.cells import build_cells, build_labels
from hmatrix.engine.colorbar import build_swatches, build_ticks, colorbar_visible
from hmatrix.engine.context import LayoutContext
from hmatrix.engine.edges import build_edges
from hmatrix.engine.registry import Layer, stage
from hmatrix.models.scene import CurveRecord, PolygonRecord, TextRecord


def _has_edges(ctx: LayoutContext) -> bool:
    return ctx.matrix.has_edges


def _has_colorbar(ctx: LayoutContext) -> bool:
    return colorbar_visible(ctx.n_items, len(ctx.matrix.value_colors))


@stage(id="S0.01", layer=Layer.HEATMAP, target="cells", description="Heatmap cell rhombi")
def heatmap_cells(ctx: LayoutContext) -> tuple[PolygonRecord, ...]:
    return build_cells(ctx)


@stage(id="S1.01", layer=Layer.LABELS, target="labels", description="Item labels")
def item_labels(ctx: LayoutContext) -> tuple[TextRecord, ...]:
    return build_labels(ctx)


@stage(
    id="S2.01",
    layer=Layer.EDGES,
    target="edges",
    when=_has_edges,
    description="Bundled edge curves",
)
def edge_curves(ctx: LayoutContext) -> tuple[CurveRecord, ...]:
    return build_edges(ctx)


@stage(
    id="S3.01",
    layer=Layer.COLORBAR,
    target="swatches",
    when=_has_colorbar,
    description="Colorbar swatches",
)
def colorbar_swatches(ctx: LayoutContext) -> tuple[PolygonRecord, ...]:
    return build_swatches(ctx)


@stage(
    id="S3.02",
    layer=Layer.COLORBAR,
    target="ticks",
    when=_has_colorbar,
    description="Colorbar tick labels",
)
def colorbar_ticks(ctx: LayoutContext) -> tuple[TextRecord, ...]:
    return build_ticks(ctx)
