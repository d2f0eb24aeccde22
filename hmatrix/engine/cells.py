"""Heatmap cell and label geometry.

Each cell is a unit rhombus in a grid rotated by 45 degrees. Cells on the
same diagonal j share an item: cell (row, col) sits on diagonal j = col - 1
and is shifted half a unit right and down per row.
"""

from __future__ import annotations

import numpy as np

from hmatrix.engine.context import LayoutContext
from hmatrix.engine.indexing import decode, pair_table
from hmatrix.models.scene import Point, PolygonRecord, TextRecord, Transform, Translate

# Vertex offsets from the apex: top, left, bottom, right
_RHOMBUS = np.array([[0.0, 0.0], [-0.5, 0.5], [0.0, 1.0], [0.5, 0.5]])


def rhombus(x_mid: float, row: int, diag: int) -> tuple[Point, ...]:
    """Four vertices of the rhombus at (row, diagonal) below x_mid."""
    top_x = x_mid - 0.5 * (diag + 1) + row * 0.5
    top_y = diag * 0.5 + row * 0.5 + 0.5
    vertices = np.array([top_x, top_y]) + _RHOMBUS
    return tuple((float(x), float(y)) for x, y in vertices)


def cell_polygon(ctx: LayoutContext, i: int) -> tuple[Point, ...]:
    row, col = decode(i)
    return rhombus(ctx.x_mid, row, col - 1)


def cell_transform(ctx: LayoutContext, i: int) -> tuple[float, float]:
    row, col = decode(i)
    return ctx.offsets.offset(row, col)


def cell_tag(i: int) -> tuple[int, int]:
    """The two items a cell links, as (col, row)."""
    row, col = decode(i)
    return (col, row)


def _translate(ctx: LayoutContext, dx: float, dy: float) -> Transform:
    if not ctx.matrix.has_clusters:
        return ()
    return (Translate(dx, dy),)


def _cell_record(ctx: LayoutContext, value: float, row: int, col: int) -> PolygonRecord:
    return PolygonRecord(
        points=rhombus(ctx.x_mid, row, col - 1),
        fill=ctx.scale.quantize(value),
        transform=_translate(ctx, *ctx.offsets.offset(row, col)),
        classes=(f"n{col}", f"n{row}"),
    )


def build_cells(ctx: LayoutContext) -> tuple[PolygonRecord, ...]:
    pairs = pair_table(ctx.n_items)
    return tuple(
        _cell_record(ctx, value, int(row), int(col))
        for value, (row, col) in zip(ctx.matrix.values, pairs)
    )


def label_anchor(ctx: LayoutContext, item: int) -> Point:
    return (ctx.x_mid, item + 0.5)


def build_labels(ctx: LayoutContext) -> tuple[TextRecord, ...]:
    labels = []
    for k, text in enumerate(ctx.matrix.labels):
        x, y = label_anchor(ctx, k)
        labels.append(
            TextRecord(
                x=x,
                y=y,
                text=text,
                transform=_translate(ctx, 0, ctx.offsets.label_offset(k)),
                classes=(f"l{k}",),
            )
        )
    return tuple(labels)
