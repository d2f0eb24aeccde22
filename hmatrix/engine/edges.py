"""Bundled edge curves drawn to the right of the label column.

An edge leaves the grid at its source row, bulges right by a reach that
grows with the index distance between its endpoints, and returns at its
target row. The five control points are smoothed with a bundle spline:
points are first pulled towards the straight chord by ``bundle_tension``,
then traced as a uniform cubic B-spline emitted as Bezier segments.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from hmatrix.engine.context import LayoutContext
from hmatrix.models.matrix import Edge
from hmatrix.models.scene import CurveRecord, PathSegment, Point

logger = logging.getLogger(__name__)

# B-spline -> Bezier weights over a sliding window of four control points
_BASIS_C1 = (0.0, 2 / 3, 1 / 3, 0.0)
_BASIS_C2 = (0.0, 1 / 3, 2 / 3, 0.0)
_BASIS_END = (0.0, 1 / 6, 2 / 3, 1 / 6)


def _dot4(w: Sequence[float], v: Sequence[float]) -> float:
    return w[0] * v[0] + w[1] * v[1] + w[2] * v[2] + w[3] * v[3]


def edge_reach(ctx: LayoutContext, source: int, target: int) -> float:
    """Horizontal bulge of the curve, proportional to index distance."""
    n = ctx.n_items
    if n < 2:
        return 0.0
    return (ctx.x_mid - ctx.options.edge_offset) * abs(source - target) / (n - 1)


def edge_strength(ctx: LayoutContext, value: float) -> float:
    lo = ctx.options.edge_min_val
    hi = ctx.options.edge_max_val
    return (value - lo) / (hi - lo)


def edge_opacity(ctx: LayoutContext, value: float) -> float:
    strength = edge_strength(ctx, value)
    if ctx.options.clamp_edge_opacity:
        return min(1.0, max(0.0, strength))
    return strength


def control_points(ctx: LayoutContext, source: int, target: int) -> tuple[Point, ...]:
    c = ctx.config.edge_tension
    from_ofs = ctx.offsets.label_offset(source)
    to_ofs = ctx.offsets.label_offset(target)
    reach = edge_reach(ctx, source, target)
    x0 = ctx.x_mid + ctx.options.edge_offset
    y_from = source + from_ofs + 0.5
    y_to = target + to_ofs + 0.5
    return (
        (x0, y_from),
        (x0 + c * reach, y_from),
        (x0 + reach, 0.5 * (source + target + from_ofs + to_ofs + 1)),
        (x0 + c * reach, y_to),
        (x0, y_to),
    )


def bundle(points: Sequence[Point], tension: float) -> list[Point]:
    """Pull points towards the straight line joining the first and last."""
    n = len(points) - 1
    if n <= 0:
        return list(points)
    x0, y0 = points[0]
    dx = points[n][0] - x0
    dy = points[n][1] - y0
    out = []
    for i, (x, y) in enumerate(points):
        t = i / n
        out.append(
            (
                tension * x + (1 - tension) * (x0 + t * dx),
                tension * y + (1 - tension) * (y0 + t * dy),
            )
        )
    return out


def basis_segments(points: Sequence[Point]) -> tuple[PathSegment, ...]:
    """Uniform cubic B-spline through ``points`` as M/L/C path segments.

    The curve is clamped at both ends by repeating the end points, so it
    starts exactly at the first point and ends exactly at the last.
    """
    if len(points) < 3:
        return tuple(
            PathSegment("M" if k == 0 else "L", (p,)) for k, p in enumerate(points)
        )

    n = len(points)
    x0, y0 = points[0]
    x1, y1 = points[1]
    px = [x0, x0, x0, x1]
    py = [y0, y0, y0, y1]
    segments = [
        PathSegment("M", ((x0, y0),)),
        PathSegment("L", ((_dot4(_BASIS_END, px), _dot4(_BASIS_END, py)),)),
    ]

    padded = list(points) + [points[-1]]
    for i in range(2, n + 1):
        px = px[1:] + [padded[i][0]]
        py = py[1:] + [padded[i][1]]
        segments.append(
            PathSegment(
                "C",
                (
                    (_dot4(_BASIS_C1, px), _dot4(_BASIS_C1, py)),
                    (_dot4(_BASIS_C2, px), _dot4(_BASIS_C2, py)),
                    (_dot4(_BASIS_END, px), _dot4(_BASIS_END, py)),
                ),
            )
        )
    segments.append(PathSegment("L", (tuple(padded[n]),)))
    return tuple(segments)


def edge_curve(ctx: LayoutContext, source: int, target: int, value: float) -> CurveRecord:
    points = control_points(ctx, source, target)
    smoothed = bundle(points, ctx.config.bundle_tension)
    return CurveRecord(
        control_points=points,
        segments=basis_segments(smoothed),
        strength=edge_strength(ctx, value),
        opacity=edge_opacity(ctx, value),
        classes=("line", f"e{source}", f"e{target}"),
    )


def build_edges(ctx: LayoutContext) -> tuple[CurveRecord, ...]:
    edges: list[Edge] = ctx.matrix.edges or []
    curves = tuple(edge_curve(ctx, e.source, e.target, e.value) for e in edges)
    out_of_range = sum(1 for c in curves if not 0 <= c.strength <= 1)
    if out_of_range:
        logger.info(
            "%d of %d edges fall outside [%s, %s]%s",
            out_of_range,
            len(curves),
            ctx.options.edge_min_val,
            ctx.options.edge_max_val,
            "; opacity clamped" if ctx.options.clamp_edge_opacity else "",
        )
    return curves
