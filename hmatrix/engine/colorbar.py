"""Color legend: one rhombus per palette entry along the top-left edge of the grid."""

from __future__ import annotations

from hmatrix.engine.cells import rhombus
from hmatrix.engine.context import LayoutContext
from hmatrix.models.scene import PolygonRecord, Rotate, TextRecord, Translate
from hmatrix.utils.math_helpers import format_number, round_decimals, round_half_up


def colorbar_visible(n_items: int, n_colors: int) -> bool:
    """The legend only fits while it is shorter than the grid edge."""
    return n_colors < n_items + 1


def colorbar_start(n_items: int, n_colors: int) -> int:
    """Diagonal of the first swatch; centers the legend along the edge."""
    return round_half_up(0.5 * (n_items - n_colors))


def build_swatches(ctx: LayoutContext) -> tuple[PolygonRecord, ...]:
    palette = ctx.matrix.value_colors
    start = colorbar_start(ctx.n_items, len(palette))
    shift = (Translate(ctx.config.colorbar_shift, 0),)
    return tuple(
        PolygonRecord(points=rhombus(ctx.x_mid, 0, k + start), fill=color, transform=shift)
        for k, color in enumerate(palette)
    )


def tick_position(ctx: LayoutContext, t: int) -> tuple[float, float]:
    m = len(ctx.matrix.value_colors)
    p = t * (m + 1) + colorbar_start(ctx.n_items, m)
    return (ctx.x_mid - 0.5 * p, 0.5 * p + 0.5)


def build_ticks(ctx: LayoutContext) -> tuple[TextRecord, ...]:
    ticks = []
    for t, value in enumerate(ctx.matrix.value_domain):
        x, y = tick_position(ctx, t)
        ticks.append(
            TextRecord(
                x=x,
                y=y,
                text=format_number(round_decimals(value, ctx.config.tick_decimals)),
                transform=(
                    Translate(ctx.config.colorbar_shift, 0),
                    Rotate(ctx.config.tick_rotation, x, y),
                ),
                anchor="start" if t == 0 else "end",
            )
        )
    return tuple(ticks)
