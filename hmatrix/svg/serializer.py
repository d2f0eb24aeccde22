"""Write SVG markup from a laid-out Scene."""

from __future__ import annotations

from html import escape

from hmatrix.models.scene import (
    CurveRecord,
    PathSegment,
    Point,
    PolygonRecord,
    Rotate,
    Scene,
    TextRecord,
    Transform,
    Translate,
)
from hmatrix.utils.math_helpers import format_number

DEFAULT_STYLES: dict[str, str] = {
    "svg": "background-color: #fff; font-size: 0.5px;",
    "polygon": "stroke: #555; stroke-width: 0.05;",
    ".line": "fill: none; stroke: #555; stroke-width: 0.1;",
    ".nodes": "stroke: #000; stroke-width: 0.5;",
}


def format_point(p: Point) -> str:
    return f"{format_number(p[0])},{format_number(p[1])}"


def format_points(points: tuple[Point, ...]) -> str:
    return " ".join(format_point(p) for p in points)


def format_transform(transform: Transform) -> str:
    parts = []
    for op in transform:
        if isinstance(op, Translate):
            parts.append(f"translate({format_number(op.dx)},{format_number(op.dy)})")
        elif isinstance(op, Rotate):
            parts.append(
                f"rotate({format_number(op.angle)} {format_number(op.cx)},{format_number(op.cy)})"
            )
        else:
            raise TypeError(f"Unknown transform operation: {op!r}")
    return " ".join(parts)


def format_path(segments: tuple[PathSegment, ...]) -> str:
    """Path data in compact form: "M1,2L3,4C5,6,7,8,9,10"."""
    return "".join(seg.command + ",".join(format_point(p) for p in seg.points) for seg in segments)


def _attrs(**attrs: str | None) -> str:
    # Keyword names use "_" where SVG uses "-"
    return " ".join(
        f'{k.rstrip("_").replace("_", "-")}="{escape(v)}"' for k, v in attrs.items() if v
    )


def _polygon(rec: PolygonRecord) -> str:
    attrs = _attrs(
        points=format_points(rec.points),
        transform=format_transform(rec.transform),
        fill=rec.fill,
        class_=" ".join(rec.classes),
    )
    return f"<polygon {attrs} />"


def _text(rec: TextRecord) -> str:
    attrs = _attrs(
        x=format_number(rec.x),
        y=format_number(rec.y),
        transform=format_transform(rec.transform),
        dominant_baseline=rec.baseline,
        text_anchor=rec.anchor,
        class_=" ".join(rec.classes),
    )
    return f"<text {attrs}>{escape(rec.text)}</text>"


def _curve(rec: CurveRecord) -> str:
    attrs = _attrs(
        opacity=format_number(rec.opacity),
        d=format_path(rec.segments),
        class_=" ".join(rec.classes),
    )
    return f"<path {attrs} />"


def render_svg(scene: Scene, styles: dict[str, str] | None = None) -> str:
    """Generate SVG markup for the scene."""
    styles = DEFAULT_STYLES if styles is None else styles
    viewbox = " ".join(format_number(v) for v in scene.viewbox)
    lines = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{format_number(scene.width)}"'
        f' height="{format_number(scene.height)}" viewBox="{viewbox}">',
    ]

    if styles:
        lines.append('  <defs><style type="text/css"><![CDATA[')
        for selector, props in styles.items():
            lines.append(f"    {selector} {{ {props} }}")
        lines.append("  ]]></style></defs>")

    lines.append('  <g id="heatmap">')
    lines.extend(f"    {_polygon(rec)}" for rec in scene.cells)
    lines.append("  </g>")

    lines.append("  <g>")
    lines.extend(f"    {_text(rec)}" for rec in scene.labels)
    lines.append("  </g>")

    if scene.edges is not None:
        lines.append("  <g>")
        lines.extend(f"    {_curve(rec)}" for rec in scene.edges)
        lines.append("  </g>")

    if scene.swatches is not None:
        lines.append("  <g>")
        lines.extend(f"    {_polygon(rec)}" for rec in scene.swatches)
        lines.extend(f"    {_text(rec)}" for rec in scene.ticks or ())
        lines.append("  </g>")

    lines.append("</svg>")
    return "\n".join(lines)
