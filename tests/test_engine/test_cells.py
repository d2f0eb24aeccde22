"""Tests for cell and label geometry."""

import pytest

from hmatrix.engine.cells import (
    build_cells,
    build_labels,
    cell_polygon,
    cell_tag,
    cell_transform,
    label_anchor,
    rhombus,
)
from hmatrix.models.scene import Translate


def test_rhombus_is_unit_diamond():
    top, left, bottom, right = rhombus(3.0, 0, 0)
    assert top == (2.5, 0.5)
    assert left == (2.0, 1.0)
    assert bottom == (2.5, 1.5)
    assert right == (3.0, 1.0)


def test_cell_polygons_three_items(simple_ctx):
    assert simple_ctx.x_mid == 1.5
    assert cell_polygon(simple_ctx, 0) == ((1.0, 0.5), (0.5, 1.0), (1.0, 1.5), (1.5, 1.0))
    assert cell_polygon(simple_ctx, 1) == ((0.5, 1.0), (0.0, 1.5), (0.5, 2.0), (1.0, 1.5))
    assert cell_polygon(simple_ctx, 2) == ((1.0, 1.5), (0.5, 2.0), (1.0, 2.5), (1.5, 2.0))


def test_cell_right_corner_sits_between_its_items(simple_ctx):
    # Adjacent items share a cell whose right corner touches the label column
    # halfway between their label rows.
    for idx, (row, col) in [(0, (0, 1)), (2, (1, 2))]:
        right = cell_polygon(simple_ctx, idx)[3]
        assert right[0] == simple_ctx.x_mid
        assert right[1] == pytest.approx(0.5 * ((row + 0.5) + (col + 0.5)))


def test_cell_tag_is_item_pair():
    assert cell_tag(0) == (1, 0)
    assert cell_tag(2) == (2, 1)
    assert cell_tag(3) == (3, 0)


def test_build_cells_fill_and_classes(simple_ctx):
    cells = build_cells(simple_ctx)
    assert [c.fill for c in cells] == ["#fff", "#000", "#000"]
    assert cells[0].classes == ("n1", "n0")
    assert cells[2].classes == ("n2", "n1")
    assert all(c.transform == () for c in cells)


def test_cluster_transform(clustered_ctx):
    # clusters [0, 0, 1, 1]; cell 1 is pair (0, 2)
    assert cell_transform(clustered_ctx, 1) == pytest.approx((-0.25, -0.25))
    cells = build_cells(clustered_ctx)
    (op,) = cells[1].transform
    assert isinstance(op, Translate)
    assert (op.dx, op.dy) == pytest.approx((-0.25, -0.25))


def test_clustered_x_mid(clustered_ctx):
    assert clustered_ctx.x_mid == pytest.approx(2.25)
    top = cell_polygon(clustered_ctx, 0)[0]
    assert top == pytest.approx((1.75, 0.5))


def test_labels_without_clusters(simple_ctx):
    labels = build_labels(simple_ctx)
    assert [lbl.text for lbl in labels] == ["A", "B", "C"]
    assert [lbl.y for lbl in labels] == [0.5, 1.5, 2.5]
    assert all(lbl.x == 1.5 for lbl in labels)
    assert all(lbl.transform == () for lbl in labels)
    assert all(lbl.baseline == "central" for lbl in labels)
    assert labels[1].classes == ("l1",)
    assert label_anchor(simple_ctx, 2) == (1.5, 2.5)


def test_labels_with_clusters(clustered_ctx):
    labels = build_labels(clustered_ctx)
    shifts = [lbl.transform[0].dy for lbl in labels]
    assert shifts == pytest.approx([-0.5, -0.5, 0.0, 0.0])


def test_build_cells_follow_index_order(edges_ctx):
    cells = build_cells(edges_ctx)
    assert len(cells) == 10
    for i, cell in enumerate(cells):
        col, row = cell_tag(i)
        assert cell.points == cell_polygon(edges_ctx, i)
        assert cell.classes == (f"n{col}", f"n{row}")
