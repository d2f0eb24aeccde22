"""Translations induced by cluster grouping.

Items in higher clusters are pushed down by 2 * cluster_ofs per cluster id.
A cell whose endpoints sit in different clusters is additionally pushed
down and to the left by one cluster_ofs per unit of cluster distance, which
opens a visible gap between sub-blocks.
"""

from __future__ import annotations

from collections.abc import Sequence


class ClusterOffsetModel:
    def __init__(self, clusters: Sequence[int] | None, cluster_ofs: float = 0.25) -> None:
        self.clusters = tuple(clusters) if clusters is not None else None
        self.cluster_ofs = cluster_ofs

    def label_offset(self, item: int) -> float:
        """Vertical shift of an item's label row."""
        if self.clusters is None:
            return 0
        return 2 * (self.clusters[item] - 1) * self.cluster_ofs

    def offset(self, row: int, col: int) -> tuple[float, float]:
        """(dx, dy) translation of the cell for pair (row, col)."""
        if self.clusters is None:
            return (0, 0)
        diff = abs(self.clusters[row] - self.clusters[col])
        dy = (2 * (self.clusters[row] - 1) + diff) * self.cluster_ofs
        dx = -(diff * self.cluster_ofs)
        return (dx, dy)

    def x_mid(self, n_items: int, max_cluster: int = 0) -> float:
        """Horizontal position of the label column, widened for the cluster fan-out."""
        return 0.5 * n_items + max_cluster * self.cluster_ofs
