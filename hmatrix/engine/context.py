"""LayoutContext: the read-only state shared by all layout stages."""

from __future__ import annotations

from dataclasses import dataclass

from hmatrix.engine.clusters import ClusterOffsetModel
from hmatrix.engine.color_scale import ColorScale
from hmatrix.engine.config import LayoutConfig
from hmatrix.models.matrix import MatrixData, validate_matrix
from hmatrix.models.options import RenderOptions


@dataclass(frozen=True)
class LayoutContext:
    """Validated inputs plus the derived quantities every stage needs."""

    matrix: MatrixData
    options: RenderOptions
    config: LayoutConfig
    offsets: ClusterOffsetModel
    scale: ColorScale
    # Horizontal position of the label column
    x_mid: float

    @classmethod
    def create(
        cls,
        matrix: MatrixData,
        options: RenderOptions | None = None,
        config: LayoutConfig | None = None,
    ) -> LayoutContext:
        validate_matrix(matrix)
        options = options or RenderOptions()
        config = config or LayoutConfig()
        offsets = ClusterOffsetModel(matrix.clusters, config.cluster_ofs)
        return cls(
            matrix=matrix,
            options=options,
            config=config,
            offsets=offsets,
            scale=ColorScale(matrix.value_domain, matrix.value_colors),
            x_mid=offsets.x_mid(matrix.n_items, matrix.max_cluster),
        )

    @property
    def n_items(self) -> int:
        return self.matrix.n_items

    @property
    def max_cluster(self) -> int:
        return self.matrix.max_cluster

    def viewbox(self) -> tuple[float, float, float, float]:
        """(x, y, width, height) of the canvas in grid units."""
        hm_vb = 0.5 * self.n_items
        span = 2 * hm_vb + 2 + (self.max_cluster + 1) * self.config.cluster_ofs
        x0, y0 = self.config.viewbox_origin
        return (x0, y0, span, span + self.config.viewbox_extra_height)
