"""Input matrix document model and its structural checks."""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, field_validator

from hmatrix.errors import ClusterContractViolation, DimensionMismatch

logger = logging.getLogger(__name__)


class Edge(BaseModel):
    """A directed relationship overlay between two items."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, allow_inf_nan=False)

    source: StrictInt = Field(..., alias="from")
    target: StrictInt = Field(..., alias="to")
    value: StrictFloat


class MatrixData(BaseModel):
    """Labels, upper-triangular values, palette and optional grouping."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    labels: list[str] = Field(..., min_length=1)
    values: list[StrictFloat]
    value_domain: tuple[StrictFloat, StrictFloat]
    value_colors: list[str] = Field(..., min_length=1)
    clusters: list[StrictInt] | None = None
    edges: list[Edge] | None = None

    @field_validator("value_domain")
    @classmethod
    def _check_domain(cls, v: tuple[float, float]) -> tuple[float, float]:
        if not v[0] < v[1]:
            raise ValueError(f"value_domain must be increasing, got {list(v)}")
        return v

    @property
    def n_items(self) -> int:
        return len(self.labels)

    @property
    def has_clusters(self) -> bool:
        return self.clusters is not None

    @property
    def has_edges(self) -> bool:
        return self.edges is not None

    @property
    def max_cluster(self) -> int:
        if not self.clusters:
            return 0
        return self.clusters[-1]


def validate_matrix(data: MatrixData) -> MatrixData:
    """Check array lengths, edge indices and the cluster contract.

    Raises DimensionMismatch or ClusterContractViolation. Returns ``data``
    unchanged so the call can be chained.
    """
    n = data.n_items
    expected = n * (n - 1) // 2
    if len(data.values) != expected:
        raise DimensionMismatch(
            f"values has {len(data.values)} entries, expected {expected} for {n} labels"
        )

    if data.clusters is not None:
        if len(data.clusters) != n:
            raise DimensionMismatch(
                f"clusters has {len(data.clusters)} entries, expected {n}"
            )
        _check_clusters(data.clusters)

    for k, edge in enumerate(data.edges or []):
        for end in (edge.source, edge.target):
            if not 0 <= end < n:
                raise DimensionMismatch(
                    f"edge {k} references item {end}, outside [0, {n})"
                )

    logger.debug(
        "Validated matrix: %d items, %d values, %d edges",
        n,
        len(data.values),
        len(data.edges or []),
    )
    return data


def _check_clusters(clusters: list[int]) -> None:
    if clusters[0] < 0:
        raise ClusterContractViolation(f"cluster ids must be non-negative, got {clusters[0]}")
    for k in range(1, len(clusters)):
        step = clusters[k] - clusters[k - 1]
        if step < 0:
            raise ClusterContractViolation(
                f"cluster ids must be non-decreasing: item {k} has {clusters[k]} "
                f"after {clusters[k - 1]}"
            )
        if step > 1:
            raise ClusterContractViolation(
                f"cluster ids must be contiguous: item {k} jumps from "
                f"{clusters[k - 1]} to {clusters[k]}"
            )
