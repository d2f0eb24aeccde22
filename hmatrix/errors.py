"""Error taxonomy. Every failure aborts the whole render."""

from __future__ import annotations


class HMatrixError(Exception):
    """Base class for all hmatrix errors."""


class SchemaError(HMatrixError, ValueError):
    """Missing required field or wrong type in an input document."""


class DimensionMismatch(HMatrixError, ValueError):
    """Array lengths or indices disagree with the number of items."""


class ClusterContractViolation(HMatrixError, ValueError):
    """Cluster ids are negative, decreasing, or skip an id."""
