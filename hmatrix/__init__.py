"""Diamond-grid heatmap renderer for symmetric pairwise-relationship matrices."""

__version__ = "0.1.0"
