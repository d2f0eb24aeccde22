"""hmatrix diamond-grid layout engine."""

from hmatrix.engine.registry import stage, Layer, get_registry
from hmatrix.engine.context import LayoutContext
from hmatrix.engine.pipeline import Pipeline, build_scene, create_pipeline

__all__ = [
    "stage",
    "Layer",
    "get_registry",
    "LayoutContext",
    "Pipeline",
    "build_scene",
    "create_pipeline",
]
