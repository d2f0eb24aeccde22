"""Pipeline orchestrator: runs layout stages in document order and assembles the Scene."""

from __future__ import annotations

import dataclasses
import logging
import time
from typing import Any

from hmatrix.engine.config import LayoutConfig
from hmatrix.engine.context import LayoutContext
from hmatrix.engine.registry import StageRegistry, StageSpec, get_registry
from hmatrix.models.matrix import MatrixData
from hmatrix.models.options import RenderOptions
from hmatrix.models.scene import Scene

logger = logging.getLogger(__name__)

_SCENE_GROUPS = {f.name for f in dataclasses.fields(Scene)} - {
    "viewbox",
    "width",
    "height",
    "stages",
}


class Pipeline:
    """Orchestrates the layout stages."""

    def __init__(self, registry: StageRegistry | None = None) -> None:
        self.registry = registry or get_registry()

    def run(self, ctx: LayoutContext) -> Scene:
        """Run every enabled stage and return the assembled scene."""
        start = time.perf_counter()

        ordered = [s for s in self.registry.all() if s.enabled(ctx)]
        logger.info(
            "Pipeline: %d stages queued (%d skipped)",
            len(ordered),
            self.registry.count - len(ordered),
        )

        groups = self._run_stages(ctx, ordered)

        total = (time.perf_counter() - start) * 1000
        logger.info("Pipeline complete: %d stages in %.0fms", len(ordered), total)

        return Scene(
            viewbox=ctx.viewbox(),
            width=ctx.options.width,
            height=ctx.options.height,
            stages=tuple(s.id for s in ordered),
            **groups,
        )

    def _run_stages(
        self, ctx: LayoutContext, specs: list[StageSpec]
    ) -> dict[str, tuple[Any, ...]]:
        groups: dict[str, tuple[Any, ...]] = {}
        for spec in specs:
            if spec.target not in _SCENE_GROUPS:
                raise ValueError(f"Stage {spec.id} targets unknown scene field {spec.target!r}")
            t0 = time.perf_counter()
            try:
                records = tuple(spec.fn(ctx))
            except Exception as e:
                logger.error("  %s FAILED: %s", spec.id, e)
                raise
            groups[spec.target] = groups.get(spec.target, ()) + records
            elapsed = (time.perf_counter() - t0) * 1000
            logger.debug("  %s produced %d records in %.1fms", spec.id, len(records), elapsed)
        return groups


def _register_stages() -> None:
    """Import the stage module so @stage decorators fire."""
    import hmatrix.engine.stages  # noqa: F401


def create_pipeline() -> Pipeline:
    """Create a pipeline over the built-in stages."""
    _register_stages()
    return Pipeline()


def build_scene(
    matrix: MatrixData,
    options: RenderOptions | None = None,
    config: LayoutConfig | None = None,
) -> Scene:
    """Validate the inputs and lay out the full scene in one pass."""
    ctx = LayoutContext.create(matrix, options, config)
    return create_pipeline().run(ctx)
