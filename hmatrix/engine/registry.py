"""Stage registry: every layout stage is a standalone function registered via decorator.

Usage:
    @stage(id="S2.01", layer=Layer.EDGES, target="edges", when=lambda ctx: ctx.matrix.has_edges)
    def edge_curves(ctx: LayoutContext) -> tuple[CurveRecord, ...]:
        return build_edges(ctx)

A stage returns the records for one Scene field (``target``). Layers run in
document order: heatmap cells first, legend last.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from hmatrix.engine.context import LayoutContext

logger = logging.getLogger(__name__)


class Layer(enum.IntEnum):
    HEATMAP = 0
    LABELS = 1
    EDGES = 2
    COLORBAR = 3


@dataclass
class StageSpec:
    id: str
    layer: Layer
    fn: Callable[["LayoutContext"], tuple[Any, ...]]
    # Scene field receiving the records
    target: str
    when: Callable[["LayoutContext"], bool] | None = None
    description: str = ""

    def enabled(self, ctx: LayoutContext) -> bool:
        return self.when is None or self.when(ctx)


class StageRegistry:
    """Registry of layout stages, keyed by id."""

    def __init__(self) -> None:
        self._stages: dict[str, StageSpec] = {}

    def register(self, spec: StageSpec) -> None:
        if spec.id in self._stages:
            raise ValueError(f"Duplicate stage ID: {spec.id}")
        self._stages[spec.id] = spec
        logger.debug("Registered stage %s (%s)", spec.id, spec.layer.name)

    def all(self) -> list[StageSpec]:
        return sorted(self._stages.values(), key=lambda s: (s.layer, s.id))

    @property
    def count(self) -> int:
        return len(self._stages)


# Module-level singleton
_registry = StageRegistry()


def get_registry() -> StageRegistry:
    return _registry


def stage(
    *,
    id: str,
    layer: Layer,
    target: str,
    when: Callable[["LayoutContext"], bool] | None = None,
    description: str = "",
):
    """Decorator to register a layout stage."""

    def decorator(fn: Callable[["LayoutContext"], tuple[Any, ...]]):
        spec = StageSpec(
            id=id,
            layer=layer,
            fn=fn,
            target=target,
            when=when,
            description=description,
        )
        _registry.register(spec)
        return fn

    return decorator
