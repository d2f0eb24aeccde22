"""Shared test fixtures."""

from __future__ import annotations

import copy
import json
from pathlib import Path

import pytest

from hmatrix.engine.context import LayoutContext
from hmatrix.models.matrix import MatrixData
from hmatrix.models.options import RenderOptions


# Three items, two colors, nothing optional
SIMPLE_DOC = {
    "labels": ["A", "B", "C"],
    "values": [0.1, 0.5, 0.9],
    "value_domain": [0, 1],
    "value_colors": ["#fff", "#000"],
}

# Four items in two clusters
CLUSTERED_DOC = {
    "labels": ["a", "b", "c", "d"],
    "values": [0.0, 0.25, 0.5, 0.75, 1.0, 0.125],
    "value_domain": [0, 1],
    "value_colors": ["#eee", "#999", "#333"],
    "clusters": [0, 0, 1, 1],
}

# Five items with relationship overlays
EDGES_DOC = {
    "labels": ["v", "w", "x", "y", "z"],
    "values": [0.5] * 10,
    "value_domain": [-1, 1],
    "value_colors": ["#00f", "#fff", "#f00"],
    "edges": [
        {"from": 0, "to": 3, "value": 1.0},
        {"from": 1, "to": 2, "value": 0.25},
        {"from": 4, "to": 0, "value": 1.5},
    ],
}


def make_doc(base: dict, **overrides) -> dict:
    doc = copy.deepcopy(base)
    doc.update(overrides)
    return doc


def make_ctx(doc: dict, **options) -> LayoutContext:
    return LayoutContext.create(MatrixData.model_validate(doc), RenderOptions(**options))


def write_json(path: Path, payload) -> Path:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


@pytest.fixture
def simple_ctx() -> LayoutContext:
    return make_ctx(SIMPLE_DOC)


@pytest.fixture
def clustered_ctx() -> LayoutContext:
    return make_ctx(CLUSTERED_DOC)


@pytest.fixture
def edges_ctx() -> LayoutContext:
    return make_ctx(EDGES_DOC)
