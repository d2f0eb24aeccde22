"""Read matrix and options documents from JSON.

Malformed JSON propagates as json.JSONDecodeError. Schema problems are
raised as SchemaError, dimension and cluster problems as DimensionMismatch
and ClusterContractViolation.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from hmatrix.errors import SchemaError
from hmatrix.models.matrix import MatrixData, validate_matrix
from hmatrix.models.options import RenderOptions

logger = logging.getLogger(__name__)


def _describe(e: ValidationError) -> str:
    parts = []
    for err in e.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "<root>"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


def parse_matrix(raw: Any) -> MatrixData:
    """Build and validate a MatrixData from a decoded JSON document."""
    if not isinstance(raw, dict):
        raise SchemaError(f"matrix document must be a JSON object, got {type(raw).__name__}")
    try:
        data = MatrixData.model_validate(raw)
    except ValidationError as e:
        raise SchemaError(f"invalid matrix document: {_describe(e)}") from e
    return validate_matrix(data)


def parse_options(raw: Any) -> RenderOptions:
    """Merge a (possibly partial) options document over the defaults."""
    if raw is None:
        return RenderOptions()
    if not isinstance(raw, dict):
        raise SchemaError(f"options document must be a JSON object, got {type(raw).__name__}")
    try:
        return RenderOptions.model_validate(raw)
    except ValidationError as e:
        raise SchemaError(f"invalid options document: {_describe(e)}") from e


def _read_json(path: Path) -> Any:
    return json.loads(path.read_text(encoding="utf-8"))


def load_matrix(path: str | Path) -> MatrixData:
    path = Path(path)
    data = parse_matrix(_read_json(path))
    logger.info("Loaded %s: %d items", path, data.n_items)
    return data


def load_options(path: str | Path | None = None) -> RenderOptions:
    if path is None:
        return RenderOptions()
    path = Path(path)
    options = parse_options(_read_json(path))
    logger.info("Loaded options from %s", path)
    return options
