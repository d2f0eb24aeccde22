"""Command-line entry point.

Usage:
  hmatrix                          # reads data.json, prints SVG
  hmatrix matrix.json              # custom data file
  hmatrix matrix.json opts.json    # data file + options file
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from dotenv import load_dotenv

from hmatrix.config import Settings
from hmatrix.engine.pipeline import build_scene
from hmatrix.errors import HMatrixError
from hmatrix.loader import load_matrix, load_options
from hmatrix.svg.serializer import render_svg

logger = logging.getLogger(__name__)


def _configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.hmatrix_log_level.upper(), logging.WARNING),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hmatrix",
        description="Render a symmetric matrix as a diamond-grid SVG heatmap",
    )
    parser.add_argument(
        "data_file", nargs="?", default="data.json", help="Matrix JSON (default: data.json)"
    )
    parser.add_argument("options_file", nargs="?", help="Options JSON merged over defaults")
    return parser


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    _configure_logging(Settings())
    args = build_parser().parse_args(argv)

    try:
        matrix = load_matrix(args.data_file)
        options = load_options(args.options_file)
        svg = render_svg(build_scene(matrix, options))
    except OSError as e:
        logger.error("Cannot read input: %s", e)
        return 1
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.error("Malformed JSON: %s", e)
        return 1
    except HMatrixError as e:
        logger.error("%s: %s", type(e).__name__, e)
        return 1

    sys.stdout.write(svg + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
