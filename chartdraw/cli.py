from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys
from typing import Any, Sequence

from chartdraw.api import render_bar_chart
from chartdraw.document import load_chart_document
from chartdraw.errors import ChartError
from chartdraw.render import RENDERERS
from chartdraw.theme import THEME_DARK, THEME_LIGHT


LOGGER = logging.getLogger("chartdraw")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="chartdraw")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], default="WARNING")
    sub = parser.add_subparsers(dest="command", required=True)

    render = sub.add_parser("render", help="Render a bar chart document (JSON) to SVG or PNG.")
    render.add_argument("document", type=Path)
    render.add_argument("-o", "--output", type=Path, required=True)
    render.add_argument(
        "--type",
        choices=sorted(RENDERERS),
        default=None,
        help="Output format. Default: inferred from the output suffix, else the document's render.type.",
    )
    render.add_argument("--width", type=int, default=None)
    render.add_argument("--height", type=int, default=None)
    render.add_argument("--theme", choices=[THEME_LIGHT, THEME_DARK], default=None)
    return parser


def _render_overrides(args: argparse.Namespace) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    output_type = args.type
    if output_type is None:
        suffix = args.output.suffix.lower().lstrip(".")
        if suffix in RENDERERS:
            output_type = suffix
    if output_type is not None:
        overrides["type"] = output_type
    if args.width is not None:
        overrides["width"] = args.width
    if args.height is not None:
        overrides["height"] = args.height
    if args.theme is not None:
        overrides["theme"] = args.theme
    return overrides


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    if args.command == "render":
        try:
            opt, config = load_chart_document(args.document, _render_overrides(args))
            payload = render_bar_chart(opt, config)
        except (OSError, ValueError, ChartError) as exc:
            LOGGER.error("render failed: %s", exc)
            return 1
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_bytes(payload)
        print(f"wrote {config.type} chart {config.width}x{config.height} to {args.output}")
        return 0

    raise RuntimeError(f"unsupported command: {args.command}")


if __name__ == "__main__":
    sys.exit(main())
