# File: src/utility_router/io/cli.py
"""
Command-line entry point: route the runs of a floorplan JSON file.

Usage:
    utility-router plan.json --output routes.json --summary --anchors
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from ..reporting.circuits import circuit_loads
from ..utils.logging_config import RouterLogger
from .models import FloorplanRequest, floorplan_anchors, route_floorplan

logger = logging.getLogger(__name__)


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="utility-router",
        description="Route wire and pipe runs along the walls of a floorplan"
    )
    parser.add_argument(
        "plan",
        help="Floorplan request JSON (walls, runs, prices, config)"
    )
    parser.add_argument(
        "--output", "-o",
        help="Write results to this file instead of stdout"
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Include the material usage summary and circuit loads in the output"
    )
    parser.add_argument(
        "--anchors",
        action="store_true",
        help="Include endpoints shared by several runs in the output"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Log every search expansion (very verbose)"
    )
    parser.add_argument(
        "--log-dir",
        help="Also write a timestamped log file to this directory"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI. Returns the process exit code."""
    args = parse_arguments(argv)
    RouterLogger.configure(
        debug_mode=args.debug, log_dir=args.log_dir, trace_mode=args.trace
    )

    try:
        with open(args.plan, "r", encoding="utf-8") as f:
            request = FloorplanRequest.model_validate(json.load(f))
    except OSError as e:
        print(f"Error: cannot read {args.plan}: {e}", file=sys.stderr)
        return 1
    except json.JSONDecodeError as e:
        print(f"Error: {args.plan} is not valid JSON: {e}", file=sys.stderr)
        return 1
    except ValidationError as e:
        print(
            f"Error: invalid floorplan request ({e.error_count()} problems):\n{e}",
            file=sys.stderr
        )
        return 1

    logger.info(
        f"Routing {len(request.runs)} runs against {len(request.walls)} walls"
    )
    routes, summary = route_floorplan(request)

    output = {"routes": [r.to_dict() for r in routes]}
    if args.summary:
        output["summary"] = summary.to_dict()
        output["circuits"] = [c.to_dict() for c in circuit_loads(routes)]
    if args.anchors:
        output["anchors"] = [a.to_dict() for a in floorplan_anchors(request, routes)]
    text = json.dumps(output, indent=2)

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(text + "\n")
        logger.info(f"Wrote {len(routes)} routes to {args.output}")
    else:
        print(text)

    fallbacks = sum(1 for r in routes if r.used_fallback)
    if fallbacks:
        logger.warning(f"{fallbacks} runs were routed directly (no wall path found)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
