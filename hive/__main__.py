"""
Habit Hive — entry point.

Usage:
    python -m hive serve                      # web server on :8000
    python -m hive serve --port 3000
    python -m hive place --occupied 0,0 180.8,0
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from hive.config import HIVE_RULES


def _pair(text: str) -> tuple[float, float]:
    try:
        x, y = text.split(",")
        return float(x), float(y)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected X,Y but got '{text}'")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="hive", description="Habits on a honeycomb canvas")
    sub = p.add_subparsers(dest="cmd")

    sv = sub.add_parser("serve", help="Start the JSON web server")
    sv.add_argument("--host", default="127.0.0.1", help="Host to bind")
    sv.add_argument("--port", type=int, default=8000, help="Port to bind")

    pl = sub.add_parser("place", help="Print the next free slot as JSON")
    pl.add_argument("--origin", type=_pair, default=(0.0, 0.0), help="X,Y of the lattice centre")
    pl.add_argument("--occupied", type=_pair, nargs="*", default=[], help="X,Y of taken slots")
    pl.add_argument("--min-distance", type=float, default=HIVE_RULES.min_distance)
    pl.add_argument("--max-rings", type=int, default=HIVE_RULES.max_rings)
    pl.add_argument("--footprint", type=float, default=None)
    pl.add_argument("--packing", type=float, default=HIVE_RULES.packing)
    pl.add_argument("-v", "--verbose", action="store_true", help="Log each placement step")

    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    cmd = args.cmd or "serve"

    if cmd == "serve":
        from hive.web.server import main as serve
        serve(host=getattr(args, "host", "127.0.0.1"), port=getattr(args, "port", 8000))
        return 0

    from hive.placer import (
        PlacementPreconditionError, locate_slot, place,
        point_to_dict, ring_coordinate_to_dict,
    )

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    kwargs = dict(footprint=args.footprint, packing=args.packing)
    try:
        coord = locate_slot(args.origin, args.occupied, args.min_distance, args.max_rings, **kwargs)
        point = place(args.origin, args.occupied, args.min_distance, args.max_rings, **kwargs)
    except PlacementPreconditionError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(json.dumps({
        "point": point_to_dict(point),
        "slot": ring_coordinate_to_dict(coord),
        "exhausted": coord is None,
    }))
    return 0


if __name__ == "__main__":
    sys.exit(main())
