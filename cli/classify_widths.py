"""Width replay CLI.

Feeds a sequence of widths through a ``BreakpointListener`` and reports the
initial region plus every ``change`` event, optionally with relay enter/leave
activity for chosen region sets. Handy for checking a region scale before
wiring it into a UI.

The first width sets the initial region (no event, as for a freshly created
listener); each following width is delivered as one resize signal.

Example:
  breakpoints-replay --regions "small=400 medium=800 large=9999" \
      --relay "small medium" 300 500 900 --json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict, List

from breakpoints.design.regions import DEFAULT_REGIONS, Region, parse_regions
from breakpoints.services import BreakpointListener, ImmediateScheduler, ResizeSignal


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Replay widths through a breakpoint listener")
    p.add_argument(
        "widths",
        nargs="+",
        type=float,
        help="Widths in order; the first one is the initial width",
    )
    p.add_argument(
        "--regions",
        default=None,
        help='Region scale as "name=bound ..." in ascending order (default: xs/sm/md/lg/xl)',
    )
    p.add_argument(
        "--relay",
        action="append",
        default=[],
        metavar="NAMES",
        help='Space separated region set to report enter/leave for (repeatable)',
    )
    p.add_argument("--json", action="store_true", help="Emit JSON instead of human-readable text")
    p.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return p.parse_args(argv)


def _format_width(width: float) -> int | float:
    return int(width) if float(width).is_integer() else width


def replay(
    regions: tuple[Region, ...], widths: List[float], relay_sets: List[str]
) -> Dict[str, Any]:
    state = {"width": widths[0]}
    signal = ResizeSignal()
    listener = BreakpointListener(
        regions, lambda: state["width"], signal, ImmediateScheduler(), debounce_ms=0
    )
    changes: List[Dict[str, Any]] = []
    relay_events: List[Dict[str, Any]] = []

    def on_change(current, previous):
        changes.append(
            {"width": _format_width(state["width"]), "current": current, "previous": previous}
        )

    def make_relay_callback(names: str, action: str):
        def _cb() -> None:
            relay_events.append(
                {"set": names, "action": action, "width": _format_width(state["width"])}
            )

        return _cb

    listener.on("change", on_change)
    relay = listener.relay(
        {
            names: {
                "enter": make_relay_callback(names, "enter"),
                "leave": make_relay_callback(names, "leave"),
            }
            for names in relay_sets
        }
    )
    initial = listener.current
    try:
        for width in widths[1:]:
            state["width"] = width
            signal.emit()
    finally:
        relay.destroy()
        listener.destroy()
    return {
        "regions": [{"name": r.name, "upper_bound": r.upper_bound} for r in regions],
        "initial": initial,
        "changes": changes,
        "relay": relay_events,
    }


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    if args.regions is None:
        regions = DEFAULT_REGIONS
    else:
        try:
            regions = parse_regions(args.regions)
        except ValueError as exc:
            print(f"Invalid --regions: {exc}", file=sys.stderr)
            return 2
    result = replay(regions, args.widths, args.relay)
    if args.json:
        # inf is not valid JSON; report open-ended bounds as null
        for region in result["regions"]:
            if region["upper_bound"] == float("inf"):
                region["upper_bound"] = None
        print(json.dumps(result, ensure_ascii=False, indent=2))
    else:
        scale = ", ".join(f"{r['name']}<{r['upper_bound']}" for r in result["regions"])
        print(f"Regions: {scale or '(none)'}")
        print(f"Initial: {result['initial']}")
        if not result["changes"]:
            print("No changes.")
        for change in result["changes"]:
            print(f"  {change['width']}: {change['previous']} -> {change['current']}")
        for event in result["relay"]:
            print(f"  relay [{event['set']}] {event['action']} at {event['width']}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
