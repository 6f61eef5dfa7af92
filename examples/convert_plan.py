#!/usr/bin/env python3
"""Convert a Garmin FPL file to an X-Plane 11 FMS route."""

import logging
import sys
from pathlib import Path

from flightplan.garmin.parser import parse_fpl
from flightplan.xplane.writer import write_fms


def convert(source: Path, output: Path) -> int:
    """Convert one plan, printing a short summary."""
    with parse_fpl(source) as plan:
        print(plan.to_description())
        export = write_fms(plan, output)

    print(f"\nWrote {output}")
    if export.unresolved:
        print(f"Unresolved route points: {', '.join(export.unresolved)}")
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING)
    if len(sys.argv) < 2:
        print(f"usage: {sys.argv[0]} PLAN.fpl [OUTPUT.fms]")
        sys.exit(1)
    source = Path(sys.argv[1])
    output = Path(sys.argv[2]) if len(sys.argv) > 2 else source.with_suffix(".fms")
    sys.exit(convert(source, output))
