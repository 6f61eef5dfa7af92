"""Status-returning entry points for callers that prefer a last-error style.

The parsers and writers raise ``FlightPlanError`` subclasses. The functions
here catch those, record them with ``set_last_error`` and return ``None`` or a
non-zero status instead. Anything that is not a ``FlightPlanError`` still
propagates.
"""

from pathlib import Path

from flightplan.errors import (
    FlightPlanError,
    cleanup,
    last_error,
    last_error_message,
    set_last_error,
)
from flightplan.garmin.parser import parse_fpl, parse_fpl_string
from flightplan.garmin.writer import write_fpl
from flightplan.models.plan import FlightPlan, WaypointIterator
from flightplan.models.route import RoutePoint
from flightplan.xplane.writer import write_fms

__all__ = [
    "new",
    "parse_garmin_file",
    "parse_garmin_string",
    "write_garmin_file",
    "write_xplane11_file",
    "route_points_get",
    "release",
    "last_error",
    "last_error_message",
    "cleanup",
]

SUCCESS = 0
FAILURE = 1


def new() -> FlightPlan:
    """Create an empty flight plan."""
    return FlightPlan()


def parse_garmin_file(path: str | Path) -> FlightPlan | None:
    """Parse a Garmin FPL file. Returns None on failure."""
    try:
        return parse_fpl(Path(path))
    except FlightPlanError as exc:
        set_last_error(exc)
        return None


def parse_garmin_string(text: str | bytes) -> FlightPlan | None:
    """Parse Garmin FPL text. Returns None on failure."""
    try:
        return parse_fpl_string(text)
    except FlightPlanError as exc:
        set_last_error(exc)
        return None


def write_garmin_file(plan: FlightPlan, path: str | Path) -> int:
    """Write a plan as Garmin FPL. Returns 0 on success."""
    try:
        write_fpl(plan, Path(path))
    except FlightPlanError as exc:
        set_last_error(exc)
        return FAILURE
    return SUCCESS


def write_xplane11_file(plan: FlightPlan, path: str | Path) -> int:
    """Write a plan as X-Plane 11 FMS. Returns 0 on success.

    Unresolved route points do not fail the write; they are logged.
    """
    try:
        write_fms(plan, Path(path))
    except FlightPlanError as exc:
        set_last_error(exc)
        return FAILURE
    return SUCCESS


def route_points_get(plan: FlightPlan, index: int) -> RoutePoint | None:
    """Route point at index, or None when the index is out of range."""
    try:
        return plan.route_points_get(index)
    except FlightPlanError as exc:
        set_last_error(exc)
        return None


def release(handle: FlightPlan | WaypointIterator) -> None:
    """Release a flight plan or waypoint iterator."""
    handle.release()
