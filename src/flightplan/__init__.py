"""Flight plan interchange: read Garmin FPL, write Garmin FPL and X-Plane 11 FMS."""

from flightplan.api import (
    new,
    parse_garmin_file,
    parse_garmin_string,
    write_garmin_file,
    write_xplane11_file,
    release,
    last_error,
    last_error_message,
    cleanup,
)
from flightplan.errors import (
    FlightPlanError,
    FlightPlanIOError,
    ReleasedError,
    RoutePointIndexError,
    SerializationError,
    StructuralParseError,
)
from flightplan.garmin import parse_fpl, parse_fpl_string, write_fpl
from flightplan.models import (
    FlightPlan,
    Route,
    RoutePoint,
    Waypoint,
    WaypointIterator,
    WaypointType,
    waypoint_type_str,
)
from flightplan.xplane import FmsExport, create_fms, write_fms

__version__ = "0.1.0"
__all__ = [
    "new",
    "parse_garmin_file",
    "parse_garmin_string",
    "write_garmin_file",
    "write_xplane11_file",
    "release",
    "last_error",
    "last_error_message",
    "cleanup",
    "FlightPlanError",
    "FlightPlanIOError",
    "ReleasedError",
    "RoutePointIndexError",
    "SerializationError",
    "StructuralParseError",
    "parse_fpl",
    "parse_fpl_string",
    "write_fpl",
    "FlightPlan",
    "Route",
    "RoutePoint",
    "Waypoint",
    "WaypointIterator",
    "WaypointType",
    "waypoint_type_str",
    "FmsExport",
    "create_fms",
    "write_fms",
]
