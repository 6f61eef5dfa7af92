"""Write X-Plane 11 .fms route files."""

import logging
from pathlib import Path

from pydantic import BaseModel, Field

from flightplan.errors import FlightPlanIOError
from flightplan.models.plan import FlightPlan
from flightplan.models.waypoint import WaypointType, format_coordinate


logger = logging.getLogger(__name__)

# File header: "I" marks the line endings, 1100 is the X-Plane 11 format
FMS_HEADER = "I"
FMS_VERSION = "1100 Version"

# X-Plane 11 FMS entry type codes
FMS_AIRPORT = 1
FMS_NDB = 2
FMS_VOR = 3
FMS_FIX = 11
FMS_LATLON = 28

# Written in place of a blank identifier so every row keeps four fields
FMS_UNNAMED = "UNNAMED"

FMS_TYPE_CODES = {
    WaypointType.AIRPORT: FMS_AIRPORT,
    WaypointType.NDB: FMS_NDB,
    WaypointType.VOR: FMS_VOR,
    WaypointType.INT: FMS_FIX,
    WaypointType.INT_VRP: FMS_FIX,
    WaypointType.USER_WAYPOINT: FMS_LATLON,
}


def fms_identifier(identifier: str) -> str:
    """Identifier as a single whitespace-free FMS token."""
    return "_".join(identifier.split()) or FMS_UNNAMED


def fms_type_code(waypoint_type: WaypointType | None) -> int:
    """FMS code for a waypoint type; unknown or unresolved types are plain fixes."""
    if waypoint_type is None:
        return FMS_FIX
    return FMS_TYPE_CODES.get(waypoint_type, FMS_FIX)


class FmsExport(BaseModel):
    """Rendered FMS text plus the route points that could not be resolved."""

    text: str = Field(description="FMS file contents")
    unresolved: list[str] = Field(default_factory=list, description="Route point identifiers with no waypoint")

    @property
    def degraded_count(self) -> int:
        return len(self.unresolved)


def create_fms(plan: FlightPlan) -> FmsExport:
    """Render a flight plan's route as X-Plane 11 FMS text.

    Each route point is looked up in the plan's waypoints by identifier.
    A point with no matching waypoint is written as a fix at 0/0 and
    reported in ``FmsExport.unresolved``.
    """
    lines = [FMS_HEADER, FMS_VERSION, f"NUMENR {plan.route_points_count()}"]
    unresolved = []

    for point in plan.route.points:
        waypoint = plan.find_waypoint(point.identifier) if point.identifier.strip() else None
        if waypoint is None:
            logger.warning("Route point %r has no matching waypoint", point.identifier)
            unresolved.append(point.identifier)
            code, lat, lon = FMS_FIX, 0.0, 0.0
        else:
            code = fms_type_code(waypoint.type)
            lat, lon = waypoint.lat, waypoint.lon
            if lat is None or lon is None:
                logger.warning("Waypoint %s has no usable position, writing 0/0", waypoint.identifier)
                lat, lon = lat or 0.0, lon or 0.0

        lines.append(f"{code} {fms_identifier(point.identifier)} {format_coordinate(lat)} {format_coordinate(lon)}")

    return FmsExport(text="\n".join(lines) + "\n", unresolved=unresolved)


def write_fms(plan: FlightPlan, path: Path) -> FmsExport:
    """Write a flight plan to an X-Plane 11 .fms file.

    Args:
        plan: Flight plan to write
        path: Output path

    Returns:
        The export, so callers can inspect unresolved route points

    Raises:
        FlightPlanIOError: the file could not be written
    """
    path = Path(path)
    export = create_fms(plan)
    try:
        path.write_text(export.text, encoding="utf-8")
    except OSError as exc:
        raise FlightPlanIOError(path, f"Cannot write FMS file ({exc.strerror or exc})") from exc
    logger.debug("Wrote X-Plane FMS %s (%d route points, %d unresolved)",
                 path, len(plan.route.points), export.degraded_count)
    return export
