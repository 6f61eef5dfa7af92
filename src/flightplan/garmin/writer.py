"""Write Garmin .fpl flight plan files."""

import logging
from pathlib import Path

from lxml import etree

from flightplan.errors import FlightPlanIOError, SerializationError
from flightplan.models.plan import FlightPlan
from flightplan.models.route import RoutePoint
from flightplan.models.waypoint import Waypoint, WaypointType


logger = logging.getLogger(__name__)

GARMIN_NAMESPACE = "http://www8.garmin.com/xmlschemas/FlightPlan/v1"

# Garmin requires an index; 1 is the active flight plan slot
DEFAULT_FLIGHT_PLAN_INDEX = 1


def _tag(name: str) -> str:
    return f"{{{GARMIN_NAMESPACE}}}{name}"


def _sub(parent: etree._Element, name: str, text: str | None = None) -> etree._Element:
    elem = etree.SubElement(parent, _tag(name))
    if text:
        elem.text = text
    return elem


def write_fpl(plan: FlightPlan, path: Path, pretty_print: bool = True) -> None:
    """Write a flight plan to a Garmin .fpl file.

    Args:
        plan: Flight plan to write
        path: Output path
        pretty_print: Indent the XML (default True)

    Raises:
        FlightPlanIOError: the file could not be written
        SerializationError: a value holds characters XML cannot carry
    """
    path = Path(path)
    xml_bytes = fpl_to_bytes(plan, pretty_print=pretty_print)
    try:
        path.write_bytes(xml_bytes)
    except OSError as exc:
        raise FlightPlanIOError(path, f"Cannot write flight plan ({exc.strerror or exc})") from exc
    logger.debug("Wrote Garmin FPL %s (%d bytes)", path, len(xml_bytes))


def fpl_to_bytes(plan: FlightPlan, pretty_print: bool = True) -> bytes:
    """Serialize a flight plan as Garmin FPL XML.

    Raises:
        SerializationError: a value holds characters XML cannot carry
    """
    try:
        root = create_xml(plan)
    except ValueError as exc:
        raise SerializationError(f"Cannot write flight plan as XML: {exc}") from exc
    return etree.tostring(
        root,
        xml_declaration=True,
        encoding="UTF-8",
        pretty_print=pretty_print,
    )


def create_xml(plan: FlightPlan) -> etree._Element:
    """Create the Garmin FPL XML tree for a flight plan."""
    # Resolves route point types that the route point itself does not carry
    by_identifier = plan.waypoint_index()

    root = etree.Element(_tag("flight-plan"), nsmap={None: GARMIN_NAMESPACE})
    _sub(root, "created", plan.created)

    table = _sub(root, "waypoint-table")
    for waypoint in plan.waypoints:
        table.append(create_waypoint_xml(waypoint))

    route = _sub(root, "route")
    _sub(route, "route-name", plan.route.name)
    if plan.route.description is not None:
        _sub(route, "route-description", plan.route.description)
    index = plan.route.index if plan.route.index is not None else DEFAULT_FLIGHT_PLAN_INDEX
    _sub(route, "flight-plan-index", str(index))

    for point in plan.route.points:
        route.append(create_route_point_xml(point, by_identifier.get(point.identifier)))

    return root


def create_waypoint_xml(waypoint: Waypoint) -> etree._Element:
    """Create a waypoint element."""
    elem = etree.Element(_tag("waypoint"))
    _sub(elem, "identifier", waypoint.identifier)
    _sub(elem, "type", waypoint.type.to_garmin())
    _sub(elem, "country-code", waypoint.country_code)
    _sub(elem, "lat", waypoint.lat_str)
    _sub(elem, "lon", waypoint.lon_str)
    _sub(elem, "comment", waypoint.comment)
    if waypoint.elevation is not None:
        _sub(elem, "elevation", str(waypoint.elevation))
    return elem


def create_route_point_xml(point: RoutePoint, waypoint: Waypoint | None) -> etree._Element:
    """Create a route-point element."""
    waypoint_type = point.waypoint_type
    if waypoint_type is None:
        waypoint_type = waypoint.type if waypoint is not None else WaypointType.INVALID

    country_code = point.country_code
    if not country_code and waypoint is not None:
        country_code = waypoint.country_code

    elem = etree.Element(_tag("route-point"))
    _sub(elem, "waypoint-identifier", point.identifier)
    _sub(elem, "waypoint-type", waypoint_type.to_garmin())
    _sub(elem, "waypoint-country-code", country_code)
    return elem
