"""Parse Garmin .fpl flight plan files (also written by ForeFlight)."""

import logging
from pathlib import Path

from lxml import etree

from flightplan.errors import FlightPlanIOError, StructuralParseError
from flightplan.models.plan import FlightPlan
from flightplan.models.route import Route, RoutePoint
from flightplan.models.waypoint import Waypoint, WaypointType

logger = logging.getLogger(__name__)

ROOT_TAG = "flight-plan"


def _make_parser(encoding: str | None = None) -> etree.XMLParser:
    # Never fetch DTDs or expand entities from untrusted plans
    return etree.XMLParser(
        encoding=encoding,
        resolve_entities=False,
        no_network=True,
        remove_comments=True,
    )


def _localname(elem: etree._Element) -> str:
    """Tag name without namespace, so namespaced and bare files both parse."""
    return etree.QName(elem).localname


def _children(elem: etree._Element, name: str) -> list[etree._Element]:
    return [
        child for child in elem
        if isinstance(child.tag, str) and _localname(child) == name
    ]


def _child(elem: etree._Element, name: str) -> etree._Element | None:
    matches = _children(elem, name)
    return matches[0] if matches else None


def _child_text(elem: etree._Element, name: str) -> str | None:
    """Stripped text of the first matching child, None if the child is absent."""
    child = _child(elem, name)
    if child is None:
        return None
    return (child.text or "").strip()


def _created_text(root: etree._Element) -> str:
    # Opaque timestamp, copied without reinterpretation
    created = _child(root, "created")
    if created is None:
        return ""
    return created.text or ""


def parse_coordinate(text: str | None, limit: float) -> float | None:
    """Parse decimal degrees, returning None for bad or out-of-range values."""
    if not text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if not -limit <= value <= limit:
        return None
    return value


def parse_fpl(path: Path) -> FlightPlan:
    """Parse a Garmin FPL file.

    Args:
        path: Path to .fpl file

    Returns:
        Parsed FlightPlan

    Raises:
        FlightPlanIOError: the file could not be read
        StructuralParseError: the file is not a usable flight plan
    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise FlightPlanIOError(path, f"Cannot read flight plan ({exc.strerror or exc})") from exc

    plan = parse_fpl_string(data)
    logger.debug("Parsed %s: %d waypoints, %d route points",
                 path, len(plan.waypoints), len(plan.route.points))
    return plan


def parse_fpl_string(data: str | bytes) -> FlightPlan:
    """Parse Garmin FPL document text held in memory.

    Raises:
        StructuralParseError: malformed XML, wrong root element, or a
            missing waypoint-table or route element
    """
    encoding = None
    if isinstance(data, str):
        # lxml refuses str input that carries an encoding declaration; the
        # text is already decoded, so its UTF-8 bytes override any declaration
        data = data.encode("utf-8")
        encoding = "utf-8"
    if not data.strip():
        raise StructuralParseError("Malformed flight plan XML: empty document")

    try:
        root = etree.fromstring(data, parser=_make_parser(encoding))
    except etree.XMLSyntaxError as exc:
        raise StructuralParseError(f"Malformed flight plan XML: {exc}") from exc
    if root is None:
        raise StructuralParseError("Malformed flight plan XML: empty document")

    if _localname(root) != ROOT_TAG:
        raise StructuralParseError(
            f"Expected root element '{ROOT_TAG}', found '{_localname(root)}'"
        )

    table = _child(root, "waypoint-table")
    if table is None:
        raise StructuralParseError("Flight plan has no waypoint-table element")

    route_elem = _child(root, "route")
    if route_elem is None:
        raise StructuralParseError("Flight plan has no route element")

    return FlightPlan(
        created=_created_text(root),
        waypoints=[parse_waypoint(elem) for elem in _children(table, "waypoint")],
        route=parse_route(route_elem),
    )


def parse_waypoint(elem: etree._Element) -> Waypoint:
    """Parse a waypoint element. Bad content degrades rather than fails."""
    identifier = _child_text(elem, "identifier")
    if not identifier:
        logger.warning("Waypoint without identifier at line %s", elem.sourceline)
        identifier = ""

    type_text = _child_text(elem, "type")
    waypoint_type = WaypointType.from_garmin(type_text)
    if waypoint_type is WaypointType.INVALID:
        logger.debug("Unknown waypoint type %r for %s", type_text, identifier)

    lat_text = _child_text(elem, "lat") or ""
    lon_text = _child_text(elem, "lon") or ""
    lat = parse_coordinate(lat_text, 90.0)
    lon = parse_coordinate(lon_text, 180.0)
    if lat is None or lon is None:
        logger.warning("Waypoint %s has an unusable position (%r, %r)",
                       identifier, lat_text, lon_text)

    elevation = None
    elevation_text = _child_text(elem, "elevation")
    if elevation_text:
        try:
            elevation = float(elevation_text)
        except ValueError:
            logger.warning("Waypoint %s has an unusable elevation %r", identifier, elevation_text)

    return Waypoint(
        identifier=identifier,
        type=waypoint_type,
        lat=lat,
        lon=lon,
        lat_text=lat_text,
        lon_text=lon_text,
        country_code=_child_text(elem, "country-code") or "",
        comment=_child_text(elem, "comment") or "",
        elevation=elevation,
    )


def parse_route(elem: etree._Element) -> Route:
    """Parse the route element, keeping route points in document order."""
    index = None
    index_text = _child_text(elem, "flight-plan-index")
    if index_text:
        try:
            index = int(index_text)
        except ValueError:
            logger.warning("Ignoring non-numeric flight-plan-index %r", index_text)

    points = []
    for point_elem in _children(elem, "route-point"):
        identifier = _child_text(point_elem, "waypoint-identifier")
        if not identifier:
            logger.warning("Route point without waypoint-identifier at line %s",
                           point_elem.sourceline)
            identifier = ""

        type_text = _child_text(point_elem, "waypoint-type")
        points.append(RoutePoint(
            identifier=identifier,
            waypoint_type=WaypointType.from_garmin(type_text) if type_text is not None else None,
            country_code=_child_text(point_elem, "waypoint-country-code") or "",
        ))

    return Route(
        name=_child_text(elem, "route-name") or "",
        index=index,
        description=_child_text(elem, "route-description"),
        points=points,
    )
