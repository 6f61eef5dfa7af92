"""Pydantic models for flight plan structure."""

from flightplan.models.plan import FlightPlan, WaypointIterator
from flightplan.models.route import Route, RoutePoint
from flightplan.models.waypoint import Waypoint, WaypointType, waypoint_type_str

__all__ = [
    "FlightPlan",
    "WaypointIterator",
    "Route",
    "RoutePoint",
    "Waypoint",
    "WaypointType",
    "waypoint_type_str",
]
