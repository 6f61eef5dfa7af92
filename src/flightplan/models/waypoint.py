"""Waypoint model for flight plans."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class WaypointType(Enum):
    """Classification of a waypoint."""

    INVALID = "invalid"
    USER_WAYPOINT = "user_waypoint"
    AIRPORT = "airport"
    NDB = "ndb"
    VOR = "vor"
    INT = "int"
    INT_VRP = "int_vrp"

    @classmethod
    def from_garmin(cls, text: str | None) -> "WaypointType":
        """Map a Garmin FPL type string. Unknown strings give INVALID."""
        match text:
            case "USER WAYPOINT":
                return cls.USER_WAYPOINT
            case "AIRPORT":
                return cls.AIRPORT
            case "NDB":
                return cls.NDB
            case "VOR":
                return cls.VOR
            case "INT":
                return cls.INT
            case "INT-VRP":
                return cls.INT_VRP
            case _:
                return cls.INVALID

    def to_garmin(self) -> str:
        """Garmin FPL type string; INVALID has none and writes as empty."""
        match self:
            case WaypointType.USER_WAYPOINT:
                return "USER WAYPOINT"
            case WaypointType.AIRPORT:
                return "AIRPORT"
            case WaypointType.NDB:
                return "NDB"
            case WaypointType.VOR:
                return "VOR"
            case WaypointType.INT:
                return "INT"
            case WaypointType.INT_VRP:
                return "INT-VRP"
            case _:
                return ""


_TYPE_LABELS = {
    WaypointType.INVALID: "Invalid",
    WaypointType.USER_WAYPOINT: "User Waypoint",
    WaypointType.AIRPORT: "Airport",
    WaypointType.NDB: "NDB",
    WaypointType.VOR: "VOR",
    WaypointType.INT: "Intersection",
    WaypointType.INT_VRP: "Intersection (VRP)",
}


def waypoint_type_str(waypoint_type: WaypointType) -> str:
    """Human-readable label for a waypoint type."""
    return _TYPE_LABELS[waypoint_type]


# Decimal places used when a coordinate has no source text
COORDINATE_PRECISION = 6


def format_coordinate(value: float | None) -> str:
    """Format decimal degrees, or empty string for a missing value."""
    if value is None:
        return ""
    return f"{value:.{COORDINATE_PRECISION}f}"


class Waypoint(BaseModel):
    """A named geographic point known to a flight plan."""

    model_config = ConfigDict(frozen=True)

    identifier: str = Field(default="", description="Waypoint identifier")
    type: WaypointType = Field(default=WaypointType.INVALID, description="Waypoint type")
    lat: float | None = Field(default=None, ge=-90.0, le=90.0, description="Latitude in decimal degrees")
    lon: float | None = Field(default=None, ge=-180.0, le=180.0, description="Longitude in decimal degrees")
    lat_text: str = Field(default="", description="Latitude as written in the source file")
    lon_text: str = Field(default="", description="Longitude as written in the source file")
    country_code: str = Field(default="", description="ICAO country code")
    comment: str = Field(default="", description="Free-form comment")
    elevation: float | None = Field(default=None, description="Elevation in feet")

    @property
    def lat_str(self) -> str:
        """Latitude text for serialization, preferring the source text."""
        return self.lat_text or format_coordinate(self.lat)

    @property
    def lon_str(self) -> str:
        """Longitude text for serialization, preferring the source text."""
        return self.lon_text or format_coordinate(self.lon)

    def describe(self) -> dict[str, Any]:
        """Return a description dict."""
        return {
            "identifier": self.identifier,
            "type": waypoint_type_str(self.type),
            "lat": self.lat,
            "lon": self.lon,
            "country_code": self.country_code,
            "elevation": self.elevation,
        }

    def to_description(self) -> str:
        """Human-readable description."""
        if self.lat is None or self.lon is None:
            position = f"({self.lat_text or '?'}, {self.lon_text or '?'})"
        else:
            position = f"({format_coordinate(self.lat)}, {format_coordinate(self.lon)})"
        return f"{self.identifier} [{waypoint_type_str(self.type)}] {position}"
