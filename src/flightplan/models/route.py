"""Route models for flight plans."""

from pydantic import BaseModel, ConfigDict, Field
from typing import Any

from flightplan.models.waypoint import WaypointType


class RoutePoint(BaseModel):
    """An entry in the route, referring to a waypoint by identifier only."""

    model_config = ConfigDict(frozen=True)

    identifier: str = Field(default="", description="Identifier of the referenced waypoint")
    waypoint_type: WaypointType | None = Field(default=None, description="Type declared on the route point")
    country_code: str = Field(default="", description="Country code declared on the route point")

    def describe(self) -> dict[str, Any]:
        """Return a description dict."""
        return {
            "identifier": self.identifier,
            "waypoint_type": self.waypoint_type.value if self.waypoint_type else None,
            "country_code": self.country_code,
        }


class Route(BaseModel):
    """The ordered route of a flight plan."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(default="", description="Route name")
    index: int | None = Field(default=None, description="Flight plan index")
    description: str | None = Field(default=None, description="Route description")
    points: list[RoutePoint] = Field(default_factory=list, description="Route points in order")

    def describe(self) -> dict[str, Any]:
        """Return a description dict."""
        return {
            "name": self.name,
            "index": self.index,
            "point_count": len(self.points),
            "points": [p.identifier for p in self.points],
        }

    def to_description(self) -> str:
        """Human-readable description."""
        if not self.points:
            return f"Route '{self.name}': empty"
        return f"Route '{self.name}' ({len(self.points)} points): {' -> '.join(p.identifier for p in self.points)}"
