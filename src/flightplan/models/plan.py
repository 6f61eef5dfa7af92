"""Flight plan model and waypoint iterator."""

from pydantic import BaseModel, ConfigDict, Field
from typing import Any

from flightplan.errors import ReleasedError, RoutePointIndexError
from flightplan.models.route import Route, RoutePoint
from flightplan.models.waypoint import Waypoint, waypoint_type_str


class FlightPlan(BaseModel):
    """A flight plan: creation time, known waypoints and the route.

    The plan owns its waypoints and route points. It is populated once, when
    it is constructed, and is released either explicitly with ``release()``
    or by leaving a ``with`` block. Any use after release raises
    ``ReleasedError``, including through iterators made from the plan.
    """

    model_config = ConfigDict(frozen=True)

    created: str = Field(default="", description="Creation timestamp, as written in the source")
    waypoints: list[Waypoint] = Field(default_factory=list, description="Waypoints in file order")
    route: Route = Field(default_factory=Route, description="The route")

    # Internal: set once the owner has released the plan
    _released: bool = False

    def __enter__(self) -> "FlightPlan":
        return self

    def __exit__(self, *exc_info) -> None:
        self.release()

    def release(self) -> None:
        """Release the plan. Calling it again has no effect."""
        self._released = True

    @property
    def released(self) -> bool:
        return self._released

    def _check_alive(self) -> None:
        if self._released:
            raise ReleasedError("Flight plan has been released")

    def waypoints_count(self) -> int:
        """Number of waypoints in the plan."""
        self._check_alive()
        return len(self.waypoints)

    def waypoints_iter(self) -> "WaypointIterator":
        """Return a forward-only iterator over the waypoints."""
        self._check_alive()
        return WaypointIterator(self)

    def route_name(self) -> str:
        self._check_alive()
        return self.route.name

    def route_points_count(self) -> int:
        """Number of points in the route."""
        self._check_alive()
        return len(self.route.points)

    def route_points_get(self, index: int) -> RoutePoint:
        """Return the route point at index, 0 <= index < route_points_count()."""
        self._check_alive()
        count = len(self.route.points)
        if not 0 <= index < count:
            raise RoutePointIndexError(index, count)
        return self.route.points[index]

    def find_waypoint(self, identifier: str) -> Waypoint | None:
        """Return the first waypoint with this identifier, if any."""
        self._check_alive()
        for waypoint in self.waypoints:
            if waypoint.identifier == identifier:
                return waypoint
        return None

    def waypoint_index(self) -> dict[str, Waypoint]:
        """Map identifier to the first waypoint carrying it."""
        self._check_alive()
        index: dict[str, Waypoint] = {}
        for waypoint in self.waypoints:
            index.setdefault(waypoint.identifier, waypoint)
        return index

    def describe(self) -> dict[str, Any]:
        """Return a summary dict."""
        self._check_alive()
        type_counts: dict[str, int] = {}
        for waypoint in self.waypoints:
            label = waypoint_type_str(waypoint.type)
            type_counts[label] = type_counts.get(label, 0) + 1

        known = {w.identifier for w in self.waypoints}
        unresolved = [p.identifier for p in self.route.points if p.identifier not in known]

        return {
            "created": self.created,
            "waypoint_count": len(self.waypoints),
            "waypoint_types": type_counts,
            "route_name": self.route.name,
            "route_point_count": len(self.route.points),
            "route": [p.identifier for p in self.route.points],
            "unresolved_route_points": unresolved,
        }

    def to_description(self) -> str:
        """Human-readable description of the plan."""
        self._check_alive()
        lines = [
            f"Flight plan created {self.created or 'at an unknown time'}",
            f"Waypoints: {len(self.waypoints)}",
            "",
        ]
        for waypoint in self.waypoints:
            lines.append(f"  {waypoint.to_description()}")
        lines.append("")
        lines.append(self.route.to_description())
        return "\n".join(lines)


class WaypointIterator:
    """Single-pass cursor over a flight plan's waypoints.

    Returned waypoints belong to the plan. The iterator is only valid while
    the plan has not been released.
    """

    def __init__(self, plan: FlightPlan):
        self._plan = plan
        self._position = 0
        self._released = False

    def __enter__(self) -> "WaypointIterator":
        return self

    def __exit__(self, *exc_info) -> None:
        self.release()

    def __iter__(self) -> "WaypointIterator":
        return self

    def __next__(self) -> Waypoint:
        waypoint = self.next()
        if waypoint is None:
            raise StopIteration
        return waypoint

    def release(self) -> None:
        """Release the iterator. The plan is unaffected."""
        self._released = True

    def next(self) -> Waypoint | None:
        """Advance and return the next waypoint, or None at the end."""
        if self._released:
            raise ReleasedError("Waypoint iterator has been released")
        if self._plan.released:
            raise ReleasedError("Flight plan has been released")

        waypoints = self._plan.waypoints
        if self._position >= len(waypoints):
            return None
        waypoint = waypoints[self._position]
        self._position += 1
        return waypoint
