"""Flight plan inspection tools."""

from pathlib import Path
from typing import Any

from mcp.server.fastmcp import FastMCP

from flightplan.errors import FlightPlanError
from flightplan.garmin.parser import parse_fpl


def register(mcp: FastMCP) -> None:
    """Register flight plan tools with the MCP server."""

    @mcp.tool()
    def describe_flight_plan(path: str) -> dict[str, Any]:
        """Load a Garmin FPL file and summarize it.

        Args:
            path: Path to .fpl file

        Returns:
            Summary with creation time, waypoint and route details
        """
        try:
            with parse_fpl(Path(path)) as plan:
                return {
                    "description": plan.to_description(),
                    "summary": plan.describe(),
                }
        except FlightPlanError as e:
            return {"status": "error", "error": str(e)}

    @mcp.tool()
    def list_waypoints(path: str) -> dict[str, Any]:
        """List the waypoints of a Garmin FPL file in file order.

        Args:
            path: Path to .fpl file

        Returns:
            Waypoint info dicts under "waypoints"
        """
        try:
            with parse_fpl(Path(path)) as plan, plan.waypoints_iter() as waypoints:
                return {"waypoints": [waypoint.describe() for waypoint in waypoints]}
        except FlightPlanError as e:
            return {"status": "error", "error": str(e)}

    @mcp.tool()
    def list_route(path: str) -> dict[str, Any]:
        """List the route of a Garmin FPL file.

        Args:
            path: Path to .fpl file

        Returns:
            Route name and its points, each with the resolved waypoint if known
        """
        try:
            with parse_fpl(Path(path)) as plan:
                index = plan.waypoint_index()
                points = []
                for i in range(plan.route_points_count()):
                    point = plan.route_points_get(i)
                    waypoint = index.get(point.identifier)
                    points.append({
                        **point.describe(),
                        "resolved": waypoint is not None,
                        "waypoint": waypoint.describe() if waypoint else None,
                    })
                return {"name": plan.route_name(), "points": points}
        except FlightPlanError as e:
            return {"status": "error", "error": str(e)}
