"""Conversion tools between flight plan formats."""

from pathlib import Path
from typing import Any

from mcp.server.fastmcp import FastMCP

from flightplan.errors import FlightPlanError
from flightplan.garmin.parser import parse_fpl
from flightplan.garmin.writer import write_fpl
from flightplan.xplane.writer import write_fms


def register(mcp: FastMCP) -> None:
    """Register conversion tools with the MCP server."""

    @mcp.tool()
    def convert_to_xplane(path: str, output_path: str | None = None) -> dict[str, Any]:
        """Convert a Garmin FPL file to an X-Plane 11 FMS route.

        Args:
            path: Path to .fpl file
            output_path: Output .fms path (defaults to the input path with .fms)

        Returns:
            Output path, route point count and any unresolved route points
        """
        output = Path(output_path) if output_path else Path(path).with_suffix(".fms")
        try:
            with parse_fpl(Path(path)) as plan:
                export = write_fms(plan, output)
                return {
                    "status": "converted",
                    "output_path": str(output),
                    "route_point_count": plan.route_points_count(),
                    "unresolved": export.unresolved,
                }
        except FlightPlanError as e:
            return {"status": "error", "error": str(e)}

    @mcp.tool()
    def convert_to_garmin(path: str, output_path: str) -> dict[str, Any]:
        """Re-write a Garmin FPL file in normalized form.

        Args:
            path: Path to source .fpl file
            output_path: Output .fpl path

        Returns:
            Output path and counts
        """
        try:
            with parse_fpl(Path(path)) as plan:
                write_fpl(plan, Path(output_path))
                return {
                    "status": "converted",
                    "output_path": output_path,
                    "waypoint_count": plan.waypoints_count(),
                    "route_point_count": plan.route_points_count(),
                }
        except FlightPlanError as e:
            return {"status": "error", "error": str(e)}
