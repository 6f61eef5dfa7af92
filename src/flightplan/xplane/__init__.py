"""X-Plane 11 FMS writing."""

from flightplan.xplane.writer import FmsExport, create_fms, write_fms

__all__ = ["FmsExport", "create_fms", "write_fms"]
