"""Garmin FPL parsing and writing."""

from flightplan.garmin.parser import parse_fpl, parse_fpl_string
from flightplan.garmin.writer import fpl_to_bytes, write_fpl

__all__ = ["parse_fpl", "parse_fpl_string", "fpl_to_bytes", "write_fpl"]
