"""Pytest fixtures for flight plan tests."""

import pytest


SAMPLE_FPL = """<?xml version="1.0" encoding="utf-8"?>
<flight-plan xmlns="http://www8.garmin.com/xmlschemas/FlightPlan/v1">
  <created>2024-01-01T00:00:00Z</created>
  <waypoint-table>
    <waypoint>
      <identifier>KSFO</identifier>
      <type>AIRPORT</type>
      <country-code>K2</country-code>
      <lat>37.618999</lat>
      <lon>-122.375000</lon>
      <comment />
      <elevation>13</elevation>
    </waypoint>
    <waypoint>
      <identifier>KOAK</identifier>
      <type>AIRPORT</type>
      <country-code>K2</country-code>
      <lat>37.721278</lat>
      <lon>-122.220722</lon>
      <comment />
    </waypoint>
    <waypoint>
      <identifier>PYE</identifier>
      <type>VOR</type>
      <country-code>K2</country-code>
      <lat>38.079933</lat>
      <lon>-122.867769</lon>
      <comment>POINT REYES</comment>
    </waypoint>
  </waypoint-table>
  <route>
    <route-name>TEST</route-name>
    <flight-plan-index>1</flight-plan-index>
    <route-point>
      <waypoint-identifier>KSFO</waypoint-identifier>
      <waypoint-type>AIRPORT</waypoint-type>
      <waypoint-country-code>K2</waypoint-country-code>
    </route-point>
    <route-point>
      <waypoint-identifier>PYE</waypoint-identifier>
      <waypoint-type>VOR</waypoint-type>
      <waypoint-country-code>K2</waypoint-country-code>
    </route-point>
    <route-point>
      <waypoint-identifier>KOAK</waypoint-identifier>
      <waypoint-type>AIRPORT</waypoint-type>
      <waypoint-country-code>K2</waypoint-country-code>
    </route-point>
  </route>
</flight-plan>
"""

# No namespace, an unknown type, an unknown element, a duplicate identifier
# and a route point that references nothing in the waypoint table.
MESSY_FPL = """<?xml version="1.0"?>
<flight-plan>
  <created>20190315T20:34:01Z</created>
  <vendor-extension><foo>bar</foo></vendor-extension>
  <waypoint-table>
    <waypoint>
      <identifier>ALPHA</identifier>
      <type>SPACEPORT</type>
      <lat>10.5</lat>
      <lon>20.25</lon>
    </waypoint>
    <waypoint>
      <identifier>ALPHA</identifier>
      <type>USER WAYPOINT</type>
      <lat>north</lat>
      <lon>200</lon>
    </waypoint>
    <waypoint>
      <identifier>SUNOL</identifier>
      <type>INT</type>
      <lat>37.600000</lat>
      <lon>-121.900000</lon>
    </waypoint>
  </waypoint-table>
  <route>
    <route-name>MESSY</route-name>
    <route-point><waypoint-identifier>ALPHA</waypoint-identifier></route-point>
    <route-point><waypoint-identifier>GHOST</waypoint-identifier></route-point>
    <route-point><waypoint-identifier>SUNOL</waypoint-identifier></route-point>
  </route>
</flight-plan>
"""

NO_ROUTE_FPL = """<?xml version="1.0"?>
<flight-plan xmlns="http://www8.garmin.com/xmlschemas/FlightPlan/v1">
  <created>2024-01-01T00:00:00Z</created>
  <waypoint-table>
    <waypoint>
      <identifier>KSFO</identifier>
      <type>AIRPORT</type>
      <lat>37.618999</lat>
      <lon>-122.375000</lon>
    </waypoint>
  </waypoint-table>
</flight-plan>
"""


@pytest.fixture(autouse=True)
def clear_last_error():
    """Start every test with an empty last-error slot."""
    from flightplan.errors import cleanup

    cleanup()
    yield
    cleanup()


@pytest.fixture
def sample_fpl(tmp_path):
    """Write the KSFO-PYE-KOAK sample plan to disk."""
    path = tmp_path / "basic.fpl"
    path.write_text(SAMPLE_FPL, encoding="utf-8")
    return path


@pytest.fixture
def messy_fpl(tmp_path):
    """Write a plan with content problems that must not fail the parse."""
    path = tmp_path / "messy.fpl"
    path.write_text(MESSY_FPL, encoding="utf-8")
    return path


@pytest.fixture
def no_route_fpl(tmp_path):
    """Write a plan that is missing its route element."""
    path = tmp_path / "no_route.fpl"
    path.write_text(NO_ROUTE_FPL, encoding="utf-8")
    return path


@pytest.fixture
def sample_fpl_text():
    return SAMPLE_FPL


@pytest.fixture
def messy_fpl_text():
    return MESSY_FPL


@pytest.fixture
def no_route_fpl_text():
    return NO_ROUTE_FPL
