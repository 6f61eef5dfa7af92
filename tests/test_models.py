"""Tests for flight plan models."""

import pytest
from pydantic import ValidationError

from flightplan.errors import ReleasedError, RoutePointIndexError
from flightplan.models.plan import FlightPlan
from flightplan.models.route import Route, RoutePoint
from flightplan.models.waypoint import Waypoint, WaypointType, waypoint_type_str


def make_plan() -> FlightPlan:
    return FlightPlan(
        created="2024-01-01T00:00:00Z",
        waypoints=[
            Waypoint(identifier="KSFO", type=WaypointType.AIRPORT, lat=37.618999, lon=-122.375),
            Waypoint(identifier="PYE", type=WaypointType.VOR, lat=38.079933, lon=-122.867769),
        ],
        route=Route(name="TEST", points=[RoutePoint(identifier="KSFO"), RoutePoint(identifier="PYE")]),
    )


class TestWaypointType:
    @pytest.mark.parametrize("text,expected", [
        ("USER WAYPOINT", WaypointType.USER_WAYPOINT),
        ("AIRPORT", WaypointType.AIRPORT),
        ("NDB", WaypointType.NDB),
        ("VOR", WaypointType.VOR),
        ("INT", WaypointType.INT),
        ("INT-VRP", WaypointType.INT_VRP),
    ])
    def test_from_garmin(self, text, expected):
        assert WaypointType.from_garmin(text) is expected
        assert expected.to_garmin() == text

    @pytest.mark.parametrize("text", ["airport", "Vor", "SPACEPORT", "", None])
    def test_unknown_is_invalid(self, text):
        assert WaypointType.from_garmin(text) is WaypointType.INVALID

    def test_invalid_writes_empty(self):
        assert WaypointType.INVALID.to_garmin() == ""

    def test_type_labels(self):
        assert waypoint_type_str(WaypointType.AIRPORT) == "Airport"
        assert waypoint_type_str(WaypointType.INT) == "Intersection"
        assert waypoint_type_str(WaypointType.INVALID) == "Invalid"


class TestWaypoint:
    def test_defaults(self):
        waypoint = Waypoint()
        assert waypoint.identifier == ""
        assert waypoint.type is WaypointType.INVALID
        assert waypoint.lat is None
        assert waypoint.lat_str == ""

    def test_coordinate_text_prefers_source(self):
        waypoint = Waypoint(identifier="X", lat=37.5, lon=-122.0, lat_text="37.50", lon_text="-122")
        assert waypoint.lat_str == "37.50"
        assert waypoint.lon_str == "-122"

    def test_coordinate_text_from_decimal(self):
        waypoint = Waypoint(identifier="X", lat=37.5, lon=-122.0)
        assert waypoint.lat_str == "37.500000"
        assert waypoint.lon_str == "-122.000000"

    def test_latitude_range_enforced(self):
        with pytest.raises(ValidationError):
            Waypoint(identifier="X", lat=91.0, lon=0.0)

    def test_frozen(self):
        waypoint = Waypoint(identifier="X")
        with pytest.raises(ValidationError):
            waypoint.identifier = "Y"

    def test_describe(self):
        info = Waypoint(identifier="PYE", type=WaypointType.VOR, lat=38.0, lon=-122.8).describe()
        assert info["identifier"] == "PYE"
        assert info["type"] == "VOR"


class TestFlightPlan:
    def test_empty_plan(self):
        plan = FlightPlan()
        assert plan.created == ""
        assert plan.waypoints_count() == 0
        assert plan.route_name() == ""
        assert plan.route_points_count() == 0

    def test_accessors(self):
        plan = make_plan()
        assert plan.created == "2024-01-01T00:00:00Z"
        assert plan.waypoints_count() == 2
        assert plan.route_name() == "TEST"
        assert plan.route_points_count() == 2
        assert plan.route_points_get(1).identifier == "PYE"

    @pytest.mark.parametrize("index", [2, 3, -1, -2])
    def test_route_point_index_out_of_range(self, index):
        plan = make_plan()
        with pytest.raises(IndexError):
            plan.route_points_get(index)

    def test_route_point_index_error_details(self):
        with pytest.raises(RoutePointIndexError) as info:
            make_plan().route_points_get(5)
        assert info.value.index == 5
        assert info.value.count == 2

    def test_find_waypoint(self):
        plan = make_plan()
        assert plan.find_waypoint("PYE").type is WaypointType.VOR
        assert plan.find_waypoint("NOPE") is None

    def test_waypoint_index_keeps_first(self):
        plan = FlightPlan(waypoints=[
            Waypoint(identifier="DUP", type=WaypointType.NDB),
            Waypoint(identifier="DUP", type=WaypointType.VOR),
        ])
        assert plan.waypoints_count() == 2
        assert plan.waypoint_index()["DUP"].type is WaypointType.NDB

    def test_release(self):
        plan = make_plan()
        plan.release()
        plan.release()
        assert plan.released
        with pytest.raises(ReleasedError):
            plan.waypoints_count()
        with pytest.raises(ReleasedError):
            plan.route_points_get(0)

    def test_context_manager_releases(self):
        with make_plan() as plan:
            assert plan.route_points_count() == 2
        assert plan.released

    def test_describe(self):
        summary = make_plan().describe()
        assert summary["waypoint_count"] == 2
        assert summary["route"] == ["KSFO", "PYE"]
        assert summary["unresolved_route_points"] == []

    def test_to_description(self):
        text = make_plan().to_description()
        assert "KSFO [Airport]" in text
        assert "KSFO -> PYE" in text


class TestWaypointIterator:
    def test_next_until_end(self):
        plan = make_plan()
        it = plan.waypoints_iter()
        assert it.next().identifier == "KSFO"
        assert it.next().identifier == "PYE"
        assert it.next() is None
        assert it.next() is None

    def test_python_iteration(self):
        plan = make_plan()
        with plan.waypoints_iter() as it:
            assert [w.identifier for w in it] == ["KSFO", "PYE"]

    def test_returns_plan_owned_waypoints(self):
        plan = make_plan()
        assert plan.waypoints_iter().next() is plan.waypoints[0]

    def test_released_iterator(self):
        it = make_plan().waypoints_iter()
        it.release()
        with pytest.raises(ReleasedError):
            it.next()

    def test_iterator_release_leaves_plan_alive(self):
        plan = make_plan()
        plan.waypoints_iter().release()
        assert plan.waypoints_count() == 2

    def test_invalid_after_plan_release(self):
        plan = make_plan()
        it = plan.waypoints_iter()
        plan.release()
        with pytest.raises(ReleasedError):
            it.next()
