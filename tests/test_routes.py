import pytest

from ptv2routes.routes import RouteError, RouteType


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, "CLEAN"),
        (1, "OVER_NON_RAIL"),
        (2, "OVER_NON_ROAD"),
        (4, "NO_TROLLEY_WIRE"),
        (8, "UNORDERED_GAP"),
        (16, "WRONG_STRUCTURE"),
        (32, "NO_STOPPLTF_AT_FRONT"),
        (64, "EMPTY_ROLE_NON_WAY"),
        (128, "STOPPLTF_AFTER_ROUTE"),
        (256, "STOP_NOT_ON_WAY"),
        (512, "NO_ROUTE"),
        (1024, "UNKNOWN_ROLE"),
        (2048, "UNKNOWN_TYPE"),
        (4096, "STOP_TAG_MISSING"),
        (8192, "PLTF_TAG_MISSING"),
        (16384, "STOP_IS_NOT_NODE"),
        (32768, "NO_FERRY"),
        (65536, "STOP_MISORDERED"),
    ],
)
def test_documented_bit_values(value, expected):
    assert RouteError(value) == RouteError[expected]
    assert int(RouteError(value)) == value


def test_every_error_is_a_single_distinct_bit():
    flags = [RouteError(int(e)) for e in RouteError if int(e) != 0]
    values = [int(e) for e in flags]
    assert len(set(values)) == len(values)
    assert all(v & (v - 1) == 0 for v in values)


def test_combining_errors_keeps_each_flag():
    error = RouteError(0)
    error |= RouteError(128)
    error |= RouteError(32)
    assert error & RouteError.STOPPLTF_AFTER_ROUTE == RouteError.STOPPLTF_AFTER_ROUTE
    assert error & RouteError.NO_STOPPLTF_AT_FRONT == RouteError.NO_STOPPLTF_AT_FRONT
    assert error & RouteError.UNKNOWN_ROLE == RouteError.CLEAN
    assert int(error) == 160


def test_clean_has_no_flags():
    clean = RouteError(0)
    for flag in RouteError:
        assert clean & flag == RouteError.CLEAN


def test_round_trip_from_int():
    combined = RouteError.UNORDERED_GAP | RouteError.NO_FERRY
    assert RouteError(int(combined)) == combined
    assert int(RouteError(int(combined))) == 8 | 32768


@pytest.mark.parametrize(
    "name",
    ["NONE", "BUS", "TROLLEYBUS", "AERIALWAY", "FERRY", "TRAIN", "TRAM", "SUBWAY", "LIGHT_RAIL"],
)
def test_route_types_lookup_by_name(name):
    member = RouteType[name]
    assert RouteType(member.value) is member
    assert RouteType(member.value).name == name


def test_route_types_are_distinct():
    members = list(RouteType)
    assert len(members) == 9
    assert [RouteType(t.value) for t in members] == members
    assert len({t.value for t in members}) == len(members)