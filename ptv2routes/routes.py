"""Route types and the error flags detected on route relations."""

from __future__ import annotations

import enum


class RouteType(enum.Enum):
    """Kind of public transport route."""

    NONE = 0
    BUS = 1
    TROLLEYBUS = 2
    AERIALWAY = 3
    FERRY = 4
    TRAIN = 5
    TRAM = 6
    SUBWAY = 7
    LIGHT_RAIL = 8


class RouteError(enum.IntFlag):
    """All errors that can be detected on a route; each error is one bit."""

    CLEAN = 0
    OVER_NON_RAIL = 1
    OVER_NON_ROAD = 2
    NO_TROLLEY_WIRE = 4
    UNORDERED_GAP = 8
    WRONG_STRUCTURE = 16
    NO_STOPPLTF_AT_FRONT = 32
    EMPTY_ROLE_NON_WAY = 64
    STOPPLTF_AFTER_ROUTE = 128
    STOP_NOT_ON_WAY = 256
    NO_ROUTE = 512
    UNKNOWN_ROLE = 1024
    UNKNOWN_TYPE = 2048
    STOP_TAG_MISSING = 4096
    PLTF_TAG_MISSING = 8192
    STOP_IS_NOT_NODE = 16384
    NO_FERRY = 32768
    STOP_MISORDERED = 65536