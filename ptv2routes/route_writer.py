"""Write public transport routes and their errors into in-memory layers."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Iterable, Sequence, TextIO

from .model import ItemType, Location, Node, NodeRef, Relation, Way
from .options import Options
from .routes import RouteError

MAX_FIELD_LENGTH = 254

Point = tuple[float, float]
LineString = tuple[Point, ...]
MultiLineString = tuple[LineString, ...]

_COMMON_FIELDS: tuple[tuple[str, int], ...] = (
    ("rel_id", 10),
    ("from", MAX_FIELD_LENGTH),
    ("to", MAX_FIELD_LENGTH),
    ("via", MAX_FIELD_LENGTH),
    ("ref", MAX_FIELD_LENGTH),
    ("name", MAX_FIELD_LENGTH),
    ("route", MAX_FIELD_LENGTH),
)

_ROUTE_FIELDS: tuple[tuple[str, int], ...] = _COMMON_FIELDS + (("operator", MAX_FIELD_LENGTH),)

_ERROR_FIELDS: tuple[tuple[str, int], ...] = _COMMON_FIELDS + (
    ("way_id", 10),
    ("node_id", 10),
    ("error", 50),
)

# Error flags and the field of the invalid routes layer that marks them.
_ERROR_FLAG_FIELDS: tuple[tuple[RouteError, str], ...] = (
    (RouteError.OVER_NON_RAIL, "error_over_non_rail"),
    (RouteError.OVER_NON_ROAD, "error_over_rail"),
    (RouteError.UNORDERED_GAP, "error_unordered_gap"),
    (RouteError.WRONG_STRUCTURE, "error_wrong_structure"),
    (RouteError.NO_STOPPLTF_AT_FRONT, "no_stops_pltf_at_begin"),
    (RouteError.STOPPLTF_AFTER_ROUTE, "stoppltf_after_route"),
    (RouteError.EMPTY_ROLE_NON_WAY, "non_way_empty_role"),
    (RouteError.STOP_NOT_ON_WAY, "stop_not_on_way"),
    (RouteError.NO_ROUTE, "no_way_members"),
    (RouteError.UNKNOWN_ROLE, "unknown_role"),
    (RouteError.UNKNOWN_TYPE, "unknown_route_type"),
    (RouteError.STOP_IS_NOT_NODE, "stop_is_not_node"),
    (RouteError.NO_FERRY, "error_over_non_ferry"),
    (RouteError.STOP_MISORDERED, "stops_misordered"),
)

_ROUTE_WAY_ROLES = frozenset({"", "forward", "backward"})


class GeometryError(ValueError):
    """Raised when a geometry cannot be built from an OSM object."""


@dataclass
class Feature:
    """A geometry with its attribute values."""

    geometry: object
    fields: dict[str, str] = field(default_factory=dict)


@dataclass
class Layer:
    """A named collection of features sharing a geometry type and a field schema."""

    name: str
    geometry_type: str
    fields: dict[str, int] = field(default_factory=dict)
    features: list[Feature] = field(default_factory=list)

    def add_field(self, name: str, length: int) -> None:
        """Add a string field of the given width to the schema."""
        if name in self.fields:
            raise ValueError(f"field {name!r} already exists in layer {self.name!r}")
        self.fields[name] = length

    def add_feature(self, geometry: object, fields: dict[str, str]) -> Feature:
        """Append a feature; every field must belong to the schema."""
        unknown = [name for name in fields if name not in self.fields]
        if unknown:
            raise KeyError(f"unknown fields in layer {self.name!r}: {', '.join(unknown)}")
        feature = Feature(geometry, dict(fields))
        self.features.append(feature)
        return feature


def _coordinates_valid(locations: Iterable[Location]) -> bool:
    return all(location.is_valid() for location in locations)


def _create_point(location: Location) -> Point:
    return (location.lon, location.lat)


def _create_linestring(way: Way) -> LineString:
    points: list[Point] = []
    for node_ref in way.nodes:
        point = _create_point(node_ref.location)
        if not points or points[-1] != point:
            points.append(point)
    if len(points) < 2:
        raise GeometryError(f"need at least two points for linestring (way_id={way.id})")
    return tuple(points)


def _relation_fields(relation: Relation, *keys: str) -> dict[str, str]:
    values = {"rel_id": str(relation.id)}
    for key in keys:
        value = relation.get(key)
        if value is not None:
            values[key] = value
    return values


class RouteWriter:
    """Writes routes as multilinestrings and their errors as points and linestrings."""

    def __init__(self, options: Options, verbose_output: TextIO | None = None) -> None:
        self.options = options
        self.verbose_output = verbose_output
        self.routes_valid = Layer("ptv2_routes_valid", "MultiLineString")
        self.routes_invalid = Layer("ptv2_routes_invalid", "MultiLineString")
        self.error_lines = Layer("ptv2_error_lines", "LineString")
        self.error_points = Layer("ptv2_error_points", "Point")
        for name, length in _ROUTE_FIELDS:
            self.routes_valid.add_field(name, length)
            self.routes_invalid.add_field(name, length)
        for _, name in _ERROR_FLAG_FIELDS:
            self.routes_invalid.add_field(name, 1)
        for name, length in _ERROR_FIELDS:
            self.error_lines.add_field(name, length)
            self.error_points.add_field(name, length)

    @property
    def layers(self) -> dict[str, Layer]:
        """All layers by name."""
        return {
            layer.name: layer
            for layer in (self.routes_valid, self.routes_invalid, self.error_lines, self.error_points)
        }

    def _log(self, message: str) -> None:
        if self.verbose_output is not None:
            self.verbose_output.write(f"{message}\n")

    def _route_lines(self, ways: Iterable[Way], report) -> MultiLineString:
        lines: list[LineString] = []
        for way in ways:
            if not _coordinates_valid(n.location for n in way.nodes):
                continue
            try:
                lines.append(_create_linestring(way))
            except GeometryError as err:
                report(str(err))
        return tuple(lines)

    def write_valid_route(
        self,
        relation: Relation,
        member_objects: Sequence[Node | Way | Relation | None],
        roles: Sequence[str | None],
    ) -> Feature:
        """Write a route without errors; only ways with a route role contribute geometry."""
        ways = (
            member
            for member, role in zip(member_objects, roles)
            if member is not None
            and member.item_type is ItemType.WAY
            and role is not None
            and role in _ROUTE_WAY_ROLES
        )
        geometry = self._route_lines(ways, self._log)
        fields = _relation_fields(relation, "name", "ref", "from", "to", "via", "route", "operator")
        return self.routes_valid.add_feature(geometry, fields)

    def write_invalid_route(
        self,
        relation: Relation,
        member_objects: Sequence[Node | Way | Relation | None],
        validation_result: RouteError,
    ) -> Feature:
        """Write a route with errors, marking each detected error with "T"."""
        ways = (m for m in member_objects if m is not None and m.item_type is ItemType.WAY)
        geometry = self._route_lines(ways, lambda message: print(message, file=sys.stderr))
        fields = _relation_fields(relation, "name", "ref", "from", "to", "via", "route", "operator")
        for flag, name in _ERROR_FLAG_FIELDS:
            if validation_result & flag == flag:
                fields[name] = "T"
        return self.routes_invalid.add_feature(geometry, fields)

    def write_error_way(
        self, relation: Relation, node_id: int, error_text: str, way: Way
    ) -> Feature | None:
        """Write a way involved in an error; returns None if no geometry can be built."""
        if not _coordinates_valid(n.location for n in way.nodes):
            return None
        try:
            geometry = _create_linestring(way)
        except GeometryError as err:
            self._log(str(err))
            return None
        fields = _relation_fields(relation, "name", "ref", "from", "to", "via", "route")
        fields.update(way_id=str(way.id), node_id=str(node_id), error=error_text)
        return self.error_lines.add_feature(geometry, fields)

    def write_error_point(
        self,
        relation: Relation,
        node_id: int,
        location: Location,
        error_text: str,
        way_id: int,
    ) -> Feature | None:
        """Write a node involved in an error; returns None if its location is invalid."""
        if not location.is_valid():
            return None
        fields = _relation_fields(relation, "name", "ref", "from", "to", "via", "route")
        fields.update(way_id=str(way_id), node_id=str(node_id), error=error_text)
        return self.error_points.add_feature(_create_point(location), fields)

    def write_error_node_ref(
        self, relation: Relation, node_ref: NodeRef, error_text: str, way_id: int
    ) -> Feature | None:
        """Write the node referenced by ``node_ref`` as an error point."""
        return self.write_error_point(relation, node_ref.ref, node_ref.location, error_text, way_id)

    def write_error_object(
        self,
        relation: Relation,
        obj: Node | Way | Relation | None,
        node_id: int,
        error_text: str,
    ) -> Feature | None:
        """Write a node as error point or a way as error line; other objects are ignored."""
        if obj is None:
            return None
        if obj.item_type is ItemType.NODE:
            return self.write_error_point(relation, obj.id, obj.location, error_text, 0)
        if obj.item_type is ItemType.WAY:
            return self.write_error_way(relation, node_id, error_text, obj)
        return None