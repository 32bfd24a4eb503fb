# ptv2routes

Building blocks for handling public transport route relations in the PTv2
tagging scheme: a small in-memory model of OSM nodes, ways and relations,
the set of errors a route can carry, a collector for turn restriction node
members, and a writer that turns routes and their errors into in-memory
feature layers.

## Installation

```
pip install ptv2routes
```

For running the tests:

```
pip install "ptv2routes[test]"
pytest
```

## Modules

- `ptv2routes.options` – `Options`, a dataclass of settings:
  `location_index_type` (default `"sparse_mem_array"`), `output_format`
  (default `"SQlite"`), `output_directory`, `verbose`, and the switches
  `crossings`, `platforms`, `points`, `railway_details`, `stations`, `stops`
  (all `True` by default).
- `ptv2routes.model` – `ItemType` (`NODE`, `WAY`, `RELATION`), `Location`,
  `NodeRef`, `Node`, `Way`, `RelationMember` and `Relation`.
  `Location.is_valid()` is true when both coordinates are set and within
  ±180 / ±90 degrees, `Way.is_closed()` when the first and last node
  references point to the same node, and `Relation.get(key)` returns a tag
  value or `None`.
- `ptv2routes.routes` – `RouteType` (none, bus, trolleybus, aerialway, ferry,
  train, tram, subway, light rail) and `RouteError`, an `IntFlag` where each
  bit stands for one problem found on a route, such as `OVER_NON_RAIL`,
  `UNORDERED_GAP` or `STOP_MISORDERED`; `CLEAN` is no error. Flags combine
  with `|` and are tested with `&`.
- `ptv2routes.turn_restrictions` – `TurnRestrictionHandler(point_node_members)`
  takes a mutable set; each call of `relation(relation)` adds the IDs of all
  node members of that relation to it (as unsigned 64-bit values).
- `ptv2routes.route_writer` – `Layer`, `Feature` and `RouteWriter`.

## Writing routes

`RouteWriter(options, verbose_output=None)` holds four `Layer` objects,
also available by name through its `layers` property:

| layer                 | attribute        | geometry        | contents                                   |
|-----------------------|------------------|-----------------|--------------------------------------------|
| `ptv2_routes_valid`   | `routes_valid`   | multilinestring | routes without errors                      |
| `ptv2_routes_invalid` | `routes_invalid` | multilinestring | routes with errors, one `T` field per flag |
| `ptv2_error_lines`    | `error_lines`    | linestring      | ways where an error was found              |
| `ptv2_error_points`   | `error_points`   | point           | nodes where an error was found             |

Geometries are plain tuples: a point is `(lon, lat)`, a linestring a tuple of
points, a multilinestring a tuple of linestrings. Each `Feature` has a
`geometry` and a `fields` dict of strings; relation tags that are missing are
left out of `fields`.

```python
import sys

from ptv2routes.model import Location, NodeRef, Way, Relation
from ptv2routes.options import Options
from ptv2routes.route_writer import RouteWriter
from ptv2routes.routes import RouteError

writer = RouteWriter(Options(), verbose_output=sys.stderr)

way = Way(
    id=1,
    nodes=[NodeRef(1, Location(9.0, 48.0)), NodeRef(2, Location(9.1, 48.1))],
    tags={"highway": "secondary"},
)
route = Relation(id=10, tags={"type": "route", "route": "bus", "ref": "42"})

writer.write_valid_route(route, [way], [""])
writer.write_invalid_route(route, [way], RouteError.UNORDERED_GAP | RouteError.NO_ROUTE)
writer.write_error_object(route, way, 2, "gap")

print(writer.routes_invalid.features[0].fields["error_unordered_gap"])  # T
```

Details:

- `write_valid_route` uses only way members whose role is empty, `forward`
  or `backward`; `write_invalid_route` uses every way member.
- Ways with a node lacking a valid location add no line to a route geometry;
  a way whose points collapse to fewer than two is skipped and reported
  (to `verbose_output` for valid routes, to standard error for invalid ones).
- `write_error_way`, `write_error_point`, `write_error_node_ref` and
  `write_error_object` return the new `Feature`, or `None` when no geometry
  could be built. `write_error_object` writes a node as a point (with way ID
  `0`), a way as a line, and ignores anything else.
- `Layer.add_field` raises `ValueError` for a field that already exists;
  `Layer.add_feature` raises `KeyError` for fields not in the layer's schema.

## What the package does not do

- It does not check routes: there is no validator that works out which
  `RouteError` flags apply. Callers pass the flags in.
- It does not read OSM files; objects are built in code with the model classes.
- Layers live in memory only. Nothing is written to disk, and
  `Options.output_format` and `Options.output_directory` are carried but not
  acted upon.
- There is no command-line program.