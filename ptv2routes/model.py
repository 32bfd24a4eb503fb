"""Plain OSM objects: nodes, ways and relations with their members."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import ClassVar


class ItemType(enum.Enum):
    """Kind of an OSM object."""

    NODE = "node"
    WAY = "way"
    RELATION = "relation"


@dataclass(frozen=True)
class Location:
    """A geographic position in degrees; undefined when a coordinate is None."""

    lon: float | None = None
    lat: float | None = None

    def is_valid(self) -> bool:
        """Return True if both coordinates are defined and within range."""
        if self.lon is None or self.lat is None:
            return False
        return -180.0 <= self.lon <= 180.0 and -90.0 <= self.lat <= 90.0


@dataclass(frozen=True)
class NodeRef:
    """Reference from a way to a node, optionally with its location."""

    ref: int
    location: Location = field(default_factory=Location)


@dataclass
class Node:
    """An OSM node."""

    item_type: ClassVar[ItemType] = ItemType.NODE

    id: int
    location: Location = field(default_factory=Location)
    tags: dict[str, str] = field(default_factory=dict)


@dataclass
class Way:
    """An OSM way: an ordered list of node references."""

    item_type: ClassVar[ItemType] = ItemType.WAY

    id: int
    nodes: list[NodeRef] = field(default_factory=list)
    tags: dict[str, str] = field(default_factory=dict)

    def is_closed(self) -> bool:
        """Return True if the first and the last node reference are the same node."""
        if not self.nodes:
            return False
        return self.nodes[0].ref == self.nodes[-1].ref


@dataclass
class RelationMember:
    """A member of a relation; ``obj`` holds the resolved object if known."""

    type: ItemType
    ref: int
    role: str = ""
    obj: Node | Way | Relation | None = None


@dataclass
class Relation:
    """An OSM relation."""

    item_type: ClassVar[ItemType] = ItemType.RELATION

    id: int
    tags: dict[str, str] = field(default_factory=dict)
    members: list[RelationMember] = field(default_factory=list)

    def get(self, key: str) -> str | None:
        """Return the value of tag ``key`` or None if the tag is missing."""
        return self.tags.get(key)