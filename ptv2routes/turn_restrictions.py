"""Collect the node members of turn restriction relations."""

from __future__ import annotations

from typing import MutableSet

from .model import ItemType, Relation

_UNSIGNED_MASK = (1 << 64) - 1


class TurnRestrictionHandler:
    """Adds the IDs of all node members of each relation to a set."""

    def __init__(self, point_node_members: MutableSet[int]) -> None:
        self.point_node_members = point_node_members

    def relation(self, relation: Relation) -> None:
        """Record every node member of ``relation`` as an unsigned ID."""
        for member in relation.members:
            if member.type is ItemType.NODE:
                self.point_node_members.add(member.ref & _UNSIGNED_MASK)