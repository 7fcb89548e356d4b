"""Exceptions raised by :class:`dagstore.graph.store.Dag`."""
from __future__ import annotations

from typing import Any, Hashable


class DagError(Exception):
    """Base class for every structural rejection raised by the store."""


class DuplicateNode(DagError, ValueError):
    """A node with the given identifier is already present."""

    def __init__(self, node_id: Hashable) -> None:
        super().__init__(f"Node already exists in DAG where node_id={node_id!r}.")
        self.node_id = node_id


class NodeNotFound(DagError, KeyError):
    """The referenced node is not present."""

    def __init__(self, node_id: Hashable) -> None:
        super().__init__(f"Cannot find node in DAG where node_id={node_id!r}.")
        self.node_id = node_id

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class EdgeNotFound(DagError, KeyError):
    """The referenced edge is not present."""

    def __init__(self, source: Hashable, target: Hashable) -> None:
        super().__init__(f"Cannot find edge {source!r} -> {target!r} in DAG.")
        self.source = source
        self.target = target

    def __str__(self) -> str:
        return str(self.args[0])


class SelfLoop(DagError, ValueError):
    """An edge would connect a node to itself."""

    def __init__(self, node_id: Hashable) -> None:
        super().__init__(f"Edge {node_id!r} -> {node_id!r} is a self-loop.")
        self.node_id = node_id


class DuplicateEdge(DagError, ValueError):
    """An edge with the same ordered endpoints is already present."""

    def __init__(self, source: Hashable, target: Hashable) -> None:
        super().__init__(f"Edge {source!r} -> {target!r} already exists in DAG.")
        self.source = source
        self.target = target


class WouldCycle(DagError, ValueError):
    """Inserting the edge would close a directed cycle.

    The rejected edge payload is handed back on :attr:`payload` so callers
    do not lose it.
    """

    def __init__(self, source: Hashable, target: Hashable, payload: Any = None) -> None:
        super().__init__(
            f"Inserting edge {source!r} -> {target!r} would create a cycle in DAG."
        )
        self.source = source
        self.target = target
        self.payload = payload


__all__ = [
    "DagError",
    "DuplicateEdge",
    "DuplicateNode",
    "EdgeNotFound",
    "NodeNotFound",
    "SelfLoop",
    "WouldCycle",
]
