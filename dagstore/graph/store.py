"""In-memory NetworkX based storage for a directed acyclic graph."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Hashable, Iterator, Optional

import networkx as nx

from dagstore.obs.events import EventBus

from .errors import (
    DagError,
    DuplicateEdge,
    DuplicateNode,
    EdgeNotFound,
    NodeNotFound,
    SelfLoop,
    WouldCycle,
)
from .model import EdgeRecord, NodeRecord

LOGGER = logging.getLogger(__name__)

PAYLOAD_KEY = "payload"


@dataclass(eq=False)
class Dag:
    """Directed acyclic graph with a payload on every node and edge.

    Nodes and edges live in a :class:`networkx.DiGraph`; its successor and
    predecessor mappings serve as the adjacency index, so relationships are
    always lookups by identifier. Every mutating method either moves the
    graph from one acyclic state to another or raises a
    :class:`~dagstore.graph.errors.DagError` and leaves it untouched.

    Node identifiers must be hashable and not ``None``. Iteration follows
    insertion order.

    Example::

        dag = Dag()
        dag.insert_node(2)
        dag.insert_node(4)
        dag.insert_node(3)
        dag.insert_edge(2, 3)
        dag.insert_edge(2, 4)
        [node_id for node_id, _ in dag.roots()]  # [2]
    """

    events: Optional[EventBus] = None
    _graph: nx.DiGraph = field(default_factory=nx.DiGraph, init=False, repr=False)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(nodes={self.node_count()}, edges={self.edge_count()})"

    def __len__(self) -> int:
        return self._graph.number_of_nodes()

    def __contains__(self, node_id: object) -> bool:
        return self.contains_node(node_id)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._graph)

    # -- mutation ---------------------------------------------------------

    def insert_node(self, node_id: Hashable, payload: Any = None) -> None:
        """Add ``node_id`` carrying ``payload``.

        Raises :class:`DuplicateNode` when the identifier is already taken.
        """

        if self.contains_node(node_id):
            raise self._reject("insert_node", DuplicateNode(node_id))
        self._graph.add_node(node_id, **{PAYLOAD_KEY: payload})
        LOGGER.debug("Inserted node %r", node_id)
        self._emit("insert_node", f"Inserted node {node_id!r}", [node_id])

    def remove_node(self, node_id: Hashable) -> Any:
        """Remove ``node_id`` and every edge touching it; return its payload."""

        if not self.contains_node(node_id):
            raise self._reject("remove_node", NodeNotFound(node_id))
        payload = self._graph.nodes[node_id][PAYLOAD_KEY]
        detached = [
            EdgeRecord(source, target, data[PAYLOAD_KEY])
            for source, target, data in self._graph.out_edges(node_id, data=True)
        ]
        detached.extend(
            EdgeRecord(source, target, data[PAYLOAD_KEY])
            for source, target, data in self._graph.in_edges(node_id, data=True)
        )
        self._graph.remove_node(node_id)
        LOGGER.debug("Removed node %r with %d incident edge(s)", node_id, len(detached))
        self._emit(
            "remove_node",
            f"Removed node {node_id!r}",
            [node_id],
            extras={
                "payload": payload,
                "edges": [edge.to_payload() for edge in detached],
            },
        )
        return payload

    def insert_edge(self, source: Hashable, target: Hashable, payload: Any = None) -> None:
        """Add the edge ``source -> target`` carrying ``payload``.

        Checks run in a fixed order and the first failure wins:
        :class:`SelfLoop`, :class:`NodeNotFound` (``source`` before
        ``target``), :class:`DuplicateEdge`, then :class:`WouldCycle`. The
        edge closes a cycle exactly when ``source`` is already reachable
        from ``target``.
        """

        if source is target or source == target:
            raise self._reject("insert_edge", SelfLoop(source))
        for node_id in (source, target):
            if not self.contains_node(node_id):
                raise self._reject("insert_edge", NodeNotFound(node_id))
        if self._graph.has_edge(source, target):
            raise self._reject("insert_edge", DuplicateEdge(source, target))
        if nx.has_path(self._graph, target, source):
            raise self._reject("insert_edge", WouldCycle(source, target, payload))
        self._graph.add_edge(source, target, **{PAYLOAD_KEY: payload})
        LOGGER.debug("Inserted edge %r -> %r", source, target)
        self._emit("insert_edge", f"Inserted edge {source!r} -> {target!r}", [source, target])

    def remove_edge(self, source: Hashable, target: Hashable) -> Any:
        """Remove the edge ``source -> target`` and return its payload."""

        if not self.contains_edge(source, target):
            raise self._reject("remove_edge", EdgeNotFound(source, target))
        payload = self._graph.edges[source, target][PAYLOAD_KEY]
        self._graph.remove_edge(source, target)
        LOGGER.debug("Removed edge %r -> %r", source, target)
        self._emit(
            "remove_edge",
            f"Removed edge {source!r} -> {target!r}",
            [source, target],
            extras={"payload": payload},
        )
        return payload

    def set_node(self, node_id: Hashable, payload: Any) -> None:
        """Replace the payload of ``node_id``."""

        if not self.contains_node(node_id):
            raise self._reject("set_node", NodeNotFound(node_id))
        self._graph.nodes[node_id][PAYLOAD_KEY] = payload
        self._emit("set_node", f"Updated node {node_id!r}", [node_id])

    def set_edge(self, source: Hashable, target: Hashable, payload: Any) -> None:
        """Replace the payload of the edge ``source -> target``."""

        if not self.contains_edge(source, target):
            raise self._reject("set_edge", EdgeNotFound(source, target))
        self._graph.edges[source, target][PAYLOAD_KEY] = payload
        self._emit("set_edge", f"Updated edge {source!r} -> {target!r}", [source, target])

    # -- queries ----------------------------------------------------------

    def contains_node(self, node_id: object) -> bool:
        """Return ``True`` when ``node_id`` is stored."""

        # DiGraph.__contains__ already answers False for unhashable values
        return node_id in self._graph

    def contains_edge(self, source: object, target: object) -> bool:
        """Return ``True`` when the edge ``source -> target`` is stored."""

        return (
            self.contains_node(source)
            and self.contains_node(target)
            and self._graph.has_edge(source, target)
        )

    def get_node(self, node_id: Hashable) -> Any:
        """Return the payload of ``node_id``."""

        if not self.contains_node(node_id):
            raise NodeNotFound(node_id)
        return self._graph.nodes[node_id][PAYLOAD_KEY]

    def get_edge(self, source: Hashable, target: Hashable) -> Any:
        """Return the payload of the edge ``source -> target``."""

        if not self.contains_edge(source, target):
            raise EdgeNotFound(source, target)
        return self._graph.edges[source, target][PAYLOAD_KEY]

    def roots(self) -> Iterator[tuple[Hashable, Any]]:
        """Yield ``(id, payload)`` for every node without incoming edges."""

        pred = self._graph.pred
        return (
            (node_id, data[PAYLOAD_KEY])
            for node_id, data in self._graph.nodes(data=True)
            if not pred[node_id]
        )

    def leaves(self) -> Iterator[tuple[Hashable, Any]]:
        """Yield ``(id, payload)`` for every node without outgoing edges."""

        succ = self._graph.succ
        return (
            (node_id, data[PAYLOAD_KEY])
            for node_id, data in self._graph.nodes(data=True)
            if not succ[node_id]
        )

    def children(self, node_id: Hashable) -> Iterator[tuple[Hashable, Any]]:
        """Yield ``(child id, edge payload)`` for the successors of ``node_id``."""

        if not self.contains_node(node_id):
            raise NodeNotFound(node_id)
        return ((child, data[PAYLOAD_KEY]) for child, data in self._graph.succ[node_id].items())

    def parents(self, node_id: Hashable) -> Iterator[tuple[Hashable, Any]]:
        """Yield ``(parent id, edge payload)`` for the predecessors of ``node_id``."""

        if not self.contains_node(node_id):
            raise NodeNotFound(node_id)
        return ((parent, data[PAYLOAD_KEY]) for parent, data in self._graph.pred[node_id].items())

    def in_degree(self, node_id: Hashable) -> int:
        if not self.contains_node(node_id):
            raise NodeNotFound(node_id)
        return self._graph.in_degree(node_id)

    def out_degree(self, node_id: Hashable) -> int:
        if not self.contains_node(node_id):
            raise NodeNotFound(node_id)
        return self._graph.out_degree(node_id)

    def nodes(self) -> Iterator[NodeRecord]:
        """Iterate over every node as a :class:`NodeRecord`."""

        for node_id, payload in self._graph.nodes(data=PAYLOAD_KEY):
            yield NodeRecord(node_id, payload)

    def edges(self) -> Iterator[EdgeRecord]:
        """Iterate over every edge as an :class:`EdgeRecord`."""

        for source, target, payload in self._graph.edges(data=PAYLOAD_KEY):
            yield EdgeRecord(source, target, payload)

    def node_count(self) -> int:
        return self._graph.number_of_nodes()

    def edge_count(self) -> int:
        return self._graph.number_of_edges()

    def copy(self, *, events: Optional[EventBus] = None) -> "Dag":
        """Return an independent copy sharing payload objects with ``self``.

        The copy reports to ``events`` rather than to this store's bus.
        """

        clone = Dag(events=events)
        clone._graph = self._graph.copy()
        return clone

    def as_networkx(self) -> nx.DiGraph:
        """Return a read-only ``networkx`` view of the graph.

        Payloads are stored under the ``"payload"`` attribute. The view
        tracks later mutations of this store.
        """

        return self._graph.copy(as_view=True)

    # -- internal helpers -------------------------------------------------

    def _reject(self, action: str, error: DagError) -> DagError:
        LOGGER.debug("Rejected %s: %s", action, error)
        return error

    def _emit(
        self,
        action: str,
        msg: str,
        target_ids: list[Hashable],
        extras: dict | None = None,
    ) -> None:
        if self.events is None:
            return
        self.events.emit(level="info", msg=msg, action=action, target_ids=target_ids, extras=extras)


__all__ = ["Dag", "PAYLOAD_KEY"]
