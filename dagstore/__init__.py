"""dagstore package initialization.

An in-memory directed acyclic graph container. It stores nodes and edges
with arbitrary payloads and rejects any edge that would close a cycle.
Graph algorithms are left to callers, either on top of the adjacency
queries or on the read-only ``networkx`` view from :meth:`Dag.as_networkx`.
"""

from .graph import (
    Dag,
    DagError,
    DuplicateEdge,
    DuplicateNode,
    EdgeNotFound,
    EdgeRecord,
    NodeNotFound,
    NodeRecord,
    SelfLoop,
    SnapshotManager,
    WouldCycle,
)
from .obs import EventBus, configure_logging

__all__ = [
    "Dag",
    "DagError",
    "DuplicateEdge",
    "DuplicateNode",
    "EdgeNotFound",
    "EdgeRecord",
    "EventBus",
    "NodeNotFound",
    "NodeRecord",
    "SelfLoop",
    "SnapshotManager",
    "WouldCycle",
    "configure_logging",
]
