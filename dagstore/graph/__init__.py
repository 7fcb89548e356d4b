"""Graph subpackage containing the DAG store and its record types."""

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
from .snapshot import SnapshotManager
from .store import Dag

__all__ = [
    "Dag",
    "DagError",
    "DuplicateEdge",
    "DuplicateNode",
    "EdgeNotFound",
    "EdgeRecord",
    "NodeNotFound",
    "NodeRecord",
    "SelfLoop",
    "SnapshotManager",
    "WouldCycle",
]
