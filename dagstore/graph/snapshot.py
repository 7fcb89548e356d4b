"""Graph snapshot management."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .store import Dag


@dataclass
class SnapshotManager:
    """Maintain in-memory snapshots of a :class:`Dag` for quick rollback."""

    history: List[Dag] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.history)

    def snapshot(self, dag: Dag) -> None:
        """Persist a shallow copy of ``dag`` in ``history``."""

        self.history.append(dag.copy())

    def rollback(self) -> Dag:
        """Return the most recent snapshot."""

        if not self.history:
            raise RuntimeError("No snapshots available")
        return self.history.pop()
