"""Record types handed out by the DAG store."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Hashable


@dataclass(frozen=True)
class NodeRecord:
    """A node identifier together with its payload."""

    id: Hashable
    payload: Any = None


@dataclass(frozen=True)
class EdgeRecord:
    """A directed edge ``source -> target`` together with its payload."""

    source: Hashable
    target: Hashable
    payload: Any = None

    def to_payload(self) -> dict[str, Any]:
        """Return a plain mapping suitable for event extras."""

        return {"source": self.source, "target": self.target, "payload": self.payload}


__all__ = ["EdgeRecord", "NodeRecord"]
