"""Tests for :mod:`dagstore.graph.errors`."""

from __future__ import annotations

import pytest

from dagstore.graph.errors import (
    DagError,
    DuplicateEdge,
    DuplicateNode,
    EdgeNotFound,
    NodeNotFound,
    SelfLoop,
    WouldCycle,
)


@pytest.mark.parametrize(
    "error, builtin",
    [
        (DuplicateNode(1), ValueError),
        (NodeNotFound(1), KeyError),
        (EdgeNotFound(1, 2), KeyError),
        (SelfLoop(1), ValueError),
        (DuplicateEdge(1, 2), ValueError),
        (WouldCycle(1, 2), ValueError),
    ],
)
def test_errors_share_base_and_builtin(error, builtin):
    assert isinstance(error, DagError)
    assert isinstance(error, builtin)


def test_key_errors_render_plain_messages():
    assert str(NodeNotFound(2)) == "Cannot find node in DAG where node_id=2."
    assert str(EdgeNotFound("a", "b")) == "Cannot find edge 'a' -> 'b' in DAG."


def test_would_cycle_message_names_both_endpoints():
    error = WouldCycle(3, 2, payload="data")
    assert "3 -> 2" in str(error)
    assert error.payload == "data"
