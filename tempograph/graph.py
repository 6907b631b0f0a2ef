"""In-memory temporal graph store used as the target of the generators."""

from __future__ import annotations

from typing import Any, Optional, Protocol, Union

import networkx as nx
import pandas as pd

NodeId = Union[int, str]


class GraphError(Exception):
    """Raised when the store refuses an insertion."""


class GraphLike(Protocol):
    """The subset of graph operations a generator relies on."""

    def latest_time(self) -> Optional[int]: ...

    def all_node_ids(self) -> list[NodeId]: ...

    def add_node(
        self,
        t: int,
        node_id: NodeId,
        properties: Optional[dict[str, Any]] = None,
        node_type: Optional[str] = None,
    ) -> None: ...

    def add_edge(
        self,
        t: int,
        src: NodeId,
        dst: NodeId,
        properties: Optional[dict[str, Any]] = None,
        edge_type: Optional[str] = None,
    ) -> None: ...


class TemporalGraph:
    """
    Directed graph where every node and edge insertion is tagged with an
    integer event time.

    Adding a node or edge that already exists records another update in its
    history rather than creating a duplicate. Ids are either all ``int`` or
    all ``str``.

    Usage
    -----
    >>> g = TemporalGraph()
    >>> g.add_node(1, 0)
    >>> g.add_edge(2, 0, 1)
    >>> g.count_nodes(), g.count_edges(), g.latest_time()
    (2, 1, 2)
    """

    def __init__(self) -> None:
        self._graph = nx.DiGraph()
        self._id_kind: Optional[type] = None
        self._earliest: Optional[int] = None
        self._latest: Optional[int] = None

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_node(
        self,
        t: int,
        node_id: NodeId,
        properties: Optional[dict[str, Any]] = None,
        node_type: Optional[str] = None,
    ) -> None:
        """Record a node update at time *t*, creating the node if needed."""
        self._check_time(t)
        self._check_id(node_id)
        self._touch_node(t, node_id, properties, node_type)
        self._advance_clock(t)

    def add_edge(
        self,
        t: int,
        src: NodeId,
        dst: NodeId,
        properties: Optional[dict[str, Any]] = None,
        edge_type: Optional[str] = None,
    ) -> None:
        """Record a directed edge update at time *t*.

        Missing endpoints are created at the same time.
        """
        self._check_time(t)
        self._check_id(src)
        self._check_id(dst)
        if type(src) is not type(dst):
            raise GraphError(
                f"Edge endpoints {src!r} and {dst!r} mix "
                f"{type(src).__name__} and {type(dst).__name__} ids"
            )

        for endpoint in (src, dst):
            if endpoint not in self._graph:
                self._touch_node(t, endpoint, None, None)

        if self._graph.has_edge(src, dst):
            data = self._graph[src][dst]
            data["history"].append(t)
        else:
            self._graph.add_edge(src, dst, history=[t], edge_type=edge_type, properties={})
            data = self._graph[src][dst]
        if properties:
            data["properties"].update(properties)
        self._advance_clock(t)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def latest_time(self) -> Optional[int]:
        return self._latest

    def earliest_time(self) -> Optional[int]:
        return self._earliest

    def all_node_ids(self) -> list[NodeId]:
        """Return every node id in insertion order."""
        return list(self._graph.nodes())

    def has_node(self, node_id: NodeId) -> bool:
        return node_id in self._graph

    def has_edge(self, src: NodeId, dst: NodeId) -> bool:
        return self._graph.has_edge(src, dst)

    def count_nodes(self) -> int:
        return self._graph.number_of_nodes()

    def count_edges(self) -> int:
        return self._graph.number_of_edges()

    def edges(self) -> list[tuple[NodeId, NodeId]]:
        """Return every (src, dst) pair in insertion order."""
        return list(self._graph.edges())

    def node_history(self, node_id: NodeId) -> list[int]:
        if node_id not in self._graph:
            raise KeyError(node_id)
        return list(self._graph.nodes[node_id]["history"])

    def edge_history(self, src: NodeId, dst: NodeId) -> list[int]:
        if not self._graph.has_edge(src, dst):
            raise KeyError((src, dst))
        return list(self._graph[src][dst]["history"])

    def node_type(self, node_id: NodeId) -> Optional[str]:
        return self._graph.nodes[node_id].get("node_type")

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def to_networkx(self) -> nx.DiGraph:
        """Return a copy of the underlying ``networkx.DiGraph``."""
        return self._graph.copy()

    def nodes_dataframe(self) -> pd.DataFrame:
        """One row per node: id, first time seen, number of updates."""
        rows = [
            {
                "id": node_id,
                "first_seen": data["history"][0],
                "updates": len(data["history"]),
                "node_type": data.get("node_type"),
            }
            for node_id, data in self._graph.nodes(data=True)
        ]
        return pd.DataFrame(rows, columns=["id", "first_seen", "updates", "node_type"])

    def edges_dataframe(self) -> pd.DataFrame:
        """One row per edge update, sorted by time."""
        rows = [
            {"time": t, "source": src, "target": dst}
            for src, dst, data in self._graph.edges(data=True)
            for t in data["history"]
        ]
        df = pd.DataFrame(rows, columns=["time", "source", "target"])
        return df.sort_values("time", kind="stable").reset_index(drop=True)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _touch_node(
        self,
        t: int,
        node_id: NodeId,
        properties: Optional[dict[str, Any]],
        node_type: Optional[str],
    ) -> None:
        if node_id in self._graph:
            data = self._graph.nodes[node_id]
            data["history"].append(t)
            if node_type is not None:
                data["node_type"] = node_type
        else:
            self._graph.add_node(node_id, history=[t], node_type=node_type, properties={})
            data = self._graph.nodes[node_id]
            if self._id_kind is None:
                self._id_kind = type(node_id)
        if properties:
            data["properties"].update(properties)

    def _advance_clock(self, t: int) -> None:
        if self._latest is None or t > self._latest:
            self._latest = t
        if self._earliest is None or t < self._earliest:
            self._earliest = t

    @staticmethod
    def _check_time(t: Any) -> None:
        if isinstance(t, bool) or not isinstance(t, int):
            raise GraphError(f"Event time must be an int, got {type(t).__name__}")
        if t < 0:
            raise GraphError(f"Event time must be non-negative, got {t}")

    def _check_id(self, node_id: Any) -> None:
        if isinstance(node_id, bool) or not isinstance(node_id, (int, str)):
            raise GraphError(
                f"Node id must be an int or str, got {type(node_id).__name__}"
            )
        if self._id_kind is not None and type(node_id) is not self._id_kind:
            raise GraphError(
                f"Node id {node_id!r} is a {type(node_id).__name__} but this graph "
                f"uses {self._id_kind.__name__} ids"
            )
