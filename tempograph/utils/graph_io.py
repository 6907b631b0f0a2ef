"""
Load and save temporal graphs as JSON.

File format::

    {
        "nodes": [{"id": 0, "time": 1}, ...],
        "edges": [{"source": 0, "target": 1, "time": 3}, ...]
    }

Every entry is one recorded update, so a node or edge updated several
times appears several times. Entries are replayed in file order, all nodes
before all edges, and ``save_graph`` writes them in the graph's insertion
order. A round trip therefore keeps ``all_node_ids()`` order, which seeded
generation depends on, even when event times were added out of order.
"""

from __future__ import annotations

import json
import os
from typing import Any

from tempograph.graph import GraphError, TemporalGraph


def load_graph(path: str) -> TemporalGraph:
    """
    Build a ``TemporalGraph`` from a JSON file.

    Raises
    ------
    FileNotFoundError
        If the file doesn't exist.
    ValueError
        If the JSON structure is invalid or the graph rejects an entry.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Graph file not found: {path}")

    with open(path) as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object, got {type(data).__name__}")

    for key in ("nodes", "edges"):
        if not isinstance(data.get(key, []), list):
            raise ValueError(f"'{key}' must be a list")

    nodes = data.get("nodes", [])
    edges = data.get("edges", [])
    for i, node in enumerate(nodes):
        _require(node, ("id", "time"), f"Node {i}")
    for i, edge in enumerate(edges):
        _require(edge, ("source", "target", "time"), f"Edge {i}")

    graph = TemporalGraph()
    try:
        for node in nodes:
            graph.add_node(node["time"], node["id"], node_type=node.get("type"))
        for edge in edges:
            graph.add_edge(edge["time"], edge["source"], edge["target"])
    except GraphError as exc:
        raise ValueError(f"Invalid graph file {path}: {exc}") from exc

    return graph


def save_graph(graph: TemporalGraph, path: str) -> None:
    """Write *graph* to *path* in the format read by :func:`load_graph`."""
    nodes = []
    for node_id in graph.all_node_ids():
        node_type = graph.node_type(node_id)
        for t in graph.node_history(node_id):
            entry: dict[str, Any] = {"id": node_id, "time": t}
            if node_type is not None:
                entry["type"] = node_type
            nodes.append(entry)

    edges = [
        {"source": src, "target": dst, "time": t}
        for src, dst in graph.edges()
        for t in graph.edge_history(src, dst)
    ]

    with open(path, "w") as f:
        json.dump({"nodes": nodes, "edges": edges}, f, indent=2)


def _require(entry: Any, keys: tuple[str, ...], label: str) -> None:
    if not isinstance(entry, dict):
        raise ValueError(f"{label} is not a dict: {type(entry).__name__}")
    missing = [k for k in keys if k not in entry]
    if missing:
        raise ValueError(f"{label} missing required key(s): {', '.join(missing)}")
