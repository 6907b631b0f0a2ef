"""Erdős-Rényi G(n, p) generator for directed temporal graphs."""

from __future__ import annotations

import logging
from typing import Any, Optional

from tempograph.config import GenerationSummary
from tempograph.generators.base import BaseGenerator, allocate_ids
from tempograph.graph import GraphError, GraphLike
from tempograph.utils.rng import RandomSource, SeedLike

logger = logging.getLogger(__name__)


def erdos_renyi(
    graph: GraphLike,
    n_nodes: int,
    p: float,
    seed: Optional[SeedLike] = None,
) -> None:
    """
    Add *n_nodes* nodes to *graph*, then a directed edge for each ordered
    pair of distinct nodes with probability *p*.

    Edges are sampled over every node in the graph, pre-existing ones
    included. With a 32-byte *seed* the result is reproducible for a given
    starting graph; without one the source is seeded from OS entropy.

    Nodes whose insertion is refused by the graph are logged and skipped,
    so fewer than *n_nodes* nodes may be added. A failing edge insertion
    aborts the call and the error propagates.
    """
    _populate(graph, n_nodes, p, RandomSource.from_optional_seed(seed))


def _populate(
    graph: GraphLike,
    n_nodes: int,
    p: float,
    rng: RandomSource,
) -> GenerationSummary:
    if n_nodes < 0:
        raise ValueError(f"n_nodes must be non-negative, got {n_nodes}")

    summary = GenerationSummary(
        generator=ErdosRenyiGenerator.name,
        nodes_requested=n_nodes,
        seeded=rng.seeded,
    )
    latest_time = graph.latest_time() or 0
    ids = graph.all_node_ids()
    max_id = max(ids) if ids else None
    new_ids = allocate_ids(graph, max_id)

    # Phase 1: nodes
    for _ in range(n_nodes):
        max_id = next(new_ids)
        latest_time += 1
        try:
            graph.add_node(latest_time, max_id)
        except GraphError as exc:
            logger.error("Could not add node %r at t=%d: %s", max_id, latest_time, exc)
            continue
        summary.nodes_added += 1

    if n_nodes:
        logger.debug(
            "Added %d/%d nodes, last allocated id %r",
            summary.nodes_added, n_nodes, max_id,
        )

    # Phase 2: edges over every node, in insertion order
    all_ids = graph.all_node_ids()
    draws_before = rng.draws
    for src in all_ids:
        for dst in all_ids:
            if src == dst:
                continue
            if rng.uniform() < p:
                latest_time += 1
                graph.add_edge(latest_time, src, dst)
                summary.edges_added += 1

    summary.draws = rng.draws - draws_before
    summary.latest_time = graph.latest_time()
    return summary


class ErdosRenyiGenerator(BaseGenerator):
    """
    Populates a graph using the directed Erdős-Rényi G(n, p) model.

    Each ordered pair (u, v), u != v, gets an edge u → v independently
    with probability *p*. No self-loops, no properties.

    Parameters
    ----------
    p : float, default 0.5
        Edge probability.
    seed : bytes | list[int] | None
        32-byte seed for reproducibility.
    """

    name = "erdos_renyi"

    def generate(self, graph: GraphLike, n_nodes: int, **params: Any) -> GenerationSummary:
        p = params.get("p", 0.5)
        seed = params.get("seed", None)

        rng = RandomSource.from_optional_seed(seed)
        summary = _populate(graph, n_nodes, p, rng)
        logger.info(
            "%s: +%d nodes, +%d edges over %d draws (p=%s, seeded=%s, latest t=%s)",
            self.name,
            summary.nodes_added,
            summary.edges_added,
            summary.draws,
            p,
            summary.seeded,
            summary.latest_time,
        )
        return summary
