"""Abstract base class for all graph generators."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterator, Optional

from tempograph.config import GenerationSummary
from tempograph.graph import GraphLike, NodeId


class BaseGenerator(ABC):
    """
    Base class for generators that populate an existing temporal graph.

    A generator never creates the graph itself: it is handed a mutable
    graph (empty or already populated) and appends nodes and edges with
    event times after the graph's latest time::

        graph = TemporalGraph()
        summary = ErdosRenyiGenerator().generate(graph, 100, p=0.1, seed=seed)
    """

    name: str = "base"

    @abstractmethod
    def generate(self, graph: GraphLike, n_nodes: int, **params: Any) -> GenerationSummary:
        """
        Populate *graph* in place.

        Parameters
        ----------
        graph : GraphLike
            Graph to mutate.
        n_nodes : int
            Number of new nodes to add.
        **params
            Generator-specific parameters.

        Returns
        -------
        GenerationSummary
            Counts of what was inserted.
        """


def next_id(graph: GraphLike, max_id: Optional[NodeId]) -> NodeId:
    """
    Successor of *max_id* for a new node.

    An empty graph starts at ``0``. Integer ids are incremented. For string
    ids there is no meaningful ordering, so the first decimal string not yet
    used in the graph is returned, counting up from the current node count.
    """
    return next(allocate_ids(graph, max_id))


def allocate_ids(graph: GraphLike, max_id: Optional[NodeId]) -> Iterator[NodeId]:
    """
    Yield successive new ids after *max_id*, following :func:`next_id`.

    For string ids the graph's ids are read once; later ids continue the
    same counter, skipping strings already in use.
    """
    if isinstance(max_id, str):
        used = set(graph.all_node_ids())
        k = len(used)
        while True:
            while str(k) in used:
                k += 1
            yield str(k)
            k += 1

    current = -1 if max_id is None else max_id
    while True:
        current += 1
        yield current
