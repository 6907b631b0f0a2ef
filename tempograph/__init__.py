"""Synthetic temporal network generation."""

from tempograph.generators import erdos_renyi, get_generator
from tempograph.graph import GraphError, TemporalGraph
from tempograph.utils.rng import RandomSource

__all__ = [
    "GraphError",
    "RandomSource",
    "TemporalGraph",
    "erdos_renyi",
    "get_generator",
]
