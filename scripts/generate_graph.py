#!/usr/bin/env python3
"""
tempograph: populate a temporal graph from the command line.

1. Load an existing graph JSON (optional) or start empty
2. Run the chosen generator with the given size, probability and seed
3. Write the resulting graph JSON and/or an edge-list CSV

Usage
-----
    python scripts/generate_graph.py --nodes 100 --p 0.05 --output graph.json
    python scripts/generate_graph.py --input base.json --nodes 10 --p 0.2 \\
        --seed 0101010101010101010101010101010101010101010101010101010101010101
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from dotenv import load_dotenv
from pydantic import ValidationError

from tempograph.config import GenerationConfig
from tempograph.generators import get_generator, list_generators
from tempograph.graph import TemporalGraph
from tempograph.utils.graph_io import load_graph, save_graph

logger = logging.getLogger("tempograph.cli")


def main(argv: list[str] | None = None) -> int:
    # Load .env file if present
    load_dotenv()

    parser = argparse.ArgumentParser(description="Generate a synthetic temporal graph.")
    parser.add_argument("--generator", "-g", type=str, default="erdos_renyi", choices=list_generators(), help="Generator to run.")
    parser.add_argument("--nodes", "-n", type=int, required=True, help="Number of nodes to add.")
    parser.add_argument("--p", type=float, default=0.5, help="Edge probability.")
    parser.add_argument("--seed", "-s", type=str, default=None, help="32-byte seed as 64 hex characters.")
    parser.add_argument("--input", "-i", type=str, default=None, help="Existing graph JSON to extend.")
    parser.add_argument("--output", "-o", type=str, default=None, help="Where to write the graph JSON.")
    parser.add_argument("--edges-csv", type=str, default=None, help="Where to write the edge list as CSV.")
    parser.add_argument("--log-level", type=str, default=os.environ.get("TEMPOGRAPH_LOG_LEVEL", "INFO"), help="Logging level.")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(levelname)s | %(message)s",
    )

    try:
        config = GenerationConfig(
            generator=args.generator,
            n_nodes=args.nodes,
            p=args.p,
            seed=args.seed,
        )
    except ValidationError as e:
        logger.error("Invalid arguments: %s", e)
        return 2

    graph = TemporalGraph()
    if args.input:
        try:
            graph = load_graph(args.input)
        except (FileNotFoundError, ValueError) as e:
            logger.error("Could not load %s: %s", args.input, e)
            return 2
        logger.info(
            "Loaded %s: %d nodes, %d edges",
            args.input, graph.count_nodes(), graph.count_edges(),
        )

    generator = get_generator(config.generator)()
    summary = generator.generate(graph, config.n_nodes, **config.params())

    if args.output:
        save_graph(graph, args.output)
        logger.info("Wrote graph to %s", args.output)
    if args.edges_csv:
        df = graph.edges_dataframe()
        df.to_csv(args.edges_csv, index=False)
        logger.info("Wrote %d edge rows to %s", len(df), args.edges_csv)

    print(summary.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
