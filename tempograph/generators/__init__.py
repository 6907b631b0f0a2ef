"""Generators that populate temporal graphs."""

from tempograph.generators.base import BaseGenerator, allocate_ids, next_id
from tempograph.generators.erdos_renyi import ErdosRenyiGenerator, erdos_renyi

# Names accepted by GenerationConfig.generator and the CLI's --generator
GENERATOR_REGISTRY: dict[str, type[BaseGenerator]] = {
    ErdosRenyiGenerator.name: ErdosRenyiGenerator,
}


def get_generator(name: str) -> type[BaseGenerator]:
    """Look up a generator class by name."""
    try:
        return GENERATOR_REGISTRY[name]
    except KeyError:
        available = ", ".join(sorted(GENERATOR_REGISTRY))
        raise ValueError(f"Unknown generator '{name}'. Available: {available}") from None


def list_generators() -> list[str]:
    return sorted(GENERATOR_REGISTRY)


__all__ = [
    # registry
    "GENERATOR_REGISTRY",
    "get_generator",
    "list_generators",
    # building blocks
    "BaseGenerator",
    "allocate_ids",
    "next_id",
    # Erdős-Rényi
    "ErdosRenyiGenerator",
    "erdos_renyi",
]
