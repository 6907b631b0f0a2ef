"""Pydantic models describing generation runs and their outcome."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from tempograph.utils.rng import SEED_SIZE, coerce_seed


# ---------------------------------------------------------------------------
# Run configuration
# ---------------------------------------------------------------------------

class GenerationConfig(BaseModel):
    """Parameters for a single generator invocation."""
    model_config = ConfigDict(populate_by_name=True)

    generator: str = Field(default="erdos_renyi", description="Registered generator name")
    n_nodes: int = Field(..., ge=0, description="Number of nodes to add")
    p: float = Field(
        default=0.5,
        description="Edge probability; <= 0 adds no edges, >= 1 connects every ordered pair",
    )
    seed: Optional[bytes] = Field(
        default=None,
        description=f"Optional {SEED_SIZE}-byte seed (bytes, list of ints, or hex string)",
    )

    @field_validator("seed", mode="before")
    @classmethod
    def _parse_seed(cls, value: Any) -> Optional[bytes]:
        if value is None:
            return None
        if isinstance(value, str):
            try:
                value = bytes.fromhex(value)
            except ValueError as exc:
                raise ValueError(f"Seed string must be hex: {exc}") from exc
        return coerce_seed(value)

    def params(self) -> dict[str, Any]:
        """Keyword arguments for the generator's ``generate``."""
        return {"p": self.p, "seed": self.seed}


# ---------------------------------------------------------------------------
# Result record
# ---------------------------------------------------------------------------

class GenerationSummary(BaseModel):
    """What one generator call did to the graph."""
    generator: str
    nodes_requested: int
    nodes_added: int = 0
    edges_added: int = 0
    draws: int = 0
    seeded: bool = False
    latest_time: Optional[int] = None
