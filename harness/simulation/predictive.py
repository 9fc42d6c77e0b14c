"""Random test-case sampler for the predictive testing printout.

Samples are independent of the vehicle and of earlier test outcomes.
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np

from harness.config.constants import (
    SIMULATION_CASES,
    SIMULATION_DURABILITY_RANGE,
    SIMULATION_LOAD_RANGE,
    SIMULATION_TERRAINS,
)


@dataclass(frozen=True)
class SimulatedCase:
    load: int
    durability: int
    terrain: str

    def describe(self, index: int) -> str:
        return (
            f"Simulated Test {index}: Load = {self.load} kg, "
            f"Terrain = {self.terrain}, Durability = {self.durability} iterations"
        )


class PredictiveSimulator:
    """Draws uniform load / durability / terrain samples."""

    def __init__(
        self,
        rng: np.random.Generator,
        n_cases: int = SIMULATION_CASES,
        load_range: Tuple[int, int] = SIMULATION_LOAD_RANGE,
        durability_range: Tuple[int, int] = SIMULATION_DURABILITY_RANGE,
        terrains: Sequence[str] = SIMULATION_TERRAINS,
    ):
        if n_cases <= 0:
            raise ValueError(f"n_cases must be positive, got {n_cases}")
        assert load_range[0] <= load_range[1], f"Bad load range {load_range}"
        assert durability_range[0] <= durability_range[1], (
            f"Bad durability range {durability_range}"
        )
        assert len(terrains) > 0, "At least one terrain is required"

        self.rng = rng
        self.n_cases = n_cases
        self.load_range = load_range
        self.durability_range = durability_range
        self.terrains = list(terrains)

    def sample(self) -> SimulatedCase:
        """Draw one case. Range bounds are inclusive."""
        load = int(self.rng.integers(self.load_range[0], self.load_range[1] + 1))
        durability = int(
            self.rng.integers(self.durability_range[0], self.durability_range[1] + 1)
        )
        terrain = self.terrains[int(self.rng.integers(len(self.terrains)))]
        return SimulatedCase(load=load, durability=durability, terrain=terrain)

    def simulate(self) -> List[SimulatedCase]:
        return [self.sample() for _ in range(self.n_cases)]
