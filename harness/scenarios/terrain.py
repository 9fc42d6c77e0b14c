"""Terrain test: the vehicle must list the given terrain."""

from typing import List

from harness.config.constants import TERRAIN_TEST
from harness.fleet.vehicle import Vehicle
from harness.scenarios.base import TestScenario


class TerrainTest(TestScenario):
    """Passes iff the terrain is an exact, case-sensitive capability entry."""

    kind = TERRAIN_TEST

    def __init__(self, vehicle: Vehicle, terrain: str):
        super().__init__(vehicle)
        self._terrain = terrain

    @property
    def parameter(self) -> str:
        return self._terrain

    def check(self) -> bool:
        return self._terrain in self.vehicle.terrain_capability

    def improvement_suggestion(self) -> str:
        return f"Add terrain capability: {self._terrain}"

    def describe(self, passed: bool) -> List[str]:
        lines = [f"Performing {self.kind} on terrain: {self._terrain}"]
        if passed:
            lines.append("Terrain Test Passed!")
        else:
            lines.append(f"Terrain Test Failed! Vehicle cannot handle {self._terrain}.")
        return lines
