"""Durability test: the vehicle must survive the given iteration count."""

from typing import List

from harness.config.constants import DURABILITY_TEST
from harness.fleet.vehicle import Vehicle
from harness.scenarios.base import TestScenario


class DurabilityTest(TestScenario):
    """Passes iff iterations <= vehicle.durability."""

    kind = DURABILITY_TEST

    def __init__(self, vehicle: Vehicle, iterations: int):
        super().__init__(vehicle)
        self._iterations = iterations

    @property
    def parameter(self) -> int:
        return self._iterations

    def check(self) -> bool:
        return self._iterations <= self.vehicle.durability

    def improvement_suggestion(self) -> str:
        return "Improve vehicle durability."

    def describe(self, passed: bool) -> List[str]:
        lines = [f"Performing {self.kind} for {self._iterations} iterations"]
        if passed:
            lines.append("Durability Test Passed!")
        else:
            lines.append(
                f"Durability Test Failed! Vehicle wore out before "
                f"{self._iterations} iterations."
            )
        return lines
