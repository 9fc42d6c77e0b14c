"""Load test: the vehicle must carry the given load."""

from typing import List

from harness.config.constants import LOAD_TEST
from harness.fleet.vehicle import Vehicle
from harness.scenarios.base import TestScenario


class LoadTest(TestScenario):
    """Passes iff load <= vehicle.max_load."""

    kind = LOAD_TEST

    def __init__(self, vehicle: Vehicle, load: int):
        super().__init__(vehicle)
        self._load = load

    @property
    def parameter(self) -> int:
        return self._load

    def check(self) -> bool:
        return self._load <= self.vehicle.max_load

    def improvement_suggestion(self) -> str:
        return "Increase the vehicle's max load capacity."

    def describe(self, passed: bool) -> List[str]:
        lines = [f"Performing {self.kind} with load: {self._load} kg"]
        if passed:
            lines.append("Load Test Passed!")
        else:
            lines.append(
                f"Load Test Failed! Load {self._load} kg exceeded capacity "
                f"of {self.vehicle.max_load} kg."
            )
        return lines
