"""Base test scenario abstract class."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Union

import click

from harness.config.constants import FAIL, PASS, SEPARATOR
from harness.fleet.vehicle import Vehicle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScenarioOutcome:
    """Structured result of one scenario run.

    kind: scenario name, e.g. "Load Test".
    parameter: the load amount, terrain name or iteration count tested.
    passed: whether the vehicle met the scenario.
    """
    kind: str
    parameter: Union[int, str]
    passed: bool

    @property
    def verdict(self) -> str:
        return PASS if self.passed else FAIL

    def as_fields(self) -> List[str]:
        """Fields of the database line, in order."""
        return [self.kind, str(self.parameter), self.verdict]

    def as_line(self) -> str:
        return ",".join(self.as_fields())


class TestScenario(ABC):
    """Abstract base class for the three scenario kinds."""

    __test__ = False  # not a pytest test class

    kind: str = ""

    def __init__(self, vehicle: Vehicle):
        self._vehicle = vehicle

    @property
    def vehicle(self) -> Vehicle:
        """The vehicle under test, shared with other scenarios."""
        return self._vehicle

    @property
    @abstractmethod
    def parameter(self) -> Union[int, str]:
        """The value this scenario checks the vehicle against."""
        ...

    @abstractmethod
    def check(self) -> bool:
        """Whether the vehicle currently meets the scenario."""
        ...

    @abstractmethod
    def improvement_suggestion(self) -> str:
        ...

    @abstractmethod
    def describe(self, passed: bool) -> List[str]:
        """Human-readable report lines for a run."""
        ...

    def evaluate(self) -> ScenarioOutcome:
        """Judge the vehicle without printing anything."""
        return ScenarioOutcome(kind=self.kind, parameter=self.parameter, passed=self.check())

    def perform_test(self) -> ScenarioOutcome:
        """Run the scenario, print its report and return the outcome."""
        outcome = self.evaluate()
        logger.debug(f"{self.kind} on {self.vehicle.name}: {outcome.verdict}")
        for line in self.describe(outcome.passed):
            click.echo(line)
        click.echo(SEPARATOR)
        return outcome

    def result_for_database(self) -> str:
        return self.evaluate().as_line()
