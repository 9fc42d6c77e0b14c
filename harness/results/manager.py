"""Collects result lines, persists them and applies vehicle improvements."""

import csv
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Union

import click
import numpy as np

from harness.config.constants import (
    DURABILITY_INCREMENT,
    DURABILITY_TEST,
    LOAD_INCREMENT,
    LOAD_TEST,
    SIMULATION_CASES,
    TERRAIN_TEST,
)
from harness.scenarios.base import ScenarioOutcome, TestScenario
from harness.simulation.predictive import PredictiveSimulator, SimulatedCase

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Improvement:
    """One change applied to a vehicle by the improvement pass."""
    kind: str                       # scenario that triggered it
    attribute: str                  # "max_load", "durability" or "terrain_capability"
    change: Union[int, str]         # increment, or appended terrain


class TestResultManager:
    """Owns the result list and the single mutation path for vehicles."""

    __test__ = False  # not a pytest test class

    def __init__(self, rng: Optional[np.random.Generator] = None):
        self.rng = rng if rng is not None else np.random.default_rng()
        self._results: List[str] = []

    @property
    def results(self) -> List[str]:
        return list(self._results)

    def add_result(self, text: str) -> None:
        self._results.append(text)

    def save_to_database(self, filename: Union[str, Path]) -> bool:
        """Append every stored line to ``filename``.

        Lines are comma-delimited. Fields holding a comma, quote or newline
        are quoted; ordinary fields are written as-is.

        Returns False (after logging) if the file cannot be opened or written.
        """
        path = Path(filename)
        try:
            with open(path, "a", newline="") as f:
                writer = csv.writer(f, lineterminator="\n")
                for line in self._results:
                    writer.writerow(_split_result(line))
        except OSError as exc:
            logger.warning(f"Could not write results to {path}: {exc}")
            return False

        logger.info(f"Saved {len(self._results)} results to {path}")
        return True

    def process_improvements(
        self,
        tests: Sequence[TestScenario],
        only_failed: bool = False,
        outcomes: Optional[Sequence[ScenarioOutcome]] = None,
    ) -> List[Improvement]:
        """Improve each test's vehicle according to the test's outcome.

        By default every scenario applies its improvement whether or not it
        passed. With ``only_failed`` set, passing scenarios are skipped.

        Args:
            tests: Scenarios whose vehicles are improved.
            only_failed: Skip scenarios that passed.
            outcomes: Outcomes recorded when ``tests`` ran, one per test.
                If omitted, every test is judged before any vehicle changes.
        """
        if outcomes is None:
            outcomes = [test.evaluate() for test in tests]
        if len(outcomes) != len(tests):
            raise ValueError(
                f"Got {len(outcomes)} outcomes for {len(tests)} tests"
            )

        applied = []
        for test, outcome in zip(tests, outcomes):
            if only_failed and outcome.passed:
                continue

            vehicle = test.vehicle
            if outcome.kind == LOAD_TEST:
                vehicle.increase_max_load(LOAD_INCREMENT)
                improvement = Improvement(outcome.kind, "max_load", LOAD_INCREMENT)
            elif outcome.kind == DURABILITY_TEST:
                vehicle.increase_durability(DURABILITY_INCREMENT)
                improvement = Improvement(outcome.kind, "durability", DURABILITY_INCREMENT)
            elif outcome.kind == TERRAIN_TEST:
                vehicle.add_terrain_capability(str(outcome.parameter))
                improvement = Improvement(
                    outcome.kind, "terrain_capability", str(outcome.parameter),
                )
            else:
                raise ValueError(f"Unknown scenario kind: {outcome.kind}")

            logger.debug(f"{vehicle.name}: {improvement.attribute} += {improvement.change}")
            applied.append(improvement)

        return applied

    def predictive_testing_simulation(
        self, n_cases: int = SIMULATION_CASES,
    ) -> List[SimulatedCase]:
        """Print randomly sampled test cases and return them."""
        cases = PredictiveSimulator(self.rng, n_cases=n_cases).simulate()
        click.echo("Predictive Testing Simulation:")
        for i, case in enumerate(cases, start=1):
            click.echo(case.describe(i))
        return cases


def _split_result(line: str) -> List[str]:
    """Split a stored line into kind, parameter and verdict.

    The parameter may itself contain commas, so the first and last
    delimiters are the field boundaries.
    """
    kind, _, rest = line.partition(",")
    parameter, sep, verdict = rest.rpartition(",")
    if not sep:
        return [kind, rest] if rest else [kind]
    return [kind, parameter, verdict]
