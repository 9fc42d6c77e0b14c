"""The canned test session: test, record, improve, simulate."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

import click
import numpy as np

from harness.config.constants import (
    SAMPLE_ITERATIONS,
    SAMPLE_LOAD,
    SAMPLE_TERRAIN,
    SAMPLE_VEHICLE,
)
from harness.config.schema import HarnessConfig
from harness.fleet.vehicle import Vehicle
from harness.results.manager import Improvement, TestResultManager
from harness.scenarios.base import ScenarioOutcome, TestScenario
from harness.scenarios.durability import DurabilityTest
from harness.scenarios.load import LoadTest
from harness.scenarios.terrain import TerrainTest
from harness.simulation.predictive import SimulatedCase
from harness.storage.parquet_writer import ParquetWriter

logger = logging.getLogger(__name__)


@dataclass
class SessionReport:
    outcomes: List[ScenarioOutcome] = field(default_factory=list)
    db_file: Optional[Path] = None
    saved: bool = False
    improvements: List[Improvement] = field(default_factory=list)
    vehicle_after: Dict[str, object] = field(default_factory=dict)
    simulated: List[SimulatedCase] = field(default_factory=list)
    parquet_path: Optional[Path] = None

    @property
    def n_passed(self) -> int:
        return sum(1 for o in self.outcomes if o.passed)

    @property
    def n_failed(self) -> int:
        return sum(1 for o in self.outcomes if not o.passed)

    def summary(self) -> str:
        lines = [f"Session: {self.n_passed} passed, {self.n_failed} failed"]
        for o in self.outcomes:
            lines.append(f"  [{o.verdict.upper()}] {o.kind}: {o.parameter}")
        v = self.vehicle_after
        if v:
            lines.append(
                f"Improved vehicle: max load {v['max_load']} kg, "
                f"durability {v['durability']}, "
                f"terrains {', '.join(v['terrain_capability'])}"
            )
        return "\n".join(lines)


def sample_vehicle() -> Vehicle:
    return Vehicle(
        name=SAMPLE_VEHICLE["name"],
        max_load=SAMPLE_VEHICLE["max_load"],
        terrain_capability=list(SAMPLE_VEHICLE["terrain_capability"]),
        durability=SAMPLE_VEHICLE["durability"],
    )


def sample_tests(vehicle: Vehicle) -> List[TestScenario]:
    return [
        LoadTest(vehicle, SAMPLE_LOAD),
        TerrainTest(vehicle, SAMPLE_TERRAIN),
        DurabilityTest(vehicle, SAMPLE_ITERATIONS),
    ]


def run_session(
    config: HarnessConfig,
    vehicle: Optional[Vehicle] = None,
    tests: Optional[List[TestScenario]] = None,
) -> SessionReport:
    """Run every test once, save results, improve the vehicle, then simulate.

    Args:
        config: Session settings.
        vehicle: Vehicle under test. Defaults to the sample vehicle.
        tests: Scenarios to run. Defaults to the three sample scenarios
            against ``vehicle``.
    """
    if vehicle is None:
        vehicle = sample_vehicle()
    if tests is None:
        tests = sample_tests(vehicle)

    manager = TestResultManager(rng=np.random.default_rng(config.seed))
    report = SessionReport(db_file=config.db_file)

    logger.info(f"Testing {vehicle.name} with {len(tests)} scenarios")
    for test in tests:
        outcome = test.perform_test()
        report.outcomes.append(outcome)
        manager.add_result(outcome.as_line())

    report.saved = manager.save_to_database(config.db_file)

    # Export reflects the vehicle as tested, before improvements
    if config.parquet_out is not None:
        try:
            report.parquet_path = ParquetWriter(config.parquet_out).write_session(
                vehicle.name, report.outcomes,
            )
        except OSError as exc:
            logger.warning(f"Could not export outcomes to {config.parquet_out}: {exc}")

    report.improvements = manager.process_improvements(
        tests, only_failed=config.only_failed, outcomes=report.outcomes,
    )
    report.vehicle_after = vehicle.snapshot()
    logger.info(
        f"Applied {len(report.improvements)} improvements to {vehicle.name}"
    )

    click.echo("")
    report.simulated = manager.predictive_testing_simulation(n_cases=config.samples)
    return report
