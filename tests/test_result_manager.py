"""Tests for result collection, persistence and improvements."""

from pathlib import Path

import numpy as np
import pytest

from harness.results.manager import Improvement, TestResultManager
from harness.scenarios.base import TestScenario
from harness.scenarios.durability import DurabilityTest
from harness.scenarios.load import LoadTest
from harness.scenarios.terrain import TerrainTest


@pytest.fixture
def manager(rng):
    return TestResultManager(rng=rng)


class TestResults:
    def test_add_result_keeps_order(self, manager):
        manager.add_result("Load Test,1200,Fail")
        manager.add_result("Terrain Test,Mountain,Fail")
        assert manager.results == ["Load Test,1200,Fail", "Terrain Test,Mountain,Fail"]

    def test_results_is_a_copy(self, manager):
        manager.add_result("Load Test,1200,Fail")
        manager.results.append("junk")
        assert len(manager.results) == 1


class TestSaveToDatabase:
    def test_writes_lines(self, manager, tmp_path: Path):
        path = tmp_path / "results.txt"
        manager.add_result("Load Test,1200,Fail")
        manager.add_result("Durability Test,4500,Pass")
        assert manager.save_to_database(path)
        assert path.read_text() == "Load Test,1200,Fail\nDurability Test,4500,Pass\n"

    def test_appends_across_runs(self, manager, tmp_path: Path):
        path = tmp_path / "results.txt"
        manager.add_result("Load Test,1200,Fail")
        manager.save_to_database(path)
        manager.save_to_database(path)
        assert path.read_text().splitlines() == ["Load Test,1200,Fail"] * 2

    def test_comma_in_terrain_is_quoted(self, manager, tmp_path: Path):
        path = tmp_path / "results.txt"
        manager.add_result("Terrain Test,Rocky, Wet,Fail")
        manager.save_to_database(path)
        assert path.read_text() == 'Terrain Test,"Rocky, Wet",Fail\n'

    def test_unwritable_path_returns_false(self, manager, tmp_path: Path):
        manager.add_result("Load Test,1200,Fail")
        missing_dir = tmp_path / "missing" / "results.txt"
        assert manager.save_to_database(missing_dir) is False
        assert not missing_dir.exists()

    def test_empty_manager_creates_empty_file(self, manager, tmp_path: Path):
        path = tmp_path / "results.txt"
        assert manager.save_to_database(path)
        assert path.read_text() == ""


class TestProcessImprovements:
    def test_applies_regardless_of_outcome(self, manager, vehicle):
        tests = [
            LoadTest(vehicle, 1200),          # fails
            TerrainTest(vehicle, "Mountain"),  # fails
            DurabilityTest(vehicle, 4500),    # passes
        ]
        applied = manager.process_improvements(tests)

        assert vehicle.max_load == 1100
        assert vehicle.durability == 5500
        assert vehicle.terrain_capability == ["Off-road", "Highway", "Mountain"]
        assert applied == [
            Improvement("Load Test", "max_load", 100),
            Improvement("Terrain Test", "terrain_capability", "Mountain"),
            Improvement("Durability Test", "durability", 500),
        ]

    def test_passing_terrain_still_appended(self, manager, vehicle):
        manager.process_improvements([TerrainTest(vehicle, "Highway")])
        assert vehicle.terrain_capability == ["Off-road", "Highway", "Highway"]

    def test_only_failed_skips_passing_tests(self, manager, vehicle):
        tests = [
            LoadTest(vehicle, 1200),
            TerrainTest(vehicle, "Mountain"),
            DurabilityTest(vehicle, 4500),
        ]
        applied = manager.process_improvements(tests, only_failed=True)

        assert vehicle.max_load == 1100
        assert vehicle.durability == 5000
        assert vehicle.terrain_capability == ["Off-road", "Highway", "Mountain"]
        assert [a.kind for a in applied] == ["Load Test", "Terrain Test"]

    def test_does_not_parse_suggestion_text(self, manager, vehicle):
        class QuietLoadTest(LoadTest):
            def improvement_suggestion(self) -> str:
                return "nothing to see"

        manager.process_improvements([QuietLoadTest(vehicle, 10)])
        assert vehicle.max_load == 1100

    def test_unknown_kind_rejected(self, manager, vehicle):
        class OddTest(TestScenario):
            kind = "Odd Test"

            @property
            def parameter(self):
                return 0

            def check(self):
                return False

            def improvement_suggestion(self):
                return ""

            def describe(self, passed):
                return []

        with pytest.raises(ValueError, match="Unknown scenario kind"):
            manager.process_improvements([OddTest(vehicle)])

    def test_only_failed_judges_before_improving(self, manager, vehicle):
        tests = [LoadTest(vehicle, 1050), LoadTest(vehicle, 1100)]
        applied = manager.process_improvements(tests, only_failed=True)

        assert len(applied) == 2
        assert vehicle.max_load == 1200

    def test_only_failed_repeated_terrain(self, manager, vehicle):
        tests = [TerrainTest(vehicle, "Mountain"), TerrainTest(vehicle, "Mountain")]
        manager.process_improvements(tests, only_failed=True)
        assert vehicle.terrain_capability.count("Mountain") == 2

    def test_uses_recorded_outcomes(self, manager, vehicle):
        tests = [LoadTest(vehicle, 1200), DurabilityTest(vehicle, 4500)]
        outcomes = [test.perform_test() for test in tests]
        vehicle.increase_max_load(1000)
        vehicle.increase_durability(-1000)

        applied = manager.process_improvements(tests, only_failed=True, outcomes=outcomes)

        assert [a.kind for a in applied] == ["Load Test"]
        assert vehicle.durability == 4000

    def test_outcome_count_mismatch_rejected(self, manager, vehicle):
        tests = [LoadTest(vehicle, 1200), DurabilityTest(vehicle, 4500)]
        with pytest.raises(ValueError, match="outcomes"):
            manager.process_improvements(tests, outcomes=[tests[0].evaluate()])

    def test_empty_tests(self, manager, vehicle):
        assert manager.process_improvements([]) == []
        assert vehicle.max_load == 1000


class TestPredictiveTestingSimulation:
    def test_prints_five_cases(self, manager, capsys):
        cases = manager.predictive_testing_simulation()
        out = capsys.readouterr().out.splitlines()
        assert len(cases) == 5
        assert out[0] == "Predictive Testing Simulation:"
        assert len(out) == 6
        assert out[1].startswith("Simulated Test 1: Load = ")

    def test_seeded_output_is_deterministic(self):
        a = TestResultManager(rng=np.random.default_rng(7)).predictive_testing_simulation()
        b = TestResultManager(rng=np.random.default_rng(7)).predictive_testing_simulation()
        assert a == b

    def test_default_rng(self):
        cases = TestResultManager().predictive_testing_simulation()
        assert len(cases) == 5
