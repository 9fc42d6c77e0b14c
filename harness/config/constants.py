"""Scenario names, improvement increments, simulation ranges and defaults."""

# =============================================================================
# Scenarios
# =============================================================================

LOAD_TEST = "Load Test"
TERRAIN_TEST = "Terrain Test"
DURABILITY_TEST = "Durability Test"

SCENARIO_KINDS = [LOAD_TEST, TERRAIN_TEST, DURABILITY_TEST]

PASS = "Pass"
FAIL = "Fail"

# Printed after every scenario report
SEPARATOR_WIDTH = 40
SEPARATOR = "-" * SEPARATOR_WIDTH

# =============================================================================
# Improvements
# =============================================================================

LOAD_INCREMENT = 100
DURABILITY_INCREMENT = 500

# =============================================================================
# Predictive simulation
# =============================================================================

SIMULATION_CASES = 5
SIMULATION_LOAD_RANGE = (500, 1500)          # inclusive
SIMULATION_DURABILITY_RANGE = (3000, 7000)   # inclusive
SIMULATION_TERRAINS = ["Off-road", "Highway", "Mountain", "Urban"]

# =============================================================================
# Sample session
# =============================================================================

SAMPLE_VEHICLE = {
    "name": "Test Vehicle",
    "max_load": 1000,
    "terrain_capability": ["Off-road", "Highway"],
    "durability": 5000,
}

SAMPLE_LOAD = 1200
SAMPLE_TERRAIN = "Mountain"
SAMPLE_ITERATIONS = 4500

DEFAULT_DB_FILE = "test_results.txt"

# Bumped whenever the Parquet export columns change
RESULT_SCHEMA_VERSION = 1
