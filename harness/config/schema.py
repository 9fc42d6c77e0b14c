"""Run-time configuration for a harness session."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from harness.config.constants import DEFAULT_DB_FILE, SIMULATION_CASES


@dataclass
class HarnessConfig:
    """Settings for one session, normally filled from CLI options."""

    db_file: Path = Path(DEFAULT_DB_FILE)
    seed: Optional[int] = None          # None draws fresh OS entropy
    samples: int = SIMULATION_CASES
    only_failed: bool = False           # apply improvements to failed tests only
    parquet_out: Optional[Path] = None

    def __post_init__(self):
        self.db_file = Path(self.db_file)
        if self.parquet_out is not None:
            self.parquet_out = Path(self.parquet_out)
        if self.samples <= 0:
            raise ValueError(f"samples must be positive, got {self.samples}")
