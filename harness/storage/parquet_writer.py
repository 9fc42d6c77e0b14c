"""Write one session's scenario outcomes to a Parquet file."""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence

import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq

from harness.config.constants import RESULT_SCHEMA_VERSION
from harness.scenarios.base import ScenarioOutcome
from harness.storage.schema_definition import RESULT_COLUMNS, RESULT_SCHEMA

logger = logging.getLogger(__name__)


class ParquetWriter:
    """Exports scenario outcomes with a versioned schema."""

    def __init__(self, output_path: Path):
        self.output_path = Path(output_path)

    def write_session(
        self,
        vehicle_name: str,
        outcomes: Sequence[ScenarioOutcome],
        timestamp: Optional[datetime] = None,
    ) -> Path:
        """Write outcomes, replacing any previous file at the same path.

        Returns:
            Path to the written Parquet file.
        """
        ts = (timestamp or datetime.now()).replace(microsecond=0)
        rows = [
            {
                "schema_version": RESULT_SCHEMA_VERSION,
                "timestamp": ts,
                "vehicle": vehicle_name,
                "scenario": outcome.kind,
                "parameter": str(outcome.parameter),
                "passed": outcome.passed,
            }
            for outcome in outcomes
        ]
        df = pd.DataFrame(rows, columns=RESULT_COLUMNS)

        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        table = pa.Table.from_pandas(df, schema=RESULT_SCHEMA, preserve_index=False)
        pq.write_table(table, self.output_path, compression="snappy")

        logger.info(f"Exported {len(rows)} outcomes to {self.output_path}")
        return self.output_path
