"""Read the append-only result log back for summaries."""

import csv
import logging
from pathlib import Path
from typing import List

import pandas as pd

from harness.config.constants import PASS, SCENARIO_KINDS

logger = logging.getLogger(__name__)

LOG_COLUMNS = ["scenario", "parameter", "result"]


def load_results(path: Path) -> pd.DataFrame:
    """Load the result log into a DataFrame.

    Columns: scenario, parameter, result, passed. A missing or empty log
    gives an empty frame with the same columns.
    """
    path = Path(path)
    if not path.exists() or path.stat().st_size == 0:
        logger.debug(f"No results at {path}")
        return pd.DataFrame(
            {
                "scenario": pd.Series(dtype=str),
                "parameter": pd.Series(dtype=str),
                "result": pd.Series(dtype=str),
                "passed": pd.Series(dtype=bool),
            }
        )

    with open(path, newline="") as f:
        rows = [_log_fields(fields) for fields in csv.reader(f) if fields]

    df = pd.DataFrame(rows, columns=LOG_COLUMNS)
    df["passed"] = df["result"] == PASS
    return df


def _log_fields(fields: List[str]) -> List[str]:
    """Normalise one parsed log row to scenario, parameter, result.

    Older logs were written without quoting, so a parameter holding commas
    spreads over several fields; the first and last fields are the bounds.
    """
    if len(fields) > 3:
        logger.debug(f"Rejoining unquoted parameter in {fields}")
        return [fields[0], ",".join(fields[1:-1]), fields[-1]]
    return fields + [""] * (3 - len(fields))


def summarize_results(df: pd.DataFrame) -> pd.DataFrame:
    """Run / pass / fail counts per scenario, in scenario order.

    Scenarios that never ran are listed with zero counts.
    """
    runs = df.groupby("scenario").size()
    passes = df[df["passed"]].groupby("scenario").size()

    kinds = SCENARIO_KINDS + sorted(set(df["scenario"]) - set(SCENARIO_KINDS))
    summary = pd.DataFrame(index=pd.Index(kinds, name="scenario"))
    summary["runs"] = runs.reindex(kinds, fill_value=0).astype(int)
    summary["passed"] = passes.reindex(kinds, fill_value=0).astype(int)
    summary["failed"] = summary["runs"] - summary["passed"]
    return summary


def format_summary(summary: pd.DataFrame) -> str:
    lines = ["Result log summary:"]
    for kind, row in summary.iterrows():
        lines.append(
            f"  {kind}: {row['runs']} runs, {row['passed']} passed, {row['failed']} failed"
        )
    return "\n".join(lines)
