"""PyArrow schema for exported session results."""

import pyarrow as pa

RESULT_COLUMNS = [
    "schema_version",
    "timestamp",
    "vehicle",
    "scenario",
    "parameter",
    "passed",
]


def build_result_schema() -> pa.Schema:
    """One row per scenario outcome.

    The parameter column is a string because terrain tests carry a name
    while load and durability tests carry an integer.
    """
    return pa.schema([
        pa.field("schema_version", pa.int16()),
        pa.field("timestamp", pa.timestamp("s")),
        pa.field("vehicle", pa.string()),
        pa.field("scenario", pa.string()),
        pa.field("parameter", pa.string()),
        pa.field("passed", pa.bool_()),
    ])


RESULT_SCHEMA = build_result_schema()
