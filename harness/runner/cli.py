"""Command-line interface for the vehicle test harness."""

import logging
from pathlib import Path

import click

from harness.config.constants import DEFAULT_DB_FILE, SIMULATION_CASES
from harness.config.schema import HarnessConfig
from harness.runner.session import run_session
from harness.storage.result_log import format_summary, load_results, summarize_results


@click.command()
@click.option("--db-file", default=DEFAULT_DB_FILE, help="Result log to append to.")
@click.option("--seed", default=None, type=int, help="RNG seed for the simulation.")
@click.option("--samples", default=SIMULATION_CASES, type=click.IntRange(min=1),
              help="Number of simulated test cases.")
@click.option("--only-failed/--always-improve", default=False,
              help="Apply improvements only for failed tests.")
@click.option("--parquet-out", default=None, help="Also export outcomes to this Parquet file.")
@click.option("--summary", is_flag=True, help="Print per-scenario counts from the result log.")
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging.")
def main(db_file, seed, samples, only_failed, parquet_out, summary, verbose):
    """Run the canned vehicle test session."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger = logging.getLogger(__name__)

    config = HarnessConfig(
        db_file=Path(db_file),
        seed=seed,
        samples=samples,
        only_failed=only_failed,
        parquet_out=Path(parquet_out) if parquet_out else None,
    )
    logger.info(f"Starting session (seed={seed}, db_file={config.db_file})")

    report = run_session(config)
    click.echo("")
    click.echo(report.summary())

    if summary:
        click.echo("")
        click.echo(format_summary(summarize_results(load_results(config.db_file))))

    if not report.saved:
        logger.warning("Results were not saved; continuing.")
    logger.info("Done.")


if __name__ == "__main__":
    main()
