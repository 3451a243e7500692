"""
PinPoint CLI
=============

Click-based command-line interface for the PinPoint WPS PIN predictor.

Commands:
    pinpoint predict BSSID          Rank likely default PINs for a BSSID
    pinpoint generate BSSID         List every catalog generator's PIN
    pinpoint import CSV_FILE        Load observations into the database
    pinpoint checksum PIN           Compute or verify a WPS check digit

Common options:
    --config PATH       TOML configuration file
    --quiet             Suppress console output
    -v / -vv            Log INFO / DEBUG messages to stderr

References:
    - Click Documentation: https://click.palletsprojects.com/
"""

from __future__ import annotations

import sys
from typing import Optional

import click

from shared.config import PinpointConfig
from shared.console import PinpointConsole
from shared.logger import configure_logging

from pinpoint import __version__


# ---------------------------------------------------------------------------
# CLI Group
# ---------------------------------------------------------------------------


@click.group(
    name="pinpoint",
    help=(
        "PINPOINT - WPS Default PIN Predictor\n\n"
        "Predicts the factory-default WPS PIN of an access point from its "
        "BSSID using vendor formulas and nearby observed PINs. For "
        "authorised wireless-security auditing only."
    ),
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to PinPoint configuration file (TOML).",
)
@click.option(
    "--quiet",
    is_flag=True,
    default=False,
    help="Suppress console output.",
)
@click.option(
    "--verbose", "-v",
    count=True,
    help="Increase log verbosity (-v INFO, -vv DEBUG).",
)
@click.version_option(__version__, prog_name="pinpoint")
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: Optional[str],
    quiet: bool,
    verbose: int,
) -> None:
    """PinPoint WPS PIN predictor - main CLI entry point."""
    ctx.ensure_object(dict)

    try:
        config = PinpointConfig.load(config_path) if config_path else PinpointConfig.load()
    except FileNotFoundError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    settings = config.global_settings
    log_level = settings.log_level
    if verbose >= 2 or settings.debug:
        log_level = "DEBUG"
    elif verbose == 1:
        log_level = "INFO"
    configure_logging(
        log_level=log_level,
        log_file=settings.log_file or None,
        json_logs=settings.log_json,
    )

    ctx.obj["config"] = config
    ctx.obj["console"] = PinpointConsole(quiet=quiet)
    ctx.obj["quiet"] = quiet


# ---------------------------------------------------------------------------
# Predict Command
# ---------------------------------------------------------------------------


@cli.command(
    name="predict",
    help=(
        "Rank likely default WPS PINs for BSSID.\n\n"
        "Observations in the same OUI block are read from the SQLite "
        "database (default) or a CSV file, scored against the vendor "
        "formula catalog, and searched for constant or linear PIN "
        "patterns. Exits 1 when the dataset cannot be read."
    ),
)
@click.argument("bssid")
@click.option(
    "--db",
    "db_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="SQLite observation database (overrides configuration).",
)
@click.option(
    "--csv",
    "csv_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Read observations from a bssid,pin CSV file instead of the database.",
)
@click.option(
    "--top", "-n",
    type=click.IntRange(min=0),
    default=None,
    help="Show at most N candidates (0 shows all).",
)
@click.option(
    "--min-confidence",
    type=click.FloatRange(0.0, 1.0),
    default=None,
    help="Hide candidates below this confidence.",
)
@click.option(
    "--output", "-o",
    type=click.Path(),
    default=None,
    help="Write a JSON report to this path (relative paths go under output_dir).",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Print the result as JSON instead of a table.",
)
@click.pass_context
def predict(
    ctx: click.Context,
    bssid: str,
    db_path: Optional[str],
    csv_path: Optional[str],
    top: Optional[int],
    min_confidence: Optional[float],
    output: Optional[str],
    as_json: bool,
) -> None:
    """Predict default WPS PINs for a BSSID."""
    config: PinpointConfig = ctx.obj["config"]
    console: PinpointConsole = ctx.obj["console"]

    from pinpoint.collectors import (
        DatasetError,
        MemoryNeighborProvider,
        read_observations_csv,
    )
    from pinpoint.core.engine import PinpointEngine
    from pinpoint.output.report import PinpointReportGenerator

    if db_path and csv_path:
        raise click.UsageError("--db and --csv are mutually exclusive")

    settings = config.predictor
    if db_path:
        settings.database = db_path
    if top is not None:
        settings.top = top
    if min_confidence is not None:
        settings.min_confidence = min_confidence

    if not as_json:
        console.banner(__version__)

    engine = PinpointEngine(config=config, console=console)
    try:
        provider = None
        if csv_path:
            provider = MemoryNeighborProvider(
                read_observations_csv(csv_path), limit=settings.neighbor_limit
            )
        result = engine.predict(
            bssid,
            provider,
            output_path=output,
            display=not as_json,
        )
    except DatasetError as exc:
        console.error(str(exc))
        sys.exit(1)

    if as_json:
        click.echo(PinpointReportGenerator().to_json(result))


# ---------------------------------------------------------------------------
# Generate Command
# ---------------------------------------------------------------------------


@cli.command(
    name="generate",
    help="List the PIN every catalog generator produces for BSSID.",
)
@click.argument("bssid")
@click.pass_context
def generate(ctx: click.Context, bssid: str) -> None:
    """List catalog PINs for a BSSID."""
    from pinpoint.core.engine import PinpointEngine

    ctx.obj["console"].banner(__version__)
    engine = PinpointEngine(config=ctx.obj["config"], console=ctx.obj["console"])
    engine.generate(bssid, display=True)


# ---------------------------------------------------------------------------
# Import Command
# ---------------------------------------------------------------------------


@cli.command(
    name="import",
    help=(
        "Load bssid,pin observations from CSV_FILE into the database.\n\n"
        "Malformed rows are skipped with a warning; duplicates are ignored."
    ),
)
@click.argument("csv_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--db",
    "db_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="SQLite observation database (overrides configuration).",
)
@click.pass_context
def import_csv(ctx: click.Context, csv_file: str, db_path: Optional[str]) -> None:
    """Import observations from a CSV file."""
    config: PinpointConfig = ctx.obj["config"]
    console: PinpointConsole = ctx.obj["console"]

    from pinpoint.collectors import DatasetError, ObservationDatabase, read_observations_csv

    path = db_path or config.predictor.database
    try:
        with ObservationDatabase(path) as db:
            db.create_tables()
            added = db.insert_many(read_observations_csv(csv_file))
            total = db.count()
    except DatasetError as exc:
        console.error(str(exc))
        sys.exit(1)

    console.success(f"Imported {added} new observation(s) into {path} ({total} total)")


# ---------------------------------------------------------------------------
# Checksum Command
# ---------------------------------------------------------------------------


@cli.command(
    name="checksum",
    help=(
        "Compute or verify a WPS check digit.\n\n"
        "With up to 7 digits, prints the full 8-digit PIN. With 8 digits, "
        "reports whether the PIN's check digit is valid (exit 1 if not)."
    ),
)
@click.argument("pin")
@click.pass_context
def checksum_cmd(ctx: click.Context, pin: str) -> None:
    """Compute or verify a WPS PIN checksum."""
    from pinpoint.core.checksum import is_valid_pin, with_checksum
    from pinpoint.core.codec import pin_to_str

    digits = pin.strip()
    if not digits.isdigit() or len(digits) > 8:
        raise click.BadParameter("expected 1 to 8 decimal digits", param_hint="PIN")

    if len(digits) <= 7:
        click.echo(pin_to_str(with_checksum(int(digits))))
        return

    if is_valid_pin(int(digits)):
        click.echo(f"{digits}: valid")
    else:
        expected = pin_to_str(with_checksum(int(digits) // 10))
        click.echo(f"{digits}: invalid (expected {expected})")
        sys.exit(1)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main() -> None:
    """Entry point for the PinPoint CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
