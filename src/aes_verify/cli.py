"""Command-line interface for verifying the AES core."""

from __future__ import annotations

import sys

import click

from . import __version__
from .config import ValidationConfig
from .golden import FIPS_197_TEST_VECTORS, KEY_SCHEDULE_VECTORS
from .harness import validate as run_validation
from .reporting import export_to_csv, export_to_json, format_report


def _parse_bits(ctx: click.Context, param: click.Parameter, value: str) -> tuple[int, ...]:
    """Parse a comma-separated list of key sizes."""
    try:
        bits = tuple(int(part) for part in value.split(",") if part.strip())
    except ValueError:
        raise click.BadParameter(f"expected comma-separated integers, got {value!r}")
    return bits


@click.group()
@click.version_option(version=__version__, prog_name="aes-verify")
def main() -> None:
    """Verify the from-scratch AES core against PyCryptodome.

    Runs FIPS-197 known-answer vectors, key-schedule checks and random
    cross-checks for AES-128, AES-192 and AES-256.
    """
    pass


@main.command()
def vectors() -> None:
    """List the built-in known-answer vectors."""
    click.echo("Block vectors:")
    click.echo("")
    for vec in FIPS_197_TEST_VECTORS:
        click.echo(f"  {vec['name']}")
        click.echo(f"    key: {vec['key'].hex()}")
        click.echo(f"    pt:  {vec['plaintext'].hex()}")
        click.echo(f"    ct:  {vec['ciphertext'].hex()}")
        click.echo("")
    click.echo("Key schedule vectors:")
    click.echo("")
    for vec in KEY_SCHEDULE_VECTORS:
        click.echo(f"  {vec['name']}")
        click.echo(f"    key: {vec['key'].hex()}")
        click.echo(f"    w[{vec['length'] - 1}] = {vec['last_word'].hex()}")
        click.echo("")


@main.command()
@click.option(
    "--bits",
    type=str,
    default="128,192,256",
    callback=_parse_bits,
    help="Key sizes for random tests (comma-separated, default: 128,192,256)",
)
@click.option(
    "--n",
    "num_random",
    type=click.IntRange(min=0),
    default=100,
    help="Number of random test vectors per key size (default: 100)",
)
@click.option(
    "--seed",
    type=int,
    default=None,
    help="Random seed for reproducibility",
)
@click.option(
    "--no-decrypt",
    is_flag=True,
    help="Only check encryption",
)
@click.option(
    "--json",
    "json_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write a JSON report to this path",
)
@click.option(
    "--csv",
    "csv_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write a CSV report to this path",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Show detailed output",
)
def validate(
    bits: tuple[int, ...],
    num_random: int,
    seed: int | None,
    no_decrypt: bool,
    json_path: str | None,
    csv_path: str | None,
    verbose: bool,
) -> None:
    """Validate the AES core against FIPS-197 and random tests."""
    try:
        config = ValidationConfig(
            key_sizes=bits,
            num_random=num_random,
            seed=seed,
            check_decrypt=not no_decrypt,
        )
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--bits")

    click.echo(f"Key sizes: {', '.join(str(b) for b in config.key_sizes)}")
    click.echo(f"Random tests: {config.num_random} per key size"
               + (f" (seed={seed})" if seed is not None else ""))
    click.echo("")

    report = run_validation(config)
    click.echo(format_report(report, verbose=verbose))

    if json_path:
        click.echo(f"JSON report: {export_to_json(report, json_path)}")
    if csv_path:
        click.echo(f"CSV report: {export_to_csv(report, csv_path)}")

    sys.exit(0 if report.all_passed else 1)


if __name__ == "__main__":
    main()
