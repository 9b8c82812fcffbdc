"""Typer-based command line interface for shamir-core."""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import structlog
import typer
from pydantic import ValidationError

from ..codec import decode_shares, format_secret, parse_secret, write_shares
from ..config import AppConfig, LoggingConfig, default_config_path, dump_default_config, load_config
from ..errors import ShamirError
from ..field import FieldElement
from ..logging import configure_logging
from ..sharing import generate_shares, reconstruct_secret

app = typer.Typer(help="Shamir secret sharing over the secp256k1 prime field")
logger = structlog.get_logger("shamir_core.cli")

SELFTEST_SECRET = 0xABCDEFDEADBEEF
SELFTEST_THRESHOLD = 100
SELFTEST_SHARES = 150


def _fail(exc: ShamirError) -> typer.Exit:
    logger.error("command.failed", error=type(exc).__name__)
    typer.echo(f"error: {exc}", err=True)
    return typer.Exit(code=2)


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(None, "--config", metavar="PATH", exists=True, dir_okay=False),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override the configured log level"),
) -> None:
    try:
        ctx.obj = load_config(config)
    except ValueError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=2)
    logging_config = ctx.obj.logging
    if log_level is not None:
        try:
            logging_config = LoggingConfig(level=log_level)
        except ValidationError:
            raise typer.BadParameter(f"Unknown log level: {log_level}", param_hint="--log-level") from None
    configure_logging(logging_config.normalized_level())


@app.command()
def create(
    ctx: typer.Context,
    secret: str = typer.Argument(..., help="Secret as a hex string"),
    shares: Optional[int] = typer.Option(None, "--shares", "-n", help="Number of shares to create"),
    threshold: Optional[int] = typer.Option(None, "--threshold", "-t", help="Shares needed to restore"),
    output: Optional[Path] = typer.Option(None, "-o", "--output", help="Write share records here"),
) -> None:
    """Split a secret into share records, one JSON object per line."""
    config: AppConfig = ctx.obj
    count = shares if shares is not None else config.sharing.shares
    needed = threshold if threshold is not None else config.sharing.threshold
    try:
        value = parse_secret(secret)
        points = generate_shares(value, needed, count)
    except ShamirError as exc:
        raise _fail(exc) from exc
    if output is None:
        write_shares(points, sys.stdout)
    else:
        with output.open("w", encoding="utf-8") as handle:
            write_shares(points, handle)
        typer.echo(f"Wrote {len(points)} shares -> {output}", err=True)
    logger.info("command.create", threshold=needed, shares=count)


@app.command()
def restore(
    input_path: Optional[Path] = typer.Option(None, "-i", "--input", exists=True, readable=True, dir_okay=False, help="Share records (default: stdin)"),
) -> None:
    """Recover a secret from share records."""
    try:
        if input_path is None:
            points = decode_shares(sys.stdin.buffer)
        else:
            with input_path.open("rb") as handle:
                points = decode_shares(handle)
        secret = reconstruct_secret(points)
    except ShamirError as exc:
        raise _fail(exc) from exc
    typer.echo(format_secret(secret))
    logger.info("command.restore", shares=len(points))


@app.command()
def selftest() -> None:
    """Split a fixed secret 100-of-150 and restore it from every window of 100 shares."""
    secret = FieldElement(SELFTEST_SECRET)
    try:
        points = generate_shares(secret, SELFTEST_THRESHOLD, SELFTEST_SHARES)
        for start in range(SELFTEST_SHARES - SELFTEST_THRESHOLD + 1):
            end = start + SELFTEST_THRESHOLD
            if reconstruct_secret(points[start:end]) != secret:
                typer.echo(f"Selftest FAILED on shares[{start}:{end}]", err=True)
                raise typer.Exit(code=1)
    except ShamirError as exc:
        raise _fail(exc) from exc
    typer.echo("Selftest OK")


@app.command("init-config")
def init_config(
    path: Optional[Path] = typer.Option(None, "--path", dir_okay=False, help="Where to write (default: user config dir)"),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file"),
) -> None:
    """Write the default configuration as YAML."""
    target = path or default_config_path()
    if target.exists() and not force:
        typer.echo(f"error: {target} already exists (use --force to overwrite)", err=True)
        raise typer.Exit(code=2)
    dump_default_config(target)
    typer.echo(f"Wrote default configuration -> {target}")


@app.command()
def version() -> None:
    from ..version import __version__

    typer.echo(f"shamir-core {__version__}")


if __name__ == "__main__":  # pragma: no cover
    app()
