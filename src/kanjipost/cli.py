"""Command-line interface for kanjipost."""

from __future__ import annotations

from typing import List, NoReturn, Optional, Tuple

import click
from rich.console import Console

from .api import decode, encode_text, random_unit
from .config import CarrierCfg
from .exceptions import KanjiPostError
from .utils import configure_logging

err_console = Console(stderr=True)


def _fail(message: str) -> NoReturn:
    err_console.print(f"[red]{message}[/red]")
    raise SystemExit(1)


def _load_cfg() -> CarrierCfg:
    try:
        return CarrierCfg.from_env()
    except KanjiPostError as exc:
        _fail(f"configuration error: {exc}")


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"], case_sensitive=False),
    default=None,
    help="Set the log level for the CLI session.",
)
def main(log_level: Optional[str]) -> None:
    """Encrypt text into 140-character CJK units and back."""
    configure_logging(log_level)


@main.command("encode")
@click.argument("text", required=False)
def encode_command(text: Optional[str]) -> None:
    """Encode TEXT (or stdin) and print one unit per line."""
    if text is None:
        text = click.get_text_stream("stdin").read()
    cfg = _load_cfg()
    try:
        units = encode_text(text, cfg=cfg)
    except KanjiPostError as exc:
        _fail(f"encode failed: {exc}")
    for unit in units:
        click.echo(unit)


@main.command("decode")
@click.argument("units", nargs=-1)
def decode_command(units: Tuple[str, ...]) -> None:
    """Decode UNITS (or stdin lines, terminal unit last) and print the payload."""
    collected: List[str] = list(units)
    if not collected:
        collected = [line.strip() for line in click.get_text_stream("stdin")]
    collected = [unit for unit in collected if unit]
    cfg = _load_cfg()
    try:
        result = decode(collected, cfg=cfg)
    except (KanjiPostError, ValueError) as exc:
        _fail(f"decode failed: {exc}")
    click.echo(result.value)


@main.command("decoy")
@click.option("--count", type=click.IntRange(min=1), default=1, show_default=True)
def decoy_command(count: int) -> None:
    """Print COUNT random decoy units."""
    for _ in range(count):
        click.echo(random_unit())

