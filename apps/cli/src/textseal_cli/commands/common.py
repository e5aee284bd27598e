from __future__ import annotations
"""Option parsers and error reporting shared by the command groups."""

from pathlib import Path
from typing import Callable, Optional, TypeVar

import typer

from textseal import config
from textseal.errors import TextSealError, UnsupportedFormatError
from textseal.formats import Base64Format, TextFormat
from textseal.source import source_exists

T = TypeVar("T")


def parse_format(value: Optional[str]) -> TextFormat:
    try:
        if value is None:
            return config.default_format()
        return TextFormat.parse(value)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def parse_base64_format(value: str) -> Base64Format:
    try:
        return Base64Format.parse(value)
    except UnsupportedFormatError as exc:
        raise typer.BadParameter(str(exc)) from exc


def verify_file(value: str) -> str:
    # "-" means stdin
    if source_exists(value):
        return value
    raise typer.BadParameter("input file not found")


def verify_path(value: Path) -> Path:
    if value.exists() and value.is_dir():
        return value
    raise typer.BadParameter("path not found or is not a directory")


def run(action: Callable[[], T]) -> T:
    """Run an engine call, turning library errors into exit code 1."""
    try:
        return action()
    except TextSealError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1)
