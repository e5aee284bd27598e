from __future__ import annotations
import typer

from textseal import codec
from textseal.errors import InvalidUtf8OutputError
from textseal.source import read_source

from .common import parse_base64_format, run, verify_file

app = typer.Typer(add_completion=False, help="Base64 encode/decode")


@app.command()
def encode(
    input: str = typer.Option("-", "--input", "-i", callback=verify_file, help="File to encode, or - for stdin."),
    fmt: str = typer.Option("standard", "--format", callback=parse_base64_format, help="standard or urlsafe."),
):
    """Encode a file to base64."""
    typer.echo(run(lambda: codec.b64encode(read_source(input), fmt)))


def _decode_text(input: str, fmt) -> str:
    data = codec.b64decode(read_source(input), fmt)
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidUtf8OutputError(f"decoded data is not valid UTF-8: {exc.reason}") from None


@app.command()
def decode(
    input: str = typer.Option("-", "--input", "-i", callback=verify_file, help="Base64 file to decode, or - for stdin."),
    fmt: str = typer.Option("standard", "--format", callback=parse_base64_format, help="standard or urlsafe."),
):
    """Decode a base64 file and print the text."""
    typer.echo(run(lambda: _decode_text(input, fmt)))
