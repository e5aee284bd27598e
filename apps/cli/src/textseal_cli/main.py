from __future__ import annotations
import logging
from typing import Optional

import typer
from zxcvbn import zxcvbn

from textseal import config, engine, genpass, registry

from .commands import b64, text

app = typer.Typer(add_completion=False, help="Sign, verify and encrypt text from files or stdin")
app.add_typer(text.app, name="text")
app.add_typer(b64.app, name="base64")


@app.callback()
def _configure_logging() -> None:
    try:
        level = config.log_level()
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def formats():
    """List registered formats and the operations each backend provides."""
    engine.load_adapters()
    by_format: dict = {}
    for fmt, capability in registry.list():
        by_format.setdefault(fmt, []).append(capability.value)
    for fmt, caps in by_format.items():
        typer.echo(f"- {fmt}: {', '.join(sorted(caps))}")


@app.command("genpass")
def gen_pass(
    length: Optional[int] = typer.Option(None, "--length", "-l", min=1, help="Password length."),
    upper: bool = typer.Option(True, "--upper/--no-upper"),
    lower: bool = typer.Option(True, "--lower/--no-lower"),
    number: bool = typer.Option(True, "--number/--no-number"),
    symbol: bool = typer.Option(True, "--symbol/--no-symbol"),
):
    """Generate a random password."""
    if length is None:
        try:
            length = config.password_length()
        except ValueError as exc:
            raise typer.BadParameter(str(exc)) from exc
    try:
        password = genpass.generate_password(length, upper, lower, number, symbol)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    typer.echo(password)
    # 0 (guessable) .. 4 (very strong)
    strength = zxcvbn(password)["score"]
    typer.echo(f"Estimated strength: {strength}/4", err=True)


def app_main():
    app()

if __name__ == "__main__":
    app_main()
