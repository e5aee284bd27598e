from __future__ import annotations
from pathlib import Path
from typing import Optional

import typer

from textseal import engine

from .common import parse_format, run, verify_file, verify_path

app = typer.Typer(add_completion=False, help="Text signing, verification and encryption")


@app.command()
def sign(
    input: str = typer.Option("-", "--input", "-i", callback=verify_file, help="File to sign, or - for stdin."),
    key: str = typer.Option(..., "--key", "-k", callback=verify_file, help="Key file (blake3.key or ed25519.sk)."),
    fmt: Optional[str] = typer.Option(None, "--format", callback=parse_format, help="blake3 (keyed-hash) or ed25519 (asymmetric)."),
):
    """Sign a message with a private/shared key."""
    typer.echo(run(lambda: engine.sign(input, key, fmt)))


@app.command()
def verify(
    input: str = typer.Option("-", "--input", "-i", callback=verify_file, help="File to verify, or - for stdin."),
    key: str = typer.Option(..., "--key", "-k", callback=verify_file, help="Key file (blake3.key or ed25519.pk)."),
    sig: str = typer.Option(..., "--sig", "-s", help="Signature as unpadded URL-safe base64."),
    fmt: Optional[str] = typer.Option(None, "--format", callback=parse_format, help="blake3 (keyed-hash) or ed25519 (asymmetric)."),
):
    """Verify a signed message; prints true or false."""
    valid = run(lambda: engine.verify(input, key, sig, fmt))
    typer.echo("true" if valid else "false")


@app.command()
def generate(
    fmt: Optional[str] = typer.Option(None, "--format", callback=parse_format, help="blake3, ed25519 or chacha20poly1305."),
    output: Path = typer.Option(..., "--output", "-o", callback=verify_path, help="Existing directory for the key files."),
):
    """Generate a key (or key pair) and write it to the output directory."""
    keys = run(lambda: engine.generate_keys(fmt))
    for path in run(lambda: engine.write_keys(fmt, keys, output)):
        typer.echo(f"wrote {path}", err=True)


@app.command()
def encrypt(
    input: str = typer.Option("-", "--input", "-i", callback=verify_file, help="File to encrypt, or - for stdin."),
    key: str = typer.Option(..., "--key", "-k", callback=verify_file, help="ChaCha20-Poly1305 key file."),
):
    """Encrypt a message; prints nonce||ciphertext as base64."""
    typer.echo(run(lambda: engine.encrypt(input, key)))


@app.command()
def decrypt(
    input: str = typer.Option("-", "--input", "-i", callback=verify_file, help="Base64 envelope file, or - for stdin."),
    key: str = typer.Option(..., "--key", "-k", callback=verify_file, help="ChaCha20-Poly1305 key file."),
):
    """Decrypt a base64 envelope and print the plaintext."""
    typer.echo(run(lambda: engine.decrypt(input, key)))
