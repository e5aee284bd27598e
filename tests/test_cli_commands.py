from __future__ import annotations

import re
from pathlib import Path

import pytest
from typer.testing import CliRunner

from textseal import codec
from textseal_cli import main as cli_main


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()


def _last_line(output: str) -> str:
    return output.strip().splitlines()[-1]


def test_formats_lists_every_backend(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli_main.app, ["formats"])
    assert result.exit_code == 0
    assert "- blake3: generate, sign, verify" in result.output
    assert "- ed25519: generate, sign, verify" in result.output
    assert "- chacha20poly1305: decrypt, encrypt, generate" in result.output


def test_generate_sign_verify_ed25519(tmp_path: Path, cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli_main.app, ["text", "generate", "--format", "ed25519", "-o", str(tmp_path)])
    assert result.exit_code == 0, result.output
    sk, pk = tmp_path / "ed25519.sk", tmp_path / "ed25519.pk"
    assert len(sk.read_bytes()) == 32 and len(pk.read_bytes()) == 32

    signed = cli_runner.invoke(
        cli_main.app,
        ["text", "sign", "-k", str(sk), "--format", "ed25519"],
        input="hello world!",
    )
    assert signed.exit_code == 0, signed.output
    sig = _last_line(signed.output)
    assert len(codec.decode(sig)) == 64

    verified = cli_runner.invoke(
        cli_main.app,
        ["text", "verify", "-k", str(pk), "--format", "asymmetric", "--sig", sig],
        input="hello world!",
    )
    assert verified.exit_code == 0, verified.output
    assert _last_line(verified.output) == "true"

    rejected = cli_runner.invoke(
        cli_main.app,
        ["text", "verify", "-k", str(pk), "--format", "ed25519", "--sig", sig],
        input="hello world?",
    )
    assert rejected.exit_code == 0
    assert _last_line(rejected.output) == "false"


def test_sign_uses_default_format_from_env(
    blake3_key: Path, message_file: Path, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.delenv("TEXTSEAL_FORMAT", raising=False)
    result = cli_runner.invoke(cli_main.app, ["text", "sign", "-i", str(message_file), "-k", str(blake3_key)])
    assert result.exit_code == 0, result.output
    assert len(codec.decode(_last_line(result.output))) == 32

    monkeypatch.setenv("TEXTSEAL_FORMAT", "rot13")
    bad = cli_runner.invoke(cli_main.app, ["text", "sign", "-i", str(message_file), "-k", str(blake3_key)])
    assert bad.exit_code == 2


def test_unsupported_format_is_a_usage_error(blake3_key: Path, cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli_main.app, ["text", "sign", "-k", str(blake3_key), "--format", "rsa"])
    assert result.exit_code == 2
    assert "Unsupported format" in result.output


def test_missing_input_file_is_rejected(tmp_path: Path, blake3_key: Path, cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(
        cli_main.app, ["text", "sign", "-i", str(tmp_path / "missing.txt"), "-k", str(blake3_key)]
    )
    assert result.exit_code == 2
    assert "input file not found" in result.output


def test_library_errors_exit_with_code_1(tmp_path: Path, message_file: Path, cli_runner: CliRunner) -> None:
    short = tmp_path / "short.key"
    short.write_bytes(b"x" * 31)
    result = cli_runner.invoke(
        cli_main.app, ["text", "sign", "-i", str(message_file), "-k", str(short), "--format", "blake3"]
    )
    assert result.exit_code == 1
    assert "error:" in result.output

    sig_len = cli_runner.invoke(
        cli_main.app,
        ["text", "verify", "-i", str(message_file), "-k", str(short), "--format", "blake3", "--sig", "AAAA"],
    )
    assert sig_len.exit_code == 1


def test_encrypt_decrypt_cli(tmp_path: Path, message_file: Path, cli_runner: CliRunner) -> None:
    gen = cli_runner.invoke(cli_main.app, ["text", "generate", "--format", "cipher", "-o", str(tmp_path)])
    assert gen.exit_code == 0, gen.output
    key = tmp_path / "chacha20poly1305.key"

    enc = cli_runner.invoke(cli_main.app, ["text", "encrypt", "-i", str(message_file), "-k", str(key)])
    assert enc.exit_code == 0, enc.output
    envelope = _last_line(enc.output)

    dec = cli_runner.invoke(cli_main.app, ["text", "decrypt", "-k", str(key)], input=envelope + "\n")
    assert dec.exit_code == 0, dec.output
    assert _last_line(dec.output) == "hello world!"

    raw = bytearray(codec.decode(envelope))
    raw[20] ^= 0xFF
    tampered = cli_runner.invoke(cli_main.app, ["text", "decrypt", "-k", str(key)], input=codec.encode(bytes(raw)))
    assert tampered.exit_code == 1
    assert "authentication" in tampered.output


def test_generate_requires_existing_directory(tmp_path: Path, cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli_main.app, ["text", "generate", "--format", "blake3", "-o", str(tmp_path / "nope")])
    assert result.exit_code == 2
    assert not (tmp_path / "nope").exists()


def test_base64_encode_decode(tmp_path: Path, cli_runner: CliRunner) -> None:
    plain = tmp_path / "plain.txt"
    plain.write_bytes(b"\xfb\xff hi")
    standard = cli_runner.invoke(cli_main.app, ["base64", "encode", "-i", str(plain)])
    assert standard.exit_code == 0
    assert _last_line(standard.output) == "+/8gaGk="

    urlsafe = cli_runner.invoke(cli_main.app, ["base64", "encode", "-i", str(plain), "--format", "urlsafe"])
    assert _last_line(urlsafe.output) == "-_8gaGk"

    decoded = cli_runner.invoke(cli_main.app, ["base64", "decode", "--format", "urlsafe"], input="aGVsbG8\n")
    assert decoded.exit_code == 0
    assert _last_line(decoded.output) == "hello"

    bad = cli_runner.invoke(cli_main.app, ["base64", "decode", "--format", "urlsafe"], input="aGVsbG8=")
    assert bad.exit_code == 1


def test_genpass(cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
    result = cli_runner.invoke(cli_main.app, ["genpass", "--length", "24", "--no-symbol"])
    assert result.exit_code == 0
    password = result.output.strip().splitlines()[0]
    assert len(password) == 24
    assert password.isalnum()
    assert re.search(r"^Estimated strength: [0-4]/4$", result.output, re.MULTILINE)

    monkeypatch.setenv("TEXTSEAL_PASSWORD_LENGTH", "12")
    env_default = cli_runner.invoke(cli_main.app, ["genpass"])
    assert len(env_default.output.strip().splitlines()[0]) == 12

    impossible = cli_runner.invoke(
        cli_main.app, ["genpass", "--no-upper", "--no-lower", "--no-number", "--no-symbol"]
    )
    assert impossible.exit_code == 2


def test_invalid_public_key_exits_with_code_1(
    off_curve_public_key: Path, message_file: Path, cli_runner: CliRunner
) -> None:
    result = cli_runner.invoke(
        cli_main.app,
        [
            "text", "verify", "-i", str(message_file), "-k", str(off_curve_public_key),
            "--format", "ed25519", "--sig", "A" * 86,
        ],
    )
    assert result.exit_code == 1
    assert "error:" in result.output
    assert "Ed25519 public key" in result.output


def test_unreadable_key_exits_with_code_1(
    blake3_key: Path, message_file: Path, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch
) -> None:
    def denied(self):
        raise PermissionError(13, "Permission denied", str(self))

    monkeypatch.setattr(Path, "read_bytes", denied)
    result = cli_runner.invoke(
        cli_main.app, ["text", "sign", "-i", str(message_file), "-k", str(blake3_key), "--format", "blake3"]
    )
    assert result.exit_code == 1
    assert "cannot read key file" in result.output
