from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]

for rel in (
    Path("libs/core/src"),
    Path("libs/adapters/blake3/src"),
    Path("libs/adapters/ed25519/src"),
    Path("libs/adapters/chacha/src"),
    Path("apps/cli/src"),
):
    candidate = str(ROOT / rel)
    if candidate not in sys.path:
        sys.path.insert(0, candidate)


@pytest.fixture
def blake3_key(tmp_path: Path) -> Path:
    """Key file holding the bytes 0x00..0x1F."""
    path = tmp_path / "blake3.key"
    path.write_bytes(bytes(range(32)))
    return path


@pytest.fixture
def ed25519_keys(tmp_path: Path) -> tuple[Path, Path]:
    from textseal import engine

    keys = engine.generate_keys("ed25519")
    sk, pk = engine.write_keys("ed25519", keys, tmp_path)
    return sk, pk


@pytest.fixture
def cipher_key(tmp_path: Path) -> Path:
    from textseal import engine

    (path,) = engine.write_keys("chacha20poly1305", engine.generate_keys("chacha20poly1305"), tmp_path)
    return path


@pytest.fixture
def message_file(tmp_path: Path) -> Path:
    path = tmp_path / "message.txt"
    path.write_bytes(b"hello world!")
    return path


@pytest.fixture
def off_curve_public_key(tmp_path: Path) -> Path:
    """32-byte Ed25519 encoding whose y has no matching x on the curve."""
    p = 2**255 - 19
    d = (-121665 * pow(121666, p - 2, p)) % p
    for y in range(2, 200):
        x2 = (y * y - 1) * pow((d * y * y + 1) % p, p - 2, p) % p
        if x2 and pow(x2, (p - 1) // 2, p) != 1:
            path = tmp_path / "bad.pk"
            path.write_bytes(y.to_bytes(32, "little"))
            return path
    raise AssertionError("no off-curve y below 200")
