from __future__ import annotations
"""Key material model and the file loader shared by every backend.

Key files hold raw bytes. Only the first ``KEY_SIZE`` bytes are used; anything
after them is ignored, and a file that is too short is an error rather than
being zero padded. Loaded keys are plain immutable values owned by the
operation that loaded them; nothing here caches them.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Union

from .errors import KeyTooShortError, SourceNotFoundError, SourceUnreadableError
from .formats import TextFormat

KEY_SIZE = 32

log = logging.getLogger(__name__)

PathLike = Union[str, Path]


def load_key_bytes(path: PathLike, size: int = KEY_SIZE) -> bytes:
    p = Path(path)
    try:
        raw = p.read_bytes()
    except FileNotFoundError:
        raise SourceNotFoundError(f"key file not found: {p}") from None
    except (PermissionError, IsADirectoryError) as exc:
        raise SourceUnreadableError(f"cannot read key file {p}: {exc.strerror}") from None
    if len(raw) < size:
        raise KeyTooShortError(str(p), len(raw), size)
    log.debug("loaded %d-byte key from %s (%d bytes on disk)", size, p, len(raw))
    return raw[:size]


def _check_size(blob: bytes, label: str) -> None:
    if len(blob) < KEY_SIZE:
        raise KeyTooShortError(label, len(blob), KEY_SIZE)
    if len(blob) > KEY_SIZE:
        raise ValueError(f"{label} must be exactly {KEY_SIZE} bytes, got {len(blob)}")


@dataclass(frozen=True)
class HashKey:
    """Secret for keyed hashing. Never used for encryption."""
    material: bytes

    def __post_init__(self) -> None:
        _check_size(self.material, "hash key")

    @classmethod
    def load(cls, path: PathLike) -> "HashKey":
        return cls(load_key_bytes(path))

    def __repr__(self) -> str:
        return "HashKey(<redacted>)"


@dataclass(frozen=True)
class CipherKey:
    """Secret for authenticated encryption. Never used for hashing."""
    material: bytes

    def __post_init__(self) -> None:
        _check_size(self.material, "cipher key")

    @classmethod
    def load(cls, path: PathLike) -> "CipherKey":
        return cls(load_key_bytes(path))

    def __repr__(self) -> str:
        return "CipherKey(<redacted>)"


@dataclass(frozen=True)
class SigningKey:
    """Private scalar of an asymmetric pair."""
    material: bytes

    def __post_init__(self) -> None:
        _check_size(self.material, "signing key")

    @classmethod
    def load(cls, path: PathLike) -> "SigningKey":
        return cls(load_key_bytes(path))

    def __repr__(self) -> str:
        return "SigningKey(<redacted>)"


@dataclass(frozen=True)
class VerifyingKey:
    """Public point of an asymmetric pair; curve validation is the backend's job."""
    material: bytes

    def __post_init__(self) -> None:
        _check_size(self.material, "verifying key")

    @classmethod
    def load(cls, path: PathLike) -> "VerifyingKey":
        return cls(load_key_bytes(path))


def key_filenames(fmt: TextFormat) -> List[str]:
    """File names for the blobs returned by key generation, in the same order."""
    if fmt is TextFormat.BLAKE3:
        return ["blake3.key"]
    if fmt is TextFormat.ED25519:
        return ["ed25519.sk", "ed25519.pk"]
    if fmt is TextFormat.CHACHA20:
        return ["chacha20poly1305.key"]
    raise AssertionError(f"unhandled format: {fmt!r}")
