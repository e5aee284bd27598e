from __future__ import annotations
"""Closed set of algorithm tags understood by the engine."""

from enum import Enum
from typing import Dict, FrozenSet

from .errors import UnsupportedFormatError


class Capability(str, Enum):
    SIGN = "sign"
    VERIFY = "verify"
    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"
    GENERATE = "generate"


class TextFormat(str, Enum):
    BLAKE3 = "blake3"
    ED25519 = "ed25519"
    CHACHA20 = "chacha20poly1305"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: "TextFormat | str") -> "TextFormat":
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        try:
            return _ALIASES[key]
        except KeyError:
            raise UnsupportedFormatError(f"Unsupported format: {value}") from None

    @property
    def capabilities(self) -> FrozenSet[Capability]:
        return _CAPABILITIES[self]

    def supports(self, capability: Capability) -> bool:
        return capability in _CAPABILITIES[self]


_ALIASES: Dict[str, TextFormat] = {
    "blake3": TextFormat.BLAKE3,
    "keyed-hash": TextFormat.BLAKE3,
    "ed25519": TextFormat.ED25519,
    "asymmetric": TextFormat.ED25519,
    "chacha20poly1305": TextFormat.CHACHA20,
    "chacha20": TextFormat.CHACHA20,
    "cipher": TextFormat.CHACHA20,
}

_CAPABILITIES: Dict[TextFormat, FrozenSet[Capability]] = {
    TextFormat.BLAKE3: frozenset({Capability.SIGN, Capability.VERIFY, Capability.GENERATE}),
    TextFormat.ED25519: frozenset({Capability.SIGN, Capability.VERIFY, Capability.GENERATE}),
    TextFormat.CHACHA20: frozenset({Capability.ENCRYPT, Capability.DECRYPT, Capability.GENERATE}),
}


def check_capability_table(table: Dict[TextFormat, FrozenSet[Capability]]) -> None:
    missing = set(TextFormat) - set(table)
    if missing:
        names = ", ".join(sorted(fmt.value for fmt in missing))
        raise RuntimeError(f"no capability set for format(s): {names}")


# every member needs a capability row
check_capability_table(_CAPABILITIES)


class Base64Format(str, Enum):
    STANDARD = "standard"
    URLSAFE = "urlsafe"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: "Base64Format | str") -> "Base64Format":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise UnsupportedFormatError(f"Unsupported format: {value}") from None
