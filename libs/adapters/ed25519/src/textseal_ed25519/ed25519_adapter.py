from __future__ import annotations
from typing import List

from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives.asymmetric import ed25519
from nacl.bindings import crypto_core_ed25519_is_valid_point

from textseal import registry
from textseal.errors import InvalidPublicKeyError, SignatureLengthMismatchError
from textseal.formats import Capability, TextFormat
from textseal.keys import SigningKey, VerifyingKey

SIGNATURE_SIZE = 64


def _signing_key(key: SigningKey) -> ed25519.Ed25519PrivateKey:
    return ed25519.Ed25519PrivateKey.from_private_bytes(key.material)


def _verifying_key(key: VerifyingKey) -> ed25519.Ed25519PublicKey:
    # cryptography defers point decoding to verify(); off-curve or small-order
    # encodings must fail at load time
    if not crypto_core_ed25519_is_valid_point(key.material):
        raise InvalidPublicKeyError("not a valid Ed25519 public key: not a prime-order curve point")
    try:
        return ed25519.Ed25519PublicKey.from_public_bytes(key.material)
    except (ValueError, UnsupportedAlgorithm) as exc:
        raise InvalidPublicKeyError(f"not a valid Ed25519 public key: {exc}") from exc


@registry.register(TextFormat.ED25519, Capability.SIGN, Capability.GENERATE)
class Ed25519Signer:
    """Ed25519 (RFC 8032) signer using cryptography."""
    name = "ed25519"
    signature_size = SIGNATURE_SIZE

    def __init__(self, key: SigningKey) -> None:
        self._sk = _signing_key(key)

    @classmethod
    def load(cls, path) -> "Ed25519Signer":
        return cls(SigningKey.load(path))

    @classmethod
    def generate(cls) -> List[bytes]:
        sk = ed25519.Ed25519PrivateKey.generate()
        pk = sk.public_key()
        return [sk.private_bytes_raw(), pk.public_bytes_raw()]

    def sign(self, data: bytes) -> bytes:
        return self._sk.sign(data)


@registry.register(TextFormat.ED25519, Capability.VERIFY)
class Ed25519Verifier:
    name = "ed25519"
    signature_size = SIGNATURE_SIZE

    def __init__(self, key: VerifyingKey) -> None:
        self._pk = _verifying_key(key)

    @classmethod
    def load(cls, path) -> "Ed25519Verifier":
        return cls(VerifyingKey.load(path))

    def verify(self, data: bytes, signature: bytes) -> bool:
        if len(signature) != SIGNATURE_SIZE:
            raise SignatureLengthMismatchError(self.name, SIGNATURE_SIZE, len(signature))
        try:
            self._pk.verify(signature, data)
            return True
        except InvalidSignature:
            return False
