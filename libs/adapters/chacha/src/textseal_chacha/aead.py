from __future__ import annotations
import os
from typing import List

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import ChaCha20Poly1305

from textseal import registry
from textseal.errors import AuthenticationFailedError
from textseal.formats import Capability, TextFormat
from textseal.genpass import generate_password
from textseal.keys import KEY_SIZE, CipherKey

NONCE_SIZE = 12
TAG_SIZE = 16


@registry.register(
    TextFormat.CHACHA20,
    Capability.ENCRYPT,
    Capability.DECRYPT,
    Capability.GENERATE,
)
class ChaCha20Poly1305Cipher:
    """ChaCha20-Poly1305 with the envelope layout ``nonce || ciphertext || tag``.

    Every call to ``encrypt`` draws a fresh nonce from ``os.urandom``; the
    kernel CSPRNG keeps no per-process counter, so parallel callers sharing a
    key cannot collide through shared state.
    """
    name = "chacha20poly1305"

    def __init__(self, key: CipherKey) -> None:
        self._aead = ChaCha20Poly1305(key.material)

    @classmethod
    def load(cls, path) -> "ChaCha20Poly1305Cipher":
        return cls(CipherKey.load(path))

    @classmethod
    def generate(cls) -> List[bytes]:
        key = generate_password(KEY_SIZE, upper=True, lower=True, number=True, symbol=False)
        return [key.encode("ascii")]

    def encrypt(self, data: bytes) -> bytes:
        nonce = os.urandom(NONCE_SIZE)
        return nonce + self._aead.encrypt(nonce, data, None)

    def decrypt(self, envelope: bytes) -> bytes:
        if len(envelope) < NONCE_SIZE + TAG_SIZE:
            raise AuthenticationFailedError(
                f"envelope is {len(envelope)} bytes; need at least {NONCE_SIZE + TAG_SIZE}"
            )
        nonce, body = envelope[:NONCE_SIZE], envelope[NONCE_SIZE:]
        try:
            return self._aead.decrypt(nonce, body, None)
        except InvalidTag:
            raise AuthenticationFailedError("authentication tag did not verify") from None
