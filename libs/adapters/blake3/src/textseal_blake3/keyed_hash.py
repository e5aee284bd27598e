from __future__ import annotations
import hmac
from typing import List

from blake3 import blake3

from textseal import registry
from textseal.errors import SignatureLengthMismatchError
from textseal.formats import Capability, TextFormat
from textseal.genpass import generate_password
from textseal.keys import KEY_SIZE, HashKey

DIGEST_SIZE = 32


@registry.register(TextFormat.BLAKE3, Capability.SIGN, Capability.VERIFY, Capability.GENERATE)
class Blake3:
    """BLAKE3 in keyed mode; the digest doubles as the signature."""
    name = "blake3"
    signature_size = DIGEST_SIZE

    def __init__(self, key: HashKey) -> None:
        self._key = key

    @classmethod
    def load(cls, path) -> "Blake3":
        return cls(HashKey.load(path))

    @classmethod
    def generate(cls) -> List[bytes]:
        key = generate_password(KEY_SIZE, upper=True, lower=True, number=True, symbol=True)
        return [key.encode("ascii")]

    def sign(self, data: bytes) -> bytes:
        return blake3(data, key=self._key.material).digest()

    def verify(self, data: bytes, signature: bytes) -> bool:
        if len(signature) != DIGEST_SIZE:
            raise SignatureLengthMismatchError(self.name, DIGEST_SIZE, len(signature))
        return hmac.compare_digest(self.sign(data), signature)
