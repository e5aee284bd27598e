from __future__ import annotations
from typing import List, Protocol, runtime_checkable

"""Capability interfaces used by adapters.

Adapters implement these Protocols and register themselves into the global
registry. The engine and CLI interact only with these interfaces, never with
vendor libraries directly. Every capability operates on a fully drained
buffer; nothing here reads from a stream.
"""

class KeyLoader(Protocol):
    """Builds a capability object from the key file at ``path``."""
    @classmethod
    def load(cls, path: str) -> "KeyLoader": ...

@runtime_checkable
class Signer(Protocol):
    """Produces a fixed-length signature over the whole message."""
    signature_size: int
    def sign(self, data: bytes) -> bytes: ...

@runtime_checkable
class Verifier(Protocol):
    """Checks a signature; ``False`` means verification ran and failed."""
    signature_size: int
    def verify(self, data: bytes, signature: bytes) -> bool: ...

@runtime_checkable
class Encryptor(Protocol):
    """Authenticated encryption returning a self-contained envelope."""
    def encrypt(self, data: bytes) -> bytes: ...

@runtime_checkable
class Decryptor(Protocol):
    """Inverse of ``Encryptor``; fails closed on tampering."""
    def decrypt(self, envelope: bytes) -> bytes: ...

class KeyGenerator(Protocol):
    """Fresh key material, in the order the key files are written."""
    @classmethod
    def generate(cls) -> List[bytes]: ...
