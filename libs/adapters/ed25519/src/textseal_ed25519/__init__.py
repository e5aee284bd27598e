"""Ed25519 adapter backed by pyca/cryptography.

Importing this package registers the signer and verifier for ``ed25519``.
"""

from .ed25519_adapter import Ed25519Signer, Ed25519Verifier, SIGNATURE_SIZE

__all__ = ["Ed25519Signer", "Ed25519Verifier", "SIGNATURE_SIZE"]
