"""ChaCha20-Poly1305 adapter backed by pyca/cryptography.

Importing this package registers the ``chacha20poly1305`` backend.
"""

from .aead import ChaCha20Poly1305Cipher, NONCE_SIZE, TAG_SIZE

__all__ = ["ChaCha20Poly1305Cipher", "NONCE_SIZE", "TAG_SIZE"]
