"""BLAKE3 keyed-hash adapter.

Importing this package registers the backend for the ``blake3`` format.
"""

from .keyed_hash import Blake3, DIGEST_SIZE

__all__ = ["Blake3", "DIGEST_SIZE"]
