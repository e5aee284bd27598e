
from .interfaces import Signer, Verifier, Encryptor, Decryptor, KeyGenerator, KeyLoader
from .registry import registry
from .formats import TextFormat, Base64Format, Capability
from .errors import (
    TextSealError,
    SourceNotFoundError,
    SourceUnreadableError,
    KeyTooShortError,
    InvalidPublicKeyError,
    UnsupportedFormatError,
    CodecError,
    SignatureLengthMismatchError,
    AuthenticationFailedError,
    InvalidUtf8OutputError,
)
from .keys import KEY_SIZE, HashKey, CipherKey, SigningKey, VerifyingKey, load_key_bytes, key_filenames

__all__ = [
    "Signer",
    "Verifier",
    "Encryptor",
    "Decryptor",
    "KeyGenerator",
    "KeyLoader",
    "registry",
    "TextFormat",
    "Base64Format",
    "Capability",
    "TextSealError",
    "SourceNotFoundError",
    "SourceUnreadableError",
    "KeyTooShortError",
    "InvalidPublicKeyError",
    "UnsupportedFormatError",
    "CodecError",
    "SignatureLengthMismatchError",
    "AuthenticationFailedError",
    "InvalidUtf8OutputError",
    "KEY_SIZE",
    "HashKey",
    "CipherKey",
    "SigningKey",
    "VerifyingKey",
    "load_key_bytes",
    "key_filenames",
]
