from __future__ import annotations
"""Exception hierarchy shared by the engine, adapters and CLI.

Every failure that stops a single operation derives from ``TextSealError`` so
callers can catch one type. A verifier that runs and finds a signature invalid
returns ``False``; it never raises one of these.
"""


class TextSealError(RuntimeError):
    pass


class SourceNotFoundError(TextSealError):
    """Byte source, key file or output directory does not exist."""


class SourceUnreadableError(TextSealError):
    """Path exists but cannot be read as a file (permissions, directory)."""


class KeyTooShortError(TextSealError):
    def __init__(self, path: str, length: int, required: int = 32) -> None:
        super().__init__(f"key material at {path!r} is {length} bytes; need at least {required}")
        self.path = path
        self.length = length
        self.required = required


class InvalidPublicKeyError(TextSealError):
    pass


class UnsupportedFormatError(TextSealError, ValueError):
    pass


class CodecError(TextSealError, ValueError):
    pass


class SignatureLengthMismatchError(TextSealError):
    def __init__(self, fmt: str, expected: int, actual: int) -> None:
        super().__init__(f"{fmt} signatures are {expected} bytes, got {actual}")
        self.expected = expected
        self.actual = actual


class AuthenticationFailedError(TextSealError):
    pass


class InvalidUtf8OutputError(TextSealError):
    pass
