from __future__ import annotations
"""Text transport for binary envelopes.

Signatures and ciphertexts leave the process as URL-safe base64 without
padding so they survive shells and URLs unchanged. ``decode`` is strict:
standard-alphabet characters (``+``/``/``) and ``=`` padding are rejected
instead of being silently accepted.
"""

import base64
import binascii
import re

from .errors import CodecError
from .formats import Base64Format

_URLSAFE_RE = re.compile(r"^[A-Za-z0-9_-]*$")


def encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def decode(text: str | bytes) -> bytes:
    if isinstance(text, bytes):
        try:
            text = text.decode("ascii")
        except UnicodeDecodeError:
            raise CodecError("base64 input is not ASCII") from None
    text = text.strip()
    if not _URLSAFE_RE.match(text):
        raise CodecError("input is not unpadded URL-safe base64")
    if len(text) % 4 == 1:
        raise CodecError(f"invalid base64 length {len(text)}")
    pad = "=" * (-len(text) % 4)
    try:
        return base64.urlsafe_b64decode(text + pad)
    except (binascii.Error, ValueError) as exc:
        raise CodecError(f"invalid base64: {exc}") from exc


def b64encode(data: bytes, fmt: Base64Format | str = Base64Format.STANDARD) -> str:
    fmt = Base64Format.parse(fmt)
    if fmt is Base64Format.STANDARD:
        return base64.b64encode(data).decode("ascii")
    if fmt is Base64Format.URLSAFE:
        return encode(data)
    raise AssertionError(f"unhandled base64 format: {fmt!r}")


def b64decode(text: str | bytes, fmt: Base64Format | str = Base64Format.STANDARD) -> bytes:
    fmt = Base64Format.parse(fmt)
    if fmt is Base64Format.URLSAFE:
        return decode(text)
    if fmt is Base64Format.STANDARD:
        if isinstance(text, str):
            text = text.encode("ascii", errors="replace")
        try:
            return base64.b64decode(text.strip(), validate=True)
        except (binascii.Error, ValueError) as exc:
            raise CodecError(f"invalid base64: {exc}") from exc
    raise AssertionError(f"unhandled base64 format: {fmt!r}")
