from __future__ import annotations
"""Dispatch layer: format tag in, encoded result out.

Each operation parses the format before touching the filesystem, loads key
material through the selected backend, drains the byte source once and
threads the binary result through the transport codec.
"""

import importlib
import importlib.util
import logging
from pathlib import Path
from typing import List, Sequence, Type, Union

from . import codec
from .errors import InvalidUtf8OutputError, SourceNotFoundError
from .formats import Capability, TextFormat
from .interfaces import Decryptor, Encryptor, KeyGenerator, Signer, Verifier
from .keys import key_filenames
from .registry import registry
from .source import read_source

log = logging.getLogger(__name__)

PathLike = Union[str, Path]
FormatLike = Union[TextFormat, str]

ADAPTER_MODULES = ("textseal_blake3", "textseal_ed25519", "textseal_chacha")

_ADAPTERS_LOADED = False


def load_adapters() -> None:
    """Import adapter packages so they register their backends."""
    global _ADAPTERS_LOADED
    if _ADAPTERS_LOADED:
        return
    for mod in ADAPTER_MODULES:
        if importlib.util.find_spec(mod) is None:
            log.warning("adapter %s is not installed", mod)
            continue
        try:
            importlib.import_module(mod)
        except ImportError as exc:
            log.warning("adapter %s failed to import: %s", mod, exc)
    _ADAPTERS_LOADED = True


def _backend(fmt: TextFormat, capability: Capability):
    load_adapters()
    return registry.get(fmt, capability)


def sign(source: PathLike, key_path: PathLike, fmt: FormatLike) -> str:
    fmt = TextFormat.parse(fmt)
    signer: Signer
    if fmt is TextFormat.BLAKE3 or fmt is TextFormat.ED25519:
        signer = _backend(fmt, Capability.SIGN).load(key_path)
    elif fmt is TextFormat.CHACHA20:
        # raises: the cipher has no sign capability
        signer = _backend(fmt, Capability.SIGN)
    else:
        raise AssertionError(f"unhandled format: {fmt!r}")
    data = read_source(source)
    log.debug("signing %d bytes with %s key %s", len(data), fmt, key_path)
    return codec.encode(signer.sign(data))


def verify(source: PathLike, key_path: PathLike, signature: str, fmt: FormatLike) -> bool:
    fmt = TextFormat.parse(fmt)
    verifier: Verifier
    if fmt is TextFormat.BLAKE3 or fmt is TextFormat.ED25519:
        verifier = _backend(fmt, Capability.VERIFY).load(key_path)
    elif fmt is TextFormat.CHACHA20:
        verifier = _backend(fmt, Capability.VERIFY)
    else:
        raise AssertionError(f"unhandled format: {fmt!r}")
    sig = codec.decode(signature)
    data = read_source(source)
    valid = verifier.verify(data, sig)
    log.debug("verified %d bytes with %s key %s: %s", len(data), fmt, key_path, valid)
    return valid


def encrypt(source: PathLike, key_path: PathLike, fmt: FormatLike = TextFormat.CHACHA20) -> str:
    fmt = TextFormat.parse(fmt)
    encryptor: Encryptor = _backend(fmt, Capability.ENCRYPT).load(key_path)
    data = read_source(source)
    log.debug("encrypting %d bytes with %s key %s", len(data), fmt, key_path)
    return codec.encode(encryptor.encrypt(data))


def decrypt(source: PathLike, key_path: PathLike, fmt: FormatLike = TextFormat.CHACHA20) -> str:
    """Decrypt a base64 envelope read from ``source`` and return the text."""
    fmt = TextFormat.parse(fmt)
    decryptor: Decryptor = _backend(fmt, Capability.DECRYPT).load(key_path)
    envelope = codec.decode(read_source(source))
    plaintext = decryptor.decrypt(envelope)
    log.debug("decrypted %d-byte envelope with %s key %s", len(envelope), fmt, key_path)
    try:
        return plaintext.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidUtf8OutputError(f"decrypted data is not valid UTF-8: {exc.reason}") from None


def generate_keys(fmt: FormatLike) -> List[bytes]:
    fmt = TextFormat.parse(fmt)
    generator: Type[KeyGenerator] = _backend(fmt, Capability.GENERATE)
    keys = generator.generate()
    log.debug("generated %d key blob(s) for %s", len(keys), fmt)
    return keys


def write_keys(fmt: FormatLike, keys: Sequence[bytes], output_dir: PathLike) -> List[Path]:
    """Persist generated blobs under their fixed names in an existing directory."""
    fmt = TextFormat.parse(fmt)
    out = Path(output_dir)
    if not out.is_dir():
        raise SourceNotFoundError(f"output directory not found: {out}")
    names = key_filenames(fmt)
    if len(names) != len(keys):
        raise ValueError(f"{fmt} expects {len(names)} key blob(s), got {len(keys)}")
    written: List[Path] = []
    for name, blob in zip(names, keys):
        target = out / name
        target.write_bytes(blob)
        written.append(target)
        log.debug("wrote %s", target)
    return written
