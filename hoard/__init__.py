"""
Hoard — Encrypted JSON at Rest
Lock a JSON payload under a symmetric key, unlock it later, keep it on disk.

Two layers:
1. Hoard — lock/unlock: key check, AES-256-GCM, JSON validity check
2. Store — save/load: ciphertext to ``<path>.hoard`` and back

Failures never raise. The plain functions return None; the ``try_*``
methods return a Result whose ``kind`` says what went wrong.

Usage:
    import json, os
    import hoard

    key = os.urandom(32)
    locked = hoard.lock(json.dumps({"gold": 100}).encode(), key)
    hoard.save(locked, "treasure")
    hoard.load("treasure.hoard", key)   # {"gold": 100}
"""

import os
from typing import Any

from hoard.cipher import Cipher, AesGcmCipher, CryptoJsAesCipher, get_cipher
from hoard.config import HoardConfig, MIN_KEY_LENGTH, HOARD_SUFFIX
from hoard.core import Hoard
from hoard.errors import (
    ErrorKind,
    HoardError,
    InvalidKeyError,
    InvalidPayloadTypeError,
    InvalidCiphertextTypeError,
    MalformedCiphertextError,
    AuthenticationError,
    PayloadNotParseableError,
    HoardNotFoundError,
    HoardIOError,
)
from hoard.result import Result
from hoard.store import HoardStore, hoard_path
from hoard.validation import is_valid_key, is_valid_json

__version__ = "1.0.0"
__all__ = [
    "lock",
    "unlock",
    "save",
    "load",
    "is_valid_key",
    "is_valid_json",
    "hoard_path",
    "Hoard",
    "HoardStore",
    "HoardConfig",
    "Result",
    "Cipher",
    "AesGcmCipher",
    "CryptoJsAesCipher",
    "get_cipher",
    "MIN_KEY_LENGTH",
    "HOARD_SUFFIX",
    "ErrorKind",
    "HoardError",
    "InvalidKeyError",
    "InvalidPayloadTypeError",
    "InvalidCiphertextTypeError",
    "MalformedCiphertextError",
    "AuthenticationError",
    "PayloadNotParseableError",
    "HoardNotFoundError",
    "HoardIOError",
]

_store = HoardStore()


def lock(payload: bytes, key: bytes) -> str | None:
    """Encrypt serialized JSON bytes; None on failure."""
    return _store.hoard.lock(payload, key)


def unlock(ciphertext: str, key: bytes) -> Any:
    """Decrypt and parse a hoard; None on failure."""
    return _store.hoard.unlock(ciphertext, key)


def save(ciphertext: str, path: str | os.PathLike) -> None:
    """Write a hoard to ``<path>.hoard``."""
    _store.save(ciphertext, path)


def load(path: str | os.PathLike, key: bytes) -> Any:
    """Load and unlock the hoard file at exactly ``path``; None on failure."""
    return _store.load(path, key)
