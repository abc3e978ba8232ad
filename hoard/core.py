"""
Hoard — lock and unlock.

lock:   key check → payload type check → encrypt → ciphertext text
unlock: key check → ciphertext type check → decrypt → JSON check → parse

Every failure is logged and returned, never raised. ``try_lock`` and
``try_unlock`` return a Result so callers can tell a wrong key from a
corrupt hoard; ``lock`` and ``unlock`` return None on any failure.
"""

import logging
from typing import Any

from hoard.cipher import Cipher, get_cipher
from hoard.config import DEFAULT_CONFIG, HoardConfig
from hoard.errors import (
    HoardError,
    InvalidCiphertextTypeError,
    InvalidPayloadTypeError,
    PayloadNotParseableError,
)
from hoard.result import Result
from hoard.validation import check_key, is_valid_json, parse_json


class Hoard:
    """
    Encrypts JSON payloads under a caller-supplied symmetric key.

    Holds no state beyond its collaborators; one instance can serve any
    number of keys and calls.

    Args:
        cipher: Cipher to use. Defaults to the one named in ``config``.
        config: Key length, text encoding and cipher defaults.
        logger: Where failure diagnostics go. Defaults to this module's logger.
    """

    def __init__(
        self,
        cipher: Cipher = None,
        config: HoardConfig = None,
        logger: logging.Logger = None,
    ):
        self.config = config or DEFAULT_CONFIG
        self.cipher = cipher or get_cipher(self.config.cipher)
        self.logger = logger or logging.getLogger(__name__)

    def try_lock(self, payload: bytes, key: bytes) -> Result[str]:
        """
        Encrypt serialized JSON.

        Args:
            payload: The serialized payload, as bytes.
            key: Symmetric key, at least ``config.min_key_length`` bytes.

        Returns:
            Result carrying the ciphertext text.
        """
        try:
            check_key(key, self.config.min_key_length)

            if not isinstance(payload, (bytes, bytearray)):
                raise InvalidPayloadTypeError(
                    f"invalid hoard; must be bytes, got {type(payload).__name__}"
                )

            return Result.success(self.cipher.encrypt(bytes(payload), bytes(key)))
        except HoardError as e:
            self.logger.error(f"[lock]: {e}")
            return Result.failure(e)

    def try_unlock(self, ciphertext: str, key: bytes) -> Result[Any]:
        """
        Decrypt a hoard and parse the JSON inside it.

        Args:
            ciphertext: Text produced by ``lock`` with the same cipher.
            key: The key it was locked with.

        Returns:
            Result carrying the parsed payload (dict, list or scalar).
        """
        try:
            check_key(key, self.config.min_key_length)

            if not isinstance(ciphertext, str):
                raise InvalidCiphertextTypeError(
                    f"invalid hoard; must be str, got {type(ciphertext).__name__}"
                )

            plaintext = self.cipher.decrypt(ciphertext, bytes(key))

            try:
                text = plaintext.decode(self.config.encoding)
            except UnicodeDecodeError as e:
                raise PayloadNotParseableError(
                    f"result is not valid {self.config.encoding} text"
                ) from e

            if not is_valid_json(text):
                raise PayloadNotParseableError("result is not a valid JSON")

            return Result.success(parse_json(text))
        except HoardError as e:
            self.logger.error(f"[unlock]: {e}")
            return Result.failure(e)

    def lock(self, payload: bytes, key: bytes) -> str | None:
        """Encrypt ``payload``; None on failure."""
        return self.try_lock(payload, key).value_or_none()

    def unlock(self, ciphertext: str, key: bytes) -> Any:
        """Decrypt and parse ``ciphertext``; None on failure."""
        return self.try_unlock(ciphertext, key).value_or_none()
