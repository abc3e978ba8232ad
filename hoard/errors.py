"""
Hoard errors.

Every failure in the package is one of these. The plain API folds them
into ``None``; the ``try_*`` API hands them back inside a ``Result``.
"""

from enum import Enum


class ErrorKind(Enum):
    """What went wrong, independent of the exception class."""
    INVALID_KEY = "invalid-key"
    INVALID_PAYLOAD_TYPE = "invalid-payload-type"
    INVALID_CIPHERTEXT_TYPE = "invalid-ciphertext-type"
    MALFORMED_CIPHERTEXT = "malformed-ciphertext"
    AUTHENTICATION_FAILED = "authentication-failed"
    PAYLOAD_NOT_PARSEABLE = "payload-not-parseable"
    NOT_FOUND = "not-found"
    IO_FAILURE = "io-failure"


class HoardError(Exception):
    """Base class for all hoard failures."""
    kind: ErrorKind = None


class InvalidKeyError(HoardError):
    """Key is not bytes, or is shorter than the minimum length."""
    kind = ErrorKind.INVALID_KEY


class InvalidPayloadTypeError(HoardError):
    """lock() was given something other than bytes."""
    kind = ErrorKind.INVALID_PAYLOAD_TYPE


class InvalidCiphertextTypeError(HoardError):
    """unlock() or save() was given something other than str."""
    kind = ErrorKind.INVALID_CIPHERTEXT_TYPE


class MalformedCiphertextError(HoardError):
    """Ciphertext could not be decoded into the cipher's framing."""
    kind = ErrorKind.MALFORMED_CIPHERTEXT


class AuthenticationError(HoardError):
    """Authentication tag did not verify: wrong key or tampered ciphertext."""
    kind = ErrorKind.AUTHENTICATION_FAILED


class PayloadNotParseableError(HoardError):
    """Decrypted bytes are not valid UTF-8 JSON."""
    kind = ErrorKind.PAYLOAD_NOT_PARSEABLE


class HoardNotFoundError(HoardError):
    """No stored hoard at the given path."""
    kind = ErrorKind.NOT_FOUND


class HoardIOError(HoardError):
    """Reading or writing a stored hoard failed at the OS level."""
    kind = ErrorKind.IO_FAILURE
