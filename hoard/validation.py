"""
Key and payload validation.

Both validators have a raising form (``check_key``, ``parse_json``) used
internally and a boolean form (``is_valid_key``, ``is_valid_json``) for
callers that only want a yes/no.
"""

import json
import logging

from hoard.config import MIN_KEY_LENGTH
from hoard.errors import InvalidKeyError


def check_key(key, min_length: int = MIN_KEY_LENGTH) -> None:
    """
    Raise InvalidKeyError unless ``key`` is a usable symmetric key.

    Args:
        key: Must be ``bytes`` or ``bytearray``.
        min_length: Minimum accepted length in bytes.
    """
    if not isinstance(key, (bytes, bytearray)):
        raise InvalidKeyError(f"key must be bytes, got {type(key).__name__}")

    # Length only; the key material itself never goes into a message
    if len(key) < min_length:
        raise InvalidKeyError(
            f"key must be at least {min_length} bytes long, got {len(key)}"
        )


def is_valid_key(
    key,
    min_length: int = MIN_KEY_LENGTH,
    logger: logging.Logger = None,
) -> bool:
    """Check a key without raising. The reason for a rejection is logged."""
    log = logger if logger is not None else logging.getLogger(__name__)
    try:
        check_key(key, min_length)
        return True
    except Exception as e:
        log.error(f"[is_valid_key]: {e}")
        return False


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


def parse_json(text):
    """
    Parse JSON text strictly.

    Python's json module accepts NaN and Infinity; standard JSON does not,
    and neither did the stores this package reads.
    """
    return json.loads(text, parse_constant=_reject_constant)


def is_valid_json(text) -> bool:
    """True if ``text`` parses as JSON. Failure is an expected answer, not logged."""
    try:
        parse_json(text)
        return True
    except (ValueError, TypeError, RecursionError):
        return False
