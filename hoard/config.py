"""
Hoard configuration.

Constants are the defaults; ``HoardConfig`` groups the ones a caller may
want to override per instance.
"""

from dataclasses import dataclass


MIN_KEY_LENGTH = 32       # bytes; enforced lower bound on caller keys
HOARD_SUFFIX = ".hoard"   # appended by save(), never by load()
TEXT_ENCODING = "utf-8"   # payload text and stored ciphertext
DEFAULT_CIPHER = "aes-256-gcm"


@dataclass(frozen=True)
class HoardConfig:
    """Tunables shared by Hoard and HoardStore."""
    min_key_length: int = MIN_KEY_LENGTH
    suffix: str = HOARD_SUFFIX
    encoding: str = TEXT_ENCODING
    cipher: str = DEFAULT_CIPHER

    def __post_init__(self):
        if self.min_key_length < 1:
            raise ValueError(
                f"min_key_length must be positive, got {self.min_key_length}"
            )
        if not self.suffix:
            raise ValueError("suffix must be a non-empty string")


DEFAULT_CONFIG = HoardConfig()
