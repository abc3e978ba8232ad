"""
Store — hoards on disk.

save(ciphertext, path) writes to ``<path>.hoard``.
load(path, key) reads ``path`` exactly as given and unlocks it.

The asymmetry is deliberate: files written by earlier releases were loaded
by full filename, and callers still pass it that way. Use ``hoard_path`` to
get the filename ``save`` wrote.

No locking: concurrent saves to one path race, last writer wins.
"""

import logging
import os
from pathlib import Path
from typing import Any

from hoard.config import HOARD_SUFFIX, HoardConfig
from hoard.core import Hoard
from hoard.errors import (
    HoardError,
    HoardIOError,
    HoardNotFoundError,
    InvalidCiphertextTypeError,
    MalformedCiphertextError,
)
from hoard.result import Result
from hoard.validation import check_key


def hoard_path(path: str | os.PathLike, suffix: str = HOARD_SUFFIX) -> Path:
    """The file ``save(..., path)`` writes to. Appends, never replaces, a suffix."""
    return Path(f"{os.fsdecode(path)}{suffix}")


class HoardStore:
    """
    File persistence for locked hoards.

    Args:
        hoard: Hoard used to unlock loaded files. Built from ``config`` if omitted.
        config: Suffix and encoding. Defaults to the hoard's config.
        logger: Failure diagnostics. Defaults to the hoard's logger.
    """

    def __init__(
        self,
        hoard: Hoard = None,
        config: HoardConfig = None,
        logger: logging.Logger = None,
    ):
        self.hoard = hoard or Hoard(config=config, logger=logger)
        self.config = config or self.hoard.config
        self.logger = logger or self.hoard.logger

    def try_save(self, ciphertext: str, path: str | os.PathLike) -> Result[Path]:
        """
        Write ``ciphertext`` verbatim to ``<path><suffix>``, overwriting.

        Returns:
            Result carrying the path written.
        """
        try:
            if not isinstance(ciphertext, str):
                raise InvalidCiphertextTypeError(
                    f"invalid hoard; must be str, got {type(ciphertext).__name__}"
                )

            # Encode before opening so a bad hoard never truncates the old file
            try:
                data = ciphertext.encode(self.config.encoding)
            except UnicodeEncodeError as e:
                raise InvalidCiphertextTypeError(
                    f"invalid hoard; not {self.config.encoding} encodable: {e}"
                ) from e

            try:
                target = hoard_path(path, self.config.suffix)
            except TypeError as e:
                raise HoardIOError(f"invalid path {path!r}: {e}") from e

            try:
                target.write_bytes(data)
            except (OSError, ValueError) as e:
                raise HoardIOError(f"could not write {target}: {e}") from e

            self.logger.debug(f"[save]: wrote {len(ciphertext)} chars to {target}")
            return Result.success(target)
        except HoardError as e:
            self.logger.error(f"[save]: {e}")
            return Result.failure(e)

    def try_load(self, path: str | os.PathLike, key: bytes) -> Result[Any]:
        """
        Read the hoard at exactly ``path`` and unlock it with ``key``.

        Returns:
            Result carrying the payload, or the first error hit.
        """
        try:
            check_key(key, self.config.min_key_length)

            try:
                source = Path(os.fsdecode(path))
            except TypeError as e:
                raise HoardIOError(f"invalid path {path!r}: {e}") from e

            # os.path.exists is False for unreachable or NUL-containing paths
            if not os.path.exists(source):
                raise HoardNotFoundError(f"hoard not found: {source}")

            try:
                data = source.read_bytes()
            except (OSError, ValueError) as e:
                raise HoardIOError(f"could not read {source}: {e}") from e

            try:
                ciphertext = data.decode(self.config.encoding)
            except UnicodeDecodeError as e:
                raise MalformedCiphertextError(
                    f"{source} is not {self.config.encoding} text"
                ) from e
        except HoardError as e:
            self.logger.error(f"[load]: {e}")
            return Result.failure(e)

        return self.hoard.try_unlock(ciphertext, key)

    def save(self, ciphertext: str, path: str | os.PathLike) -> None:
        """Write ``ciphertext`` to ``<path>.hoard``. Failures are only logged."""
        self.try_save(ciphertext, path)

    def load(self, path: str | os.PathLike, key: bytes) -> Any:
        """Load and unlock the hoard at ``path``; None on failure."""
        return self.try_load(path, key).value_or_none()
