"""
Ciphers — the symmetric primitive under lock/unlock.

Two implementations share one interface:

  AesGcmCipher      AES-256-GCM, authenticated. The default.
  CryptoJsAesCipher AES-256-CBC in the OpenSSL "Salted__" format that
                    crypto-js emits. Confidentiality only; kept so hoards
                    written by the JavaScript implementation stay readable.

Both produce base64 text and raise only HoardError subclasses.
"""

import base64
import binascii
import hashlib
import os
from abc import ABC, abstractmethod

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives import hashes, padding
from cryptography.hazmat.primitives.ciphers import Cipher as _BlockCipher
from cryptography.hazmat.primitives.ciphers import algorithms, modes
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from cryptography.hazmat.primitives.kdf.hkdf import HKDF

from hoard.errors import (
    AuthenticationError,
    MalformedCiphertextError,
    PayloadNotParseableError,
)


NONCE_SIZE = 12   # AES-GCM standard
TAG_SIZE = 16
KEY_SIZE = 32     # 256 bits

# Domain separation for the HKDF step that fits caller keys to KEY_SIZE
_GCM_CONTEXT = b"hoard-aes-256-gcm-v1"

# OpenSSL / crypto-js salted format
_SALTED_MAGIC = b"Salted__"
_SALT_SIZE = 8
_IV_SIZE = 16
_BLOCK_SIZE = 16


def _b64decode(text: str) -> bytes:
    try:
        return base64.b64decode(text.encode("ascii"), validate=True)
    except (binascii.Error, UnicodeEncodeError, ValueError) as e:
        raise MalformedCiphertextError(f"ciphertext is not valid base64: {e}") from e


class Cipher(ABC):
    """Symmetric cipher turning payload bytes into ciphertext text and back."""

    name: str = ""

    @abstractmethod
    def encrypt(self, plaintext: bytes, key: bytes) -> str:
        """
        Encrypt ``plaintext`` under ``key``.

        The cipher manages its own nonce or salt, so two calls with the same
        input give different text. Every output decrypts back under ``key``.
        """

    @abstractmethod
    def decrypt(self, ciphertext: str, key: bytes) -> bytes:
        """
        Recover the plaintext from ``ciphertext``.

        Raises:
            MalformedCiphertextError: Text is not in this cipher's format.
            AuthenticationError: Integrity check failed (authenticated ciphers).
            PayloadNotParseableError: Decryption produced garbage (unauthenticated ciphers).
        """


class AesGcmCipher(Cipher):
    """
    AES-256-GCM with a fresh random nonce per message.

    Text layout: base64(nonce || ciphertext || tag).

    Caller keys may be longer than 32 bytes, so the AES key is the HKDF-SHA256
    output of the whole caller key. A wrong key or any flipped bit fails the
    tag check and surfaces as AuthenticationError, never as a parse error.
    """

    name = "aes-256-gcm"

    def _cipher_key(self, key: bytes) -> bytes:
        hkdf = HKDF(
            algorithm=hashes.SHA256(),
            length=KEY_SIZE,
            salt=None,
            info=_GCM_CONTEXT,
        )
        return hkdf.derive(bytes(key))

    def encrypt(self, plaintext: bytes, key: bytes) -> str:
        nonce = os.urandom(NONCE_SIZE)
        aesgcm = AESGCM(self._cipher_key(key))
        ciphertext = aesgcm.encrypt(nonce, bytes(plaintext), None)
        return base64.b64encode(nonce + ciphertext).decode("ascii")

    def decrypt(self, ciphertext: str, key: bytes) -> bytes:
        raw = _b64decode(ciphertext)
        if len(raw) < NONCE_SIZE + TAG_SIZE:
            raise MalformedCiphertextError(
                f"ciphertext too short: {len(raw)} bytes, "
                f"need at least {NONCE_SIZE + TAG_SIZE}"
            )

        nonce, body = raw[:NONCE_SIZE], raw[NONCE_SIZE:]
        aesgcm = AESGCM(self._cipher_key(key))
        try:
            return aesgcm.decrypt(nonce, body, None)
        except InvalidTag as e:
            raise AuthenticationError(
                "authentication failed: wrong key or tampered ciphertext"
            ) from e


def evp_bytes_to_key(passphrase: bytes, salt: bytes) -> tuple[bytes, bytes]:
    """
    OpenSSL EVP_BytesToKey with MD5 and one round, as crypto-js uses it.

    Returns:
        (32-byte AES key, 16-byte IV)
    """
    derived = b""
    block = b""
    while len(derived) < KEY_SIZE + _IV_SIZE:
        block = hashlib.md5(block + passphrase + salt).digest()
        derived += block
    return derived[:KEY_SIZE], derived[KEY_SIZE:KEY_SIZE + _IV_SIZE]


class CryptoJsAesCipher(Cipher):
    """
    crypto-js compatible AES (passphrase mode).

    crypto-js was called with the key's string form as a passphrase, so the
    key bytes are read as UTF-8 (invalid sequences become U+FFFD) before
    EVP_BytesToKey. Text layout: base64("Salted__" || salt || ciphertext).

    There is no authentication tag. A wrong key almost always breaks the
    PKCS#7 padding, which is reported as PayloadNotParseableError; when it
    does not, the caller's JSON check is the only line of defense.
    """

    name = "crypto-js-aes"

    @staticmethod
    def _passphrase(key: bytes) -> bytes:
        return bytes(key).decode("utf-8", errors="replace").encode("utf-8")

    def encrypt(self, plaintext: bytes, key: bytes) -> str:
        salt = os.urandom(_SALT_SIZE)
        aes_key, iv = evp_bytes_to_key(self._passphrase(key), salt)

        padder = padding.PKCS7(_BLOCK_SIZE * 8).padder()
        padded = padder.update(bytes(plaintext)) + padder.finalize()

        encryptor = _BlockCipher(algorithms.AES(aes_key), modes.CBC(iv)).encryptor()
        ciphertext = encryptor.update(padded) + encryptor.finalize()
        return base64.b64encode(_SALTED_MAGIC + salt + ciphertext).decode("ascii")

    def decrypt(self, ciphertext: str, key: bytes) -> bytes:
        raw = _b64decode(ciphertext)
        header = len(_SALTED_MAGIC) + _SALT_SIZE
        if not raw.startswith(_SALTED_MAGIC):
            raise MalformedCiphertextError("ciphertext lacks the Salted__ header")

        salt, body = raw[len(_SALTED_MAGIC):header], raw[header:]
        if not body or len(body) % _BLOCK_SIZE:
            raise MalformedCiphertextError(
                f"ciphertext body must be a non-empty multiple of {_BLOCK_SIZE} bytes"
            )

        aes_key, iv = evp_bytes_to_key(self._passphrase(key), salt)
        decryptor = _BlockCipher(algorithms.AES(aes_key), modes.CBC(iv)).decryptor()
        padded = decryptor.update(body) + decryptor.finalize()

        unpadder = padding.PKCS7(_BLOCK_SIZE * 8).unpadder()
        try:
            return unpadder.update(padded) + unpadder.finalize()
        except ValueError as e:
            raise PayloadNotParseableError(
                "decrypted payload has invalid padding: wrong key or corrupted ciphertext"
            ) from e


CIPHERS = {
    AesGcmCipher.name: AesGcmCipher,
    CryptoJsAesCipher.name: CryptoJsAesCipher,
}


def get_cipher(name: str) -> Cipher:
    """Look up a cipher by name."""
    try:
        return CIPHERS[name]()
    except KeyError:
        raise ValueError(
            f"Unknown cipher {name!r}; expected one of {sorted(CIPHERS)}"
        ) from None
