"""
AES-256-GCM engine
==================
AES-256 in Galois/Counter Mode, one message at a time.

Key size: 256 bits (32 bytes) — supplied by the caller on every call.
Nonce:    96 bits (12 bytes)  — randomly generated per message.
Tag:      128 bits (16 bytes) — authentication.

encrypt() returns a GCMTuple(iv, ciphertext, auth_tag); decrypt() takes
one back. Nothing is cached between calls: no key schedule, no nonce
counter. The only state an AESGCMCipher holds is its random-byte source,
which defaults to os.urandom and can be swapped for a deterministic one
in tests.

Nonce uniqueness rests entirely on the random source and the 96-bit nonce
space. Do not encrypt more than ~2^32 messages under one key.

Dependencies: cryptography >= 41.0
"""

import os
import logging
from typing import Callable, Optional, Union

from cryptography.exceptions import InvalidTag, UnsupportedAlgorithm
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from .errors import AuthenticationFailure, InvalidKeyLength, UnderlyingCryptoFailure
from .gcm_tuple import GCMTuple

logger = logging.getLogger(__name__)

KEY_SIZE   = 32   # 256-bit key
NONCE_SIZE = 12   # 96-bit nonce (GCM standard)
TAG_SIZE   = 16   # 128-bit tag

RandomBytes = Callable[[int], bytes]


class AESGCMCipher:
    """Stateless AES-256-GCM encryption to and from GCMTuple."""

    KEY_SIZE   = KEY_SIZE
    NONCE_SIZE = NONCE_SIZE
    TAG_SIZE   = TAG_SIZE

    def __init__(self, random_bytes: RandomBytes = os.urandom):
        """
        random_bytes(n) must return n cryptographically secure bytes and be
        safe to call from several threads at once.
        """
        self._random_bytes = random_bytes

    def _random(self, size: int) -> bytes:
        try:
            data = self._random_bytes(size)
        except (OSError, NotImplementedError) as exc:
            raise UnderlyingCryptoFailure("Secure random source is unavailable.") from exc
        if not isinstance(data, (bytes, bytearray)) or len(data) != size:
            raise UnderlyingCryptoFailure(
                f"Random source returned an invalid value (wanted {size} bytes)."
            )
        return bytes(data)

    def _aesgcm(self, key: bytes) -> AESGCM:
        if len(key) != self.KEY_SIZE:
            raise InvalidKeyLength(
                f"AES-256 key must be {self.KEY_SIZE} bytes, got {len(key)}."
            )
        try:
            return AESGCM(key)
        except UnsupportedAlgorithm as exc:
            raise UnderlyingCryptoFailure("AES-GCM is not supported by the backend.") from exc

    def generate_key(self) -> bytes:
        return self._random(self.KEY_SIZE)

    def encrypt(self, key: bytes, plaintext: bytes,
                aad: Optional[bytes] = b"") -> GCMTuple:
        """
        Encrypt and authenticate plaintext under key.
        aad is bound into the tag but not encrypted and not part of the tuple;
        decrypt() must be given the same bytes.
        """
        aesgcm = self._aesgcm(key)
        iv     = self._random(self.NONCE_SIZE)
        sealed = aesgcm.encrypt(iv, plaintext, aad)

        ciphertext = sealed[:-self.TAG_SIZE]
        auth_tag   = sealed[-self.TAG_SIZE:]
        logger.debug(f"Encrypt: pt={len(plaintext)}B aad={len(aad or b'')}B")
        return GCMTuple(iv, ciphertext, auth_tag)

    def decrypt(self, key: bytes, gcm_tuple: GCMTuple,
                aad: Optional[bytes] = b"") -> bytes:
        """
        Verify and decrypt. Raises AuthenticationFailure if the tag does not
        check out; no plaintext is returned in that case.
        """
        aesgcm = self._aesgcm(key)
        iv, ciphertext, auth_tag = gcm_tuple

        # AESGCM accepts other nonce lengths; a tuple off the wire must not.
        if len(iv) != self.NONCE_SIZE:
            raise AuthenticationFailure(
                f"IV must be {self.NONCE_SIZE} bytes, got {len(iv)}."
            )
        if len(auth_tag) != self.TAG_SIZE:
            raise AuthenticationFailure(
                f"Authentication tag must be {self.TAG_SIZE} bytes, got {len(auth_tag)}."
            )

        try:
            plaintext = aesgcm.decrypt(iv, bytes(ciphertext) + bytes(auth_tag), aad)
        except InvalidTag as exc:
            raise AuthenticationFailure(
                "AES-GCM authentication failed: data tampered, wrong key or wrong AAD."
            ) from exc
        logger.debug(f"Decrypt: ct={len(ciphertext)}B aad={len(aad or b'')}B")
        return plaintext

    def encrypt_to_string(self, key: bytes, plaintext: bytes,
                          aad: Optional[bytes] = b"") -> str:
        return self.encrypt(key, plaintext, aad).to_string()

    def decrypt_string(self, key: bytes, encoded: Union[str, bytes],
                       aad: Optional[bytes] = b"") -> bytes:
        """Parse '<iv>.<ciphertext>.<auth_tag>' and decrypt it."""
        return self.decrypt(key, GCMTuple.parse(encoded), aad)


# Module-level functions share one engine backed by os.urandom.
_default = AESGCMCipher()


def generate_key() -> bytes:
    return _default.generate_key()


def encrypt(key: bytes, plaintext: bytes, aad: Optional[bytes] = b"") -> GCMTuple:
    return _default.encrypt(key, plaintext, aad)


def decrypt(key: bytes, gcm_tuple: GCMTuple, aad: Optional[bytes] = b"") -> bytes:
    return _default.decrypt(key, gcm_tuple, aad)


def encrypt_to_string(key: bytes, plaintext: bytes, aad: Optional[bytes] = b"") -> str:
    return _default.encrypt_to_string(key, plaintext, aad)


def decrypt_string(key: bytes, encoded: Union[str, bytes],
                   aad: Optional[bytes] = b"") -> bytes:
    return _default.decrypt_string(key, encoded, aad)
