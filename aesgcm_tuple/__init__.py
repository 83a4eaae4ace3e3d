"""
aesgcm_tuple
============
AES-256-GCM authenticated encryption with a compact text form.

    encrypt(key, plaintext, aad)  ->  GCMTuple(iv, ciphertext, auth_tag)
    str(tuple)                    ->  "<iv>.<ciphertext>.<auth_tag>"
    GCMTuple.parse(text)          ->  GCMTuple
    decrypt(key, tuple, aad)      ->  plaintext

Key 32 bytes, IV 12 bytes, tag 16 bytes. These are fixed.

License: Apache 2.0
"""

__version__ = "1.0.0"

from .errors    import (
    AESGCMError,
    InvalidKeyLength,
    MalformedTuple,
    AuthenticationFailure,
    UnderlyingCryptoFailure,
)
from .gcm_tuple import GCMTuple
from .cipher    import (
    AESGCMCipher,
    KEY_SIZE,
    NONCE_SIZE,
    TAG_SIZE,
    generate_key,
    encrypt,
    decrypt,
    encrypt_to_string,
    decrypt_string,
)

__all__ = [
    "AESGCMError",
    "InvalidKeyLength",
    "MalformedTuple",
    "AuthenticationFailure",
    "UnderlyingCryptoFailure",
    "GCMTuple",
    "AESGCMCipher",
    "KEY_SIZE",
    "NONCE_SIZE",
    "TAG_SIZE",
    "generate_key",
    "encrypt",
    "decrypt",
    "encrypt_to_string",
    "decrypt_string",
]
