"""
Error taxonomy
==============
Every failure raised by aesgcm_tuple derives from AESGCMError.

Caller-input errors (bad key, bad string) are also ValueErrors.
AuthenticationFailure is not: a failed tag check means the ciphertext
must be treated as compromised, and it should never be caught by a
generic ``except ValueError`` meant for input mistakes.
"""


class AESGCMError(Exception):
    """Base class for aesgcm_tuple errors."""


class InvalidKeyLength(AESGCMError, ValueError):
    """Key is not exactly 32 bytes."""


class MalformedTuple(AESGCMError, ValueError):
    """Serialized tuple does not have three valid base64 segments."""


class AuthenticationFailure(AESGCMError):
    """Tag verification failed: tampered data, wrong key or wrong AAD."""


class UnderlyingCryptoFailure(AESGCMError, RuntimeError):
    """The crypto backend or the randomness source failed."""
