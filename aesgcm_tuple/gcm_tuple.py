"""
GCMTuple — the three wire components of one AES-GCM message
============================================================
iv (12 bytes) · ciphertext (len == plaintext) · auth_tag (16 bytes)

Text format:
    <iv>.<ciphertext>.<auth_tag>

Each segment is URL-safe base64 without '=' padding. Parsing is lenient
about the alphabet: standard base64 ('+', '/') and padded segments are
accepted too, so strings produced by other encoders still decode.

Field lengths are NOT checked here. A string that parses but carries a
short iv or tag is rejected later, by decrypt().
"""

import base64
import binascii
import re
from typing import NamedTuple, Union

from .errors import MalformedTuple

SEPARATOR = "."
SEGMENTS  = 3

_SEGMENT_CHARS = re.compile(r"[A-Za-z0-9+/_-]*={0,2}")


def _b64encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def _b64decode(segment: str) -> bytes:
    """Decode one segment, URL-safe or standard alphabet, padded or not."""
    if not _SEGMENT_CHARS.fullmatch(segment):
        raise MalformedTuple(f"Segment is not base64: {segment[:16]!r}")

    body = segment.rstrip("=")
    if body != segment and len(segment) % 4:
        raise MalformedTuple("Segment has incorrect base64 padding.")
    if len(body) % 4 == 1:
        raise MalformedTuple("Segment length is not a valid base64 length.")

    body = body.replace("-", "+").replace("_", "/")
    body += "=" * (-len(body) % 4)
    try:
        return base64.b64decode(body, validate=True)
    except binascii.Error as exc:
        raise MalformedTuple(f"Segment is not base64: {exc}") from exc


class GCMTuple(NamedTuple):
    """Immutable (iv, ciphertext, auth_tag) triple with a text encoding."""

    iv:         bytes
    ciphertext: bytes
    auth_tag:   bytes

    def to_string(self) -> str:
        return SEPARATOR.join(
            _b64encode(part) for part in (self.iv, self.ciphertext, self.auth_tag)
        )

    def __str__(self) -> str:
        return self.to_string()

    @classmethod
    def parse(cls, encoded: Union[str, bytes]) -> "GCMTuple":
        """
        Parse '<iv>.<ciphertext>.<auth_tag>'.
        Raises MalformedTuple unless there are exactly three base64 segments.
        """
        if isinstance(encoded, (bytes, bytearray)):
            try:
                encoded = bytes(encoded).decode("ascii")
            except UnicodeDecodeError as exc:
                raise MalformedTuple("Encoded tuple must be ASCII.") from exc
        elif not isinstance(encoded, str):
            raise TypeError(
                f"Encoded tuple must be str or bytes, not {type(encoded).__name__}."
            )

        parts = encoded.split(SEPARATOR)
        if len(parts) != SEGMENTS:
            raise MalformedTuple(
                f"Expected {SEGMENTS} '{SEPARATOR}'-separated segments, got {len(parts)}."
            )
        iv, ciphertext, auth_tag = (_b64decode(part) for part in parts)
        return cls(iv, ciphertext, auth_tag)
