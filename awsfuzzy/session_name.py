"""Unique, time-sortable session identifiers (KSUIDs)."""

from __future__ import annotations

import secrets
import time

KSUID_EPOCH = 1_400_000_000
PAYLOAD_LENGTH = 16
ENCODED_LENGTH = 27
_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
_MAX_OFFSET = 2**32


def ksuid_from_parts(timestamp: int, payload: bytes) -> str:
    """Encode a KSUID from a Unix timestamp in seconds and a 16-byte payload."""
    if len(payload) != PAYLOAD_LENGTH:
        raise ValueError(f"payload must be {PAYLOAD_LENGTH} bytes, got {len(payload)}")
    offset = int(timestamp) - KSUID_EPOCH
    if not 0 <= offset < _MAX_OFFSET:
        raise ValueError(f"timestamp {timestamp} is outside the KSUID range")
    number = int.from_bytes(offset.to_bytes(4, "big") + bytes(payload), "big")
    digits = []
    while number:
        number, rest = divmod(number, 62)
        digits.append(_ALPHABET[rest])
    return "".join(reversed(digits)).rjust(ENCODED_LENGTH, "0")


def new_ksuid() -> str:
    """Return a fresh KSUID for the current time."""
    return ksuid_from_parts(int(time.time()), secrets.token_bytes(PAYLOAD_LENGTH))


def session_name() -> str:
    """Return a unique session name of at most 32 characters for auditing."""
    return "gntd-" + new_ksuid()