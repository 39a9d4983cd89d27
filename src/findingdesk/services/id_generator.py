"""Store identifier generation."""

import itertools
import os
import secrets
import time

_counter = itertools.count(int.from_bytes(os.urandom(3), "big"))
_process_token = secrets.token_bytes(5)


def generate_object_id() -> str:
    """Generate a 24-hex-digit document identifier.

    Layout follows the usual object id scheme: 4 bytes of epoch seconds,
    5 bytes fixed per process, 3 bytes of an incrementing counter.

    Returns:
        A string like "65f1c0de9a3b4c5d6e7f8091".
    """
    seconds = int(time.time()) & 0xFFFFFFFF
    count = next(_counter) & 0xFFFFFF
    raw = seconds.to_bytes(4, "big") + _process_token + count.to_bytes(3, "big")
    return raw.hex()


def is_object_id(value: str) -> bool:
    """Return True if value is a 24-hex-digit identifier."""
    if not isinstance(value, str) or len(value) != 24:
        return False
    try:
        bytes.fromhex(value)
    except ValueError:
        return False
    return True
