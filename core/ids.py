# core/ids.py

import re
import secrets
import time

from rest_framework.exceptions import ValidationError

OBJECT_ID_RE = re.compile(r'^[0-9a-fA-F]{24}$')


def new_object_id():
    """
    Returns a 24-character hex identifier: a 4-byte creation timestamp
    followed by 8 random bytes, so ids sort roughly by creation time.
    """
    return f"{int(time.time()):08x}{secrets.token_hex(8)}"


def is_valid_object_id(value):
    return isinstance(value, str) and bool(OBJECT_ID_RE.match(value))


def validate_object_id(value, label='Resource'):
    """Raises a 400 before any lookup is attempted with a malformed id."""
    if not is_valid_object_id(value):
        raise ValidationError(f"Invalid {label} ID format.")
    return value.lower()
