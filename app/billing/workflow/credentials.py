"""
Payment codes and WiFi login credentials.
"""
from __future__ import annotations

import secrets


def generate_code() -> str:
    """8 uppercase hex characters from 4 random bytes."""
    return secrets.token_hex(4).upper()


def generate_credentials(prefix: str = "user") -> tuple[str, str]:
    """Return ``(username, password)``.

    The username suffix is a random token rather than a clock value, so
    requests arriving in the same millisecond still get distinct logins.
    """
    username = prefix + secrets.token_hex(4)
    password = secrets.token_hex(3)
    return username, password
