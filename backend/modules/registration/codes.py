"""One-time passcode generation."""

import secrets


def generate_code(length: int = 6) -> str:
    """Return a zero-padded random numeric code of the given length."""
    if length < 1:
        raise ValueError("Code length must be positive")
    return str(secrets.randbelow(10 ** length)).zfill(length)
