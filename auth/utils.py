"""
Utility functions for the auth module.

Passwords are hashed with bcrypt: each hash embeds its own random salt and
cost factor, so verification re-derives the hash with the same parameters
used at creation and compares in constant time.
"""

from typing import Optional

import bcrypt

DEFAULT_ROUNDS = 12


def hash_password(password: str, rounds: int = DEFAULT_ROUNDS) -> str:
    """
    Return a salted bcrypt hash of the given password.

    Args:
        password (str): Plaintext password.
        rounds (int): bcrypt cost factor (4..31).

    Returns:
        str: The encoded hash, e.g. "$2b$12$...".
    """
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=rounds)).decode("ascii")


def verify_password(password: str, password_hash: str) -> bool:
    """
    Check a plaintext password against a stored bcrypt hash.

    Returns False for malformed hashes instead of raising.
    """
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("ascii"))
    except ValueError:
        return False


def hash_rounds(password_hash: str) -> Optional[int]:
    """
    Return the cost factor embedded in a bcrypt hash ("$2b$12$..." -> 12).

    Returns None when the value is not a bcrypt hash.
    """
    parts = password_hash.split("$")
    if len(parts) < 4 or not parts[2].isdigit():
        return None
    return int(parts[2])
