"""
Argon2id password hashing.

Implements ICredentialHasher on top of argon2-cffi. Verification is
constant-time inside the library.
"""

from argon2 import PasswordHasher, Type
from argon2.exceptions import InvalidHash, VerificationError


class Argon2CredentialHasher:
    """Hashes and checks passwords with Argon2id."""

    def __init__(self, time_cost: int = 3, memory_cost: int = 65536, parallelism: int = 4):
        self._hasher = PasswordHasher(
            time_cost=time_cost,
            memory_cost=memory_cost,
            parallelism=parallelism,
            type=Type.ID,
        )

    def hash(self, plaintext: str) -> str:
        return self._hasher.hash(plaintext)

    def compare(self, plaintext: str, digest: str) -> bool:
        try:
            return self._hasher.verify(digest, plaintext)
        except (VerificationError, InvalidHash):
            return False
