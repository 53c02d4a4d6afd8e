"""
Credential store for Loja (in-memory implementation).

Responsibilities:
    - Hold the known identities keyed by username
    - Resolve a username to its Identity, or raise UserNotFound

Design:
    - Populated once at construction and read-only afterwards, so concurrent
      request handlers can share one instance without locking.
    - Satisfies the BaseCredentialStore contract; a DB-backed store can
      replace it without changes to the Authenticator or the API.
"""

from typing import Dict, Iterable, Optional

from auth.schemas import Identity
from auth.utils import DEFAULT_ROUNDS, hash_password, hash_rounds

from .base import BaseCredentialStore, UserNotFound


class InMemoryCredentialStore(BaseCredentialStore):
    def __init__(self, identities: Iterable[Identity] = ()):
        """
        Build the store from pre-hashed identities.

        Raises:
            ValueError: If two identities share a username.
        """
        self._identities: Dict[str, Identity] = {}
        for identity in identities:
            if identity.username in self._identities:
                raise ValueError(f"Duplicate username: {identity.username!r}")
            self._identities[identity.username] = identity

    @classmethod
    def single_user(
        cls,
        username: str,
        password: str,
        roles: Iterable[str] = ("USER",),
        rounds: int = DEFAULT_ROUNDS,
    ) -> "InMemoryCredentialStore":
        """
        Build a store holding exactly one identity.

        The plaintext password is hashed here and then dropped.
        """
        identity = Identity(
            username=username,
            password_hash=hash_password(password, rounds=rounds),
            roles=frozenset(roles),
        )
        return cls([identity])

    @property
    def rounds(self) -> Optional[int]:
        """Highest bcrypt cost among the stored hashes, or None when unknown."""
        costs = [hash_rounds(i.password_hash) for i in self._identities.values()]
        costs = [c for c in costs if c is not None]
        return max(costs) if costs else None

    def find(self, username: str) -> Identity:
        try:
            return self._identities[username]
        except KeyError:
            raise UserNotFound(username) from None

    def __len__(self) -> int:
        return len(self._identities)

    def __contains__(self, username: object) -> bool:
        return username in self._identities
