"""
Base credential store interface for Loja.

Purpose:
    Define the one lookup the Authenticator needs, so a persistent store
    (SQL, LDAP, an identity provider) can replace the in-memory one without
    touching authentication code.

Testing & Coverage:
    Abstract methods are not executed directly in tests and are marked
    `# pragma: no cover`.

LLM Prompt Example:
    "Show how a narrow, explicit lookup interface lets you inject a user store
    into an authenticator and swap backends without code changes."
"""

from abc import ABC, abstractmethod
from typing import Optional

from auth.schemas import Identity


class UserNotFound(LookupError):
    """Raised when no Identity is registered under the requested username."""

    def __init__(self, username: str):
        super().__init__(f"User not found: {username}")
        self.username = username


class BaseCredentialStore(ABC):
    """Abstract base class for credential stores."""

    @abstractmethod  # pragma: no cover
    def find(self, username: str) -> Identity:
        """
        Return the Identity registered under `username`.

        Raises:
            UserNotFound: If the username is unknown. This is the only error.
        """
        raise NotImplementedError

    @property
    def rounds(self) -> Optional[int]:
        """
        bcrypt cost used by this store's hashes, if known.

        The Authenticator uses it to size the check it runs for unknown
        usernames. Stores that cannot tell return None.
        """
        return None
