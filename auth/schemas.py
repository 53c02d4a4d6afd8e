"""
Schemas for the auth module.

- Pydantic models for request payloads (validated by FastAPI).
- Frozen dataclasses for the values that flow between store, authenticator
  and the HTTP layer. They are created once and never mutated.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Optional

from pydantic import BaseModel


class UserLogin(BaseModel):
    """Schema for login request payload."""
    username: str
    password: str


@dataclass(frozen=True)
class Identity:
    """
    A registered principal.

    Attributes:
        username (str): Unique lookup key.
        password_hash (str): Salted bcrypt hash; the plaintext is never kept.
        roles (FrozenSet[str]): Granted roles, currently always {"USER"}.
    """
    username: str
    password_hash: str = field(repr=False)
    roles: FrozenSet[str] = frozenset({"USER"})

    def has_role(self, role: str) -> bool:
        return role in self.roles


@dataclass(frozen=True)
class AuthResult:
    """Outcome of one authentication attempt."""
    authenticated: bool
    identity: Optional[Identity] = None

    @classmethod
    def success(cls, identity: Identity) -> "AuthResult":
        return cls(authenticated=True, identity=identity)

    @classmethod
    def failure(cls) -> "AuthResult":
        return cls(authenticated=False, identity=None)
