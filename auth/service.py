"""
Core authentication logic.

This module validates submitted credentials against an injected
credential store. Callers only ever see authenticated / not authenticated:
whether the username was unknown or the password wrong is logged at DEBUG
and otherwise kept internal, so responses cannot be used to enumerate users.
"""

import logging

from loja.config import settings
from loja.storage.base import BaseCredentialStore, UserNotFound

from .schemas import AuthResult, Identity
from .utils import hash_password, verify_password

log = logging.getLogger("loja.auth")

_DUMMY_PASSWORD = "not-a-real-password"


class AuthenticationFailed(Exception):
    """Credentials were rejected."""


class UnknownUser(AuthenticationFailed):
    """No identity exists for the submitted username."""


class BadPassword(AuthenticationFailed):
    """The password does not match the stored hash."""


class Authenticator:
    """
    Verify username/password pairs against a credential store.

    Stateless apart from the injected store: no lockout, no rate limiting.
    """

    def __init__(self, store: BaseCredentialStore):
        self.store = store
        # Checked when the username is unknown so both failure paths cost one
        # bcrypt check at the store's own cost factor.
        rounds = store.rounds or settings.BCRYPT_ROUNDS
        self._dummy_hash = hash_password(_DUMMY_PASSWORD, rounds=rounds)

    def verify(self, username: str, password: str) -> Identity:
        """
        Resolve and check credentials.

        Returns:
            Identity: The authenticated identity.

        Raises:
            UnknownUser: If the store has no such username.
            BadPassword: If the password does not match.
        """
        try:
            identity = self.store.find(username)
        except UserNotFound:
            verify_password(password, self._dummy_hash)
            raise UnknownUser(username) from None

        if not verify_password(password, identity.password_hash):
            raise BadPassword(username)
        return identity

    def authenticate(self, username: str, password: str) -> AuthResult:
        """
        Authenticate a user by validating their username and password.

        Args:
            username (str): The username provided by the client.
            password (str): The password provided by the client.

        Returns:
            AuthResult: authenticated with the resolved Identity, or a failure
            carrying no identity.
        """
        try:
            identity = self.verify(username, password)
        except AuthenticationFailed as exc:
            log.debug("Authentication rejected (%s) for %r", type(exc).__name__, username)
            log.info("Authentication failed for %r", username)
            return AuthResult.failure()
        return AuthResult.success(identity)
