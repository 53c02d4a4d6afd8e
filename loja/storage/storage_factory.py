"""
Credential store factory: switch store backend from config
==========================================================

Centralizes selection of the credential store so the authenticator and the
app stay ignorant of where identities live.

- Reads LOJA_CREDENTIAL_BACKEND **at call time** to avoid stale values in tests.
- The only backend today is "memory", seeded with the configured single user.

Environment variables
---------------------
- LOJA_CREDENTIAL_BACKEND: "memory" (default)
"""

import logging
import os
from typing import Optional

from loja.config import settings
from loja.storage.base import BaseCredentialStore
from loja.storage.storage import InMemoryCredentialStore

log = logging.getLogger("loja.storage")


def get_credential_store(backend: Optional[str] = None, **kwargs) -> BaseCredentialStore:
    """
    Return a credential store based on configuration.

    Parameters
    ----------
    backend : str, optional
        "memory" (default). If omitted, reads LOJA_CREDENTIAL_BACKEND.
    kwargs : dict
        Overrides for the memory backend: username, password, roles, rounds.

    Returns
    -------
    BaseCredentialStore-compatible instance

    Raises
    ------
    ValueError
        For an unknown backend.
    """
    be = (backend or os.getenv("LOJA_CREDENTIAL_BACKEND", "memory")).strip().lower()
    log.info("Selected credential backend: %r", be)

    if be == "memory":
        return InMemoryCredentialStore.single_user(
            username=kwargs.get("username", settings.USERNAME),
            password=kwargs.get("password", settings.PASSWORD),
            roles=kwargs.get("roles", settings.ROLES),
            rounds=kwargs.get("rounds", settings.BCRYPT_ROUNDS),
        )

    raise ValueError(f"Unknown credential backend: {be!r}")
