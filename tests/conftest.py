"""
Global pytest fixtures for the Loja test suite.

Responsibilities:
    - Provide a fresh FastAPI TestClient via the app factory for integration tests
    - Provide an isolated single-user credential store and Authenticator for unit tests
    - Keep bcrypt cheap: the cost factor is lowered before any app module is imported

LLM Prompt Example:
    "Show how to structure pytest fixtures to isolate service state and
    support both integration and unit tests without external dependencies."
"""

import os

# Must be set before loja.config is imported anywhere.
os.environ.setdefault("LOJA_BCRYPT_ROUNDS", "4")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from main import create_app  # noqa: E402
from auth.service import Authenticator  # noqa: E402
from loja.storage.storage import InMemoryCredentialStore  # noqa: E402

USERNAME = "user"
PASSWORD = "pass"


@pytest.fixture
def store() -> InMemoryCredentialStore:
    """Provide a fresh single-user store holding user/pass with role USER."""
    return InMemoryCredentialStore.single_user(USERNAME, PASSWORD, roles=("USER",), rounds=4)


@pytest.fixture
def authenticator(store: InMemoryCredentialStore) -> Authenticator:
    """Provide an Authenticator wired to the store fixture."""
    return Authenticator(store)


@pytest.fixture
def client(store: InMemoryCredentialStore) -> TestClient:
    """
    Provide a fresh TestClient with a new app instance.

    Notes:
        - Uses the app factory with the injected store fixture.
    """
    app = create_app(store=store)
    return TestClient(app)


@pytest.fixture
def basic_auth() -> tuple:
    """Valid Basic credentials as an httpx auth tuple."""
    return (USERNAME, PASSWORD)
