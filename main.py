"""
Main API module for Loja.

Responsibilities:
    - Expose a public health check, a protected test endpoint and a login endpoint
    - Guard every path except the health check with HTTP Basic authentication
    - Verify login payloads explicitly with the same Authenticator

Architecture:
    - App Factory pattern (create_app) for test isolation and DI.
    - In-memory single-user credential store by default; any BaseCredentialStore
      can be injected instead.
    - Access policy and guard live in the `auth` package and are composed here
      as one HTTP middleware.

LLM Prompt Example:
    "Explain how to structure a FastAPI service with an application factory,
    an injected user store, and an explicit authentication middleware."
"""

import logging
from typing import Dict, Optional

from fastapi import Depends, FastAPI, status
from fastapi.responses import PlainTextResponse

from auth.dependencies import basic_auth_middleware, get_current_identity
from auth.policy import AccessPolicy
from auth.schemas import UserLogin
from auth.service import Authenticator
from loja.config import settings
from loja.storage.base import BaseCredentialStore
from loja.storage.storage_factory import get_credential_store

LOGIN_SUCCESS = "Login bem-sucedido!"
LOGIN_FAILURE = "Falha na autenticação"


def create_app(store: Optional[BaseCredentialStore] = None) -> FastAPI:
    """
    Factory function to build and configure a new FastAPI app instance.

    Args:
        store (BaseCredentialStore, optional): Credential store to authenticate
            against. Defaults to the configured backend (`get_credential_store`).

    Returns:
        FastAPI: A fully configured application with its own store,
                 authenticator and access policy.

    Why an app factory?
        - Enables per-test isolation in pytest.
        - Lets tests and deployments inject a different credential store.
    """
    app = FastAPI(
        title="Loja",
        description="Demo service with HTTP Basic authentication against a single in-memory user",
        docs_url="/docs",  # behind the Basic guard like every non-health path
    )
    log = logging.getLogger("loja")

    # basic console logging (optional)
    if not logging.getLogger().handlers:
        logging.basicConfig(level=settings.LOG_LEVEL)

    # ----------------------------------------------------------------
    # Per-app instances (isolated for tests, swappable for production)
    # ----------------------------------------------------------------
    if store is None:
        store = get_credential_store()
    authenticator = Authenticator(store)
    policy = AccessPolicy(public_paths=(settings.HEALTH_PATH,))

    log.info("Loja credential store: %s", type(store).__name__)

    app.middleware("http")(
        basic_auth_middleware(policy, authenticator, realm=settings.AUTH_REALM)
    )

    # Expose for tests and introspection
    app.state.store = store
    app.state.authenticator = authenticator
    app.state.policy = policy

    # ----------------------------------------------------------------
    # Routes
    # ----------------------------------------------------------------
    @app.get(settings.HEALTH_PATH)
    def check_health() -> Dict[str, str]:
        return {"status": "Is Alive"}

    @app.get("/test", dependencies=[Depends(get_current_identity)])
    def test_endpoint() -> Dict[str, str]:
        return {"message": "Test endpoint is working!"}

    @app.post("/auth/login", response_class=PlainTextResponse)
    def login(req: UserLogin) -> PlainTextResponse:
        """
        Authenticate the credentials in the request body.

        This runs on top of the Basic guard: the caller must already hold
        valid Basic credentials to reach it, and the body credentials are
        checked independently of those.

        Returns:
            PlainTextResponse: 200 "Login bem-sucedido!" or 401 "Falha na autenticação".
        """
        result = authenticator.authenticate(req.username, req.password)
        if result.authenticated:
            return PlainTextResponse(LOGIN_SUCCESS)
        return PlainTextResponse(LOGIN_FAILURE, status_code=status.HTTP_401_UNAUTHORIZED)

    return app


# `uvicorn main:app --reload` and `from main import app` continue to work.
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
