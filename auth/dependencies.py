"""
HTTP Basic guard and FastAPI dependencies for authentication.

The guard is an HTTP middleware composed in front of every route, so the
access policy also covers paths with no handler (they answer 404 only once
the caller is authenticated). Handlers read the resolved identity with
`Depends(get_current_identity)`.
"""

import base64
import binascii
import logging
from typing import Awaitable, Callable, Optional

from fastapi import HTTPException, Request, Response, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from fastapi.security import HTTPBasicCredentials
from fastapi.security.utils import get_authorization_scheme_param

from .policy import AccessPolicy
from .schemas import Identity
from .service import Authenticator

log = logging.getLogger("loja.auth")

CallNext = Callable[[Request], Awaitable[Response]]


class MalformedCredentials(ValueError):
    """The Authorization header claims Basic but cannot be decoded."""


def parse_basic_credentials(authorization: Optional[str]) -> Optional[HTTPBasicCredentials]:
    """
    Decode an `Authorization: Basic ...` header.

    The payload is decoded as UTF-8, so non-ASCII usernames and passwords
    work the same as in the login body.

    Returns:
        HTTPBasicCredentials, or None when the header is missing or uses
        another scheme.

    Raises:
        MalformedCredentials: Invalid base64, invalid UTF-8 or no ":" separator.
    """
    scheme, param = get_authorization_scheme_param(authorization)
    if not authorization or scheme.lower() != "basic":
        return None
    try:
        data = base64.b64decode(param, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        raise MalformedCredentials("Invalid authentication credentials") from None
    username, separator, password = data.partition(":")
    if not separator:
        raise MalformedCredentials("Invalid authentication credentials")
    return HTTPBasicCredentials(username=username, password=password)


def _challenge_headers(realm: Optional[str]) -> dict:
    if realm:
        return {"WWW-Authenticate": f'Basic realm="{realm}"'}
    return {"WWW-Authenticate": "Basic"}


def basic_auth_middleware(
    policy: AccessPolicy,
    authenticator: Authenticator,
    realm: Optional[str] = None,
) -> Callable[[Request, CallNext], Awaitable[Response]]:
    """
    Build the middleware enforcing `policy` with HTTP Basic credentials.

    Args:
        policy (AccessPolicy): Decides per path whether credentials are needed.
        authenticator (Authenticator): Verifies the Basic credentials.
        realm (str, optional): Realm advertised in the 401 challenge.

    Returns:
        An async `(request, call_next)` callable for `app.middleware("http")`.

    Behaviour:
        - PUBLIC paths pass through untouched.
        - PROTECTED paths without valid credentials get 401 with a
          WWW-Authenticate challenge and never reach a handler.
        - On success the Identity is stored on `request.state.identity`.
    """
    headers = _challenge_headers(realm)

    def _unauthorized(detail: str) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"detail": detail},
            headers=headers,
        )

    async def guard(request: Request, call_next: CallNext) -> Response:
        if not policy.requires_auth(request.url.path):
            return await call_next(request)

        try:
            credentials = parse_basic_credentials(request.headers.get("Authorization"))
        except MalformedCredentials as exc:
            return _unauthorized(str(exc))
        if credentials is None:
            return _unauthorized("Not authenticated")

        # bcrypt is CPU bound; keep it off the event loop
        result = await run_in_threadpool(
            authenticator.authenticate, credentials.username, credentials.password
        )
        if not result.authenticated:
            return _unauthorized("Invalid authentication credentials")

        request.state.identity = result.identity
        return await call_next(request)

    return guard


def get_current_identity(request: Request) -> Identity:
    """
    Dependency that returns the identity attached by the Basic guard.

    Raises:
        HTTPException: 401 if the request was not authenticated.
    """
    identity = getattr(request.state, "identity", None)
    if identity is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Basic"},
        )
    return identity
