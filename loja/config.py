"""
Runtime configuration for Loja
==============================

Simple settings module that reads from environment variables (only here),
and exposes a stable `settings` object for the rest of the codebase.
Avoid reading env vars anywhere else; import from this module instead.

Credentials
-----------
- LOJA_USERNAME        : the single known username (default "user")
- LOJA_PASSWORD        : its password, hashed at startup (default "pass")
- LOJA_ROLES           : comma-separated roles (default "USER")
- LOJA_BCRYPT_ROUNDS   : bcrypt cost factor; default 12; clamped to [4, 31]

Access policy
-------------
- LOJA_HEALTH_PATH     : the only path served without credentials (default "/health")
- LOJA_AUTH_REALM      : optional realm advertised in WWW-Authenticate

Runtime
-------
- LOJA_CREDENTIAL_BACKEND : "memory" (default); read lazily by the store factory
- LOJA_LOG_LEVEL          : root log level when nothing else configured logging
- LOJA_HOST / LOJA_PORT   : uvicorn bind address when running main.py directly
"""

import os


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name, str(default))
    try:
        return int(raw)
    except ValueError:
        return default


def _get_list(name: str, default: str) -> tuple:
    raw = os.getenv(name, default)
    return tuple(item.strip() for item in raw.split(",") if item.strip())


class _Settings:
    # -------- Credentials --------
    USERNAME: str = os.getenv("LOJA_USERNAME", "user")
    PASSWORD: str = os.getenv("LOJA_PASSWORD", "pass")
    ROLES: tuple = _get_list("LOJA_ROLES", "USER")

    # bcrypt refuses costs outside [4, 31]
    BCRYPT_ROUNDS: int = max(4, min(31, _get_int("LOJA_BCRYPT_ROUNDS", 12)))

    # -------- Access policy --------
    HEALTH_PATH: str = os.getenv("LOJA_HEALTH_PATH", "/health")
    AUTH_REALM: str = os.getenv("LOJA_AUTH_REALM", "")

    # -------- Runtime --------
    CREDENTIAL_BACKEND: str = os.getenv("LOJA_CREDENTIAL_BACKEND", "memory").strip().lower()
    LOG_LEVEL: str = os.getenv("LOJA_LOG_LEVEL", "INFO").strip().upper()
    HOST: str = os.getenv("LOJA_HOST", "127.0.0.1")
    PORT: int = _get_int("LOJA_PORT", 8000)


settings = _Settings()
