"""
Auth package for FastAPI applications.

Provides HTTP Basic authentication for the Loja service: password hashing,
the authenticator, the per-path access policy and the guard middleware.
"""
