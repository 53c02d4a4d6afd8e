import pytest

from auth.utils import verify_password
from loja.storage.storage import InMemoryCredentialStore
from loja.storage.storage_factory import get_credential_store


def test_get_credential_store_memory(monkeypatch):
    monkeypatch.setenv("LOJA_CREDENTIAL_BACKEND", "memory")
    store = get_credential_store()
    assert isinstance(store, InMemoryCredentialStore)


def test_default_backend_seeds_single_configured_user(monkeypatch):
    monkeypatch.delenv("LOJA_CREDENTIAL_BACKEND", raising=False)
    store = get_credential_store()
    identity = store.find("user")
    assert verify_password("pass", identity.password_hash)
    assert identity.roles == frozenset({"USER"})
    assert len(store) == 1


def test_explicit_backend_overrides_env(monkeypatch):
    monkeypatch.setenv("LOJA_CREDENTIAL_BACKEND", "nosuch")
    store = get_credential_store("memory")
    assert isinstance(store, InMemoryCredentialStore)


def test_kwargs_override_seeded_user():
    store = get_credential_store("memory", username="alice", password="s3cret", roles=("USER", "ADMIN"), rounds=4)
    identity = store.find("alice")
    assert verify_password("s3cret", identity.password_hash)
    assert identity.has_role("ADMIN")
    assert "user" not in store


def test_get_credential_store_unknown_backend(monkeypatch):
    monkeypatch.setenv("LOJA_CREDENTIAL_BACKEND", "postgres")
    with pytest.raises(ValueError, match="Unknown credential backend"):
        get_credential_store()
