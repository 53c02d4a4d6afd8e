import pytest

from auth.policy import AccessPolicy, AccessState


@pytest.fixture
def policy():
    return AccessPolicy(public_paths=("/health",))


def test_health_is_public(policy):
    assert policy.classify("/health") is AccessState.PUBLIC
    assert policy.requires_auth("/health") is False


@pytest.mark.parametrize(
    "path",
    ["/test", "/auth/login", "/", "/docs", "/openapi.json", "/does-not-exist", "/health/", "/healthz", "/HEALTH"],
)
def test_everything_else_is_protected(policy, path):
    assert policy.classify(path) is AccessState.PROTECTED
    assert policy.requires_auth(path) is True


def test_default_public_path():
    assert AccessPolicy().classify("/health") is AccessState.PUBLIC


def test_custom_public_paths():
    policy = AccessPolicy(public_paths=("/ping", "/ready"))
    assert policy.classify("/ping") is AccessState.PUBLIC
    assert policy.classify("/ready") is AccessState.PUBLIC
    assert policy.classify("/health") is AccessState.PROTECTED


def test_no_public_paths_protects_everything():
    assert AccessPolicy(public_paths=()).classify("/health") is AccessState.PROTECTED
