import pytest

from chataru.errors import InvalidCredentials, ServerMisconfigured, Unauthorized
from chataru.services import sessions
from chataru.services.sessions import (
    AdminAuthenticator,
    AdminSession,
    InMemorySessionStore,
    StaticCredentialStore,
)


class FakeClock:
    def __init__(self, now=1_000_000.0):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture()
def clock(monkeypatch):
    fake = FakeClock()
    monkeypatch.setattr(sessions.time, 'time', fake)
    return fake


def make_auth(secret='s3cret', ttl=None):
    return AdminAuthenticator(StaticCredentialStore(secret), InMemorySessionStore(), ttl)


def test_issue_with_correct_secret_validates():
    auth = make_auth()
    token = auth.issue('s3cret')
    session = auth.validate(token)
    assert session.token == token
    assert session.expires_at is None


def test_tokens_are_long_and_unique():
    auth = make_auth()
    tokens = {auth.issue('s3cret') for _ in range(50)}
    assert len(tokens) == 50
    # 32 random bytes in urlsafe base64
    assert all(len(t) >= 43 for t in tokens)


def test_wrong_secret_raises_and_creates_nothing():
    auth = make_auth()
    with pytest.raises(InvalidCredentials):
        auth.issue('guess')
    with pytest.raises(InvalidCredentials):
        auth.issue(None)
    assert len(auth.store) == 0


def test_secret_comparison_is_exact():
    auth = make_auth()
    for candidate in ('s3cret ', 'S3CRET', 's3cre', ''):
        with pytest.raises(InvalidCredentials):
            auth.issue(candidate)


def test_missing_secret_is_server_misconfigured():
    auth = make_auth(secret=None)
    with pytest.raises(ServerMisconfigured):
        auth.issue('anything')
    assert len(auth.store) == 0


def test_validate_rejects_unknown_and_empty_tokens():
    auth = make_auth()
    for token in (None, '', 'not-a-token'):
        with pytest.raises(Unauthorized):
            auth.validate(token)


def test_revoke_then_validate_fails():
    auth = make_auth()
    token = auth.issue('s3cret')
    auth.revoke(token)
    with pytest.raises(Unauthorized):
        auth.validate(token)


def test_revoke_is_idempotent():
    auth = make_auth()
    auth.revoke('never-issued')
    auth.revoke(None)
    token = auth.issue('s3cret')
    auth.revoke(token)
    auth.revoke(token)
    with pytest.raises(Unauthorized):
        auth.validate(token)


def test_revoke_leaves_other_sessions_alone():
    auth = make_auth()
    first = auth.issue('s3cret')
    second = auth.issue('s3cret')
    auth.revoke(first)
    assert auth.validate(second).token == second


def test_session_expires_after_ttl(clock):
    auth = make_auth(ttl=60)
    token = auth.issue('s3cret')
    clock.now += 59
    auth.validate(token)
    clock.now += 2
    with pytest.raises(Unauthorized):
        auth.validate(token)


def test_validate_does_not_extend_lifetime(clock):
    auth = make_auth(ttl=60)
    token = auth.issue('s3cret')
    expires_at = auth.validate(token).expires_at
    clock.now += 30
    assert auth.validate(token).expires_at == expires_at


def test_purge_expired_counts_removed_sessions(clock):
    auth = make_auth(ttl=10)
    auth.issue('s3cret')
    auth.issue('s3cret')
    clock.now += 5
    live = auth.issue('s3cret')
    clock.now += 6
    assert auth.purge_expired() == 2
    assert auth.validate(live).token == live


def test_in_memory_store_get_drops_expired_entry(clock):
    store = InMemorySessionStore()
    store.set('t', AdminSession(token='t', created_at=clock.now, expires_at=clock.now + 1))
    assert store.exists('t')
    clock.now += 2
    assert store.get('t') is None
    assert len(store) == 0


def test_custom_store_is_used():
    class RecordingStore(InMemorySessionStore):
        def __init__(self):
            super().__init__()
            self.deleted = []

        def delete(self, token):
            self.deleted.append(token)
            super().delete(token)

    store = RecordingStore()
    auth = AdminAuthenticator(StaticCredentialStore('s3cret'), store)
    token = auth.issue('s3cret')
    auth.revoke(token)
    assert store.deleted == [token]


def test_empty_injected_store_is_kept():
    store = InMemorySessionStore()
    auth = AdminAuthenticator(StaticCredentialStore('s3cret'), store)
    assert auth.store is store

    token = auth.issue('s3cret')
    assert store.get(token) is not None


def test_init_app_binds_a_separate_authenticator_per_app():
    from flask import Flask

    first, second = Flask('first'), Flask('second')
    first.config.update(ADMIN_PASSWORD='alpha', ADMIN_SESSION_TTL=0)
    second.config.update(ADMIN_PASSWORD='beta', ADMIN_SESSION_TTL=30)
    store = InMemorySessionStore()

    extension = AdminAuthenticator()
    first_auth = extension.init_app(first, store=store)
    second_auth = extension.init_app(second)

    assert first.extensions['admin_auth'] is first_auth
    assert second.extensions['admin_auth'] is second_auth
    assert first_auth.store is store
    assert second_auth.store is not store
    assert first_auth.ttl_seconds is None
    assert second_auth.ttl_seconds == 30

    token = first_auth.issue('alpha')
    with pytest.raises(InvalidCredentials):
        second_auth.issue('alpha')
    with pytest.raises(Unauthorized):
        second_auth.validate(token)
