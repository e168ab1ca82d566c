"""
Admin Session Service

Exchanges the configured administrator secret for an opaque session token
and checks that token on every admin request.

The registry is an injected key-value store with a TTL. The default
in-memory store lives for the lifetime of the process; a shared or
persistent backend only has to implement ``SessionStore``.
"""

import hmac
import logging
import secrets
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from chataru.errors import InvalidCredentials, ServerMisconfigured, Unauthorized

logger = logging.getLogger(__name__)

# 32 random bytes = 256 bits of entropy
TOKEN_BYTES = 32


@dataclass(frozen=True)
class AdminSession:
    """An issued admin session."""
    token: str
    created_at: float
    expires_at: Optional[float] = None

    def is_expired(self, now=None):
        if self.expires_at is None:
            return False
        return (now if now is not None else time.time()) > self.expires_at


class SessionStore(ABC):
    """Abstract interface for admin session storage backends."""

    @abstractmethod
    def set(self, token, session):
        """Store a session under its token."""

    @abstractmethod
    def get(self, token):
        """Return the live session for ``token`` or None if absent/expired."""

    @abstractmethod
    def delete(self, token):
        """Remove a session. Deleting an absent token is a no-op."""

    def exists(self, token):
        return self.get(token) is not None

    @abstractmethod
    def cleanup_expired(self):
        """Remove expired sessions and return how many were removed."""


class InMemorySessionStore(SessionStore):
    """Process-local session store. Lost on restart."""

    def __init__(self):
        self._data = {}

    def set(self, token, session):
        self._data[token] = session

    def get(self, token):
        session = self._data.get(token)
        if session is None:
            return None
        if session.is_expired():
            self._data.pop(token, None)
            return None
        return session

    def delete(self, token):
        self._data.pop(token, None)

    def cleanup_expired(self):
        now = time.time()
        expired = [t for t, s in list(self._data.items()) if s.is_expired(now)]
        for token in expired:
            self._data.pop(token, None)
        return len(expired)

    def __len__(self):
        return len(self._data)


class StaticCredentialStore:
    """Holds the single administrator secret."""

    def __init__(self, secret=None):
        self._secret = secret or None

    @property
    def configured(self):
        return self._secret is not None

    def verify(self, candidate):
        """Exact comparison of ``candidate`` against the configured secret.

        Raises:
            ServerMisconfigured: no secret is configured at all
        """
        if not self.configured:
            raise ServerMisconfigured()
        if not isinstance(candidate, str):
            return False
        return hmac.compare_digest(candidate.encode('utf-8'), self._secret.encode('utf-8'))


class AdminAuthenticator:
    """Issues, validates and revokes admin session tokens.

    Usable directly or as a Flask extension. ``init_app`` does not touch
    this object: it binds a separate authenticator, built from the app's
    ``ADMIN_PASSWORD`` and ``ADMIN_SESSION_TTL``, to
    ``app.extensions['admin_auth']`` so several apps never share state.
    """

    def __init__(self, credentials=None, store=None, ttl_seconds=None):
        self.credentials = credentials if credentials is not None else StaticCredentialStore()
        self.store = store if store is not None else InMemorySessionStore()
        self.ttl_seconds = ttl_seconds or None

    def init_app(self, app, store=None):
        """Bind a per-app authenticator and return it."""
        bound = type(self)(
            credentials=StaticCredentialStore(app.config.get('ADMIN_PASSWORD')),
            store=store,
            ttl_seconds=app.config.get('ADMIN_SESSION_TTL'),
        )
        app.extensions['admin_auth'] = bound
        if not bound.credentials.configured:
            logger.warning('ADMIN_PASSWORD is not set; admin login is disabled')
        return bound

    def issue(self, candidate_secret):
        """Exchange the admin secret for a new session token.

        Args:
            candidate_secret: Secret supplied by the caller

        Returns:
            The new token string

        Raises:
            ServerMisconfigured: no admin secret is configured
            InvalidCredentials: the secret does not match
        """
        if not self.credentials.verify(candidate_secret):
            logger.warning('Rejected admin login attempt')
            raise InvalidCredentials()

        purged = self.store.cleanup_expired()
        if purged:
            logger.info('Purged %d expired admin session(s)', purged)

        token = secrets.token_urlsafe(TOKEN_BYTES)
        while self.store.exists(token):
            token = secrets.token_urlsafe(TOKEN_BYTES)

        now = time.time()
        expires_at = now + self.ttl_seconds if self.ttl_seconds else None
        self.store.set(token, AdminSession(token=token, created_at=now, expires_at=expires_at))
        logger.info('Admin session issued')
        return token

    def validate(self, token):
        """Return the live session for ``token``.

        Does not extend the session's lifetime.

        Raises:
            Unauthorized: token missing, unknown, expired or revoked
        """
        if not token:
            raise Unauthorized()
        session = self.store.get(token)
        if session is None:
            raise Unauthorized()
        return session

    def revoke(self, token):
        """Forget ``token``. Revoking an absent token succeeds."""
        if token:
            self.store.delete(token)
            logger.info('Admin session revoked')

    def purge_expired(self):
        return self.store.cleanup_expired()
