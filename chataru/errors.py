"""
Error Taxonomy

Every failure a request can hit is one of these. Each carries the HTTP
status and the public message rendered by the app-level error handler;
internal detail stays in the server logs.
"""


class ChataruError(Exception):
    """Base class for errors translated into a JSON response."""

    status_code = 500
    message = 'Something went wrong. Please try again.'

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_dict(self):
        return {'error': self.message}


class ValidationError(ChataruError):
    """Client-supplied data is missing a required field or has a bad type."""

    status_code = 400
    message = 'Invalid request.'


class InvalidCredentials(ChataruError):
    """Wrong administrator secret at login."""

    status_code = 401
    message = 'Invalid password.'


class Unauthorized(ChataruError):
    """Missing, unknown, expired or revoked session token."""

    status_code = 401
    message = 'Unauthorized'


class ServerMisconfigured(ChataruError):
    """A required secret is absent from the deployment."""

    status_code = 500
    message = 'ADMIN_PASSWORD not set on server.'


class StorageError(ChataruError):
    """Database or file store failure."""

    status_code = 500
    message = 'Storage is unavailable. Please try again.'
