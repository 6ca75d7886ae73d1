# bookit/errors.py

from typing import Dict, Optional


class BookItError(Exception):
    """Base class for every error raised by the booking client."""


class ValidationError(BookItError):
    """One or more form fields are missing or malformed.

    ``errors`` maps a field name to the message shown next to it.
    """

    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        super().__init__("; ".join(f"{k}: {v}" for k, v in self.errors.items()))


class NotFoundError(BookItError):
    pass


class ConflictError(BookItError):
    pass


class AuthError(BookItError):
    """No usable session, or the token was rejected.

    ``redirect`` is the view the actor should be sent to, if known.
    """

    def __init__(self, message: str, redirect: Optional[str] = None):
        self.redirect = redirect
        super().__init__(message)


class TransportError(BookItError):
    """The token endpoint could not be reached."""
