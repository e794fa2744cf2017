"""
core/errors.py
────────────────────────────────────────────────────────────────────────
Exception types raised by the domain layer. The HTTP layer maps them to
status codes in `main.py`.
"""
from __future__ import annotations


class MetafitError(Exception):
    """Base class for every error the domain layer raises on purpose."""


class InvalidInputError(MetafitError, ValueError):
    """A computation received an argument it cannot work with."""


class ValidationError(MetafitError):
    """One or more user-supplied fields failed their range checks."""

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = dict(errors)
        super().__init__("; ".join(f"{k}: {v}" for k, v in self.errors.items()))


class SimulatedAuthError(MetafitError):
    """Credentials were rejected (or the token presented is not valid)."""


class NotAuthenticatedError(MetafitError):
    """An operation needs a profile but the session has none."""
