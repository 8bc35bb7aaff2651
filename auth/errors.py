"""
Account error taxonomy.

Service functions raise these; route functions turn them into JSON
responses using ``status_code`` and the user-safe ``message``.
"""

from __future__ import annotations

from fastapi import status


class AccountError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, *, details: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        # Underlying cause; only diagnostic endpoints ever return it.
        self.details = details


class ValidationError(AccountError):
    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(AccountError):
    status_code = status.HTTP_400_BAD_REQUEST


class AuthenticationError(AccountError):
    status_code = status.HTTP_401_UNAUTHORIZED


class InternalError(AccountError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
