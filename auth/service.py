"""
Account workflows: signup, credential check and account listing.

Framework-free: each function takes an ``AsyncSession`` and raises an
``AccountError`` subclass on failure.  Routes decide how errors are rendered.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from sqlalchemy.ext.asyncio import AsyncSession

from auth.errors import (
    AccountError,
    AuthenticationError,
    ConflictError,
    InternalError,
    ValidationError,
)
from auth.password import hash_password, password_too_long, verify_password
from database.helpers import DuplicateEmailError, create_user, get_user_by_email, list_users
from database.models import Role

logger = logging.getLogger(__name__)

MSG_REQUIRED = "Email y contraseña son requeridos"
MSG_PASSWORD_TOO_LONG = "La contraseña no puede exceder 72 bytes"
MSG_USER_EXISTS = "El usuario ya existe"
MSG_USER_CREATED = "Usuario creado exitosamente"
MSG_USER_NOT_FOUND = "Usuario no encontrado"
MSG_WRONG_PASSWORD = "Contraseña incorrecta"
MSG_INTERNAL = "Error interno del servidor"
MSG_AUTH_FAILED = "Error en autenticación"
MSG_DB_ACCESS = "Error accessing database"


def coerce_role(value: Any) -> Role:
    """Map ``value`` onto ``Role``; anything unrecognised becomes ``GENERAL``."""
    if isinstance(value, Role):
        return value
    try:
        return Role(value)
    except (ValueError, TypeError):
        if value:
            logger.warning("Unknown role %r coerced to %s", value, Role.GENERAL.value)
        return Role.GENERAL


def display_name(first_name: str, last_name: str) -> str:
    return f"{first_name} {last_name}".strip()


async def signup(
    session: AsyncSession,
    *,
    email: str | None,
    password: str | None,
    first_name: str | None = None,
    last_name: str | None = None,
    role: Any = None,
) -> Dict[str, Any]:
    """
    Create an account and return it without the password hash.

    Input is validated before any storage access.  The lookup by email is
    only a shortcut; the unique constraint on ``users.email`` is what
    guarantees a single account per address.
    """
    if not email or not password:
        raise ValidationError(MSG_REQUIRED)
    if password_too_long(password):
        raise ValidationError(MSG_PASSWORD_TOO_LONG)

    first = first_name or ""
    last = last_name or ""
    try:
        if await get_user_by_email(session, email) is not None:
            raise ConflictError(MSG_USER_EXISTS)

        user = await create_user(
            session,
            email=email,
            password_hash=hash_password(password),
            first_name=first,
            last_name=last,
            name=display_name(first, last),
            role=coerce_role(role),
        )
    except DuplicateEmailError:
        raise ConflictError(MSG_USER_EXISTS)
    except AccountError:
        raise
    except Exception as exc:
        logger.exception("Error en signup")
        raise InternalError(MSG_INTERNAL, details=str(exc)) from exc

    logger.info("Registered user %s (%s, %s)", user.email, user.id, user.role.value)
    return user.to_public_dict()


async def check_credentials(
    session: AsyncSession,
    *,
    email: str | None,
    password: str | None,
) -> Dict[str, Any]:
    """Return the account summary when ``password`` matches the stored hash."""
    if not email:
        raise AuthenticationError(MSG_USER_NOT_FOUND)
    try:
        user = await get_user_by_email(session, email)
    except Exception as exc:
        logger.exception("Error en credential check")
        raise InternalError(MSG_AUTH_FAILED, details=str(exc)) from exc

    if user is None or not user.password:
        raise AuthenticationError(MSG_USER_NOT_FOUND)
    if not verify_password(password or "", user.password):
        raise AuthenticationError(MSG_WRONG_PASSWORD)

    return user.to_summary_dict()


async def list_accounts(session: AsyncSession) -> List[Dict[str, Any]]:
    try:
        users = await list_users(session)
    except Exception as exc:
        logger.exception("Error listing accounts")
        raise InternalError(MSG_DB_ACCESS, details=str(exc)) from exc
    return [u.to_summary_dict() for u in users]
