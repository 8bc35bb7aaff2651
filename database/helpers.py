"""
Database helpers. The only code that queries accounts and company data.

"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from database.models import CompanyData, Role, User

logger = logging.getLogger(__name__)


class DuplicateEmailError(Exception):
    """Raised when the unique constraint on ``users.email`` rejects an insert."""

    def __init__(self, email: str) -> None:
        super().__init__(f"email already registered: {email}")
        self.email = email



async def get_user_by_email(session: AsyncSession, email: str) -> Optional[User]:
    """Exact-match lookup; collation decides case sensitivity."""
    result = await session.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


async def list_users(session: AsyncSession) -> List[User]:
    result = await session.execute(select(User).order_by(User.created_at.desc()))
    return list(result.scalars().all())


async def create_user(
    session: AsyncSession,
    *,
    email: str,
    password_hash: str,
    first_name: str = "",
    last_name: str = "",
    name: str = "",
    role: Role = Role.GENERAL,
    nombre_completo: str | None = None,
    puesto: str | None = None,
) -> User:
    """
    Insert a ``User`` and flush it.

    A unique-constraint violation rolls the session back and is re-raised as
    ``DuplicateEmailError`` so callers can tell it apart from other storage
    faults.  Callers must not have other pending writes in ``session``.
    """
    user = User(
        email=email,
        password=password_hash,
        first_name=first_name,
        last_name=last_name,
        name=name,
        role=role,
        nombre_completo=nombre_completo,
        puesto=puesto,
    )
    session.add(user)
    try:
        await session.flush()
    except IntegrityError as exc:
        await session.rollback()
        raise DuplicateEmailError(email) from exc
    return user



async def get_company_data(session: AsyncSession) -> Optional[CompanyData]:
    result = await session.execute(
        select(CompanyData).order_by(CompanyData.created_at).limit(1)
    )
    return result.scalars().first()


async def get_or_create_company_data(
    session: AsyncSession,
    values: Dict[str, Any],
) -> Tuple[CompanyData, bool]:
    """Return ``(record, created)``; creates only when no record exists yet."""
    existing = await get_company_data(session)
    if existing is not None:
        return existing, False

    company = CompanyData(**values)
    session.add(company)
    await session.flush()
    logger.debug("Inserted company_data row %s", company.id)
    return company, True
