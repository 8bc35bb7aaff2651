"""
Seed the database with the default accounts and company record.

Usage:
  python -m database.seed

Safe to run repeatedly: existing accounts (matched by email) and an existing
company record are left untouched.  Exits with status 1 on any failure.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import Any, Dict, List

from auth.password import hash_password
from config.settings import config
from database.helpers import (
    DuplicateEmailError,
    create_user,
    get_or_create_company_data,
    get_user_by_email,
)
from database.models import Role
from database.session import Database

logger = logging.getLogger(__name__)

DEFAULT_USERS: List[Dict[str, Any]] = [
    {
        "email": "directores@dynamicfin.mx",
        "password": "PrivXejc#6",
        "first_name": "Director",
        "last_name": "General",
        "name": "Director General",
        "role": Role.ADMINISTRADOR,
    },
    {
        "email": "john@doe.com",
        "password": "johndoe123",
        "first_name": "John",
        "last_name": "Doe",
        "name": "John Doe",
        "role": Role.ADMINISTRADOR,
    },
    {
        "email": "ventas@dynamicfin.mx",
        "password": "ventas123",
        "first_name": "Usuario",
        "last_name": "Ventas",
        "name": "Usuario Ventas",
        "role": Role.VENTAS,
    },
    {
        "email": "general@dynamicfin.mx",
        "password": "general123",
        "first_name": "Usuario",
        "last_name": "General",
        "name": "Usuario General",
        "role": Role.GENERAL,
    },
]

DEFAULT_COMPANY: Dict[str, str] = {
    "nombre_empresa": "Dynamic Financial Solutions",
    "razon_social": "Dynamic Financial Solutions S.A. de C.V.",
    "rfc": "DFS230915ABC",
    "calle": "Av. Insurgentes Sur",
    "numero": "1234",
    "colonia": "Del Valle",
    "delegacion": "Benito Juárez",
    "codigo_postal": "03100",
    "ciudad": "Ciudad de México",
    "estado": "CDMX",
}


async def seed_users(db: Database) -> int:
    """Create every missing default account; return how many were created."""
    created = 0
    for data in DEFAULT_USERS:
        # One transaction per account so a lost race only skips that account.
        async with db.session() as session:
            if await get_user_by_email(session, data["email"]) is not None:
                logger.info("Usuario ya existe: %s", data["email"])
                continue
            fields = {k: v for k, v in data.items() if k != "password"}
            try:
                user = await create_user(
                    session,
                    password_hash=hash_password(data["password"]),
                    **fields,
                )
            except DuplicateEmailError:
                logger.info("Usuario ya existe: %s", data["email"])
                continue
            logger.info("Usuario creado: %s (%s)", user.email, user.role.value)
            created += 1
    return created


async def seed_company(db: Database) -> bool:
    """Create the company record if none exists; return whether it was created."""
    async with db.session() as session:
        company, created = await get_or_create_company_data(session, DEFAULT_COMPANY)
        if created:
            logger.info("Datos de empresa creados: %s", company.nombre_empresa)
        else:
            logger.info("Datos de empresa ya existen")
    return created


async def seed(db: Database) -> Dict[str, Any]:
    logger.info("Iniciando seed de la base de datos...")
    await db.create_all()
    users_created = await seed_users(db)
    company_created = await seed_company(db)
    logger.info("Seed completado exitosamente")
    return {"users_created": users_created, "company_created": company_created}


async def run(database_url: str | None = None) -> int:
    """Seed against ``database_url`` (default: configured URL); return the exit code."""
    if database_url:
        db = Database(database_url)
    else:
        db = Database.from_settings(config)
    try:
        await seed(db)
    except Exception:
        logger.exception("Error durante el seed")
        return 1
    finally:
        await db.dispose()
    return 0


def main() -> None:
    logging.basicConfig(
        level=logging.DEBUG if config.debug else logging.INFO,
        format="%(asctime)s  %(levelname)-8s  %(name)s — %(message)s",
        stream=sys.stdout,
    )
    sys.exit(asyncio.run(run()))


if __name__ == "__main__":
    main()
