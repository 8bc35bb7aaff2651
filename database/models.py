"""
SQLAlchemy ORM models for accounts and company data.
"""

from __future__ import annotations

import enum
import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Enum, String, Uuid
from sqlalchemy.orm import DeclarativeBase


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class Role(str, enum.Enum):
    ADMINISTRADOR = "ADMINISTRADOR"
    VENTAS = "VENTAS"
    GENERAL = "GENERAL"


class User(Base):
    __tablename__ = "users"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    email = Column(String(255), unique=True, nullable=False)
    password = Column(String(255), nullable=True)
    first_name = Column("firstName", String(128), nullable=False, default="")
    last_name = Column("lastName", String(128), nullable=False, default="")
    name = Column(String(255), nullable=False, default="")
    nombre_completo = Column("nombreCompleto", String(255), nullable=True)
    puesto = Column(String(128), nullable=True)
    role = Column(Enum(Role, name="user_role"), nullable=False, default=Role.GENERAL)
    created_at = Column("createdAt", DateTime(timezone=True), default=_utcnow)
    updated_at = Column("updatedAt", DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)

    def to_public_dict(self) -> dict:
        """Every column except the password hash, with camelCase keys."""
        return {
            "id": str(self.id),
            "email": self.email,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "name": self.name,
            "nombreCompleto": self.nombre_completo,
            "puesto": self.puesto,
            "role": self.role.value if self.role else None,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }

    def to_summary_dict(self) -> dict:
        """Reduced projection used by credential checks and account listings."""
        return {
            "id": str(self.id),
            "email": self.email,
            "role": self.role.value if self.role else None,
            "name": self.nombre_completo or self.name,
            "title": self.puesto,
        }


class CompanyData(Base):
    # No uniqueness constraint: one row per deployment is a convention kept by the seed.
    __tablename__ = "company_data"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    nombre_empresa = Column("nombreEmpresa", String(255), nullable=False)
    razon_social = Column("razonSocial", String(255), nullable=False)
    rfc = Column(String(13), nullable=False)
    calle = Column(String(255))
    numero = Column(String(32))
    colonia = Column(String(128))
    delegacion = Column(String(128))
    codigo_postal = Column("codigoPostal", String(10))
    ciudad = Column(String(128))
    estado = Column(String(64))
    created_at = Column("createdAt", DateTime(timezone=True), default=_utcnow)
    updated_at = Column("updatedAt", DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)
