"""
Auth API routes — signup, signin, signout, session.

Route prefix: /api/auth
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.ext.asyncio import AsyncSession

from auth.dependencies import db_session, get_session_token
from auth.errors import AccountError, InternalError
from auth.jwt import create_token, verify_token
from auth.service import MSG_INTERNAL, MSG_USER_CREATED, check_credentials, signup
from config.settings import config

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])

MSG_INVALID_SESSION = "Sesión inválida o expirada"


# ── Request schemas ────────────────────────────────────────────────────


class SignupRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # Presence is checked by the service so missing fields give a 400, not a 422.
    email: Optional[str] = None
    password: Optional[str] = None
    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")
    role: Optional[Any] = None


class CredentialsRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


def _error_response(exc: AccountError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


# ── Endpoints ──────────────────────────────────────────────────────────


@router.post("/signup", status_code=status.HTTP_201_CREATED)
async def signup_route(
    req: SignupRequest,
    session: AsyncSession = Depends(db_session),
) -> Any:
    """Register a new account."""
    try:
        user = await signup(
            session,
            email=req.email,
            password=req.password,
            first_name=req.first_name,
            last_name=req.last_name,
            role=req.role,
        )
        await session.commit()
    except AccountError as exc:
        await session.rollback()
        return _error_response(exc)
    except Exception:
        logger.exception("Error en signup (commit)")
        await session.rollback()
        return _error_response(InternalError(MSG_INTERNAL))

    return {"user": user, "message": MSG_USER_CREATED}


@router.post("/signin")
async def signin(
    req: CredentialsRequest,
    session: AsyncSession = Depends(db_session),
) -> Any:
    """Check credentials and start a session (cookie + token in the body)."""
    try:
        user = await check_credentials(session, email=req.email, password=req.password)
    except AccountError as exc:
        return _error_response(exc)

    token = create_token(user)
    logger.info("Login: %s (%s)", user["email"], user["id"])

    response = JSONResponse(content={"user": user, "token": token})
    response.set_cookie(
        config.session_cookie_name,
        token,
        max_age=config.session_expiry_seconds,
        httponly=True,
        samesite="lax",
        secure=not config.debug,
    )
    return response


@router.post("/signout")
async def signout() -> Any:
    response = JSONResponse(content={"success": True})
    response.delete_cookie(config.session_cookie_name)
    return response


@router.get("/session")
async def current_session(request: Request) -> Any:
    """Claims of the caller's session token."""
    payload = verify_token(get_session_token(request))
    if payload is None:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"error": MSG_INVALID_SESSION},
        )
    user: Dict[str, Any] = {k: payload.get(k) for k in ("email", "role", "name", "title")}
    user["id"] = payload["sub"]
    return {"user": user, "expires": payload.get("exp")}
