"""
Diagnostic account routes (list accounts, test credentials).

Route prefix: /api/diagnostic-accounts

Not meant for production traffic: failures echo the underlying error in a
``details`` field unless ``config.diagnostic_error_details`` is disabled.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from auth.dependencies import db_session
from auth.errors import AccountError
from auth.routes import CredentialsRequest
from auth.service import check_credentials, list_accounts
from config.settings import config

logger = logging.getLogger(__name__)

router = APIRouter(tags=["diagnostics"])


def _failure(exc: AccountError) -> JSONResponse:
    content: dict[str, Any] = {"success": False, "error": exc.message}
    if exc.status_code >= 500:
        content["details"] = (exc.details or "Unknown error") if config.diagnostic_error_details else None
    return JSONResponse(status_code=exc.status_code, content=content)


@router.get("")
async def list_diagnostic_accounts(
    session: AsyncSession = Depends(db_session),
) -> Any:
    try:
        users = await list_accounts(session)
    except AccountError as exc:
        return _failure(exc)
    return {"success": True, "userCount": len(users), "users": users}


@router.post("")
async def test_credentials(
    req: CredentialsRequest,
    session: AsyncSession = Depends(db_session),
) -> Any:
    try:
        user = await check_credentials(session, email=req.email, password=req.password)
    except AccountError as exc:
        return _failure(exc)
    return {"success": True, "user": user}
