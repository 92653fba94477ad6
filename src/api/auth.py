"""Caller identity

Authentication happens upstream; the gateway forwards the verified user in
X-User-* headers. This module only reads them.
"""

from typing import Optional
from fastapi import Header, status
from config import ApplicationConfig
from libs.result import Error
from src.api.error import ClientError
from src.domain.invoice_record import OwnerIdentity


async def get_current_owner(
    x_user_id: Optional[str] = Header(default=None),
    x_user_name: Optional[str] = Header(default=None),
    x_user_email: Optional[str] = Header(default=None),
) -> OwnerIdentity:
    if x_user_id:
        return OwnerIdentity(
            id=x_user_id,
            name=x_user_name or "",
            email=x_user_email or "",
        )

    if ApplicationConfig.AUTH_DISABLED:
        return OwnerIdentity(
            id=ApplicationConfig.DEV_USER_ID,
            name=ApplicationConfig.DEV_USER_NAME,
            email=ApplicationConfig.DEV_USER_EMAIL,
        )

    raise ClientError(
        Error(
            code="UNAUTHORIZED",
            message="No token, authorization denied",
            reason="Missing X-User-Id header",
        ),
        status_code=status.HTTP_401_UNAUTHORIZED,
    )
