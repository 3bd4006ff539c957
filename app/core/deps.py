# /app/core/deps.py

"""
FastAPI dependencies for the authenticated principal.

Authentication itself is delegated to the identity provider. Its gateway
verifies the session and forwards the user's id, email and role claim as
request headers; this module only reads them back into a `Principal`.
"""

from typing import Optional

from fastapi import Depends, HTTPException, Request, status

from . import config
from .app_logger import get_logger
from ..models.principal_model import Principal, Role

log = get_logger("core.deps")


def _parse_role(raw: Optional[str]) -> Optional[Role]:
    if not raw:
        return None
    try:
        return Role(raw.strip().lower())
    except ValueError:
        log.warning("Ignoring unknown role claim %r", raw)
        return None


def get_current_principal(request: Request) -> Principal:
    """
    Returns the signed-in principal. Email and role may be absent; only the
    user id is mandatory.
    """
    user_id = request.headers.get(config.PRINCIPAL_ID_HEADER)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    return Principal(
        id=user_id,
        email=request.headers.get(config.PRINCIPAL_EMAIL_HEADER) or None,
        role=_parse_role(request.headers.get(config.PRINCIPAL_ROLE_HEADER)),
    )


def require_roles(*roles: Role):
    """Builds a dependency that only lets the given roles through."""
    def checker(principal: Principal = Depends(get_current_principal)) -> Principal:
        if principal.role not in roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="You do not have access to this resource.",
            )
        return principal
    return checker
