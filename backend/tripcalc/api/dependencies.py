"""
Shared route dependencies for authentication and authorization.
"""
import logging
from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session
from tripcalc.core.security import decode_access_token
from tripcalc.db.session import get_db
from tripcalc.models.user import User
from tripcalc.services.sharing_service import Principal, is_admin

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def to_principal(user: Optional[User]) -> Optional[Principal]:
    """Reduce a user record to the principal used by access checks."""
    if user is None:
        return None
    return Principal(id=user.id, is_admin=user.is_admin, is_premium=user.is_premium)


def _resolve_user(credentials: Optional[HTTPAuthorizationCredentials], db: Session) -> Optional[User]:
    if credentials is None:
        return None

    payload = decode_access_token(credentials.credentials)
    if not payload or payload.get("sub") is None:
        return None

    try:
        user_id = int(payload["sub"])
    except (TypeError, ValueError):
        return None

    user = db.query(User).filter(User.id == user_id).first()
    if not user or not user.is_active:
        return None
    return user


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db)
) -> User:
    """Require an authenticated, active user."""
    user = _resolve_user(credentials, db)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
            headers={"WWW-Authenticate": "Bearer"}
        )
    return user


def get_current_admin(current_user: User = Depends(get_current_user)) -> User:
    """Require an authenticated admin."""
    if not is_admin(to_principal(current_user)):
        logger.warning(f"User {current_user.id} denied admin access")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Forbidden: Admin access required"
        )
    return current_user
