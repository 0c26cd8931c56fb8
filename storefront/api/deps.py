"""
Request dependencies: authenticated user and admin guard
"""
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from storefront.database import get_db
from storefront.exceptions import ForbiddenError, UnauthorizedError
from storefront.models.user import User
from storefront.repositories.user_repository import UserRepository
from storefront.services.auth import decode_access_token

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db)
) -> User:
    """Resolve the user from ``Authorization: Bearer <token>``"""
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError("You are not logged in. Please log in to get access.")

    payload = decode_access_token(credentials.credentials)

    try:
        user_id = int(payload["id"])
    except (TypeError, ValueError):
        raise UnauthorizedError("Invalid token. Please log in again.")

    user = UserRepository(db).get_by_id(user_id)
    if not user:
        raise UnauthorizedError("The user belonging to this token no longer exists.")
    return user


def require_admin(user: User = Depends(get_current_user)) -> User:
    """Allow only administrators through"""
    if not user.is_admin:
        raise ForbiddenError("You do not have permission to perform this action")
    return user
