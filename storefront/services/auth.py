"""
Password hashing and bearer token helpers

Passwords are stored as bcrypt digests. Tokens are HS256 JWTs carrying the
user's id and email.
"""
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional

import bcrypt
import jwt

from storefront.config import settings
from storefront.exceptions import UnauthorizedError
from storefront.models.user import User


def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_digest: str) -> bool:
    """Check ``password`` against a stored digest; a malformed digest never matches"""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_digest.encode("utf-8"))
    except ValueError:
        return False


def create_access_token(user: User, expires_in: Optional[timedelta] = None) -> str:
    """Sign a token for ``user``"""
    if expires_in is None:
        expires_in = timedelta(minutes=settings.JWT_EXPIRES_MINUTES)
    payload = {
        "id": user.id,
        "email": user.email,
        "exp": datetime.now(timezone.utc) + expires_in,
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> Dict:
    """
    Verify a token and return its payload

    Raises:
        UnauthorizedError: If the token is expired, tampered with or malformed
    """
    try:
        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except jwt.ExpiredSignatureError as e:
        raise UnauthorizedError("Your token has expired! Please log in again.") from e
    except jwt.InvalidTokenError as e:
        raise UnauthorizedError("Invalid token. Please log in again.") from e

    if "id" not in payload:
        raise UnauthorizedError("Invalid token. Please log in again.")
    return payload
