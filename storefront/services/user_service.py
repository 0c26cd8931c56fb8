"""
User Service - Business Logic Layer

Signup, login and password changes hand back a fresh bearer token along
with the public view of the user.
"""
from typing import List, Tuple

import structlog
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storefront.exceptions import ConflictError, NotFoundError, UnauthorizedError
from storefront.models.enums import UserRole
from storefront.models.user import User
from storefront.repositories.user_repository import UserRepository
from storefront.schemas.user import (
    LoginRequest,
    PasswordUpdate,
    ProfileUpdate,
    SignupRequest,
    UserResponse
)
from storefront.services.auth import create_access_token, hash_password, verify_password

logger = structlog.get_logger(__name__)


class UserService:
    """Service layer for accounts and authentication"""

    def __init__(self, db: Session):
        self.db = db
        self.repository = UserRepository(db)

    def _ensure_email_free(self, email: str) -> None:
        if self.repository.get_by_email(email):
            raise ConflictError("Email already in use")

    def _commit_or_conflict(self, user: User, create: bool = False) -> User:
        """Persist ``user``; a unique-email race surfaces as a conflict"""
        try:
            if create:
                return self.repository.create(user)
            return self.repository.save(user)
        except IntegrityError as e:
            self.db.rollback()
            raise ConflictError("Email already in use") from e

    def signup(self, data: SignupRequest) -> Tuple[UserResponse, str]:
        """
        Register a new customer account

        Returns:
            The created user and a bearer token for it

        Raises:
            ConflictError: If the email is already registered
        """
        email = data.email.lower()
        self._ensure_email_free(email)

        user = self._commit_or_conflict(User(
            first_name=data.first_name,
            last_name=data.last_name,
            email=email,
            password_digest=hash_password(data.password),
            role=UserRole.USER.value
        ), create=True)

        logger.info("user.signed_up", user_id=user.id)
        return UserResponse.model_validate(user), create_access_token(user)

    def login(self, data: LoginRequest) -> Tuple[UserResponse, str]:
        """
        Exchange email and password for a bearer token

        Raises:
            UnauthorizedError: If the email is unknown or the password is wrong
        """
        user = self.repository.get_by_email(data.email.lower())
        if not user or not verify_password(data.password, user.password_digest):
            logger.info("user.login_failed")
            raise UnauthorizedError("Incorrect email or password")

        logger.info("user.logged_in", user_id=user.id)
        return UserResponse.model_validate(user), create_access_token(user)

    def update_password(self, user: User, data: PasswordUpdate) -> Tuple[UserResponse, str]:
        """Change the password after checking the current one; returns a new token"""
        if not verify_password(data.current_password, user.password_digest):
            raise UnauthorizedError("Your current password is incorrect")

        user.password_digest = hash_password(data.new_password)
        self.repository.save(user)

        logger.info("user.password_updated", user_id=user.id)
        return UserResponse.model_validate(user), create_access_token(user)

    def update_profile(self, user: User, data: ProfileUpdate) -> UserResponse:
        """Update name and email; only provided fields change"""
        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        if "email" in changes:
            changes["email"] = changes["email"].lower()
            if changes["email"] != user.email:
                self._ensure_email_free(changes["email"])

        for field, value in changes.items():
            setattr(user, field, value)
        self._commit_or_conflict(user)

        logger.info("user.profile_updated", user_id=user.id, fields=sorted(changes))
        return UserResponse.model_validate(user)

    # Administration

    def get_all_users(self, skip: int = 0, limit: int = 100) -> List[UserResponse]:
        return [UserResponse.model_validate(u) for u in self.repository.get_all(skip=skip, limit=limit)]

    def get_user_by_id(self, user_id: int) -> UserResponse:
        user = self.repository.get_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")
        return UserResponse.model_validate(user)

    def update_user_role(self, user_id: int, role: UserRole) -> UserResponse:
        user = self.repository.get_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")

        user.role = UserRole(role).value
        self.repository.save(user)

        logger.info("user.role_updated", user_id=user_id, role=user.role)
        return UserResponse.model_validate(user)
