"""
Authentication API endpoints
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from storefront.api.deps import get_current_user
from storefront.database import get_db
from storefront.models.user import User
from storefront.services.user_service import UserService
from storefront.schemas.user import (
    SignupRequest,
    LoginRequest,
    PasswordUpdate,
    UserResponse,
    UserData,
    UserEnvelope,
    AuthEnvelope,
    MessageEnvelope
)

router = APIRouter(prefix="/auth", tags=["auth"])


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    """Dependency to get UserService instance"""
    return UserService(db)


@router.post("/signup", response_model=AuthEnvelope, status_code=status.HTTP_201_CREATED, summary="Sign up")
def signup(
    signup_data: SignupRequest,
    service: UserService = Depends(get_user_service)
):
    """
    Register a new customer account and log it in

    - **password**: At least 8 characters with an uppercase letter, a lowercase letter and a number
    - **password_confirm**: Must match `password`
    """
    user, token = service.signup(signup_data)
    return AuthEnvelope(token=token, data=UserData(user=user))


@router.post("/login", response_model=AuthEnvelope, summary="Log in")
def login(
    credentials: LoginRequest,
    service: UserService = Depends(get_user_service)
):
    """
    Exchange email and password for a bearer token
    """
    user, token = service.login(credentials)
    return AuthEnvelope(token=token, data=UserData(user=user))


@router.post("/logout", response_model=MessageEnvelope, summary="Log out")
def logout(user: User = Depends(get_current_user)):
    """
    Tokens are stateless; clients drop theirs on logout
    """
    return MessageEnvelope(message="Logged out successfully")


@router.get("/me", response_model=UserEnvelope, summary="Get current user")
def me(user: User = Depends(get_current_user)):
    return UserEnvelope(data=UserData(user=UserResponse.model_validate(user)))


@router.patch("/update-password", response_model=AuthEnvelope, summary="Update password")
def update_password(
    password_data: PasswordUpdate,
    user: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service)
):
    """
    Change the password; the response carries a new token
    """
    updated, token = service.update_password(user, password_data)
    return AuthEnvelope(token=token, data=UserData(user=updated))
