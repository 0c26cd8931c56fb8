"""
User profile and administration endpoints
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from storefront.api.deps import get_current_user, require_admin
from storefront.database import get_db
from storefront.models.user import User
from storefront.services.user_service import UserService
from storefront.schemas.user import (
    ProfileUpdate,
    RoleUpdate,
    UserResponse,
    UserData,
    UserEnvelope,
    UserListData,
    UserListEnvelope
)

router = APIRouter(prefix="/users", tags=["users"])


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    """Dependency to get UserService instance"""
    return UserService(db)


@router.get("/profile", response_model=UserEnvelope, summary="Get my profile")
def get_profile(user: User = Depends(get_current_user)):
    return UserEnvelope(data=UserData(user=UserResponse.model_validate(user)))


@router.patch("/profile", response_model=UserEnvelope, summary="Update my profile")
def update_profile(
    profile_data: ProfileUpdate,
    user: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service)
):
    """
    Update first name, last name or email

    All fields are optional. Only provided fields will be updated.
    """
    return UserEnvelope(data=UserData(user=service.update_profile(user, profile_data)))


@router.get("/admin/users", response_model=UserListEnvelope, summary="List users")
def get_users(
    skip: int = Query(0, ge=0, description="Number of users to skip"),
    limit: int = Query(100, ge=1, le=1000, description="Maximum number of users to return"),
    admin: User = Depends(require_admin),
    service: UserService = Depends(get_user_service)
):
    """
    List all users (administrators only)
    """
    users = service.get_all_users(skip=skip, limit=limit)
    return UserListEnvelope(results=len(users), data=UserListData(users=users))


@router.get("/admin/users/{user_id}", response_model=UserEnvelope, summary="Get user by ID")
def get_user(
    user_id: int,
    admin: User = Depends(require_admin),
    service: UserService = Depends(get_user_service)
):
    return UserEnvelope(data=UserData(user=service.get_user_by_id(user_id)))


@router.patch("/admin/users/{user_id}/role", response_model=UserEnvelope, summary="Change user role")
def update_user_role(
    user_id: int,
    role_data: RoleUpdate,
    admin: User = Depends(require_admin),
    service: UserService = Depends(get_user_service)
):
    """
    Grant or revoke the admin role (administrators only)

    - **role**: `user` or `admin`
    """
    return UserEnvelope(data=UserData(user=service.update_user_role(user_id, role_data.role)))
