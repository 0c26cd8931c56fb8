"""
Pydantic schemas for authentication and user requests and responses
"""
import re
from pydantic import BaseModel, Field, EmailStr, ConfigDict, field_validator, model_validator
from typing import List, Optional
from datetime import datetime

from storefront.models.enums import UserRole

PASSWORD_PATTERN = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d).{8,}$")
PASSWORD_MESSAGE = (
    "Password must be at least 8 characters and include at least one "
    "uppercase letter, one lowercase letter, and one number"
)
# bcrypt only looks at the first 72 bytes
PASSWORD_MAX_BYTES = 72


def check_password_strength(value: str) -> str:
    if not PASSWORD_PATTERN.match(value):
        raise ValueError(PASSWORD_MESSAGE)
    if len(value.encode("utf-8")) > PASSWORD_MAX_BYTES:
        raise ValueError(f"Password cannot be longer than {PASSWORD_MAX_BYTES} bytes")
    return value


class SignupRequest(BaseModel):
    """Schema for registering a new user"""
    first_name: str = Field(..., min_length=2, max_length=100)
    last_name: str = Field(..., min_length=2, max_length=100)
    email: EmailStr
    password: str
    password_confirm: str

    @field_validator("password")
    @classmethod
    def password_strength(cls, value: str) -> str:
        return check_password_strength(value)

    @model_validator(mode="after")
    def passwords_match(self):
        if self.password != self.password_confirm:
            raise ValueError("Passwords do not match")
        return self


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1, description="Password is required")


class PasswordUpdate(BaseModel):
    """Schema for changing the current user's password"""
    current_password: str = Field(..., min_length=1)
    new_password: str
    password_confirm: str

    @field_validator("new_password")
    @classmethod
    def password_strength(cls, value: str) -> str:
        return check_password_strength(value)

    @model_validator(mode="after")
    def passwords_match(self):
        if self.new_password != self.password_confirm:
            raise ValueError("Passwords do not match")
        return self


class ProfileUpdate(BaseModel):
    """Schema for updating a profile (all fields optional)"""
    first_name: Optional[str] = Field(None, min_length=2, max_length=100)
    last_name: Optional[str] = Field(None, min_length=2, max_length=100)
    email: Optional[EmailStr] = None


class RoleUpdate(BaseModel):
    role: UserRole


class UserResponse(BaseModel):
    """Public view of a user; the password digest never leaves the service"""
    id: int
    first_name: str
    last_name: str
    email: str
    role: UserRole
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class UserData(BaseModel):
    user: UserResponse


class UserEnvelope(BaseModel):
    status: str = "success"
    data: UserData


class AuthEnvelope(BaseModel):
    """``{"status": "success", "token": ..., "data": {"user": ...}}``"""
    status: str = "success"
    token: str
    data: UserData


class UserListData(BaseModel):
    users: List[UserResponse]


class UserListEnvelope(BaseModel):
    status: str = "success"
    results: int
    data: UserListData


class MessageEnvelope(BaseModel):
    status: str = "success"
    message: str
