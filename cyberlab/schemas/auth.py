"""Authentication schemas."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, EmailStr, Field

from cyberlab.schemas.common import PAYLOAD_CONFIG, RecordDTO


class UserRole(str, Enum):
    """User role."""

    ADMIN = "admin"
    USER = "user"


class UserLogin(BaseModel):
    """Login request schema."""

    email: EmailStr
    password: str = Field(..., min_length=1)

    model_config = PAYLOAD_CONFIG


class UserRegister(BaseModel):
    """Registration request schema."""

    email: EmailStr
    password: str = Field(..., min_length=6)
    first_name: str = Field(..., min_length=1, alias="firstName")
    last_name: str = Field(..., min_length=1, alias="lastName")

    model_config = PAYLOAD_CONFIG


class UserRecord(RecordDTO):
    """Stored user, including the password hash."""

    email: str
    hashed_password: str
    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")
    role: UserRole = UserRole.USER


class UserDTO(BaseModel):
    """User response schema (never carries the password hash)."""

    id: str
    email: str
    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")
    role: UserRole
    created_at: datetime = Field(..., alias="createdAt")

    model_config = {"populate_by_name": True}


class AuthResponse(BaseModel):
    """Token plus the authenticated user."""

    token: str = Field(..., description="JWT access token")
    user: UserDTO
