"""
User profile and authentication schemas
"""

from typing import Literal, Optional
from pydantic import EmailStr, Field

from app.schemas.common import CamelModel, StoredRecord, UpdateModel

Role = Literal["user", "admin"]

class UserProfile(StoredRecord):
    email: str
    name: str
    category: str = ""
    role: Role = "user"

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"

class UserUpdate(UpdateModel):
    name: Optional[str] = Field(None, min_length=1)
    category: Optional[str] = None
    role: Optional[Role] = None

class SignupRequest(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=6)
    name: str = ""
    category: str = ""
    is_admin: bool = False

class SigninRequest(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=1)
    is_admin: bool = False
    login_type: Optional[Literal["user", "admin"]] = None

    @property
    def wants_admin(self) -> bool:
        return self.is_admin or self.login_type == "admin"
