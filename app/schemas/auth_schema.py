from datetime import datetime
from typing import Optional
from pydantic import BaseModel, EmailStr, Field


# Login payload
class AuthRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=6)


class SignupRequest(AuthRequest):
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class ProfileUpdate(BaseModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class ProfileResponse(BaseModel):
    id: int
    email: EmailStr
    first_name: Optional[str]
    last_name: Optional[str]
    created_at: Optional[datetime]

    class Config:
        from_attributes = True
