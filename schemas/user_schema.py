from pydantic import BaseModel, EmailStr, Field

class UserCreate(BaseModel):
    """Schema for user creation."""
    email: EmailStr
    password: str = Field(..., min_length=8)
    full_name: str | None = None

class UserInfo(BaseModel):
    """Schema for returning user information."""
    uid: str
    email: EmailStr
    full_name: str | None = None
    plan: str = Field("basic", examples=["premium"])
