"""
Pydantic schemas for authentication endpoints.
"""
from typing import Optional
from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    """Request body for account registration."""
    email: str = Field(..., min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    name: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1, max_length=72)


class LoginRequest(BaseModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class EmailRequest(BaseModel):
    """Request body carrying only an email (resend verification, forgot password)."""
    email: str = Field(..., min_length=1, max_length=255)


class CodeRequest(BaseModel):
    """
    Identify an OTP request either by email + code or by the link token.
    The code is not length-checked here: a malformed code is a wrong code.
    """
    email: Optional[str] = None
    code: Optional[str] = None
    token: Optional[str] = None

    model_config = {
        "json_schema_extra": {
            "example": {"email": "maria@example.com", "code": "042017"}
        }
    }


class ResetPasswordRequest(CodeRequest):
    password: str = Field(..., min_length=1, max_length=72)
