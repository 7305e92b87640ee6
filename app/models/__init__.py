"""
Database Models
"""
from .user import User
from .otp import OtpRequest, PURPOSE_EMAIL_VERIFICATION, PURPOSE_PASSWORD_RESET

__all__ = [
    "User",
    "OtpRequest",
    "PURPOSE_EMAIL_VERIFICATION",
    "PURPOSE_PASSWORD_RESET",
]

# Export Base from database
from app.core.database import Base
