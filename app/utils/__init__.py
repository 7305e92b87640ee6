"""
Utility Functions
"""
from .otp import derive_otp, verify_otp, generate_otp_token, get_otp_expiry, is_otp_expired
from .password_validator import validate_password_strength

__all__ = [
    "derive_otp",
    "verify_otp",
    "generate_otp_token",
    "get_otp_expiry",
    "is_otp_expired",
    "validate_password_strength",
]
