"""
Celery Tasks
"""
from .email import send_verification_email, send_password_reset_email
from .cleanup import cleanup_otp_requests

__all__ = [
    "send_verification_email",
    "send_password_reset_email",
    "cleanup_otp_requests",
]
