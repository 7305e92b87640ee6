"""
Celery tasks for transactional email

Tasks receive the token and derive the code themselves, so codes never
travel through the broker.
"""
from datetime import datetime
from celery import shared_task
from app.utils.email import build_verification_email, build_password_reset_email, send_email
from app.utils.otp import derive_otp


@shared_task(name="app.tasks.email.send_verification_email")
def send_verification_email(email: str, name: str, token: str, expires_at: str):
    """
    Send the email verification code
    """
    subject, html = build_verification_email(name, derive_otp(token), token, datetime.fromisoformat(expires_at))
    return send_email(email, subject, html)


@shared_task(name="app.tasks.email.send_password_reset_email")
def send_password_reset_email(email: str, name: str, token: str, expires_at: str):
    """
    Send the password reset code
    """
    subject, html = build_password_reset_email(name, derive_otp(token), token, datetime.fromisoformat(expires_at))
    return send_email(email, subject, html)
