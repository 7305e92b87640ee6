"""
Email utilities for sending transactional messages
"""
import logging
from datetime import datetime
from urllib.parse import quote
import requests
from app.core.config import settings
from app.utils.datetime_utils import format_datetime_br

logger = logging.getLogger("jarvi.email")

_LAYOUT = """<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{title}</title>
</head>
<body style="font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, Arial, sans-serif; line-height: 1.6; color: #333; max-width: 600px; margin: 0 auto; padding: 20px;">
  <div style="background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); padding: 30px; border-radius: 10px 10px 0 0; text-align: center;">
    <h1 style="color: white; margin: 0; font-size: 28px;">Jarvi</h1>
  </div>
  <div style="background: #f9fafb; padding: 30px; border-radius: 0 0 10px 10px;">
    <h2 style="color: #1f2937; margin-top: 0;">Olá, {name}!</h2>
    <p style="color: #4b5563;">{intro}</p>
    <p style="font-size: 32px; font-weight: bold; letter-spacing: 6px; text-align: center; color: #1f2937;">{code}</p>
    <p style="color: #6b7280; font-size: 14px;">Ou, se preferir, abra este link no seu navegador:</p>
    <p style="color: #667eea; font-size: 14px; word-break: break-all;"><a href="{url}">{url}</a></p>
    <hr style="border: none; border-top: 1px solid #e5e7eb; margin: 30px 0;">
    <p style="color: #9ca3af; font-size: 12px; margin-bottom: 0;">Este código expira em {expires}. {footer}</p>
  </div>
</body>
</html>
"""


def build_verification_email(name: str, code: str, token: str, expires_at: datetime) -> tuple[str, str]:
    """
    Build the email verification message

    Returns: (subject, html)
    """
    url = f"{settings.APP_URL}/verify-email?token={quote(token, safe='')}"
    html = _LAYOUT.format(
        title="Verifique seu email",
        name=name,
        intro="Obrigado por criar sua conta no Jarvi. Para começar a usar o app, confirme seu email com o código abaixo:",
        code=code,
        url=url,
        expires=format_datetime_br(expires_at),
        footer="Se você não criou uma conta no Jarvi, ignore este email.",
    )
    return "Seu código de verificação Jarvi", html


def build_password_reset_email(name: str, code: str, token: str, expires_at: datetime) -> tuple[str, str]:
    """
    Build the password reset message

    Returns: (subject, html)
    """
    url = f"{settings.APP_URL}/reset-password?token={quote(token, safe='')}"
    html = _LAYOUT.format(
        title="Redefinir sua senha",
        name=name,
        intro="Recebemos uma solicitação para redefinir a senha da sua conta. Use o código abaixo para criar uma nova senha:",
        code=code,
        url=url,
        expires=format_datetime_br(expires_at),
        footer="Se você não solicitou a redefinição de senha, ignore este email.",
    )
    return "Redefinição de senha Jarvi", html


def send_email(to_email: str, subject: str, html: str) -> dict:
    """
    Send email via the Resend API

    Returns: {'success': bool, 'message_id': str} or {'success': False, 'error': str}
    """
    api_key = settings.RESEND_API_KEY
    if not api_key:
        logger.warning("Email API key not configured, skipping delivery")
        return {"success": False, "error": "Email API key not configured"}

    try:
        response = requests.post(
            settings.RESEND_API_URL,
            headers={"Authorization": f"Bearer {api_key}"},
            json={
                "from": settings.EMAIL_FROM,
                "to": [to_email],
                "subject": subject,
                "html": html,
            },
            timeout=settings.EMAIL_TIMEOUT,
        )
        response.raise_for_status()
        data = response.json()
        return {"success": True, "message_id": str(data.get("id", ""))}
    except requests.RequestException as e:
        logger.error(f"Failed to send email: {e}")
        return {"success": False, "error": str(e)}
