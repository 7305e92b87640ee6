"""
OTP derivation and verification utilities

The code is never stored: only the token is persisted and sent in links,
and the 6-digit code is derived from it whenever it has to be mailed or
checked. Security depends on the token being random and on the caller
limiting verification attempts.
"""
import hashlib
import hmac
import re
import secrets
from datetime import datetime, timedelta
from typing import Optional, Union
from app.core.config import settings

OTP_DIGITS = 6
OTP_MODULUS = 10 ** OTP_DIGITS

_CODE_RE = re.compile(r"[0-9]{6}")


def _token_bytes(token: Union[str, bytes]) -> bytes:
    if isinstance(token, bytes):
        return token
    # surrogatepass keeps derivation total over every str
    return token.encode("utf-8", "surrogatepass")


def derive_otp(token: Union[str, bytes]) -> str:
    """
    Derive the numeric OTP for a token

    Takes the first 32 bits of SHA-256(token) and reduces them to 6 digits.

    Returns: 6-digit code (string, zero padded)
    """
    hash_hex = hashlib.sha256(_token_bytes(token)).hexdigest()
    n = int(hash_hex[:8], 16) % OTP_MODULUS
    return f"{n:0{OTP_DIGITS}d}"


def is_valid_code(candidate) -> bool:
    """Check that candidate is exactly 6 ASCII digits"""
    return isinstance(candidate, str) and _CODE_RE.fullmatch(candidate) is not None


def verify_otp(token: Union[str, bytes], candidate: str) -> bool:
    """
    Verify a user supplied code against a token

    Malformed candidates never match. The comparison is constant time.
    """
    if not is_valid_code(candidate):
        return False
    return hmac.compare_digest(derive_otp(token), candidate)


def generate_otp_token() -> str:
    """Generate a high-entropy URL-safe token"""
    return secrets.token_urlsafe(settings.OTP_TOKEN_BYTES)


def get_otp_expiry(seconds: Optional[int] = None) -> datetime:
    """Get expiry datetime for OTP"""
    if seconds is None:
        seconds = settings.OTP_EXPIRY
    return datetime.utcnow() + timedelta(seconds=seconds)


def is_otp_expired(expires_at: datetime) -> bool:
    """Check if OTP is expired"""
    return datetime.utcnow() > expires_at
