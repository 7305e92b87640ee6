"""
Tests for OTP utilities
"""
import hashlib
import re
from datetime import datetime, timedelta
from app.utils.otp import (
    derive_otp,
    verify_otp,
    is_valid_code,
    generate_otp_token,
    get_otp_expiry,
    is_otp_expired,
)

CODE_PATTERN = re.compile(r"^[0-9]{6}$")


def test_derive_otp_known_vector():
    """Test derivation against SHA-256("abc")"""
    # ba7816bf -> 3128432319 -> 432319
    assert hashlib.sha256(b"abc").hexdigest().startswith("ba7816bf")
    assert derive_otp("abc") == "432319"


def test_derive_otp_pads_with_zeros():
    """Test that small values are left padded"""
    # e3b0c442 -> 3820012610 -> 012610
    assert derive_otp("") == "012610"


def test_derive_otp_padding_found_by_search():
    """Test padding on a searched token with a reduced value below 100000"""
    token = next(
        f"token-{i}" for i in range(10000)
        if int(hashlib.sha256(f"token-{i}".encode()).hexdigest()[:8], 16) % 1_000_000 < 100_000
    )
    code = derive_otp(token)
    assert len(code) == 6
    assert code.startswith("0")


def test_derive_otp_matches_algorithm():
    """Test derivation against an independent computation"""
    for token in ["a", "b", "jarvi", "çãõ", "x" * 500]:
        digest = hashlib.sha256(token.encode("utf-8")).hexdigest()
        expected = str(int(digest[:8], 16) % 1_000_000).zfill(6)
        assert derive_otp(token) == expected


def test_derive_otp_is_deterministic():
    """Test that the same token always yields the same code"""
    token = generate_otp_token()
    assert derive_otp(token) == derive_otp(token)
    assert derive_otp(token) == derive_otp(token.encode("utf-8"))


def test_derive_otp_format():
    """Test that every code is 6 decimal digits"""
    for token in ["", " ", "abc", "\x00", "\ud800", "emoji 🚀", generate_otp_token()]:
        assert CODE_PATTERN.match(derive_otp(token))


def test_derive_otp_distribution():
    """Test that codes spread over the 6-digit space"""
    codes = {derive_otp(f"token-{i}") for i in range(1000)}
    # Expected collisions for 1000 draws over 10^6 values is about 0.5
    assert len(codes) >= 995
    assert derive_otp("a") != derive_otp("b")


def test_verify_otp_accepts_derived_code():
    """Test verification of the derived code"""
    for token in ["", "abc", generate_otp_token()]:
        assert verify_otp(token, derive_otp(token)) is True


def test_verify_otp_rejects_other_codes():
    """Test that a different valid code is rejected"""
    token = "abc"
    assert verify_otp(token, "432320") is False
    assert verify_otp(token, "000000") is False
    assert verify_otp("abd", "432319") == (derive_otp("abd") == "432319")


def test_verify_otp_rejects_malformed():
    """Test malformed candidates"""
    token = "abc"
    for candidate in ["12345", "1234567", "12a456", "", " 432319", "432319\n", "４３２３１９", None, 432319]:
        assert verify_otp(token, candidate) is False


def test_is_valid_code():
    """Test code format check"""
    assert is_valid_code("000000") is True
    assert is_valid_code("999999") is True
    assert is_valid_code("99999") is False
    assert is_valid_code("٠١٢٣٤٥") is False


def test_generate_otp_token():
    """Test token generation"""
    token = generate_otp_token()
    assert len(token) >= 40
    assert token != generate_otp_token()


def test_get_otp_expiry():
    """Test OTP expiry calculation"""
    expiry = get_otp_expiry()
    assert expiry > datetime.utcnow()
    # Should be about 1 hour (3600 seconds) in future
    diff = (expiry - datetime.utcnow()).total_seconds()
    assert 3590 < diff < 3610


def test_get_otp_expiry_custom():
    """Test OTP expiry with explicit seconds"""
    diff = (get_otp_expiry(60) - datetime.utcnow()).total_seconds()
    assert 50 < diff < 70


def test_is_otp_expired():
    """Test OTP expiry check"""
    past = datetime.utcnow() - timedelta(seconds=10)
    future = datetime.utcnow() + timedelta(seconds=10)

    assert is_otp_expired(past) == True
    assert is_otp_expired(future) == False
