"""
Password strength validation using zxcvbn
"""
from typing import Optional
from zxcvbn import zxcvbn
from app.core.config import settings

# zxcvbn refuses longer inputs; the extra characters only add strength
ZXCVBN_MAX_LENGTH = 72


def _user_inputs(values: Optional[list]) -> list[str]:
    """Filter out empty inputs and add the email local part and name words"""
    inputs = []
    for value in values or []:
        if not value or not value.strip():
            continue
        value = value.strip()
        inputs.append(value)
        if "@" in value:
            inputs.append(value.split("@", 1)[0])
        inputs.extend(part for part in value.split() if len(part) >= 3)
    return inputs


def validate_password_strength(password: str, user_inputs: Optional[list] = None, min_score: Optional[int] = None) -> dict:
    """
    Validate password strength

    user_inputs: values (email, name...) checked against the password
    min_score: minimum required zxcvbn score (0-4), defaults to PASSWORD_MIN_SCORE

    Returns: {'is_valid': bool, 'score': int, 'message': str, 'feedback': dict}
    """
    if min_score is None:
        min_score = settings.PASSWORD_MIN_SCORE

    if not password or len(password) < settings.PASSWORD_MIN_LENGTH:
        return {
            "is_valid": False,
            "score": 0,
            "message": f"A senha deve ter pelo menos {settings.PASSWORD_MIN_LENGTH} caracteres",
            "feedback": None,
        }

    result = zxcvbn(password[:ZXCVBN_MAX_LENGTH], user_inputs=_user_inputs(user_inputs))

    if result["score"] < min_score:
        return {
            "is_valid": False,
            "score": result["score"],
            "message": "A senha é muito fraca. Por favor, escolha uma senha mais forte.",
            "feedback": {
                "warning": result["feedback"]["warning"],
                "suggestions": result["feedback"]["suggestions"],
            },
        }

    return {"is_valid": True, "score": result["score"], "message": None, "feedback": None}
