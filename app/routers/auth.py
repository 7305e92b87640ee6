"""
Authentication endpoints
"""
import logging
from datetime import datetime
from fastapi import APIRouter, Request, HTTPException, Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from app.core.config import settings
from app.core.database import get_db
from app.core.security import hash_password, verify_password
from app.models import User, OtpRequest, PURPOSE_EMAIL_VERIFICATION, PURPOSE_PASSWORD_RESET
from app.schemas.auth import RegisterRequest, LoginRequest, EmailRequest, CodeRequest, ResetPasswordRequest
from app.tasks.email import send_verification_email, send_password_reset_email
from app.utils.otp import generate_otp_token, get_otp_expiry, is_otp_expired, verify_otp
from app.utils.password_validator import validate_password_strength

router = APIRouter(prefix="/api/auth", tags=["auth"])
logger = logging.getLogger("jarvi.auth")

# One message for wrong, expired, consumed and exhausted codes
INVALID_CODE_MESSAGE = "Código inválido ou expirado"
FORGOT_PASSWORD_MESSAGE = "Se o email existir, você receberá um código para redefinir sua senha."
RESEND_MESSAGE = "Se o email existir, você receberá um novo código de verificação."


def normalize_email(email: str) -> str:
    return email.strip().lower()


def user_payload(user: User) -> dict:
    return {
        "id": user.id,
        "email": user.email,
        "name": user.name,
        "avatar": user.avatar,
        "email_verified": user.email_verified,
        "is_active": user.is_active,
    }


def ensure_otp_enabled():
    if not settings.FEATURE_OTP_ENABLED:
        raise HTTPException(status_code=403, detail="OTP is disabled")


def issue_otp_request(db: Session, user: User, purpose: str, expiry_seconds: int) -> OtpRequest:
    """
    Create a new OTP request for user, superseding pending ones of the same purpose
    """
    db.query(OtpRequest).filter(
        OtpRequest.user_id == user.id,
        OtpRequest.purpose == purpose,
        OtpRequest.consumed == False
    ).update({"consumed": True}, synchronize_session=False)

    otp_request = OtpRequest(
        user_id=user.id,
        email=user.email,
        purpose=purpose,
        token=generate_otp_token(),
        expires_at=get_otp_expiry(expiry_seconds),
    )
    db.add(otp_request)
    db.commit()
    db.refresh(otp_request)
    return otp_request


def check_otp_request(db: Session, body: CodeRequest, purpose: str) -> OtpRequest:
    """
    Find and verify the OTP request addressed by body (token link or email + code).
    Wrong codes count as attempts. Raises HTTPException(400) with a generic message.
    """
    if body.token:
        otp_request = db.query(OtpRequest).filter(
            OtpRequest.token == body.token,
            OtpRequest.purpose == purpose
        ).first()
        if not otp_request or otp_request.consumed or is_otp_expired(otp_request.expires_at):
            raise HTTPException(status_code=400, detail=INVALID_CODE_MESSAGE)
        return otp_request

    if not body.email or body.code is None:
        raise HTTPException(status_code=400, detail="Informe o email e o código")

    # Get latest pending request
    otp_request = db.query(OtpRequest).filter(
        OtpRequest.email == normalize_email(body.email),
        OtpRequest.purpose == purpose,
        OtpRequest.consumed == False
    ).order_by(OtpRequest.created_at.desc(), OtpRequest.id.desc()).first()

    if not otp_request or is_otp_expired(otp_request.expires_at):
        raise HTTPException(status_code=400, detail=INVALID_CODE_MESSAGE)

    if not reserve_otp_attempt(db, otp_request):
        raise HTTPException(status_code=400, detail=INVALID_CODE_MESSAGE)

    if not verify_otp(otp_request.token, body.code):
        logger.info(f"Wrong {purpose} code for request {otp_request.id}")
        raise HTTPException(status_code=400, detail=INVALID_CODE_MESSAGE)

    return otp_request


def reserve_otp_attempt(db: Session, otp_request: OtpRequest) -> bool:
    """
    Atomically take one attempt from the request before a code is checked.
    Every evaluated guess counts, right or wrong.

    Returns: False when the attempts are exhausted or the request was consumed
    """
    reserved = db.query(OtpRequest).filter(
        OtpRequest.id == otp_request.id,
        OtpRequest.consumed == False,
        OtpRequest.attempts < settings.OTP_MAX_ATTEMPTS
    ).update({OtpRequest.attempts: OtpRequest.attempts + 1}, synchronize_session=False)
    db.commit()
    db.refresh(otp_request)
    return reserved == 1


def consume_otp_request(otp_request: OtpRequest):
    otp_request.consumed = True
    otp_request.consumed_at = datetime.utcnow()


def queue_email(task, user: User, otp_request: OtpRequest):
    """Queue delivery; broker failures are logged and never fail the request"""
    try:
        task.delay(user.email, user.name, otp_request.token, otp_request.expires_at.isoformat())
    except Exception as e:
        logger.error(f"Failed to queue {task.name} for user {user.id}: {e}")


@router.post("/register", status_code=201)
def register(body: RegisterRequest, db: Session = Depends(get_db)):
    """
    Create an account and send the email verification code
    """
    email = normalize_email(body.email)
    if db.query(User).filter(User.email == email).first():
        raise HTTPException(status_code=400, detail="Já existe uma conta com este email")

    strength = validate_password_strength(body.password, [email, body.name])
    if not strength["is_valid"]:
        raise HTTPException(status_code=400, detail={
            "message": strength["message"],
            "score": strength["score"],
            "feedback": strength["feedback"],
        })

    user = User(email=email, name=body.name.strip(), password_hash=hash_password(body.password))
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=400, detail="Já existe uma conta com este email")
    db.refresh(user)

    otp_request = issue_otp_request(db, user, PURPOSE_EMAIL_VERIFICATION, settings.EMAIL_VERIFICATION_EXPIRY)
    queue_email(send_verification_email, user, otp_request)
    logger.info(f"Registered user {user.id}")

    # No session until the email is verified
    return {
        "success": True,
        "message": "Conta criada! Enviamos um código de verificação para seu email.",
        "user": user_payload(user),
    }


@router.post("/login")
def login(request: Request, body: LoginRequest, db: Session = Depends(get_db)):
    """
    Email and password login. Requires a verified email.
    """
    user = db.query(User).filter(User.email == normalize_email(body.email)).first()
    if not user or not verify_password(body.password, user.password_hash):
        raise HTTPException(status_code=401, detail="Email ou senha incorretos")
    if not user.is_active:
        raise HTTPException(status_code=403, detail="Conta desativada")
    if not user.email_verified:
        raise HTTPException(status_code=403, detail={
            "error": "Email não verificado",
            "pendingVerification": True,
            "email": user.email,
            "message": "Por favor, verifique seu email antes de fazer login.",
        })

    request.session["user_id"] = user.id
    request.session["email"] = user.email
    user.last_login = datetime.utcnow()
    db.commit()
    return {"success": True, "user": user_payload(user)}


@router.post("/logout")
async def logout(request: Request):
    """
    Logout current user
    """
    request.session.clear()
    return {"success": True}


@router.get("/me")
async def get_current_user(request: Request, db: Session = Depends(get_db)):
    """
    Get current logged-in user
    """
    user_id = request.session.get("user_id")
    if not user_id:
        raise HTTPException(status_code=401, detail="Not authenticated")

    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise HTTPException(status_code=404, detail="User not found")

    return user_payload(user)


@router.post("/verify-email")
async def verify_email(body: CodeRequest, db: Session = Depends(get_db)):
    """
    Confirm an email with the mailed code or the link token
    """
    ensure_otp_enabled()
    otp_request = check_otp_request(db, body, PURPOSE_EMAIL_VERIFICATION)

    user = db.query(User).filter(User.id == otp_request.user_id).first()
    if not user:
        raise HTTPException(status_code=400, detail=INVALID_CODE_MESSAGE)

    consume_otp_request(otp_request)
    user.email_verified = True
    db.commit()
    logger.info(f"Email verified for user {user.id}")

    return {"success": True, "message": "Email verificado com sucesso!"}


@router.post("/resend-verification")
async def resend_verification(body: EmailRequest, db: Session = Depends(get_db)):
    """
    Issue a fresh verification code
    """
    ensure_otp_enabled()
    user = db.query(User).filter(User.email == normalize_email(body.email)).first()
    if not user:
        return {"success": True, "message": RESEND_MESSAGE}
    if user.email_verified:
        raise HTTPException(status_code=400, detail="Este email já foi verificado")

    otp_request = issue_otp_request(db, user, PURPOSE_EMAIL_VERIFICATION, settings.EMAIL_VERIFICATION_EXPIRY)
    queue_email(send_verification_email, user, otp_request)

    return {"success": True, "message": RESEND_MESSAGE}


@router.post("/forgot-password")
async def forgot_password(body: EmailRequest, db: Session = Depends(get_db)):
    """
    Send a password reset code. The answer is the same whether or not the account exists.
    """
    ensure_otp_enabled()
    user = db.query(User).filter(User.email == normalize_email(body.email)).first()

    # Accounts without a password (social login) cannot reset it
    if user and user.password_hash and user.is_active:
        otp_request = issue_otp_request(db, user, PURPOSE_PASSWORD_RESET, settings.OTP_EXPIRY)
        queue_email(send_password_reset_email, user, otp_request)
        logger.info(f"Password reset requested for user {user.id}")

    return {"success": True, "message": FORGOT_PASSWORD_MESSAGE}


@router.post("/verify-reset-code")
async def verify_reset_code(body: CodeRequest, db: Session = Depends(get_db)):
    """
    Check a password reset code without consuming it
    """
    ensure_otp_enabled()
    check_otp_request(db, body, PURPOSE_PASSWORD_RESET)
    return {"success": True, "valid": True}


@router.post("/reset-password")
def reset_password(body: ResetPasswordRequest, db: Session = Depends(get_db)):
    """
    Set a new password using the reset code or the link token
    """
    ensure_otp_enabled()
    otp_request = check_otp_request(db, body, PURPOSE_PASSWORD_RESET)

    user = db.query(User).filter(User.id == otp_request.user_id).first()
    if not user:
        raise HTTPException(status_code=400, detail=INVALID_CODE_MESSAGE)

    strength = validate_password_strength(body.password, [user.email, user.name])
    if not strength["is_valid"]:
        raise HTTPException(status_code=400, detail={
            "message": strength["message"],
            "score": strength["score"],
            "feedback": strength["feedback"],
        })

    consume_otp_request(otp_request)
    user.password_hash = hash_password(body.password)
    db.commit()
    logger.info(f"Password reset for user {user.id}")

    return {"success": True, "message": "Senha redefinida com sucesso! Você já pode fazer login."}
