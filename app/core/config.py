"""
Application Configuration
All settings loaded from environment variables
"""
from pydantic import BaseModel
import os


class Settings(BaseModel):
    # ==================== Application ====================
    APP_NAME: str = os.getenv("APP_NAME", "Jarvi")
    SECRET_KEY: str = os.getenv("SECRET_KEY", "dev_secret_change_me")
    APP_URL: str = os.getenv("APP_URL", "http://localhost:5173")
    API_VERSION: str = os.getenv("API_VERSION", "v1")

    # ==================== Development ====================
    DEV_MODE: bool = os.getenv("DEV_MODE", "false").lower() in ("true", "1", "yes")

    # ==================== Database ====================
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./jarvi.db")

    # ==================== OTP ====================
    OTP_EXPIRY: int = int(os.getenv("OTP_EXPIRY", "3600"))  # password reset, 1 hour
    EMAIL_VERIFICATION_EXPIRY: int = int(os.getenv("EMAIL_VERIFICATION_EXPIRY", "86400"))  # 24 hours
    OTP_MAX_ATTEMPTS: int = int(os.getenv("OTP_MAX_ATTEMPTS", "5"))
    OTP_TOKEN_BYTES: int = int(os.getenv("OTP_TOKEN_BYTES", "32"))
    OTP_RETENTION_HOURS: int = int(os.getenv("OTP_RETENTION_HOURS", "24"))

    # ==================== Password Policy ====================
    PASSWORD_MIN_LENGTH: int = int(os.getenv("PASSWORD_MIN_LENGTH", "8"))
    PASSWORD_MIN_SCORE: int = int(os.getenv("PASSWORD_MIN_SCORE", "2"))

    # ==================== Email ====================
    RESEND_API_KEY: str = os.getenv("RESEND_API_KEY", "")
    RESEND_API_URL: str = os.getenv("RESEND_API_URL", "https://api.resend.com/emails")
    EMAIL_FROM: str = os.getenv("EMAIL_FROM", "Jarvi <hello@jarvi.life>")
    EMAIL_TIMEOUT: int = int(os.getenv("EMAIL_TIMEOUT", "15"))

    # ==================== Celery ====================
    CELERY_BROKER_URL: str = os.getenv("CELERY_BROKER_URL", "redis://redis:6379/0")
    CELERY_RESULT_BACKEND: str = os.getenv("CELERY_RESULT_BACKEND", "redis://redis:6379/0")
    CELERY_TIMEZONE: str = os.getenv("CELERY_TIMEZONE", "America/Sao_Paulo")
    CELERY_TASK_ALWAYS_EAGER: bool = os.getenv("CELERY_TASK_ALWAYS_EAGER", "false").lower() in ("true", "1", "yes")

    # ==================== Timezone ====================
    TIMEZONE: str = os.getenv("TIMEZONE", "America/Sao_Paulo")

    # ==================== Logging ====================
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "info")
    LOG_FILE: str = os.getenv("LOG_FILE", "logs/app.log")
    LOG_MAX_SIZE: int = int(os.getenv("LOG_MAX_SIZE", "10485760"))  # 10MB
    LOG_BACKUP_COUNT: int = int(os.getenv("LOG_BACKUP_COUNT", "5"))

    # ==================== CORS ====================
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "http://localhost:5173,https://jarvi.life")
    CORS_ALLOW_CREDENTIALS: bool = os.getenv("CORS_ALLOW_CREDENTIALS", "true").lower() == "true"

    # ==================== Session ====================
    COOKIE_EXPIRY: int = int(os.getenv("COOKIE_EXPIRY", "2592000"))  # 30 days
    SESSION_COOKIE_NAME: str = os.getenv("SESSION_COOKIE_NAME", "jarvi_session")

    # ==================== Features ====================
    FEATURE_OTP_ENABLED: bool = os.getenv("FEATURE_OTP_ENABLED", "true").lower() in ("true", "1", "yes")


settings = Settings()
