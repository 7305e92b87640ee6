"""
Cleanup tasks for stale OTP requests
"""
import logging
from celery import shared_task
from datetime import datetime, timedelta
from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError
from app.core.config import settings
from app.core.database import SessionLocal
from app.models import OtpRequest

logger = logging.getLogger("jarvi.tasks")


@shared_task(name="app.tasks.cleanup.cleanup_otp_requests")
def cleanup_otp_requests():
    """
    Delete OTP requests that are consumed or expired for longer than OTP_RETENTION_HOURS
    """
    db = SessionLocal()
    try:
        threshold = datetime.utcnow() - timedelta(hours=settings.OTP_RETENTION_HOURS)
        stale = db.query(OtpRequest).filter(
            or_(
                OtpRequest.expires_at < threshold,
                (OtpRequest.consumed == True) & (OtpRequest.created_at < threshold),
            )
        ).all()
        
        count = len(stale)
        for otp_request in stale:
            db.delete(otp_request)
        
        db.commit()
        logger.info(f"[CLEANUP] Deleted {count} stale OTP requests")
        return {"success": True, "deleted_count": count}
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"[CLEANUP] Error deleting OTP requests: {e}")
        return {"success": False, "error": str(e)}
    finally:
        db.close()
