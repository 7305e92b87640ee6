"""
DateTime utilities for handling timezone conversions
"""
from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo
from app.core.config import settings

# Local (Brazil) timezone
LOCAL_TZ = ZoneInfo(settings.TIMEZONE)


def to_local(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Convert any datetime to the local timezone
    """
    if dt is None:
        return None
    
    # If datetime is naive (no timezone), assume it's UTC
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=ZoneInfo('UTC'))
    
    return dt.astimezone(LOCAL_TZ)


def format_datetime_br(dt: Optional[datetime]) -> str:
    """
    Format datetime for Brazilian display
    """
    if dt is None:
        return ""
    
    # Format: DD/MM/YYYY HH:MM
    return to_local(dt).strftime("%d/%m/%Y %H:%M")
