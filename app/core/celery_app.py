"""
Celery Configuration
"""
from celery import Celery
from app.core.config import settings
from celery.schedules import crontab

# Create Celery app
celery_app = Celery(
    "jarvi",
    broker=settings.CELERY_BROKER_URL,
    backend=settings.CELERY_RESULT_BACKEND,
)

# Import tasks to register them
from app import tasks  # noqa: F401

# Configure Celery
celery_app.conf.update(
    task_serializer='json',
    accept_content=['json'],
    result_serializer='json',
    timezone=settings.CELERY_TIMEZONE,
    enable_utc=True,
    
    # Run tasks in-process (tests, local development without a broker)
    task_always_eager=settings.CELERY_TASK_ALWAYS_EAGER,
    
    # Worker settings
    worker_prefetch_multiplier=1,
    task_acks_late=True,
    
    # Result settings
    result_expires=3600,
    
    # Task routing
    task_routes={
        'app.tasks.email.*': {'queue': 'email'},
    },
    
    # Task time limits
    task_soft_time_limit=60,
    task_time_limit=120,

    # Beat schedule
    beat_schedule={
        'cleanup-otp-requests-hourly': {
            'task': 'app.tasks.cleanup.cleanup_otp_requests',
            'schedule': crontab(minute=0, hour='*'),
        },
    },
)
