"""
Main FastAPI Application
"""
from fastapi import FastAPI
from fastapi.middleware.gzip import GZipMiddleware
from starlette.middleware.sessions import SessionMiddleware
from fastapi.middleware.cors import CORSMiddleware
from app.core.config import settings
from app.core.logging_config import setup_logging
from app.core.database import init_db, run_migrations
from app.core.celery_app import celery_app  # noqa: F401
from app.routers import auth

logger = setup_logging()

app = FastAPI(title=settings.APP_NAME)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=[origin.strip() for origin in settings.CORS_ORIGINS.split(",") if origin.strip()] + [settings.APP_URL],
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Middleware
app.add_middleware(GZipMiddleware, minimum_size=1000)
app.add_middleware(SessionMiddleware,
                   secret_key=settings.SECRET_KEY,
                   session_cookie=settings.SESSION_COOKIE_NAME,
                   max_age=settings.COOKIE_EXPIRY,
                   https_only=not settings.DEV_MODE)

# Routers
app.include_router(auth.router)


# Startup event
@app.on_event("startup")
async def startup():
    """Create database tables and apply pending migrations"""
    init_db()
    applied = run_migrations()
    if applied:
        logger.info(f"[STARTUP] Applied migrations: {', '.join(applied)}")
    logger.info("[STARTUP] Database tables created/verified")


@app.get("/")
async def root():
    return {"message": f"{settings.APP_NAME} API", "version": settings.API_VERSION}


@app.get("/health")
async def health():
    return {"status": "healthy"}
