"""
Database Connection and Setup
"""
import logging
from sqlalchemy import create_engine, inspect, text
from sqlalchemy.orm import declarative_base, sessionmaker
from app.core.config import settings

logger = logging.getLogger("jarvi.database")

DATABASE_URL = settings.DATABASE_URL

engine_kwargs = {
    "pool_pre_ping": True,
    "echo": False,
}

# Only SQLite needs check_same_thread
if DATABASE_URL.startswith("sqlite"):
    engine_kwargs["connect_args"] = {"check_same_thread": False}
else:
    engine_kwargs["pool_size"] = 10
    engine_kwargs["max_overflow"] = 20

# Create engine
engine = create_engine(DATABASE_URL, **engine_kwargs)

# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for models
Base = declarative_base()

# Additive column migrations: (name, table, column, DDL type)
MIGRATIONS = [
    ("users_avatar", "users", "avatar", "VARCHAR(500)"),
    ("users_email_verified", "users", "email_verified", "BOOLEAN DEFAULT FALSE"),
    ("users_updated_at", "users", "updated_at", "TIMESTAMP"),
    ("otp_requests_consumed_at", "otp_requests", "consumed_at", "TIMESTAMP"),
]


def get_db():
    """Dependency for getting database session"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None):
    """Initialize database (create tables)"""
    # Models must be registered on Base before create_all
    import app.models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)


def column_exists(bind, table: str, column: str) -> bool:
    """Check the live schema for a column"""
    inspector = inspect(bind)
    if not inspector.has_table(table):
        return False
    return any(col["name"] == column for col in inspector.get_columns(table))


def run_migrations(bind=None, migrations=None) -> list[str]:
    """
    Apply additive column migrations that are not yet present.

    Each migration inspects the current schema first, so running this
    repeatedly is a no-op once everything is applied. Tables that do not
    exist yet are skipped; init_db creates them with every column.

    Returns: names of the migrations applied in this run
    """
    bind = bind or engine
    applied = []
    for name, table, column, ddl in (migrations if migrations is not None else MIGRATIONS):
        if not inspect(bind).has_table(table):
            continue
        if column_exists(bind, table, column):
            continue
        with bind.begin() as conn:
            conn.execute(text(f"ALTER TABLE {table} ADD COLUMN {column} {ddl}"))
        logger.info(f"[MIGRATION] Added {column} to {table}")
        applied.append(name)
    return applied
