"""
Tests for schema bootstrap and migrations
"""
from sqlalchemy import create_engine, inspect, text
from app.core.database import init_db, run_migrations, column_exists, MIGRATIONS


def make_engine(tmp_path):
    return create_engine(f"sqlite:///{tmp_path / 'migrations.db'}")


def test_init_db_creates_tables(tmp_path):
    """Test table creation"""
    engine = make_engine(tmp_path)
    init_db(bind=engine)
    tables = inspect(engine).get_table_names()
    assert "users" in tables
    assert "otp_requests" in tables


def test_fresh_schema_needs_no_migrations(tmp_path):
    """Test that a freshly created schema already has every column"""
    engine = make_engine(tmp_path)
    init_db(bind=engine)
    assert run_migrations(bind=engine) == []


def test_migrations_add_missing_columns(tmp_path):
    """Test additive migrations on an older schema"""
    engine = make_engine(tmp_path)
    with engine.begin() as conn:
        conn.execute(text(
            "CREATE TABLE users (id INTEGER PRIMARY KEY, email VARCHAR(255), name VARCHAR(255), password_hash VARCHAR(255))"
        ))

    applied = run_migrations(bind=engine)
    assert applied == ["users_avatar", "users_email_verified", "users_updated_at"]
    assert column_exists(engine, "users", "avatar")
    assert column_exists(engine, "users", "email_verified")

    # Idempotent
    assert run_migrations(bind=engine) == []


def test_migrations_skip_missing_tables(tmp_path):
    """Test that migrations for absent tables are skipped"""
    engine = make_engine(tmp_path)
    assert run_migrations(bind=engine) == []


def test_custom_migration_list(tmp_path):
    """Test running an explicit migration list"""
    engine = make_engine(tmp_path)
    init_db(bind=engine)
    migrations = [("users_nickname", "users", "nickname", "VARCHAR(50)")]
    assert run_migrations(bind=engine, migrations=migrations) == ["users_nickname"]
    assert run_migrations(bind=engine, migrations=migrations) == []


def test_column_exists():
    """Test column lookup on a missing table"""
    engine = create_engine("sqlite://")
    assert column_exists(engine, "users", "email") == False


def test_migration_names_unique():
    """Test migration names are unique"""
    names = [name for name, _, _, _ in MIGRATIONS]
    assert len(names) == len(set(names))
