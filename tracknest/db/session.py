# ============================================================================
# FILE: tracknest/db/session.py
# ============================================================================
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from tracknest.config import settings

def _connect_args(url: str) -> dict:
    # SQLite connections are shared across FastAPI's threadpool workers
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}

engine = create_engine(
    settings.DATABASE_URL,
    connect_args=_connect_args(settings.DATABASE_URL),
    pool_pre_ping=True,
)

SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)

@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """SQLite ignores ON DELETE CASCADE unless foreign keys are switched on per connection"""
    if type(dbapi_connection).__module__.startswith("sqlite3"):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

def get_db():
    """FastAPI dependency: one session per request"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
