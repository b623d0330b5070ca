import logging

from sqlmodel import SQLModel, Session, create_engine

from campeonato_backend.core.config import DATABASE_URL, SQL_ECHO

logger = logging.getLogger(__name__)

# --- Engine ---
# SQLite needs check_same_thread off because FastAPI serves sync routes from a threadpool.
connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}
engine = create_engine(DATABASE_URL, echo=SQL_ECHO, connect_args=connect_args)


# --- Initialize DB tables ---
def init_db(bind=None):
    """Create tables if they don't exist."""
    # Models must be imported so their tables are registered on the metadata
    from campeonato_backend import models  # noqa: F401

    SQLModel.metadata.create_all(bind or engine)
    logger.info("📂 Database tables ready.")


# --- Session for seeding/scripts ---
def get_sync_session():
    return Session(engine)


# --- Request-scoped session (used in routes) ---
def get_session():
    with Session(engine) as session:
        yield session
