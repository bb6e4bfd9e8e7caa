import os
import logging

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker, declarative_base

from config import DATABASE_URL, DB_POOL_SIZE, DB_MAX_OVERFLOW, DB_POOL_RECYCLE
from errors import StoreUnavailable

logger = logging.getLogger(__name__)

Base = declarative_base()


def _engine_args(url: str) -> dict:
    """Only use connect_args if we are using SQLite; pool settings otherwise."""
    engine_args = {}
    if url.startswith("sqlite"):
        engine_args["connect_args"] = {"check_same_thread": False}
    else:
        # Fixed-size pool for the networked servers
        engine_args.update({
            "pool_size": DB_POOL_SIZE,
            "max_overflow": DB_MAX_OVERFLOW,
            "pool_recycle": DB_POOL_RECYCLE,
            "pool_pre_ping": True,
        })
    return engine_args


class Database:
    """Owns the engine and session factory for one application instance."""

    def __init__(self, url: str = DATABASE_URL):
        self.url = url
        self.engine = create_engine(url, **_engine_args(url), echo=False)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    @property
    def dialect(self) -> str:
        return self.engine.dialect.name

    def init(self):
        """Create the SQLite directory if needed, create all tables, seed the catalog."""
        if self.dialect == "sqlite":
            path = make_url(self.url).database
            if path and path != ":memory:":
                os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)

        # Import all models so they register with Base.metadata
        from models.user import User
        from models.wellness_activity import WellnessActivity
        from services.catalog_service import seed_catalog

        Base.metadata.create_all(bind=self.engine)
        logger.info("Tables ready on %s database.", self.dialect)

        db = self.SessionLocal()
        try:
            inserted = seed_catalog(db)
            logger.info("Catalog seeded (%d new rows).", inserted)
        finally:
            db.close()

    def dispose(self):
        self.engine.dispose()
        logger.info("Database connections closed.")


def get_db(request: Request):
    """FastAPI dependency — yields a database session and closes it after use."""
    database = getattr(request.app.state, "database", None)
    if database is None or not request.app.state.db_ready:
        raise StoreUnavailable("Database not ready")

    db = database.SessionLocal()
    try:
        yield db
    finally:
        db.close()
