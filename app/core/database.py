import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import settings

logger = logging.getLogger(__name__)

Base = declarative_base()


def _safe_url(url: str) -> str:
    # Hide password in logs
    if settings.db_password and settings.db_password in url:
        return url.replace(settings.db_password, "****")
    return url


# -----------------------
# SQLAlchemy engine
# -----------------------
def build_engine(url: str) -> Engine:
    """Create an engine for ``url``.

    SQLite URLs (used by tests and local runs) get a single shared connection so
    that ``sqlite://`` in-memory databases survive across sessions.
    """
    logger.info(f"Connecting to database: {_safe_url(url)}")

    if url.startswith("sqlite"):
        return create_engine(
            url,
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    return create_engine(
        url,
        echo=settings.debug and not settings.production,
        pool_size=5,
        max_overflow=10,
        pool_timeout=30,
        pool_recycle=1800,
        pool_pre_ping=True,
    )


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(
        autocommit=False, autoflush=False, expire_on_commit=False, bind=engine
    )


def create_tables(engine: Engine) -> None:
    # Importing the models registers them on Base.metadata
    import app.models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("✓ Database tables created successfully")
