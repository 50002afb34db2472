from typing import Generator
from sqlalchemy import create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import QueuePool
from .config import settings
import logging

logger = logging.getLogger(__name__)

# =============================================================================
# DATABASE ENGINE CONFIGURATION
# =============================================================================


def build_engine_options() -> dict:
    """
    Engine keyword arguments for the configured database.

    SQLite keeps its default pool and only needs cross-thread access
    (FastAPI runs sync endpoints in a threadpool). Server databases get
    a QueuePool sized from settings.
    """
    if settings.is_sqlite:
        return {
            "echo": settings.DB_ECHO_SQL,
            "connect_args": {"check_same_thread": False},
        }

    return {
        # Connection pool settings
        "poolclass": QueuePool,
        "pool_size": settings.DB_POOL_SIZE,
        "max_overflow": settings.DB_MAX_OVERFLOW,
        "pool_timeout": settings.DB_POOL_TIMEOUT,
        "pool_recycle": settings.DB_POOL_RECYCLE,

        # Test connection before using (detect disconnects)
        "pool_pre_ping": True,

        "echo": settings.DB_ECHO_SQL,
        "connect_args": {
            "connect_timeout": 10,
        },
    }


engine = create_engine(settings.DATABASE_URL, **build_engine_options())


# =============================================================================
# SESSION CONFIGURATION
# =============================================================================

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
    expire_on_commit=False  # Keep loaded attributes usable after commit
)

# Base class for models
Base = declarative_base()


# =============================================================================
# DATABASE SESSION DEPENDENCY
# =============================================================================

def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI endpoints.

    Usage in endpoints:
        @router.get("/students")
        def list_students(db: Session = Depends(get_db)):
            ...

    This function:
    1. Creates a new database session
    2. Yields it to the endpoint
    3. Closes the session after the request (even if error occurs)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# =============================================================================
# DATABASE UTILITIES
# =============================================================================

def create_database_tables():
    """
    Create all database tables defined in models.

    WARNING: Only use this in development!
    In production, use Alembic migrations instead.
    """
    # Register models on Base.metadata
    from app.models import student  # noqa: F401

    logger.info("Creating database tables...")
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created successfully")


def check_database_connection() -> bool:
    """
    Check if database connection is working.

    Returns:
        bool: True if connection successful, False otherwise
    """
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        logger.debug("Database connection successful")
        return True
    except SQLAlchemyError as e:
        logger.error(f"Database connection failed: {e}")
        return False


# =============================================================================
# INITIALIZATION
# =============================================================================

def init_db():
    """
    Initialize database.
    Run this when starting the application.
    """
    logger.info("Initializing database...")

    if not check_database_connection():
        logger.warning("Database is not reachable yet; requests will fail until it is")
        return

    if settings.DB_CREATE_TABLES:
        create_database_tables()

    logger.info("Database initialized successfully")


if __name__ == "__main__":
    """Test database connection when running this file directly."""
    logging.basicConfig(level=logging.INFO)

    from .config import print_config
    print_config()

    if check_database_connection():
        print("Connection successful!")
    else:
        print("Connection failed!")
