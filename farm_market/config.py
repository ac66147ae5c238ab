import os
import logging
from dotenv import load_dotenv
from sqlalchemy import create_engine, text
from sqlalchemy.ext.asyncio import AsyncSession, AsyncEngine, create_async_engine
from sqlalchemy.orm import sessionmaker
from farm_market.models import Base

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL")
JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY")
JWT_ALGORITHM = "HS256"
JWT_EXPIRES_MINUTES = int(os.getenv("JWT_EXPIRES_MINUTES", 60))
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 5000))
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",")
    if origin.strip()
]
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
DB_CREATE_TABLES = os.getenv("DB_CREATE_TABLES", "false").lower() == "true"

ENVIRONMENT = os.getenv("ENVIRONMENT", "dev")
DEBUG = ENVIRONMENT == "dev"

logger = logging.getLogger(__name__)

_async_engine = None
_session_factory = None


def configure_logging(level: str = None):
    """Set the root log level and format once at process startup"""
    level_name = (level or LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def get_async_database_url(url: str) -> str:
    if url.startswith("postgresql+asyncpg://"):
        return url
    return url.replace("postgresql://", "postgresql+asyncpg://", 1)


def get_sync_database_url(url: str) -> str:
    return url.replace("postgresql+asyncpg://", "postgresql://", 1)


def get_async_engine() -> AsyncEngine:
    """
    Create the shared connection pool on first use and hand back the cached
    engine on every later call.
    """
    global _async_engine, _session_factory
    if _async_engine is None:
        if not DATABASE_URL:
            raise ValueError("DATABASE_URL must be set in environment variables")

        _async_engine = create_async_engine(
            get_async_database_url(DATABASE_URL),
            echo=False,
            pool_pre_ping=True,
            pool_size=5,
            max_overflow=0
        )
        _session_factory = sessionmaker(
            bind=_async_engine,
            class_=AsyncSession,
            expire_on_commit=False
        )
        logger.info("Database connection pool created")

    return _async_engine


def get_session_factory():
    if _session_factory is None:
        get_async_engine()
    return _session_factory


async def get_db():
    if not DATABASE_URL:
        raise Exception("Database not configured")
    session_factory = get_session_factory()
    async with session_factory() as session:
        yield session


async def init_db():
    """Create any missing tables; migrations remain the normal route"""
    engine = get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine():
    global _async_engine, _session_factory
    if _async_engine is not None:
        await _async_engine.dispose()
        logger.info("Database connection pool closed")
    _async_engine = None
    _session_factory = None


def get_sync_engine():
    if not DATABASE_URL:
        raise Exception("Database not configured")
    return create_engine(get_sync_database_url(DATABASE_URL))


async def check_database() -> bool:
    """Run a trivial query; failures are logged and reported as False"""
    try:
        engine = get_async_engine()
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        logger.info("Connected to PostgreSQL database")
        return True
    except Exception as e:
        logger.error(f"Database connection failed: {str(e)}")
        return False
