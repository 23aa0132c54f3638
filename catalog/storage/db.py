import asyncio

from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    async_sessionmaker,
    create_async_engine,
)
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

# Table models must be imported so SQLModel.metadata knows about them
import catalog.models  # noqa: F401
from catalog.logging import logger
from catalog.settings import app_settings


def build_engine(url: str | None = None) -> AsyncEngine:
    """
    Create an async engine for ``url`` (defaults to DATABASE_URL).

    Args:
        url: SQLAlchemy database URL with an async driver.

    Returns:
        AsyncEngine bound to the database.
    """
    return create_async_engine(
        url or app_settings.DATABASE_URL,
        echo=app_settings.DB_ECHO,
        pool_pre_ping=True,
    )


def build_session_factory(
    bind: AsyncEngine,
) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind, class_=AsyncSession, expire_on_commit=False
    )


engine: AsyncEngine = build_engine()
async_session = build_session_factory(engine)


async def init_db(bind: AsyncEngine | None = None) -> None:
    """Create the catalog tables if they do not exist yet."""
    async with (bind or engine).begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def wait_and_init_db(
    retry_interval: int | None = None,
    max_retries: int | None = None,
    bind: AsyncEngine | None = None,
) -> None:
    """
    Wait until the database is available, then create the tables.

    Args:
        retry_interval: Time in seconds between retries.
            Defaults to app_settings.DB_INIT_RETRY_INTERVAL
        max_retries: Maximum number of retries before giving up.
            Defaults to app_settings.DB_INIT_MAX_RETRIES
        bind: Engine to use instead of the module-level one.

    Raises:
        RuntimeError: If the database never became reachable.
    """
    if retry_interval is None:
        retry_interval = app_settings.DB_INIT_RETRY_INTERVAL
    if max_retries is None:
        max_retries = app_settings.DB_INIT_MAX_RETRIES
    bind = bind or engine

    for attempt in range(max_retries):
        try:
            async with bind.connect() as conn:
                await conn.exec_driver_sql("SELECT 1")
            logger.info("Database is now ready.")
            await init_db(bind)
            return
        except OperationalError:
            logger.warning(
                f"Database not ready, retrying in {retry_interval} seconds... (Attempt {attempt + 1}/{max_retries})"
            )
            await asyncio.sleep(retry_interval)

    logger.error("Failed to connect to the database after multiple attempts.")
    raise RuntimeError("Database connection could not be established.")
