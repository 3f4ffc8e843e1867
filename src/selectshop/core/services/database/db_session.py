"""Database engine and session factory used across the application."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from loguru import logger
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from src.selectshop.runtime.config.config_data import ConfigData
from src.selectshop.runtime.context import get_config


class DbSessionService:
    def __init__(self, engine: Engine | None = None):
        """Initialize the shared database engine and session factory.

        Pass ``engine`` to reuse an existing engine (tests, CLI overrides).
        """
        if engine is not None:
            self._engine = engine
            return

        main_config = get_config()
        db_config = main_config.database

        logger.info(
            "Configuring database engine for environment: {}",
            main_config.app.environment,
        )
        self._engine = create_engine(
            db_config.connection_string, **self._engine_kwargs(main_config)
        )

    @staticmethod
    def _engine_kwargs(config: ConfigData) -> dict[str, Any]:
        db_config = config.database
        engine_kwargs: dict[str, Any] = {"echo": db_config.echo}

        if db_config.is_sqlite:
            engine_kwargs["connect_args"] = {
                "check_same_thread": False,
                "timeout": 20,  # lock timeout
            }
            if ":memory:" in db_config.url or db_config.url == "sqlite://":
                # every session must see the same in-memory database
                engine_kwargs["poolclass"] = StaticPool
            if config.app.environment == "production":
                logger.warning(
                    "SQLite is not recommended for production use. "
                    "Consider PostgreSQL for better performance and reliability."
                )
        else:
            engine_kwargs.update(
                {
                    "pool_size": db_config.pool_size,
                    "max_overflow": db_config.max_overflow,
                    "pool_timeout": db_config.pool_timeout,
                    "pool_recycle": db_config.pool_recycle,
                    "pool_pre_ping": True,
                }
            )
        return engine_kwargs

    @property
    def engine(self) -> Engine:
        return self._engine

    def get_session(self) -> Session:
        """Return a new SQLModel session bound to the shared engine."""
        return Session(
            self._engine,
            expire_on_commit=False,  # entities are read after commit
            autoflush=True,
        )

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Session that commits on success and rolls back on any error."""
        db = self.get_session()
        try:
            yield db
            db.commit()
        except Exception as e:
            db.rollback()
            logger.error(
                "Database transaction failed: {}: {}", type(e).__name__, e
            )
            raise
        finally:
            db.close()

    def health_check(self) -> bool:
        """Perform a health check on the database connection."""
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
                return True
        except Exception as e:
            logger.error("Database health check failed: {}: {}", type(e).__name__, e)
            return False
