from collections.abc import Iterator
from contextlib import contextmanager

from loguru import logger
from sqlmodel import Session


@contextmanager
def transaction(session: Session) -> Iterator[Session]:
    """Explicit transaction scope on an existing session.

    Commits when the block completes and rolls back on every exception,
    including domain errors raised half-way through a read-modify-write.
    """
    try:
        yield session
        session.commit()
    except Exception as e:
        session.rollback()
        logger.debug("Transaction rolled back: {}: {}", type(e).__name__, e)
        raise
