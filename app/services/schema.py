import logging

from sqlalchemy.engine import Engine

from app.models.base import Base

logger = logging.getLogger(__name__)


def ensure_schema(engine: Engine) -> None:
    # Importing the package registers every mapped table on Base.metadata.
    import app.models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("Database schema ready (%s)", engine.dialect.name)
