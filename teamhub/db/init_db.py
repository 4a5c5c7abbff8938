# teamhub/db/init_db.py
from sqlalchemy.engine import Engine

from teamhub.core.logging import logger
from teamhub.db.base import Base


def init_db(engine: Engine) -> None:
    """Create any missing tables on the given engine"""
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created", tables=sorted(Base.metadata.tables))
