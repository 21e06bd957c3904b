# nc_news/db/session.py

import logging
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from nc_news.core.config import settings

logger = logging.getLogger(__name__)

SQLALCHEMY_DATABASE_URL = settings.DATABASE_URL


def register_engine_events(engine: Engine) -> Engine:
    """Attach connection logging and, on SQLite, foreign key enforcement."""

    @event.listens_for(engine, "connect")
    def connect(dbapi_connection, connection_record):
        if engine.dialect.name == "sqlite":
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()
        logger.info("Database connection established")

    @event.listens_for(engine, "close")
    def close(dbapi_connection, connection_record):
        logger.info("Database connection closed")

    return engine


engine = register_engine_events(create_engine(SQLALCHEMY_DATABASE_URL, pool_pre_ping=True))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
