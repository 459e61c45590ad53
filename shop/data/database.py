# shop/data/database.py
import sqlite3

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from shop.utils.settings import DATABASE_URL, SQL_ECHO
from shop.utils.retry import db_retry
from shop.utils.logging import get_logger

logger = get_logger(__name__)


class Base(DeclarativeBase):
    pass


engine = create_engine(DATABASE_URL, echo=SQL_ECHO, pool_pre_ping=True)
SessionLocal = sessionmaker(bind=engine, autoflush=False)


#sqlite domyslnie ignoruje klucze obce, bez tego nie ma ON DELETE CASCADE
@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def get_db():
    """Sesja na request, zamykana po odpowiedzi."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def ping(bind: Engine = engine) -> None:
    with bind.connect() as conn:
        conn.execute(text("SELECT 1"))


def init_db(bind: Engine = engine) -> None:
    """Tworzy tabele, jesli jeszcze nie istnieja (dev / testy)."""
    # rejestracja modeli w Base.metadata
    import shop.data.models  # noqa: F401

    db_retry()(ping)(bind)
    logger.info(f"Models registered in Base.metadata: {list(Base.metadata.tables.keys())}")
    Base.metadata.create_all(bind=bind)
    logger.info("Database tables created")
