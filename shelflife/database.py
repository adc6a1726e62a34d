from contextlib import contextmanager
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from typing import Generator, Iterator

from .core.config import get_settings

# Sync engine; one session per request.
settings = get_settings()
DATABASE_URL = settings.database_url

_connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(
	DATABASE_URL,
	echo=(settings.environment == "local" and settings.sql_echo),
	connect_args=_connect_args,
	future=True,
)

SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
	# SQLite ignores ON DELETE CASCADE unless asked per connection
	module = type(dbapi_connection).__module__
	if module.startswith("sqlite3") or module.startswith("pysqlite"):
		cursor = dbapi_connection.cursor()
		cursor.execute("PRAGMA foreign_keys=ON")
		cursor.close()


def get_db() -> Generator[Session, None, None]:
	db = SessionLocal()
	try:
		yield db
	finally:
		db.close()


@contextmanager
def transaction(db: Session) -> Iterator[Session]:
	"""Commit on success, roll back and re-raise on any error."""
	try:
		yield db
		db.commit()
	except Exception:
		db.rollback()
		raise
