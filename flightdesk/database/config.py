"""
Engine and session management for flightdesk.

The connection target comes from ``DATABASE_URL`` or is assembled from the
``DB_*`` variables. SQLite is the default and needs no server; MySQL/MariaDB
and PostgreSQL get a pooled engine.
"""

import os
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import QueuePool, StaticPool

from .models import create_all_tables, drop_all_tables

logger = logging.getLogger(__name__)

# URL template, default port and default user for server backends
SERVER_BACKENDS = {
    'mysql': ('mysql+pymysql://{user}:{password}@{host}:{port}/{name}?charset=utf8mb4', '3306', 'root'),
    'postgresql': ('postgresql://{user}:{password}@{host}:{port}/{name}', '5432', 'postgres'),
}
BACKEND_ALIASES = {'mariadb': 'mysql', 'postgres': 'postgresql'}

DEFAULT_SQLITE_FILE = 'flightdesk.db'


def build_database_url() -> str:
    """
    Resolve the database URL from the environment.

    ``DATABASE_URL`` wins when set. Otherwise ``DB_TYPE`` picks the backend
    and ``DB_HOST``, ``DB_PORT``, ``DB_NAME``, ``DB_USER`` and
    ``DB_PASSWORD`` fill in the rest.

    Raises:
        ValueError: If DB_TYPE names a backend that is not supported
    """
    url = os.getenv('DATABASE_URL')
    if url:
        return url

    requested = os.getenv('DB_TYPE', 'sqlite').lower()
    db_type = BACKEND_ALIASES.get(requested, requested)

    if db_type == 'sqlite':
        db_file = Path(__file__).parent.parent / os.getenv('DB_NAME', DEFAULT_SQLITE_FILE)
        return f"sqlite:///{db_file}"

    if db_type not in SERVER_BACKENDS:
        raise ValueError(f"Unsupported database type: {requested}")

    template, default_port, default_user = SERVER_BACKENDS[db_type]
    return template.format(
        user=os.getenv('DB_USER', default_user),
        password=os.getenv('DB_PASSWORD', ''),
        host=os.getenv('DB_HOST', 'localhost'),
        port=os.getenv('DB_PORT', default_port),
        name=os.getenv('DB_NAME', 'flightdesk'),
    )


def database_type(database_url: str) -> str:
    """Backend name for a URL, e.g. ``mysql`` for ``mysql+pymysql://...``."""
    scheme = database_url.split(':', 1)[0].split('+', 1)[0].lower()
    return BACKEND_ALIASES.get(scheme, scheme)


def _pool_settings() -> Dict[str, int]:
    return {
        'pool_size': int(os.getenv('DB_POOL_SIZE', '10')),
        'max_overflow': int(os.getenv('DB_MAX_OVERFLOW', '20')),
        'pool_timeout': int(os.getenv('DB_POOL_TIMEOUT', '30')),
        'pool_recycle': int(os.getenv('DB_POOL_RECYCLE', '3600')),
    }


class DatabaseConfig:
    """
    Owns the engine and session factory for one database.

    The engine is created lazily on first use, so building a DatabaseConfig
    never opens a connection.
    """

    def __init__(self, database_url: Optional[str] = None, echo: bool = False):
        self.database_url = database_url or build_database_url()
        self.echo = echo
        self.db_type = database_type(self.database_url)
        self.engine: Optional[Engine] = None
        self.SessionLocal: Optional[sessionmaker] = None

        logger.info(f"Database configured for {self.db_type}")

    @property
    def is_initialized(self) -> bool:
        return self.SessionLocal is not None

    def _get_engine_kwargs(self) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {'echo': self.echo, 'pool_pre_ping': True}

        if self.db_type == 'sqlite':
            # One shared connection, usable from any thread
            kwargs['poolclass'] = StaticPool
            kwargs['connect_args'] = {'check_same_thread': False, 'timeout': 30}
        elif self.db_type in SERVER_BACKENDS:
            kwargs['poolclass'] = QueuePool
            kwargs.update(_pool_settings())
            if self.db_type == 'mysql':
                kwargs['connect_args'] = {'charset': 'utf8mb4', 'connect_timeout': 30}

        return kwargs

    def initialize(self) -> None:
        """
        Create the engine, check connectivity and build the session factory.

        Raises:
            SQLAlchemyError: If the engine cannot be created or reached
        """
        if self.is_initialized:
            return

        try:
            engine = create_engine(self.database_url, **self._get_engine_kwargs())
            if self.db_type == 'sqlite':
                event.listen(engine, 'connect', _enable_sqlite_foreign_keys)

            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except Exception as e:
            logger.error(f"Failed to initialize database: {e}")
            raise SQLAlchemyError(f"Database initialization failed: {e}")

        self.engine = engine
        self.SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
        logger.info(f"Database engine ready ({self.db_type})")

    def create_tables(self) -> None:
        """Create any missing tables."""
        self.initialize()
        try:
            create_all_tables(self.engine)
        except Exception as e:
            logger.error(f"Failed to create tables: {e}")
            raise SQLAlchemyError(f"Table creation failed: {e}")
        logger.info("Database tables created")

    def drop_tables(self) -> None:
        self.initialize()
        drop_all_tables(self.engine)
        logger.info("Database tables dropped")

    def get_session(self) -> Session:
        self.initialize()
        return self.SessionLocal()

    @contextmanager
    def get_session_context(self) -> Iterator[Session]:
        """
        Session scope: commit on success, roll back on any error.

        Usage:
            with db_config.get_session_context() as session:
                flights = FlightService.from_session(session).get_all()
        """
        session = self.get_session()
        try:
            yield session
            session.commit()
        except Exception as e:
            session.rollback()
            logger.error(f"Database session error: {e}")
            raise
        finally:
            session.close()

    def test_connection(self) -> bool:
        """Return True if a trivial query succeeds."""
        try:
            self.initialize()
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            logger.error(f"Database connection test failed: {e}")
            return False
        return True

    def get_connection_info(self) -> Dict[str, Any]:
        """Backend, URL without credentials, and pool usage when pooled."""
        info: Dict[str, Any] = {
            'database_type': self.db_type,
            'database_url': self.database_url.rsplit('@', 1)[-1],
            'is_initialized': self.is_initialized,
            'echo_enabled': self.echo,
        }

        pool = self.engine.pool if self.engine is not None else None
        if isinstance(pool, QueuePool):
            info.update({
                'pool_size': pool.size(),
                'checked_in': pool.checkedin(),
                'checked_out': pool.checkedout(),
            })

        return info

    def close(self) -> None:
        if self.engine is not None:
            self.engine.dispose()
            logger.info("Database connections closed")


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


# Process-wide configuration used by the CLI
_db_config: Optional[DatabaseConfig] = None


def get_database_config(database_url: Optional[str] = None, echo: bool = False) -> DatabaseConfig:
    """Return the shared DatabaseConfig, creating it on first call."""
    global _db_config
    if _db_config is None:
        _db_config = DatabaseConfig(database_url=database_url, echo=echo)
    return _db_config


def reset_database_config() -> None:
    """Dispose of the shared DatabaseConfig so the next call builds a new one."""
    global _db_config
    if _db_config is not None:
        _db_config.close()
    _db_config = None


def initialize_database(database_url: Optional[str] = None, echo: bool = False,
                        create_tables: bool = True) -> DatabaseConfig:
    """
    Initialize the shared database.

    Args:
        database_url: URL override; the environment is used when None
        echo: Log every SQL statement
        create_tables: Create missing tables after connecting

    Returns:
        The initialized shared DatabaseConfig
    """
    db_config = get_database_config(database_url=database_url, echo=echo)
    db_config.initialize()
    if create_tables:
        db_config.create_tables()
    return db_config


def get_db_session() -> Session:
    return get_database_config().get_session()


@contextmanager
def get_db_session_context() -> Iterator[Session]:
    with get_database_config().get_session_context() as session:
        yield session


__all__ = [
    'DatabaseConfig',
    'build_database_url',
    'database_type',
    'get_database_config',
    'reset_database_config',
    'initialize_database',
    'get_db_session',
    'get_db_session_context',
]
