# supply_workbench/db/connection.py
import os
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.engine import URL
from sqlalchemy.orm import sessionmaker
from supabase import create_client

from supply_workbench.config import config
from supply_workbench.exceptions import DatabaseError
from supply_workbench.logging_setup import get_logger

logger = get_logger('database')

SUPPORTED_BACKENDS = ('supabase', 'postgresql')

class DatabaseConfig:
    """Reads backend settings from the environment and the DATABASE/SUPABASE sections."""

    @staticmethod
    def get_db_type() -> str:
        return config.get('DATABASE', 'type', default='supabase').split('#')[0].strip().lower()

    @staticmethod
    def get_supabase_config():
        """Get Supabase url, key and schema; SUPABASE_URL/SUPABASE_KEY win over the config file."""
        url, key = os.getenv('SUPABASE_URL'), os.getenv('SUPABASE_KEY')
        if not (url and key):
            url = config.get('SUPABASE', 'url', default='')
            key = config.get('SUPABASE', 'key', default='')

        return {
            'url': url,
            'key': key,
            'schema': config.get('SUPABASE', 'schema', default='m8_schema')
        }

    @staticmethod
    def get_connection_url() -> URL:
        """Build the PostgreSQL URL; the password is escaped by SQLAlchemy."""
        return URL.create(
            config.get('DATABASE', 'engine', default='postgresql'),
            username=config.get('DATABASE', 'username', default='postgres'),
            password=config.get('DATABASE', 'password', default='postgres'),
            host=config.get('DATABASE', 'host', default='localhost'),
            port=config.get_int('DATABASE', 'port', default=5432),
            database=config.get('DATABASE', 'database', default='postgres')
        )

class DatabaseConnection:
    """Read-only connection to the configured backend, opened on first use."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._db_type = None
            cls._instance._sessions = None
            cls._instance._supabase = None
        return cls._instance

    def _connect(self):
        db_type = DatabaseConfig.get_db_type()
        if db_type not in SUPPORTED_BACKENDS:
            raise DatabaseError(f"Unknown database type: {db_type}")

        try:
            if db_type == 'supabase':
                settings = DatabaseConfig.get_supabase_config()
                if not settings['url'] or not settings['key']:
                    raise DatabaseError("Supabase URL and key must be provided")
                self._supabase = create_client(settings['url'], settings['key'])
            else:
                engine = create_engine(
                    DatabaseConfig.get_connection_url(),
                    pool_pre_ping=True,
                    echo=config.get_boolean('DATABASE', 'echo', default=False)
                )
                self._sessions = sessionmaker(bind=engine, autoflush=False)
        except DatabaseError:
            raise
        except Exception as e:
            raise DatabaseError(f"Failed to connect to {db_type}: {str(e)}")

        self._db_type = db_type
        logger.info(f"Connected to {db_type} backend")

    @property
    def db_type(self) -> str:
        if self._db_type is None:
            self._connect()
        return self._db_type

    def get_supabase(self):
        """Get the Supabase client."""
        if self.db_type != 'supabase':
            raise DatabaseError("Supabase client requested on a PostgreSQL connection")
        return self._supabase

    @contextmanager
    def session_scope(self):
        """Yield a session that is closed afterwards; nothing is committed."""
        if self.db_type != 'postgresql':
            raise DatabaseError("SQL session requested on a Supabase connection")

        with self._sessions() as session:
            yield session

db = DatabaseConnection()
