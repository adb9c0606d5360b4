# supply_workbench/db/__init__.py
from .connection import DatabaseConfig, DatabaseConnection, db
from .interface import DatabaseAdapter, DatabaseInterface, SupabaseInterface, SQLAlchemyInterface

# Get the global database adapter
database_adapter = DatabaseAdapter(db)

def get_db_interface() -> DatabaseInterface:
    """Get database interface for current database type."""
    return database_adapter.interface

__all__ = [
    'db',
    'get_db_interface',
    'database_adapter',
    'DatabaseAdapter',
    'DatabaseConfig',
    'DatabaseConnection',
    'DatabaseInterface',
    'SupabaseInterface',
    'SQLAlchemyInterface'
]
