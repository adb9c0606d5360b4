# supply_workbench/db/interface.py
from abc import ABC, abstractmethod
from typing import Dict, Any, Optional, List, Sequence

from sqlalchemy import select

from supply_workbench.db.connection import DatabaseConfig
from supply_workbench.models import MODELS_BY_TABLE
from supply_workbench.exceptions import DatabaseError

class DatabaseInterface(ABC):
    """Read-only database interface for different database types."""

    @abstractmethod
    def query(
        self,
        table_name: str,
        filters: Dict[str, Any] = None,
        gte: Dict[str, Any] = None,
        order_by: Optional[str] = None,
        ascending: bool = True,
        columns: Optional[Sequence[str]] = None
    ) -> List[Dict[str, Any]]:
        """Query rows from a table.

        Args:
            table_name: Table or view name
            filters: Column equality filters; list values mean membership
            gte: Column lower bounds (inclusive)
            order_by: Optional column to sort by
            ascending: Sort direction
            columns: Columns to select (all when omitted)

        Returns:
            List of row dictionaries
        """
        pass

class SupabaseInterface(DatabaseInterface):
    """Supabase interface implementation."""

    def __init__(self, client, schema: str = 'm8_schema'):
        """Initialize with Supabase client."""
        self.client = client
        self.schema = schema

    def query(
        self,
        table_name: str,
        filters: Dict[str, Any] = None,
        gte: Dict[str, Any] = None,
        order_by: Optional[str] = None,
        ascending: bool = True,
        columns: Optional[Sequence[str]] = None
    ) -> List[Dict[str, Any]]:
        """Query rows from a table using Supabase."""
        selection = ', '.join(columns) if columns else '*'

        try:
            query = self.client.schema(self.schema).table(table_name).select(selection)

            if filters:
                for key, value in filters.items():
                    if isinstance(value, (list, tuple)):
                        query = query.in_(key, list(value))
                    else:
                        query = query.eq(key, value)

            if gte:
                for key, value in gte.items():
                    query = query.gte(key, value)

            if order_by:
                query = query.order(order_by, desc=not ascending)

            result = query.execute()
        except Exception as e:
            raise DatabaseError(f"Supabase query error on {table_name}: {str(e)}")

        if hasattr(result, 'error') and result.error:
            raise DatabaseError(f"Supabase query error: {result.error}")

        return result.data if result.data else []

class SQLAlchemyInterface(DatabaseInterface):
    """PostgreSQL interface implementation over the declarative models."""

    def __init__(self, connection):
        """Initialize with a database connection providing session_scope()."""
        self.connection = connection

    def query(
        self,
        table_name: str,
        filters: Dict[str, Any] = None,
        gte: Dict[str, Any] = None,
        order_by: Optional[str] = None,
        ascending: bool = True,
        columns: Optional[Sequence[str]] = None
    ) -> List[Dict[str, Any]]:
        """Query rows from a mapped table using SQLAlchemy."""
        model_class = MODELS_BY_TABLE.get(table_name)
        if model_class is None:
            raise DatabaseError(f"No model mapped for table: {table_name}")

        table = model_class.__table__
        selected = [table.c[name] for name in columns] if columns else list(table.c)
        statement = select(*selected)

        if filters:
            for key, value in filters.items():
                if isinstance(value, (list, tuple)):
                    statement = statement.where(table.c[key].in_(list(value)))
                else:
                    statement = statement.where(table.c[key] == value)

        if gte:
            for key, value in gte.items():
                statement = statement.where(table.c[key] >= value)

        if order_by:
            column = table.c[order_by]
            statement = statement.order_by(column.asc() if ascending else column.desc())

        try:
            with self.connection.session_scope() as session:
                return [dict(row) for row in session.execute(statement).mappings()]
        except DatabaseError:
            raise
        except Exception as e:
            raise DatabaseError(f"PostgreSQL query error on {table_name}: {str(e)}")

class DatabaseAdapter:
    """Adapter that provides unified read access to different database backends."""

    def __init__(self, connection):
        """Initialize with database connection."""
        self.connection = connection
        self._interface = None

    @property
    def interface(self) -> DatabaseInterface:
        """Get appropriate database interface."""
        if self._interface is None:
            if self.connection.db_type == "supabase":
                schema = DatabaseConfig.get_supabase_config()['schema']
                self._interface = SupabaseInterface(self.connection.get_supabase(), schema)
            elif self.connection.db_type == "postgresql":
                self._interface = SQLAlchemyInterface(self.connection)
            else:
                raise DatabaseError(f"Unknown database type: {self.connection.db_type}")

        return self._interface
