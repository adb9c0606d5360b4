# supply_workbench/models.py
from sqlalchemy import Column, String, Float, Date, PrimaryKeyConstraint
from sqlalchemy.orm import declarative_base
import enum

SCHEMA = 'm8_schema'

Base = declarative_base()

class InventoryStatus(enum.Enum):
    """Enum for the stock-health status of a projected day.

    Values:
        OPTIMAL ('optimal'): Projected inventory above safety stock
        WARNING ('warning'): At or below safety stock
        CRITICAL ('critical'): At or below half of safety stock
        STOCKOUT ('stockout'): Nothing left on hand
    """
    OPTIMAL = 'optimal'
    WARNING = 'warning'
    CRITICAL = 'critical'
    STOCKOUT = 'stockout'

    def __str__(self):
        """Return the string value of the enum."""
        return self.value

    @classmethod
    def from_string(cls, value: str) -> 'InventoryStatus':
        """Create an InventoryStatus from a string value.

        Args:
            value: String value ('optimal', 'warning', 'critical', 'stockout')

        Returns:
            InventoryStatus enum value

        Raises:
            ValueError if the string value is not valid
        """
        try:
            return cls(value.lower())
        except (ValueError, AttributeError):
            raise ValueError(
                f"Invalid inventory status: {value}. Valid values are: optimal, warning, critical, stockout"
            )

class RiskLevel(enum.Enum):
    LOW = 'low'
    MEDIUM = 'medium'
    HIGH = 'high'

    def __str__(self):
        return self.value

class InventorySeries(Base):
    """A (product, location) inventory time line."""
    __tablename__ = 'inventory_series'
    __table_args__ = {'schema': SCHEMA}

    id = Column(String, primary_key=True)
    product_id = Column(String, nullable=False)
    location_id = Column(String, nullable=False)

    def __repr__(self):
        return f"<InventorySeries(id='{self.id}', product_id='{self.product_id}', location_id='{self.location_id}')>"

class InventorySeriesData(Base):
    """A recorded on-hand quantity for a series at a period date."""
    __tablename__ = 'inventory_series_data'
    __table_args__ = (
        PrimaryKeyConstraint('series_id', 'period_date'),
        {'schema': SCHEMA},
    )

    series_id = Column(String, nullable=False)
    period_date = Column(Date, nullable=False)
    value = Column(Float)

class ForecastWithFittedHistory(Base):
    """Read-only view of forecast and actual demand per product, location and date."""
    __tablename__ = 'forecast_with_fitted_history'
    __table_args__ = (
        PrimaryKeyConstraint('product_id', 'location_id', 'postdate'),
        {'schema': SCHEMA},
    )

    product_id = Column(String, nullable=False)
    location_id = Column(String, nullable=False)
    postdate = Column(Date, nullable=False)
    forecast = Column(Float)
    actual = Column(Float)

# Table name -> model, used by the SQLAlchemy read interface
MODELS_BY_TABLE = {
    InventorySeries.__tablename__: InventorySeries,
    InventorySeriesData.__tablename__: InventorySeriesData,
    ForecastWithFittedHistory.__tablename__: ForecastWithFittedHistory,
}
