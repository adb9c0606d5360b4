"""
Logging for the Supply Workbench.

Every named logger writes to its own rotating file under the configured log
directory and, optionally, to the console. Projection runs are logged to the
``projection_run`` logger with their filters, horizon and outcome.
"""
import logging
import logging.handlers
from datetime import datetime
from pathlib import Path

from supply_workbench.config import config

RUN_LOGGER_NAME = 'projection_run'

class Logger:
    """Hands out configured loggers and logs projection runs."""

    _instance = None
    _loggers = {}

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(Logger, cls).__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        settings = config.log_config
        self._level = getattr(logging, settings['level'].upper(), logging.INFO)
        self._formatter = logging.Formatter(settings['format'])
        self._console_output = settings['console_output']
        self._max_bytes = settings['max_size_mb'] * 1024 * 1024
        self._backup_count = settings['backup_count']

        self._log_dir = Path(settings['directory'])
        self._log_dir.mkdir(parents=True, exist_ok=True)

        logging.getLogger().setLevel(self._level)
        self._initialized = True

    def _handlers_for(self, name):
        file_handler = logging.handlers.RotatingFileHandler(
            self._log_dir / f"{name}.log",
            maxBytes=self._max_bytes,
            backupCount=self._backup_count
        )
        handlers = [file_handler]
        if self._console_output:
            handlers.append(logging.StreamHandler())

        for handler in handlers:
            handler.setFormatter(self._formatter)
        return handlers

    def get_logger(self, name):
        """Get a logger writing to ``<log dir>/<name>.log``.

        Args:
            name: Name of the logger

        Returns:
            Configured logger instance
        """
        if name not in self._loggers:
            named_logger = logging.getLogger(name)
            named_logger.setLevel(self._level)
            named_logger.handlers = self._handlers_for(name)
            # Handlers are attached per logger
            named_logger.propagate = False
            self._loggers[name] = named_logger

        return self._loggers[name]

    def set_level(self, level):
        """Change the level of every logger, including ones created later."""
        self._level = level
        logging.getLogger().setLevel(level)
        for named_logger in self._loggers.values():
            named_logger.setLevel(level)

    def run_start_log(self, product_id, location_id, horizon_days, today):
        """Log the start of a projection run.

        Args:
            product_id: Product filter, or None for every product
            location_id: Location filter, or None for every location
            horizon_days: Projection horizon in days
            today: Day 0 of the projection

        Returns:
            Run record to pass to run_end_log
        """
        self.get_logger(RUN_LOGGER_NAME).info(
            f"Projecting product={product_id or '*'} location={location_id or '*'} "
            f"for {horizon_days} days from {today.isoformat()}"
        )
        return {'horizon_days': horizon_days, 'started_at': datetime.now()}

    def run_end_log(self, run, series_count=0, empty_series=0, error=None):
        """Log the outcome of a projection run.

        Args:
            run: Record returned by run_start_log
            series_count: Number of series projected
            empty_series: Number of series without observations
            error: Exception that ended the run, if any
        """
        run_logger = self.get_logger(RUN_LOGGER_NAME)
        elapsed = datetime.now() - run['started_at']

        if error is not None:
            run_logger.error(f"Projection run failed after {elapsed}: {error}")
            return

        run_logger.info(
            f"Projected {series_count} series over {run['horizon_days']} days "
            f"({empty_series} without observations) in {elapsed}"
        )

# Global logger instance
logger = Logger()

def get_logger(name):
    """Get a logger with the specified name."""
    return logger.get_logger(name)
