import os
import configparser
from pathlib import Path

class Config:
    """Configuration manager for the Supply Workbench."""

    _instance = None

    def __new__(cls):
        """Singleton pattern implementation."""
        if cls._instance is None:
            cls._instance = super(Config, cls).__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        """Initialize the configuration if not already initialized."""
        if self._initialized:
            return

        self._config_dir = Path(os.getenv('SUPPLY_WORKBENCH_CONFIG_DIR', 'config'))
        self._config_path = self._config_dir / 'settings.ini'
        self._config = configparser.ConfigParser(interpolation=None)

        # Create config directory if it doesn't exist
        if not self._config_dir.exists():
            self._config_dir.mkdir(parents=True)

        # Load config or create default
        if self._config_path.exists():
            self._config.read(self._config_path)
        else:
            self._create_default_config()

        self._initialized = True

    def _create_default_config(self):
        """Create default configuration file."""
        self._config['DATABASE'] = {
            'type': 'supabase',
            'engine': 'postgresql',
            'host': 'localhost',
            'port': '5432',
            'database': 'postgres',
            'username': 'postgres',
            'password': 'postgres',
            'echo': 'False'
        }

        self._config['SUPABASE'] = {
            'url': '',
            'key': '',
            'schema': 'm8_schema'
        }

        self._config['LOGGING'] = {
            'level': 'INFO',
            'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            'directory': 'logs',
            'max_size_mb': '10',
            'backup_count': '5',
            'console_output': 'True'
        }

        self._config['PROJECTION'] = {
            'default_horizon_days': '90',
            'lead_time_days': '14',
            'z_score': '1.65',  # 95% one-sided service level
            'min_safety_stock': '10',
            'reorder_point_factor': '1.5',
            'capacity_factor': '2.0',
            'critical_ratio': '0.5',
            'medium_risk_critical_days': '7',
            'default_warehouse_id': '1'
        }

        self._config['BATCH_PROCESS'] = {
            'max_workers': '4'
        }

        self._save_config()

    def _save_config(self):
        """Save configuration to file."""
        with open(self._config_path, 'w') as configfile:
            self._config.write(configfile)

    def get(self, section, key, default=None):
        """Get configuration value."""
        try:
            return self._config.get(section, key)
        except (configparser.NoSectionError, configparser.NoOptionError):
            return default

    def get_int(self, section, key, default=None):
        """Get configuration value as integer."""
        try:
            return self._config.getint(section, key)
        except (configparser.NoSectionError, configparser.NoOptionError, ValueError):
            return default

    def get_float(self, section, key, default=None):
        """Get configuration value as float."""
        try:
            return self._config.getfloat(section, key)
        except (configparser.NoSectionError, configparser.NoOptionError, ValueError):
            return default

    def get_boolean(self, section, key, default=None):
        """Get configuration value as boolean."""
        try:
            return self._config.getboolean(section, key)
        except (configparser.NoSectionError, configparser.NoOptionError, ValueError):
            return default

    @property
    def log_config(self):
        """Get logging configuration."""
        return {
            'level': self.get('LOGGING', 'level', 'INFO'),
            'format': self.get('LOGGING', 'format', '%(asctime)s - %(name)s - %(levelname)s - %(message)s'),
            'directory': self.get('LOGGING', 'directory', 'logs'),
            'max_size_mb': self.get_int('LOGGING', 'max_size_mb', 10),
            'backup_count': self.get_int('LOGGING', 'backup_count', 5),
            'console_output': self.get_boolean('LOGGING', 'console_output', True)
        }

    @property
    def batch_config(self):
        """Get batch processing configuration."""
        return {
            'max_workers': self.get_int('BATCH_PROCESS', 'max_workers', 4)
        }

    @property
    def projection_config(self):
        """Get projection engine configuration."""
        return {
            'default_horizon_days': self.get_int('PROJECTION', 'default_horizon_days', 90),
            'lead_time_days': self.get_float('PROJECTION', 'lead_time_days', 14.0),
            'z_score': self.get_float('PROJECTION', 'z_score', 1.65),
            'min_safety_stock': self.get_float('PROJECTION', 'min_safety_stock', 10.0),
            'reorder_point_factor': self.get_float('PROJECTION', 'reorder_point_factor', 1.5),
            'capacity_factor': self.get_float('PROJECTION', 'capacity_factor', 2.0),
            'critical_ratio': self.get_float('PROJECTION', 'critical_ratio', 0.5),
            'medium_risk_critical_days': self.get_int('PROJECTION', 'medium_risk_critical_days', 7),
            'default_warehouse_id': self.get_int('PROJECTION', 'default_warehouse_id', 1)
        }

    @property
    def projection_parameters(self):
        """Get the projection engine parameters as a ProjectionParameters record."""
        from supply_workbench.core.records import ProjectionParameters

        settings = self.projection_config
        return ProjectionParameters(
            lead_time_days=settings['lead_time_days'],
            z_score=settings['z_score'],
            min_safety_stock=settings['min_safety_stock'],
            reorder_point_factor=settings['reorder_point_factor'],
            capacity_factor=settings['capacity_factor'],
            critical_ratio=settings['critical_ratio'],
            medium_risk_critical_days=settings['medium_risk_critical_days']
        )

# Global config instance
config = Config()
