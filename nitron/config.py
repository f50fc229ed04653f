import yaml
import os
import logging
from datetime import tzinfo, timezone
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = 'config/nitron.yaml'
USER_CONFIG_DIR = os.path.expanduser("~/.config/nitron")
USER_CONFIG_PATH = os.path.join(USER_CONFIG_DIR, 'config.yaml')

DEFAULT_DATABASE_URL = "sqlite:///./nitron_browser.db"


class Config:
    def __init__(self, config_path=None):
        self.config_path = self._determine_config_path(config_path)
        self.config_data = self._load_config()
        logger.info(f"Config initialized using: {self.config_path}")

    def _determine_config_path(self, provided_path):
        """Determine the correct config path to use."""
        if provided_path and os.path.exists(provided_path):
            return provided_path
        if provided_path:
            logger.warning(f"Configuration file {provided_path} not found, falling back to default locations.")
        if os.path.exists(USER_CONFIG_PATH):
            return USER_CONFIG_PATH
        if os.path.exists(DEFAULT_CONFIG_PATH):
            return DEFAULT_CONFIG_PATH
        logger.warning("No configuration file found at default or user locations. Using empty config.")
        return None # Indicate no file was found

    def _load_config(self):
        """Loads the YAML configuration file."""
        if not self.config_path:
            return {}

        try:
            with open(self.config_path, 'r') as f:
                data = yaml.safe_load(f) or {} # Empty file means defaults
        except FileNotFoundError:
            logger.warning(f"Configuration file not found at {self.config_path}. Using default settings.")
            return {}
        except yaml.YAMLError as e:
            logger.error(f"Error parsing configuration file {self.config_path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Configuration in {self.config_path} is not a mapping. Using default settings.")
            return {}
        return data

    def get_config(self):
        """Returns the loaded configuration data."""
        return self.config_data

    def reload_config(self):
        """Reloads the configuration from the file."""
        logger.info(f"Reloading configuration from: {self.config_path}")
        self.config_data = self._load_config()
        logger.info("Configuration reloaded.")

    @property
    def database_url(self) -> str:
        """SQLAlchemy URL of the bookmark/history database."""
        return self.config_data.get('database_url', DEFAULT_DATABASE_URL)

    @property
    def timezone(self) -> Optional[tzinfo]:
        """Time zone used for day labels; None means the local time zone."""
        name = self.config_data.get('timezone')
        if not name:
            return None
        if str(name).upper() == "UTC":
            return timezone.utc
        try:
            return ZoneInfo(str(name))
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning(f"Unknown timezone '{name}' in config. Using local time zone.")
            return None

    @property
    def summary_top_sites(self) -> int:
        return int(self.config_data.get('summary_top_sites', 3))

    @property
    def log_dir(self) -> str:
        return self.config_data.get('log_dir', 'logs')

    @property
    def log_level(self) -> str:
        return self.config_data.get('log_level', 'INFO')

    @property
    def host(self) -> str:
        return self.config_data.get('host', '127.0.0.1')

    @property
    def port(self) -> int:
        return int(self.config_data.get('port', 8523))
