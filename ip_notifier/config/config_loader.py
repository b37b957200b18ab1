"""
Configuration loader for the IP notifier.
Reads the Gotify endpoint and the discovery settings from a YAML file.
"""

import math
import yaml
from typing import Any, Dict, Optional
from dataclasses import dataclass, field
from pathlib import Path

from ..core.data_models import (
    DEFAULT_MAX_DURATION,
    DEFAULT_RETRY_INTERVAL,
    DEFAULT_SUBNET_PREFIX,
    DiscoveryBudget,
    SubnetFilter,
)
from ..notifiers.gotify_notifier import DEFAULT_PRIORITY, DEFAULT_TIMEOUT
from ..utils.error_handler import ConfigurationError
from ..utils.logger import Logger, get_logger

DEFAULT_CONFIG_FILE = "notifier_config.yml"


@dataclass
class GotifyConfig:
    """Connection settings for the Gotify server."""
    server_url: str
    token: str
    priority: int = DEFAULT_PRIORITY
    timeout: int = DEFAULT_TIMEOUT


@dataclass
class DiscoveryConfig:
    """Settings for the address discovery loop."""
    subnet_prefix: str = DEFAULT_SUBNET_PREFIX
    max_duration: float = DEFAULT_MAX_DURATION
    retry_interval: float = DEFAULT_RETRY_INTERVAL

    @property
    def subnet_filter(self) -> SubnetFilter:
        return SubnetFilter(self.subnet_prefix)

    @property
    def budget(self) -> DiscoveryBudget:
        return DiscoveryBudget(self.max_duration, self.retry_interval)


@dataclass
class NotifierConfig:
    """Complete configuration for one run."""
    gotify: GotifyConfig
    discovery: DiscoveryConfig = field(default_factory=DiscoveryConfig)


class ConfigLoader:
    """
    Loads and validates the notifier YAML configuration.

    The gotify section is mandatory and raises ConfigurationError when missing
    or incomplete. The discovery section is optional and falls back to
    defaults for invalid values.
    """

    def __init__(self, config_path: Optional[str] = None, logger: Optional[Logger] = None):
        """
        Initialize ConfigLoader.

        Args:
            config_path: Path to the YAML file. Defaults to notifier_config.yml
                         in the current working directory.
            logger: Logger instance for validation warnings
        """
        self.config_path = Path(config_path or DEFAULT_CONFIG_FILE)
        self.logger = logger or get_logger(__name__)

    def load(self) -> NotifierConfig:
        """
        Load the configuration file.

        Returns:
            NotifierConfig with validated values

        Raises:
            ConfigurationError: If the file is missing, unreadable or lacks
                the Gotify server URL or token
        """
        if not self.config_path.exists():
            raise ConfigurationError(f"Config file not found: {self.config_path}")

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                config_data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Error parsing config file {self.config_path}: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Cannot read config file {self.config_path}: {e}") from e

        if not isinstance(config_data, dict):
            raise ConfigurationError(f"Invalid config structure in {self.config_path}")

        return NotifierConfig(
            gotify=self._load_gotify(config_data.get('gotify')),
            discovery=self._load_discovery(config_data.get('discovery')),
        )

    def _load_gotify(self, gotify_data: Any) -> GotifyConfig:
        if not isinstance(gotify_data, dict):
            raise ConfigurationError(f"Missing 'gotify' section in {self.config_path}")

        server_url = self._require_string(gotify_data, 'server_url')
        token = self._require_string(gotify_data, 'token')

        return GotifyConfig(
            server_url=server_url.rstrip('/'),
            token=token,
            priority=self._validate_priority(gotify_data.get('priority', DEFAULT_PRIORITY)),
            timeout=int(self._validate_positive_number(
                gotify_data.get('timeout', DEFAULT_TIMEOUT), 'timeout', DEFAULT_TIMEOUT)),
        )

    def _load_discovery(self, discovery_data: Any) -> DiscoveryConfig:
        if discovery_data is None:
            return DiscoveryConfig()

        if not isinstance(discovery_data, dict):
            self.logger.warning(f"Invalid 'discovery' section in {self.config_path}. Using default configuration.")
            return DiscoveryConfig()

        subnet_prefix = discovery_data.get('subnet_prefix', DEFAULT_SUBNET_PREFIX)
        if not isinstance(subnet_prefix, str) or not subnet_prefix.strip():
            self.logger.warning(f"Invalid subnet_prefix: {subnet_prefix}. Using default: {DEFAULT_SUBNET_PREFIX}")
            subnet_prefix = DEFAULT_SUBNET_PREFIX

        return DiscoveryConfig(
            subnet_prefix=subnet_prefix.strip(),
            max_duration=self._validate_positive_number(
                discovery_data.get('max_duration', DEFAULT_MAX_DURATION), 'max_duration', DEFAULT_MAX_DURATION),
            retry_interval=self._validate_positive_number(
                discovery_data.get('retry_interval', DEFAULT_RETRY_INTERVAL), 'retry_interval', DEFAULT_RETRY_INTERVAL),
        )

    def _require_string(self, section: Dict[str, Any], key: str) -> str:
        value = section.get(key)
        if value is None or not str(value).strip():
            raise ConfigurationError(f"Missing required setting gotify.{key} in {self.config_path}")
        return str(value).strip()

    def _validate_positive_number(self, value: Any, field_name: str, default: float) -> float:
        """
        Validate that a value is a positive number.

        Args:
            value: Value to validate
            field_name: Name of the field for error messages
            default: Default value to use if validation fails

        Returns:
            Validated value or default
        """
        if isinstance(value, bool):
            self.logger.warning(f"Invalid {field_name}: {value}. Must be a number. Using default: {default}")
            return default
        try:
            number = float(value)
        except (ValueError, TypeError):
            self.logger.warning(f"Invalid {field_name}: {value}. Must be a number. Using default: {default}")
            return default

        if not math.isfinite(number):
            self.logger.warning(f"Invalid {field_name}: {value}. Must be finite. Using default: {default}")
            return default

        if number <= 0:
            self.logger.warning(f"Invalid {field_name}: {value}. Must be positive. Using default: {default}")
            return default
        return number

    def _validate_priority(self, value: Any) -> int:
        try:
            priority = int(value)
        except (ValueError, TypeError, OverflowError):
            self.logger.warning(f"Invalid priority: {value}. Using default: {DEFAULT_PRIORITY}")
            return DEFAULT_PRIORITY

        if not 0 <= priority <= 10:
            self.logger.warning(f"Priority {priority} outside 0-10. Using default: {DEFAULT_PRIORITY}")
            return DEFAULT_PRIORITY
        return priority

    def create_default_config(self) -> bool:
        """
        Write a template configuration file if none exists.

        Returns:
            bool: True if a file was written, False if one already existed
        """
        if self.config_path.exists():
            self.logger.warning(f"Config file already exists at {self.config_path}")
            return False

        default_config = {
            'gotify': {
                'server_url': 'https://gotify.example.com',
                'token': 'CHANGE_ME',
                'priority': DEFAULT_PRIORITY,
            },
            'discovery': {
                'subnet_prefix': DEFAULT_SUBNET_PREFIX,
                'max_duration': int(DEFAULT_MAX_DURATION),
                'retry_interval': int(DEFAULT_RETRY_INTERVAL),
            }
        }

        try:
            with open(self.config_path, 'w', encoding='utf-8') as f:
                yaml.dump(default_config, f, default_flow_style=False, indent=2, sort_keys=False)
        except OSError as e:
            raise ConfigurationError(f"Failed to create default config at {self.config_path}: {e}") from e

        self.logger.info(f"Created default config at {self.config_path}")
        return True
