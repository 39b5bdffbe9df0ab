"""
Configuration Factory - Centralized configuration for the service manager
Settings come from SERVICE_MANAGER_* environment variables, a dictionary, or
per-key overrides, and are validated before they take effect.
"""

import os
import logging
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Optional


DEFAULT_ENV_PREFIX = 'SERVICE_MANAGER_'

LOG_LEVELS = ('debug', 'info', 'warning', 'error', 'critical')

TRUTHY_VALUES = ('true', '1', 'yes', 'on')


class ConfigError(Exception):
    """Configuration-related errors"""
    pass


@dataclass
class ServiceManagerConfig:
    """Settings applied when the process-wide container is initialized"""

    log_level: str = 'info'
    legacy_falsy_cache: bool = False  # re-invoke factories whose cached value is falsy
    allow_reinitialize: bool = False  # let initialize() replace an existing container

    def __post_init__(self):
        if not isinstance(self.log_level, str) or self.log_level.lower() not in LOG_LEVELS:
            raise ConfigError(f"Invalid log_level: {self.log_level}")

        for flag in ('legacy_falsy_cache', 'allow_reinitialize'):
            if not isinstance(getattr(self, flag), bool):
                raise ConfigError(f"Invalid {flag}: {getattr(self, flag)}")

    @property
    def logging_level(self) -> int:
        """The log level as a ``logging`` module constant"""
        return getattr(logging, self.log_level.upper())


class ConfigurationFactory:
    """
    Loads and holds the service manager configuration.

    A single shared instance; overrides survive reloads until ``reset``.
    """

    _instance: Optional['ConfigurationFactory'] = None
    _config: Optional[ServiceManagerConfig] = None

    def __new__(cls) -> 'ConfigurationFactory':
        """Singleton pattern implementation"""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not hasattr(self, '_initialized'):
            self._logger = logging.getLogger('service_manager.config')
            self._overrides: Dict[str, Any] = {}
            self._initialized = True

    def load_from_environment(self, env_prefix: str = DEFAULT_ENV_PREFIX) -> ServiceManagerConfig:
        """
        Load configuration from environment variables.

        Reads ``LOG_LEVEL``, ``LEGACY_FALSY_CACHE`` and ``ALLOW_REINITIALIZE``
        under ``env_prefix``, then applies any overrides.

        Raises:
            ConfigError: If a value is invalid
        """
        def env_flag(key: str) -> bool:
            return os.environ.get(f"{env_prefix}{key}", '').lower() in TRUTHY_VALUES

        config = ServiceManagerConfig(
            log_level=os.environ.get(f"{env_prefix}LOG_LEVEL", 'info').lower(),
            legacy_falsy_cache=env_flag('LEGACY_FALSY_CACHE'),
            allow_reinitialize=env_flag('ALLOW_REINITIALIZE')
        )
        if self._overrides:
            config = replace(config, **self._overrides)

        self._config = config
        self._logger.info(f"Configuration loaded from environment (prefix {env_prefix!r})")
        return config

    def load_from_dict(self, config_dict: Dict[str, Any]) -> ServiceManagerConfig:
        """Load configuration from dictionary (useful for testing)."""
        self._config = ServiceManagerConfig(**config_dict)
        return self._config

    def override_setting(self, key: str, value: Any) -> 'ConfigurationFactory':
        """
        Override a specific configuration setting.

        The current configuration is only replaced once the new value passes
        validation; a rejected value is not kept.

        Returns:
            Self for method chaining

        Raises:
            ConfigError: If the key is unknown or the value is invalid
        """
        if key not in {field_info.name for field_info in fields(ServiceManagerConfig)}:
            raise ConfigError(f"Unknown setting: {key}")

        if self._config is not None:
            self._config = replace(self._config, **{key: value})
        else:
            # Validate now rather than on the next load
            replace(ServiceManagerConfig(), **{key: value})

        self._overrides[key] = value
        return self

    def is_loaded(self) -> bool:
        return self._config is not None

    def get_config(self) -> ServiceManagerConfig:
        """
        Get the current configuration.

        Raises:
            ConfigError: If no configuration has been loaded
        """
        if self._config is None:
            raise ConfigError("Configuration not loaded. Call load_from_environment() or load_from_dict() first.")
        return self._config

    def reset(self) -> 'ConfigurationFactory':
        """Reset the factory (useful for testing)"""
        self._config = None
        self._overrides.clear()
        return self


# Global factory instance
_config_factory = ConfigurationFactory()


def get_config() -> ServiceManagerConfig:
    """Get the global service manager configuration"""
    return _config_factory.get_config()


def load_config(env_prefix: str = DEFAULT_ENV_PREFIX) -> ServiceManagerConfig:
    """Load configuration from environment variables"""
    return _config_factory.load_from_environment(env_prefix)


def load_config_from_dict(config_dict: Dict[str, Any]) -> ServiceManagerConfig:
    """Load configuration from dictionary"""
    return _config_factory.load_from_dict(config_dict)


def override_config(key: str, value: Any) -> ConfigurationFactory:
    """Override a configuration setting"""
    return _config_factory.override_setting(key, value)


def reset_config() -> ConfigurationFactory:
    """Reset configuration (for testing)"""
    return _config_factory.reset()
