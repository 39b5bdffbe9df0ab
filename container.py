"""
Process-wide service container.

Holds one ServiceContainer for the lifetime of the process. ``initialize``
creates it once; calling it again fails unless re-initialization is explicitly
allowed. There is no teardown: tests should use the container's own
``override``/``restore`` and ``reinitialize``.
"""

import logging
from typing import Mapping, Optional

from config_factory import ConfigurationFactory, ServiceManagerConfig
from service_manager.container import ServiceContainer, ServiceFactory
from service_manager.core.errors import AlreadyInitializedError

logger = logging.getLogger('service_manager.container')

# Global container instance for the process
_app_container: Optional[ServiceContainer] = None
_is_initialized = False


def _current_config() -> ServiceManagerConfig:
    config_factory = ConfigurationFactory()
    if not config_factory.is_loaded():
        return config_factory.load_from_environment()
    return config_factory.get_config()


def initialize(factories: Optional[Mapping[str, ServiceFactory]] = None,
               allow_reinitialize: bool = False) -> ServiceContainer:
    """
    Create the process-wide service container.

    Args:
        factories: Mapping of service name -> factory
        allow_reinitialize: Replace an existing container instead of failing

    Returns:
        The new container

    Raises:
        AlreadyInitializedError: If already initialized and re-initialization
            is allowed neither here nor in configuration
    """
    global _app_container, _is_initialized

    config = _current_config()
    if _is_initialized and not (allow_reinitialize or config.allow_reinitialize):
        raise AlreadyInitializedError('Service manager is already initialized')

    logging.getLogger('service_manager').setLevel(config.logging_level)

    _app_container = ServiceContainer(factories or {}, legacy_falsy_cache=config.legacy_falsy_cache)
    _is_initialized = True
    logger.info(f"Service manager initialized with {len(_app_container.get_service_names())} services")
    return _app_container


def instance() -> ServiceContainer:
    """Get the process-wide container, initializing an empty one if needed"""
    if _app_container is None:
        return initialize()
    return _app_container


def get_container() -> ServiceContainer:
    """Get the global application service container"""
    return instance()


def is_initialized() -> bool:
    """Check if the process-wide container has been created"""
    return _is_initialized
