"""
YAML loaders for service factories.

Handles reading YAML files into values the container can serve, either as a
single lazily-loaded configuration service or as a set of constant services.
"""

import logging
from typing import Any, Dict

import yaml

from service_manager.container import ServiceFactory, ServiceResolver, constant
from service_manager.core.errors import ConfigFileError

logger = logging.getLogger(__name__)


def read_yaml_mapping(yaml_file_path: str) -> Dict[str, Any]:
    """
    Load a YAML file whose root is a mapping.

    Raises:
        FileNotFoundError: If the YAML file doesn't exist
        yaml.YAMLError: If YAML parsing fails
        ConfigFileError: If the root is not a mapping
    """
    try:
        with open(yaml_file_path, 'r', encoding='utf-8') as file:
            data = yaml.safe_load(file)
    except FileNotFoundError:
        logger.error(f"YAML file not found: {yaml_file_path}")
        raise
    except yaml.YAMLError as e:
        logger.error(f"YAML parsing error in {yaml_file_path}: {e}")
        raise

    # An empty document loads as None
    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ConfigFileError(
            f"YAML root must be a dictionary in {yaml_file_path}",
            details={'path': str(yaml_file_path), 'type': type(data).__name__}
        )

    return data


def yaml_config_factory(yaml_file_path: str) -> ServiceFactory:
    """
    Build a factory that loads a YAML mapping when the service is first resolved.

    Example:
        container = ServiceContainer({'config': yaml_config_factory('settings.yaml')})
        container.get('config.database.host', 'localhost')
    """
    def factory(_container: ServiceResolver) -> Dict[str, Any]:
        data = read_yaml_mapping(yaml_file_path)
        logger.debug(f"Loaded {len(data)} config keys from {yaml_file_path}")
        return data
    return factory


def load_factories_from_yaml(yaml_file_path: str) -> Dict[str, ServiceFactory]:
    """
    Load a YAML mapping of service name -> value as constant factories.

    The result can be passed to ``ServiceContainer`` or ``initialize``.
    """
    data = read_yaml_mapping(yaml_file_path)
    factories = {str(name): constant(value) for name, value in data.items()}
    logger.info(f"Loaded {len(factories)} services from {yaml_file_path}")
    return factories
