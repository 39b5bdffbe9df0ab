"""
Loaders that turn files into service factories.
"""

from .yaml_loader import load_factories_from_yaml, read_yaml_mapping, yaml_config_factory

__all__ = [
    'load_factories_from_yaml',
    'read_yaml_mapping',
    'yaml_config_factory'
]
