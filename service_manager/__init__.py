"""
service_manager - a lazy service container with override/restore for test isolation.
"""

from .container import Binding, ServiceContainer, ServiceFactory, ServiceResolver, constant
from .core.errors import (
    ErrorCode,
    ServiceManagerError,
    UndefinedServiceError,
    MissingBindingError,
    DuplicateServiceError,
    InvalidServiceNameError,
    AlreadyInitializedError,
    ConfigFileError
)

__all__ = [
    'Binding',
    'ServiceContainer',
    'ServiceFactory',
    'ServiceResolver',
    'constant',
    'ErrorCode',
    'ServiceManagerError',
    'UndefinedServiceError',
    'MissingBindingError',
    'DuplicateServiceError',
    'InvalidServiceNameError',
    'AlreadyInitializedError',
    'ConfigFileError'
]
