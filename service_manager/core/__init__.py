"""
Core package for the service manager.
"""

from .errors import (
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
    'ErrorCode',
    'ServiceManagerError',
    'UndefinedServiceError',
    'MissingBindingError',
    'DuplicateServiceError',
    'InvalidServiceNameError',
    'AlreadyInitializedError',
    'ConfigFileError'
]
