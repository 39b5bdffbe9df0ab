"""
Core error definitions for the service manager

Provides error codes and the exception hierarchy raised by the container,
the process-wide accessor and the loaders. None of them depend on other modules.
"""

from enum import Enum
from typing import Dict, Optional


class ErrorCode(Enum):
    """Standardized error codes for the service manager."""

    # Resolution Errors
    UNDEFINED_SERVICE = "UNDEFINED_SERVICE"
    MISSING_BINDING = "MISSING_BINDING"

    # Registration Errors
    DUPLICATE_SERVICE = "DUPLICATE_SERVICE"
    INVALID_SERVICE_NAME = "INVALID_SERVICE_NAME"

    # Lifecycle Errors
    ALREADY_INITIALIZED = "ALREADY_INITIALIZED"

    # Loader Errors
    INVALID_CONFIG_FILE = "INVALID_CONFIG_FILE"


class ServiceManagerError(Exception):
    """Base exception for all service manager errors."""

    code = ErrorCode.UNDEFINED_SERVICE

    def __init__(self, message: str, details: Optional[Dict] = None, code: Optional[ErrorCode] = None):
        if code is not None:
            self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class UndefinedServiceError(ServiceManagerError):
    """Raised when resolving a name that has no binding."""
    code = ErrorCode.UNDEFINED_SERVICE


class MissingBindingError(ServiceManagerError):
    """Raised when recreating a service that has no binding to take a factory from."""
    code = ErrorCode.MISSING_BINDING


class DuplicateServiceError(ServiceManagerError):
    """Raised when setting a name that is already bound."""
    code = ErrorCode.DUPLICATE_SERVICE


class InvalidServiceNameError(ServiceManagerError):
    """Raised when a service name is empty, not a string or contains a dot."""
    code = ErrorCode.INVALID_SERVICE_NAME


class AlreadyInitializedError(ServiceManagerError):
    """Raised when the process-wide container is initialized twice."""
    code = ErrorCode.ALREADY_INITIALIZED


class ConfigFileError(ServiceManagerError):
    """Raised when a YAML service file has an unusable structure."""
    code = ErrorCode.INVALID_CONFIG_FILE
