"""
Validation utilities for service registration.
"""

from typing import Any

from service_manager.core.errors import InvalidServiceNameError


def validate_service_name(name: Any) -> str:
    """
    Validate that a service name can be addressed by a dotted path.

    Args:
        name: Candidate service name

    Returns:
        The validated name

    Raises:
        InvalidServiceNameError: If the name is not a non-empty string without dots
    """
    if not isinstance(name, str):
        raise InvalidServiceNameError(
            f"Service name must be a string, got {type(name).__name__}",
            details={'name': repr(name)}
        )

    if not name:
        raise InvalidServiceNameError("Service name cannot be empty")

    if '.' in name:
        raise InvalidServiceNameError(
            f'Service name "{name}" cannot contain "." (dots separate property paths)',
            details={'name': name}
        )

    return name
