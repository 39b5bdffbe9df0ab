"""
Container package for dependency injection.
"""

from .service_container import (
    Binding,
    ServiceContainer,
    ServiceFactory,
    ServiceResolver,
    constant
)

__all__ = [
    'Binding',
    'ServiceContainer',
    'ServiceFactory',
    'ServiceResolver',
    'constant'
]
