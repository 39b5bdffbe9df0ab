"""
Service Container for Dependency Injection

This module provides a lazy service container: a registry mapping names to
factory functions, each resolved at most once and cached, with support for
overriding and restoring registrations for test isolation.
"""

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Protocol

from service_manager.core.errors import (
    DuplicateServiceError,
    MissingBindingError,
    UndefinedServiceError
)
from service_manager.utils.path_utils import MISSING, read_path, split_path
from service_manager.utils.validation_utils import validate_service_name

logger = logging.getLogger(__name__)


class ServiceResolver(Protocol):
    """The read-only view of a container that factories receive."""

    def get(self, path: str, default: Any = None) -> Any: ...

    def exists(self, name: str) -> bool: ...


ServiceFactory = Callable[[ServiceResolver], Any]


class _Empty:
    """Marker for a binding whose factory has not been invoked yet."""

    def __repr__(self) -> str:
        return 'EMPTY'


EMPTY = _Empty()


def constant(value: Any) -> ServiceFactory:
    """Build a factory that always returns ``value``."""
    def factory(_container: ServiceResolver) -> Any:
        return value
    return factory


class Binding:
    """A factory and the instance it produced, if any."""

    __slots__ = ('factory', 'instance')

    def __init__(self, factory: ServiceFactory, instance: Any = EMPTY):
        self.factory = factory
        self.instance = instance

    @classmethod
    def of_value(cls, value: Any) -> 'Binding':
        """Create a constant binding with its cache already populated."""
        return cls(constant(value), value)

    def __repr__(self) -> str:
        return f"Binding(factory={getattr(self.factory, '__name__', self.factory)!r}, instance={self.instance!r})"


class ServiceContainer:
    """
    A lazy service container with override/restore support.

    Each name is bound to a factory taking the container. The factory runs on
    the first ``get`` and its result is cached. ``override`` swaps in a value
    and remembers what was there before; ``restore`` puts every overridden name
    back the way it was before its first override.

    Not thread-safe: two threads resolving an uncached service at the same time
    may both invoke its factory.
    """

    def __init__(self, factories: Optional[Mapping[str, ServiceFactory]] = None,
                 legacy_falsy_cache: bool = False):
        """
        Initialize the container. No factory is invoked.

        Args:
            factories: Mapping of service name -> factory
            legacy_falsy_cache: Treat falsy cached values as "not yet cached"
                and re-invoke their factories on every ``get``
        """
        self._services: Dict[str, Binding] = {}
        self._overridden: Dict[str, Optional[Binding]] = {}
        self._legacy_falsy_cache = legacy_falsy_cache

        for name, factory in (factories or {}).items():
            self._services[validate_service_name(name)] = Binding(factory)

    def _is_empty(self, binding: Binding) -> bool:
        if binding.instance is EMPTY:
            return True
        return self._legacy_falsy_cache and not binding.instance

    def get(self, path: str, default: Any = None) -> Any:
        """
        Get a service, or a nested property of it, creating it if necessary.

        ``None`` is treated differently at the two levels. A service that
        resolves to ``None`` gives ``default``. A property that exists and
        holds ``None`` is returned as ``None``; only a missing property (or a
        ``None`` partway along the path) gives ``default``.

        Args:
            path: Name of the service, or dotted path to a property of it
            default: Returned when the service resolves to ``None`` or the
                property path is missing

        Returns:
            Service instance or property value

        Raises:
            UndefinedServiceError: If the service name is not bound
        """
        name, segments = split_path(path)

        if not self.exists(name):
            raise UndefinedServiceError(f'Service "{name}" is not defined', details={'name': name})

        binding = self._services[name]
        if self._is_empty(binding):
            logger.debug(f"Creating instance for: {name}")
            binding.instance = binding.factory(self)

        instance = binding.instance
        if not segments:
            return default if instance is None else instance

        value = read_path(instance, segments)
        return default if value is MISSING else value

    def set(self, name: str, service: Any) -> None:
        """
        Register a service instance directly.

        Raises:
            DuplicateServiceError: If the name is already bound
        """
        validate_service_name(name)
        if self.exists(name):
            raise DuplicateServiceError(
                f'Service "{name}" already exists. '
                'Use ServiceContainer.override to override an existing service.',
                details={'name': name}
            )

        self._services[name] = Binding.of_value(service)
        logger.debug(f"Registered service: {name}")

    def exists(self, name: str) -> bool:
        """Check if a service is bound, whether or not it has been created."""
        return name in self._services

    def override(self, name: str, service: Any) -> None:
        """
        Replace a service with the given instance.

        The binding in place before the first override since the last
        ``restore`` is kept so ``restore`` can put it back.
        """
        validate_service_name(name)
        if name not in self._overridden:
            self._overridden[name] = self._services.get(name)

        self._services[name] = Binding.of_value(service)
        logger.debug(f"Overrode service: {name}")

    def recreate(self, name: str) -> None:
        """
        Override a service with a fresh instance from its current factory.

        Use ``restore`` to reset the service to its previous binding.

        Raises:
            MissingBindingError: If the name is not bound
        """
        binding = self._services.get(name)
        if binding is None:
            raise MissingBindingError(
                f'Cannot recreate service "{name}": it has no binding',
                details={'name': name}
            )

        logger.debug(f"Recreating service: {name}")
        self.override(name, binding.factory(self))

    def reinitialize(self) -> None:
        """Drop every cached instance. Factories and overrides are kept."""
        for binding in self._services.values():
            binding.instance = EMPTY
        logger.debug(f"Reinitialized {len(self._services)} services")

    def restore(self) -> None:
        """
        Restore overridden services.
        Useful for resetting state after tests.
        """
        for name, binding in self._overridden.items():
            if binding is None:
                # Not bound before it was overridden
                self._services.pop(name, None)
            else:
                self._services[name] = binding

        if self._overridden:
            logger.debug(f"Restored {len(self._overridden)} services")
        self._overridden.clear()

    def is_cached(self, name: str) -> bool:
        """Check if a bound service currently holds a created instance."""
        binding = self._services.get(name)
        return binding is not None and not self._is_empty(binding)

    def is_overridden(self, name: str) -> bool:
        """Check if a service has been overridden since the last ``restore``."""
        return name in self._overridden

    def get_service_names(self) -> List[str]:
        """Get list of all bound service names"""
        return list(self._services.keys())

    def get_all_services(self) -> Dict[str, str]:
        """Get a dictionary of all bound service names and their state."""
        services = {}
        for name, binding in self._services.items():
            if self._is_empty(binding):
                description = "Not instantiated"
            else:
                description = type(binding.instance).__name__

            if self.is_overridden(name):
                description = f"{description} (overridden)"
            services[name] = description

        return services

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.exists(name)

    def __repr__(self) -> str:
        cached = sum(1 for name in self._services if self.is_cached(name))
        return (f"ServiceContainer(services={len(self._services)}, instances={cached}, "
                f"overridden={len(self._overridden)})")
