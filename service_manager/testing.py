"""
Test helpers for swapping services in and out of a container.
"""

from contextlib import contextmanager
from typing import Any, Iterator, Mapping

from service_manager.container import ServiceContainer


@contextmanager
def overridden_services(container: ServiceContainer, services: Mapping[str, Any]) -> Iterator[ServiceContainer]:
    """
    Override services for the duration of a ``with`` block.

    On exit the container is restored, which reverts every overridden service,
    including ones overridden before the block was entered.
    """
    for name, service in services.items():
        container.override(name, service)
    try:
        yield container
    finally:
        container.restore()
