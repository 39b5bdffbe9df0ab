"""
Flask integration for the service container.
"""

import logging
from typing import Any, Optional

from flask import Flask, current_app

from service_manager.container import ServiceContainer

logger = logging.getLogger(__name__)

EXTENSION_NAME = 'service_manager'


class ServiceManagerExtension:
    """
    Attaches a ServiceContainer to a Flask app.

    Uses the process-wide container unless one is given.
    """

    def __init__(self, app: Optional[Flask] = None, container: Optional[ServiceContainer] = None):
        self.container = container
        if app is not None:
            self.init_app(app)

    def init_app(self, app: Flask) -> None:
        if self.container is None:
            from container import instance
            self.container = instance()

        app.extensions[EXTENSION_NAME] = self.container
        logger.debug(f"Attached service container to app: {app.name}")


def current_container() -> ServiceContainer:
    """Get the container attached to the active Flask app."""
    try:
        return current_app.extensions[EXTENSION_NAME]
    except KeyError:
        raise RuntimeError(
            "No service container attached to this app. Call ServiceManagerExtension.init_app(app) first."
        ) from None


def get_service(path: str, default: Any = None) -> Any:
    """Resolve a service or dotted property path through the active app's container."""
    return current_container().get(path, default)
