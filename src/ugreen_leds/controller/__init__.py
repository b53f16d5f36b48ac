"""Controller capability interface and transport discovery."""

__all__ = [
    "ControllerFactory",
    "LedController",
    "LedStatus",
    "load_controller_factories",
    "open_controller",
]

from .base import ControllerFactory, LedController, LedStatus
from .discovery import load_controller_factories, open_controller
