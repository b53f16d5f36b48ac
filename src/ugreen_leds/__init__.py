"""Command-line control of the status LEDs on UGREEN NAS appliances."""

__all__ = ["__version__"]

__version__ = "0.1.0"
