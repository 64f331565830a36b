"""Payment, fraud-check and notification services built around ports and adapters."""

__version__ = "0.1.0"