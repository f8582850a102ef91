"""Marconi (message queuing) connector."""

from .api import MarconiApi, QueueApi

__all__ = ["MarconiApi", "QueueApi"]
