"""Domain entities exposed by the service."""

from .greeting import Greeting

__all__ = ["Greeting"]
