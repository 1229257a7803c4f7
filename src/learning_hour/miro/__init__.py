"""Miro whiteboard integration."""

from .builder import BoardBuilder
from .client import MiroClient
from .layout import ContentSizer

__all__ = ["BoardBuilder", "MiroClient", "ContentSizer"]
