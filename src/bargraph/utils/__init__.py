"""Utility helpers for bargraph."""

from .persistence import PydanticPersistence

__all__ = ["PydanticPersistence"]
