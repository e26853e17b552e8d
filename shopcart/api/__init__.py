"""API層モジュール."""
from .dependencies import Dependencies

__all__ = ["Dependencies"]
