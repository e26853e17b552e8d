"""ストア実装モジュール."""
from .in_memory_cart_store import InMemoryCartStore

__all__ = ["InMemoryCartStore"]
