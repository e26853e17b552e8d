"""インフラストラクチャ層モジュール."""
from .stores import InMemoryCartStore

__all__ = ["InMemoryCartStore"]
