"""インメモリ・ショッピングカートサービスのパッケージ."""
from . import domain

__all__ = ["domain"]
