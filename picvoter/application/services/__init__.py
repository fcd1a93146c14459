"""Service orchestrators."""

from .image_store import ImageRankingStore

__all__ = [
    "ImageRankingStore",
]
