"""
picvoter: persistent ranked-voting image store.

Usage:
    from picvoter import ImageRankingStore, VoteDirection

    store = ImageRankingStore.from_settings()
    image = await store.insert("a.png", content_fingerprint(data))
    await store.record_vote(image.id, VoteDirection.UP)
"""

from picvoter.application.services.image_store import ImageRankingStore
from picvoter.core.exceptions import (
    CommitOutcomeUnknownError,
    ImageConflictError,
    ImageNotFoundError,
    PicvoterException,
    StorageError,
    StorageTimeoutError,
    TransientStorageError,
    ValidationError,
)
from picvoter.core.identifiers import content_fingerprint
from picvoter.models.image import Image, VoteDirection

__all__ = [
    "ImageRankingStore",
    "Image",
    "VoteDirection",
    "content_fingerprint",
    "PicvoterException",
    "ValidationError",
    "ImageNotFoundError",
    "ImageConflictError",
    "StorageError",
    "TransientStorageError",
    "StorageTimeoutError",
    "CommitOutcomeUnknownError",
]
