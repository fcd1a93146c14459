"""Pydantic schemas shared with callers of the image store."""

from picvoter.models.image import Image, VoteDirection

__all__ = ["Image", "VoteDirection"]
