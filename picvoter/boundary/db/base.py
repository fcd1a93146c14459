"""
SQLAlchemy declarative base and common mixins.

Provides base class for all ORM models and the ULID primary key mixin.

Dependencies: sqlalchemy, picvoter.core.identifiers
System role: Foundation for all database models
"""

from sqlalchemy import String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from picvoter.core.identifiers import IMAGE_ID_LENGTH


class Base(DeclarativeBase):
    """
    SQLAlchemy declarative base for ORM model registration.

    All database models inherit from this class to ensure they're
    registered with the metadata used by migrations.
    """

    pass
class ULIDMixin:
    """
    Mixin providing a ULID primary key.

    Stored as a fixed 26-character string so ids sort by creation time and
    stay portable across databases. Ids are minted by the caller with
    new_image_id() before the insert, so a colliding id can be reported.

    Attributes:
        id: ULID primary key, immutable once assigned
    """

    id: Mapped[str] = mapped_column(
        String(IMAGE_ID_LENGTH),
        primary_key=True,
        nullable=False,
    )
