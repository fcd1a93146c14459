"""
Image ORM model for ranked voting.

Maps the images table as of the latest migration revision.

Dependencies: sqlalchemy, picvoter.boundary.db.base
System role: Image persistence for vote counters and rank keys
"""

from sqlalchemy import Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from picvoter.boundary.db.base import Base, ULIDMixin
from picvoter.core.identifiers import FINGERPRINT_MAX_LENGTH

FILENAME_MAX_LENGTH = 200


class ImageModel(Base, ULIDMixin):
    """
    Image ORM model.

    One row per ingested image. Counters only ever grow; confidence and
    sorting are rewritten together with every counter change.

    Attributes:
        id: ULID primary key (auto-generated)
        filename: Reference to externally stored image content
        hash: Content fingerprint for de-duplication detection
        confidence: Wilson lower bound of the upvote share
        sorting: Rank key for descending feed reads (indexed)
        upvotes: Number of up votes received
        downvotes: Number of down votes received
    """

    __tablename__ = "images"

    filename: Mapped[str] = mapped_column(
        String(FILENAME_MAX_LENGTH),
        nullable=False,
        doc="Reference to externally stored image content",
    )

    hash: Mapped[str] = mapped_column(
        String(FINGERPRINT_MAX_LENGTH),
        nullable=False,
        doc="Content fingerprint",
    )

    confidence: Mapped[float] = mapped_column(
        Float,
        nullable=False,
        default=0.0,
        server_default="0",
    )

    sorting: Mapped[float] = mapped_column(
        Float,
        nullable=False,
        default=0.0,
        server_default="0",
        index=True,
    )

    upvotes: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        server_default="0",
    )

    downvotes: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        server_default="0",
    )

    def __repr__(self) -> str:
        return (
            f"<ImageModel id={self.id} up={self.upvotes} down={self.downvotes} "
            f"sorting={self.sorting}>"
        )
