"""
Image CRUD operations for ranked voting.

Provides Create, Read, Update operations for ImageModel with
image-specific queries for fingerprint lookup, ranked pagination and
atomic counter increments.

Dependencies: sqlalchemy, picvoter.boundary.db.models
System role: Image persistence for the ranking store
"""

from typing import Sequence

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from picvoter.boundary.db.CRUD.base_crud import BaseCRUD
from picvoter.boundary.db.models.image_model import ImageModel
from picvoter.core.scoring import Score
from picvoter.models.image import VoteDirection


class ImageCRUD(BaseCRUD[ImageModel]):
    """
    CRUD operations for ImageModel.

    Extends BaseCRUD with ranked reads ordered by the sorting index and a
    single-statement counter increment that takes the row write lock.
    """

    def __init__(self) -> None:
        """Initialize ImageCRUD with ImageModel."""
        super().__init__(ImageModel)

    async def create_image(
        self,
        session: AsyncSession,
        filename: str,
        hash: str,
        image_id: str,
    ) -> ImageModel:
        """
        Create an image row with zeroed counters and score.

        Args:
            session: Async database session
            filename: Reference to externally stored content
            hash: Content fingerprint
            image_id: ULID minted by the caller

        Returns:
            Created ImageModel
        """
        return await self.create(
            session,
            id=image_id,
            filename=filename,
            hash=hash,
            confidence=0.0,
            sorting=0.0,
            upvotes=0,
            downvotes=0,
        )

    async def get_by_hash(
        self,
        session: AsyncSession,
        hash: str,
    ) -> Sequence[ImageModel]:
        """
        Retrieve all images sharing a content fingerprint, oldest id first.

        Args:
            session: Async database session
            hash: Content fingerprint

        Returns:
            Sequence of matching ImageModels (possibly empty)
        """
        stmt = (
            select(ImageModel)
            .where(ImageModel.hash == hash)
            .order_by(ImageModel.id)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_ranked(
        self,
        session: AsyncSession,
        limit: int,
        offset: int = 0,
    ) -> Sequence[ImageModel]:
        """
        Retrieve a page of images ordered by sorting, highest first.

        Ties are broken by id so pagination is deterministic.

        Args:
            session: Async database session
            limit: Maximum number of images to return
            offset: Number of images to skip

        Returns:
            Sequence of ImageModels in rank order
        """
        stmt = (
            select(ImageModel)
            .order_by(ImageModel.sorting.desc(), ImageModel.id.asc())
            .offset(offset)
            .limit(limit)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def increment_votes(
        self,
        session: AsyncSession,
        id: str,
        direction: VoteDirection,
    ) -> tuple[int, int] | None:
        """
        Add one vote to the counter matching direction.

        The increment is evaluated by the database, so concurrent callers
        never overwrite each other; the row stays locked until the
        surrounding transaction ends.

        Args:
            session: Async database session
            id: Image id
            direction: Which counter to increment

        Returns:
            (upvotes, downvotes) after the increment, None if id is unknown
        """
        column = ImageModel.upvotes if direction is VoteDirection.UP else ImageModel.downvotes
        stmt = (
            update(ImageModel)
            .where(ImageModel.id == id)
            .values({column: column + 1})
            .returning(ImageModel.upvotes, ImageModel.downvotes)
            .execution_options(synchronize_session=False)
        )
        result = await session.execute(stmt)
        row = result.one_or_none()
        if row is None:
            return None
        return row.upvotes, row.downvotes

    async def update_score(
        self,
        session: AsyncSession,
        id: str,
        score: Score,
    ) -> ImageModel | None:
        """
        Persist recomputed confidence and sorting.

        Args:
            session: Async database session
            id: Image id
            score: Values derived from the current counters

        Returns:
            Updated ImageModel if found, None otherwise
        """
        return await self.update_by_id(
            session,
            id,
            confidence=score.confidence,
            sorting=score.sorting,
        )


image_crud = ImageCRUD()
