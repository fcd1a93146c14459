"""
Image ranking store.

Owns the images table: inserts new images, applies vote events, keeps
confidence and sorting consistent with the vote counters, and serves
ranked pages for feed reads.

Every operation runs in its own transaction, bounded by
database.operation_timeout and retried on transient storage failures.
A vote is one transaction: increment, recompute, persist. Any failure
before the commit rolls all three back and is safe to retry; writes are
never retried once their commit has been sent.

Dependencies: sqlalchemy, tenacity, picvoter.boundary.db, picvoter.core
System role: Image ranking use case orchestration
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential_jitter,
)

from picvoter.boundary.db.CRUD.image_crud import ImageCRUD, image_crud
from picvoter.boundary.db.connection import get_async_session_factory
from picvoter.boundary.db.errors import translate_db_error
from picvoter.boundary.db.models.image_model import FILENAME_MAX_LENGTH
from picvoter.configs import Settings, get_settings
from picvoter.core.exceptions import (
    CommitOutcomeUnknownError,
    ImageConflictError,
    ImageNotFoundError,
    PicvoterException,
    StorageTimeoutError,
    TransientStorageError,
    ValidationError,
)
from picvoter.core.identifiers import FINGERPRINT_MAX_LENGTH, new_image_id
from picvoter.core.scoring import ScoringPolicy
from picvoter.models.image import Image, VoteDirection
from picvoter.observability.log_utils import (
    log_exception_with_context,
    log_with_context,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 20


class ImageRankingStore:
    """Durable store of images, their vote counters and rank keys."""

    def __init__(
        self,
        session_factory: async_sessionmaker,
        scoring: ScoringPolicy | None = None,
        crud: ImageCRUD = image_crud,
        operation_timeout: float = 10.0,
        retry_attempts: int = 3,
        retry_max_wait: float = 1.0,
        max_page_size: int = 100,
    ) -> None:
        """
        Initialize the store.

        Args:
            session_factory: Factory producing one AsyncSession per operation
            scoring: Policy deriving confidence/sorting from counters
            crud: Image CRUD implementation
            operation_timeout: Seconds allowed per attempt
            retry_attempts: Attempts for transient storage failures
            retry_max_wait: Upper bound on backoff between attempts
            max_page_size: Cap applied to list_ranked limits
        """
        self._session_factory = session_factory
        self._scoring = scoring or ScoringPolicy()
        self._crud = crud
        self._operation_timeout = operation_timeout
        self._retry_attempts = retry_attempts
        self._retry_max_wait = retry_max_wait
        self._max_page_size = max_page_size

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        session_factory: async_sessionmaker | None = None,
    ) -> "ImageRankingStore":
        """
        Build a store from application settings.

        Args:
            settings: Settings to use; the cached application settings by default
            session_factory: Overrides the settings-backed session factory

        Returns:
            ImageRankingStore: Configured store
        """
        settings = settings or get_settings()
        db_config = settings.database
        return cls(
            session_factory=session_factory or get_async_session_factory(),
            scoring=ScoringPolicy(z=settings.scoring.z),
            operation_timeout=db_config.operation_timeout,
            retry_attempts=db_config.retry_attempts,
            retry_max_wait=db_config.retry_max_wait,
            max_page_size=settings.scoring.max_page_size,
        )

    async def insert(self, filename: str, hash: str) -> Image:
        """
        Create a new image with zeroed counters and score.

        Args:
            filename: Reference to externally stored content (1-200 chars)
            hash: Content fingerprint (1-20 chars)

        Returns:
            Image: The committed row

        Raises:
            ValidationError: If filename or hash is empty or too long
            ImageConflictError: If the generated id already exists
            StorageError: On persistence failure
            CommitOutcomeUnknownError: If the commit failed or timed out
        """
        _require_text("filename", filename, FILENAME_MAX_LENGTH)
        _require_text("hash", hash, FINGERPRINT_MAX_LENGTH)

        async def work(session: AsyncSession) -> Image:
            image_id = new_image_id()
            try:
                image = await self._crud.create_image(
                    session, filename=filename, hash=hash, image_id=image_id
                )
            except IntegrityError as e:
                raise ImageConflictError(image_id) from e
            return Image.model_validate(image)

        image = await self._run("insert", work, replay_safe=False)
        log_with_context(
            logger,
            logging.INFO,
            "Image inserted",
            image_id=image.id,
            filename=filename,
            hash=hash,
        )
        return image

    async def get(self, image_id: str) -> Image:
        """
        Look up one image.

        Raises:
            ImageNotFoundError: If image_id does not exist
            StorageError: On persistence failure
        """

        async def work(session: AsyncSession) -> Image:
            image = await self._crud.get_by_id(session, image_id)
            if image is None:
                raise ImageNotFoundError(image_id)
            return Image.model_validate(image)

        return await self._run("get", work, image_id=image_id)

    async def find_by_hash(self, hash: str) -> list[Image]:
        """Return every image carrying the fingerprint, oldest id first."""

        async def work(session: AsyncSession) -> list[Image]:
            images = await self._crud.get_by_hash(session, hash)
            return [Image.model_validate(image) for image in images]

        return await self._run("find_by_hash", work, hash=hash)

    async def list_ranked(self, limit: int = DEFAULT_PAGE_SIZE, offset: int = 0) -> list[Image]:
        """
        Return a page of images ordered by sorting descending, then id.

        Args:
            limit: Page size (at least 1, capped at max_page_size)
            offset: Number of ranked images to skip (at least 0)

        Returns:
            list[Image]: Images in non-increasing sorting order

        Raises:
            ValidationError: If limit or offset is out of range
            StorageError: On persistence failure
        """
        if limit < 1:
            raise ValidationError("limit must be at least 1", field="limit")
        if offset < 0:
            raise ValidationError("offset must not be negative", field="offset")
        limit = min(limit, self._max_page_size)

        async def work(session: AsyncSession) -> list[Image]:
            images = await self._crud.get_ranked(session, limit=limit, offset=offset)
            return [Image.model_validate(image) for image in images]

        return await self._run("list_ranked", work, limit=limit, offset=offset)

    async def record_vote(self, image_id: str, direction: VoteDirection | str) -> Image:
        """
        Apply one vote and recompute the image's score.

        The counter increment, the score recomputation and its write share
        one transaction; concurrent votes on the same image serialize on the
        row lock taken by the increment, so no vote is lost.

        Args:
            image_id: Image to vote on
            direction: VoteDirection or its value ("up" / "down")

        Returns:
            Image: The row as committed after this vote

        Raises:
            ValidationError: If direction is not up or down
            ImageNotFoundError: If image_id does not exist (nothing is written)
            StorageError: On persistence failure before commit (nothing is written)
            CommitOutcomeUnknownError: If the commit failed or timed out; the
                vote may have been applied and is not retried
        """
        try:
            direction = VoteDirection(direction)
        except ValueError as e:
            raise ValidationError(
                f"Unknown vote direction: {direction!r}", field="direction"
            ) from e

        async def work(session: AsyncSession) -> Image:
            counters = await self._crud.increment_votes(session, image_id, direction)
            if counters is None:
                raise ImageNotFoundError(image_id)
            upvotes, downvotes = counters
            score = self._scoring.score(upvotes, downvotes)
            image = await self._crud.update_score(session, image_id, score)
            if image is None:
                raise ImageNotFoundError(image_id)
            return Image.model_validate(image)

        image = await self._run(
            "record_vote",
            work,
            replay_safe=False,
            image_id=image_id,
            direction=direction.value,
        )
        log_with_context(
            logger,
            logging.DEBUG,
            "Vote recorded",
            image_id=image_id,
            direction=direction.value,
            upvotes=image.upvotes,
            downvotes=image.downvotes,
            sorting=image.sorting,
        )
        return image

    async def _run(
        self,
        operation: str,
        work: Callable[[AsyncSession], Awaitable[T]],
        replay_safe: bool = True,
        **context,
    ) -> T:
        """
        Run work in a transaction, retrying transient storage failures.

        Writes that must not be applied twice pass replay_safe=False: once
        their commit has been sent, a failure or timeout raises
        CommitOutcomeUnknownError, which is never retried.
        """
        retrying = AsyncRetrying(
            retry=retry_if_exception_type(TransientStorageError),
            stop=stop_after_attempt(self._retry_attempts),
            wait=wait_exponential_jitter(initial=0.05, max=self._retry_max_wait, jitter=0.05),
            before_sleep=lambda retry_state: logger.warning(
                f"{__name__}:{operation} - Retry {retry_state.attempt_number}/"
                f"{self._retry_attempts} after transient storage error"
            ),
            reraise=True,
        )
        try:
            return await retrying(self._attempt, operation, work, replay_safe, context)
        except (ImageNotFoundError, ValidationError):
            raise
        except PicvoterException as e:
            log_exception_with_context(
                logger, f"Image store {operation} failed", e, operation=operation, **context
            )
            raise

    async def _attempt(
        self,
        operation: str,
        work: Callable[[AsyncSession], Awaitable[T]],
        replay_safe: bool,
        context: dict,
    ) -> T:
        progress = _AttemptProgress()
        try:
            return await asyncio.wait_for(
                self._transaction(operation, work, replay_safe, context, progress),
                timeout=self._operation_timeout,
            )
        except asyncio.TimeoutError as e:
            if progress.committing and not replay_safe:
                raise CommitOutcomeUnknownError(
                    f"{operation} timed out after its commit was sent",
                    operation,
                    dict(context),
                ) from e
            raise StorageTimeoutError(
                f"{operation} exceeded {self._operation_timeout}s",
                operation,
                dict(context),
            ) from e

    async def _transaction(
        self,
        operation: str,
        work: Callable[[AsyncSession], Awaitable[T]],
        replay_safe: bool,
        context: dict,
        progress: "_AttemptProgress",
    ) -> T:
        async with self._session_factory() as session:
            try:
                result = await work(session)
                progress.committing = True
                await session.commit()
            except SQLAlchemyError as e:
                error = translate_db_error(e, operation, **context)
                if progress.committing and not replay_safe:
                    raise CommitOutcomeUnknownError(
                        f"Commit of {operation} failed, outcome unknown",
                        operation,
                        error.details,
                    ) from e
                raise error from e
            return result


@dataclass
class _AttemptProgress:
    """How far one attempt got; set before the commit is sent."""

    committing: bool = False


def _require_text(field: str, value: str, max_length: int) -> None:
    if not isinstance(value, str) or not value:
        raise ValidationError(f"{field} must be a non-empty string", field=field)
    if len(value) > max_length:
        raise ValidationError(
            f"{field} exceeds {max_length} characters",
            field=field,
            details={"length": len(value)},
        )
