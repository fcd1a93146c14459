"""
Test suite for writes whose commit is slow to acknowledge.

AsyncSession.commit is wrapped so the commit reaches the database and the
acknowledgement then stalls past the operation timeout. Votes must not be
applied a second time by a retry; reads may still be retried.

System role: Verification of exactly-once vote application
"""

import asyncio

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from picvoter.application.services.image_store import ImageRankingStore
from picvoter.core.exceptions import CommitOutcomeUnknownError, StorageTimeoutError
from picvoter.models.image import VoteDirection

ACK_DELAY = 0.5


@pytest.fixture
def tight_store(session_factory) -> ImageRankingStore:
    """Store whose timeout is shorter than the delayed commit acknowledgement."""
    return ImageRankingStore(
        session_factory,
        operation_timeout=0.2,
        retry_attempts=3,
        retry_max_wait=0.01,
    )


@pytest.fixture
def commit_calls() -> list[int]:
    return []


@pytest.fixture
def slow_commit_ack(monkeypatch: pytest.MonkeyPatch, commit_calls: list[int]):
    """Make every commit land first and acknowledge ACK_DELAY seconds later."""
    original_commit = AsyncSession.commit

    async def commit_then_stall(self: AsyncSession) -> None:
        commit_calls.append(1)
        await original_commit(self)
        await asyncio.sleep(ACK_DELAY)

    def install() -> None:
        monkeypatch.setattr(AsyncSession, "commit", commit_then_stall)

    yield install
    monkeypatch.undo()


class TestSlowCommitAcknowledgement:
    """Test suite for timeouts that fire after the commit was sent."""

    @pytest.mark.asyncio
    async def test_record_vote_should_not_be_applied_twice(
        self,
        tight_store: ImageRankingStore,
        session_factory,
        slow_commit_ack,
        commit_calls: list[int],
    ) -> None:
        # Arrange
        image = await tight_store.insert("a.png", "h1")
        slow_commit_ack()

        # Act
        with pytest.raises(CommitOutcomeUnknownError) as exc_info:
            await tight_store.record_vote(image.id, VoteDirection.UP)

        # Assert
        assert len(commit_calls) == 1
        assert exc_info.value.operation == "record_vote"
        assert not isinstance(exc_info.value, StorageTimeoutError)

        stored = await ImageRankingStore(session_factory).get(image.id)
        assert (stored.upvotes, stored.downvotes) == (1, 0)

    @pytest.mark.asyncio
    async def test_insert_should_not_be_repeated(
        self,
        tight_store: ImageRankingStore,
        session_factory,
        slow_commit_ack,
        commit_calls: list[int],
    ) -> None:
        # Arrange
        slow_commit_ack()

        # Act
        with pytest.raises(CommitOutcomeUnknownError):
            await tight_store.insert("a.png", "h1")

        # Assert
        assert len(commit_calls) == 1
        assert len(await ImageRankingStore(session_factory).list_ranked()) == 1

    @pytest.mark.asyncio
    async def test_read_should_still_be_retried(
        self, tight_store: ImageRankingStore, slow_commit_ack, commit_calls: list[int]
    ) -> None:
        # Arrange
        image = await tight_store.insert("a.png", "h1")
        slow_commit_ack()

        # Act
        with pytest.raises(StorageTimeoutError):
            await tight_store.get(image.id)

        # Assert
        assert len(commit_calls) == 3
