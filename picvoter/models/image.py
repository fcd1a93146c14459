"""
Image domain models and schemas.

Read model returned by the ranking store and the vote direction enum.

Dependencies: pydantic
System role: Image store contracts
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class VoteDirection(str, Enum):
    """Direction of a single vote event."""

    UP = "up"
    DOWN = "down"


class Image(BaseModel):
    """Snapshot of one images row as committed."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: str = Field(description="26-character ULID")
    filename: str = Field(description="Reference to externally stored image content")
    hash: str = Field(description="Content fingerprint used for de-duplication")
    confidence: float = Field(description="Wilson lower bound of the upvote share")
    sorting: float = Field(description="Rank key for feed ordering")
    upvotes: int
    downvotes: int
