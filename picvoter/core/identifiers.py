"""
Image identifiers and content fingerprints.

Dependencies: python-ulid, xxhash
System role: Id generation for new rows and de-duplication fingerprints
"""

import xxhash
from ulid import ULID

IMAGE_ID_LENGTH = 26
FINGERPRINT_MAX_LENGTH = 20


def new_image_id() -> str:
    """Return a fresh 26-character ULID, lexicographically ordered by creation time."""
    return str(ULID())


def content_fingerprint(data: bytes) -> str:
    """
    Fingerprint image bytes for the images.hash column.

    XXH64 with seed 0, rendered as an unsigned decimal integer, so values
    stay comparable with rows ingested before this package existed and never
    exceed FINGERPRINT_MAX_LENGTH characters.

    Args:
        data: Raw image content

    Returns:
        str: Decimal string of the 64-bit digest
    """
    return str(xxhash.xxh64_intdigest(data, seed=0))
