"""
Translation of SQLAlchemy failures into the picvoter exception hierarchy.

Dependencies: sqlalchemy, picvoter.core.exceptions
System role: Keeps driver exceptions from leaking past the store
"""

from sqlalchemy.exc import DBAPIError, OperationalError, SQLAlchemyError

from picvoter.core.exceptions import StorageError, TransientStorageError

# serialization_failure, deadlock_detected, lock_not_available
_TRANSIENT_SQLSTATES = frozenset({"40001", "40P01", "55P03"})
_TRANSIENT_MESSAGES = (
    "database is locked",
    "database table is locked",
    "deadlock detected",
    "could not serialize access",
)


def is_transient(exc: SQLAlchemyError) -> bool:
    """Whether exc is contention or a lost connection rather than a hard failure."""
    if isinstance(exc, DBAPIError):
        if exc.connection_invalidated:
            return True
        sqlstate = getattr(exc.orig, "sqlstate", None) or getattr(exc.orig, "pgcode", None)
        if sqlstate in _TRANSIENT_SQLSTATES:
            return True
    if isinstance(exc, OperationalError):
        message = str(exc.orig if getattr(exc, "orig", None) is not None else exc).lower()
        return any(fragment in message for fragment in _TRANSIENT_MESSAGES)
    return False


def translate_db_error(exc: SQLAlchemyError, operation: str, **details) -> StorageError:
    """
    Map a SQLAlchemy exception to StorageError or TransientStorageError.

    Integrity violations are not handled here; callers that can attribute
    them to a specific row raise ImageConflictError themselves.

    Args:
        exc: Exception raised by SQLAlchemy
        operation: Store operation name for the error details
        **details: Extra context (e.g. image_id)

    Returns:
        StorageError: Exception to raise ``from exc``
    """
    details["error_type"] = type(exc).__name__
    error_cls = TransientStorageError if is_transient(exc) else StorageError
    return error_cls(f"Storage failure during {operation}", operation, details)
