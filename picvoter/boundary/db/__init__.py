"""
Database boundary layer: ORM models, CRUD operations, connection management
and schema migrations.

Exports:
  - Base, ULIDMixin: Model building blocks
  - create_engine_from_config(), get_async_engine(), get_async_session_factory()
  - ImageModel: Image ORM model
  - BaseCRUD, ImageCRUD, image_crud: CRUD classes and singleton
  - apply_migrations(), current_revision(): Schema evolution

Dependencies: sqlalchemy, alembic, picvoter.configs
System role: Database adapter providing persistent storage for images
and their vote counters.
"""

from picvoter.boundary.db.base import Base, ULIDMixin
from picvoter.boundary.db.connection import (
    create_engine_from_config,
    get_async_engine,
    get_async_session_factory,
)
from picvoter.boundary.db.models.image_model import ImageModel
from picvoter.boundary.db.CRUD import BaseCRUD, ImageCRUD, image_crud
from picvoter.boundary.db.migrations import apply_migrations, current_revision

__all__ = [
    # Base classes
    "Base",
    "ULIDMixin",
    # Connection
    "create_engine_from_config",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "ImageModel",
    # CRUD
    "BaseCRUD",
    "ImageCRUD",
    "image_crud",
    # Migrations
    "apply_migrations",
    "current_revision",
]
