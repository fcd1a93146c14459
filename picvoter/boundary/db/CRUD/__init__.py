"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from picvoter.boundary.db.CRUD import image_crud

    image = await image_crud.get_by_id(db, image_id)
"""

from picvoter.boundary.db.CRUD.base_crud import BaseCRUD
from picvoter.boundary.db.CRUD.image_crud import ImageCRUD, image_crud

__all__ = [
    "BaseCRUD",
    "ImageCRUD",
    "image_crud",
]
