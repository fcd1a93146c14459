"""
Database models package.

Exports:
  - ImageModel: Image ORM model

Dependencies: sqlalchemy, picvoter.boundary.db.base
System role: Database model definitions for domain entities
"""

from picvoter.boundary.db.models.image_model import ImageModel

__all__ = ["ImageModel"]
