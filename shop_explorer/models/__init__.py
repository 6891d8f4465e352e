"""Database models."""

from shop_explorer.models.base import Base
from shop_explorer.models.store import Store

__all__ = [
    "Base",
    "Store",
]
