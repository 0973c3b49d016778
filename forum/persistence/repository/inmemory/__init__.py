"""In-memory repository implementations."""

from .admin import InMemoryAdminRepository
from .post import InMemoryPostRepository

__all__ = [
    "InMemoryAdminRepository",
    "InMemoryPostRepository",
]
