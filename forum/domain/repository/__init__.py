"""Repository interfaces for the forum domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from forum.domain.repository.admin import AdminRepository
from forum.domain.repository.post import PostRepository

__all__ = [
    "PostRepository",
    "AdminRepository",
]
