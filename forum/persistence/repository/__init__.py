"""Firestore repository implementations."""

from forum.persistence.repository.admin import FirestoreAdminRepository
from forum.persistence.repository.post import FirestorePostRepository

__all__ = [
    "FirestoreAdminRepository",
    "FirestorePostRepository",
]
