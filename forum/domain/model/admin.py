"""Admin account entity."""

from datetime import datetime

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import AdminId


class AdminAccount(DomainModel):
    """Privileged identity allowed to pin and delete any content.

    Only a salted hash of the password is stored.
    """

    id: AdminId = Field(min_length=1)
    name: str = Field(min_length=1)
    password_hash: str
    created_at: datetime = Field(default_factory=datetime.now)
