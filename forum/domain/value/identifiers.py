"""Strongly typed identifiers for forum entities.

Post ids are assigned by the document store, comment ids are generated
locally and are only unique within their parent post. User ids are the
opaque client-side identities used for ownership and likes.
"""

from typing import NewType

PostId = NewType("PostId", str)
CommentId = NewType("CommentId", str)
UserId = NewType("UserId", str)
AdminId = NewType("AdminId", str)
