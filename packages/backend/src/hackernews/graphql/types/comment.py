"""
Comment GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

from ...dbmodels import Comments
from ..results import unwrap

if TYPE_CHECKING:
    from .link import Link


@strawberry.type
class Comment:
    """Comment type for GraphQL API."""

    id: strawberry.ID
    created_at: str
    body: str
    link_id: strawberry.Private[int]

    @classmethod
    def from_model(cls, comment: Comments) -> "Comment":
        return cls(
            id=strawberry.ID(str(comment.id)),
            created_at=comment.created_at.isoformat(),
            body=comment.body,
            link_id=comment.link_id,
        )

    @strawberry.field
    async def link(self, info: strawberry.Info) -> Annotated["Link", strawberry.lazy(".link")]:
        """Get the link this comment was posted on."""
        from ..resolvers.comment import resolve_comment_link

        return unwrap(await resolve_comment_link(self, info.context))
