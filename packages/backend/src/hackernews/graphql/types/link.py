"""
Link GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

from ...dbmodels import Links
from ..results import unwrap

if TYPE_CHECKING:
    from .comment import Comment


@strawberry.type
class Link:
    """Link type for GraphQL API."""

    id: strawberry.ID
    description: str
    url: str
    key: strawberry.Private[int]

    @classmethod
    def from_model(cls, link: Links) -> "Link":
        return cls(
            id=strawberry.ID(str(link.id)),
            description=link.description,
            url=link.url,
            key=link.id,
        )

    @strawberry.field
    async def comments(
        self, info: strawberry.Info
    ) -> list[Annotated["Comment", strawberry.lazy(".comment")]]:
        """Get comments on this link, most recent first."""
        from ..resolvers.link import resolve_link_comments

        return unwrap(await resolve_link_comments(self, info.context))
