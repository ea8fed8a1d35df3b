"""
Root GraphQL mutation definitions
"""

import strawberry

from ..results import unwrap
from ..types.comment import Comment
from ..types.link import Link


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="postLink")
    async def post_link(self, info: strawberry.Info, url: str, description: str) -> Link:
        """Submit a new link."""
        from ..resolvers.link import post_link

        return unwrap(await post_link(info.context, url, description))

    @strawberry.mutation(name="postCommentOnLink")
    async def post_comment_on_link(
        self, info: strawberry.Info, link_id: strawberry.ID, body: str
    ) -> Comment:
        """Comment on an existing link."""
        from ..resolvers.comment import post_comment_on_link

        return unwrap(await post_comment_on_link(info.context, link_id, body))
