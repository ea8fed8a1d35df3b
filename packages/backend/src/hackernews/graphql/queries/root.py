"""
Root GraphQL query definitions
"""

import strawberry

from ..results import unwrap
from ..types.comment import Comment
from ..types.link import Link


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def info(self) -> str:
        """Describe the API."""
        from ..resolvers.info import resolve_info

        return unwrap(await resolve_info())

    @strawberry.field
    async def feed(
        self,
        info: strawberry.Info,
        filter_needle: str | None = None,
        skip: int | None = None,
        take: int | None = None,
    ) -> list[Link]:
        """Get a page of links, optionally filtered by description or url."""
        from ..resolvers.link import resolve_feed

        return unwrap(await resolve_feed(info.context, filter_needle, skip, take))

    @strawberry.field
    async def comment(self, info: strawberry.Info, id: strawberry.ID) -> Comment | None:
        """Get a comment by ID."""
        from ..resolvers.comment import resolve_comment_by_id

        return unwrap(await resolve_comment_by_id(info.context, id))

    @strawberry.field
    async def link(self, info: strawberry.Info, id: strawberry.ID) -> Link | None:
        """Get a link by ID."""
        from ..resolvers.link import resolve_link_by_id

        return unwrap(await resolve_link_by_id(info.context, id))
