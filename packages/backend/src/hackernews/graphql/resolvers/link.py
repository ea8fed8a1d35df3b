from __future__ import annotations

from typing import TYPE_CHECKING

from ...dbmodels import Comments
from ...logging import get_logger
from ..errors import InvalidArgument
from ..filters import compile_filter
from ..results import Err, Ok, Result
from ..validators import parse_id_lenient, validate_skip, validate_take

if TYPE_CHECKING:
    from ..context import GraphQLContext
    from ..types.comment import Comment
    from ..types.link import Link

logger = get_logger(__name__)


# Query resolvers
async def resolve_feed(
    context: GraphQLContext,
    filter_needle: str | None = None,
    skip: int | None = None,
    take: int | None = None,
) -> Result[list[Link]]:
    """
    Resolve a page of the feed.

    Pagination arguments are checked before anything is read; links come
    back in storage order.
    """
    where = compile_filter(filter_needle)
    try:
        take = validate_take(take)
        skip = validate_skip(skip)
    except InvalidArgument as e:
        logger.info("Rejected feed arguments", argument=e.argument, value=e.value)
        return Err(e)

    links = await context.db.link.find_many(where=where, skip=skip, take=take)

    from ..types.link import Link as LinkType

    return Ok([LinkType.from_model(link) for link in links])


async def resolve_link_by_id(context: GraphQLContext, id: str) -> Result[Link | None]:
    """Resolve a link by its ID; unknown or unparseable ids resolve to null."""
    key = parse_id_lenient(id)
    if key is None:
        logger.info("Unparseable link id", link_id=id)
        return Ok(None)

    link = await context.db.link.find_unique(key)
    if link is None:
        logger.info("Link not found", link_id=key)
        return Ok(None)

    from ..types.link import Link as LinkType

    return Ok(LinkType.from_model(link))


# Mutation resolvers
async def post_link(context: GraphQLContext, url: str, description: str) -> Result[Link]:
    link = await context.db.link.create({"url": url, "description": description})

    logger.info("Link created", link_id=link.id, url=link.url)

    from ..types.link import Link as LinkType

    return Ok(LinkType.from_model(link))


# Link field resolvers
async def resolve_link_comments(link: Link, context: GraphQLContext) -> Result[list[Comment]]:
    comments = await context.db.comment.find_many(
        where=Comments.link_id == link.key,
        order_by=[Comments.created_at.desc(), Comments.id.desc()],
    )

    from ..types.comment import Comment as CommentType

    return Ok([CommentType.from_model(comment) for comment in comments])
