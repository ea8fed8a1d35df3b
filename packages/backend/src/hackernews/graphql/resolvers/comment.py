from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy.exc import IntegrityError

from ...database.client import RecordNotFoundError
from ...logging import get_logger
from ..errors import InvalidReference, NotFound, translate_persistence_error
from ..results import Err, Ok, Result
from ..validators import parse_id, parse_id_lenient

if TYPE_CHECKING:
    from ..context import GraphQLContext
    from ..types.comment import Comment
    from ..types.link import Link

logger = get_logger(__name__)


# Query resolvers
async def resolve_comment_by_id(context: GraphQLContext, id: str) -> Result[Comment | None]:
    """Resolve a comment by its ID; unknown or unparseable ids resolve to null."""
    key = parse_id_lenient(id)
    if key is None:
        logger.info("Unparseable comment id", comment_id=id)
        return Ok(None)

    comment = await context.db.comment.find_unique(key)
    if comment is None:
        logger.info("Comment not found", comment_id=key)
        return Ok(None)

    from ..types.comment import Comment as CommentType

    return Ok(CommentType.from_model(comment))


# Mutation resolvers
async def post_comment_on_link(
    context: GraphQLContext, link_id: str, body: str
) -> Result[Comment]:
    """
    Post a comment on an existing link.

    The link id must be made of digits only. A link that turns out not to
    exist at write time is reported with the same error as a malformed id.
    """
    key = parse_id(link_id)
    if key is None:
        logger.info("Rejected comment on malformed link id", link_id=link_id)
        return Err(InvalidReference(link_id))

    try:
        comment = await context.db.comment.create({"link_id": key, "body": body})
    except IntegrityError as e:
        error = translate_persistence_error(e, link_id)
        if error is None:
            raise
        logger.warning("Comment references missing link", link_id=link_id)
        return Err(error)

    logger.info("Comment created", comment_id=comment.id, link_id=key)

    from ..types.comment import Comment as CommentType

    return Ok(CommentType.from_model(comment))


# Comment field resolvers
async def resolve_comment_link(comment: Comment, context: GraphQLContext) -> Result[Link]:
    """Resolve the link of a comment. A missing link means corrupted data."""
    try:
        link = await context.db.link.find_unique_or_throw(comment.link_id)
    except RecordNotFoundError:
        logger.error(
            "Comment points at a missing link", comment_id=comment.id, link_id=comment.link_id
        )
        return Err(NotFound("Link", comment.link_id))

    from ..types.link import Link as LinkType

    return Ok(LinkType.from_model(link))
