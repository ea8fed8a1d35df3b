"""
Unit tests for link resolver functions
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
import strawberry
from sqlalchemy.exc import OperationalError

from hackernews.graphql.errors import InvalidArgument
from hackernews.graphql.resolvers.info import API_INFO, resolve_info
from hackernews.graphql.resolvers.link import (
    post_link,
    resolve_feed,
    resolve_link_by_id,
    resolve_link_comments,
)
from hackernews.graphql.results import Err, Ok
from hackernews.graphql.types.link import Link


@pytest.fixture
def mock_context():
    """Create a mock GraphQL context with a mocked persistence client."""
    context = MagicMock()
    context.db.link.find_many = AsyncMock(return_value=[])
    context.db.link.find_unique = AsyncMock(return_value=None)
    context.db.link.create = AsyncMock()
    context.db.comment.find_many = AsyncMock(return_value=[])
    return context


@pytest.mark.asyncio
async def test_info():
    assert await resolve_info() == Ok(API_INFO)
    assert API_INFO == "This is the API of a Hackernews Clone"


class TestResolveFeed:
    """Tests for resolve_feed."""

    @pytest.mark.asyncio
    async def test_defaults(self, mock_context, make_link):
        mock_context.db.link.find_many.return_value = [make_link(1), make_link(2, "Python")]

        result = await resolve_feed(mock_context)

        assert isinstance(result, Ok)
        assert [link.id for link in result.value] == ["1", "2"]
        kwargs = mock_context.db.link.find_many.await_args.kwargs
        assert kwargs["skip"] == 0
        assert kwargs["take"] == 30
        # Storage order: no explicit sort is requested
        assert "order_by" not in kwargs

    @pytest.mark.asyncio
    @pytest.mark.parametrize("take", [1, 2, 25, 49, 50])
    async def test_take_within_bounds(self, mock_context, take):
        result = await resolve_feed(mock_context, take=take, skip=5)

        assert isinstance(result, Ok)
        kwargs = mock_context.db.link.find_many.await_args.kwargs
        assert kwargs["take"] == take
        assert kwargs["skip"] == 5

    @pytest.mark.asyncio
    @pytest.mark.parametrize("take", [0, -1, 51, 1000])
    async def test_take_out_of_bounds(self, mock_context, take):
        result = await resolve_feed(mock_context, take=take)

        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidArgument)
        assert result.error.value == take
        assert "[1, 50]" in result.error.message
        mock_context.db.link.find_many.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_negative_skip(self, mock_context):
        result = await resolve_feed(mock_context, skip=-1, take=10)

        assert isinstance(result, Err)
        assert result.error.argument == "skip"
        mock_context.db.link.find_many.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_filter_is_passed_through(self, mock_context):
        await resolve_feed(mock_context, filter_needle="Graph")

        where = mock_context.db.link.find_many.await_args.kwargs["where"]
        assert "links.description LIKE" in str(where)
        assert "links.url LIKE" in str(where)
        assert set(where.compile().params.values()) == {"Graph"}


class TestResolveLinkById:
    """Tests for resolve_link_by_id."""

    @pytest.mark.asyncio
    async def test_found(self, mock_context, make_link):
        mock_context.db.link.find_unique.return_value = make_link(42, "GraphQL")

        result = await resolve_link_by_id(mock_context, "42")

        assert result.value.id == "42"
        assert result.value.description == "GraphQL"
        mock_context.db.link.find_unique.assert_awaited_once_with(42)

    @pytest.mark.asyncio
    async def test_absent_is_null(self, mock_context):
        result = await resolve_link_by_id(mock_context, "7")

        assert result == Ok(None)

    @pytest.mark.asyncio
    async def test_lenient_parse_on_read_path(self, mock_context, make_link):
        """Trailing garbage is ignored when reading, unlike when posting comments."""
        mock_context.db.link.find_unique.return_value = make_link(42)

        result = await resolve_link_by_id(mock_context, "42abc")

        assert result.value.id == "42"
        mock_context.db.link.find_unique.assert_awaited_once_with(42)

    @pytest.mark.asyncio
    async def test_unparseable_id_never_reaches_persistence(self, mock_context):
        result = await resolve_link_by_id(mock_context, "abc")

        assert result == Ok(None)
        mock_context.db.link.find_unique.assert_not_awaited()


class TestPostLink:
    """Tests for post_link."""

    @pytest.mark.asyncio
    async def test_creates_link(self, mock_context, make_link):
        mock_context.db.link.create.return_value = make_link(3, "Strawberry", "https://strawberry.rocks")

        result = await post_link(mock_context, url="https://strawberry.rocks", description="Strawberry")

        assert result.value.id == "3"
        assert result.value.url == "https://strawberry.rocks"
        mock_context.db.link.create.assert_awaited_once_with(
            {"url": "https://strawberry.rocks", "description": "Strawberry"}
        )

    @pytest.mark.asyncio
    async def test_persistence_failure_propagates(self, mock_context):
        mock_context.db.link.create.side_effect = OperationalError("INSERT", {}, Exception("down"))

        with pytest.raises(OperationalError):
            await post_link(mock_context, url="https://example.com", description="Example")


class TestResolveLinkComments:
    """Tests for resolve_link_comments."""

    @pytest.mark.asyncio
    async def test_comments_of_parent(self, mock_context, make_comment):
        mock_context.db.comment.find_many.return_value = [
            make_comment(2, link_id=1, body="newer"),
            make_comment(1, link_id=1, body="older", age=60),
        ]
        link = Link(id=strawberry.ID("1"), description="GraphQL", url="https://graphql.org", key=1)

        result = await resolve_link_comments(link, mock_context)

        assert [comment.body for comment in result.value] == ["newer", "older"]
        kwargs = mock_context.db.comment.find_many.await_args.kwargs
        assert str(kwargs["where"]) == "comments.link_id = :link_id_1"
        assert kwargs["where"].compile().params == {"link_id_1": 1}
        assert str(kwargs["order_by"][0]) == "comments.created_at DESC"
