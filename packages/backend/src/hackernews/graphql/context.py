"""
Per-request GraphQL context
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from strawberry.fastapi import BaseContext

from ..database.client import PersistenceClient
from ..database.connection import get_db_session


class GraphQLContext(BaseContext):
    """Context handed to every resolver; carries the request's persistence client."""

    def __init__(self, db: PersistenceClient):
        super().__init__()
        self.db = db


async def get_context(session: AsyncSession = Depends(get_db_session)) -> GraphQLContext:
    """Build a fresh context, and persistence client, for each request."""
    return GraphQLContext(db=PersistenceClient(session))
