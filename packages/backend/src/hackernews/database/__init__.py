"""
Database module for the Hackernews backend
"""

from .client import PersistenceClient, RecordNotFoundError
from .connection import get_async_session, init_database

__all__ = ["PersistenceClient", "RecordNotFoundError", "get_async_session", "init_database"]
