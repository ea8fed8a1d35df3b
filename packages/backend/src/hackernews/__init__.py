"""
Hackernews Backend
GraphQL API of a link-sharing site
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
