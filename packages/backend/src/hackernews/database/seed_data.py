"""
Reusable seed data functions for database initialization.
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..dbmodels import Links
from ..logging import get_logger

logger = get_logger(__name__)

DEMO_LINKS: list[dict[str, str]] = [
    {"description": "GraphQL", "url": "https://graphql.org"},
    {"description": "Strawberry, a Python GraphQL library", "url": "https://strawberry.rocks"},
]


async def ensure_link(db: AsyncSession, *, url: str, description: str) -> int:
    """
    Ensure a link with the given url exists in the database.

    Creates the link if no link with this url exists yet, otherwise returns
    the existing link's ID.

    Args:
        db: Database session
        url: Link url (used to detect existing rows)
        description: Link description for a newly created row

    Returns:
        ID of the link (existing or newly created)
    """
    stmt = select(Links).where(Links.url == url).limit(1)
    result = await db.execute(stmt)
    existing_link = result.scalar_one_or_none()

    if existing_link:
        logger.debug("Link already exists", link_id=existing_link.id, url=url)
        return existing_link.id

    new_link = Links(url=url, description=description)
    db.add(new_link)
    await db.commit()
    await db.refresh(new_link)

    logger.info("Created new link", link_id=new_link.id, url=url)

    return new_link.id


async def seed_initial_data(db: AsyncSession, links: list[dict[str, str]] | None = None) -> list[int]:
    """
    Seed sample links.

    Args:
        db: Database session
        links: Links to seed (defaults to DEMO_LINKS)

    Returns:
        IDs of the seeded links
    """
    logger.info("Starting database seeding")

    link_ids = [
        await ensure_link(db, url=link["url"], description=link["description"])
        for link in (links if links is not None else DEMO_LINKS)
    ]

    logger.info("Database seeding completed", links=len(link_ids))
    return link_ids
