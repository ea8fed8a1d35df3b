#!/usr/bin/env python3
"""
Main CLI entry point for the Hackernews backend server.
"""

import os
import sys

import click
import uvicorn

from hackernews import __version__
from hackernews.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="hackernews")
def cli() -> None:
    """Hackernews CLI - run the server and seed the database."""
    pass


@cli.command()
@click.option(
    "--host",
    default="0.0.0.0",
    help="Host to bind to (default: 0.0.0.0)",
)
@click.option(
    "--port",
    default=4000,
    type=int,
    help="Port to bind to (default: 4000)",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the Hackernews API server."""
    configure_logging(debug=(log_level == "debug"))

    logger.info(
        "Starting Hackernews API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )

    # The app reads its settings from the environment when it is imported
    if log_level == "debug":
        os.environ["HACKERNEWS_DEBUG"] = "true"
        os.environ["HACKERNEWS_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("HACKERNEWS_DEBUG", "false")
        os.environ.setdefault("HACKERNEWS_LOG_LEVEL", log_level)

    try:
        uvicorn.run(
            "hackernews.api.app:app",
            host=host,
            port=port,
            reload=reload,
            log_level=log_level,
            access_log=True,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command()
def seed() -> None:
    """Insert the demo links into the database."""
    import asyncio

    from hackernews.database.connection import get_async_session
    from hackernews.database.seed_data import seed_initial_data

    configure_logging()

    async def do_seed():
        async with get_async_session() as db:
            try:
                link_ids = await seed_initial_data(db)
            except Exception as e:
                logger.error("Failed to seed database", error=str(e))
                click.echo(f"✗ Error seeding database: {e}", err=True)
                sys.exit(1)

        click.echo(f"✓ Seeded {len(link_ids)} links: {', '.join(str(i) for i in link_ids)}")

    asyncio.run(do_seed())


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
