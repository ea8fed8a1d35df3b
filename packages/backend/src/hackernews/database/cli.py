#!/usr/bin/env python3
"""
CLI entry point for Hackernews database migrations.
"""

import sys
from collections.abc import Callable
from pathlib import Path

import click

from alembic import command
from alembic.config import Config
from hackernews import __version__
from hackernews.logging import configure_logging, get_logger

logger = get_logger(__name__)

# packages/backend/alembic.ini
ALEMBIC_INI = Path(__file__).parents[3] / "alembic.ini"


def get_alembic_config() -> Config:
    """Get Alembic configuration."""
    if not ALEMBIC_INI.exists():
        raise FileNotFoundError(f"alembic.ini not found at {ALEMBIC_INI}")

    config = Config(str(ALEMBIC_INI))
    config.set_main_option("script_location", str(ALEMBIC_INI.parent / "alembic"))
    return config


def run_alembic(action: str, operation: Callable[[Config], None], **log_fields: object) -> None:
    """Run an Alembic command, logging the outcome and exiting non-zero on failure."""
    try:
        config = get_alembic_config()
        logger.info(f"Database {action} started", **log_fields)
        operation(config)
        logger.info(f"Database {action} completed successfully")
    except Exception as e:
        logger.error(f"Database {action} failed", error=str(e))
        sys.exit(1)


@click.group()
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
@click.version_option(version=__version__, prog_name="hackernews-migrate")
def main(log_level: str) -> None:
    """Hackernews database migration management."""
    configure_logging(debug=(log_level == "debug"))


@main.command()
@click.argument("revision", default="head")
def upgrade(revision: str) -> None:
    """Upgrade database to a revision (default: head)."""
    run_alembic("upgrade", lambda cfg: command.upgrade(cfg, revision), revision=revision)


@main.command()
@click.argument("revision", default="-1")
def downgrade(revision: str) -> None:
    """Downgrade database to a revision (default: -1)."""
    run_alembic("downgrade", lambda cfg: command.downgrade(cfg, revision), revision=revision)


@main.command()
@click.option("-m", "--message", required=True, help="Revision message")
@click.option("--autogenerate/--no-autogenerate", default=True, help="Auto-generate migration")
def revision(message: str, autogenerate: bool) -> None:
    """Create a new migration revision."""
    run_alembic(
        "revision",
        lambda cfg: command.revision(cfg, message=message, autogenerate=autogenerate),
        message=message,
        autogenerate=autogenerate,
    )


@main.command()
def current() -> None:
    """Show current database revision."""
    run_alembic("revision lookup", command.current)


@main.command()
def history() -> None:
    """Show migration history."""
    run_alembic("history listing", command.history)


if __name__ == "__main__":
    main()
