"""Command-line entry point: replay stuck event deliveries, create the ledger table."""
from __future__ import annotations

import asyncio
import json

import click

from aircraft_events.adapters.sqlalchemy import SqlAlchemyDeliveryLedger, SqlAlchemySessionFactory, create_schema
from aircraft_events.application.outbox import ReplayJob, ReplayOptions, ReplaySummary
from aircraft_events.application.publishing import create_event_publisher
from aircraft_events.config import ConfigError, DotenvSettingsLoader, EventSettings, load_event_settings
from aircraft_events.kernel.errors import describe_error
from aircraft_events.observability.logging import DEFAULT_SENSITIVE_FIELDS, JsonLoggerFactory, get_logger

logger = get_logger(__name__)


async def run_replay(settings: EventSettings, options: ReplayOptions) -> ReplaySummary:
    """Wire ledger + publisher from *settings* and run one replay pass."""
    publisher = create_event_publisher(settings)
    try:
        async with SqlAlchemySessionFactory(settings.database_url) as sessions:
            job = ReplayJob(
                SqlAlchemyDeliveryLedger(sessions),
                publisher,
                options,
                publish_timeout=settings.event_publish_timeout_seconds,
            )
            return await job.run()
    finally:
        await publisher.aclose()


async def _init_db(settings: EventSettings) -> None:
    async with SqlAlchemySessionFactory(settings.database_url) as sessions:
        await create_schema(sessions.engine)


def _settings(env_file: str) -> EventSettings:
    try:
        settings = load_event_settings(loaders=[DotenvSettingsLoader(env_file)])
    except ConfigError as exc:
        logger.error("config.invalid", error=exc.to_dict())
        raise click.ClickException(str(exc)) from exc
    JsonLoggerFactory.configure(settings.log_level, DEFAULT_SENSITIVE_FIELDS)
    return settings


@click.group()
def main() -> None:
    """Aircraft dashboard domain-event delivery tooling."""


@main.command()
@click.option("--dry-run", is_flag=True, help="List replay candidates without publishing")
@click.option("--limit", type=click.IntRange(min=1), default=None, help="Max rows per run [ADMIN_JOB_EVENT_REPLAY_LIMIT]")
@click.option(
    "--max-attempts",
    type=click.IntRange(min=1),
    default=None,
    help="Retry ceiling [ADMIN_JOB_EVENT_REPLAY_MAX_ATTEMPTS]",
)
@click.option("--env-file", default=".env", show_default=True, help="Dotenv file to load")
def replay(dry_run: bool, limit: int | None, max_attempts: int | None, env_file: str) -> None:
    """Re-drive unpublished domain events through the configured publisher.

    Exits 0 even when individual events fail; only a crash exits non-zero.
    """
    settings = _settings(env_file)
    options = ReplayOptions(
        dry_run=dry_run,
        replay_limit=limit or settings.admin_job_event_replay_limit,
        max_attempts=max_attempts or settings.admin_job_event_replay_max_attempts,
    )
    try:
        summary = asyncio.run(run_replay(settings, options))
    except Exception as exc:
        logger.error("replay.crashed", error=describe_error(exc), exc_info=True)
        raise SystemExit(1) from exc

    logger.info("replay.summary", summary=summary.to_dict())
    click.echo(json.dumps(summary.to_dict()))


@main.command("init-db")
@click.option("--env-file", default=".env", show_default=True, help="Dotenv file to load")
def init_db(env_file: str) -> None:
    """Create the delivery ledger table if it does not exist."""
    settings = _settings(env_file)
    asyncio.run(_init_db(settings))
    click.echo("domain_event_deliveries ready")


__all__ = ["main", "run_replay"]
