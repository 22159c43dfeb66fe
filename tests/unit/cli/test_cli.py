"""Unit tests for the ``aircraft-events`` command line."""
from __future__ import annotations

import asyncio
import json
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from aircraft_events.adapters.sqlalchemy import SqlAlchemyDeliveryLedger, SqlAlchemySessionFactory
from aircraft_events.cli import main
from conftest import make_event


@pytest.fixture(autouse=True)
def _no_log_config() -> Iterator[None]:
    with patch("aircraft_events.cli.JsonLoggerFactory.configure"):
        yield


@pytest.fixture
def database_url(tmp_path: Path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'events.db'}"


@pytest.fixture
def runner(database_url: str) -> CliRunner:
    return CliRunner(env={"DATABASE_URL": database_url, "EVENT_PUBLISHER": "noop", "LOG_LEVEL": "INFO"})


def _invoke(runner: CliRunner, tmp_path: Path, *args: str):
    return runner.invoke(main, [*args, "--env-file", str(tmp_path / "missing.env")])


def _seed(database_url: str, count: int, attempts: int = 0) -> list[str]:
    async def run() -> list[str]:
        ids = []
        async with SqlAlchemySessionFactory(database_url) as sessions:
            ledger = SqlAlchemyDeliveryLedger(sessions)
            for i in range(count):
                event = make_event(aircraft_id=f"ac-{i}")
                await ledger.ensure_delivery_record(event)
                for _ in range(attempts):
                    await ledger.mark_attempt(event.id)
                ids.append(event.id)
        return ids

    return asyncio.run(run())


def _records(database_url: str, ids: list[str]):
    async def run():
        async with SqlAlchemySessionFactory(database_url) as sessions:
            ledger = SqlAlchemyDeliveryLedger(sessions)
            return [await ledger.get(i) for i in ids]

    return asyncio.run(run())


def _summary(output: str) -> dict[str, int]:
    return json.loads(output.strip().splitlines()[-1])


class TestInitDb:
    def test_creates_table(self, runner: CliRunner, tmp_path: Path, database_url: str) -> None:
        result = _invoke(runner, tmp_path, "init-db")
        assert result.exit_code == 0, result.output
        assert "domain_event_deliveries ready" in result.output
        assert _seed(database_url, 1)

    def test_is_idempotent(self, runner: CliRunner, tmp_path: Path) -> None:
        assert _invoke(runner, tmp_path, "init-db").exit_code == 0
        assert _invoke(runner, tmp_path, "init-db").exit_code == 0


class TestReplay:
    def test_replays_pending_events(self, runner: CliRunner, tmp_path: Path, database_url: str) -> None:
        _invoke(runner, tmp_path, "init-db")
        ids = _seed(database_url, 3)

        result = _invoke(runner, tmp_path, "replay")

        assert result.exit_code == 0, result.output
        assert _summary(result.output) == {"scanned": 3, "replayed": 3, "failed": 0, "invalidPayload": 0}
        assert all(r.published for r in _records(database_url, ids))

    def test_dry_run_leaves_rows_untouched(self, runner: CliRunner, tmp_path: Path, database_url: str) -> None:
        _invoke(runner, tmp_path, "init-db")
        ids = _seed(database_url, 2)

        result = _invoke(runner, tmp_path, "replay", "--dry-run")

        assert result.exit_code == 0, result.output
        assert _summary(result.output) == {"scanned": 2, "replayed": 0, "failed": 0, "invalidPayload": 0}
        assert [r.attempts for r in _records(database_url, ids)] == [0, 0]

    def test_limit_option(self, runner: CliRunner, tmp_path: Path, database_url: str) -> None:
        _invoke(runner, tmp_path, "init-db")
        _seed(database_url, 4)

        result = _invoke(runner, tmp_path, "replay", "--limit", "1")

        assert _summary(result.output)["scanned"] == 1

    def test_max_attempts_option(self, runner: CliRunner, tmp_path: Path, database_url: str) -> None:
        _invoke(runner, tmp_path, "init-db")
        _seed(database_url, 2, attempts=2)

        result = _invoke(runner, tmp_path, "replay", "--max-attempts", "2")

        assert _summary(result.output)["scanned"] == 0

    def test_env_limit_is_default(self, tmp_path: Path, database_url: str) -> None:
        runner = CliRunner(
            env={"DATABASE_URL": database_url, "EVENT_PUBLISHER": "noop", "ADMIN_JOB_EVENT_REPLAY_LIMIT": "2"}
        )
        _invoke(runner, tmp_path, "init-db")
        _seed(database_url, 3)

        result = _invoke(runner, tmp_path, "replay")

        assert _summary(result.output)["scanned"] == 2

    def test_missing_table_exits_one(self, runner: CliRunner, tmp_path: Path) -> None:
        result = _invoke(runner, tmp_path, "replay")
        assert result.exit_code == 1

    def test_zero_limit_is_usage_error(self, runner: CliRunner, tmp_path: Path) -> None:
        result = _invoke(runner, tmp_path, "replay", "--limit", "0")
        assert result.exit_code == 2

    def test_invalid_publisher_setting_fails(self, tmp_path: Path, database_url: str) -> None:
        runner = CliRunner(env={"DATABASE_URL": database_url, "EVENT_PUBLISHER": "carrier-pigeon"})
        result = _invoke(runner, tmp_path, "replay")
        assert result.exit_code == 1
        assert "event_publisher" in result.output
        assert "Traceback" not in result.output
