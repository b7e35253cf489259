"""End-to-end watch scenarios with a recording notifier."""

from unittest.mock import AsyncMock

import pytest

from procwatch.errors import ProcessQueryError
from procwatch.orchestrator import (
    EXIT_OK,
    EXIT_SPAWN_FAILED,
    EXIT_WATCH_ERROR,
    WatchOrchestrator,
    exit_code_for,
)
from procwatch.watchers import ByCommand, ByName, ByPid, CommandRunner, WatchResult
from tests.helpers.watch_fakes import FakeProcessTable


@pytest.mark.asyncio
async def test_unused_pid_sends_started_then_finished(notifier, indicator_factory):
    table = FakeProcessTable()
    orchestrator = WatchOrchestrator(
        notifier,
        poll_interval_seconds=0,
        lookup=table,
        indicator_factory=indicator_factory,
    )

    exit_code = await orchestrator.run(ByPid(999999))

    assert exit_code == EXIT_OK
    assert notifier.messages == [
        "Starting to monitor PID: 999999",
        "Process 999999 has finished.",
    ]
    assert table.pid_queries == [999999]


@pytest.mark.asyncio
async def test_failing_command_is_bracketed_by_notifications(notifier):
    orchestrator = WatchOrchestrator(notifier)

    exit_code = await orchestrator.run(ByCommand("sleep 1 && exit 3"))

    assert exit_code == 3
    assert notifier.messages == [
        "Starting command: 'sleep 1 && exit 3'",
        "Command 'sleep 1 && exit 3' has finished with exit code 3.",
    ]


@pytest.mark.asyncio
async def test_successful_command(notifier):
    orchestrator = WatchOrchestrator(notifier)

    exit_code = await orchestrator.run(ByCommand("true"))

    assert exit_code == EXIT_OK
    assert notifier.messages == ["Starting command: 'true'", "Command 'true' has finished."]


@pytest.mark.asyncio
async def test_spawn_failure_sends_nothing(notifier):
    orchestrator = WatchOrchestrator(
        notifier,
        command_runner=CommandRunner(shell="/nonexistent/bin/sh"),
    )

    exit_code = await orchestrator.run(ByCommand("true"))

    assert exit_code == EXIT_SPAWN_FAILED
    assert notifier.messages == []


@pytest.mark.asyncio
async def test_unmatched_name_terminates_immediately(notifier, indicator_factory):
    table = FakeProcessTable(name_results=[[]])
    orchestrator = WatchOrchestrator(
        notifier,
        poll_interval_seconds=0,
        lookup=table,
        indicator_factory=indicator_factory,
    )

    exit_code = await orchestrator.run(ByName("no-such-process-xyz"))

    assert exit_code == EXIT_OK
    assert notifier.messages == [
        "Monitoring processes named: no-such-process-xyz",
        "Processes 'no-such-process-xyz' have finished.",
    ]
    assert table.pid_queries == []


@pytest.mark.asyncio
async def test_name_lookup_failure_reports_error(notifier, indicator_factory):
    table = FakeProcessTable(name_results=[ProcessQueryError("lookup exploded")])
    orchestrator = WatchOrchestrator(
        notifier,
        poll_interval_seconds=0,
        lookup=table,
        indicator_factory=indicator_factory,
    )

    exit_code = await orchestrator.run(ByName("worker"))

    assert exit_code == EXIT_WATCH_ERROR
    assert notifier.messages == [
        "Monitoring processes named: worker",
        "Stopped monitoring processes 'worker': lookup exploded",
    ]


@pytest.mark.asyncio
async def test_notifications_are_awaited_in_order(notifier):
    order = []
    pid_watcher = AsyncMock()
    pid_watcher.watch.side_effect = lambda pid: order.append("watch") or WatchResult.terminated(polls=1)

    async def record(message):
        order.append(message)

    notifier.notify = record
    orchestrator = WatchOrchestrator(notifier, pid_watcher=pid_watcher)

    await orchestrator.run(ByPid(5))

    assert order == ["Starting to monitor PID: 5", "watch", "Process 5 has finished."]


@pytest.mark.asyncio
async def test_unknown_target_is_rejected(notifier):
    with pytest.raises(TypeError):
        await WatchOrchestrator(notifier).run("pid 5")


@pytest.mark.parametrize(
    ("result", "expected"),
    [
        (WatchResult.from_exit_code(0), 0),
        (WatchResult.from_exit_code(3), 3),
        (WatchResult.from_exit_code(-15), 143),
        (WatchResult.error("wait failed"), EXIT_WATCH_ERROR),
        (WatchResult.terminated(polls=1), EXIT_OK),
    ],
)
def test_exit_code_for(result, expected):
    assert exit_code_for(result) == expected
