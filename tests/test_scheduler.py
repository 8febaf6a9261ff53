""" Tests for the periodic synchronization scheduler """

import asyncio
import dataclasses

import pytest

from ntpsync.engine import Synchronizer
from ntpsync.scheduler import Scheduler


@pytest.mark.asyncio
async def test_ticks_until_stopped():
    ticks = []

    async def callback():
        ticks.append(len(ticks))

    scheduler = Scheduler(callback=callback, interval=0.01)
    assert scheduler.start() is True
    await asyncio.sleep(0.055)
    assert scheduler.stop() is True

    count = len(ticks)
    assert count >= 3
    await asyncio.sleep(0.03)
    assert len(ticks) == count


@pytest.mark.asyncio
async def test_start_and_stop_are_idempotent():

    async def callback():
        pass

    scheduler = Scheduler(callback=callback, interval=10)
    assert scheduler.running is False
    assert scheduler.stop() is False

    assert scheduler.start() is True
    task = scheduler.task
    assert scheduler.start() is False
    assert scheduler.task is task

    assert scheduler.stop() is True
    assert scheduler.task is None
    assert scheduler.running is False
    assert scheduler.stop() is False

    await asyncio.sleep(0)
    assert task.cancelled()


@pytest.mark.asyncio
async def test_does_not_fire_before_interval():
    ticks = []

    async def callback():
        ticks.append(1)

    scheduler = Scheduler(callback=callback, interval=10)
    scheduler.start()
    await asyncio.sleep(0.02)
    scheduler.stop()

    assert ticks == []


@pytest.mark.asyncio
async def test_scheduled_failures_never_escape(config, clock, make_provider):
    synchronizer = Synchronizer(
        config=dataclasses.replace(config, sync_interval=10, history=2),
        provider=make_provider({
            host: (lambda: OSError('down')) for host in ['a.example', 'b.example', 'c.example']
        }),
        clock=clock
    )

    assert synchronizer.start() is True
    while synchronizer.get_history().lifetime_error_count < 3:
        await asyncio.sleep(0.005)
    synchronizer.stop()

    history = synchronizer.get_history()
    assert synchronizer.running is False
    assert history.lifetime_error_count >= 3
    assert history.consecutive_error_count == history.lifetime_error_count
    assert len(history.errors) == 2


@pytest.mark.asyncio
async def test_deferred_start_runs_initial_sync(config, clock, make_provider):
    provider = make_provider({'a.example': clock.value + 5})

    synchronizer = await asyncio.get_running_loop().run_in_executor(
        None, lambda: Synchronizer(
            config=dataclasses.replace(config, sync_on_creation=True, auto_start=True),
            provider=provider,
            clock=clock
        )
    )
    assert synchronizer.initial_sync is None
    assert synchronizer.running is False

    assert synchronizer.start() is True
    assert await synchronizer.initial_sync is True
    assert synchronizer.start() is False
    assert synchronizer.get_history().deltas[0].offset == 5
    synchronizer.stop()


@pytest.mark.asyncio
async def test_context_manager_stops_on_exit(config, clock, make_provider):
    synchronizer = Synchronizer(config=config, provider=make_provider({}), clock=clock)

    async with synchronizer as running:
        assert running is synchronizer
        assert synchronizer.running is True

    assert synchronizer.running is False


@pytest.mark.asyncio
async def test_callback_error_does_not_stop_timer(caplog):
    ticks = []

    async def callback():
        ticks.append(1)
        if len(ticks) == 1:
            raise RuntimeError('clock unavailable')

    scheduler = Scheduler(callback=callback, interval=0.005)
    scheduler.start()
    while len(ticks) < 3:
        await asyncio.sleep(0.005)

    assert scheduler.running is True
    assert scheduler.stop() is True
    assert '** ERROR: [RuntimeError] [tick()] clock unavailable' in caplog.text


@pytest.mark.asyncio
async def test_malformed_answers_keep_scheduler_running(config, clock, make_provider):
    provider = make_provider({
        host: 'garbage' for host in ['a.example', 'b.example', 'c.example']
    })
    synchronizer = Synchronizer(
        config=dataclasses.replace(config, sync_interval=5),
        provider=provider,
        clock=clock
    )

    synchronizer.start()
    while len(provider.calls) < 3:
        await asyncio.sleep(0.005)

    assert synchronizer.running is True
    assert synchronizer.get_history().lifetime_error_count >= 3
    synchronizer.stop()
