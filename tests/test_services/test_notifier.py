# nosec B101


from unittest.mock import AsyncMock, Mock

import pytest

from application.services import RatesUpdatedNotifier


@pytest.mark.asyncio
async def test_notify_calls_sync_and_async_observers_in_order():
    notifier = RatesUpdatedNotifier()
    calls = []

    async def async_observer():
        calls.append("async")

    notifier.subscribe(lambda: calls.append("sync"))
    notifier.subscribe(async_observer)

    await notifier.notify()

    assert calls == ["sync", "async"]


@pytest.mark.asyncio
async def test_notify_without_observers_is_noop():
    await RatesUpdatedNotifier().notify()


@pytest.mark.asyncio
async def test_unsubscribe_stops_delivery():
    notifier = RatesUpdatedNotifier()
    observer = Mock()
    unsubscribe = notifier.subscribe(observer)

    unsubscribe()
    unsubscribe()
    await notifier.notify()

    observer.assert_not_called()
    assert notifier.observer_count == 0


@pytest.mark.asyncio
async def test_failing_observer_does_not_block_others():
    notifier = RatesUpdatedNotifier()
    failing = Mock(side_effect=RuntimeError("boom"))
    failing_async = AsyncMock(side_effect=RuntimeError("async boom"))
    healthy = Mock()
    notifier.subscribe(failing)
    notifier.subscribe(failing_async)
    notifier.subscribe(healthy)

    await notifier.notify()

    failing.assert_called_once_with()
    failing_async.assert_awaited_once_with()
    healthy.assert_called_once_with()


@pytest.mark.asyncio
async def test_each_notify_is_a_single_broadcast():
    notifier = RatesUpdatedNotifier()
    observer = Mock()
    notifier.subscribe(observer)

    await notifier.notify()
    await notifier.notify()

    assert observer.call_count == 2
