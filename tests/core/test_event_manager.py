"""
test_event_manager.py
---------------------
Unit tests for the pub-sub dispatcher.
"""

from unittest.mock import MagicMock

from corgi_run.core.services.event_manager import EventManager, GameOverEvent, RunStartedEvent


def test_dispatch_reaches_matching_subscribers(events):
    started = MagicMock()
    over = MagicMock()
    events.subscribe(RunStartedEvent, started)
    events.subscribe(GameOverEvent, over)

    events.dispatch(RunStartedEvent(best=10))

    started.assert_called_once_with(RunStartedEvent(best=10))
    over.assert_not_called()


def test_duplicate_subscription_ignored(events):
    callback = MagicMock()
    events.subscribe(RunStartedEvent, callback)
    events.subscribe(RunStartedEvent, callback)

    events.dispatch(RunStartedEvent(best=0))
    assert callback.call_count == 1
    assert events.get_subscriber_count(RunStartedEvent) == 1


def test_unsubscribe(events):
    callback = MagicMock()
    events.subscribe(RunStartedEvent, callback)
    events.unsubscribe(RunStartedEvent, callback)
    events.unsubscribe(RunStartedEvent, callback)

    events.dispatch(RunStartedEvent(best=0))
    callback.assert_not_called()


def test_failing_callback_does_not_block_others(events):
    broken = MagicMock(side_effect=RuntimeError("boom"))
    healthy = MagicMock()
    events.subscribe(GameOverEvent, broken)
    events.subscribe(GameOverEvent, healthy)

    events.dispatch(GameOverEvent(score=1, best=1, history=(1,)))
    healthy.assert_called_once()


def test_clear_all():
    manager = EventManager()
    manager.subscribe(RunStartedEvent, MagicMock())
    manager.subscribe(GameOverEvent, MagicMock())
    assert manager.get_subscriber_count() == 2

    manager.clear_all()
    assert manager.get_subscriber_count() == 0
