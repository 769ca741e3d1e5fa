"""
Tests for the event emitter.
"""

import logging
from unittest.mock import MagicMock

from aceyducey.events import EventEmitter, EngineEventType


def test_emit_reaches_subscribers_of_that_type():
    emitter = EventEmitter()
    dealt = MagicMock()
    ended = MagicMock()
    emitter.on(EngineEventType.CARD_DEALT, dealt)
    emitter.on(EngineEventType.ROUND_ENDED, ended)

    emitter.emit(EngineEventType.CARD_DEALT, {"card": "Q"})

    dealt.assert_called_once_with({"card": "Q"})
    ended.assert_not_called()


def test_emit_without_subscribers():
    EventEmitter().emit(EngineEventType.GAME_CREATED, {})


def test_handlers_run_in_subscription_order():
    emitter = EventEmitter()
    calls = []
    emitter.on(EngineEventType.PLAYER_BET, lambda data: calls.append("first"))
    emitter.on(EngineEventType.PLAYER_BET, lambda data: calls.append("second"))

    emitter.emit(EngineEventType.PLAYER_BET, {"amount": 5})

    assert calls == ["first", "second"]


def test_unsubscribe():
    emitter = EventEmitter()
    callback = MagicMock()
    unsubscribe = emitter.on(EngineEventType.ROUND_STARTED, callback)

    emitter.emit(EngineEventType.ROUND_STARTED, {})
    unsubscribe()
    unsubscribe()
    emitter.emit(EngineEventType.ROUND_STARTED, {})

    assert callback.call_count == 1


def test_handler_may_unsubscribe_itself_while_emitting():
    emitter = EventEmitter()
    calls = []
    unsubscribe_ref = []

    def first(data):
        calls.append("first")
        unsubscribe_ref[0]()

    unsubscribe_ref.append(emitter.on(EngineEventType.GAME_ENDED, first))
    emitter.on(EngineEventType.GAME_ENDED, lambda data: calls.append("second"))

    emitter.emit(EngineEventType.GAME_ENDED, {})
    emitter.emit(EngineEventType.GAME_ENDED, {})

    assert calls == ["first", "second", "second"]


def test_failing_handler_is_logged_and_skipped(caplog):
    emitter = EventEmitter()

    def broken(data):
        raise ValueError("broken observer")

    after = MagicMock()
    emitter.on(EngineEventType.BANKROLL_UPDATED, broken)
    emitter.on(EngineEventType.BANKROLL_UPDATED, after)

    with caplog.at_level(logging.ERROR, logger="aceyducey.events"):
        emitter.emit(EngineEventType.BANKROLL_UPDATED, {"new_balance": 90})

    after.assert_called_once()
    assert "Error in event handler for BANKROLL_UPDATED" in caplog.text
    assert "broken observer" in caplog.text
