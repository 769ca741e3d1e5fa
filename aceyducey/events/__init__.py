"""
Event system for the Acey Ducey engine.

This package provides the emitter a game publishes its lifecycle events on,
so that observers (logging, statistics, front ends) can follow a game
without being wired into the engine.
"""

from aceyducey.events.emitter import EventEmitter, EngineEventType

__all__ = ["EventEmitter", "EngineEventType"]
