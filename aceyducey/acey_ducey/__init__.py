"""
Acey Ducey card game module.

This module provides the implementation for the Acey Ducey card game,
including state models, state transitions, bet rules and the game engine.
"""

from aceyducey.acey_ducey.state import (
    GameState as GameState,
    GameStage as GameStage,
    Round as Round,
    RoundOutcome as RoundOutcome,
)
from aceyducey.acey_ducey.betting import (
    InvalidBetInput as InvalidBetInput,
    OverBet as OverBet,
)
from aceyducey.acey_ducey.transitions import StateTransitionEngine as StateTransitionEngine
from aceyducey.acey_ducey.acey_ducey import AceyDuceyGame as AceyDuceyGame

__all__ = [
    "GameState",
    "GameStage",
    "Round",
    "RoundOutcome",
    "InvalidBetInput",
    "OverBet",
    "StateTransitionEngine",
    "AceyDuceyGame",
]
