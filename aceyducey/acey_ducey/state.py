"""
Immutable state models for the Acey Ducey game.

This module provides dataclasses for representing the state of an Acey Ducey
game in an immutable manner. These classes are designed to be used with pure
transition functions that create new state instances rather than modifying
existing ones.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, Optional
from enum import Enum, auto
import uuid
import time

from aceyducey.acey_ducey.constants import STARTING_BALANCE


class GameStage(Enum):
    """Possible stages of an Acey Ducey game."""

    INITIALIZING = auto()
    PLAYING = auto()
    BET_NOTHING = auto()
    GAME_OVER = auto()


class RoundOutcome(Enum):
    """Possible results of an Acey Ducey round."""

    NO_BET = auto()
    OVER_BET = auto()
    WIN = auto()
    LOSE = auto()


@dataclass(frozen=True)
class Round:
    """
    Immutable record of a single round.

    Attributes:
        first: First rank dealt
        second: Second rank dealt
        bet: Amount bet, or None if no valid bet was made
        third: Third rank dealt, only when the bet was accepted
        outcome: How the round was resolved
    """

    first: str
    second: str
    bet: Optional[int] = None
    third: Optional[str] = None
    outcome: Optional[RoundOutcome] = None

    @property
    def is_settled(self) -> bool:
        """True if money changed hands in this round."""
        return self.outcome in (RoundOutcome.WIN, RoundOutcome.LOSE)


@dataclass(frozen=True)
class GameState:
    """
    Immutable representation of the Acey Ducey game state.

    Attributes:
        id: Unique identifier for this game
        balance: Player's current balance in dollars
        stage: Current stage of the game
        rounds_played: Number of rounds played
        ruin_declined: Whether the player went broke and declined to continue
        starting_balance: Balance the game starts with and resets to after ruin
        timestamp: Time when this state was created
    """

    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    balance: int = STARTING_BALANCE
    stage: GameStage = GameStage.INITIALIZING
    rounds_played: int = 0
    ruin_declined: bool = False
    starting_balance: int = STARTING_BALANCE
    timestamp: float = field(default_factory=lambda: time.time())

    def is_ruined(self) -> bool:
        """
        Check whether the game should end.

        Returns:
            True if the balance is exhausted and the player declined to continue
        """
        return self.balance <= 0 and self.ruin_declined

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the game state to a dictionary suitable for serialization.

        Returns:
            Dictionary representation of the game state
        """
        return {
            "id": self.id,
            "balance": self.balance,
            "stage": self.stage.name,
            "rounds_played": self.rounds_played,
            "ruin_declined": self.ruin_declined,
            "starting_balance": self.starting_balance,
            "timestamp": self.timestamp,
        }
