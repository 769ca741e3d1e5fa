"""
State transition functions for the Acey Ducey game.

This module provides functions for transitioning between game states,
without modifying the original state objects. Transitions publish events on
the emitter of the game they belong to.
"""

import logging
from dataclasses import replace

from aceyducey.events import EventEmitter, EngineEventType
from aceyducey.acey_ducey.state import GameState, GameStage, Round, RoundOutcome

logger = logging.getLogger(__name__)


class StateTransitionEngine:
    """
    State transitions for Acey Ducey.

    Each method takes a state and returns a new state, without modifying the
    original, and reports the change on the engine's event emitter.
    """

    def __init__(self, events: EventEmitter):
        self.events = events

    @staticmethod
    def next_stage(state: GameState) -> GameStage:
        """
        Decide which stage the game loop moves to from the current state.

        Args:
            state: Current game state

        Returns:
            The stage the game should be in next
        """
        match state.stage:
            case GameStage.INITIALIZING:
                return GameStage.PLAYING
            case GameStage.PLAYING | GameStage.BET_NOTHING:
                if state.is_ruined():
                    return GameStage.GAME_OVER
                return state.stage
            case GameStage.GAME_OVER:
                return GameStage.GAME_OVER
        raise ValueError(f"Unknown game stage: {state.stage}")

    def start_game(self, state: GameState) -> GameState:
        """
        Move a freshly created game into play.

        Args:
            state: Current game state

        Returns:
            New game state in the PLAYING stage
        """
        new_state = replace(state, stage=GameStage.PLAYING)

        self.events.emit(
            EngineEventType.GAME_STARTED,
            {
                "game_id": state.id,
                "balance": new_state.balance,
                "timestamp": new_state.timestamp,
            },
        )

        return new_state

    def apply_round(self, state: GameState, rnd: Round) -> GameState:
        """
        Apply the result of a round to the game state.

        A zero bet leaves the game in BET_NOTHING. Every other outcome returns
        the game to PLAYING. Wins and losses move the bet amount.

        Args:
            state: Current game state
            rnd: The resolved round

        Returns:
            New game state with the round applied
        """
        balance = state.balance
        stage = GameStage.PLAYING

        match rnd.outcome:
            case RoundOutcome.NO_BET:
                stage = GameStage.BET_NOTHING
            case RoundOutcome.OVER_BET:
                pass
            case RoundOutcome.WIN:
                balance += rnd.bet
            case RoundOutcome.LOSE:
                balance -= rnd.bet
            case _:
                raise ValueError(f"Round has no outcome: {rnd}")

        new_state = replace(
            state,
            balance=balance,
            stage=stage,
            rounds_played=state.rounds_played + 1,
        )

        if rnd.is_settled:
            self.events.emit(
                EngineEventType.BANKROLL_UPDATED,
                {
                    "game_id": state.id,
                    "old_balance": state.balance,
                    "new_balance": balance,
                    "timestamp": new_state.timestamp,
                },
            )
        self.events.emit(
            EngineEventType.ROUND_ENDED,
            {
                "game_id": state.id,
                "round_number": new_state.rounds_played,
                "first": rnd.first,
                "second": rnd.second,
                "third": rnd.third,
                "bet": rnd.bet,
                "outcome": rnd.outcome.name,
                "balance": balance,
                "timestamp": new_state.timestamp,
            },
        )
        if rnd.outcome is RoundOutcome.LOSE and balance <= 0:
            logger.info("Player ruined with balance %d", balance)
            self.events.emit(
                EngineEventType.PLAYER_RUINED,
                {
                    "game_id": state.id,
                    "balance": balance,
                    "timestamp": new_state.timestamp,
                },
            )

        return new_state

    def restart_after_ruin(self, state: GameState) -> GameState:
        """
        Give a ruined player a fresh bankroll.

        Args:
            state: Current game state

        Returns:
            New game state with the starting balance restored
        """
        new_state = replace(
            state,
            balance=state.starting_balance,
            stage=GameStage.PLAYING,
            ruin_declined=False,
        )

        self.events.emit(
            EngineEventType.BANKROLL_RESET,
            {
                "game_id": state.id,
                "old_balance": state.balance,
                "new_balance": new_state.balance,
                "timestamp": new_state.timestamp,
            },
        )

        return new_state

    @staticmethod
    def decline_after_ruin(state: GameState) -> GameState:
        """
        Record that a ruined player does not want to continue.

        Args:
            state: Current game state

        Returns:
            New game state flagged as ruined
        """
        return replace(state, ruin_declined=True)

    def end_game(self, state: GameState) -> GameState:
        """
        Move the game to its terminal stage.

        The GAME_ENDED payload is the final state's dictionary form plus a
        "ruined" flag.

        Args:
            state: Current game state

        Returns:
            New game state in the GAME_OVER stage
        """
        if state.stage is GameStage.GAME_OVER:
            return state

        new_state = replace(state, stage=GameStage.GAME_OVER)

        payload = new_state.to_dict()
        payload["ruined"] = new_state.is_ruined()
        self.events.emit(EngineEventType.GAME_ENDED, payload)

        return new_state
