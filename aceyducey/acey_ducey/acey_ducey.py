"""
Acey Ducey game engine.

The dealer shows two ranks and the player bets on whether a third rank falls
strictly between them. The game runs until the player goes broke and declines
to start again.
"""

import argparse
import logging
import time
from typing import Any, Dict, Optional, Tuple

from aceyducey.common.deck import RankDeck
from aceyducey.common.io_interface import (
    ConsoleIOInterface,
    IOInterface,
    TranscriptIOInterface,
)
from aceyducey.common.rank import STANDARD_ORDERING
from aceyducey.events import EventEmitter, EngineEventType
from aceyducey.acey_ducey import constants
from aceyducey.acey_ducey.betting import (
    InvalidBetInput,
    OverBet,
    parse_bet,
    validate_bet,
)
from aceyducey.acey_ducey.state import GameStage, GameState, Round, RoundOutcome
from aceyducey.acey_ducey.transitions import StateTransitionEngine

logger = logging.getLogger(__name__)


class AceyDuceyGame:
    """
    Engine for a single-player game of Acey Ducey.

    The engine owns the game state, the deck and the IO interface. Call
    `run()` to play until the game is over, or `step()` to advance the state
    machine one stage at a time.
    """

    def __init__(
        self,
        io_interface: IOInterface,
        config: Dict[str, Any] = None,
        deck: Optional[RankDeck] = None,
        events: Optional[EventEmitter] = None,
    ):
        """
        Initialize the Acey Ducey engine.

        Args:
            io_interface: Interface used to show messages and read responses
            config: Configuration options for the game ("starting_balance", "seed")
            deck: Deck to deal from. Defaults to a standard 13-rank deck.
            events: Emitter to publish game events on. Defaults to a new one.

        Raises:
            ValueError: If the starting balance is not positive
        """
        self.io_interface = io_interface
        self.config = config or {}

        starting_balance = self.config.get(
            "starting_balance", constants.STARTING_BALANCE
        )
        if starting_balance <= 0:
            raise ValueError(
                f"Starting balance must be positive, got {starting_balance}"
            )

        self.ordering = STANDARD_ORDERING
        self.deck = deck or RankDeck(self.ordering, seed=self.config.get("seed"))
        self.events = events or EventEmitter()
        self.transitions = StateTransitionEngine(self.events)

        self.state = GameState(
            balance=starting_balance, starting_balance=starting_balance
        )
        self.current_cards: Optional[Tuple[str, str]] = None
        self.last_round: Optional[Round] = None

        self.events.emit(
            EngineEventType.GAME_CREATED,
            {"game_id": self.state.id, "config": self.config, "timestamp": time.time()},
        )

    @property
    def balance(self) -> int:
        return self.state.balance

    @property
    def stage(self) -> GameStage:
        return self.state.stage

    def is_ruined(self) -> bool:
        """True if the player is broke and declined to play again."""
        return self.state.is_ruined()

    def run(self) -> GameState:
        """
        Play until the game is over.

        Returns:
            The final game state
        """
        while self.state.stage is not GameStage.GAME_OVER:
            self.step()
        return self.state

    def step(self) -> GameStage:
        """
        Advance the state machine by one stage.

        Returns:
            The stage the game is in afterwards
        """
        match self.state.stage:
            case GameStage.INITIALIZING:
                self.print_intro()
                self.print_instructions()
                self.state = self.transitions.start_game(self.state)
            case GameStage.PLAYING | GameStage.BET_NOTHING:
                self.play_turn()
                if StateTransitionEngine.next_stage(self.state) is GameStage.GAME_OVER:
                    self.end_game()
            case GameStage.GAME_OVER:
                pass
        return self.state.stage

    def end_game(self) -> None:
        """Force the game into its terminal stage."""
        if self.state.stage is GameStage.GAME_OVER:
            return
        self.state = self.transitions.end_game(self.state)
        logger.info(
            "Game %s over after %d rounds", self.state.id, self.state.rounds_played
        )
        self.io_interface.output(constants.GAME_OVER_MESSAGE)

    def play_turn(self) -> Round:
        """
        Play one round.

        Shows the balance (not after a round with no bet), deals two ranks,
        takes a bet and, if the bet is valid, deals a third rank and settles.

        Returns:
            The resolved round
        """
        self.events.emit(
            EngineEventType.ROUND_STARTED,
            {
                "game_id": self.state.id,
                "round_number": self.state.rounds_played + 1,
                "balance": self.state.balance,
                "timestamp": time.time(),
            },
        )

        if self.state.stage is GameStage.PLAYING:
            self.io_interface.output(
                constants.BALANCE_MESSAGE.format(balance=self.state.balance)
            )

        self.io_interface.output(constants.NEXT_CARDS_MESSAGE)
        first = self._deal_card()
        second = self._deal_card()
        self.current_cards = (first, second)
        self.io_interface.output(" ".join(self.ordering.ordered_pair(first, second)))

        bet_text = self._read_response(constants.BET_PROMPT)
        try:
            bet = parse_bet(bet_text)
        except InvalidBetInput:
            logger.debug("No bet from input %r", bet_text)
            self.io_interface.output(constants.NO_BET_MESSAGE)
            return self._finish_round(
                Round(first, second, outcome=RoundOutcome.NO_BET)
            )

        try:
            validate_bet(bet, self.state.balance)
        except OverBet as e:
            logger.debug("%s", e)
            for message in constants.OVER_BET_MESSAGES:
                self.io_interface.output(message.format(balance=self.state.balance))
            return self._finish_round(
                Round(first, second, bet=bet, outcome=RoundOutcome.OVER_BET)
            )

        self.events.emit(
            EngineEventType.PLAYER_BET,
            {"game_id": self.state.id, "amount": bet, "timestamp": time.time()},
        )

        third = self._deal_card()
        self.io_interface.output(third)

        if self.ordering.is_between(first, second, third):
            self.io_interface.output(constants.WIN_MESSAGE)
            outcome = RoundOutcome.WIN
        else:
            self.io_interface.output(constants.LOSE_MESSAGE)
            outcome = RoundOutcome.LOSE

        rnd = self._finish_round(Round(first, second, bet, third, outcome))
        if outcome is RoundOutcome.LOSE and self.state.balance <= 0:
            self._handle_ruin()
        return rnd

    def print_intro(self) -> None:
        for line in constants.TITLE_LINES:
            self.io_interface.output(f"{line:^{constants.SCREEN_WIDTH}}")

    def print_instructions(self) -> None:
        for line in constants.INSTRUCTIONS:
            self.io_interface.output(line)

    def _finish_round(self, rnd: Round) -> Round:
        self.state = self.transitions.apply_round(self.state, rnd)
        self.last_round = rnd
        logger.debug("Round %d: %s", self.state.rounds_played, rnd)
        return rnd

    def _handle_ruin(self) -> None:
        self.io_interface.output(constants.RUIN_MESSAGE)
        response = self._read_response(constants.TRY_AGAIN_PROMPT)
        if response == constants.AFFIRMATIVE_RESPONSE:
            self.state = self.transitions.restart_after_ruin(self.state)
        else:
            self.state = self.transitions.decline_after_ruin(self.state)

    def _deal_card(self) -> str:
        card = self.deck.deal()
        self.events.emit(
            EngineEventType.CARD_DEALT,
            {"game_id": self.state.id, "card": card, "timestamp": time.time()},
        )
        return card

    def _read_response(self, prompt: str) -> str:
        return self.io_interface.input(prompt).strip().upper()


def non_negative_int(text):
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be zero or more, got {value}")
    return value


def positive_int(text):
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {value}")
    return value


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Play Acey Ducey.")
    parser.add_argument(
        "-s",
        "--seed",
        type=non_negative_int,
        default=None,
        help="seed for the card dealer (default: random)",
    )
    parser.add_argument(
        "-t",
        "--transcript",
        default=None,
        help="file to append a transcript of the game to",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level (default: WARNING)",
    )
    parser.add_argument(
        "--simulate",
        type=non_negative_int,
        default=0,
        metavar="GAMES",
        help="simulate GAMES games with an automatic player instead of playing",
    )
    parser.add_argument(
        "--min-spread",
        type=non_negative_int,
        default=4,
        help="smallest gap between the two cards the automatic player bets on (default: 4)",
    )
    parser.add_argument(
        "--bet",
        type=positive_int,
        default=10,
        help="amount the automatic player bets (default: 10)",
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    if args.simulate:
        from aceyducey.acey_ducey.simulation import simulate_games

        summary = simulate_games(
            args.simulate,
            bet_amount=args.bet,
            min_spread=args.min_spread,
            seed=args.seed,
        )
        summary.display_stats()
        return

    io_interface = ConsoleIOInterface()
    if args.transcript:
        io_interface = TranscriptIOInterface(io_interface, args.transcript)

    game = AceyDuceyGame(io_interface, config={"seed": args.seed})
    try:
        game.run()
    except (EOFError, KeyboardInterrupt):
        io_interface.output("")
        game.end_game()


if __name__ == "__main__":
    main()
