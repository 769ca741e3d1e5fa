"""
Headless simulation of Acey Ducey games.

An automatic player answers the game's prompts with a simple spread strategy:
bet a fixed amount when the two cards are far enough apart, otherwise bet
nothing. `simulate_games` plays a batch of games and summarises the results.
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Any, Optional

import numpy as np

from aceyducey.common.io_interface import IOInterface
from aceyducey.events import EventEmitter, EngineEventType
from aceyducey.acey_ducey import constants
from aceyducey.acey_ducey.acey_ducey import AceyDuceyGame
from aceyducey.acey_ducey.state import GameStage

logger = logging.getLogger(__name__)


class SimulatedPlayerIOInterface(IOInterface):
    """
    An IO interface that plays the game automatically.

    The interface must be attached to the game it answers for, since the bet
    depends on the two cards currently showing.
    """

    def __init__(
        self,
        bet_amount: int = 10,
        min_spread: int = 4,
        continue_after_ruin: bool = False,
    ):
        self.bet_amount = bet_amount
        self.min_spread = min_spread
        self.continue_after_ruin = continue_after_ruin
        self.game: Optional[AceyDuceyGame] = None

    def attach(self, game: AceyDuceyGame) -> None:
        self.game = game

    def output(self, message: str) -> None:
        pass

    def input(self, prompt: str) -> str:
        if self.game is None:
            raise RuntimeError("SimulatedPlayerIOInterface is not attached to a game.")

        if prompt == constants.BET_PROMPT:
            return str(self.choose_bet())
        if prompt == constants.TRY_AGAIN_PROMPT:
            return "YES" if self.continue_after_ruin else "NO"
        raise ValueError(f"Unexpected prompt: {prompt!r}")

    def choose_bet(self) -> int:
        """
        Decide how much to bet on the cards currently showing.

        Returns:
            The bet, or 0 to sit the round out
        """
        first, second = self.game.current_cards
        ordering = self.game.ordering
        spread = abs(ordering.position_of(first) - ordering.position_of(second))
        if spread < self.min_spread:
            return 0
        return min(self.bet_amount, self.game.balance)


@dataclass
class SimulationSummary:
    """
    Results of a batch of simulated games.

    Attributes:
        final_balances: Balance each game ended with
        rounds_played: Number of rounds each game lasted
        ruined: Whether each game ended with the player broke
        outcomes: Count of round outcomes across all games
    """

    final_balances: np.ndarray
    rounds_played: np.ndarray
    ruined: np.ndarray
    outcomes: Counter = field(default_factory=Counter)

    @property
    def games(self) -> int:
        return len(self.final_balances)

    @property
    def mean_balance(self) -> float:
        return float(np.mean(self.final_balances))

    @property
    def std_balance(self) -> float:
        return float(np.std(self.final_balances))

    @property
    def ruin_rate(self) -> float:
        return float(np.mean(self.ruined))

    def percentile(self, q: float) -> float:
        return float(np.percentile(self.final_balances, q))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "games": self.games,
            "mean_balance": self.mean_balance,
            "std_balance": self.std_balance,
            "median_balance": self.percentile(50),
            "ruin_rate": self.ruin_rate,
            "mean_rounds": float(np.mean(self.rounds_played)),
            "outcomes": {outcome: count for outcome, count in self.outcomes.items()},
        }

    def display_stats(self):
        print(f"Games Played: {self.games}")
        print(
            f"Final balance: mean ${self.mean_balance:.2f}, "
            f"std ${self.std_balance:.2f}, median ${self.percentile(50):.2f}"
        )
        print(f"Ruined in {self.ruin_rate * 100:.2f}% of games.")
        for outcome, count in sorted(self.outcomes.items()):
            print(f"{outcome}: {count}")


def play_simulated_game(
    player: SimulatedPlayerIOInterface,
    max_rounds: int = 1000,
    seed: Optional[int] = None,
    events: Optional[EventEmitter] = None,
) -> AceyDuceyGame:
    """
    Play one game with an automatic player.

    The game stops when the player is ruined or after `max_rounds` rounds.

    Returns:
        The finished game
    """
    game = AceyDuceyGame(player, config={"seed": seed}, events=events)
    player.attach(game)

    while game.stage is not GameStage.GAME_OVER:
        if game.state.rounds_played >= max_rounds:
            game.end_game()
            break
        game.step()

    return game


def simulate_games(
    n_games: int,
    max_rounds: int = 1000,
    bet_amount: int = 10,
    min_spread: int = 4,
    seed: Optional[int] = None,
) -> SimulationSummary:
    """
    Play a batch of games with the spread strategy.

    Args:
        n_games: Number of games to play
        max_rounds: Round limit per game
        bet_amount: Amount bet when the spread is wide enough
        min_spread: Smallest position gap between the two cards worth betting on
        seed: Seed for the whole batch, zero or more (default: random)

    Returns:
        Summary of the batch
    """
    if n_games <= 0:
        raise ValueError("n_games must be positive.")
    if seed is not None and seed < 0:
        raise ValueError("seed must be zero or more.")

    rng = np.random.default_rng(seed)
    game_seeds = rng.integers(0, 2**32, size=n_games)

    outcomes = Counter()

    def count_outcome(event_data):
        outcomes[event_data["outcome"]] += 1

    events = EventEmitter()
    events.on(EngineEventType.ROUND_ENDED, count_outcome)

    final_balances = np.zeros(n_games, dtype=np.int64)
    rounds_played = np.zeros(n_games, dtype=np.int64)
    ruined = np.zeros(n_games, dtype=bool)

    for i, game_seed in enumerate(game_seeds):
        player = SimulatedPlayerIOInterface(bet_amount, min_spread)
        game = play_simulated_game(player, max_rounds, int(game_seed), events)
        final_balances[i] = game.balance
        rounds_played[i] = game.state.rounds_played
        ruined[i] = game.is_ruined()

    logger.info("Simulated %d games", n_games)
    return SimulationSummary(final_balances, rounds_played, ruined, outcomes)
