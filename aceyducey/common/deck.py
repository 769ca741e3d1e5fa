"""
This module contains the RankDeck class, which deals card ranks for Acey Ducey.

The deck is a working copy of a rank ordering. Dealing samples uniformly with
replacement, so the deck never runs out and the same rank can come up twice
in a row.

>>> deck = RankDeck(seed=7)
>>> deck.size
13
>>> deck.deal() in deck.cards
True
>>> deck.size
13
"""

import logging
import random
from typing import List, Optional, Union

from aceyducey.common.rank import STANDARD_ORDERING, RankOrdering

logger = logging.getLogger(__name__)


class RankDeck:
    """
    A class representing the fixed table of ranks a dealer draws from.
    """

    def __init__(
        self, ordering: RankOrdering = STANDARD_ORDERING, seed: Optional[int] = None
    ):
        """
        Initialize a RankDeck instance.

        :param ordering: The rank ordering to copy the deck from
        :param seed: Seed for the random generator. If not provided, the
                     generator is seeded from OS entropy.
        """
        self.ordering = ordering
        self.cards: List[str] = list(ordering.symbols)
        self._rng = random.Random(seed)

    def deal(self, num_cards=1) -> Union[str, List[str]]:
        """
        Sample n ranks from the deck, with replacement.

        :return: A rank symbol or a list of rank symbols.
        >>> deck = RankDeck(seed=1)
        >>> len(deck.deal(3))
        3
        """
        if num_cards == 1:
            card = self._rng.choice(self.cards)
            logger.debug("Dealt %s", card)
            return card
        return [self.deal() for _ in range(num_cards)]

    @property
    def size(self) -> int:
        """
        Return the number of ranks in the deck.

        :return: The size of the deck.
        """
        return len(self.cards)

    def __repr__(self) -> str:
        return f"RankDeck({self.cards!r})"

    def __str__(self) -> str:
        return f"Deck of {len(self.cards)} ranks"
