"""
This module defines the `RankOrdering` class, which is used to compare card ranks.

- `RANK_SYMBOLS`: The thirteen rank symbols of a standard deck, from Two
through Ace, in increasing strength. Suits play no part in Acey Ducey.

- `RankOrdering`: An immutable ordered sequence of rank symbols. It provides
position lookups, a strictly-between test and ascending ordering of a pair of
ranks for display.

- `InvalidRank`: Raised when a symbol is not part of the ordering.

This module is part of the `aceyducey` package.
"""

from typing import Iterable, Iterator, Tuple

RANK_SYMBOLS = ("2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K", "A")


class InvalidRank(ValueError):
    """
    Raised when a rank symbol is not found in a RankOrdering.
    """

    def __init__(self, rank):
        super().__init__(f"Invalid rank: {rank!r}")
        self.rank = rank


class RankOrdering:
    """
    Class representing a total order over card rank symbols.

    >>> ordering = RankOrdering()
    >>> ordering.position_of("J")
    9
    >>> ordering.is_between("K", "2", "7")
    True
    >>> ordering.ordered_pair("A", "3")
    ('3', 'A')
    """

    def __init__(self, symbols: Iterable[str] = RANK_SYMBOLS):
        """
        Initialize a RankOrdering instance.

        :param symbols: Rank symbols in increasing strength (defaults to 2..A)
        :raises ValueError: If the symbols are not unique
        """
        self._symbols: Tuple[str, ...] = tuple(symbols)
        if len(set(self._symbols)) != len(self._symbols):
            raise ValueError("Rank symbols must be unique.")
        self._positions = {symbol: i for i, symbol in enumerate(self._symbols)}

    @property
    def symbols(self) -> Tuple[str, ...]:
        """The rank symbols in increasing strength."""
        return self._symbols

    def position_of(self, rank: str) -> int:
        """
        Return the 0-based position of a rank in the ordering.

        :param rank: A rank symbol
        :return: The position of the rank
        :raises InvalidRank: If the rank is not part of the ordering
        """
        try:
            return self._positions[rank]
        except (KeyError, TypeError):
            raise InvalidRank(rank) from None

    def is_between(self, a: str, b: str, test: str) -> bool:
        """
        Check whether a rank lies strictly between two other ranks.

        The order of `a` and `b` does not matter. A rank equal to either bound
        is not between them.

        :param a: The first bound
        :param b: The second bound
        :param test: The rank to test
        :return: True if `test` is strictly between `a` and `b`
        """
        low = self.position_of(a)
        high = self.position_of(b)
        if low > high:
            low, high = high, low
        return low < self.position_of(test) < high

    def ordered_pair(self, a: str, b: str) -> Tuple[str, str]:
        """
        Return two ranks sorted ascending by position.

        :param a: A rank symbol
        :param b: A rank symbol
        :return: The (low, high) pair
        """
        if self.position_of(a) > self.position_of(b):
            return b, a
        return a, b

    def __contains__(self, rank) -> bool:
        return rank in self._positions

    def __iter__(self) -> Iterator[str]:
        return iter(self._symbols)

    def __len__(self) -> int:
        return len(self._symbols)

    def __repr__(self) -> str:
        return f"RankOrdering({list(self._symbols)})"


STANDARD_ORDERING = RankOrdering()
