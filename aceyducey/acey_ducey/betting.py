"""
Bet parsing and validation for Acey Ducey.

A bet is typed as a plain string of decimal digits. Anything else, or a value
that is not positive, means the player is not betting this round.
"""


class InvalidBetInput(ValueError):
    """Raised when bet text is not a positive whole number."""

    def __init__(self, text):
        super().__init__(f"Invalid bet: {text!r}")
        self.text = text


class OverBet(ValueError):
    """Raised when a bet exceeds the player's balance."""

    def __init__(self, bet: int, balance: int):
        super().__init__(f"Bet of {bet} exceeds balance of {balance}")
        self.bet = bet
        self.balance = balance


def parse_bet(text: str) -> int:
    """
    Parse bet text into a positive integer.

    Leading zeros are accepted. Signs, spaces inside the number and any other
    non-digit characters are rejected.

    >>> parse_bet("007")
    7
    >>> parse_bet("0")
    Traceback (most recent call last):
    ...
    aceyducey.acey_ducey.betting.InvalidBetInput: Invalid bet: '0'

    :param text: The bet text, already stripped of surrounding whitespace
    :return: The bet amount
    :raises InvalidBetInput: If the text is empty, not all ASCII digits, or zero
    """
    if not text or not (text.isascii() and text.isdigit()):
        raise InvalidBetInput(text)
    bet = int(text)
    if bet <= 0:
        raise InvalidBetInput(text)
    return bet


def validate_bet(bet: int, balance: int) -> int:
    """
    Check that a bet can be covered by the balance.

    :raises OverBet: If the bet is larger than the balance
    """
    if bet > balance:
        raise OverBet(bet, balance)
    return bet
