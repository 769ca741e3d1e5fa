import pytest

from aceyducey.acey_ducey.betting import InvalidBetInput, OverBet, parse_bet, validate_bet


@pytest.mark.parametrize(
    "text, expected",
    [("1", 1), ("50", 50), ("007", 7), ("100", 100), ("123456789", 123456789)],
)
def test_parse_bet(text, expected):
    assert parse_bet(text) == expected


@pytest.mark.parametrize(
    "text", ["", "0", "000", "-5", "+5", "5.0", "abc", "5O", "1 0", "²", "１０"]
)
def test_parse_bet_rejects(text):
    with pytest.raises(InvalidBetInput) as exc_info:
        parse_bet(text)
    assert exc_info.value.text == text


def test_invalid_bet_input_is_value_error():
    with pytest.raises(ValueError):
        parse_bet("chicken")


def test_validate_bet():
    assert validate_bet(50, 100) == 50
    assert validate_bet(100, 100) == 100


def test_validate_bet_over_balance():
    with pytest.raises(OverBet) as exc_info:
        validate_bet(150, 100)
    assert exc_info.value.bet == 150
    assert exc_info.value.balance == 100
    assert str(exc_info.value) == "Bet of 150 exceeds balance of 100"
