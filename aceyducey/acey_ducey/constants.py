"""Acey Ducey constants and message texts."""

STARTING_BALANCE = 100

SCREEN_WIDTH = 66

TITLE_LINES = (
    "ACEY DUCEY CARD GAME",
    "CREATIVE COMPUTING  MORRISTOWN, NEW JERSEY",
)

INSTRUCTIONS = (
    "",
    "ACEY-DUCEY IS PLAYED IN THE FOLLOWING MANNER",
    "THE DEALER (COMPUTER) DEALS TWO CARDS FACE UP",
    "YOU HAVE AN OPTION TO BET OR NOT BET DEPENDING",
    "ON WHETHER OR NOT YOU FEEL THE CARD WILL HAVE",
    "A VALUE BETWEEN THE FIRST TWO.",
)

BALANCE_MESSAGE = "YOU NOW HAVE ${balance} DOLLARS"
NEXT_CARDS_MESSAGE = "HERE ARE YOUR NEXT TWO CARDS:"
BET_PROMPT = "WHAT IS YOUR BET "
NO_BET_MESSAGE = "CHICKEN!!"
OVER_BET_MESSAGES = (
    "SORRY, MY FRIEND, BUT YOU BET TOO MUCH.",
    "YOU HAVE ONLY {balance} DOLLARS TO BET.",
)
WIN_MESSAGE = "YOU WIN!!!"
LOSE_MESSAGE = "SORRY, YOU LOSE"
RUIN_MESSAGE = "SORRY, FRIEND, BUT YOU BLEW YOUR WAD."
TRY_AGAIN_PROMPT = "TRY AGAIN (YES OR NO)? "
AFFIRMATIVE_RESPONSE = "YES"
GAME_OVER_MESSAGE = "GAME OVER. Thanks for playing!"
