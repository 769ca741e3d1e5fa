import pytest

from aceyducey.acey_ducey import constants
from aceyducey.acey_ducey.acey_ducey import main, parse_args


def test_parse_args_defaults():
    args = parse_args([])
    assert args.seed is None
    assert args.transcript is None
    assert args.log_level == "WARNING"
    assert args.simulate == 0


def test_main_ends_on_end_of_input(mocker, capsys):
    mocker.patch("builtins.input", side_effect=["0", EOFError])

    main(["--seed", "5"])

    out = capsys.readouterr().out
    assert constants.TITLE_LINES[0] in out
    assert constants.NO_BET_MESSAGE in out
    assert out.rstrip().endswith(constants.GAME_OVER_MESSAGE)


def test_main_ends_on_keyboard_interrupt(mocker, capsys):
    mocker.patch("builtins.input", side_effect=KeyboardInterrupt)

    main([])

    assert constants.GAME_OVER_MESSAGE in capsys.readouterr().out


def test_main_writes_transcript(mocker, tmp_path):
    mocker.patch("builtins.input", side_effect=["0", EOFError])
    transcript_path = tmp_path / "transcript.txt"

    main(["--seed", "5", "--transcript", str(transcript_path)])

    lines = transcript_path.read_text(encoding="utf-8").splitlines()
    assert f"{constants.BET_PROMPT}0" in lines
    assert lines[-1] == constants.GAME_OVER_MESSAGE


def test_main_simulate(capsys):
    main(["--simulate", "3", "--seed", "2"])

    assert "Games Played: 3" in capsys.readouterr().out


@pytest.mark.parametrize(
    "argv",
    [
        ["--simulate", "-1"],
        ["--seed", "-3"],
        ["--min-spread", "-2"],
        ["--bet", "0"],
        ["--simulate", "many"],
    ],
)
def test_parse_args_rejects_bad_numbers(argv, capsys):
    with pytest.raises(SystemExit) as excinfo:
        parse_args(argv)

    assert excinfo.value.code == 2
    assert "usage:" in capsys.readouterr().err


def test_parse_args_accepts_zero_seed():
    args = parse_args(["--seed", "0", "--simulate", "2", "--bet", "5"])
    assert args.seed == 0
    assert args.simulate == 2
    assert args.bet == 5


def test_main_simulate_rejects_negative_seed(capsys):
    with pytest.raises(SystemExit):
        main(["--simulate", "2", "--seed", "-3"])

    assert "--seed" in capsys.readouterr().err
