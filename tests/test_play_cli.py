import logging

import pytest
from rps_core.moves import Move
from rps_core.rng import RNG, computer_move
from rps_core.rules import resolve
from rps_core.session_types import RoundOutcome

from tools import play_cli


def _scripted(*answers):
    """按顺序回放输入；用完后模拟 stdin 关闭。"""
    it = iter(answers)

    def prompt(_text: str) -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return prompt


def _run(tmp_path, args, *answers):
    out = tmp_path / "game_stats.txt"
    rc = play_cli.main(
        ["--no-color", "--no-art", "--out", str(out), *args],
        prompt=_scripted(*answers),
    )
    return rc, out


def test_multi_player_writes_report(tmp_path):
    rc, out = _run(tmp_path, ["--mode", "multi", "--rounds", "2"], "1", "3", "2", "scissors")
    assert rc == 0
    text = out.read_text(encoding="utf-8")
    assert "Mode: Two players" in text
    assert "Round 1: Player 1 chose Rock, Player 2 chose Paper - Player 2 wins" in text
    assert "Round 2: Player 1 chose Scissors, Player 2 chose Scissors - Draw" in text
    assert "Total rounds: 2" in text


def test_single_player_uses_seeded_computer(tmp_path):
    rc, out = _run(
        tmp_path,
        ["--mode", "single", "--rounds", "3", "--seed", "7"],
        "rock",
        "rock",
        "rock",
    )
    assert rc == 0
    rnd = RNG(seed=7).create()
    expected = [computer_move(rnd) for _ in range(3)]
    text = out.read_text(encoding="utf-8")
    for i, move in enumerate(expected, 1):
        assert f"Round {i}: Player 1 chose Rock, Computer chose {move.label}" in text
    first_wins = sum(resolve(Move.ROCK, m) is RoundOutcome.FIRST_WINS for m in expected)
    assert f"Player 1 wins: {first_wins}" in text


def test_prompted_mode_and_rounds_fall_back(tmp_path, capsys):
    # 非法模式 -> 单人；非数字局数 -> 配置默认 3 局
    rc, out = _run(tmp_path, ["--seed", "1"], "9", "abc", "1", "2", "3")
    assert rc == 0
    assert "Invalid choice, defaulting to: Single player" in capsys.readouterr().out
    text = out.read_text(encoding="utf-8")
    assert "Mode: Single player (vs computer)" in text
    assert "Total rounds: 3" in text


def test_rounds_below_one_are_coerced(tmp_path):
    rc, out = _run(tmp_path, ["--mode", "multi"], "0", "rock", "paper")
    assert rc == 0
    assert "Total rounds: 1" in out.read_text(encoding="utf-8")


def test_invalid_move_reprompts(tmp_path, capsys):
    rc, out = _run(tmp_path, ["--mode", "multi", "--rounds", "1"], "lizard", "rock", "", "2")
    assert rc == 0
    assert capsys.readouterr().out.count("Invalid input. Try again.") == 2
    assert "Player 1 chose Rock, Player 2 chose Scissors - Player 1 wins" in out.read_text(
        encoding="utf-8"
    )


def test_config_aliases_accepted(tmp_path):
    rc, out = _run(tmp_path, ["--mode", "multi", "--rounds", "1"], "p", "s")
    assert rc == 0
    assert "Player 1 chose Paper, Player 2 chose Scissors - Player 2 wins" in out.read_text(
        encoding="utf-8"
    )


def test_eof_aborts_without_report(tmp_path, capsys):
    rc, out = _run(tmp_path, ["--mode", "multi", "--rounds", "2"], "rock", "paper")
    assert rc == 1
    assert not out.exists()
    assert "game aborted" in capsys.readouterr().out


def test_console_shows_colors_and_art(tmp_path, capsys):
    out = tmp_path / "stats.txt"
    rc = play_cli.main(
        ["--mode", "multi", "--rounds", "1", "--out", str(out)],
        prompt=_scripted("rock", "rock"),
    )
    assert rc == 0
    console = capsys.readouterr().out
    assert "\033[33mDraw!\033[0m" in console
    assert "(_____)" in console
    assert f"saved to '{out}'" in console


@pytest.mark.parametrize("raw,expected", [("5", 5), ("-2", 1), ("", 4), ("x", 4)])
def test_choose_rounds(raw, expected):
    assert play_cli.choose_rounds(4, prompt=_scripted(raw)) == expected


def test_palette_plain_is_noop():
    p = play_cli.Palette.plain()
    assert p.paint(p.red, "hi") == "hi"


def test_unknown_mode_is_reported_once(tmp_path, capsys, caplog):
    with caplog.at_level(logging.DEBUG):
        rc, _ = _run(tmp_path, ["--rounds", "1", "--seed", "2"], "7", "rock")
    assert rc == 0
    assert capsys.readouterr().out.count("Invalid choice") == 1
    cli_records = [r for r in caplog.records if r.name == "tools.play_cli"]
    assert cli_records
    assert all(r.levelno < logging.WARNING for r in cli_records)


def test_eof_is_not_logged_as_warning(tmp_path, caplog):
    with caplog.at_level(logging.DEBUG):
        rc, _ = _run(tmp_path, ["--mode", "multi", "--rounds", "1"], "rock")
    assert rc == 1
    assert not [r for r in caplog.records if r.levelno >= logging.WARNING]


def test_game_writes_only_the_text_report(tmp_path):
    rc, out = _run(tmp_path, ["--mode", "multi", "--rounds", "1"], "rock", "paper")
    assert rc == 0
    assert sorted(p.name for p in tmp_path.rglob("*") if p.is_file()) == [out.name]
    assert out.suffix == ".txt"
