import io

import pytest

from dominionsim.playdom import USAGE, main, play_game

ALLOWED_FIXED = {
    "Starting game.",
    "Finished game.",
    "smithy played.",
    "0: bought province",
    "0: bought gold",
    "0: bought smithy",
    "0: bought silver",
    "0: end turn",
    "1: bought province",
    "1: bought adventurer",
    "1: bought gold",
    "1: bought silver",
    "1: endTurn",
}


def run(seed):
    out = io.StringIO()
    scores = play_game(seed, out)
    return scores, out.getvalue().splitlines()


@pytest.mark.parametrize("seed", [1, 3, 42])
def test_game_frames_and_scores(seed):
    scores, lines = run(seed)
    assert lines[0] == "Starting game."
    assert lines[-3] == "Finished game."
    assert lines[-2] == f"Player 0: {scores[0]}"
    assert lines[-1] == f"Player 1: {scores[1]}"


@pytest.mark.parametrize("seed", [1, 3])
def test_game_is_deterministic(seed):
    first_scores, first_lines = run(seed)
    second_scores, second_lines = run(seed)
    assert second_lines == first_lines
    assert [second_scores[0], second_scores[1]] == [first_scores[0], first_scores[1]]
    assert second_lines[-2] == f"Player 0: {first_scores[0]}"
    assert second_lines[-1] == f"Player 1: {first_scores[1]}"


@pytest.mark.parametrize("seed", [1, 3, 42])
def test_turns_alternate_starting_with_player_zero(seed):
    _, lines = run(seed)
    ends = [line for line in lines if line in ("0: end turn", "1: endTurn")]
    assert ends
    assert all(line == "0: end turn" for line in ends[::2])
    assert all(line == "1: endTurn" for line in ends[1::2])


@pytest.mark.parametrize("seed", [1, 3, 42])
def test_special_purchases_are_capped(seed):
    _, lines = run(seed)
    assert lines.count("0: bought smithy") <= 2
    assert lines.count("1: bought adventurer") <= 2


@pytest.mark.parametrize("seed", [1, 3, 42])
def test_only_known_lines_are_printed(seed):
    _, lines = run(seed)
    for line in lines[:-2]:
        assert (
            line in ALLOWED_FIXED
            or line.startswith("0: smithy played from position ")
            or line.startswith("1: adventurer played from position ")
        )


@pytest.mark.parametrize("seed", [1, 3])
def test_smithy_play_is_announced_by_player_zero_only(seed):
    _, lines = run(seed)
    for index, line in enumerate(lines):
        if line.startswith("0: smithy played from position "):
            assert lines[index + 1] == "smithy played."


def test_main_without_seed_fails(capsys):
    assert main([]) == 1
    assert capsys.readouterr().err == USAGE


def test_main_plays_a_game(capsys):
    assert main(["3"]) == 0
    text = capsys.readouterr().out
    scores, lines = run(3)
    assert text.splitlines() == lines
    assert text.endswith(f"Player 0: {scores[0]}\nPlayer 1: {scores[1]}\n")