"""A scripted two-player game: one player favours Smithy, the other Adventurer."""

from __future__ import annotations

import re
import sys
from typing import Sequence, TextIO

from .cards import Card
from .effects import play_card
from .game import GameError, GameState, initialize_game

KINGDOM = (
    Card.ADVENTURER,
    Card.GARDENS,
    Card.EMBARGO,
    Card.VILLAGE,
    Card.MINION,
    Card.MINE,
    Card.CUTPURSE,
    Card.SEA_HAG,
    Card.TRIBUTE,
    Card.SMITHY,
)
USAGE = "Usage: playdom [integer random number seed]\n"

_TREASURE_VALUES = {Card.COPPER: 1, Card.SILVER: 2, Card.GOLD: 3}
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _survey(state: GameState) -> tuple[int, int, int]:
    """Money in hand and the last positions of a Smithy and an Adventurer."""
    money = 0
    smithy_pos = adventurer_pos = -1
    for pos, card in enumerate(state.hands[state.whose_turn]):
        if card in _TREASURE_VALUES:
            money += _TREASURE_VALUES[card]
        elif card == Card.SMITHY:
            smithy_pos = pos
        elif card == Card.ADVENTURER:
            adventurer_pos = pos
    return money, smithy_pos, adventurer_pos


def _try_play(state: GameState, hand_pos: int) -> None:
    try:
        play_card(state, hand_pos)
    except GameError:
        pass


def _try_buy(state: GameState, card: Card) -> None:
    try:
        state.buy_card(card)
    except GameError:
        pass


def _play_treasures(state: GameState) -> int:
    """Try to play every treasure in hand and return what they are worth."""
    money = 0
    pos = 0
    while pos < state.num_hand_cards():
        card = state.hand_card(pos)
        if card in _TREASURE_VALUES:
            _try_play(state, pos)
            money += _TREASURE_VALUES[card]
        pos += 1
    return money


def play_game(seed: int, out: TextIO | None = None) -> tuple[int, int]:
    """Play a full game from ``seed``, narrating to ``out``; return both scores."""
    out = out if out is not None else sys.stdout
    out.write("Starting game.\n")
    state = initialize_game(2, list(KINGDOM), seed)
    smithies = 0
    adventurers = 0

    while not state.is_game_over():
        money, smithy_pos, adventurer_pos = _survey(state)
        if state.whose_turn == 0:
            if smithy_pos != -1:
                out.write(f"0: smithy played from position {smithy_pos}\n")
                _try_play(state, smithy_pos)
                out.write("smithy played.\n")
                money = _play_treasures(state)
            if money >= 8:
                out.write("0: bought province\n")
                _try_buy(state, Card.PROVINCE)
            elif money >= 6:
                out.write("0: bought gold\n")
                _try_buy(state, Card.GOLD)
            elif money >= 4 and smithies < 2:
                out.write("0: bought smithy\n")
                _try_buy(state, Card.SMITHY)
                smithies += 1
            elif money >= 3:
                out.write("0: bought silver\n")
                _try_buy(state, Card.SILVER)
            out.write("0: end turn\n")
        else:
            if adventurer_pos != -1:
                out.write(f"1: adventurer played from position {adventurer_pos}\n")
                _try_play(state, adventurer_pos)
                money = _play_treasures(state)
            if money >= 8:
                out.write("1: bought province\n")
                _try_buy(state, Card.PROVINCE)
            elif money >= 6 and adventurers < 2:
                out.write("1: bought adventurer\n")
                _try_buy(state, Card.ADVENTURER)
                adventurers += 1
            elif money >= 6:
                out.write("1: bought gold\n")
                _try_buy(state, Card.GOLD)
            elif money >= 3:
                out.write("1: bought silver\n")
                _try_buy(state, Card.SILVER)
            out.write("1: endTurn\n")
        state.end_turn()

    scores = (state.score_for(0), state.score_for(1))
    out.write("Finished game.\n")
    out.write(f"Player 0: {scores[0]}\nPlayer 1: {scores[1]}\n")
    return scores


def main(argv: Sequence[str] | None = None) -> int:
    """Play one scripted game with the seed given on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        sys.stderr.write(USAGE)
        return 1
    play_game(_atoi(args[0]), sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())