"""Interactive text session for playing a game at the terminal."""

from __future__ import annotations

import re
import sys
from typing import Iterable, Sequence, TextIO

from .cards import MAX_PLAYERS, Card
from .effects import play_card
from .game import GameError, GameState, initialize_game
from .interface import (
    add_card_to_hand,
    card_name,
    execute_bot_turn,
    format_deck,
    format_discard,
    format_hand,
    format_played,
    format_scores,
    format_state,
    format_supply,
    help_text,
)
from .rngs import RandomStreams

DEFAULT_KINGDOM = (
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
UNUSED = -1
USAGE = "Usage: player [integer random number seed]\n"

_COMMANDS = (
    "add", "buy", "end", "exit", "help", "init", "num",
    "play", "resi", "show", "stat", "supp", "whos",
)
_MAX_ARGS = 4
_INT = re.compile(r"[+-]?\d+")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _resolve(command: str) -> str | None:
    """Match a command on its first four characters; shorter names must match whole."""
    for name in _COMMANDS:
        if (len(name) == 4 and command[:4] == name) or command == name:
            return name
    return None


def _parse(line: str) -> tuple[str, list[int]]:
    """Split a line into its command word and up to four integer arguments."""
    words = line.split()
    if not words:
        return "", [UNUSED] * _MAX_ARGS
    args: list[int] = []
    for word in words[1 : 1 + _MAX_ARGS]:
        match = _INT.match(word)
        if match is None:
            break
        args.append(int(match.group()))
        if match.end() != len(word):
            break
    args.extend([UNUSED] * (_MAX_ARGS - len(args)))
    return words[0], args


class _Session:
    def __init__(self, seed: int, out: TextIO) -> None:
        self.seed = seed
        self.out = out
        self.rng = RandomStreams()
        self.state: GameState = initialize_game(2, list(DEFAULT_KINGDOM), seed, self.rng)
        self.bots = [False] * MAX_PLAYERS
        self.started = False
        self.turn_num = 0

    def run(self, lines: Iterable[str]) -> GameState:
        self.out.write('Please enter a command or "help" for commands\n')
        source = iter(lines)
        while True:
            player = self.state.whose_turn
            if self.started and self.state.is_game_over():
                self._finish()
                break
            if self.bots[player]:
                self.turn_num = execute_bot_turn(self.state, player, self.turn_num, self.out)
                continue
            self.out.write("$ ")
            self.out.flush()
            line = next(source, None)
            if line is None:
                break
            command, args = _parse(line)
            if not self._execute(_resolve(command), args, player):
                break
        return self.state

    def _finish(self) -> None:
        state = self.state
        self.out.write(format_scores(state))
        winners = state.get_winners()
        self.out.write(f"After {self.turn_num} turns, the winner(s) are:\n")
        for player, won in enumerate(winners):
            if won:
                self.out.write(f"Player {player}\n")
        for player in range(state.num_players):
            self.out.write(format_hand(state, player))
            self.out.write(format_played(state, player))
            self.out.write(format_discard(state, player))
            self.out.write(format_deck(state, player))

    def _execute(self, command: str | None, args: list[int], player: int) -> bool:
        """Carry out one command; return False when the session should stop."""
        state = self.state
        out = self.out
        arg0, arg1, arg2, arg3 = args
        match command:
            case "add":
                try:
                    add_card_to_hand(state, player, arg0)
                except GameError:
                    pass
                out.write(f"Player {player} adds {card_name(arg0)} to their hand\n\n")
            case "buy":
                try:
                    state.buy_card(arg0)
                except GameError:
                    out.write(f"Player {player} cannot buy card {arg0}, {card_name(arg0)}\n\n")
                else:
                    out.write(f"Player {player} buys card {arg0}, {card_name(arg0)}\n\n")
            case "end":
                if self.started:
                    if player == state.num_players - 1:
                        self.turn_num += 1
                    state.end_turn()
                    out.write(f"Player {state.whose_turn}'s turn number {self.turn_num}\n\n")
            case "exit":
                return False
            case "help":
                out.write(help_text())
            case "init":
                self._init(arg0, arg1)
            case "num":
                out.write(f"There are {state.num_hand_cards()} cards in your hand.\n")
            case "play":
                self._play(player, arg0, arg1, arg2, arg3)
            case "resi":
                state.end_turn()
                out.write(format_scores(state))
                return False
            case "show":
                if self.started:
                    out.write(format_hand(state, player))
                    out.write(format_played(state, player))
            case "stat":
                if self.started:
                    out.write(format_state(state))
            case "supp":
                out.write(format_supply(state))
            case "whos":
                out.write(f"Player {state.whose_turn}'s turn\n")
        return True

    def _init(self, num_players: int, num_bots: int) -> None:
        for player in range(num_players - num_bots, num_players):
            if 0 <= player < MAX_PLAYERS:
                self.bots[player] = True
        try:
            state = initialize_game(num_players, list(DEFAULT_KINGDOM), self.seed, self.rng)
        except GameError:
            self.out.write("\n")
            return
        self.out.write("\n")
        self.state = state
        self.started = True
        self.out.write(f"Player {state.whose_turn}'s turn number {self.turn_num}\n\n")

    def _play(self, player: int, hand_pos: int, c1: int, c2: int, c3: int) -> None:
        try:
            card = self.state.hand_card(hand_pos)
            play_card(self.state, hand_pos, c1, c2, c3)
        except GameError:
            self.out.write(f"Player {player} cannot play card {hand_pos}\n\n")
        else:
            self.out.write(f"Player {player} plays {card_name(card)}\n\n")


def run_session(seed: int, lines: Iterable[str], out: TextIO | None = None) -> GameState:
    """Run commands from ``lines`` until exit, resignation, game over or end of input.

    Returns the game state as it stands when the session stops.
    """
    if seed <= 0:
        raise ValueError("seed must be a positive integer")
    session = _Session(seed, out if out is not None else sys.stdout)
    return session.run(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Start an interactive session on standard input and output."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        sys.stdout.write(USAGE)
        return 0
    seed = _atoi(args[0])
    if seed <= 0:
        sys.stdout.write(USAGE)
        return 0
    run_session(seed, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())