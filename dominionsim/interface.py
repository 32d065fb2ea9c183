"""Text rendering of the game and helpers for the interactive player."""

from __future__ import annotations

import math
import sys
from enum import IntEnum
from typing import TextIO

from .cards import KINGDOM_SIZE, Card
from .game import GameError, GameState
from .rngs import RandomStreams

NUM_TOTAL_K_CARDS = len(Card)
UNKNOWN_COST = 1000

_COIN_VALUES = {Card.COPPER: 1, Card.SILVER: 2, Card.GOLD: 3}

_NAMES = {
    Card.CURSE: "Curse",
    Card.ESTATE: "Estate",
    Card.DUCHY: "Duchy",
    Card.PROVINCE: "Province",
    Card.COPPER: "Copper",
    Card.SILVER: "Silver",
    Card.GOLD: "Gold",
    Card.ADVENTURER: "Adventurer",
    Card.COUNCIL_ROOM: "Council Room",
    Card.FEAST: "Feast",
    Card.GARDENS: "Gardens",
    Card.MINE: "Mine",
    Card.REMODEL: "Remodel",
    Card.SMITHY: "Smithy",
    Card.VILLAGE: "Village",
    Card.BARON: "Baron",
    Card.GREAT_HALL: "Great Hall",
    Card.MINION: "Minion",
    Card.STEWARD: "Steward",
    Card.TRIBUTE: "Tribute",
    Card.AMBASSADOR: "Ambassador",
    Card.CUTPURSE: "Cutpurse",
    Card.EMBARGO: "Embargo",
    Card.OUTPOST: "Outpost",
    Card.SALVAGER: "Salvager",
    Card.SEA_HAG: "Sea Hag",
    Card.TREASURE_MAP: "Treasure Map",
}

_COSTS = {
    Card.CURSE: 0,
    Card.ESTATE: 2,
    Card.DUCHY: 5,
    Card.PROVINCE: 8,
    Card.COPPER: 0,
    Card.SILVER: 3,
    Card.GOLD: 6,
    Card.ADVENTURER: 6,
    Card.COUNCIL_ROOM: 5,
    Card.FEAST: 4,
    Card.GARDENS: 4,
    Card.MINE: 5,
    Card.REMODEL: 4,
    Card.SMITHY: 4,
    Card.VILLAGE: 3,
    Card.BARON: 4,
    Card.GREAT_HALL: 3,
    Card.MINION: 5,
    Card.STEWARD: 3,
    Card.TRIBUTE: 5,
    Card.AMBASSADOR: 3,
    Card.CUTPURSE: 4,
    Card.EMBARGO: 2,
    Card.OUTPOST: 5,
    Card.SALVAGER: 4,
    Card.SEA_HAG: 4,
    Card.TREASURE_MAP: 4,
}

_HELP = (
    "Commands are: \n"
    "  add [Supply Card Number] \t\t\t- add any card to your hand (teh hacks)\n"
    "  buy [Supply Card Number] \t\t\t- buy a card at supply position\n"
    "  end \t\t\t      \t\t\t- end your turn\n"
    "  init [Number of Players] [Number of Bots] \t- initialize the game\n"
    "  num \t\t\t      \t\t\t- print number of cards in your hand\n"
    "  play [Hand Index] [Choice] [Choice] [Choice]\t- play a card from your hand\n"
    "  resign\t\t\t\t\t- end the game showing the current scores\n"
    "  show \t\t\t\t\t\t- show your current hand\n"
    "  stat \t\t\t\t\t\t- show your turn's status\n"
    "  supp \t\t\t\t\t\t- show the supply\n"
    "  whos \t\t\t      \t\t\t- whos turn\n"
    "  exit \t\t\t      \t\t\t- exit the interface"
    "\n\n"
)


class Phase(IntEnum):
    """The phases of a turn."""

    ACTION = 0
    BUY = 1
    CLEANUP = 2


_PHASE_NAMES = {Phase.ACTION: "Action", Phase.BUY: "Buy", Phase.CLEANUP: "Cleanup"}


def card_name(card: int) -> str:
    """Display name of a card, or ``"?"`` for a number that is no card."""
    return _NAMES.get(card, "?")


def card_cost(card: int) -> int:
    """Printed cost of a card; unknown cards cost ``UNKNOWN_COST``."""
    return _COSTS.get(card, UNKNOWN_COST)


def phase_name(phase: int) -> str:
    """Display name of a turn phase."""
    try:
        return _PHASE_NAMES[Phase(phase)]
    except ValueError:
        raise ValueError(f"unknown phase {phase}") from None


def _format_pile(title: str, cards: list[int], trailing: str) -> str:
    lines = [title]
    if cards:
        lines.append("#  Card\n")
    lines.extend(
        f"{index:<2} {card_name(card):<13}{trailing}\n" for index, card in enumerate(cards)
    )
    lines.append("\n")
    return "".join(lines)


def format_hand(state: GameState, player: int) -> str:
    """A numbered listing of a player's hand."""
    return _format_pile(f"Player {player}'s hand:\n", state.hands[player], "")


def format_deck(state: GameState, player: int) -> str:
    """A numbered listing of a player's deck, bottom card first."""
    return _format_pile(f"Player {player}'s deck: \n", state.decks[player], "")


def format_played(state: GameState, player: int) -> str:
    """A numbered listing of the cards played this turn."""
    return _format_pile(f"Player {player}'s played cards: \n", state.played_cards, " ")


def format_discard(state: GameState, player: int) -> str:
    """A numbered listing of a player's discard pile."""
    return _format_pile(f"Player {player}'s discard: \n", state.discards[player], " ")


def format_supply(state: GameState) -> str:
    """A table of the supply piles in the game with cost and copies left."""
    lines = ["#   Card          Cost   Copies\n"]
    for card in Card:
        count = state.supply[card]
        if count == -1:
            continue
        lines.append(
            f"{int(card):<2}  {card_name(card):<13} {card_cost(card):<5}  {count:<5}\n"
        )
    lines.append("\n")
    return "".join(lines)


def format_state(state: GameState) -> str:
    """The current player, phase, actions, coins and buys."""
    return (
        f"Player {state.whose_turn}:\n"
        f"{phase_name(state.phase)} phase\n"
        f"{state.num_actions} actions\n"
        f"{state.coins} coins\n"
        f"{state.num_buys} buys\n\n"
    )


def format_scores(state: GameState) -> str:
    """One line with the score of each player."""
    return "".join(
        f"Player {player} has a score of {state.score_for(player)}\n"
        for player in range(state.num_players)
    )


def help_text() -> str:
    """The list of commands the interactive player understands."""
    return _HELP


def add_card_to_hand(state: GameState, player: int, card: int) -> None:
    """Put a kingdom card straight into a player's hand."""
    if not Card.ADVENTURER <= card < NUM_TOTAL_K_CARDS:
        raise GameError(f"card {card} is not a kingdom card")
    state.hands[player].append(Card(card))


def select_kingdom_cards(
    random_seed: int, rng: RandomStreams | None = None
) -> list[int]:
    """Pick ten different kingdom cards at random from ``random_seed``."""
    rng = rng if rng is not None else RandomStreams()
    rng.select_stream(1)
    rng.put_seed(random_seed)
    chosen: list[int] = []
    while len(chosen) < KINGDOM_SIZE:
        card = math.floor(rng.random() * NUM_TOTAL_K_CARDS)
        if card < Card.ADVENTURER or card in chosen:
            continue
        chosen.append(Card(card))
    return chosen


def count_hand_coins(state: GameState, player: int) -> int:
    """Coins the treasure cards in a player's hand are worth."""
    return sum(_COIN_VALUES.get(card, 0) for card in state.hands[player])


def execute_bot_turn(
    state: GameState,
    player: int,
    turn_num: int,
    out: TextIO | None = None,
) -> int:
    """Play one turn for a computer player and return the updated turn number."""
    out = out if out is not None else sys.stdout
    coins = count_hand_coins(state, player)
    out.write(
        f"*****************Executing Bot Player {player} "
        f"Turn Number {turn_num}*****************\n"
    )
    out.write(format_supply(state))

    purchase = None
    if coins >= _COSTS[Card.PROVINCE] and state.supply_count(Card.PROVINCE) > 0:
        purchase = Card.PROVINCE
    elif state.supply_count(Card.PROVINCE) == 0 and coins >= _COSTS[Card.DUCHY]:
        purchase = Card.DUCHY
    elif coins >= _COSTS[Card.GOLD] and state.supply_count(Card.GOLD) > 0:
        purchase = Card.GOLD
    elif coins >= _COSTS[Card.SILVER] and state.supply_count(Card.SILVER) > 0:
        purchase = Card.SILVER
    if purchase is not None:
        try:
            state.buy_card(purchase)
        except GameError:
            pass
        out.write(f"Player {player} buys card {card_name(purchase)}\n\n")

    if player == state.num_players - 1:
        turn_num += 1
    state.end_turn()
    if not state.is_game_over():
        out.write(f"Player {state.whose_turn}'s turn number {turn_num}\n\n")
    return turn_num