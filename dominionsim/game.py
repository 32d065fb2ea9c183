"""Game state and the core rules: setup, drawing, buying, turns and scoring."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum

from .cards import KINGDOM_SIZE, MAX_PLAYERS, Card, get_cost
from .rngs import RandomStreams

_SCORED_PILES = 25
_TREASURE_VALUES = {Card.COPPER: 1, Card.SILVER: 2, Card.GOLD: 3}
_VICTORY_POINTS = {
    Card.CURSE: -1,
    Card.ESTATE: 1,
    Card.DUCHY: 3,
    Card.PROVINCE: 6,
    Card.GREAT_HALL: 1,
}


class GameError(Exception):
    """Raised when a move is not allowed in the current game state."""


class Destination(IntEnum):
    """Where a gained card is put."""

    DISCARD = 0
    DECK = 1
    HAND = 2


def _player_lists() -> list[list[int]]:
    return [[] for _ in range(MAX_PLAYERS)]


@dataclass
class GameState:
    """Everything on the table: supply, each player's cards and the turn."""

    num_players: int
    rng: RandomStreams = field(default_factory=RandomStreams)
    supply: list[int] = field(default_factory=lambda: [-1] * len(Card))
    embargo_tokens: list[int] = field(default_factory=lambda: [0] * len(Card))
    outpost_played: int = 0
    outpost_turn: int = 0
    whose_turn: int = 0
    phase: int = 0
    num_actions: int = 1
    coins: int = 0
    num_buys: int = 1
    hands: list[list[int]] = field(default_factory=_player_lists)
    decks: list[list[int]] = field(default_factory=_player_lists)
    discards: list[list[int]] = field(default_factory=_player_lists)
    played_cards: list[int] = field(default_factory=list)

    def shuffle(self, player: int) -> None:
        """Shuffle a player's deck; the deck is sorted first so results are repeatable."""
        deck = self.decks[player]
        if not deck:
            raise GameError(f"player {player} has no deck to shuffle")
        remaining = sorted(deck)
        shuffled = []
        while remaining:
            pick = math.floor(self.rng.random() * len(remaining))
            shuffled.append(remaining.pop(pick))
        deck[:] = shuffled

    def draw_card(self, player: int) -> int | None:
        """Move the top deck card into the hand and return it.

        An empty deck is first refilled from the shuffled discard pile.
        Returns ``None`` when there is nothing left to draw.
        """
        deck = self.decks[player]
        if not deck:
            discard = self.discards[player]
            deck.extend(discard)
            discard.clear()
            if not deck:
                return None
            self.shuffle(player)
        card = deck.pop()
        self.hands[player].append(card)
        return card

    def buy_card(self, supply_pos: int) -> None:
        """Buy a card from the supply into the current player's discard pile."""
        if self.num_buys < 1:
            raise GameError("no buys left")
        if self.supply_count(supply_pos) < 1:
            raise GameError(f"no cards of type {supply_pos} left")
        cost = get_cost(supply_pos)
        if self.coins < cost:
            raise GameError(f"card {supply_pos} costs {cost}, only {self.coins} coins")
        self.phase = 1
        self.gain_card(supply_pos, self.whose_turn, Destination.DISCARD)
        self.coins -= cost
        self.num_buys -= 1

    def num_hand_cards(self) -> int:
        """Number of cards in the current player's hand."""
        return len(self.hands[self.whose_turn])

    def hand_card(self, hand_pos: int) -> int:
        """The card at ``hand_pos`` in the current player's hand."""
        hand = self.hands[self.whose_turn]
        if not 0 <= hand_pos < len(hand):
            raise GameError(f"no card at hand position {hand_pos}")
        return hand[hand_pos]

    def supply_count(self, card: int) -> int:
        """Cards left in a supply pile; -1 for a pile not in the game."""
        if 0 <= card < len(self.supply):
            return self.supply[card]
        return -1

    def full_deck_count(self, player: int, card: int) -> int:
        """How many copies of ``card`` a player owns across deck, hand and discard."""
        return sum(
            pile.count(card)
            for pile in (self.decks[player], self.hands[player], self.discards[player])
        )

    def end_turn(self) -> None:
        """Discard the current hand, pass the turn and draw the next player's hand."""
        current = self.whose_turn
        self.discards[current].extend(self.hands[current])
        self.hands[current].clear()
        self.whose_turn = current + 1 if current < self.num_players - 1 else 0
        self.outpost_played = 0
        self.phase = 0
        self.num_actions = 1
        self.coins = 0
        self.num_buys = 1
        self.played_cards.clear()
        self.hands[self.whose_turn].clear()
        for _ in range(5):
            self.draw_card(self.whose_turn)
        self.update_coins(self.whose_turn, 0)

    def is_game_over(self) -> bool:
        """True when provinces are gone or three supply piles are empty."""
        if self.supply[Card.PROVINCE] == 0:
            return True
        empty = sum(1 for count in self.supply[:_SCORED_PILES] if count == 0)
        return empty >= 3

    def _card_points(self, player: int, card: int) -> int:
        if card == Card.GARDENS:
            return self.full_deck_count(player, Card.CURSE) // 10
        return _VICTORY_POINTS.get(card, 0)

    def score_for(self, player: int) -> int:
        """Victory points for a player.

        The deck is counted only as far as the size of the discard pile.
        """
        discard = self.discards[player]
        counted = [
            *self.hands[player],
            *discard,
            *self.decks[player][: len(discard)],
        ]
        return sum(self._card_points(player, card) for card in counted)

    def get_winners(self) -> list[bool]:
        """One flag per player, true for each winner (ties allowed).

        Players later in turn order than the current player who share the
        top score get one bonus point, since they had one turn fewer.
        """
        scores = [self.score_for(p) for p in range(self.num_players)]
        high = max(scores)
        scores = [
            score + 1 if score == high and p > self.whose_turn else score
            for p, score in enumerate(scores)
        ]
        high = max(scores)
        return [score == high for score in scores]

    def discard_card(self, hand_pos: int, player: int, trash: bool = False) -> None:
        """Remove a card from a hand; unless trashed it goes to the played pile.

        The last card of the hand fills the gap that is left.
        """
        hand = self.hands[player]
        if not 0 <= hand_pos < len(hand):
            raise GameError(f"no card at hand position {hand_pos}")
        if not trash:
            self.played_cards.append(hand[hand_pos])
        last = hand.pop()
        if hand_pos < len(hand):
            hand[hand_pos] = last

    def gain_card(
        self,
        supply_pos: int,
        player: int,
        to: Destination = Destination.DISCARD,
    ) -> None:
        """Take a card from the supply and give it to a player."""
        if self.supply_count(supply_pos) < 1:
            raise GameError(f"supply pile {supply_pos} is empty or not in the game")
        card = Card(supply_pos)
        if to == Destination.DECK:
            self.decks[player].append(card)
        elif to == Destination.HAND:
            self.hands[player].append(card)
        else:
            self.discards[player].append(card)
        self.supply[supply_pos] -= 1

    def update_coins(self, player: int, bonus: int = 0) -> None:
        """Set coins to the treasure in a player's hand plus ``bonus``."""
        self.coins = (
            sum(_TREASURE_VALUES.get(card, 0) for card in self.hands[player]) + bonus
        )


def initialize_game(
    num_players: int,
    kingdom: list[int],
    random_seed: int,
    rng: RandomStreams | None = None,
) -> GameState:
    """Set up supply, starting decks and the first player's hand."""
    rng = rng if rng is not None else RandomStreams()
    rng.select_stream(1)
    rng.put_seed(random_seed)

    if num_players > MAX_PLAYERS or num_players < 2:
        raise GameError(f"number of players must be 2 to {MAX_PLAYERS}")
    if len(kingdom) != KINGDOM_SIZE:
        raise GameError(f"expected {KINGDOM_SIZE} kingdom cards")
    if len(set(kingdom)) != len(kingdom):
        raise GameError("kingdom cards must all be different")

    state = GameState(num_players=num_players, rng=rng)
    supply = state.supply
    two = num_players == 2
    if two:
        supply[Card.CURSE] = 10
    elif num_players == 3:
        supply[Card.CURSE] = 20
    else:
        supply[Card.CURSE] = 30
    victory = 8 if two else 12
    for card in (Card.ESTATE, Card.DUCHY, Card.PROVINCE):
        supply[card] = victory
    supply[Card.COPPER] = 60 - 7 * num_players
    supply[Card.SILVER] = 40
    supply[Card.GOLD] = 30

    chosen = set(kingdom)
    for card in Card:
        if card < Card.ADVENTURER:
            continue
        if card not in chosen:
            supply[card] = -1
        elif card in (Card.GREAT_HALL, Card.GARDENS):
            supply[card] = victory
        else:
            supply[card] = 10

    for player in range(num_players):
        state.decks[player] = [Card.ESTATE] * 3 + [Card.COPPER] * 7
    for player in range(num_players):
        state.shuffle(player)

    for _ in range(5):
        state.draw_card(state.whose_turn)
    state.update_coins(state.whose_turn, 0)
    return state