"""Action card effects and playing a card from the current hand."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from .cards import Card, get_cost
from .game import Destination, GameError, GameState

_TREASURES = frozenset({Card.COPPER, Card.SILVER, Card.GOLD})
_VICTORIES = frozenset(
    {Card.ESTATE, Card.DUCHY, Card.PROVINCE, Card.GARDENS, Card.GREAT_HALL}
)
_NO_CARD = -1


@dataclass(frozen=True)
class _Play:
    state: GameState
    player: int
    next_player: int
    choice1: int
    choice2: int
    choice3: int
    hand_pos: int

    def others(self) -> list[int]:
        return [p for p in range(self.state.num_players) if p != self.player]


def _hand_at(state: GameState, player: int, pos: int) -> int:
    hand = state.hands[player]
    if not 0 <= pos < len(hand):
        raise GameError(f"no card at hand position {pos}")
    return hand[pos]


def _try_gain(state: GameState, card: int, player: int, to: Destination) -> bool:
    try:
        state.gain_card(card, player, to)
    except GameError:
        return False
    return True


def _draw(state: GameState, player: int, count: int) -> None:
    for _ in range(count):
        state.draw_card(player)


def _discard_first(state: GameState, player: int, card: int, trash: bool = False) -> None:
    """Discard the lowest-indexed copy of ``card`` in a hand, if there is one."""
    hand = state.hands[player]
    if card in hand:
        state.discard_card(hand.index(card), player, trash)


def _discard_hand(state: GameState, player: int, hand_pos: int) -> None:
    """Discard a whole hand by repeatedly discarding at ``hand_pos``."""
    hand = state.hands[player]
    while hand:
        pos = hand_pos if 0 <= hand_pos < len(hand) else len(hand) - 1
        state.discard_card(pos, player)


def _reveal(deck: list[int]) -> int:
    """Reveal the top card; two cards leave the deck for each reveal."""
    card = deck[-1] if deck else _NO_CARD
    del deck[-2:]
    return card


def _adventurer(p: _Play) -> None:
    state, player = p.state, p.player
    hand = state.hands[player]
    set_aside: list[int] = []
    treasures = 0
    while treasures < 2:
        card = state.draw_card(player)
        if card is None:
            break
        if card in _TREASURES:
            treasures += 1
        else:
            set_aside.append(hand.pop())
    state.discards[player].extend(reversed(set_aside))


def _council_room(p: _Play) -> None:
    state = p.state
    _draw(state, p.player, 4)
    state.num_buys += 1
    for other in p.others():
        state.draw_card(other)
    state.discard_card(p.hand_pos, p.player)


def _feast(p: _Play) -> None:
    state = p.state
    state.coins = 5
    if state.supply_count(p.choice1) <= 0:
        raise GameError(f"no cards of type {p.choice1} left")
    if state.coins < get_cost(p.choice1):
        raise GameError("that card is too expensive")
    state.gain_card(p.choice1, p.player, Destination.DISCARD)


def _gardens(p: _Play) -> None:
    raise GameError("gardens cannot be played")


def _mine(p: _Play) -> None:
    state, player = p.state, p.player
    hand = state.hands[player]
    if not 0 <= p.choice1 < len(hand):
        return
    trashed = hand[p.choice1]
    target = p.choice1
    if not Card.COPPER <= trashed <= Card.GOLD:
        return
    if not Card.CURSE <= target <= Card.TREASURE_MAP:
        return
    if get_cost(trashed) + 3 > get_cost(target):
        return
    _try_gain(state, target, player, Destination.HAND)
    state.discard_card(p.hand_pos, player)
    _discard_first(state, player, trashed)


def _remodel(p: _Play) -> None:
    state, player = p.state, p.player
    trashed = _hand_at(state, player, p.choice1)
    if get_cost(trashed) + 2 > get_cost(p.choice2):
        raise GameError(f"card {p.choice2} costs too much to remodel into")
    _try_gain(state, p.choice2, player, Destination.DISCARD)
    state.discard_card(p.hand_pos, player)
    _discard_first(state, player, trashed)


def _smithy(p: _Play) -> None:
    _draw(p.state, p.player, 3)
    p.state.discard_card(p.hand_pos, p.player)


def _village(p: _Play) -> None:
    p.state.draw_card(p.player)
    p.state.num_actions += 2
    p.state.discard_card(p.hand_pos, p.player)


def _baron(p: _Play) -> None:
    state, player = p.state, p.player
    state.num_buys += 1
    hand = state.hands[player]
    if p.choice1 > 0 and Card.ESTATE in hand:
        state.coins += 4
        state.discards[player].append(hand.pop(hand.index(Card.ESTATE)))
    elif state.supply_count(Card.ESTATE) > 0:
        state.gain_card(Card.ESTATE, player, Destination.DISCARD)
        state.supply[Card.ESTATE] -= 1


def _great_hall(p: _Play) -> None:
    p.state.draw_card(p.player)
    p.state.num_actions += 1
    p.state.discard_card(p.hand_pos, p.player)


def _minion(p: _Play) -> None:
    state, player = p.state, p.player
    state.num_actions += 1
    state.discard_card(p.hand_pos, player)
    if p.choice1:
        state.coins += 2
    elif p.choice2:
        _discard_hand(state, player, p.hand_pos)
        _draw(state, player, 4)
        for other in p.others():
            if len(state.hands[other]) > 4:
                _discard_hand(state, other, p.hand_pos)
                _draw(state, other, 4)


def _steward(p: _Play) -> None:
    state, player = p.state, p.player
    if p.choice1 == 1:
        _draw(state, player, 2)
    elif p.choice1 == 2:
        state.coins += 2
    else:
        state.discard_card(p.choice2, player, True)
        state.discard_card(p.choice3, player, True)
    state.discard_card(p.hand_pos, player)


def _tribute(p: _Play) -> None:
    state = p.state
    deck = state.decks[p.next_player]
    discard = state.discards[p.next_player]
    revealed = [_NO_CARD, _NO_CARD]
    if len(deck) + len(discard) <= 1:
        if deck:
            revealed[0] = deck.pop()
    else:
        if not deck:
            # Only the first half of the discard pile reaches the deck; the
            # slots left behind in the discard pile hold no card.
            moved = (len(discard) + 1) // 2
            deck.extend(discard[:moved])
            discard[:] = [_NO_CARD] * (len(discard) - moved)
            state.shuffle(p.next_player)
        revealed = [_reveal(deck), _reveal(deck)]

    if revealed[0] == revealed[1]:
        state.played_cards.append(revealed[1])
        revealed[1] = _NO_CARD

    for card in revealed:
        if card in _TREASURES:
            state.coins += 2
        elif card in _VICTORIES:
            _draw(state, p.player, 2)
        else:
            state.num_actions += 2


def _ambassador(p: _Play) -> None:
    state, player = p.state, p.player
    if not 0 <= p.choice2 <= 2 or p.choice1 == p.hand_pos:
        return
    hand = state.hands[player]
    if not 0 <= p.choice1 < len(hand):
        return
    revealed = hand[p.choice1]
    matches = sum(
        1
        for i in range(len(hand))
        if i != p.hand_pos and i == revealed and i != p.choice1
    )
    if matches < p.choice2:
        return
    state.supply[revealed] += p.choice2
    for other in p.others():
        _try_gain(state, revealed, other, Destination.DISCARD)
    state.discard_card(p.hand_pos, player)
    for _ in range(p.choice2):
        if p.choice1 >= len(hand):
            break
        _discard_first(state, player, hand[p.choice1], trash=True)


def _cutpurse(p: _Play) -> None:
    state = p.state
    state.update_coins(p.player, 2)
    for other in p.others():
        _discard_first(state, other, Card.COPPER)
    state.discard_card(p.hand_pos, p.player)


def _embargo(p: _Play) -> None:
    state = p.state
    state.coins += 2
    if state.supply_count(p.choice1) == -1:
        raise GameError(f"supply pile {p.choice1} is not in the game")
    state.embargo_tokens[p.choice1] += 1
    state.discard_card(p.hand_pos, p.player, True)


def _outpost(p: _Play) -> None:
    p.state.outpost_played += 1
    p.state.discard_card(p.hand_pos, p.player)


def _salvager(p: _Play) -> None:
    state = p.state
    state.num_buys += 1
    if p.choice1:
        state.coins += get_cost(state.hand_card(p.choice1))
        state.discard_card(p.choice1, p.player, True)
    state.discard_card(p.hand_pos, p.player)


def _sea_hag(p: _Play) -> None:
    state = p.state
    for other in p.others():
        deck = state.decks[other]
        if not deck:
            continue
        state.discards[other].append(deck.pop())
        # The curse meant for the top of the deck lands past it and is lost,
        # taking two more cards off the deck with it.
        del deck[-2:]


def _treasure_map(p: _Play) -> None:
    state, player = p.state, p.player
    hand = state.hands[player]
    other = next(
        (i for i, card in enumerate(hand) if card == Card.TREASURE_MAP and i != p.hand_pos),
        None,
    )
    if other is None:
        raise GameError("no second treasure map in hand")
    state.discard_card(p.hand_pos, player, True)
    if other < len(hand):
        state.discard_card(other, player, True)
    else:
        hand.pop()
    for _ in range(4):
        _try_gain(state, Card.GOLD, player, Destination.DECK)


_Effect = Callable[[_Play], None]

_EFFECTS: dict[int, tuple[_Effect, ...]] = {
    Card.ADVENTURER: (_adventurer,),
    Card.COUNCIL_ROOM: (_council_room,),
    Card.FEAST: (_feast,),
    Card.GARDENS: (_gardens,),
    Card.MINE: (_mine, _remodel),
    Card.REMODEL: (_remodel,),
    Card.SMITHY: (_smithy,),
    Card.VILLAGE: (_village,),
    Card.BARON: (_baron, _great_hall),
    Card.GREAT_HALL: (_great_hall,),
    Card.MINION: (_minion, _steward),
    Card.STEWARD: (_steward,),
    Card.TRIBUTE: (_tribute, _ambassador, _cutpurse),
    Card.AMBASSADOR: (_ambassador, _cutpurse),
    Card.CUTPURSE: (_cutpurse,),
    Card.EMBARGO: (_embargo,),
    Card.OUTPOST: (_outpost,),
    Card.SALVAGER: (_salvager,),
    Card.SEA_HAG: (_sea_hag,),
    Card.TREASURE_MAP: (_treasure_map,),
}


def card_effect(
    state: GameState,
    card: int,
    choice1: int,
    choice2: int,
    choice3: int,
    hand_pos: int,
) -> None:
    """Apply the effect of ``card`` played from ``hand_pos`` by the current player.

    Mine carries on into Remodel, Baron into Great Hall, Minion into
    Steward, Tribute into Ambassador and Ambassador into Cutpurse.
    """
    effects = _EFFECTS.get(card)
    if effects is None:
        raise GameError(f"card {card} has no effect to play")
    player = state.whose_turn
    next_player = player + 1
    if next_player > state.num_players - 1:
        next_player = 0
    play = _Play(state, player, next_player, choice1, choice2, choice3, hand_pos)
    for effect in effects:
        effect(play)


def play_card(
    state: GameState,
    hand_pos: int,
    choice1: int = -1,
    choice2: int = -1,
    choice3: int = -1,
) -> None:
    """Play the action card at ``hand_pos`` in the current player's hand."""
    if state.phase != 0:
        raise GameError("cards can only be played in the action phase")
    if state.num_actions < 1:
        raise GameError("no actions left")
    card = state.hand_card(hand_pos)
    if not Card.ADVENTURER <= card <= Card.TREASURE_MAP:
        raise GameError(f"card {card} is not an action card")
    card_effect(state, card, choice1, choice2, choice3, hand_pos)
    state.num_actions -= 1
    state.update_coins(state.whose_turn, 0)