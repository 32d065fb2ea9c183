from collections import Counter

import pytest

from dominionsim.cards import MAX_PLAYERS, Card
from dominionsim.game import Destination, GameError, GameState, initialize_game

K = [
    Card.ADVENTURER,
    Card.COUNCIL_ROOM,
    Card.FEAST,
    Card.GARDENS,
    Card.MINE,
    Card.REMODEL,
    Card.SMITHY,
    Card.VILLAGE,
    Card.BARON,
    Card.GREAT_HALL,
]


def new_game(players=2, seed=1):
    return initialize_game(players, list(K), seed)


def clear_cards(state):
    for p in range(MAX_PLAYERS):
        state.hands[p] = []
        state.decks[p] = []
        state.discards[p] = []


def test_supply_four_players():
    state = new_game(4)
    assert state.supply_count(Card.ADVENTURER) == 10
    assert state.supply_count(Card.CURSE) == 30
    assert state.supply_count(Card.ESTATE) == 12


def test_supply_two_players():
    state = new_game(2)
    assert state.supply_count(Card.CURSE) == 10
    assert state.supply_count(Card.PROVINCE) == 8
    assert state.supply_count(Card.GARDENS) == 8
    assert state.supply_count(Card.GREAT_HALL) == 8
    assert state.supply_count(Card.SILVER) == 40
    assert state.supply_count(Card.GOLD) == 30
    assert state.supply_count(Card.COPPER) == 60 - 7 * 2
    assert state.supply_count(Card.MINION) == -1
    assert state.supply_count(999) == -1


@pytest.mark.parametrize("players", [0, 1, 5])
def test_bad_player_count(players):
    with pytest.raises(GameError):
        initialize_game(players, list(K), 1)


def test_duplicate_kingdom_rejected():
    kingdom = list(K)
    kingdom[1] = kingdom[0]
    with pytest.raises(GameError):
        initialize_game(2, kingdom, 1)


def test_initial_hands_and_decks():
    state = new_game(3)
    assert state.num_hand_cards() == 5
    assert len(state.decks[0]) == 5
    for p in range(3):
        assert state.full_deck_count(p, Card.ESTATE) == 3
        assert state.full_deck_count(p, Card.COPPER) == 7
    assert state.hands[1] == []
    assert len(state.decks[1]) == 10
    assert state.coins == state.hands[0].count(Card.COPPER)
    assert (state.whose_turn, state.phase, state.num_actions, state.num_buys) == (0, 0, 1, 1)


def test_same_seed_same_game():
    a = new_game(2, seed=7)
    b = new_game(2, seed=7)
    assert a.decks == b.decks
    assert a.hands == b.hands


def test_shuffle_keeps_cards():
    state = new_game()
    before = Counter(state.decks[1])
    state.shuffle(1)
    assert Counter(state.decks[1]) == before


def test_shuffle_empty_deck_raises():
    state = new_game()
    state.decks[1] = []
    with pytest.raises(GameError):
        state.shuffle(1)


def test_draw_from_deck():
    state = new_game()
    top = state.decks[0][-1]
    deck_size = len(state.decks[0])
    assert state.draw_card(0) == top
    assert state.hands[0][-1] == top
    assert len(state.decks[0]) == deck_size - 1
    assert len(state.hands[0]) == 6


def test_draw_reshuffles_discard():
    state = new_game()
    owned = Counter(state.decks[1])
    state.discards[1] = state.decks[1]
    state.decks[1] = []
    card = state.draw_card(1)
    assert state.hands[1] == [card]
    assert len(state.decks[1]) == len(owned) and False or len(state.decks[1]) == sum(owned.values()) - 1
    assert state.discards[1] == []
    assert Counter(state.decks[1] + state.hands[1]) == owned


def test_draw_with_nothing_left():
    state = new_game()
    state.decks[1] = []
    state.discards[1] = []
    assert state.draw_card(1) is None
    assert state.hands[1] == []


def test_buy_card():
    state = new_game()
    state.coins = 8
    state.buy_card(Card.PROVINCE)
    assert state.supply_count(Card.PROVINCE) == 7
    assert state.discards[0] == [Card.PROVINCE]
    assert state.coins == 0
    assert state.num_buys == 0
    assert state.phase == 1


def test_buy_failures_leave_state():
    state = new_game()
    state.coins = 2
    with pytest.raises(GameError):
        state.buy_card(Card.GOLD)
    assert state.supply_count(Card.GOLD) == 30
    state.coins = 10
    with pytest.raises(GameError):
        state.buy_card(Card.MINION)
    state.num_buys = 0
    with pytest.raises(GameError):
        state.buy_card(Card.SILVER)
    assert state.discards[0] == []
    assert state.coins == 10


def test_hand_card_and_bad_position():
    state = new_game()
    assert state.hand_card(0) == state.hands[0][0]
    with pytest.raises(GameError):
        state.hand_card(5)
    with pytest.raises(GameError):
        state.hand_card(-1)


def test_end_turn():
    state = new_game()
    hand = list(state.hands[0])
    state.played_cards.append(Card.SMITHY)
    state.end_turn()
    assert state.discards[0] == hand
    assert state.hands[0] == []
    assert state.whose_turn == 1
    assert len(state.hands[1]) == 5
    assert state.played_cards == []
    assert state.coins == state.hands[1].count(Card.COPPER)
    state.end_turn()
    assert state.whose_turn == 0


def test_game_over_on_provinces():
    state = new_game()
    assert not state.is_game_over()
    state.supply[Card.PROVINCE] = 0
    assert state.is_game_over()


def test_game_over_on_three_piles():
    state = new_game()
    state.supply[Card.SMITHY] = 0
    state.supply[Card.VILLAGE] = 0
    assert not state.is_game_over()
    state.supply[Card.BARON] = 0
    assert state.is_game_over()


def test_last_piles_not_counted():
    state = new_game()
    state.supply[Card.SMITHY] = 0
    state.supply[Card.SEA_HAG] = 0
    state.supply[Card.TREASURE_MAP] = 0
    assert not state.is_game_over()


def test_score_after_first_turn():
    state = new_game()
    state.end_turn()
    assert state.score_for(0) == 3


def test_score_counts_victory_cards():
    state = new_game()
    clear_cards(state)
    state.hands[0] = [Card.PROVINCE, Card.CURSE, Card.GREAT_HALL]
    state.discards[0] = [Card.DUCHY]
    assert state.score_for(0) == 6 - 1 + 1 + 3


def test_gardens_count_curses():
    state = new_game()
    clear_cards(state)
    state.hands[0] = [Card.GARDENS]
    state.discards[0] = [Card.CURSE] * 10
    assert state.score_for(0) == 1 - 10


def test_winners_later_player_gets_bonus():
    state = new_game()
    clear_cards(state)
    state.hands[0] = [Card.ESTATE]
    state.hands[1] = [Card.ESTATE]
    assert state.get_winners() == [False, True]
    state.whose_turn = 1
    assert state.get_winners() == [True, True]


def test_winner_highest_score():
    state = new_game()
    clear_cards(state)
    state.hands[0] = [Card.PROVINCE]
    state.hands[1] = [Card.ESTATE]
    assert state.get_winners() == [True, False]


def test_discard_card_fills_gap():
    state = new_game()
    state.hands[0] = [Card.SMITHY, Card.COPPER, Card.GOLD]
    state.discard_card(0, 0)
    assert state.hands[0] == [Card.GOLD, Card.COPPER]
    assert state.played_cards == [Card.SMITHY]
    state.discard_card(1, 0, trash=True)
    assert state.hands[0] == [Card.GOLD]
    assert state.played_cards == [Card.SMITHY]
    with pytest.raises(GameError):
        state.discard_card(3, 0)


@pytest.mark.parametrize(
    "dest,pile", [(Destination.DISCARD, "discards"), (Destination.DECK, "decks"), (Destination.HAND, "hands")]
)
def test_gain_card(dest, pile):
    state = new_game()
    before = list(getattr(state, pile)[1])
    state.gain_card(Card.SILVER, 1, dest)
    assert getattr(state, pile)[1] == before + [Card.SILVER]
    assert state.supply_count(Card.SILVER) == 39


def test_gain_unavailable_card():
    state = new_game()
    with pytest.raises(GameError):
        state.gain_card(Card.MINION, 0)
    state.supply[Card.GOLD] = 0
    with pytest.raises(GameError):
        state.gain_card(Card.GOLD, 0)
    assert state.supply_count(Card.GOLD) == 0


def test_update_coins():
    state = GameState(num_players=2)
    state.hands[0] = [Card.COPPER, Card.SILVER, Card.GOLD, Card.ESTATE]
    state.update_coins(0, 4)
    assert state.coins == 1 + 2 + 3 + 4
    state.hands[0] = [Card.COPPER] * 3
    state.update_coins(0)
    assert state.coins == 3