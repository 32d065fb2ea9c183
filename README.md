# dominionsim

A small simulator of the Dominion deck-building card game. It models the
base supply, twenty kingdom cards and their effects, turn flow, scoring and
winners. All shuffling is driven by a reproducible multi-stream Lehmer
random number generator, so the same seed always gives the same game.

It has no dependencies outside the standard library and needs Python 3.10
or later.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Commands

### Interactive play

```
dominion-player 7
```

The single argument is a positive integer random seed; with no argument,
more than one, or a seed that is not positive, the command prints a usage
line and stops. At the `$` prompt, type `help` for the list of commands.

A two-player game is set up at start, but turns can only be ended, and the
hand and status only shown, after `init`:

- `init [players] [bots]` — start a game with 2 to 4 players, the last
  `bots` of whom are played by the computer
- `play [hand index] [choice] [choice] [choice]` — play an action card
- `buy [supply number]` — buy a card from the supply
- `end` — end your turn
- `show` — show your hand and the cards played this turn
- `stat` — show phase, actions, coins and buys
- `supp` — show the supply
- `whos` — show whose turn it is
- `num` — show how many cards are in your hand
- `add [supply number]` — put a kingdom card straight into your hand
- `resign` — end the turn and print the scores, then stop
- `exit` — stop

Commands of four or more letters are recognised by their first four
letters (`resign`, `supply`). Computer players buy a Province when they
can afford one, a Duchy once Provinces are gone, otherwise Gold or Silver.
When the game ends the session prints the scores, the winners and every
player's cards.

### A scripted game

```
dominion-playdom 42
```

Plays a complete two-player game with fixed strategies — player 0 plays
Smithy and buys up to two of them, player 1 plays Adventurer and buys up
to two of them — printing each action and then both scores.

## Library use

- `dominionsim.rngs` — `RandomStreams`, a set of 256 Lehmer generators
  (`random`, `put_seed`, `get_seed`, `plant_seeds`, `select_stream`,
  `self_test`), and `find_value(seed, target, limit)`, which counts the
  draws from stream 1 until `floor(u * 1e9)` equals `target`.
- `dominionsim.cards` — the `Card` enumeration, `get_cost` and
  `kingdom_cards`.
- `dominionsim.game` — `initialize_game`, returning a `GameState` with
  `shuffle`, `draw_card`, `buy_card`, `gain_card`, `discard_card`,
  `update_coins`, `end_turn`, `is_game_over`, `score_for`, `get_winners`
  and more; `Destination` says where a gained card goes.
- `dominionsim.effects` — `play_card` and `card_effect`.
- `dominionsim.interface` — text formatting of hands, decks, discard
  piles, played cards, supply, turn status and scores; `card_name`,
  `card_cost`, `phase_name`, `help_text`, `add_card_to_hand`,
  `count_hand_coins`, `select_kingdom_cards` and `execute_bot_turn`.
- `dominionsim.playdom` — `play_game(seed, out)`, returning both scores.
- `dominionsim.player` — `run_session(seed, lines, out)`, which runs the
  interactive command loop over any iterable of input lines and returns
  the final game state.

Moves the rules forbid raise `dominionsim.game.GameError`.

```python
from dominionsim.game import initialize_game
from dominionsim.cards import Card

state = initialize_game(2, [Card.ADVENTURER, Card.GARDENS, Card.EMBARGO,
                            Card.VILLAGE, Card.MINION, Card.MINE,
                            Card.CUTPURSE, Card.SEA_HAG, Card.TRIBUTE,
                            Card.SMITHY], 1)
print(state.hands[0], state.coins)
```

## What it does not do

Games live only in memory: there is no saving or loading of a game, and
all players share one terminal — there is no network play.