# dominionsim

A small simulator of the Dominion deck-building card game. It holds the
game rules for the base treasure and victory cards and nineteen kingdom
cards, a seeded multi-stream Lehmer random number generator that makes
every game reproducible, a simple buying bot, a scripted two-player
match and an interactive text console.

## Installing

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Commands

### `dominion-play SEED`

Plays a complete two-player game between two scripted strategies and
prints a log of what each player did, followed by the final scores.
Player 0 plays a Smithy when it has one and buys up to two Smithies;
player 1 plays an Adventurer when it has one and buys up to two
Adventurers. Both otherwise buy Province, Gold or Silver by the coins
in hand.

    dominion-play 42

### `dominion-player SEED`

Starts the interactive console. The seed must be a positive integer;
otherwise a usage line is printed. Commands are read one per line at
the `$ ` prompt and are recognised by their first four letters. Type
`help` for the list:

    add [card]                   put a kingdom card straight into your hand
    buy [card]                   buy the card at that supply position
    end                          end your turn
    init [players] [bots]        start a game; the last [bots] players are bots
    num                          number of cards in your hand
    play [hand index] [c1] [c2] [c3]
                                 play an action card with its choices
    resign                       end the turn, print the scores and stop
    show                         your hand and the cards played this turn
    stat                         phase, actions, coins and buys
    supp                         the supply piles in play
    whos                         whose turn it is
    exit                         leave the console

A typical start:

    init 2 1
    show
    play 0 -1 -1 -1
    buy 5
    end

When the game is over the console prints the scores, the winners and
every player's hand, played cards, discard pile and deck, and stops.

### `dominion-rt SEED TARGET`

Seeds stream 1 of the generator with `SEED` and draws values scaled to
integers in `[0, 1000000000)` until `TARGET` comes up, then prints
`Found the bug!`. Depending on the target this can take a very large
number of draws.

    dominion-rt 1 123456789

## Library use

```python
from dominionsim.cards import Card
from dominionsim.game import GameError, initialize_game, kingdom_cards
from dominionsim.effects import play_card

kingdom = kingdom_cards(
    Card.ADVENTURER, Card.GARDENS, Card.EMBARGO, Card.VILLAGE, Card.MINION,
    Card.MINE, Card.CUTPURSE, Card.SEA_HAG, Card.TRIBUTE, Card.SMITHY,
)
state = initialize_game(2, kingdom, 1)
print(state.whose_turn(), state.num_hand_cards(), state.coins)

state.buy_card(Card.COPPER)
try:
    state.buy_card(Card.PROVINCE)
except GameError as exc:
    print("cannot buy:", exc)
state.end_turn()
```

The modules:

- `dominionsim.cards` – the `Card` and `Phase` enums, `get_cost`,
  `card_cost`, `card_name` and `phase_name`.
- `dominionsim.game` – `GameState` with the basic moves (`buy_card`,
  `draw_card`, `gain_card`, `discard_card`, `end_turn`, `shuffle`,
  `score_for`, `get_winners`, `is_game_over` and others),
  `initialize_game` and `kingdom_cards`.
- `dominionsim.effects` – `play_card` and `card_effect`, the actions of
  the kingdom cards.
- `dominionsim.interface` – text views (`format_hand`, `format_supply`,
  `format_state`, `format_scores`, …), `help_text`, `add_card_to_hand`,
  `count_hand_coins`, `select_kingdom_cards` and the bot,
  `execute_bot_turn`.
- `dominionsim.player` – the console as a `Session` object whose
  `handle(line)` returns the output of one command, and `run_session`
  for a whole scripted transcript.
- `dominionsim.playdom` – `play_game(seed)`, a generator of the log
  lines of the scripted match.
- `dominionsim.rt` – `find_value(seed, target)`, which returns the
  number of draws it took.
- `dominionsim.rngs` – `StreamRandom`, the generator with 256
  independent streams; `self_test()` checks it against its known
  reference states.

Moves that are not allowed raise `dominionsim.game.GameError` and leave
the state as it was; drawing when a player's deck and discard pile are
both empty raises `EmptyDeckError`, a subclass of it.

## What it does not do

- The bot only buys cards; it never plays action cards.
- Playing Outpost sets a counter but gives no extra turn, and Embargo
  tokens are recorded on the piles but cost nothing when buying.
- Feast is not trashed when played.
- `score_for` counts a player's deck only as far as the length of their
  discard pile.
- There is no graphical interface and no saving or loading of games.