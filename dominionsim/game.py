"""Game state and the basic rules that act on it."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import chain
from typing import Iterable, Optional

from .cards import (
    COPPER_VALUE,
    GOLD_VALUE,
    HANDSIZE,
    MAX_PLAYERS,
    NUM_K_CARDS,
    SILVER_VALUE,
    Card,
    Phase,
    get_cost,
)
from .rngs import StreamRandom

TO_DISCARD = 0
TO_DECK = 1
TO_HAND = 2

NUM_SUPPLY = Card.TREASURE_MAP + 1
UNUSED_PILE = -1

# Only the first 25 piles are looked at when counting empty piles.
_GAME_OVER_PILES = 25

_TREASURE_VALUES = {
    Card.COPPER: COPPER_VALUE,
    Card.SILVER: SILVER_VALUE,
    Card.GOLD: GOLD_VALUE,
}

_VICTORY_POINTS = {
    Card.CURSE: -1,
    Card.ESTATE: 1,
    Card.DUCHY: 3,
    Card.PROVINCE: 6,
    Card.GREAT_HALL: 1,
}


class GameError(Exception):
    """Raised when a move is not allowed; the state is left unchanged."""


class EmptyDeckError(GameError):
    """Raised when a player has no cards left to draw or shuffle."""


def kingdom_cards(*args: int) -> list[int]:
    """Collect exactly ten kingdom cards into a list."""
    if len(args) != NUM_K_CARDS:
        raise ValueError(f"expected {NUM_K_CARDS} kingdom cards, got {len(args)}")
    return list(args)


@dataclass
class GameState:
    """Everything that describes a game in progress.

    The top of each deck is the last element of its list.
    """

    num_players: int = 2
    supply: list[int] = field(default_factory=lambda: [UNUSED_PILE] * NUM_SUPPLY)
    embargo_tokens: list[int] = field(default_factory=lambda: [0] * NUM_SUPPLY)
    outpost_played: int = 0
    outpost_turn: int = 0
    current_player: int = 0
    phase: int = Phase.ACTION
    num_actions: int = 1
    coins: int = 0
    num_buys: int = 1
    hands: list[list[int]] = field(default_factory=list)
    decks: list[list[int]] = field(default_factory=list)
    discards: list[list[int]] = field(default_factory=list)
    played_cards: list[int] = field(default_factory=list)
    rng: StreamRandom = field(default_factory=StreamRandom, repr=False, compare=False)

    def __post_init__(self) -> None:
        for piles in (self.hands, self.decks, self.discards):
            piles.extend([] for _ in range(self.num_players - len(piles)))

    def _check_player(self, player: int) -> None:
        if not 0 <= player < self.num_players:
            raise GameError(f"no such player: {player}")

    def shuffle(self, player: int) -> None:
        """Shuffle a player's deck, starting from sorted order for determinism."""
        self._check_player(player)
        deck = self.decks[player]
        if not deck:
            raise EmptyDeckError(f"player {player} has no deck to shuffle")
        remaining = sorted(deck)
        shuffled = []
        while remaining:
            pick = int(self.rng.random() * len(remaining))
            shuffled.append(remaining.pop(pick))
        deck[:] = shuffled

    def buy_card(self, supply_pos: int) -> None:
        """Buy one card from the supply for the current player."""
        if self.num_buys < 1:
            raise GameError("no buys left")
        if self.supply_count(supply_pos) < 1:
            raise GameError(f"no cards of type {supply_pos} left")
        cost = get_cost(supply_pos)
        if self.coins < cost:
            raise GameError(f"not enough coins: have {self.coins}, need {cost}")
        self.phase = Phase.BUY
        self.gain_card(supply_pos, self.current_player, TO_DISCARD)
        self.coins -= cost
        self.num_buys -= 1

    def num_hand_cards(self) -> int:
        """Number of cards in the current player's hand."""
        return len(self.hands[self.current_player])

    def hand_card(self, hand_pos: int) -> int:
        """The card at ``hand_pos`` in the current player's hand."""
        hand = self.hands[self.current_player]
        if not 0 <= hand_pos < len(hand):
            raise GameError(f"no card at hand position {hand_pos}")
        return hand[hand_pos]

    def supply_count(self, card: int) -> int:
        """Cards of this type left in the supply; -1 if the pile is not in play."""
        if not 0 <= card < NUM_SUPPLY:
            raise GameError(f"no such supply pile: {card}")
        return self.supply[card]

    def full_deck_count(self, player: int, card: int) -> int:
        """Copies of ``card`` across a player's deck, hand and discard pile."""
        self._check_player(player)
        return sum(
            pile.count(card)
            for pile in (self.decks[player], self.hands[player], self.discards[player])
        )

    def whose_turn(self) -> int:
        """Index of the player whose turn it is."""
        return self.current_player

    def end_turn(self) -> None:
        """Discard the hand, pass the turn on and draw the next player's hand."""
        player = self.current_player
        self.discards[player].extend(self.hands[player])
        self.hands[player].clear()

        self.current_player = player + 1 if player < self.num_players - 1 else 0
        self.outpost_played = 0
        self.phase = Phase.ACTION
        self.num_actions = 1
        self.coins = 0
        self.num_buys = 1
        self.played_cards.clear()
        self.hands[self.current_player].clear()

        self._draw_up_to(self.current_player, HANDSIZE)
        self.update_coins(self.current_player, 0)

    def _draw_up_to(self, player: int, count: int) -> None:
        for _ in range(count):
            try:
                self.draw_card(player)
            except EmptyDeckError:
                break

    def is_game_over(self) -> bool:
        """True once provinces run out or three supply piles are empty."""
        if self.supply[Card.PROVINCE] == 0:
            return True
        empty = sum(1 for count in self.supply[:_GAME_OVER_PILES] if count == 0)
        return empty >= 3

    def _points(self, player: int, card: int) -> int:
        if card == Card.GARDENS:
            return self.full_deck_count(player, Card.CURSE) // 10
        return _VICTORY_POINTS.get(card, 0)

    def score_for(self, player: int) -> int:
        """Victory points of a player; may be negative."""
        self._check_player(player)
        discard = self.discards[player]
        # The deck is only counted as far as the discard pile reaches.
        deck_part = self.decks[player][: len(discard)]
        return sum(
            self._points(player, card)
            for card in chain(self.hands[player], discard, deck_part)
        )

    def get_winners(self) -> list[bool]:
        """For each player, whether they won; ties favour players with fewer turns."""
        scores = [self.score_for(p) for p in range(self.num_players)]
        high = max(scores)
        scores = [
            score + 1 if score == high and p > self.current_player else score
            for p, score in enumerate(scores)
        ]
        high = max(scores)
        return [score == high for score in scores]

    def draw_card(self, player: int) -> None:
        """Move the top card of a player's deck to their hand.

        An empty deck is refilled from the shuffled discard pile first.
        """
        self._check_player(player)
        deck = self.decks[player]
        if not deck:
            discard = self.discards[player]
            deck.extend(discard)
            discard.clear()
            if not deck:
                raise EmptyDeckError(f"player {player} has no cards to draw")
            self.shuffle(player)
        self.hands[player].append(deck.pop())

    def update_coins(self, player: int, bonus: int) -> None:
        """Set coins to the treasure in a player's hand plus ``bonus``."""
        self._check_player(player)
        self.coins = (
            sum(_TREASURE_VALUES.get(card, 0) for card in self.hands[player]) + bonus
        )

    def discard_card(self, hand_pos: int, player: int, trash: bool = False) -> None:
        """Take a card out of a hand, onto the played pile unless trashed."""
        self._check_player(player)
        hand = self.hands[player]
        if not 0 <= hand_pos < len(hand):
            raise GameError(f"no card at hand position {hand_pos}")
        if not trash:
            self.played_cards.append(hand[hand_pos])
        last = hand.pop()
        if hand_pos < len(hand):
            hand[hand_pos] = last

    def gain_card(self, supply_pos: int, player: int, to_flag: int = TO_DISCARD) -> None:
        """Take a card from the supply into a player's discard, deck or hand."""
        self._check_player(player)
        if self.supply_count(supply_pos) < 1:
            raise GameError(f"no cards of type {supply_pos} to gain")
        if to_flag == TO_DECK:
            self.decks[player].append(supply_pos)
        elif to_flag == TO_HAND:
            self.hands[player].append(supply_pos)
        else:
            self.discards[player].append(supply_pos)
        self.supply[supply_pos] -= 1


def initialize_game(
    num_players: int,
    kingdom: Iterable[int],
    random_seed: int,
    rng: Optional[StreamRandom] = None,
) -> GameState:
    """Set up supply piles, shuffle starting decks and draw the first hand."""
    if rng is None:
        rng = StreamRandom()
    rng.select_stream(1)
    rng.put_seed(random_seed)

    if not 2 <= num_players <= MAX_PLAYERS:
        raise GameError(f"number of players must be 2 to {MAX_PLAYERS}")
    kingdom = list(kingdom)
    if len(kingdom) != NUM_K_CARDS:
        raise GameError(f"expected {NUM_K_CARDS} kingdom cards")
    if len(set(kingdom)) != len(kingdom):
        raise GameError("kingdom cards must all be different")

    state = GameState(num_players=num_players, rng=rng)
    supply = state.supply
    supply[Card.CURSE] = {2: 10, 3: 20}.get(num_players, 30)
    victory = 8 if num_players == 2 else 12
    supply[Card.ESTATE] = victory
    supply[Card.DUCHY] = victory
    supply[Card.PROVINCE] = victory
    supply[Card.COPPER] = 60 - 7 * num_players
    supply[Card.SILVER] = 40
    supply[Card.GOLD] = 30

    for card in range(Card.ADVENTURER, Card.TREASURE_MAP + 1):
        if card not in kingdom:
            supply[card] = UNUSED_PILE
        elif card in (Card.GREAT_HALL, Card.GARDENS):
            supply[card] = victory
        else:
            supply[card] = 10

    for deck in state.decks:
        deck[:] = [Card.ESTATE] * 3 + [Card.COPPER] * 7
    for player in range(num_players):
        state.shuffle(player)

    state._draw_up_to(state.current_player, HANDSIZE)
    state.update_coins(state.current_player, 0)
    return state