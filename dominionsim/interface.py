"""Text views of a game and a simple bot player."""

from __future__ import annotations

import sys
from typing import Iterable, Optional

from .cards import (
    COPPER_VALUE,
    GOLD_VALUE,
    NUM_K_CARDS,
    NUM_TOTAL_K_CARDS,
    SILVER_VALUE,
    Card,
    card_cost,
    card_name,
    get_cost,
    phase_name,
)
from .game import UNUSED_PILE, GameError, GameState
from .rngs import StreamRandom

_COIN_VALUES = {
    Card.COPPER: COPPER_VALUE,
    Card.SILVER: SILVER_VALUE,
    Card.GOLD: GOLD_VALUE,
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


def add_card_to_hand(state: GameState, player: int, card: int) -> None:
    """Put a kingdom card straight into a player's hand."""
    if not Card.ADVENTURER <= card < NUM_TOTAL_K_CARDS:
        raise GameError(f"card {card} cannot be added to a hand")
    if not 0 <= player < state.num_players:
        raise GameError(f"no such player: {player}")
    state.hands[player].append(card)


def count_hand_coins(state: GameState, player: int) -> int:
    """Total value of the treasure cards in a player's hand."""
    return sum(_COIN_VALUES.get(card, 0) for card in state.hands[player])


def _format_pile(title: str, cards: Iterable[int], trailing: str) -> str:
    cards = list(cards)
    lines = [title]
    if cards:
        lines.append("#  Card\n")
    lines.extend(
        f"{index:<2} {card_name(card):<13}{trailing}\n"
        for index, card in enumerate(cards)
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
    return _format_pile(
        f"Player {player}'s played cards: \n", state.played_cards, " "
    )


def format_discard(state: GameState, player: int) -> str:
    """A numbered listing of a player's discard pile."""
    return _format_pile(
        f"Player {player}'s discard: \n", state.discards[player], " "
    )


def format_supply(state: GameState) -> str:
    """A table of the supply piles in play with their costs and counts."""
    lines = ["#   Card          Cost   Copies\n"]
    for card in range(NUM_TOTAL_K_CARDS):
        count = state.supply[card]
        if count == UNUSED_PILE:
            continue
        lines.append(
            f"{card:<2}  {card_name(card):<13} {card_cost(card):<5}  {count:<5}\n"
        )
    lines.append("\n")
    return "".join(lines)


def format_state(state: GameState) -> str:
    """The current player's phase, actions, coins and buys."""
    return (
        f"Player {state.current_player}:\n"
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
    """The list of commands understood by the interactive player."""
    return _HELP


def select_kingdom_cards(
    random_seed: int, rng: Optional[StreamRandom] = None
) -> list[int]:
    """Pick ten different kingdom cards at random."""
    if rng is None:
        rng = StreamRandom()
    rng.select_stream(1)
    rng.put_seed(random_seed)
    chosen: list[int] = []
    while len(chosen) < NUM_K_CARDS:
        card = int(rng.random() * NUM_TOTAL_K_CARDS)
        if card < Card.ADVENTURER or card in chosen:
            continue
        chosen.append(card)
    return chosen


def _try_buy(state: GameState, card: int) -> None:
    try:
        state.buy_card(card)
    except GameError:
        pass


def execute_bot_turn(state: GameState, player: int, turn_num: int) -> int:
    """Play one turn for a bot: buy the best treasure or victory card it can.

    Progress is written to standard output. Returns the turn number,
    advanced when the last player has finished.
    """
    out = sys.stdout
    coins = count_hand_coins(state, player)
    out.write(
        f"*****************Executing Bot Player {player} "
        f"Turn Number {turn_num}*****************\n"
    )
    out.write(format_supply(state))

    provinces = state.supply_count(Card.PROVINCE)
    if coins >= get_cost(Card.PROVINCE) and provinces > 0:
        choice = Card.PROVINCE
    elif provinces == 0 and coins >= get_cost(Card.DUCHY):
        choice = Card.DUCHY
    elif coins >= get_cost(Card.GOLD) and state.supply_count(Card.GOLD) > 0:
        choice = Card.GOLD
    elif coins >= get_cost(Card.SILVER) and state.supply_count(Card.SILVER) > 0:
        choice = Card.SILVER
    else:
        choice = None
    if choice is not None:
        _try_buy(state, choice)
        out.write(f"Player {player} buys card {card_name(choice)}\n\n")

    if player == state.num_players - 1:
        turn_num += 1
    state.end_turn()
    if not state.is_game_over():
        out.write(f"Player {state.whose_turn()}'s turn number {turn_num}\n\n")
    return turn_num