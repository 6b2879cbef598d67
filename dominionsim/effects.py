"""What each action card does when it is played."""

from __future__ import annotations

from typing import Callable

from .cards import Card, Phase, get_cost
from .game import (
    TO_DECK,
    TO_DISCARD,
    TO_HAND,
    UNUSED_PILE,
    EmptyDeckError,
    GameError,
    GameState,
)

NO_CARD = -1
FEAST_BUDGET = 5
BARON_BONUS = 4

_TREASURES = frozenset({Card.COPPER, Card.SILVER, Card.GOLD})
_VICTORIES = frozenset(
    {Card.ESTATE, Card.DUCHY, Card.PROVINCE, Card.GARDENS, Card.GREAT_HALL}
)

Effect = Callable[[GameState, int, int, int, int, int], None]


def _draw(state: GameState, player: int, times: int = 1) -> None:
    for _ in range(times):
        try:
            state.draw_card(player)
        except EmptyDeckError:
            return


def _gain(state: GameState, card: int, player: int, to_flag: int) -> None:
    # A failed gain (empty pile) is not an error for the card being played.
    try:
        state.gain_card(card, player, to_flag)
    except GameError:
        pass


def _others(state: GameState):
    return (p for p in range(state.num_players) if p != state.current_player)


def _discard_first(state: GameState, player: int, card: int) -> None:
    hand = state.hands[player]
    if card in hand:
        state.discard_card(hand.index(card), player)


def _adventurer(state, player, choice1, choice2, choice3, hand_pos):
    hand = state.hands[player]
    set_aside = []
    treasures = 0
    while treasures < 2:
        try:
            state.draw_card(player)
        except EmptyDeckError:
            break
        if hand[-1] in _TREASURES:
            treasures += 1
        else:
            set_aside.append(hand.pop())
    state.discards[player].extend(reversed(set_aside))


def _council_room(state, player, choice1, choice2, choice3, hand_pos):
    _draw(state, player, 4)
    state.num_buys += 1
    for other in _others(state):
        _draw(state, other)
    state.discard_card(hand_pos, player)


def _feast(state, player, choice1, choice2, choice3, hand_pos):
    if state.supply_count(choice1) <= 0:
        raise GameError(f"no cards of type {choice1} left")
    cost = get_cost(choice1)
    if FEAST_BUDGET < cost:
        raise GameError("that card is too expensive")
    state.coins = FEAST_BUDGET
    state.gain_card(choice1, player, TO_DISCARD)


def _mine(state, player, choice1, choice2, choice3, hand_pos):
    trashed = state.hand_card(choice1)
    if not Card.COPPER <= trashed <= Card.GOLD:
        raise GameError("mine must trash a treasure")
    if not Card.CURSE <= choice2 <= Card.TREASURE_MAP:
        raise GameError(f"no such card: {choice2}")
    if get_cost(trashed) + 3 > get_cost(choice2):
        raise GameError("card to gain does not meet the cost rule")
    _gain(state, choice2, player, TO_HAND)
    state.discard_card(hand_pos, player)
    _discard_first(state, player, trashed)


def _remodel(state, player, choice1, choice2, choice3, hand_pos):
    trashed = state.hand_card(choice1)
    if get_cost(trashed) + 2 > get_cost(choice2):
        raise GameError("card to gain does not meet the cost rule")
    _gain(state, choice2, player, TO_DISCARD)
    state.discard_card(hand_pos, player)
    _discard_first(state, player, trashed)


def _smithy(state, player, choice1, choice2, choice3, hand_pos):
    _draw(state, player, 3)
    state.discard_card(hand_pos, player)


def _village(state, player, choice1, choice2, choice3, hand_pos):
    _draw(state, player)
    state.num_actions += 2
    state.discard_card(hand_pos, player)


def _baron(state, player, choice1, choice2, choice3, hand_pos):
    state.num_buys += 1
    hand = state.hands[player]
    if choice1 > 0 and Card.ESTATE in hand:
        state.coins += BARON_BONUS
        hand.remove(Card.ESTATE)
        state.discards[player].append(Card.ESTATE)
    elif state.supply_count(Card.ESTATE) > 0:
        state.gain_card(Card.ESTATE, player, TO_DISCARD)
        state.supply[Card.ESTATE] -= 1


def _great_hall(state, player, choice1, choice2, choice3, hand_pos):
    _draw(state, player)
    state.num_actions += 1
    state.discard_card(hand_pos, player)


def _discard_hand_and_draw_four(state: GameState, player: int) -> None:
    hand = state.hands[player]
    state.played_cards.extend(hand)
    hand.clear()
    _draw(state, player, 4)


def _minion(state, player, choice1, choice2, choice3, hand_pos):
    state.num_actions += 1
    state.discard_card(hand_pos, player)
    if choice1:
        state.coins += 2
    elif choice2:
        _discard_hand_and_draw_four(state, player)
        for other in _others(state):
            if len(state.hands[other]) > 4:
                _discard_hand_and_draw_four(state, other)


def _steward(state, player, choice1, choice2, choice3, hand_pos):
    if choice1 == 1:
        _draw(state, player, 2)
    elif choice1 == 2:
        state.coins += 2
    else:
        state.discard_card(choice2, player, trash=True)
        state.discard_card(choice3, player, trash=True)
    state.discard_card(hand_pos, player)


def _tribute(state, player, choice1, choice2, choice3, hand_pos):
    target = (player + 1) % state.num_players
    deck, discard = state.decks[target], state.discards[target]
    revealed = [NO_CARD, NO_CARD]
    if len(deck) + len(discard) <= 1:
        if deck:
            revealed[0] = deck.pop()
        elif discard:
            revealed[0] = discard.pop()
    else:
        for slot in range(2):
            if not deck:
                deck.extend(discard)
                discard.clear()
                state.shuffle(target)
            revealed[slot] = deck.pop()

    if revealed[0] == revealed[1]:
        if revealed[1] != NO_CARD:
            state.played_cards.append(revealed[1])
        revealed[1] = NO_CARD

    for card in revealed:
        if card in _TREASURES:
            state.coins += 2
        elif card in _VICTORIES:
            _draw(state, player, 2)
        else:
            state.num_actions += 2


def _ambassador(state, player, choice1, choice2, choice3, hand_pos):
    if not 0 <= choice2 <= 2:
        raise GameError("may return 0 to 2 copies")
    if choice1 == hand_pos:
        raise GameError("cannot reveal the ambassador itself")
    revealed = state.hand_card(choice1)
    hand = state.hands[player]
    # Counts the hand positions that equal the revealed card's number.
    matches = int(revealed < len(hand) and revealed not in (hand_pos, choice1))
    if matches < choice2:
        raise GameError("not enough copies to return")

    state.supply[revealed] += choice2
    for other in _others(state):
        _gain(state, revealed, other, TO_DISCARD)
    state.discard_card(hand_pos, player)

    for _ in range(choice2):
        if choice1 >= len(hand):
            break
        state.discard_card(hand.index(hand[choice1]), player, trash=True)


def _cutpurse(state, player, choice1, choice2, choice3, hand_pos):
    state.update_coins(player, 2)
    for other in _others(state):
        hand = state.hands[other]
        if Card.COPPER in hand:
            state.discard_card(hand.index(Card.COPPER), other)
    state.discard_card(hand_pos, player)


def _embargo(state, player, choice1, choice2, choice3, hand_pos):
    if state.supply_count(choice1) == UNUSED_PILE:
        raise GameError(f"supply pile {choice1} is not in play")
    state.coins += 2
    state.embargo_tokens[choice1] += 1
    state.discard_card(hand_pos, player, trash=True)


def _outpost(state, player, choice1, choice2, choice3, hand_pos):
    state.outpost_played += 1
    state.discard_card(hand_pos, player)


def _salvager(state, player, choice1, choice2, choice3, hand_pos):
    salvaged = state.hand_card(choice1) if choice1 else None
    state.num_buys += 1
    if salvaged is not None:
        state.coins += get_cost(salvaged)
        state.discard_card(choice1, player, trash=True)
    state.discard_card(hand_pos, player)


def _sea_hag(state, player, choice1, choice2, choice3, hand_pos):
    for other in _others(state):
        deck = state.decks[other]
        if deck:
            state.discards[other].append(deck.pop())
        deck.append(Card.CURSE)


def _treasure_map(state, player, choice1, choice2, choice3, hand_pos):
    hand = state.hands[player]
    partner = next(
        (i for i, card in enumerate(hand) if card == Card.TREASURE_MAP and i != hand_pos),
        None,
    )
    if partner is None:
        raise GameError("no second treasure map in hand")
    for pos in sorted((hand_pos, partner), reverse=True):
        state.discard_card(pos, player, trash=True)
    for _ in range(4):
        _gain(state, Card.GOLD, player, TO_DECK)


_EFFECTS: dict[int, Effect] = {
    Card.ADVENTURER: _adventurer,
    Card.COUNCIL_ROOM: _council_room,
    Card.FEAST: _feast,
    Card.MINE: _mine,
    Card.REMODEL: _remodel,
    Card.SMITHY: _smithy,
    Card.VILLAGE: _village,
    Card.BARON: _baron,
    Card.GREAT_HALL: _great_hall,
    Card.MINION: _minion,
    Card.STEWARD: _steward,
    Card.TRIBUTE: _tribute,
    Card.AMBASSADOR: _ambassador,
    Card.CUTPURSE: _cutpurse,
    Card.EMBARGO: _embargo,
    Card.OUTPOST: _outpost,
    Card.SALVAGER: _salvager,
    Card.SEA_HAG: _sea_hag,
    Card.TREASURE_MAP: _treasure_map,
}


def card_effect(
    state: GameState,
    card: int,
    choice1: int = 0,
    choice2: int = 0,
    choice3: int = 0,
    hand_pos: int = 0,
) -> None:
    """Carry out what ``card`` does for the current player.

    ``hand_pos`` is where the played card sits in the hand; the meaning of
    the choices depends on the card. Raises :class:`GameError` if the card
    cannot be played this way.
    """
    try:
        effect = _EFFECTS[card]
    except KeyError:
        raise GameError(f"card {card} cannot be played") from None
    effect(state, state.current_player, choice1, choice2, choice3, hand_pos)


def play_card(
    state: GameState,
    hand_pos: int,
    choice1: int = 0,
    choice2: int = 0,
    choice3: int = 0,
) -> None:
    """Play the action card at ``hand_pos`` of the current player's hand."""
    if state.phase != Phase.ACTION:
        raise GameError("cards can only be played in the action phase")
    if state.num_actions < 1:
        raise GameError("no actions left")
    card = state.hand_card(hand_pos)
    if not Card.ADVENTURER <= card <= Card.TREASURE_MAP:
        raise GameError(f"card {card} is not an action card")
    card_effect(state, card, choice1, choice2, choice3, hand_pos)
    state.num_actions -= 1
    state.update_coins(state.current_player, 0)