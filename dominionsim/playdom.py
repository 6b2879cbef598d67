"""A scripted two-player game: a smithy strategy against an adventurer one."""

from __future__ import annotations

import sys
from typing import Iterator, Optional, Sequence

from .cards import Card
from .effects import play_card
from .game import GameError, GameState, initialize_game
from .interface import count_hand_coins

KINGDOM = (
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

USAGE = "usage: playdom SEED"


def _last_index(hand: list[int], card: int) -> int:
    positions = [pos for pos, held in enumerate(hand) if held == card]
    return positions[-1] if positions else -1


def _play(state: GameState, hand_pos: int) -> None:
    try:
        play_card(state, hand_pos, -1, -1, -1)
    except GameError:
        pass


def _buy(state: GameState, card: int) -> None:
    try:
        state.buy_card(card)
    except GameError:
        pass


def play_game(seed: int) -> Iterator[str]:
    """Play a whole game from ``seed``, yielding each line of the log."""
    yield "Starting game."
    state = initialize_game(2, KINGDOM, seed)
    smithies = 0
    adventurers = 0

    while not state.is_game_over():
        player = state.whose_turn()
        hand = state.hands[player]
        money = count_hand_coins(state, player)

        if player == 0:
            smithy_pos = _last_index(hand, Card.SMITHY)
            if smithy_pos != -1:
                yield f"0: smithy played from position {smithy_pos}"
                _play(state, smithy_pos)
                yield "smithy played."
                money = count_hand_coins(state, player)

            if money >= 8:
                yield "0: bought province"
                _buy(state, Card.PROVINCE)
            elif money >= 6:
                yield "0: bought gold"
                _buy(state, Card.GOLD)
            elif money >= 4 and smithies < 2:
                yield "0: bought smithy"
                _buy(state, Card.SMITHY)
                smithies += 1
            elif money >= 3:
                yield "0: bought silver"
                _buy(state, Card.SILVER)

            yield "0: end turn"
        else:
            adventurer_pos = _last_index(hand, Card.ADVENTURER)
            if adventurer_pos != -1:
                yield f"1: adventurer played from position {adventurer_pos}"
                _play(state, adventurer_pos)
                money = count_hand_coins(state, player)

            if money >= 8:
                yield "1: bought province"
                _buy(state, Card.PROVINCE)
            elif money >= 6 and adventurers < 2:
                yield "1: bought adventurer"
                _buy(state, Card.ADVENTURER)
                adventurers += 1
            elif money >= 6:
                yield "1: bought gold"
                _buy(state, Card.GOLD)
            elif money >= 3:
                yield "1: bought silver"
                _buy(state, Card.SILVER)

            yield "1: endTurn"
        state.end_turn()

    yield "Finished game."
    yield f"Player 0: {state.score_for(0)}"
    yield f"Player 1: {state.score_for(1)}"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run a scripted game with the seed given on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(USAGE, file=sys.stderr)
        return 1
    try:
        seed = int(args[0])
    except ValueError:
        print(USAGE, file=sys.stderr)
        return 1
    for line in play_game(seed):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())