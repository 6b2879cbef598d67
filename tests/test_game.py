import copy

import pytest

from dominionsim.cards import Card, Phase
from dominionsim.game import (
    TO_DECK,
    TO_DISCARD,
    TO_HAND,
    EmptyDeckError,
    GameError,
    GameState,
    initialize_game,
    kingdom_cards,
)
from dominionsim.rngs import StreamRandom

KINGDOM = [
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
    return initialize_game(players, KINGDOM, seed, StreamRandom())


def full_supply():
    return [10] * (Card.TREASURE_MAP + 1)


def test_four_player_adventurer_supply():
    game = new_game(players=4, seed=1)
    assert game.supply_count(Card.ADVENTURER) == 10


def test_two_player_supply():
    game = new_game()
    assert game.supply_count(Card.CURSE) == 10
    assert game.supply_count(Card.ESTATE) == 8
    assert game.supply_count(Card.PROVINCE) == 8
    assert game.supply_count(Card.COPPER) == 46
    assert game.supply_count(Card.SILVER) == 40
    assert game.supply_count(Card.GOLD) == 30
    assert game.supply_count(Card.GARDENS) == 8
    assert game.supply_count(Card.GREAT_HALL) == 8
    assert game.supply_count(Card.MINION) == -1


def test_three_player_supply():
    game = new_game(players=3)
    assert game.supply_count(Card.CURSE) == 20
    assert game.supply_count(Card.DUCHY) == 12
    assert game.supply_count(Card.GARDENS) == 12
    assert game.supply_count(Card.SMITHY) == 10


def test_starting_decks():
    game = new_game()
    for player in range(2):
        assert game.full_deck_count(player, Card.COPPER) == 7
        assert game.full_deck_count(player, Card.ESTATE) == 3
    assert len(game.hands[0]) == 5
    assert len(game.decks[0]) == 5
    assert game.hands[1] == []
    assert len(game.decks[1]) == 10
    assert game.whose_turn() == 0
    assert game.phase == Phase.ACTION


def test_initial_coins_match_hand():
    game = new_game(seed=7)
    assert game.coins == game.hands[0].count(Card.COPPER)


def test_same_seed_same_game():
    first = new_game(seed=42)
    second = new_game(seed=42)
    assert first.hands[0] == second.hands[0]
    assert first.decks == second.decks
    assert first.coins == second.coins
    starting = sorted([Card.COPPER] * 7 + [Card.ESTATE] * 3)
    assert sorted(first.hands[0] + first.decks[0]) == starting


@pytest.mark.parametrize("players", [1, 5])
def test_bad_player_count(players):
    with pytest.raises(GameError):
        initialize_game(players, KINGDOM, 1, StreamRandom())


def test_duplicate_kingdom_cards():
    kingdom = KINGDOM[:9] + [Card.ADVENTURER]
    with pytest.raises(GameError):
        initialize_game(2, kingdom, 1, StreamRandom())


def test_kingdom_cards():
    assert kingdom_cards(*KINGDOM) == KINGDOM
    with pytest.raises(ValueError):
        kingdom_cards(*KINGDOM[:9])


def test_shuffle_keeps_cards():
    game = GameState(decks=[[Card.GOLD, Card.COPPER, Card.ESTATE, Card.SILVER], []])
    before = sorted(game.decks[0])
    game.shuffle(0)
    assert sorted(game.decks[0]) == before


def test_shuffle_empty_deck():
    game = GameState()
    with pytest.raises(EmptyDeckError):
        game.shuffle(0)


def test_draw_takes_top_card():
    game = GameState(decks=[[Card.COPPER, Card.GOLD], []])
    game.draw_card(0)
    assert game.hands[0] == [Card.GOLD]
    assert game.decks[0] == [Card.COPPER]


def test_draw_reshuffles_discard():
    cards = [Card.ESTATE, Card.SILVER]
    game = GameState(discards=[list(cards), []])
    game.draw_card(0)
    assert len(game.hands[0]) == 1
    assert game.discards[0] == []
    assert sorted(game.hands[0] + game.decks[0]) == sorted(cards)


def test_draw_with_nothing_left():
    game = GameState()
    with pytest.raises(GameError):
        game.draw_card(1)
    with pytest.raises(EmptyDeckError):
        game.draw_card(0)


def test_discard_from_middle():
    game = GameState(hands=[[Card.COPPER, Card.SILVER, Card.GOLD, Card.ESTATE], []])
    game.discard_card(1, 0)
    assert game.hands[0] == [Card.COPPER, Card.ESTATE, Card.GOLD]
    assert game.played_cards == [Card.SILVER]


def test_discard_last_and_trash():
    game = GameState(hands=[[Card.COPPER, Card.SILVER], []])
    game.discard_card(1, 0, True)
    assert game.hands[0] == [Card.COPPER]
    assert game.played_cards == []
    game.discard_card(0, 0)
    assert game.hands[0] == []
    assert game.played_cards == [Card.COPPER]


def test_discard_bad_position():
    game = GameState(hands=[[Card.COPPER], []])
    with pytest.raises(GameError):
        game.discard_card(3, 0)


@pytest.mark.parametrize(
    "flag, pile", [(TO_DISCARD, "discards"), (TO_DECK, "decks"), (TO_HAND, "hands")]
)
def test_gain_card_destinations(flag, pile):
    game = GameState(supply=full_supply())
    game.gain_card(Card.SILVER, 1, flag)
    assert getattr(game, pile)[1] == [Card.SILVER]
    assert game.supply_count(Card.SILVER) == 9


def test_gain_from_empty_pile():
    game = GameState()
    before = copy.deepcopy(game)
    with pytest.raises(GameError):
        game.gain_card(Card.SMITHY, 0)
    assert game == before


def test_update_coins():
    game = GameState(hands=[[Card.COPPER, Card.SILVER, Card.GOLD, Card.ESTATE], []])
    game.update_coins(0, 2)
    assert game.coins == 8


def test_buy_card():
    game = new_game()
    game.coins = 3
    silver_before = game.supply_count(Card.SILVER)
    game.buy_card(Card.SILVER)
    assert game.supply_count(Card.SILVER) == silver_before - 1
    assert game.discards[0][-1] == Card.SILVER
    assert game.coins == 0
    assert game.num_buys == 0
    assert game.phase == Phase.BUY


def test_buy_card_refusals_leave_state():
    game = new_game()
    game.coins = 2
    before = copy.deepcopy(game)
    with pytest.raises(GameError):
        game.buy_card(Card.SILVER)
    with pytest.raises(GameError):
        game.buy_card(Card.MINION)
    game.num_buys = 0
    with pytest.raises(GameError):
        game.buy_card(Card.COPPER)
    game.num_buys = before.num_buys
    assert game == before


def test_end_turn():
    game = new_game()
    hand = list(game.hands[0])
    game.end_turn()
    assert game.whose_turn() == 1
    assert game.discards[0] == hand
    assert game.hands[0] == []
    assert len(game.hands[1]) == 5
    assert game.coins == game.hands[1].count(Card.COPPER)
    assert game.num_actions == 1
    assert game.played_cards == []


def test_end_turn_wraps_round():
    game = new_game()
    game.end_turn()
    game.end_turn()
    assert game.whose_turn() == 0
    assert game.num_hand_cards() == 5


def test_game_over_on_provinces():
    game = new_game()
    assert not game.is_game_over()
    game.supply[Card.PROVINCE] = 0
    assert game.is_game_over()


def test_game_over_on_three_piles():
    game = new_game()
    game.supply[Card.SMITHY] = 0
    game.supply[Card.VILLAGE] = 0
    assert not game.is_game_over()
    game.supply[Card.SEA_HAG] = 0
    game.supply[Card.TREASURE_MAP] = 0
    assert not game.is_game_over()
    game.supply[Card.GOLD] = 0
    assert game.is_game_over()


def test_score_for():
    game = GameState(
        hands=[[Card.PROVINCE, Card.DUCHY], []],
        discards=[[Card.ESTATE, Card.CURSE, Card.GREAT_HALL], []],
    )
    assert game.score_for(0) == 10
    assert game.score_for(1) == 0


def test_score_counts_deck_only_up_to_discard_size():
    game = GameState(decks=[[Card.PROVINCE], []])
    alone = game.score_for(0)
    game.discards[0].append(Card.COPPER)
    assert game.score_for(0) == alone + 6


def test_winners_tie_goes_to_later_player():
    game = GameState(hands=[[Card.PROVINCE], [Card.PROVINCE]])
    assert game.get_winners() == [False, True]
    game.current_player = 1
    assert game.get_winners() == [True, True]


def test_winners_clear_leader():
    game = GameState(hands=[[Card.PROVINCE], [Card.ESTATE]])
    assert game.get_winners() == [True, False]


def test_hand_card_and_count():
    game = GameState(hands=[[Card.GOLD, Card.SMITHY], []])
    assert game.hand_card(1) == Card.SMITHY
    assert game.num_hand_cards() == 2
    with pytest.raises(GameError):
        game.hand_card(2)


def test_supply_count_unknown_pile():
    game = GameState()
    with pytest.raises(GameError):
        game.supply_count(Card.TREASURE_MAP + 1)


def test_full_deck_count():
    game = GameState(
        hands=[[Card.GOLD], []],
        decks=[[Card.GOLD, Card.COPPER], []],
        discards=[[Card.GOLD], []],
    )
    assert game.full_deck_count(0, Card.GOLD) == 3
    assert game.full_deck_count(1, Card.GOLD) == 0