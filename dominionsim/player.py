"""Interactive text player: humans type commands, bots play themselves."""

from __future__ import annotations

import io
import re
import sys
from contextlib import redirect_stdout
from typing import Callable, Iterable, Optional, Sequence

from .cards import MAX_PLAYERS, card_name
from .effects import play_card
from .game import GameError, initialize_game
from .interface import (
    add_card_to_hand,
    execute_bot_turn,
    format_deck,
    format_discard,
    format_hand,
    format_played,
    format_scores,
    format_state,
    format_supply,
    help_text,
)
from .playdom import KINGDOM

USAGE = "Usage: player [integer random number seed]"
GREETING = 'Please enter a command or "help" for commands'
PROMPT = "$ "

UNUSED = -1
_MAX_COMMAND = 31
_INT = re.compile(r"[+-]?\d+")


def _matches(command: str, name: str) -> bool:
    # Commands are told apart by their first four characters.
    return (command + "\0")[:4] == (name + "\0")[:4]


def _parse(line: str) -> tuple[str, list[int]]:
    tokens = line.split()
    if not tokens:
        return "", [UNUSED] * 4
    command = tokens[0][:_MAX_COMMAND]
    args: list[int] = []
    for token in tokens[1:5]:
        found = _INT.match(token)
        if not found:
            break
        args.append(int(found.group()))
        if found.end() != len(token):
            break
    args.extend([UNUSED] * (4 - len(args)))
    return command, args


class Session:
    """One interactive game, fed a command line at a time."""

    def __init__(self, seed: int) -> None:
        if seed <= 0:
            raise ValueError(USAGE)
        self.seed = seed
        self.state = initialize_game(2, KINGDOM, seed)
        self.is_bot = [False] * MAX_PLAYERS
        self.started = False
        self.turn_num = 0
        self.finished = False
        self._commands: dict[str, Callable[[int, int, int, int], str]] = {
            "add": self._add,
            "buy": self._buy,
            "end": self._end,
            "exit": self._exit,
            "help": self._help,
            "init": self._init,
            "num": self._num,
            "play": self._play,
            "resi": self._resign,
            "show": self._show,
            "stat": self._stat,
            "supp": self._supply,
            "whos": self._whos,
        }

    def handle(self, line: str) -> str:
        """Run one command line and any bot turns that follow; return the output."""
        if self.finished:
            return ""
        command, args = _parse(line)
        handler = next(
            (h for name, h in self._commands.items() if _matches(command, name)),
            None,
        )
        out = handler(*args) if handler is not None else ""
        if not self.finished:
            out += self._advance()
        return out

    def _advance(self) -> str:
        parts = []
        while not self.finished:
            if self.state.is_game_over():
                if self.started:
                    parts.append(self._final_report())
                    self.finished = True
                break
            player = self.state.whose_turn()
            if not self.is_bot[player]:
                break
            buffer = io.StringIO()
            with redirect_stdout(buffer):
                self.turn_num = execute_bot_turn(self.state, player, self.turn_num)
            parts.append(buffer.getvalue())
        return "".join(parts)

    def _final_report(self) -> str:
        state = self.state
        parts = [
            format_scores(state),
            f"After {self.turn_num} turns, the winner(s) are:\n",
        ]
        parts.extend(
            f"Player {player}\n"
            for player, won in enumerate(state.get_winners())
            if won
        )
        for player in range(state.num_players):
            parts.append(format_hand(state, player))
            parts.append(format_played(state, player))
            parts.append(format_discard(state, player))
            parts.append(format_deck(state, player))
        return "".join(parts)

    def _add(self, card: int, *_: int) -> str:
        player = self.state.whose_turn()
        try:
            add_card_to_hand(self.state, player, card)
        except GameError:
            pass
        return f"Player {player} adds {card_name(card)} to their hand\n\n"

    def _buy(self, card: int, *_: int) -> str:
        player = self.state.whose_turn()
        try:
            self.state.buy_card(card)
        except GameError:
            return f"Player {player} cannot buy card {card}, {card_name(card)}\n\n"
        return f"Player {player} buys card {card}, {card_name(card)}\n\n"

    def _end(self, *_: int) -> str:
        if not self.started:
            return ""
        if self.state.whose_turn() == self.state.num_players - 1:
            self.turn_num += 1
        self.state.end_turn()
        return f"Player {self.state.whose_turn()}'s turn number {self.turn_num}\n\n"

    def _exit(self, *_: int) -> str:
        self.finished = True
        return ""

    def _help(self, *_: int) -> str:
        return help_text()

    def _init(self, players: int, bots: int, *_: int) -> str:
        humans = players - bots
        for player in range(max(humans, 0), min(players, MAX_PLAYERS)):
            self.is_bot[player] = True
        try:
            self.state = initialize_game(players, KINGDOM, self.seed)
        except GameError:
            return "\n"
        self.started = True
        return f"\nPlayer {self.state.whose_turn()}'s turn number {self.turn_num}\n\n"

    def _num(self, *_: int) -> str:
        return f"There are {self.state.num_hand_cards()} cards in your hand.\n"

    def _play(self, hand_pos: int, choice1: int, choice2: int, choice3: int) -> str:
        player = self.state.whose_turn()
        try:
            card = self.state.hand_card(hand_pos)
            play_card(self.state, hand_pos, choice1, choice2, choice3)
        except (GameError, IndexError):
            return f"Player {player} cannot play card {hand_pos}\n\n"
        return f"Player {player} plays {card_name(card)}\n\n"

    def _resign(self, *_: int) -> str:
        self.state.end_turn()
        self.finished = True
        return format_scores(self.state)

    def _show(self, *_: int) -> str:
        if not self.started:
            return ""
        player = self.state.whose_turn()
        return format_hand(self.state, player) + format_played(self.state, player)

    def _stat(self, *_: int) -> str:
        return format_state(self.state) if self.started else ""

    def _supply(self, *_: int) -> str:
        return format_supply(self.state)

    def _whos(self, *_: int) -> str:
        return f"Player {self.state.whose_turn()}'s turn\n"


def run_session(seed: int, lines: Iterable[str]) -> str:
    """Feed ``lines`` to a new session and return the whole transcript."""
    session = Session(seed)
    parts = [GREETING + "\n"]
    for line in lines:
        if session.finished:
            break
        parts.append(PROMPT + session.handle(line))
    return "".join(parts)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command line: ``player SEED``, then commands on standard input."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print(USAGE)
        return 0
    try:
        seed = int(args[0])
    except ValueError:
        seed = 0
    if seed <= 0:
        print(USAGE)
        return 0

    session = Session(seed)
    print(GREETING)
    while not session.finished:
        sys.stdout.write(PROMPT)
        sys.stdout.flush()
        line = sys.stdin.readline()
        if not line:
            break
        sys.stdout.write(session.handle(line))
    return 0


if __name__ == "__main__":
    sys.exit(main())