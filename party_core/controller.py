from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from .board import Board
from .cells import CellKind, Coord
from .paths import ORTHOGONAL_OFFSETS, step
from .player import Player
from .state import GameState, next_state

DEFAULT_TICKS = 10
DEFAULT_PLAYERS = ('Alice', 'Bob')
MIN_ROLL, MAX_ROLL = 1, 9

WIN_COIN_AMOUNT = 10
LOST_COIN_AMOUNT = 5
STAR_AMOUNT = 1

MOVEMENTS = ('path', 'walk')
PROMPT = 'Press <enter> to continue. '


@dataclass(frozen=True)
class TurnRecord:
    """What happened during one Playing tick."""
    tick: int
    player: str
    steps: int
    landed: Tuple[Coord, ...]  # cells actually stepped on, in order
    final: Coord
    coins: int
    stars: int


def apply_cell_effect(player: Player, kind: CellKind) -> str:
    """Applies the effect of landing on a cell and returns a short description ('' if none)."""
    if kind is CellKind.WIN_COIN:
        player.add_coins(WIN_COIN_AMOUNT)
        return f"+{WIN_COIN_AMOUNT} coins!"
    if kind is CellKind.LOST_COIN:
        player.reduce_coins(LOST_COIN_AMOUNT)
        return f"-{LOST_COIN_AMOUNT} coins!"
    if kind is CellKind.STAR:
        player.add_stars(STAR_AMOUNT)
        return f"+{STAR_AMOUNT} star!"
    return ''


class GameSession:
    """
    Owns one game: board, players, RNG and the current GameState.

    Each tick runs process() -> update() -> render(). Input and output go
    through the injected read_input/emit callables so a session can run
    without a terminal.
    """

    def __init__(
        self,
        board: Board,
        players: Sequence[Player],
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        movement: str = 'path',
        read_input: Optional[Callable[[str], str]] = None,
        emit: Callable[[str], None] = print,
        ticks: int = DEFAULT_TICKS,
    ) -> None:
        if not players:
            raise ValueError('a session needs at least one player')
        if movement not in MOVEMENTS:
            raise ValueError(f"unknown movement {movement!r} (choose from {', '.join(MOVEMENTS)})")
        self.board = board
        self.players: List[Player] = list(players)
        self.rng = rng or random.Random(seed)
        self.movement = movement
        self.read_input = read_input or input
        self.emit = emit
        self.ticks = ticks
        self.state = GameState.UNDEFINED
        self.ticks_played = 0
        self.active: Player = self.players[0]
        self.history: List[TurnRecord] = []
        self.visited_states: List[GameState] = [self.state]

    def _player_for_tick(self) -> Player:
        return self.players[self.ticks_played % len(self.players)]

    def process(self) -> None:
        """Waits for the operator; in Playing, first names the player who moves this tick."""
        if self.state is GameState.WELCOME:
            self.read_input(PROMPT)
        elif self.state is GameState.PLAYING:
            self.emit(f"{self._player_for_tick().name}'s turn.")
            self.read_input(PROMPT)

    def update(self) -> None:
        if self.state is not GameState.PLAYING:
            self.state = next_state(self.state)
            self.visited_states.append(self.state)
            return
        self.visited_states.append(self.state)

        player = self._player_for_tick()
        self.active = player
        steps = self.rng.randint(MIN_ROLL, MAX_ROLL)
        self.emit(f"{player.name} rolled {steps} steps!")

        if self.movement == 'path':
            landed = self._follow_path(player, steps)
        else:
            landed = self._random_walk(player, steps)

        final = landed[-1] if landed else player.position
        player.reset_position(final)
        self.emit(f"{player.name} stopped at ({final[0]}, {final[1]})")
        self.history.append(TurnRecord(
            tick=self.ticks_played,
            player=player.name,
            steps=steps,
            landed=tuple(landed),
            final=final,
            coins=player.coins,
            stars=player.stars,
        ))

    def _land(self, player: Player, coord: Coord, n: int) -> None:
        effect = apply_cell_effect(player, self.board.cell(*coord))
        line = f"  step {n}: ({coord[0]}, {coord[1]})"
        self.emit(f"{line} {effect}" if effect else line)

    def _follow_path(self, player: Player, steps: int) -> List[Coord]:
        landed: List[Coord] = []
        for n in range(1, steps + 1):
            coord = self.board.next_pos()
            self._land(player, coord, n)
            landed.append(coord)
        return landed

    def _random_walk(self, player: Player, steps: int) -> List[Coord]:
        """One random orthogonal step per roll point; blocked steps are skipped, not redrawn."""
        landed: List[Coord] = []
        current = player.position
        for n in range(1, steps + 1):
            candidate = step(current, self.rng.choice(ORTHOGONAL_OFFSETS))
            if not self.board.is_walkable(candidate):
                continue
            current = candidate
            self._land(player, current, n)
            landed.append(current)
        return landed

    def render(self) -> None:
        if self.state is GameState.WELCOME:
            self.emit('WELCOME!')
        elif self.state is GameState.PLAYING:
            self.emit('\nBoard:')
            self.emit(self.board.pretty(self.active.position))
            self.emit('\nPlayers:')
            for p in self.players:
                self.emit(p.status_line())
            self.emit('')

    def tick(self) -> None:
        self.process()
        self.update()
        self.render()
        self.ticks_played += 1

    def run(self) -> List[TurnRecord]:
        """Plays the fixed number of ticks and returns the turn history."""
        for _ in range(self.ticks):
            self.tick()
        return self.history


def new_session(board: Board, names: Sequence[str] = DEFAULT_PLAYERS, **kwargs) -> GameSession:
    """Creates a session whose players all start on the board's start cell."""
    players = [Player(name, board.start) for name in names]
    return GameSession(board, players, **kwargs)
