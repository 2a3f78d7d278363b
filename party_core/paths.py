from __future__ import annotations

from collections import deque
from typing import Callable, Dict, List, Optional, Protocol, Set, Tuple

from .cells import Coord


class Walkable(Protocol):
    def is_walkable(self, coord: Coord) -> bool: ...


PathStrategy = Callable[[Walkable, Coord], List[Coord]]

# N, S, W, E, NW, NE, SW, SE
BFS_OFFSETS: Tuple[Coord, ...] = (
    (-1, 0), (1, 0), (0, -1), (0, 1),
    (-1, -1), (-1, 1), (1, -1), (1, 1),
)

# N, NE, E, SE, S, SW, W, NW
CLOCKWISE_OFFSETS: Tuple[Coord, ...] = (
    (-1, 0), (-1, 1), (0, 1), (1, 1),
    (1, 0), (1, -1), (0, -1), (-1, -1),
)

# N, S, W, E
ORTHOGONAL_OFFSETS: Tuple[Coord, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


class PathConstructionFailure(RuntimeError):
    """The boundary walk got stuck before returning to the start cell."""

    def __init__(self, partial: List[Coord], at: Coord) -> None:
        super().__init__(f"no circular path: walk stuck at {at} after {len(partial)} cells")
        self.partial = partial
        self.at = at


def step(coord: Coord, offset: Coord) -> Coord:
    return coord[0] + offset[0], coord[1] + offset[1]


def build_reachability_path(board: Walkable, start: Coord) -> List[Coord]:
    """
    Collects every walkable cell reachable from start with 8-directional moves.
    The result starts at start and follows BFS discovery order, each cell once.
    It does not require the cells to form a geometric loop.
    """
    path: List[Coord] = [start]
    seen: Set[Coord] = {start}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        for off in BFS_OFFSETS:
            nxt = step(current, off)
            if nxt in seen or not board.is_walkable(nxt):
                continue
            seen.add(nxt)
            path.append(nxt)
            queue.append(nxt)
    return path


def build_boundary_path(board: Walkable, start: Coord) -> List[Coord]:
    """
    Walks a one-cell-wide loop clockwise from start until it comes back.

    At each cell the clockwise offsets are tried in order, skipping the cell
    just came from and any cell already on the path. Branching loops are not
    supported: the first valid candidate always wins.
    Raises PathConstructionFailure (with the partial path) when stuck.
    """
    path: List[Coord] = [start]
    on_path: Set[Coord] = {start}
    prev: Optional[Coord] = None
    current = start
    while True:
        chosen: Optional[Coord] = None
        for off in CLOCKWISE_OFFSETS:
            nxt = step(current, off)
            if nxt == prev or not board.is_walkable(nxt):
                continue
            if nxt == start and len(path) >= 3:
                return path
            if nxt in on_path:
                continue
            chosen = nxt
            break
        if chosen is None:
            raise PathConstructionFailure(path, current)
        path.append(chosen)
        on_path.add(chosen)
        prev, current = current, chosen


PATH_STRATEGIES: Dict[str, PathStrategy] = {
    'reachability': build_reachability_path,
    'boundary': build_boundary_path,
}

DEFAULT_STRATEGY = 'reachability'


def resolve_strategy(name: str) -> PathStrategy:
    try:
        return PATH_STRATEGIES[name]
    except KeyError:
        choices = ', '.join(sorted(PATH_STRATEGIES))
        raise ValueError(f"unknown path strategy {name!r} (choose from {choices})") from None
