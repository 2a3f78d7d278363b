from __future__ import annotations

from .cells import Coord


def _check_amount(amount: int) -> int:
    if amount < 0:
        raise ValueError(f"amount must be non-negative, got {amount}")
    return amount


class Player:
    """A participant's name, purse and current cell. Counts never go negative."""

    def __init__(self, name: str, position: Coord, coins: int = 0, stars: int = 0) -> None:
        self._name = name
        self.position = position
        self.coins = _check_amount(coins)
        self.stars = _check_amount(stars)

    @property
    def name(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"Player(name={self.name!r}, position={self.position}, coins={self.coins}, stars={self.stars})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Player):
            return NotImplemented
        return (self.name, self.position, self.coins, self.stars) == (
            other.name, other.position, other.coins, other.stars)

    def add_coins(self, amount: int) -> None:
        self.coins += _check_amount(amount)

    def reduce_coins(self, amount: int) -> None:
        self.coins = max(0, self.coins - _check_amount(amount))

    def add_stars(self, amount: int) -> None:
        self.stars += _check_amount(amount)

    def reset_position(self, coord: Coord) -> None:
        self.position = coord

    def status_line(self) -> str:
        r, c = self.position
        return f"{self.name} -> Coins: {self.coins} | Stars: {self.stars} | Position: ({r}, {c})"
