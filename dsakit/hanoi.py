"""Tower of Hanoi move generation."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Move:
    """A single disk moved from one rod to another."""

    disk: int
    source: str
    destination: str


def hanoi_moves(
    n: int, source: str = "A", auxiliary: str = "B", destination: str = "C"
) -> Iterator[Move]:
    """Yield the moves that carry ``n`` disks from ``source`` to ``destination``."""
    if n < 0:
        raise ValueError(f"number of disks must be non-negative, got {n}")
    if n == 0:
        return
    yield from hanoi_moves(n - 1, source, destination, auxiliary)
    yield Move(n, source, destination)
    yield from hanoi_moves(n - 1, auxiliary, source, destination)


def format_moves(moves: Iterable[Move]) -> list[str]:
    """Render moves as numbered lines, e.g. ``Move 1: Disk 1 from A to C``."""
    return [
        f"Move {number}: Disk {move.disk} from {move.source} to {move.destination}"
        for number, move in enumerate(moves, start=1)
    ]