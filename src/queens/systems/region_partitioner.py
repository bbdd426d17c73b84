"""Randomised flood-fill partition of the board into color regions.

Each palette color in turn seeds a random unassigned cell and grows outwards
through orthogonal neighbours until it reaches its share of the cells still
unassigned. Growth that runs out of frontier simply stops. Whatever is left
after the last color gets an independently random color, so a region may end
up split across several patches (or be missing entirely); generated boards are
not guaranteed to be solvable.
"""
from __future__ import annotations

import random
from collections import defaultdict
from typing import Dict, Iterable, List, Sequence, Set, Tuple, cast

Position = Tuple[int, int]

_DIRECTIONS: Tuple[Position, ...] = ((0, 1), (1, 0), (0, -1), (-1, 0))


def orthogonal_neighbours(pos: Position, size: int) -> List[Position]:
    """Return the in-bounds up/down/left/right neighbours of ``pos``."""
    row, col = pos
    result: List[Position] = []
    for dr, dc in _DIRECTIONS:
        r, c = row + dr, col + dc
        if 0 <= r < size and 0 <= c < size:
            result.append((r, c))
    return result


def _pick(rng: random.Random, cells: Iterable[Position]) -> Position:
    # Sorted so that a seeded Random yields the same grid on every run.
    return rng.choice(sorted(cells))


def generate_region_grid(
    size: int,
    colors: Sequence[str],
    rng: random.Random | None = None,
) -> List[List[str]]:
    """Partition a ``size`` x ``size`` board into regions named by ``colors``.

    Every cell of the returned grid holds one entry of ``colors``.
    """
    if size <= 0:
        raise ValueError(f"Board size must be positive, got {size}")
    if not colors:
        raise ValueError("Region palette must not be empty")
    rng = rng or random.Random()
    palette_count = len(colors)

    grid: List[List[str | None]] = [[None] * size for _ in range(size)]
    remaining: Set[Position] = {(r, c) for r in range(size) for c in range(size)}

    def claim(cell: Position, color: str) -> None:
        grid[cell[0]][cell[1]] = color
        remaining.discard(cell)

    def open_neighbours(cell: Position) -> Set[Position]:
        return {n for n in orthogonal_neighbours(cell, size) if n in remaining}

    for color in colors:
        target = len(remaining) // palette_count
        if target <= 0 or not remaining:
            continue
        seed = _pick(rng, remaining)
        claim(seed, color)
        needed = target - 1
        frontier = open_neighbours(seed)
        while needed > 0 and frontier:
            cell = _pick(rng, frontier)
            frontier.discard(cell)
            claim(cell, color)
            frontier |= open_neighbours(cell)
            needed -= 1

    for cell in sorted(remaining):
        grid[cell[0]][cell[1]] = rng.choice(list(colors))

    return [[cast(str, color) for color in row] for row in grid]


def region_cells(grid: Sequence[Sequence[str]]) -> Dict[str, List[Position]]:
    """Group positions by region color, in row-major order."""
    cells: Dict[str, List[Position]] = defaultdict(list)
    for r, row in enumerate(grid):
        for c, color in enumerate(row):
            cells[color].append((r, c))
    return dict(cells)
