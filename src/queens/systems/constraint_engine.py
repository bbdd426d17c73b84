"""Queen placement rules.

Pure functions over plain grids: ``markers`` is a row-major grid of
MarkerState, ``regions`` a row-major grid of region color names, and
violations are sets of ``(row, col)`` positions of queens that break a rule.
BoardSystem keeps the session state and calls into here on every click.
"""
from __future__ import annotations

from collections import Counter
from typing import Iterable, List, Sequence, Set, Tuple

from queens.components.cell_marker import MarkerState

Position = Tuple[int, int]
MarkerGrid = Sequence[Sequence[MarkerState]]
RegionGrid = Sequence[Sequence[str]]


def is_geometric_conflict(a: Position, b: Position) -> bool:
    """Shared row, shared column, or touching (diagonals included)."""
    if a[0] == b[0] or a[1] == b[1]:
        return True
    return abs(a[0] - b[0]) <= 1 and abs(a[1] - b[1]) <= 1


def same_region(a: Position, b: Position, regions: RegionGrid) -> bool:
    return regions[a[0]][a[1]] == regions[b[0]][b[1]]


def queens_conflict(a: Position, b: Position, regions: RegionGrid) -> bool:
    """Return True when two distinct queens at ``a`` and ``b`` cannot coexist."""
    return is_geometric_conflict(a, b) or same_region(a, b, regions)


def queen_positions(markers: MarkerGrid) -> List[Position]:
    return [
        (r, c)
        for r, row in enumerate(markers)
        for c, state in enumerate(row)
        if state == MarkerState.QUEEN
    ]


def incremental_violations(
    placed: Position,
    queens: Iterable[Position],
    regions: RegionGrid,
) -> Set[Position]:
    """Positions in conflict with a newly placed queen, including the queen itself.

    Only pairs involving ``placed`` are examined; the result is meant to be
    merged into the existing violation set.
    """
    flagged: Set[Position] = set()
    for other in queens:
        if other == placed:
            continue
        if queens_conflict(placed, other, regions):
            flagged.add(placed)
            flagged.add(other)
    return flagged


def full_violations(queens: Sequence[Position], regions: RegionGrid) -> Set[Position]:
    """Recompute the violation set from scratch over every pair of queens."""
    flagged: Set[Position] = set()
    for index, first in enumerate(queens):
        for second in queens[index + 1:]:
            if queens_conflict(first, second, regions):
                flagged.add(first)
                flagged.add(second)
    return flagged


def validate_solution(
    markers: MarkerGrid,
    regions: RegionGrid,
    violations: Iterable[Position],
) -> bool:
    """Full-board solved check.

    Solved means one queen in every row, one in every column, no region holding
    more than one queen and an empty violation set. Adjacency is not rechecked
    here; it is covered by the maintained violation set.
    """
    rows = len(markers)
    cols = len(markers[0]) if rows else 0
    row_counts = [0] * rows
    col_counts = [0] * cols
    region_counts: Counter[str] = Counter()
    for r, c in queen_positions(markers):
        row_counts[r] += 1
        col_counts[c] += 1
        region_counts[regions[r][c]] += 1

    if not all(count == 1 for count in row_counts):
        return False
    if not all(count == 1 for count in col_counts):
        return False
    if not all(count == 1 for count in region_counts.values()):
        return False
    return not any(True for _ in violations)
