from __future__ import annotations

import random
from typing import Sequence

from queens.components.cell_marker import MarkerState
from queens.constants import GRID_SIZE, REGION_COLORS
from queens.events.bus import EventBus
from queens.systems.board import BoardSystem
from queens.world import create_world

PALETTE = list(REGION_COLORS.keys())

# One queen per row/column/column-region, no two touching.
VALID_SOLUTION = [(0, 0), (1, 2), (2, 4), (3, 6), (4, 1), (5, 3), (6, 5), (7, 7)]


class DummyWindow:
    def __init__(self, width=600, height=720):
        self.width = width
        self.height = height


def column_regions(size: int = GRID_SIZE) -> list[list[str]]:
    """Region grid where every column is its own region."""
    return [[PALETTE[c] for c in range(size)] for _ in range(size)]


def make_session(seed: int = 0, regions: Sequence[Sequence[str]] | None = None):
    """Return (bus, world, board) with a seeded world and optionally fixed regions."""
    bus = EventBus()
    world = create_world(bus, rng=random.Random(seed))
    board = BoardSystem(world, bus)
    if regions is not None:
        board.set_regions(regions)
    return bus, world, board


def place_queen(board: BoardSystem, row: int, col: int):
    """Click a cell until it holds a queen; returns the last toggle result."""
    result = None
    while board.marker_at(row, col) != MarkerState.QUEEN:
        result = board.toggle_cell(row, col)
    return result


def capture(bus: EventBus, name: str) -> list[dict]:
    received: list[dict] = []

    def handler(sender, **payload):
        received.append(payload)

    bus.subscribe(name, handler)
    return received
