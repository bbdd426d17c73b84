from __future__ import annotations

from typing import List, Tuple

from esper import World

from queens.components.board import Board
from queens.components.board_position import BoardPosition
from queens.components.cell_marker import CellMarker, MarkerState
from queens.components.region import Region
from queens.components.region_palette import RegionPalette, RegionPaletteRegistry
from queens.components.violations import Violations

Position = Tuple[int, int]


def get_region_palette(world: World) -> RegionPalette:
    for entity, _ in world.get_component(RegionPaletteRegistry):
        return world.component_for_entity(entity, RegionPalette)
    raise RuntimeError("RegionPalette definitions not found")


def get_board(world: World) -> Tuple[int, Board]:
    for entity, board in world.get_component(Board):
        return entity, board
    raise RuntimeError("Board entity not found")


def get_violations(world: World) -> Violations:
    board_entity, _ = get_board(world)
    return world.component_for_entity(board_entity, Violations)


def get_entity_at(world: World, row: int, col: int) -> int | None:
    for entity, position in world.get_component(BoardPosition):
        if position.row == row and position.col == col:
            return entity
    return None


def marker_grid(world: World) -> List[List[MarkerState]]:
    _, board = get_board(world)
    grid = [[MarkerState.EMPTY] * board.cols for _ in range(board.rows)]
    for _, (position, marker) in world.get_components(BoardPosition, CellMarker):
        grid[position.row][position.col] = marker.state
    return grid


def region_grid(world: World) -> List[List[str]]:
    """Current region colors; raises RuntimeError before the first puzzle is generated."""
    _, board = get_board(world)
    grid: List[List[str | None]] = [[None] * board.cols for _ in range(board.rows)]
    for _, (position, region) in world.get_components(BoardPosition, Region):
        grid[position.row][position.col] = region.color
    result: List[List[str]] = []
    for r, row in enumerate(grid):
        out_row: List[str] = []
        for c, color in enumerate(row):
            if color is None:
                raise RuntimeError(f"Cell ({r}, {c}) has no region assigned")
            out_row.append(color)
        result.append(out_row)
    return result
