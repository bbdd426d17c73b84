from enum import Enum, auto
from typing import Dict, Tuple

from queens.constants import (
    ACTION_BAR_HEIGHT,
    ACTION_BUTTON_GAP,
    ACTION_BUTTON_HEIGHT,
    ACTION_BUTTON_WIDTH,
    BOARD_MAX_HEIGHT_PCT,
    BOARD_MAX_WIDTH_PCT,
    BOTTOM_MARGIN,
    GRID_SIZE,
)

Rect = Tuple[float, float, float, float]  # left, bottom, width, height


class BoardAction(Enum):
    """Buttons shown in the action bar below the board."""
    CHECK_SOLUTION = auto()
    NEW_PUZZLE = auto()


ACTION_LABELS = {
    BoardAction.CHECK_SOLUTION: "Check Solution",
    BoardAction.NEW_PUZZLE: "New Puzzle",
}


def compute_board_geometry(window_width: int, window_height: int, size: int = GRID_SIZE):
    """Return (tile_size, start_x, start_y) for the board.

    The board sits centred horizontally above the action bar. Shared by
    rendering and input so clicks always map onto what was drawn.
    """
    usable_h = window_height - BOTTOM_MARGIN - ACTION_BAR_HEIGHT
    max_board_w = window_width * BOARD_MAX_WIDTH_PCT
    max_board_h = usable_h * BOARD_MAX_HEIGHT_PCT
    tile_size = int(min(max_board_w / size, max_board_h / size))
    if tile_size < 20:
        tile_size = 20
    total = size * tile_size
    start_x = (window_width - total) / 2
    start_y = BOTTOM_MARGIN + ACTION_BAR_HEIGHT + max(0.0, (usable_h - total) / 2)
    return tile_size, start_x, start_y


def cell_at_point(x: float, y: float, window_width: int, window_height: int,
                  size: int = GRID_SIZE) -> Tuple[int, int] | None:
    """Map a window point to (row, col); row 0 is the top row of the board."""
    tile_size, start_x, start_y = compute_board_geometry(window_width, window_height, size)
    total = size * tile_size
    if x < start_x or x >= start_x + total:
        return None
    if y < start_y or y >= start_y + total:
        return None
    col = int((x - start_x) // tile_size)
    row = size - 1 - int((y - start_y) // tile_size)
    if 0 <= row < size and 0 <= col < size:
        return row, col
    return None


def cell_rect(row: int, col: int, window_width: int, window_height: int,
              size: int = GRID_SIZE) -> Rect:
    tile_size, start_x, start_y = compute_board_geometry(window_width, window_height, size)
    left = start_x + col * tile_size
    bottom = start_y + (size - 1 - row) * tile_size
    return left, bottom, tile_size, tile_size


def compute_action_buttons(window_width: int, window_height: int) -> Dict[BoardAction, Rect]:
    """Rectangles of the action-bar buttons, laid out side by side and centred."""
    actions = list(BoardAction)
    total_w = len(actions) * ACTION_BUTTON_WIDTH + (len(actions) - 1) * ACTION_BUTTON_GAP
    left = (window_width - total_w) / 2
    bottom = BOTTOM_MARGIN + (ACTION_BAR_HEIGHT - ACTION_BUTTON_HEIGHT) / 2
    rects: Dict[BoardAction, Rect] = {}
    for action in actions:
        rects[action] = (left, bottom, ACTION_BUTTON_WIDTH, ACTION_BUTTON_HEIGHT)
        left += ACTION_BUTTON_WIDTH + ACTION_BUTTON_GAP
    return rects


def action_at_point(x: float, y: float, window_width: int, window_height: int) -> BoardAction | None:
    for action, (left, bottom, width, height) in compute_action_buttons(window_width, window_height).items():
        if left <= x <= left + width and bottom <= y <= bottom + height:
            return action
    return None


def compute_dialog_rect(window_width: int, window_height: int) -> Rect:
    width = min(420.0, window_width * 0.9)
    height = min(260.0, window_height * 0.6)
    return (window_width - width) / 2, (window_height - height) / 2, width, height
