GRID_SIZE = 8
TILE_SIZE = 48
BOTTOM_MARGIN = 20

# Board maximum footprint relative to window (percentage of window width/height).
BOARD_MAX_WIDTH_PCT = 0.80
BOARD_MAX_HEIGHT_PCT = 0.80

# Action bar below the board holding the "Check Solution" / "New Puzzle" buttons.
ACTION_BAR_HEIGHT = 90
ACTION_BUTTON_WIDTH = 180
ACTION_BUTTON_HEIGHT = 52
ACTION_BUTTON_GAP = 20

# Gap drawn between cells (the grid lines).
CELL_GAP = 1

# Opacity applied to region colors on the board (0-255).
REGION_FILL_ALPHA = 77

# Default palette in generation order. Names are the region identifiers.
REGION_COLORS = {
    'purple': (175, 82, 222),
    'yellow': (255, 204, 0),
    'blue':   (0, 122, 255),
    'green':  (52, 199, 89),
    'gray':   (142, 142, 147),
    'coral':  (255, 128, 102),
    'brown':  (162, 132, 94),
    'peach':  (255, 204, 153),
}

SOLVED_TITLE = "Congratulations! \N{PARTY POPPER}"
SOLVED_MESSAGE = "You've solved the puzzle correctly!"
UNSOLVED_TITLE = "Not Quite Right"
UNSOLVED_MESSAGE = (
    "Keep trying! Remember:\n"
    "• One queen per row\n"
    "• One queen per column\n"
    "• One queen per color region\n"
    "• Queens can't touch, even diagonally"
)

GAME_TITLE = "Queen's Puzzle"
RULES_LINES = (
    "• Your goal is to have exactly one \N{CROWN} in each row, column, and color region.",
    "• Click once to place X and click twice for \N{CROWN}",
    "• Use X to mark where \N{CROWN} cannot be placed",
    "• Two \N{CROWN} cannot touch each other, not even diagonally",
)
