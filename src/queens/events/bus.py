from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps bound methods of systems that are not stored anywhere alive.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS_RAW = "mouse_press_raw"  # payload: x, y, button, modifiers
EVENT_MOUSE_PRESS = "mouse_press"          # payload: x, y, button, press_id
EVENT_TILE_CLICK = "tile_click"            # payload: row, col


# ============================================================================
# PUZZLE & BOARD
# ============================================================================
EVENT_NEW_PUZZLE_REQUEST = "new_puzzle_request"        # payload: None
EVENT_CHECK_SOLUTION_REQUEST = "check_solution_request"  # payload: None
EVENT_PUZZLE_GENERATED = "puzzle_generated"            # payload: regions=list[list[str]]
EVENT_BOARD_RESET = "board_reset"                      # payload: None
EVENT_CELL_TOGGLED = "cell_toggled"                    # payload: row, col, previous=MarkerState, state=MarkerState, violations=frozenset
EVENT_VIOLATIONS_CHANGED = "violations_changed"        # payload: violations=frozenset[(r,c)]
EVENT_SOLUTION_CHECKED = "solution_checked"            # payload: solved=bool
EVENT_DIALOGUE_DISMISSED = "dialogue_dismissed"        # payload: solved=bool


# ============================================================================
# GAME FLOW & MENU
# ============================================================================
EVENT_GAME_MODE_CHANGED = "game_mode_changed"          # payload: previous_mode=GameMode|None, new_mode=GameMode
EVENT_MENU_START_SELECTED = "menu_start_selected"      # payload: press_id=int|None
