from queens.components.solution_dialog import SolutionDialog
from queens.components.game_state import GameMode
from queens.constants import GRID_SIZE
from queens.events.bus import (
    EventBus,
    EVENT_CHECK_SOLUTION_REQUEST,
    EVENT_DIALOGUE_DISMISSED,
    EVENT_MOUSE_PRESS,
    EVENT_NEW_PUZZLE_REQUEST,
    EVENT_TILE_CLICK,
)
from queens.ui.layout import BoardAction, action_at_point, cell_at_point
from queens.utils.game_state import get_game_state

_ACTION_EVENTS = {
    BoardAction.CHECK_SOLUTION: EVENT_CHECK_SOLUTION_REQUEST,
    BoardAction.NEW_PUZZLE: EVENT_NEW_PUZZLE_REQUEST,
}


class InputSystem:
    """Routes left clicks during play to the result dialog, action bar or board."""

    def __init__(self, event_bus: EventBus, window, world=None, size: int = GRID_SIZE):
        self.event_bus = event_bus
        self.window = window
        self.world = world  # optional; without it every click is treated as puzzle input
        self.size = size
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button')
        if x is None or y is None:
            return
        if not self._puzzle_mode_active():
            return
        if self._is_guarded_press(kwargs.get('press_id')):
            return
        # Left button (1) only; arcade reports right as 4.
        if button != 1:
            return
        if self._dismiss_dialog():
            return
        width, height = self.window.width, self.window.height
        action = action_at_point(x, y, width, height)
        if action is not None:
            self.event_bus.emit(_ACTION_EVENTS[action])
            return
        cell = cell_at_point(x, y, width, height, self.size)
        if cell is not None:
            self.event_bus.emit(EVENT_TILE_CLICK, row=cell[0], col=cell[1])

    def _dismiss_dialog(self) -> bool:
        if self.world is None:
            return False
        dialogs = list(self.world.get_component(SolutionDialog))
        if not dialogs:
            return False
        for ent, dialog in dialogs:
            self.world.delete_entity(ent, immediate=True)
            self.event_bus.emit(EVENT_DIALOGUE_DISMISSED, solved=dialog.solved)
        return True

    def _puzzle_mode_active(self) -> bool:
        if self.world is None:
            return True
        state = get_game_state(self.world)
        if state is None:
            return True
        return state.mode == GameMode.PUZZLE

    def _is_guarded_press(self, press_id) -> bool:
        """The press that left the menu must not also land on the board."""
        if self.world is None or press_id is None:
            return False
        state = get_game_state(self.world)
        return state is not None and state.input_guard_press_id == press_id
