"""High-level coordinator for menu -> puzzle transitions and check results."""
from __future__ import annotations

import logging

from esper import World

from queens.components.game_state import GameMode
from queens.components.solution_dialog import SolutionDialog
from queens.constants import SOLVED_MESSAGE, SOLVED_TITLE, UNSOLVED_MESSAGE, UNSOLVED_TITLE
from queens.events.bus import (
    EVENT_BOARD_RESET,
    EVENT_MENU_START_SELECTED,
    EVENT_NEW_PUZZLE_REQUEST,
    EVENT_SOLUTION_CHECKED,
    EventBus,
)
from queens.utils.game_state import set_game_mode

logger = logging.getLogger(__name__)


class GameFlowSystem:
    """Starts a puzzle when the menu is left and presents check results."""

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_MENU_START_SELECTED, self._on_start)
        self.event_bus.subscribe(EVENT_SOLUTION_CHECKED, self._on_solution_checked)
        self.event_bus.subscribe(EVENT_BOARD_RESET, self._on_board_reset)

    def _on_start(self, sender, **payload) -> None:
        press_id = payload.get("press_id")
        logger.info("Starting new game")
        set_game_mode(self.world, self.event_bus, GameMode.PUZZLE, input_guard_press_id=press_id)
        self.event_bus.emit(EVENT_NEW_PUZZLE_REQUEST)

    def _on_solution_checked(self, sender, **payload) -> None:
        solved = bool(payload.get("solved"))
        self._clear_dialogs()
        dialog = SolutionDialog(
            solved=solved,
            title=SOLVED_TITLE if solved else UNSOLVED_TITLE,
            message=SOLVED_MESSAGE if solved else UNSOLVED_MESSAGE,
        )
        self.world.create_entity(dialog)

    def _on_board_reset(self, sender, **payload) -> None:
        self._clear_dialogs()

    def _clear_dialogs(self) -> None:
        for ent, _ in list(self.world.get_component(SolutionDialog)):
            self.world.delete_entity(ent, immediate=True)
