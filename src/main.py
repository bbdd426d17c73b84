"""Entry point for the Queens puzzle.

Sets up ECS world, event bus, systems, and Arcade window.
"""
import logging

from arcade import Window, run, set_background_color, color
from queens.world import create_world
from queens.constants import GRID_SIZE
from queens.events.bus import EventBus, EVENT_MOUSE_PRESS_RAW
from queens.components.game_state import GameMode
from queens.menu.factory import spawn_main_menu
from queens.menu.render_system import MenuRenderSystem
from queens.menu.input_system import MenuInputSystem
from queens.systems.board import BoardSystem
from queens.systems.game_flow_system import GameFlowSystem
from queens.systems.input import InputSystem
from queens.systems.mouse_throttle_system import MouseThrottleSystem
from queens.systems.render import RenderSystem
from queens.utils.game_state import get_game_state


class QueensWindow(Window):
    def __init__(self):
        super().__init__(600, 720, "Queen's Puzzle")
        self.event_bus = EventBus()
        self.world = create_world(self.event_bus, initial_mode=GameMode.MENU)
        self.mouse_throttle_system = MouseThrottleSystem(self.event_bus)

        spawn_main_menu(self.world, self.width, self.height)
        self.menu_input_system = MenuInputSystem(self.world, self.event_bus)
        self.menu_render_system = MenuRenderSystem(self.world, self)

        # The board is generated when the player leaves the menu.
        self.board_system = BoardSystem(self.world, self.event_bus, GRID_SIZE, generate=False)
        self.game_flow_system = GameFlowSystem(self.world, self.event_bus)
        self.input_system = InputSystem(self.event_bus, self, self.world)
        self.render_system = RenderSystem(self.world, self.event_bus, self)

        set_background_color(color.WHITE)

    def on_draw(self):
        self.clear()
        state = get_game_state(self.world)
        if state and state.mode == GameMode.MENU:
            self.menu_render_system.process()
            return
        self.render_system.process()

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(
            EVENT_MOUSE_PRESS_RAW,
            x=x,
            y=y,
            button=button,
            modifiers=modifiers,
        )

    def on_key_press(self, symbol: int, modifiers: int):
        self.menu_input_system.handle_key_press(symbol, modifiers)


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    QueensWindow()
    run()

if __name__ == "__main__":
    main()
