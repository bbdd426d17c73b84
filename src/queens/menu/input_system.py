"""Input handling for the ECS-driven main menu."""
from esper import World

from queens.components.game_state import GameMode
from queens.events.bus import (
    EVENT_MENU_START_SELECTED,
    EVENT_MOUSE_PRESS,
    EventBus,
)
from queens.menu.components import MenuAction, MenuButton, MenuTag
from queens.utils.game_state import get_game_state

# arcade.key.ENTER / RETURN; avoids importing arcade here.
_ENTER_KEYS = (65293, 13)


class MenuInputSystem:
    """Processes input events while the game is in the menu mode."""

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self._event_bus = event_bus
        event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    def on_mouse_press(self, sender, **payload) -> None:
        x = payload.get("x")
        y = payload.get("y")
        button = payload.get("button")
        if x is None or y is None or button is None:
            return
        press_id = payload.get("press_id")
        try:
            press_id_int = int(press_id) if press_id is not None else None
        except (TypeError, ValueError):
            press_id_int = None
        self.handle_mouse_press(float(x), float(y), int(button), press_id_int)

    def handle_mouse_press(
        self,
        x: float,
        y: float,
        button: int,
        press_id: int | None = None,
    ) -> None:
        """Start the game when the start button is clicked."""
        if not self._menu_active():
            return
        for _, menu_button in self.world.get_component(MenuButton):
            if not menu_button.enabled:
                continue
            if self._point_inside_button(x, y, menu_button):
                self._activate_action(menu_button.action, press_id=press_id)
                return

    def handle_key_press(self, symbol: int, modifiers: int) -> None:
        """Allow keyboard activation using the Enter key."""
        if not self._menu_active():
            return
        if symbol in _ENTER_KEYS:
            self._activate_action(MenuAction.START_GAME)

    def _activate_action(self, action: MenuAction, *, press_id: int | None = None) -> None:
        if action == MenuAction.START_GAME:
            self._clear_menu_entities()
            self._event_bus.emit(EVENT_MENU_START_SELECTED, press_id=press_id)

    def _clear_menu_entities(self) -> None:
        """Remove all entities that are part of the menu UI."""
        to_delete = {ent for ent, _ in self.world.get_component(MenuTag)}
        for ent in to_delete:
            self.world.delete_entity(ent, immediate=True)

    def _menu_active(self) -> bool:
        state = get_game_state(self.world)
        return state is not None and state.mode == GameMode.MENU

    @staticmethod
    def _point_inside_button(x: float, y: float, button: MenuButton) -> bool:
        half_w = button.width / 2
        half_h = button.height / 2
        return (
            button.x - half_w <= x <= button.x + half_w
            and button.y - half_h <= y <= button.y + half_h
        )
