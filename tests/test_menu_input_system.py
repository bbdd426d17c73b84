from queens.components.game_state import GameMode
from queens.events.bus import EVENT_MENU_START_SELECTED, EVENT_MOUSE_PRESS, EventBus
from queens.menu.components import MenuButton, MenuTag, MenuText
from queens.menu.factory import spawn_main_menu
from queens.menu.input_system import MenuInputSystem
from queens.constants import GAME_TITLE, RULES_LINES
from queens.world import create_world
from tests.helpers import capture


def _menu_world():
    bus = EventBus()
    world = create_world(bus, initial_mode=GameMode.MENU)
    spawn_main_menu(world, 600, 720)
    return bus, world


def test_menu_shows_title_rules_and_start_button():
    _, world = _menu_world()
    texts = [text.text for _, text in world.get_component(MenuText)]
    assert GAME_TITLE in texts
    for line in RULES_LINES:
        assert line in texts
    buttons = [button for _, button in world.get_component(MenuButton)]
    assert [button.label for button in buttons] == ["Start Game"]


def test_clicking_start_clears_menu_and_emits():
    bus, world = _menu_world()
    MenuInputSystem(world, bus)
    started = capture(bus, EVENT_MENU_START_SELECTED)
    button = next(button for _, button in world.get_component(MenuButton))
    bus.emit(EVENT_MOUSE_PRESS, x=button.x, y=button.y, button=1, press_id=3)
    assert started == [{'press_id': 3}]
    assert not list(world.get_component(MenuTag))


def test_click_outside_button_does_nothing():
    bus, world = _menu_world()
    MenuInputSystem(world, bus)
    started = capture(bus, EVENT_MENU_START_SELECTED)
    bus.emit(EVENT_MOUSE_PRESS, x=1, y=1, button=1)
    assert not started
    assert list(world.get_component(MenuTag))


def test_enter_key_starts_game():
    bus, world = _menu_world()
    menu_input = MenuInputSystem(world, bus)
    started = capture(bus, EVENT_MENU_START_SELECTED)
    menu_input.handle_key_press(65293, 0)
    assert started == [{'press_id': None}]


def test_menu_input_ignored_during_puzzle():
    bus = EventBus()
    world = create_world(bus, initial_mode=GameMode.PUZZLE)
    spawn_main_menu(world, 600, 720)
    menu_input = MenuInputSystem(world, bus)
    started = capture(bus, EVENT_MENU_START_SELECTED)
    menu_input.handle_key_press(65293, 0)
    assert not started
