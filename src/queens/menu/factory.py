"""Factory helpers for creating the main menu entities."""
from esper import World

from queens.constants import GAME_TITLE, RULES_LINES
from queens.menu.components import MenuAction, MenuBackground, MenuButton, MenuTag, MenuText

_RULE_SPACING = 28.0


def spawn_main_menu(world: World, width: int, height: int) -> None:
    """Create the title, rules block and start button."""
    center_x = width / 2
    center_y = height / 2

    world.create_entity(MenuBackground(), MenuTag())

    title_y = center_y + 170.0
    world.create_entity(MenuText(GAME_TITLE, center_x, title_y, font_size=32, bold=True), MenuTag())

    rules_top = center_y + 100.0
    world.create_entity(MenuText("Rules:", center_x, rules_top, font_size=20, bold=True), MenuTag())
    for index, line in enumerate(RULES_LINES, start=1):
        world.create_entity(MenuText(line, center_x, rules_top - index * _RULE_SPACING), MenuTag())

    button_y = rules_top - (len(RULES_LINES) + 2) * _RULE_SPACING
    world.create_entity(
        MenuButton(label="Start Game", action=MenuAction.START_GAME, x=center_x, y=button_y),
        MenuTag(),
    )
