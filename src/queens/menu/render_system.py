"""Rendering system responsible for drawing the main menu."""
import arcade
from esper import World

from queens.components.game_state import GameMode
from queens.menu.components import MenuBackground, MenuButton, MenuText
from queens.utils.game_state import get_game_state


class MenuRenderSystem:
    """Renders menu entities when the game is in menu mode."""

    def __init__(self, world: World, window) -> None:
        self.world = world
        self.window = window

    def process(self) -> None:
        """Draw the menu if the current mode is Menu."""
        state = get_game_state(self.world)
        if not state or state.mode != GameMode.MENU:
            return

        for _, background in self.world.get_component(MenuBackground):
            arcade.draw_lrbt_rectangle_filled(
                0,
                self.window.width,
                0,
                self.window.height,
                background.color,
            )

        for _, text in self.world.get_component(MenuText):
            arcade.draw_text(
                text.text,
                text.x,
                text.y,
                arcade.color.BLACK,
                text.font_size,
                anchor_x="center",
                anchor_y="center",
                bold=text.bold,
            )

        for _, button in self.world.get_component(MenuButton):
            left = button.x - button.width / 2
            bottom = button.y - button.height / 2
            fill_color = arcade.color.BRIGHT_NAVY_BLUE if button.enabled else arcade.color.GRAY_BLUE
            arcade.draw_lbwh_rectangle_filled(left, bottom, button.width, button.height, fill_color)
            arcade.draw_text(
                button.label,
                button.x,
                button.y,
                arcade.color.WHITE,
                20,
                anchor_x="center",
                anchor_y="center",
                bold=True,
            )
