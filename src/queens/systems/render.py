from typing import Any, Dict, Tuple

from esper import World

from queens.components.board_position import BoardPosition
from queens.components.cell_marker import CellMarker, MarkerState
from queens.components.game_state import GameMode
from queens.components.region import Region
from queens.components.solution_dialog import SolutionDialog
from queens.constants import CELL_GAP, GRID_SIZE, REGION_FILL_ALPHA
from queens.events.bus import EventBus
from queens.systems.board_ops import get_region_palette, get_violations
from queens.ui.layout import (
    ACTION_LABELS,
    BoardAction,
    cell_rect,
    compute_action_buttons,
    compute_dialog_rect,
)
from queens.utils.game_state import get_game_state

QUEEN_GLYPH = "\N{BLACK CHESS QUEEN}"
ILLEGAL_FILL = (255, 59, 48, 77)
ILLEGAL_OUTLINE = (255, 59, 48, 255)
GRID_LINE_COLOR = (209, 209, 214)
BUTTON_COLORS = {
    BoardAction.CHECK_SOLUTION: (0, 122, 255),
    BoardAction.NEW_PUZZLE: (52, 199, 89),
}


def blend_over_white(rgb: Tuple[int, int, int], alpha: int) -> Tuple[int, int, int]:
    """Flatten ``rgb`` at ``alpha`` (0-255) onto a white background."""
    a = max(0, min(255, alpha)) / 255
    r, g, b = rgb
    return (
        round(255 + (r - 255) * a),
        round(255 + (g - 255) * a),
        round(255 + (b - 255) * a),
    )


class RenderSystem:
    def __init__(self, world: World, event_bus: EventBus, window, size: int = GRID_SIZE):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.size = size
        self.last_cell_layout: Dict[Tuple[int, int], Dict[str, Any]] = {}

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True
        state = get_game_state(self.world)
        if state is not None and state.mode != GameMode.PUZZLE:
            return
        self.build_cell_layout()
        if headless:
            return
        arcade.draw_lrbt_rectangle_filled(0, self.window.width, 0, self.window.height, arcade.color.WHITE)
        self._draw_board(arcade)
        self._draw_action_bar(arcade)
        self._draw_dialog(arcade)

    def build_cell_layout(self) -> Dict[Tuple[int, int], Dict[str, Any]]:
        palette = get_region_palette(self.world)
        illegal = get_violations(self.world).positions
        width, height = self.window.width, self.window.height
        layout: Dict[Tuple[int, int], Dict[str, Any]] = {}
        for ent, (position, marker) in self.world.get_components(BoardPosition, CellMarker):
            pos = (position.row, position.col)
            try:
                region = self.world.component_for_entity(ent, Region)
            except KeyError:
                region = None
            color = palette.rgb_for(region.color) if region is not None else (255, 255, 255)
            layout[pos] = {
                "rect": cell_rect(position.row, position.col, width, height, self.size),
                "fill": blend_over_white(color, REGION_FILL_ALPHA),
                "state": marker.state,
                "illegal": pos in illegal,
            }
        self.last_cell_layout = layout
        return layout

    def _draw_board(self, arcade) -> None:
        for cell in self.last_cell_layout.values():
            left, bottom, size, _ = cell["rect"]
            arcade.draw_lbwh_rectangle_filled(left, bottom, size, size, GRID_LINE_COLOR)
            inner = size - CELL_GAP
            arcade.draw_lbwh_rectangle_filled(left, bottom + CELL_GAP, inner, inner, cell["fill"])
            cx = left + size / 2
            cy = bottom + size / 2
            state = cell["state"]
            if state == MarkerState.MARKED:
                arm = size * 0.2
                arcade.draw_line(cx - arm, cy - arm, cx + arm, cy + arm, arcade.color.BLACK, 3)
                arcade.draw_line(cx - arm, cy + arm, cx + arm, cy - arm, arcade.color.BLACK, 3)
            elif state == MarkerState.QUEEN:
                arcade.draw_text(QUEEN_GLYPH, cx, cy, arcade.color.BLACK, int(size * 0.5),
                                 anchor_x="center", anchor_y="center")
            if cell["illegal"]:
                arcade.draw_lbwh_rectangle_filled(left, bottom + CELL_GAP, inner, inner, ILLEGAL_FILL)
                arcade.draw_lbwh_rectangle_outline(left, bottom + CELL_GAP, inner, inner,
                                                   ILLEGAL_OUTLINE, border_width=2)

    def _draw_action_bar(self, arcade) -> None:
        for action, (left, bottom, width, height) in compute_action_buttons(
                self.window.width, self.window.height).items():
            arcade.draw_lbwh_rectangle_filled(left, bottom, width, height, BUTTON_COLORS[action])
            arcade.draw_text(ACTION_LABELS[action], left + width / 2, bottom + height / 2,
                             arcade.color.WHITE, 16, anchor_x="center", anchor_y="center", bold=True)

    def _draw_dialog(self, arcade) -> None:
        for _, dialog in self.world.get_component(SolutionDialog):
            left, bottom, width, height = compute_dialog_rect(self.window.width, self.window.height)
            arcade.draw_lrbt_rectangle_filled(0, self.window.width, 0, self.window.height, (0, 0, 0, 90))
            arcade.draw_lbwh_rectangle_filled(left, bottom, width, height, (242, 242, 247))
            arcade.draw_text(dialog.title, left + width / 2, bottom + height - 36, arcade.color.BLACK,
                             20, anchor_x="center", anchor_y="center", bold=True)
            arcade.draw_text(dialog.message, left + width / 2, bottom + height - 64, arcade.color.BLACK,
                             13, anchor_x="center", anchor_y="top", multiline=True,
                             width=int(width - 40), align="center")
            arcade.draw_text("OK (click anywhere)", left + width / 2, bottom + 24, arcade.color.BRIGHT_NAVY_BLUE,
                             14, anchor_x="center", anchor_y="center", bold=True)
            return
