import logging
import random
from typing import FrozenSet, List, Sequence, Tuple

from esper import World

from queens.components.board import Board
from queens.components.board_position import BoardPosition
from queens.components.cell_marker import CellMarker, MarkerState
from queens.components.region import Region
from queens.components.violations import Violations
from queens.constants import GRID_SIZE
from queens.events.bus import (
    EventBus,
    EVENT_BOARD_RESET,
    EVENT_CELL_TOGGLED,
    EVENT_CHECK_SOLUTION_REQUEST,
    EVENT_NEW_PUZZLE_REQUEST,
    EVENT_PUZZLE_GENERATED,
    EVENT_SOLUTION_CHECKED,
    EVENT_TILE_CLICK,
    EVENT_VIOLATIONS_CHANGED,
)
from queens.systems.board_ops import (
    get_entity_at,
    get_region_palette,
    marker_grid,
    region_grid,
)
from queens.systems.constraint_engine import (
    full_violations,
    incremental_violations,
    queen_positions,
    validate_solution,
)
from queens.systems.region_partitioner import generate_region_grid

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


class BoardSystem:
    """Puzzle session: one board entity plus one entity per cell.

    Each cell entity carries BoardPosition, CellMarker and (once a puzzle has
    been generated) Region. The board entity carries Board and Violations.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        size: int = GRID_SIZE,
        *,
        rng: random.Random | None = None,
        generate: bool = True,
    ):
        self.world = world
        self.event_bus = event_bus
        self._rng = rng or getattr(world, "random", None) or random.Random()
        self.board_entity = self.world.create_entity(Board(rows=size, cols=size), Violations())
        self.event_bus.subscribe(EVENT_TILE_CLICK, self.on_tile_click)
        self.event_bus.subscribe(EVENT_NEW_PUZZLE_REQUEST, self.on_new_puzzle_request)
        self.event_bus.subscribe(EVENT_CHECK_SOLUTION_REQUEST, self.on_check_solution_request)
        self._init_board(size)
        if generate:
            self.generate_puzzle()

    @property
    def size(self) -> int:
        return self.world.component_for_entity(self.board_entity, Board).rows

    @property
    def violations(self) -> Violations:
        return self.world.component_for_entity(self.board_entity, Violations)

    def _init_board(self, size: int) -> None:
        for r in range(size):
            for c in range(size):
                self.world.create_entity(BoardPosition(row=r, col=c), CellMarker())

    # ------------------------------------------------------------------
    # Session operations
    # ------------------------------------------------------------------

    def generate_puzzle(self) -> List[List[str]]:
        """Assign a fresh region grid to the board and return it."""
        palette = get_region_palette(self.world)
        regions = generate_region_grid(self.size, palette.names(), rng=self._rng)
        self._install_regions(regions)
        logger.debug("Generated %dx%d puzzle with %d regions", self.size, self.size,
                     len({color for row in regions for color in row}))
        return regions

    def reset_board(self) -> None:
        """Clear every marker and the violation set."""
        for _, marker in self.world.get_component(CellMarker):
            marker.state = MarkerState.EMPTY
        self.violations.positions.clear()
        self.event_bus.emit(EVENT_BOARD_RESET)
        self.event_bus.emit(EVENT_VIOLATIONS_CHANGED, violations=frozenset())

    def new_puzzle(self) -> List[List[str]]:
        self.reset_board()
        return self.generate_puzzle()

    def toggle_cell(self, row: int, col: int) -> Tuple[MarkerState, FrozenSet[Position]]:
        """Advance one cell through EMPTY -> MARKED -> QUEEN -> EMPTY.

        Returns the new marker state together with the full violation set.
        """
        size = self.size
        if not (0 <= row < size and 0 <= col < size):
            raise ValueError(f"Cell ({row}, {col}) is outside the {size}x{size} board")
        ent = get_entity_at(self.world, row, col)
        if ent is None:
            raise RuntimeError(f"No cell entity at ({row}, {col})")
        marker = self.world.component_for_entity(ent, CellMarker)
        previous = marker.state
        marker.state = previous.next()
        pos = (row, col)
        violations = self.violations.positions

        if marker.state == MarkerState.MARKED:
            violations.discard(pos)
        elif marker.state == MarkerState.QUEEN:
            queens = queen_positions(marker_grid(self.world))
            violations |= incremental_violations(pos, queens, region_grid(self.world))
        else:
            violations.discard(pos)
            # A removed queen can free its former partner; only a rescan shows that.
            self._revalidate()

        snapshot = frozenset(self.violations.positions)
        logger.debug("Cell %s: %s -> %s, %d violation(s)", pos, previous.name,
                     marker.state.name, len(snapshot))
        self.event_bus.emit(
            EVENT_CELL_TOGGLED,
            row=row,
            col=col,
            previous=previous,
            state=marker.state,
            violations=snapshot,
        )
        self.event_bus.emit(EVENT_VIOLATIONS_CHANGED, violations=snapshot)
        return marker.state, snapshot

    def check_solution(self) -> bool:
        solved = validate_solution(
            marker_grid(self.world),
            region_grid(self.world),
            self.violations.positions,
        )
        logger.info("Solution check: %s", "solved" if solved else "not solved")
        self.event_bus.emit(EVENT_SOLUTION_CHECKED, solved=solved)
        return solved

    def _revalidate(self) -> None:
        queens = queen_positions(marker_grid(self.world))
        violations = self.violations.positions
        violations.clear()
        violations |= full_violations(queens, region_grid(self.world))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def marker_at(self, row: int, col: int) -> MarkerState:
        ent = get_entity_at(self.world, row, col)
        if ent is None:
            raise ValueError(f"Cell ({row}, {col}) is outside the board")
        return self.world.component_for_entity(ent, CellMarker).state

    def markers(self) -> List[List[MarkerState]]:
        return marker_grid(self.world)

    def regions(self) -> List[List[str]]:
        return region_grid(self.world)

    def set_regions(self, regions: Sequence[Sequence[str]]) -> None:
        """Install a hand-made region grid (used for fixed layouts and tests)."""
        size = self.size
        if len(regions) != size or any(len(row) != size for row in regions):
            raise ValueError(f"Region grid must be {size}x{size}")
        palette = get_region_palette(self.world)
        for row in regions:
            for color in row:
                palette.rgb_for(color)
        self._install_regions(regions)

    def _install_regions(self, regions: Sequence[Sequence[str]]) -> None:
        for ent, position in self.world.get_component(BoardPosition):
            color = regions[position.row][position.col]
            if self.world.has_component(ent, Region):
                self.world.component_for_entity(ent, Region).color = color
            else:
                self.world.add_component(ent, Region(color=color))
        # Queens left on the board are judged against the new regions.
        self._revalidate()
        self.event_bus.emit(EVENT_PUZZLE_GENERATED, regions=[list(row) for row in regions])
        self.event_bus.emit(EVENT_VIOLATIONS_CHANGED, violations=frozenset(self.violations.positions))

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------

    def on_tile_click(self, sender, **kwargs):
        row = kwargs.get('row')
        col = kwargs.get('col')
        if row is None or col is None:
            return
        size = self.size
        if not (0 <= row < size and 0 <= col < size):
            return
        self.toggle_cell(row, col)

    def on_new_puzzle_request(self, sender, **kwargs):
        self.new_puzzle()

    def on_check_solution_request(self, sender, **kwargs):
        self.check_solution()
