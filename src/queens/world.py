import random
from typing import Dict, Tuple

from esper import World

from queens.components.game_state import GameMode, GameState
from queens.components.region_palette import RegionPalette, RegionPaletteRegistry
from queens.constants import REGION_COLORS
from queens.events.bus import EventBus


def create_world(
    event_bus: EventBus,
    initial_mode: GameMode = GameMode.PUZZLE,
    *,
    rng: random.Random | None = None,
    palette: Dict[str, Tuple[int, int, int]] | None = None,
) -> World:
    world = World()
    # Shared by every system so a seeded Random reproduces a whole session.
    setattr(world, "random", rng or random.Random())

    state_entity = world.create_entity()
    world.add_component(state_entity, GameState(mode=initial_mode))

    colors = dict(palette if palette is not None else REGION_COLORS)
    world.create_entity(
        RegionPaletteRegistry(),
        RegionPalette(colors=colors, order=list(colors.keys())),
    )
    return world
