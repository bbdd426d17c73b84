from __future__ import annotations

from esper import World

from queens.components.game_state import GameMode, GameState
from queens.events.bus import EVENT_GAME_MODE_CHANGED, EventBus


def _sanitize_press_id(value: int | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def get_game_state(world: World) -> GameState | None:
    for _, state in world.get_component(GameState):
        return state
    return None


def set_game_mode(
    world: World,
    event_bus: EventBus,
    mode: GameMode,
    *,
    input_guard_press_id: int | None = None,
) -> None:
    """Update the global game mode and emit a change event when it differs."""

    guard_id = _sanitize_press_id(input_guard_press_id)
    state = get_game_state(world)
    if state is None:
        world.create_entity(GameState(mode=mode, input_guard_press_id=guard_id))
        event_bus.emit(
            EVENT_GAME_MODE_CHANGED,
            previous_mode=None,
            new_mode=mode,
            input_guard_press_id=guard_id,
        )
        return
    previous_mode = state.mode
    changed = previous_mode != mode
    if changed:
        state.mode = mode
    if changed or guard_id is not None:
        state.input_guard_press_id = guard_id
        event_bus.emit(
            EVENT_GAME_MODE_CHANGED,
            previous_mode=previous_mode,
            new_mode=mode,
            input_guard_press_id=guard_id,
        )
