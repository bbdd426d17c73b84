from dataclasses import dataclass
from enum import Enum, auto


class MarkerState(Enum):
    """Player annotation on a single cell."""
    EMPTY = auto()
    MARKED = auto()
    QUEEN = auto()

    def next(self) -> "MarkerState":
        """Return the state reached by one click: EMPTY -> MARKED -> QUEEN -> EMPTY."""
        return _TOGGLE_CYCLE[self]


_TOGGLE_CYCLE = {
    MarkerState.EMPTY: MarkerState.MARKED,
    MarkerState.MARKED: MarkerState.QUEEN,
    MarkerState.QUEEN: MarkerState.EMPTY,
}


@dataclass(slots=True)
class CellMarker:
    state: MarkerState = MarkerState.EMPTY
