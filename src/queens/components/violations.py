from dataclasses import dataclass, field
from typing import Set, Tuple

@dataclass(slots=True)
class Violations:
    """Queen positions currently breaking a row, column, region or adjacency rule.

    Lives on the board entity. Only BoardSystem rewrites it.
    """
    positions: Set[Tuple[int, int]] = field(default_factory=set)
