from dataclasses import dataclass, field
from typing import Dict, List, Tuple

@dataclass(slots=True)
class RegionPaletteRegistry:
    """Empty tag component marking the single entity that stores the region palette.

    The same entity also carries a RegionPalette component with the name -> color mapping.
    """
    pass


@dataclass(slots=True)
class RegionPalette:
    """Region color definitions stored on a single entity.

    ``order`` is the palette order used by generation; it always lists each
    defined color exactly once.
    """
    colors: Dict[str, Tuple[int, int, int]]
    order: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        seen: set[str] = set()
        filtered: List[str] = []
        for name in self.order:
            if name in self.colors and name not in seen:
                filtered.append(name)
                seen.add(name)
        for name in self.colors:
            if name not in seen:
                filtered.append(name)
                seen.add(name)
        self.order = filtered

    def rgb_for(self, name: str) -> Tuple[int, int, int]:
        try:
            return self.colors[name]
        except KeyError as exc:
            raise KeyError(f"Region color '{name}' is not in the palette") from exc

    def names(self) -> List[str]:
        return list(self.order)
