from dataclasses import dataclass

@dataclass(slots=True)
class Region:
    """Region color assignment for one cell.

    Stores only the color name. RGB lookup resides in the singleton entity with
    RegionPaletteRegistry + RegionPalette.
    """
    color: str
