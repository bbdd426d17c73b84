"""Components used by the main menu ECS subsystem."""
from dataclasses import dataclass
from enum import Enum, auto


class MenuAction(Enum):
    """Actions that a menu button can trigger."""
    START_GAME = auto()


@dataclass
class MenuButton:
    """Interactive button displayed in the main menu."""
    label: str
    action: MenuAction
    x: float
    y: float
    width: float = 200.0
    height: float = 56.0
    enabled: bool = True


@dataclass
class MenuText:
    """A line of static text (title or rule) centred at x."""
    text: str
    x: float
    y: float
    font_size: int = 16
    bold: bool = False


@dataclass
class MenuBackground:
    """Background styling data for the menu screen."""
    color: tuple[int, int, int] = (255, 255, 255)


@dataclass
class MenuTag:
    """Marker component so menu entities can be cleaned up together."""
    pass
