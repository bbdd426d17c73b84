from dataclasses import dataclass

@dataclass(slots=True)
class SolutionDialog:
    """Modal result shown after a solution check; any click dismisses it."""
    solved: bool
    title: str
    message: str
