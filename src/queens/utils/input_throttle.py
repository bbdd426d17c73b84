from __future__ import annotations

from dataclasses import dataclass, field
from time import monotonic
from typing import Callable, Dict, Tuple


@dataclass(slots=True)
class MouseThrottle:
	"""Drops duplicate presses and numbers the ones that get through.

	A press is a duplicate when the same button fires again within
	``min_interval`` seconds and ``min_distance`` pixels of the previous one
	(switch bounce, double delivery). Quick deliberate clicks on one cell are
	slower than that and pass.
	"""

	min_interval: float = 0.05
	min_distance: float = 4.0
	clock: Callable[[], float] | None = field(default=None, repr=False)

	_clock: Callable[[], float] = field(init=False, repr=False)
	_last_press: Dict[int, Tuple[float, float, float]] = field(init=False, repr=False)
	_min_distance_sq: float = field(init=False, repr=False)
	_sequence: int = field(init=False, default=0, repr=False)
	_last_sequence: int | None = field(init=False, default=None, repr=False)

	def __post_init__(self) -> None:
		self._clock = self.clock or monotonic
		self._last_press = {}
		dist = max(0.0, float(self.min_distance))
		self._min_distance_sq = dist * dist
		self.min_interval = max(0.0, float(self.min_interval))

	@property
	def last_sequence(self) -> int | None:
		return self._last_sequence

	def allow(self, x: float, y: float, button: int) -> bool:
		now = self._clock()
		last = self._last_press.get(button)
		if last is not None and self.min_interval > 0.0:
			last_time, last_x, last_y = last
			if (now - last_time) < self.min_interval:
				dx = x - last_x
				dy = y - last_y
				if (dx * dx + dy * dy) <= self._min_distance_sq:
					return False

		self._last_press[button] = (now, x, y)
		self._sequence += 1
		self._last_sequence = self._sequence
		return True
