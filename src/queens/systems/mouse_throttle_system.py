from queens.events.bus import EVENT_MOUSE_PRESS, EVENT_MOUSE_PRESS_RAW, EventBus
from queens.utils.input_throttle import MouseThrottle


class MouseThrottleSystem:
    def __init__(self, event_bus: EventBus, *, throttle: MouseThrottle | None = None):
        self.event_bus = event_bus
        self._throttle = throttle or MouseThrottle()
        self.event_bus.subscribe(EVENT_MOUSE_PRESS_RAW, self.on_mouse_press_raw)

    def on_mouse_press_raw(self, sender, **kwargs):
        try:
            x, y = float(kwargs['x']), float(kwargs['y'])
            button = int(kwargs['button'])
        except (KeyError, TypeError, ValueError):
            return
        if self._throttle.allow(x, y, button):
            self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button,
                                press_id=self._throttle.last_sequence)
