from queens.events.bus import EVENT_MOUSE_PRESS, EVENT_MOUSE_PRESS_RAW, EventBus
from queens.systems.mouse_throttle_system import MouseThrottleSystem
from queens.utils.input_throttle import MouseThrottle
from tests.helpers import capture


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def _system():
    clock = FakeClock()
    bus = EventBus()
    MouseThrottleSystem(bus, throttle=MouseThrottle(clock=clock))
    return bus, clock, capture(bus, EVENT_MOUSE_PRESS)


def test_raw_press_is_forwarded_with_press_id():
    bus, _, presses = _system()
    bus.emit(EVENT_MOUSE_PRESS_RAW, x=10, y=20, button=1, modifiers=0)
    assert presses == [{'x': 10.0, 'y': 20.0, 'button': 1, 'press_id': 1}]


def test_bounced_press_is_dropped():
    bus, clock, presses = _system()
    bus.emit(EVENT_MOUSE_PRESS_RAW, x=10, y=20, button=1)
    clock.now = 0.01
    bus.emit(EVENT_MOUSE_PRESS_RAW, x=11, y=20, button=1)
    assert len(presses) == 1


def test_deliberate_repeat_clicks_pass():
    bus, clock, presses = _system()
    for step in range(3):
        clock.now = step * 0.25
        bus.emit(EVENT_MOUSE_PRESS_RAW, x=10, y=20, button=1)
    assert [p['press_id'] for p in presses] == [1, 2, 3]


def test_malformed_press_is_dropped():
    bus, _, presses = _system()
    bus.emit(EVENT_MOUSE_PRESS_RAW, x="left", y=20, button=1)
    bus.emit(EVENT_MOUSE_PRESS_RAW, y=20, button=1)
    assert not presses
