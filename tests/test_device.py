import pytest

from oledgfx.canvas import Canvas
from oledgfx.device import BitBangBus, Display


class Wires:
    def __init__(self):
        self.events = []

    def scl(self, value):
        self.events.append(("scl", value))

    def sda(self, value):
        self.events.append(("sda", value))

    def line(self, name):
        return [value for line, value in self.events if line == name]


class RecordingBus:
    def __init__(self):
        self.transactions = []

    def transmit(self, payload):
        self.transactions.append(bytes(payload))

    def commands(self):
        return [t[2] for t in self.transactions if t[1] == 0x00]

    def data(self):
        return [t[2:] for t in self.transactions if t[1] == 0x40]


def _bus():
    wires = Wires()
    bus = BitBangBus(wires.scl, wires.sda)
    return wires, bus


def test_bus_releases_lines_on_creation():
    wires, _ = _bus()
    assert wires.events == [("scl", 1), ("sda", 1)]


def test_start_condition():
    wires, bus = _bus()
    wires.events.clear()
    bus.start()
    assert wires.events == [("sda", 1), ("scl", 1), ("sda", 0), ("scl", 0)]


def test_stop_condition():
    wires, bus = _bus()
    wires.events.clear()
    bus.stop()
    assert wires.events == [("sda", 0), ("scl", 1), ("sda", 1)]


def test_send_byte_msb_first_with_ack_clock():
    wires, bus = _bus()
    wires.events.clear()
    bus.send_byte(0xA5)
    assert wires.line("sda") == [1, 0, 1, 0, 0, 1, 0, 1]
    assert wires.line("scl") == [1, 0] * 9


def test_send_byte_rejects_out_of_range():
    _, bus = _bus()
    with pytest.raises(ValueError):
        bus.send_byte(256)


def test_transmit_is_start_bytes_stop():
    wires, bus = _bus()
    wires.events.clear()
    bus.transmit([0x78, 0x00, 0xAF])
    expected_wires, expected_bus = _bus()
    expected_wires.events.clear()
    expected_bus.start()
    for byte in (0x78, 0x00, 0xAF):
        expected_bus.send_byte(byte)
    expected_bus.stop()
    assert wires.events == expected_wires.events


def test_write_command_frame():
    bus = RecordingBus()
    Display(Canvas(), bus).write_command(0xAF)
    assert bus.transactions == [bytes([0x78, 0x00, 0xAF])]


def test_write_data_frame():
    bus = RecordingBus()
    Display(Canvas(), bus).write_data([1, 2, 3])
    assert bus.transactions == [bytes([0x78, 0x40, 1, 2, 3])]


def test_set_cursor_commands():
    bus = RecordingBus()
    Display(Canvas(), bus).set_cursor(3, 0x5A)
    assert bus.commands() == [0xB3, 0x15, 0x0A]


def test_init_configures_and_clears():
    canvas = Canvas()
    canvas.draw_point(10, 10)
    bus = RecordingBus()
    Display(canvas, bus).init()
    commands = bus.commands()
    assert commands[0] == 0xAE
    on = commands.index(0xAF)
    assert commands[on + 1:on + 4] == [0xB0, 0x10, 0x00]
    assert canvas.get_point(10, 10) is False
    assert bus.data() == [bytes(128)] * 8


def test_update_sends_every_page():
    canvas = Canvas()
    canvas.draw_point(5, 10)
    bus = RecordingBus()
    Display(canvas, bus).update()
    assert bus.data() == [canvas.page(i) for i in range(8)]
    assert bus.commands()[3:6] == [0xB1, 0x10, 0x00]


def test_update_area_sends_touched_pages_only():
    canvas = Canvas()
    canvas.draw_rectangle = None
    canvas.draw_point(12, 9)
    bus = RecordingBus()
    Display(canvas, bus).update_area(10, 8, 4, 1)
    assert bus.data() == [canvas.page(1)[10:14]]
    assert bus.commands() == [0xB1, 0x10, 0x0A]


def test_update_area_spanning_two_pages():
    canvas = Canvas()
    bus = RecordingBus()
    Display(canvas, bus).update_area(0, 0, 16, 16)
    assert bus.data() == [canvas.page(0)[:16], canvas.page(1)[:16]]


def test_update_area_off_screen_sends_nothing():
    bus = RecordingBus()
    display = Display(Canvas(), bus)
    display.update_area(200, 0, 8, 8)
    display.update_area(0, 100, 8, 8)
    assert bus.transactions == []