import pytest

from iqclient.client_communication import Access, CommunicationInterface
from iqclient.lights import RgbLedClient, WhiteLedClient


class RecordingInterface(CommunicationInterface):
    def __init__(self):
        self.packets = []

    def send_packet(self, msg_type, data):
        self.packets.append((msg_type, bytes(data)))


def reply_msg(type_idn, sub_idn, obj_idn, payload=b""):
    return bytes([type_idn, sub_idn, (obj_idn << 2) | Access.REPLY]) + payload


def test_type_identifiers():
    assert RgbLedClient(0).type_idn == 100
    assert WhiteLedClient(0).type_idn == 101


def test_rgb_sub_identifiers():
    led = RgbLedClient(0)
    subs = [
        led.red.sub_idn,
        led.green.sub_idn,
        led.blue.sub_idn,
        led.update_color.sub_idn,
        led.strobe_active.sub_idn,
        led.strobe_period.sub_idn,
        led.strobe_pattern.sub_idn,
    ]
    assert subs == list(range(7))


def test_white_sub_identifiers():
    led = WhiteLedClient(0)
    subs = [
        led.intensity.sub_idn,
        led.strobe_active.sub_idn,
        led.strobe_period.sub_idn,
        led.strobe_pattern.sub_idn,
    ]
    assert subs == list(range(4))


def test_rgb_set_red_packet():
    com = RecordingInterface()
    led = RgbLedClient(3)
    led.red.set(com, 255)
    assert com.packets == [(100, bytes([0, (3 << 2) | Access.SET, 255]))]


def test_rgb_update_color_command():
    com = RecordingInterface()
    RgbLedClient(1).update_color.set(com)
    assert com.packets == [(100, bytes([3, (1 << 2) | Access.SET]))]


def test_rgb_read_msg_updates_entry():
    led = RgbLedClient(3)
    assert led.read_msg(reply_msg(100, 0, 3, b"\xc8"))
    assert led.red.get_reply() == 200
    assert not led.green.is_fresh


def test_rgb_strobe_period_round_trip():
    com = RecordingInterface()
    led = RgbLedClient(2)
    led.strobe_period.set(com, 0.5)
    sent = com.packets[0][1]
    assert led.read_msg(reply_msg(100, sent[0], 2, sent[2:]))
    assert led.strobe_period.get_reply() == 0.5


def test_rgb_strobe_pattern_round_trip():
    com = RecordingInterface()
    led = RgbLedClient(0)
    led.strobe_pattern.set(com, 0xF0F0F0F0)
    sent = com.packets[0][1]
    assert led.read_msg(reply_msg(100, 6, 0, sent[2:]))
    assert led.strobe_pattern.get_reply() == 0xF0F0F0F0


@pytest.mark.parametrize(
    "message",
    [
        reply_msg(100, 0, 4, b"\x01"),
        reply_msg(101, 0, 3, b"\x01"),
        reply_msg(100, 7, 3, b"\x01"),
        bytes([100, 0, (3 << 2) | Access.GET, 1]),
    ],
)
def test_rgb_ignores_other_messages(message):
    led = RgbLedClient(3)
    assert not led.read_msg(message)
    assert not led.red.is_fresh


def test_white_intensity_reply():
    led = WhiteLedClient(5)
    assert led.read_msg(reply_msg(101, 0, 5, b"\x40"))
    assert led.intensity.get_reply() == 64


def test_white_strobe_active_set_packet():
    com = RecordingInterface()
    WhiteLedClient(5).strobe_active.set(com, 1)
    assert com.packets == [(101, bytes([1, (5 << 2) | Access.SET, 1]))]


def test_white_rejects_wrong_size_reply():
    led = WhiteLedClient(0)
    assert led.read_msg(reply_msg(101, 3, 0, b"\x01\x02"))
    assert not led.strobe_pattern.is_fresh