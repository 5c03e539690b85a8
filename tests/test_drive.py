import pytest

from iqclient.client_communication import Access, CommunicationInterface, parse_msg_entry
from iqclient.drive import (
    AnticoggingClient,
    AnticoggingProClient,
    BrushlessDriveClient,
    BuzzerControlClient,
)


class RecordingInterface(CommunicationInterface):
    def __init__(self):
        self.packets = []

    def send_packet(self, msg_type, data):
        self.packets.append((msg_type, bytes(data)))


def reply_message(type_idn, sub_idn, obj_idn, payload=b""):
    return bytes([type_idn, sub_idn, (obj_idn << 2) | Access.REPLY]) + payload


VALUE_CASES = [
    (BrushlessDriveClient, 50, "drive_mode", 0, 3),
    (BrushlessDriveClient, 50, "motor_pole_pairs", 14, 7),
    (BrushlessDriveClient, 50, "commutation_hz", 19, 20000),
    (BrushlessDriveClient, 50, "v_max_start", 29, 1.5),
    (BrushlessDriveClient, 50, "motor_kv", 32, 750.0),
    (BrushlessDriveClient, 50, "derate", 41, -12345),
    (BrushlessDriveClient, 50, "motoring_limit_max", 60, 2.25),
    (AnticoggingClient, 71, "table_size", 0, 1024),
    (AnticoggingClient, 71, "left_shift", 4, 2),
    (AnticoggingProClient, 79, "tau", 1, 0.5),
    (AnticoggingProClient, 79, "max_harmonics", 10, 16),
    (BuzzerControlClient, 61, "volume_max", 4, 4.0),
    (BuzzerControlClient, 61, "hz", 5, 440),
    (BuzzerControlClient, 61, "duration", 7, 500),
]


@pytest.mark.parametrize("cls, type_idn, attr, sub_idn, value", VALUE_CASES)
def test_set_then_reply_round_trip(cls, type_idn, attr, sub_idn, value):
    com = RecordingInterface()
    sender = cls(3)
    getattr(sender, attr).set(com, value)
    msg_type, data = com.packets[0]
    assert msg_type == type_idn
    assert data[:2] == bytes([sub_idn, (3 << 2) | Access.SET])

    message = reply_message(type_idn, sub_idn, 3, data[2:])
    receiver = cls(3)
    assert receiver.read_msg(message) is True
    entry = getattr(receiver, attr)
    assert entry.is_fresh
    assert entry.get_reply() == value
    assert not entry.is_fresh

    single = getattr(cls(3), attr)
    assert parse_msg_entry(message, single)
    assert single.get_reply() == value


@pytest.mark.parametrize("sub_idn", [28, 30, 31, 61])
def test_brushless_unused_sub_ids_are_not_parsed(sub_idn):
    client = BrushlessDriveClient(0)
    assert client.read_msg(reply_message(50, sub_idn, 0, b"\x00\x00\x00\x00")) is False


def test_void_entry_reply_marks_fresh():
    client = AnticoggingClient(1)
    assert client.read_msg(reply_message(71, 3, 1)) is True
    assert client.erase.is_fresh


def test_void_entry_set_wire_bytes():
    com = RecordingInterface()
    AnticoggingClient(2).erase.set(com)
    assert com.packets == [(71, bytes([3, (2 << 2) | Access.SET]))]


def test_buzzer_note_get_wire_bytes():
    com = RecordingInterface()
    BuzzerControlClient(0).ctrl_note.get(com)
    assert com.packets == [(61, bytes([3, Access.GET]))]


def test_reply_for_other_object_is_ignored():
    client = BuzzerControlClient(1)
    assert client.read_msg(reply_message(61, 5, 2, b"\x01\x00")) is False
    assert not client.hz.is_fresh


def test_reply_for_other_type_is_ignored():
    client = AnticoggingProClient(0)
    assert client.read_msg(reply_message(71, 1, 0, b"\x00\x00\x00\x00")) is False
    assert not client.tau.is_fresh


def test_non_reply_access_is_ignored():
    client = BuzzerControlClient(0)
    msg = bytes([61, 6, Access.SET, 9])
    assert client.read_msg(msg) is False
    assert not client.volume.is_fresh


def test_wrong_length_payload_leaves_value_stale():
    client = BrushlessDriveClient(0)
    assert client.read_msg(reply_message(50, 19, 0, b"\x01\x02")) is True
    assert not client.commutation_hz.is_fresh
    assert client.commutation_hz.get_reply() == 0


@pytest.mark.parametrize(
    "cls, attr, value",
    [
        (BuzzerControlClient, "hz", 70000),
        (BuzzerControlClient, "volume", 256),
        (AnticoggingClient, "is_enabled", -1),
    ],
)
def test_out_of_range_value_raises(cls, attr, value):
    com = RecordingInterface()
    with pytest.raises(ValueError):
        getattr(cls(0), attr).set(com, value)
    assert com.packets == []


def test_save_sends_header_only():
    com = RecordingInterface()
    BrushlessDriveClient(5).motor_kv.save(com)
    assert com.packets == [(50, bytes([32, (5 << 2) | Access.SAVE]))]