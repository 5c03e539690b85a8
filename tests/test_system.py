import struct

import pytest

from iqclient.client_communication import Access, CommunicationInterface
from iqclient.system import (
    IFCIPackedMessage,
    IFCITelemetryData,
    IQUartFlightControllerInterfaceClient,
    PersistentMemoryClient,
    SerialInterfaceClient,
    SystemControlClient,
    UavcanNodeClient,
)


class RecordingInterface(CommunicationInterface):
    def __init__(self):
        self.sent = []

    def send_packet(self, msg_type, data):
        self.sent.append((msg_type, bytes(data)))


def reply(type_idn, sub_idn, obj_idn, payload=b""):
    return bytes((type_idn, sub_idn, (obj_idn << 2) | Access.REPLY)) + payload


def test_serial_baud_rate_get_wire_bytes():
    com = RecordingInterface()
    SerialInterfaceClient(0).baud_rate.get(com)
    assert com.sent == [(16, bytes([0, 0]))]


def test_serial_baud_rate_set_wire_bytes():
    com = RecordingInterface()
    SerialInterfaceClient(0).baud_rate.set(com, 115200)
    assert com.sent == [(16, b"\x00\x01\x00\xc2\x01\x00")]


def test_serial_baud_rate_reply_round_trip():
    client = SerialInterfaceClient(2)
    assert client.read_msg(reply(16, 0, 2, struct.pack("<I", 921600)))
    assert client.baud_rate.is_fresh
    assert client.baud_rate.get_reply() == 921600
    assert not client.baud_rate.is_fresh


def test_persistent_memory_erase_sends_set():
    com = RecordingInterface()
    PersistentMemoryClient(1).erase.set(com)
    assert com.sent == [(11, bytes([0, (1 << 2) | Access.SET]))]


def test_persistent_memory_void_reply_marks_fresh():
    client = PersistentMemoryClient(0)
    assert client.read_msg(reply(11, 1, 0))
    assert client.revert_to_default.is_fresh
    assert not client.erase.is_fresh


def test_persistent_memory_format_key_round_trip():
    client = PersistentMemoryClient(0)
    assert client.read_msg(reply(11, 3, 0, struct.pack("<I", 12345)))
    assert client.format_key_2.get_reply() == 12345


def test_uavcan_node_wrong_object_ignored():
    client = UavcanNodeClient(3)
    assert not client.read_msg(reply(80, 0, 4, struct.pack("<I", 7)))
    assert not client.uavcan_node_id.is_fresh


def test_uavcan_node_bypass_arming_round_trip():
    client = UavcanNodeClient(3)
    assert client.read_msg(reply(80, 11, 3, bytes([1])))
    assert client.bypass_arming.get_reply() == 1


def test_uavcan_non_reply_is_ignored():
    client = UavcanNodeClient(0)
    msg = bytes((80, 10, Access.GET)) + struct.pack("<I", 1000000)
    assert not client.read_msg(msg)


def test_system_control_bootloader_sub_idn_quirk():
    client = SystemControlClient(0)
    assert client.bootloader_version.sub_idn == client.applications_present.sub_idn == 20


def test_system_control_replies_dispatch_by_position():
    client = SystemControlClient(0)
    assert client.read_msg(reply(5, 20, 0, bytes([1])))
    assert client.read_msg(reply(5, 21, 0, struct.pack("<I", 42)))
    assert client.applications_present.get_reply() == 1
    assert client.bootloader_version.get_reply() == 42


def test_system_control_out_of_range_sub_idn():
    client = SystemControlClient(0)
    assert not client.read_msg(reply(5, 26, 0, bytes([1])))


def test_system_control_wrong_length_not_fresh():
    client = SystemControlClient(0)
    assert client.read_msg(reply(5, 2, 0, bytes([1])))
    assert not client.dev_id.is_fresh


def test_system_control_time_float_round_trip():
    client = SystemControlClient(0)
    client.read_msg(reply(5, 15, 0, struct.pack("<f", 1.5)))
    assert client.time.get_reply() == 1.5


def test_telemetry_reply_decodes_dataclass():
    client = IQUartFlightControllerInterfaceClient(0)
    values = (2500, 3100, 1680, -120, 55, 900, 3600)
    assert client.read_msg(reply(88, 1, 0, struct.pack("<hhhhhhI", *values)))
    assert client.telemetry.get_reply() == IFCITelemetryData(*values)


def test_telemetry_wire_size_is_sixteen():
    assert IQUartFlightControllerInterfaceClient(0).telemetry.size == 16


def test_package_commands_example():
    client = IQUartFlightControllerInterfaceClient(0)
    msg = IFCIPackedMessage(commands=[1000, 2000], telem_byte=3, num_cvs=2)
    assert client.package_ifci_commands_for_transmission(msg) == b"\xe8\x03\xd0\x07\x03"


def test_package_commands_length_invariant():
    client = IQUartFlightControllerInterfaceClient(0)
    msg = IFCIPackedMessage(commands=[65535] * 4, telem_byte=1)
    data = client.package_ifci_commands_for_transmission(msg)
    assert len(data) == 4 * 2 + 1
    assert data[-1] == 1
    assert struct.unpack("<4H", data[:-1]) == (65535,) * 4


def test_package_commands_pads_missing_values_with_zero():
    client = IQUartFlightControllerInterfaceClient(0)
    msg = IFCIPackedMessage(commands=[5], telem_byte=2, num_cvs=3)
    data = client.package_ifci_commands_for_transmission(msg)
    assert struct.unpack("<3H", data[:-1]) == (5, 0, 0)


def test_package_commands_too_many_raises():
    client = IQUartFlightControllerInterfaceClient(0)
    with pytest.raises(ValueError):
        client.package_ifci_commands_for_transmission(IFCIPackedMessage(commands=[0] * 17))


def test_package_commands_out_of_range_value_raises():
    client = IQUartFlightControllerInterfaceClient(0)
    with pytest.raises(ValueError):
        client.package_ifci_commands_for_transmission(IFCIPackedMessage(commands=[70000]))


def test_packed_command_set_sends_packaged_bytes():
    com = RecordingInterface()
    client = IQUartFlightControllerInterfaceClient(0)
    payload = client.package_ifci_commands_for_transmission(
        IFCIPackedMessage(commands=[10, 20], telem_byte=0)
    )
    client.packed_command.set(com, payload)
    assert com.sent == [(88, bytes([0, Access.SET]) + payload)]


def test_packed_command_reply_fills_buffer():
    buf = bytearray(8)
    client = IQUartFlightControllerInterfaceClient(1, buf)
    assert client.read_msg(reply(88, 0, 1, b"\x01\x02\x03"))
    assert client.packed_command.is_fresh
    assert client.packed_command.get_reply(3) == b"\x01\x02\x03"
    assert buf[:3] == b"\x01\x02\x03"


def test_packed_command_reply_without_buffer():
    client = IQUartFlightControllerInterfaceClient(1)
    client.read_msg(reply(88, 0, 1, b"\x01"))
    assert not client.packed_command.is_fresh
    assert client.packed_command.get_reply(1) is None


def test_cvi_entries_round_trip():
    client = IQUartFlightControllerInterfaceClient(0)
    client.read_msg(reply(88, 3, 0, bytes([7])))
    client.read_msg(reply(88, 4, 0, bytes([9])))
    assert client.x_cvi.get_reply() == 7
    assert client.y_cvi.get_reply() == 9