"""Clients for the system, memory, serial, UAVCAN and flight controller objects."""

from __future__ import annotations

import dataclasses
import struct
from collections.abc import Sequence
from typing import Optional

from .client_communication import (
    ClientAbstract,
    ClientEntry,
    ClientEntryAbstract,
    ClientEntryVoid,
    PackedClientEntry,
    parse_msg,
)

MAX_CONTROL_VALUES_PER_IFCI = 16


class SystemControlClient(ClientAbstract):
    """Reboot commands, identification, build information and versions.

    The bootloader version entry is addressed with the applications-present
    sub-identifier (20) when sending, while replies for it are taken from
    sub-identifier 21.
    """

    TYPE_IDN = 5

    def __init__(self, obj_idn: int) -> None:
        super().__init__(self.TYPE_IDN, obj_idn)
        t = self.TYPE_IDN
        self.reboot_program = ClientEntryVoid(t, obj_idn, 0)
        self.reboot_boot_loader = ClientEntryVoid(t, obj_idn, 1)
        self.dev_id = ClientEntry(t, obj_idn, 2, "H")
        self.rev_id = ClientEntry(t, obj_idn, 3, "H")
        self.uid1 = ClientEntry(t, obj_idn, 4, "I")
        self.uid2 = ClientEntry(t, obj_idn, 5, "I")
        self.uid3 = ClientEntry(t, obj_idn, 6, "I")
        self.mem_size = ClientEntry(t, obj_idn, 7, "H")
        self.build_year = ClientEntry(t, obj_idn, 8, "H")
        self.build_month = ClientEntry(t, obj_idn, 9, "B")
        self.build_day = ClientEntry(t, obj_idn, 10, "B")
        self.build_hour = ClientEntry(t, obj_idn, 11, "B")
        self.build_minute = ClientEntry(t, obj_idn, 12, "B")
        self.build_second = ClientEntry(t, obj_idn, 13, "B")
        self.module_id = ClientEntry(t, obj_idn, 14, "B")
        self.time = ClientEntry(t, obj_idn, 15, "f")
        self.firmware_version = ClientEntry(t, obj_idn, 16, "I")
        self.hardware_version = ClientEntry(t, obj_idn, 17, "I")
        self.electronics_version = ClientEntry(t, obj_idn, 18, "I")
        self.firmware_valid = ClientEntry(t, obj_idn, 19, "B")
        self.applications_present = ClientEntry(t, obj_idn, 20, "B")
        self.bootloader_version = ClientEntry(t, obj_idn, 20, "I")
        self.upgrade_version = ClientEntry(t, obj_idn, 22, "I")
        self.system_clock = ClientEntry(t, obj_idn, 23, "I")
        self.control_flags = ClientEntry(t, obj_idn, 24, "I")
        self.pcb_version = ClientEntry(t, obj_idn, 25, "I")

    def read_msg(self, rx_data: bytes) -> bool:
        """Hand a received message to the matching entry; True if one took it."""
        table: list[Optional[ClientEntryAbstract]] = [
            self.reboot_program,
            self.reboot_boot_loader,
            self.dev_id,
            self.rev_id,
            self.uid1,
            self.uid2,
            self.uid3,
            self.mem_size,
            self.build_year,
            self.build_month,
            self.build_day,
            self.build_hour,
            self.build_minute,
            self.build_second,
            self.module_id,
            self.time,
            self.firmware_version,
            self.hardware_version,
            self.electronics_version,
            self.firmware_valid,
            self.applications_present,
            self.bootloader_version,
            self.upgrade_version,
            self.system_clock,
            self.control_flags,
            self.pcb_version,
        ]
        return parse_msg(rx_data, table)


class PersistentMemoryClient(ClientAbstract):
    """Erasing and resetting the module's stored settings."""

    TYPE_IDN = 11

    def __init__(self, obj_idn: int) -> None:
        super().__init__(self.TYPE_IDN, obj_idn)
        t = self.TYPE_IDN
        self.erase = ClientEntryVoid(t, obj_idn, 0)
        self.revert_to_default = ClientEntryVoid(t, obj_idn, 1)
        self.format_key_1 = ClientEntry(t, obj_idn, 2, "I")
        self.format_key_2 = ClientEntry(t, obj_idn, 3, "I")


class SerialInterfaceClient(ClientAbstract):
    """Serial port settings."""

    TYPE_IDN = 16

    def __init__(self, obj_idn: int) -> None:
        super().__init__(self.TYPE_IDN, obj_idn)
        self.baud_rate = ClientEntry(self.TYPE_IDN, obj_idn, 0, "I")


class UavcanNodeClient(ClientAbstract):
    """UAVCAN node identity, bus error state and telemetry settings."""

    TYPE_IDN = 80

    def __init__(self, obj_idn: int) -> None:
        super().__init__(self.TYPE_IDN, obj_idn)
        t = self.TYPE_IDN
        self.uavcan_node_id = ClientEntry(t, obj_idn, 0, "I")
        self.uavcan_esc_index = ClientEntry(t, obj_idn, 1, "I")
        self.zero_behavior = ClientEntry(t, obj_idn, 2, "I")
        self.last_error_code = ClientEntry(t, obj_idn, 3, "B")
        self.receive_error_counter = ClientEntry(t, obj_idn, 4, "B")
        self.transmit_error_counter = ClientEntry(t, obj_idn, 5, "B")
        self.bus_off_flag = ClientEntry(t, obj_idn, 6, "B")
        self.error_passive_flag = ClientEntry(t, obj_idn, 7, "B")
        self.error_warning_flag = ClientEntry(t, obj_idn, 8, "B")
        self.telemetry_frequency = ClientEntry(t, obj_idn, 9, "I")
        self.bit_rate = ClientEntry(t, obj_idn, 10, "I")
        self.bypass_arming = ClientEntry(t, obj_idn, 11, "B")


@dataclasses.dataclass
class IFCITelemetryData:
    """Telemetry reported by a module in answer to a packed command."""

    mcu_temp: int = 0  # centi-degrees Celsius
    coil_temp: int = 0  # centi-degrees Celsius
    voltage: int = 0  # centivolts
    current: int = 0  # centiamps
    consumption: int = 0  # mAh
    speed: int = 0  # rad/s
    uptime: int = 0  # s

    FORMAT = "<hhhhhhI"


@dataclasses.dataclass
class IFCIPackedMessage:
    """Control values for several modules plus the module asked for telemetry.

    ``num_cvs`` defaults to the number of commands given.
    """

    commands: Sequence[int] = dataclasses.field(default_factory=list)
    telem_byte: int = 0
    num_cvs: Optional[int] = None


class IQUartFlightControllerInterfaceClient(ClientAbstract):
    """Flight controller interface: packed commands and telemetry."""

    TYPE_IDN = 88

    def __init__(self, obj_idn: int, data_buf: Optional[bytearray] = None) -> None:
        super().__init__(self.TYPE_IDN, obj_idn)
        t = self.TYPE_IDN
        self.packed_command = PackedClientEntry(t, obj_idn, 0, data_buf)
        self.telemetry = ClientEntry(t, obj_idn, 1, IFCITelemetryData.FORMAT, IFCITelemetryData)
        self.throttle_cvi = ClientEntry(t, obj_idn, 2, "B")
        self.x_cvi = ClientEntry(t, obj_idn, 3, "B")
        self.y_cvi = ClientEntry(t, obj_idn, 4, "B")

    def package_ifci_commands_for_transmission(self, ifci_commands: IFCIPackedMessage) -> bytes:
        """Serialise the control values and telemetry byte for a packed command."""
        commands = list(ifci_commands.commands)
        if len(commands) > MAX_CONTROL_VALUES_PER_IFCI:
            raise ValueError(f"at most {MAX_CONTROL_VALUES_PER_IFCI} control values are allowed")
        num_cvs = len(commands) if ifci_commands.num_cvs is None else ifci_commands.num_cvs
        if not 0 <= num_cvs <= MAX_CONTROL_VALUES_PER_IFCI:
            raise ValueError(f"num_cvs must be between 0 and {MAX_CONTROL_VALUES_PER_IFCI}")
        commands += [0] * (num_cvs - len(commands))
        try:
            body = struct.pack(f"<{num_cvs}H", *commands[:num_cvs])
            return body + struct.pack("<B", ifci_commands.telem_byte)
        except struct.error as exc:
            raise ValueError(f"cannot encode packed message: {exc}") from exc