"""Client-side entries that address values on a remote module.

Every message exchanged with a module starts with a small header: the
module type, the sub-identifier of the value, and one byte that carries the
object identifier in its high six bits and the access kind in its low two.
"""

from __future__ import annotations

import abc
import dataclasses
import enum
import struct
from collections.abc import Sequence
from typing import Any, Callable, Optional


class Access(enum.IntEnum):
    """Access kind carried in the low two bits of the header byte."""

    GET = 0
    SET = 1
    SAVE = 2
    REPLY = 3


class CommunicationInterface(abc.ABC):
    """Transport that wraps payloads into packets and sends them."""

    @abc.abstractmethod
    def send_packet(self, msg_type: int, data: bytes) -> None:
        """Queue a packet of the given type carrying ``data``."""


class ClientEntryAbstract(abc.ABC):
    """One addressable value on a remote module."""

    def __init__(self, type_idn: int, obj_idn: int, sub_idn: int) -> None:
        self.type_idn = type_idn
        self.obj_idn = obj_idn
        self.sub_idn = sub_idn
        self._fresh = False

    @property
    def is_fresh(self) -> bool:
        """True when a reply has arrived that has not been consumed yet."""
        return self._fresh

    def _send(self, com: CommunicationInterface, access: Access, payload: bytes = b"") -> None:
        header = bytes((self.sub_idn & 0xFF, ((self.obj_idn << 2) | access) & 0xFF))
        com.send_packet(self.type_idn, header + bytes(payload))

    @abc.abstractmethod
    def reply(self, data: bytes) -> None:
        """Take in the payload of a reply addressed to this entry."""


class ClientEntryVoid(ClientEntryAbstract):
    """An entry that carries no value: a command or an acknowledgement."""

    def get(self, com: CommunicationInterface) -> None:
        """Send a get request."""
        self._send(com, Access.GET)

    def set(self, com: CommunicationInterface) -> None:
        """Send a set request, which triggers the command."""
        self._send(com, Access.SET)

    def save(self, com: CommunicationInterface) -> None:
        """Send a save request."""
        self._send(com, Access.SAVE)

    def reply(self, data: bytes) -> None:
        """Mark the entry fresh when an empty reply arrives."""
        if len(data) == 0:
            self._fresh = True


class ClientEntry(ClientEntryAbstract):
    """An entry holding a fixed-size little-endian value.

    ``fmt`` is a :mod:`struct` format; a byte order prefix is added when it
    has none. A format with several fields yields a tuple, or an instance of
    ``value_type`` built from the fields when one is given.
    """

    def __init__(
        self,
        type_idn: int,
        obj_idn: int,
        sub_idn: int,
        fmt: str,
        value_type: Optional[Callable[..., Any]] = None,
    ) -> None:
        super().__init__(type_idn, obj_idn, sub_idn)
        if not (fmt and fmt[0] in "<>!=@"):
            fmt = "<" + fmt
        self._codec = struct.Struct(fmt)
        self._value_type = value_type
        self._value = self._decode(bytes(self._codec.size))

    @property
    def size(self) -> int:
        """Number of bytes the value occupies on the wire."""
        return self._codec.size

    def _decode(self, data: bytes) -> Any:
        fields = self._codec.unpack(data)
        if self._value_type is not None:
            return self._value_type(*fields)
        return fields[0] if len(fields) == 1 else fields

    def _encode(self, value: Any) -> bytes:
        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            fields = dataclasses.astuple(value)
        elif isinstance(value, (tuple, list)):
            fields = tuple(value)
        else:
            fields = (value,)
        try:
            return self._codec.pack(*fields)
        except struct.error as exc:
            raise ValueError(f"cannot encode {value!r} as {self._codec.format!r}: {exc}") from exc

    def get(self, com: CommunicationInterface) -> None:
        """Send a get request."""
        self._send(com, Access.GET)

    def set(self, com: CommunicationInterface, value: Any) -> None:
        """Send a set request carrying ``value``."""
        self._send(com, Access.SET, self._encode(value))

    def save(self, com: CommunicationInterface) -> None:
        """Send a save request."""
        self._send(com, Access.SAVE)

    def reply(self, data: bytes) -> None:
        """Store the value when the payload has exactly the expected size."""
        if len(data) == self._codec.size:
            self._value = self._decode(bytes(data))
            self._fresh = True

    def get_reply(self) -> Any:
        """Return the last value received and mark it consumed."""
        self._fresh = False
        return self._value


class PackedClientEntry(ClientEntryAbstract):
    """An entry carrying a variable-length block of bytes.

    Replies are copied into ``buffer``; without a buffer they are ignored.
    """

    def __init__(
        self, type_idn: int, obj_idn: int, sub_idn: int, buffer: Optional[bytearray] = None
    ) -> None:
        super().__init__(type_idn, obj_idn, sub_idn)
        self.buffer = buffer

    def get(self, com: CommunicationInterface) -> None:
        """Send a get request."""
        self._send(com, Access.GET)

    def set(self, com: CommunicationInterface, data: bytes) -> None:
        """Send a set request carrying the given bytes."""
        if len(data) > 0xFF:
            raise ValueError("packed data must not exceed 255 bytes")
        self._send(com, Access.SET, bytes(data))

    def reply(self, data: bytes) -> None:
        """Copy the payload into the buffer, if there is one."""
        if self.buffer is not None:
            self.buffer[: len(data)] = data
            self._fresh = True

    def get_reply(self, length: int) -> Optional[bytes]:
        """Return the first ``length`` buffered bytes, or None without a buffer."""
        if self.buffer is None:
            return None
        self._fresh = False
        return bytes(self.buffer[:length])


class ClientAbstract:
    """A remote object made of entries, dispatching replies to them.

    Entries assigned as attributes are indexed by their sub-identifier.
    """

    def __init__(self, type_idn: int, obj_idn: int) -> None:
        self.type_idn = type_idn
        self.obj_idn = obj_idn

    def _entry_table(self) -> list[Optional[ClientEntryAbstract]]:
        entries = [v for v in vars(self).values() if isinstance(v, ClientEntryAbstract)]
        if not entries:
            return []
        table: list[Optional[ClientEntryAbstract]] = [None] * (max(e.sub_idn for e in entries) + 1)
        for entry in entries:
            table[entry.sub_idn] = entry
        return table

    def read_msg(self, rx_data: bytes) -> bool:
        """Hand a received message to the matching entry; True if one took it."""
        return parse_msg(rx_data, self._entry_table())


def _split_header(rx_data: bytes) -> tuple[int, int, int, int, bytes]:
    data = bytes(rx_data)
    if len(data) < 3:
        raise ValueError("message is shorter than its 3-byte header")
    return data[0], data[1], data[2] >> 2, data[2] & 0b11, data[3:]


def parse_msg(rx_data: bytes, entries: Sequence[Optional[ClientEntryAbstract]]) -> bool:
    """Deliver a reply to the entry found at its sub-identifier in ``entries``."""
    type_idn, sub_idn, obj_idn, access, payload = _split_header(rx_data)
    if access != Access.REPLY or sub_idn >= len(entries):
        return False
    entry = entries[sub_idn]
    if entry is None or entry.type_idn != type_idn or entry.obj_idn != obj_idn:
        return False
    entry.reply(payload)
    return True


def parse_msg_entry(rx_data: bytes, entry: ClientEntryAbstract) -> bool:
    """Deliver a reply to ``entry`` if the message addresses it exactly."""
    type_idn, sub_idn, obj_idn, access, payload = _split_header(rx_data)
    if access != Access.REPLY:
        return False
    if entry.type_idn != type_idn or entry.obj_idn != obj_idn or entry.sub_idn != sub_idn:
        return False
    entry.reply(payload)
    return True