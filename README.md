# iqclient

Client objects for talking to motor modules over the IQUART protocol.
Every module exposes a set of *entries*. Each entry is addressed by a type,
an object id and a sub-id. The package has one client class per module type,
with one attribute per entry. Each entry builds the outgoing message for a
get, set or save request and decodes the replies addressed to it.

The package has no dependencies outside the standard library.

## Installation

```
pip install iqclient
```

To run the tests:

```
pip install "iqclient[test]"
pytest
```

## Message layout

Each message starts with a three-byte header:

1. the module type,
2. the sub-id of the entry,
3. the object id in the high six bits and the access kind in the low two bits.

Any payload follows the header. Values are encoded little-endian.

When an entry sends a request, it calls
`com.send_packet(type_idn, data)`. Here `data` is the sub-id byte, the
object/access byte and the payload. The type byte is passed separately, as
`msg_type`.

## Building blocks: `iqclient.client_communication`

- **`Access`** is an `IntEnum` of the access kinds: `GET`, `SET`, `SAVE` and
  `REPLY`.
- **`CommunicationInterface`** is the abstract transport. Subclass it and
  implement `send_packet(msg_type, data)`.
- **`ClientEntry(type_idn, obj_idn, sub_idn, fmt, value_type=None)`** holds a
  fixed-size value described by a `struct` format. If the format has no
  byte-order prefix, `<` is added.
  - Methods: `get(com)`, `set(com, value)`, `save(com)`, `reply(data)` and
    `get_reply()`.
  - `size` is the number of payload bytes.
  - A reply is accepted only when its payload has exactly `size` bytes.
  - `set` raises `ValueError` when the value cannot be encoded.
  - A format with several fields decodes to a tuple, or to `value_type(*fields)`
    when `value_type` is given.
- **`ClientEntryVoid`** is a command with no payload. It has `get(com)`,
  `set(com)` and `save(com)`. It becomes fresh when an empty reply arrives.
- **`PackedClientEntry(type_idn, obj_idn, sub_idn, buffer=None)`** carries raw
  bytes.
  - `set(com, data)` sends at most 255 bytes. Longer data raises `ValueError`.
  - Replies are copied into `buffer`. Without a buffer, replies are ignored.
  - `get_reply(length)` returns the first `length` buffered bytes, or `None`
    when there is no buffer.
- **`is_fresh`** is available on every entry. It is `True` when a reply has
  arrived that has not been read yet. `get_reply()` clears it.
- **`ClientAbstract`** is the base of every module client.
  `read_msg(rx_data)` hands a received message to the entry attribute whose
  sub-id matches. It returns `True` when an entry took the message.
- **`parse_msg(rx_data, entries)`** delivers a reply to the entry found at the
  message's sub-id in a sequence. `None` marks an empty slot.
- **`parse_msg_entry(rx_data, entry)`** delivers a reply to one entry, if the
  message addresses that entry exactly.

The parsing functions work as follows:

- Only messages whose access kind is `REPLY` are delivered.
- Type and object id must match the entry.
- A message shorter than its three-byte header raises `ValueError`.

## Client classes

| Module | Clients |
|---|---|
| `iqclient.drive` | `BrushlessDriveClient`, `AnticoggingClient`, `AnticoggingProClient`, `BuzzerControlClient` |
| `iqclient.motion` | `MultiTurnAngleControlClient`, `PropellerMotorControlClient`, `VoltageSuperPositionClient`, `StepDirectionInputClient`, `ServoInputParserClient` |
| `iqclient.inputs` | `EscPropellerInputParserClient`, `HobbyInputClient`, `PulsingRectangularInputParserClient`, `ArmingHandlerClient`, `StoppingHandlerClient`, `StowUserInterfaceClient` |
| `iqclient.peripherals` | `GpioControllerClient`, `AdcInterfaceClient`, `PwmInterfaceClient` |
| `iqclient.sensors` | `CoilTemperatureEstimatorClient`, `TemperatureEstimatorClient`, `TemperatureMonitorUcClient`, `PowerMonitorClient`, `PowerSafetyClient`, `MagAlphaClient` |
| `iqclient.system` | `SystemControlClient`, `PersistentMemoryClient`, `SerialInterfaceClient`, `UavcanNodeClient`, `IQUartFlightControllerInterfaceClient` |
| `iqclient.lights` | `RgbLedClient`, `WhiteLedClient` |

Each client takes the object id and carries its module type as `TYPE_IDN`.

`SystemControlClient.bootloader_version` sends its requests with sub-id 20,
the same sub-id as `applications_present`. Its `read_msg` takes
`bootloader_version` replies from sub-id 21.

## Example

```python
from iqclient.client_communication import CommunicationInterface
from iqclient.motion import PropellerMotorControlClient


class RecordingInterface(CommunicationInterface):
    def __init__(self):
        self.sent = []

    def send_packet(self, msg_type, data):
        self.sent.append((msg_type, bytes(data)))


com = RecordingInterface()
prop = PropellerMotorControlClient(0)

prop.ctrl_velocity.set(com, 100.0)   # sub-id 5, SET, float payload
prop.ctrl_velocity.get(com)

# A reply holds: type, sub-id, (obj_id << 2) | Access.REPLY, payload
prop.read_msg(bytes([52, 5, 3]) + (100.0).hex().encode()[:0] + b"\x00\x00\xc8\x42")
if prop.ctrl_velocity.is_fresh:
    velocity = prop.ctrl_velocity.get_reply()   # 100.0
```

## Flight controller interface

`iqclient.system` also has the following:

- **`IFCIPackedMessage(commands, telem_byte, num_cvs=None)`** holds up to
  `MAX_CONTROL_VALUES_PER_IFCI` (16) control values. `num_cvs` defaults to
  the number of commands.
- **`IQUartFlightControllerInterfaceClient.package_ifci_commands_for_transmission(msg)`**
  returns `num_cvs` little-endian unsigned 16-bit values followed by the
  telemetry byte. Missing values are padded with zeros. Out-of-range input
  raises `ValueError`. The result is meant to be sent with
  `packed_command.set(com, data)`.
- **`IFCITelemetryData`** is what replies on the `telemetry` entry decode
  into.

## Bip buffer

`iqclient.bipbuffer.BipBuffer(buffer)` is a circular byte buffer that always
hands out contiguous blocks. Create it from a `bytearray` or a size.

To add data:

1. `reserve(size)` returns a writable view, or `None` when there is no space.
2. Write into the view.
3. Call `commit(size)` or `commit_partial(size)`.

To take data, call `get_contiguous_block()` and then `decommit_block(size)`.

`write(data)` copies in as much as fits and returns the number of bytes
written.

Other members: `clear()`, `committed_size`, `reservation_size`, `buffer_size`
and `is_initialized`.

## What this package does not do

It builds and reads message bodies only. It does not:

- add the start byte, length and CRC that frame a packet on the wire,
- find packets in a received byte stream,
- open serial ports or any other transport.

Your `CommunicationInterface.send_packet` implementation must do the framing
and sending. `read_msg` expects an unframed message: type, sub-id,
object/access byte, then payload.