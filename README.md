# dmrgw

Building blocks for a DMR gateway that sits beside an MMDVM host: error
correction codes, the slot type field, the 55-byte `DMRD` packet, the UDP link
to the MMDVM host, simple routing rules, an XLX reflector list, a UDP remote
control and a logger. It has no dependencies outside the standard library.

## What is inside

- **Forward error correction**
  - `dmrgw.golay2087`: Golay (20,8,7). `encode(data)` returns a three-byte
    codeword for `data[0]`; `decode(data)` corrects a codeword and returns the
    information byte.
  - `dmrgw.golay_tables`: `syndrome_1987(pattern)` and
    `error_pattern(syndrome)`, the syndrome and table lookup behind the
    Golay decoder.
  - `dmrgw.qr1676`: quadratic residue (16,7,6). `encode(data)` returns the
    two-byte codeword for the seven bits at the top of `data[0]`;
    `decode(data)` returns the corrected first byte.
  - `dmrgw.rs129`: Reed-Solomon (12,9). `encode(msg)` returns three parity
    bytes, lowest order first; `check(data)` tells whether twelve bytes form a
    valid codeword.
- **Slot type**: `dmrgw.slot_type.SlotType` is a dataclass with
  `color_code` and `data_type`. `SlotType.from_frame(frame)` reads and
  corrects the field from a burst; `write(frame)` returns a copy of the burst
  with the field encoded into it.
- **DMRD packets**: `dmrgw.packet` has the `DMRFrame` dataclass, the `Flco`
  and `FrameKind` enums, and `encode_frame(frame, repeater_id)` /
  `decode_frame(packet)`. `decode_frame` raises `ValueError` for anything
  that is not a complete `DMRD` packet.
- **MMDVM host link**: `dmrgw.mmdvm_network.MMDVMNetwork` opens a
  non-blocking UDP socket to the MMDVM host. Call `clock(ms)` regularly: it
  receives at most one packet, queues `DMRD` bursts for `read()`, keeps the
  last radio position (`read_radio_position()`) and talker alias
  (`read_talker_alias()`), and answers config packets with `DMRP`. The
  announced id and configuration are on `repeater_id` and `config`.
  `write(frame)` sends a burst and `write_beacon()` asks for a beacon.
- **Routing rules**: `dmrgw.rules.PassAllPC` and `dmrgw.rules.PassAllTG`
  match every private call, or every group call, on one slot. `process()`
  returns a `ProcessResult`.
- **Reflector list**: `dmrgw.reflectors.Reflectors` loads `Reflector`
  entries from a hosts file of `id;address;startup` lines, skipping lines
  that start with `#`. `find(id)` looks one up, and `clock(ms)` reloads the
  file every `reload_time` minutes when that is above zero. The object is
  iterable and has a length.
- **Remote control**: `dmrgw.remote_control.RemoteControl` listens on a UDP
  port for `enable <target>`, `disable <target>` (targets `net1` to `net8`
  and `xlx`), `status` and `hosts`. It replies `OK`, `KO`, or for `status`
  and `hosts` the text from the host object's
  `build_network_status_string()` / `build_network_hosts_string()`.
  `parse_command(text, host)` does the parsing without a socket.
- **Logging**: `dmrgw.log.Logger` writes lines such as
  `M: 2024-01-31 12:00:00.000 text` to standard output and to a log file,
  one per UTC day when `rotate` is true. A `Level.FATAL` line closes the log
  and raises `SystemExit(1)`. `format_line()` builds a single line. The other
  modules report through the standard `logging` module.

## Examples

Encode and read back a slot type:

```python
from dmrgw.slot_type import SlotType

burst = SlotType(color_code=3, data_type=1).write(bytes(33))
assert SlotType.from_frame(burst) == SlotType(color_code=3, data_type=1)
```

Build and parse a `DMRD` packet:

```python
from dmrgw.packet import DMRFrame, Flco, decode_frame, encode_frame

frame = DMRFrame(slot_no=2, src_id=1234567, dst_id=91, flco=Flco.GROUP)
packet = encode_frame(frame, repeater_id=123456789)
assert len(packet) == 55
assert decode_frame(packet).dst_id == 91
```

Parse a remote command:

```python
from dmrgw.remote_control import RemoteCommand, parse_command

command, args, reply = parse_command("enable net2", None)
assert command is RemoteCommand.ENABLE_NETWORK2 and reply == "OK"
```

## What it does not do

- It does not connect to a homebrew master: there is no login,
  authorisation, configuration or keep-alive with a master network.
- It has no Hamming codes, so it cannot encode or check the fields that
  use them.
- The only routing rules are the pass-all ones; no rule rewrites slots,
  talk groups or ids.
- There is no gateway program or command that ties the parts together and
  runs a main loop; you drive `clock(ms)` and move bursts between the parts
  yourself.

## Running the tests

```
pip install .[test]
pytest
```