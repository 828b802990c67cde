# agsteer

Pure-Python pieces for agricultural autosteer controllers:

- `agsteer.nmea`: `NMEAParser` is a streaming NMEA 0183 sentence parser that reads one character at a time. It checks checksums and calls handlers by sentence type, where `-` in a token acts as a wildcard. It reports rejected sentences through `ErrorCode`.
- `agsteer.running_average`: `RunningAverage` keeps a circular buffer of samples. It gives the average, the minimum and maximum, the standard deviation and standard error, and statistics over the most recent samples.
- `agsteer.canframe`: `CANFrame` is a CAN message with an identifier, an extended-id flag, a length and 8 data bytes. The data bytes can be read and written as little-endian integers of the widths listed in `DataKind`.
- `agsteer.ads1115`: `ADS1115` is a single-shot driver for the ADS1115 ADC. It works through any object that implements the `I2CBus` protocol. `Address`, `Gain`, `Mux` and `SampleRate` hold its settings.

The package has no dependencies outside the standard library.

## Installation

```
pip install agsteer
```

To run the tests:

```
pip install "agsteer[test]"
pytest
```

## Parsing NMEA

```python
from agsteer.nmea import NMEAParser, ErrorCode

parser = NMEAParser(4)          # room for at most 4 handlers

def on_gga(p):
    print(p.sentence_type(), p.arg_count(), p.arg(0), p.arg_float(1))

def on_error(p):
    print("rejected:", p.error().name)

parser.add_handler("--GGA", on_gga)
parser.error_handler = on_error
parser.feed("$GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47\r\n")
```

- `feed()` takes a `str` or `bytes`. `parser << "$"` passes a single character.
- Each handler is called with the parser as its only argument. Read the sentence back inside the handler with `sentence_type()`, `type_char(i)`, `arg_count()`, `arg(n)`, `arg_char(n)`, `arg_int(n)` and `arg_float(n)`. Argument 0 is the first field after the sentence type.
- After the handler returns, the parser resets and the sentence is gone.
- `add_handler()` returns `False` in two cases: the handler table is full, or a matching token is already registered. Only the first five characters of a token count.
- `default_handler` receives well-formed sentences that no handler claims.
- Set `handle_crc = False` to skip checksum verification.
- A rejected sentence calls `error_handler`. Inside it, `error()` returns one of `UNEXPECTED_CHAR`, `BUFFER_FULL`, `TYPE_TOO_LONG` or `CRC_ERROR`.

## Running averages

```python
from agsteer.running_average import RunningAverage

ra = RunningAverage(5)
for v in (1.0, 2.0, 3.0):
    ra.add(v)
ra.average()            # 2.0
ra.average_last(2)      # 2.5
ra.min_in_buffer()      # 1.0
len(ra)                 # 3
```

- When no samples have been added, the statistics return `nan`.
- `standard_deviation()` and `standard_error()` need at least two samples. With fewer, they return `nan`.
- `set_partial(n)` limits the buffer to its first `n` slots and clears it. Passing `0` uses all slots.
- `fill(value, number)` clears the buffer and adds the same value repeatedly.

## CAN frames

```python
from agsteer.canframe import CANFrame, DataKind

frame = CANFrame(id=0x18FF0102, extended=True)
frame.set(DataKind.UINT16, 0, 0x1234)
frame.get(DataKind.UINT8, 0)   # 0x34
frame.payload()                # the first `length` bytes
```

The following raise errors:

- An index outside the chosen view raises `IndexError`.
- A value that does not fit the view raises `ValueError`.
- More than 8 data bytes, or a length outside 0–8, raises `ValueError`.

## ADS1115

```python
from agsteer.ads1115 import ADS1115, Address, Gain, Mux

adc = ADS1115(bus, Address.GND)  # bus provides write(address, data) and read(address, count)
adc.mux = Mux.SINGLE_0
adc.gain = Gain.PGA_4_096V
adc.trigger_conversion()
if adc.is_conversion_done():
    value = adc.read_conversion()   # signed 16-bit result
```

- `config_word()` shows the register value that `trigger_conversion()` writes.
- `test_connection()` reports whether the device answered.
- A read that returns fewer than two bytes raises `OSError`.

## What this package does not do

This package contains no I/O of its own:

- It does not open serial ports to read GPS receivers.
- It does not send or receive frames on a CAN bus.
- It does not provide an `I2CBus` implementation. You must supply one that talks to real hardware.

It also has no command-line program.