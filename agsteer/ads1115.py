"""Single-shot driver for the ADS1115 16-bit analogue-to-digital converter."""

from __future__ import annotations

from enum import IntEnum
from typing import Protocol

POINTER_CONVERT = 0x00
POINTER_CONFIG = 0x01

CONFIG_OS_SINGLE = 0x8000
CONFIG_MODE_SINGLE = 0x0100
CONFIG_COMPARATOR_DISABLED = 0x0003


class Address(IntEnum):
    """I2C address, chosen by what the ADDR pin is tied to."""

    GND = 0x48
    VDD = 0x49
    SDA = 0x4A
    SCL = 0x4B


class Gain(IntEnum):
    """Programmable gain: full-scale input range, bits 9 to 11."""

    PGA_6_144V = 0x0000
    PGA_4_096V = 0x0200
    PGA_2_048V = 0x0400
    PGA_1_024V = 0x0600
    PGA_0_512V = 0x0800
    PGA_0_256V = 0x0A00


class Mux(IntEnum):
    """Input multiplexer setting, bits 12 to 14."""

    DIFF_0_1 = 0x0000
    DIFF_0_3 = 0x1000
    DIFF_1_3 = 0x2000
    DIFF_2_3 = 0x3000
    SINGLE_0 = 0x4000
    SINGLE_1 = 0x5000
    SINGLE_2 = 0x6000
    SINGLE_3 = 0x7000


class SampleRate(IntEnum):
    """Data rate in samples per second, bits 5 to 7."""

    SPS_8 = 0x0000
    SPS_16 = 0x0020
    SPS_32 = 0x0040
    SPS_64 = 0x0060
    SPS_128 = 0x0080
    SPS_250 = 0x00A0
    SPS_475 = 0x00C0
    SPS_860 = 0x00E0


class I2CBus(Protocol):
    """The two bus operations the converter needs."""

    def write(self, address: int, data: bytes) -> None:
        """Send *data* to the device at *address* in one transaction."""

    def read(self, address: int, count: int) -> bytes:
        """Request *count* bytes from *address*; return what arrived."""


class ADS1115:
    """ADS1115 in power-down single-shot mode.

    Set :attr:`gain`, :attr:`mux` and :attr:`rate`, call
    :meth:`trigger_conversion`, then :meth:`read_conversion` once the
    conversion is done.
    """

    def __init__(self, bus: I2CBus, address: int = Address.GND) -> None:
        self.bus = bus
        self.address = int(address)
        self.gain: int = Gain.PGA_2_048V
        self.mux: int = Mux.DIFF_0_1
        self.rate: int = SampleRate.SPS_128

    def config_word(self) -> int:
        """The config register value that starts a conversion."""
        config = (
            CONFIG_COMPARATOR_DISABLED
            | int(self.rate)
            | CONFIG_MODE_SINGLE
            | int(self.gain)
            | int(self.mux)
            | CONFIG_OS_SINGLE
        )
        return config & 0xFFFF

    def test_connection(self) -> bool:
        """True if the device answers a read of the conversion register."""
        self.bus.write(self.address, bytes([POINTER_CONVERT]))
        return len(self.bus.read(self.address, 2)) > 0

    def trigger_conversion(self) -> None:
        """Start one conversion with the current settings and return at once."""
        config = self.config_word()
        self.bus.write(self.address, bytes([POINTER_CONFIG, config >> 8, config & 0xFF]))

    def is_conversion_done(self) -> bool:
        """True when the operational-status bit reports no conversion running."""
        return bool(self._read_register(POINTER_CONFIG) >> 15)

    def read_conversion(self) -> int:
        """The last conversion result as a signed 16-bit value, without waiting."""
        raw = self._read_register(POINTER_CONVERT)
        return raw - 0x10000 if raw & 0x8000 else raw

    def _read_register(self, pointer: int) -> int:
        self.bus.write(self.address, bytes([pointer]))
        data = self.bus.read(self.address, 2)
        if len(data) < 2:
            raise OSError(
                f"short read from 0x{self.address:02X}: {len(data)} of 2 bytes"
            )
        return int.from_bytes(data[:2], "big")