"""CAN bus frame with typed little-endian views of its eight data bytes."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from enum import Enum

DATA_SIZE = 8


class DataKind(Enum):
    """Integer views of the frame data, as (struct code, width in bytes)."""

    UINT64 = ("Q", 8)
    UINT32 = ("I", 4)
    UINT16 = ("H", 2)
    UINT8 = ("B", 1)
    INT64 = ("q", 8)
    INT32 = ("i", 4)
    INT16 = ("h", 2)
    INT8 = ("b", 1)

    @property
    def code(self) -> str:
        return "<" + self.value[0]

    @property
    def width(self) -> int:
        return self.value[1]

    @property
    def slots(self) -> int:
        return DATA_SIZE // self.width


@dataclass
class CANFrame:
    """A CAN message: identifier, extended-id flag, data length and data."""

    id: int = 0
    extended: bool = False
    length: int = DATA_SIZE
    data: bytearray = field(default_factory=lambda: bytearray(DATA_SIZE))

    def __post_init__(self) -> None:
        data = bytearray(self.data)
        if len(data) > DATA_SIZE:
            raise ValueError(f"at most {DATA_SIZE} data bytes allowed")
        self.data = data.ljust(DATA_SIZE, b"\0")
        if not 0 <= self.length <= DATA_SIZE:
            raise ValueError(f"length must be between 0 and {DATA_SIZE}")

    def _offset(self, kind: DataKind, index: int) -> int:
        if not 0 <= index < kind.slots:
            raise IndexError(f"{kind.name} index {index} out of range")
        return index * kind.width

    def get(self, kind: DataKind, index: int) -> int:
        """Read slot *index* of the data viewed as *kind*."""
        return struct.unpack_from(kind.code, self.data, self._offset(kind, index))[0]

    def set(self, kind: DataKind, index: int, value: int) -> None:
        """Write *value* into slot *index* of the data viewed as *kind*."""
        offset = self._offset(kind, index)
        try:
            struct.pack_into(kind.code, self.data, offset, value)
        except struct.error as exc:
            raise ValueError(f"{value!r} does not fit {kind.name}") from exc

    def payload(self) -> bytes:
        """The first ``length`` data bytes."""
        return bytes(self.data[: self.length])