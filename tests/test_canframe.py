import pytest

from agsteer.canframe import CANFrame, DataKind


def test_default_frame_is_zeroed():
    frame = CANFrame()
    assert frame.get(DataKind.UINT64, 0) == 0
    assert frame.payload() == bytes(8)
    assert frame.extended is False


def test_bytes_combine_little_endian():
    frame = CANFrame()
    frame.set(DataKind.UINT8, 0, 0x34)
    frame.set(DataKind.UINT8, 1, 0x12)
    assert frame.get(DataKind.UINT16, 0) == 0x1234


def test_signed_view_of_unsigned_byte():
    frame = CANFrame()
    frame.set(DataKind.UINT8, 0, 0xFF)
    assert frame.get(DataKind.INT8, 0) == -1


@pytest.mark.parametrize(
    "kind, value",
    [
        (DataKind.UINT64, 2**64 - 1),
        (DataKind.INT64, -(2**63)),
        (DataKind.UINT32, 2**32 - 1),
        (DataKind.INT32, -(2**31)),
        (DataKind.UINT16, 2**16 - 1),
        (DataKind.INT16, -(2**15)),
        (DataKind.UINT8, 255),
        (DataKind.INT8, -128),
    ],
)
def test_round_trip_every_slot(kind, value):
    frame = CANFrame()
    for index in range(8 // kind.width):
        frame.set(kind, index, value)
        assert frame.get(kind, index) == value


def test_uint32_slot_one_uses_upper_bytes():
    frame = CANFrame()
    frame.set(DataKind.UINT32, 1, 0xDEADBEEF)
    assert frame.payload()[4:8] == (0xDEADBEEF).to_bytes(4, "little")
    assert frame.get(DataKind.UINT32, 0) == 0


@pytest.mark.parametrize(
    "kind, index",
    [(DataKind.UINT32, 2), (DataKind.UINT64, 1), (DataKind.UINT8, 8), (DataKind.INT16, -1)],
)
def test_index_out_of_range(kind, index):
    frame = CANFrame()
    with pytest.raises(IndexError):
        frame.get(kind, index)
    with pytest.raises(IndexError):
        frame.set(kind, index, 0)


@pytest.mark.parametrize("kind, value", [(DataKind.UINT8, 256), (DataKind.INT8, -129)])
def test_value_out_of_range(kind, value):
    frame = CANFrame()
    with pytest.raises(ValueError):
        frame.set(kind, 0, value)


def test_payload_honours_length():
    frame = CANFrame(id=0x18FF, extended=True, length=3, data=b"\x01\x02\x03")
    assert frame.payload() == b"\x01\x02\x03"
    assert frame.id == 0x18FF
    assert frame.extended is True
    assert len(frame.data) == 8


def test_invalid_length_rejected():
    with pytest.raises(ValueError):
        CANFrame(length=9)


def test_too_much_data_rejected():
    with pytest.raises(ValueError):
        CANFrame(data=bytes(9))