import pytest

from motorwatch.crc8 import check_crc8, crc8

# Example ROM code from the 1-Wire CRC application note:
# family 0x02, serial 00000001B81C, CRC 0xA2 (least significant byte first).
ROM_EXAMPLE = bytes([0x02, 0x1C, 0xB8, 0x01, 0x00, 0x00, 0x00, 0xA2])


def test_standard_check_value():
    assert crc8(b"123456789") == 0xA1


def test_rom_example_crc():
    assert crc8(ROM_EXAMPLE[:7]) == ROM_EXAMPLE[7]


def test_check_crc8_accepts_valid_rom():
    assert check_crc8(ROM_EXAMPLE) is True


def test_check_crc8_rejects_corrupted_rom():
    corrupted = bytearray(ROM_EXAMPLE)
    corrupted[3] ^= 0x10
    assert check_crc8(corrupted) is False


def test_single_zero_byte_gives_zero():
    assert crc8([0]) == 0


@pytest.mark.parametrize(
    "payload",
    [b"\x01", b"\xff\x00\x7f", bytes(range(32)), b"\x28\xaa\x55\x10"],
)
def test_appending_crc_yields_zero(payload):
    value = crc8(payload)
    assert crc8(payload + bytes([value])) == 0
    assert check_crc8(payload + bytes([value])) is True


def test_result_fits_in_a_byte():
    for start in range(0, 256, 17):
        assert 0 <= crc8(bytes([start, start ^ 0xA5, 3])) <= 0xFF


def test_accepts_lists_of_ints():
    assert crc8(list(ROM_EXAMPLE[:7])) == crc8(ROM_EXAMPLE[:7])


def test_empty_input_rejected():
    with pytest.raises(ValueError):
        crc8(b"")


def test_check_needs_two_bytes():
    with pytest.raises(ValueError):
        check_crc8(b"\x01")


def test_out_of_range_values_rejected():
    with pytest.raises(ValueError):
        crc8([256])