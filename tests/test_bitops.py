import pytest

from bitops import BitWriter, BitReader


def test_bitwriter_write_code_and_flush_basic():
    bw = BitWriter()
    bw.write_code("1010")
    bw.write_code("11110000")
    out = bw.flush()
    assert isinstance(out, (bytes, bytearray))
    assert len(out) == 2
    assert out[0] == 0b10101111
    assert out[1] == 0b00000000
    assert bw.bits_written == 12


def test_bitwriter_pads_partial_byte_with_zeros():
    bw = BitWriter()
    bw.write_bit(1)
    assert bw.flush() == b"\x80"


def test_bitwriter_rejects_non_binary_digits():
    bw = BitWriter()
    with pytest.raises(ValueError):
        bw.write_code("0120")


def test_empty_code_is_noop():
    bw = BitWriter()
    bw.write_code("")
    assert bw.flush() == b""
    assert bw.bits_written == 0


def test_bitreader_read_code_across_calls():
    br = BitReader(bytes([0b11001010, 0xFF]))
    assert br.read_code(3) == "110"
    assert br.read_code(5) == "01010"
    assert br.read_bit() == 1
    assert br.pos == 2


def test_bitreader_eoferror_on_insufficient_bits():
    br = BitReader(b"\xF0")
    with pytest.raises(EOFError):
        _ = br.read_code(9)
