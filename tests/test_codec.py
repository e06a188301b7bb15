import random
import struct
import pytest

from codec import encode, decode, read_container
from bitstream import HDR_SIZE, MAGIC
from freq import count_bytes
from metrics import avg_code_length
from errors import CorruptData, TruncatedStream, HuffmanError


def _roundtrip(data):
	blob = encode(data)
	assert decode(blob) == data
	return blob


def test_roundtrip_empty():
	blob = _roundtrip(b"")
	c = read_container(blob)
	assert c.count == 0 and c.nbits == 0 and c.lengths == {}
	assert len(blob) == HDR_SIZE


def test_roundtrip_single_byte():
	for b in (0, 65, 255):
		_roundtrip(bytes([b]))


def test_roundtrip_all_bytes_once():
	blob = _roundtrip(bytes(range(256)))
	c = read_container(blob)
	assert set(c.lengths.values()) == {8}


def test_single_byte_repeated_uses_one_bit():
	data = b"A" * 10240
	blob = _roundtrip(data)
	c = read_container(blob)
	assert c.lengths == {65: 1}
	assert c.nbits == len(data)


def test_aaaa():
	c = read_container(_roundtrip(b"AAAA"))
	assert c.nbits == 4
	assert c.payload == b"\x00"


def test_small_inputs():
	for n in (1, 2, 3):
		_roundtrip(bytes(random.getrandbits(8) for _ in range(n)))


@pytest.mark.timeout(120)
def test_roundtrip_random_10kb():
	_roundtrip(bytes(random.getrandbits(8) for _ in range(10 * 1024)))


def test_roundtrip_text():
	_roundtrip("Huffman coding, ünïcödé text\n".encode("utf-8") * 37)


def test_roundtrip_accepts_bytearray():
	data = bytearray(b"mississippi")
	assert decode(encode(data)) == b"mississippi"


def test_abracadabra():
	data = b"abracadabra"
	blob = _roundtrip(data)
	c = read_container(blob)
	assert c.count == 11
	assert c.nbits == 23
	assert c.nbits < 88
	assert c.lengths == {ord("a"): 1, ord("b"): 3, ord("c"): 3, ord("d"): 3, ord("r"): 3}
	assert len(blob) == HDR_SIZE + 5 * 2 + 3


def test_deterministic():
	data = bytes(random.getrandbits(8) for _ in range(3000))
	assert encode(data) == encode(data)
	assert encode(b"abracadabra") == encode(b"abracadabra")


def test_skewed_input_under_8_bits():
	data = b"x" * 900 + bytes(range(100))
	c = read_container(encode(data))
	assert avg_code_length(count_bytes(data), c.lengths) < 8.0


def test_two_symbols_uniform():
	c = read_container(encode(b"ab" * 50))
	assert c.lengths == {ord("a"): 1, ord("b"): 1}
	assert c.nbits == 100


def test_container_starts_with_magic():
	assert encode(b"hello").startswith(MAGIC)


def test_truncated_payload_byte():
	blob = encode(b"This is a test" * 100)
	with pytest.raises(TruncatedStream):
		decode(blob[:-1])


def test_truncated_anywhere_never_decodes():
	blob = encode(b"Hello World" * 50)
	for cut in (1, 5, HDR_SIZE - 1, HDR_SIZE, HDR_SIZE + 3, len(blob) - 3):
		with pytest.raises((TruncatedStream, CorruptData)):
			decode(blob[:cut])


def test_trailing_bytes_rejected():
	with pytest.raises(CorruptData):
		decode(encode(b"Hello World") + b"\x00")


def test_corrupted_magic():
	blob = bytearray(encode(b"Hello World" * 50))
	blob[0] ^= 0xFF
	with pytest.raises(CorruptData):
		decode(bytes(blob))


def test_bad_version():
	blob = bytearray(encode(b"Hello"))
	blob[4] = 99
	with pytest.raises(CorruptData):
		decode(bytes(blob))


def test_too_many_symbols():
	blob = bytearray(encode(b"Hello"))
	blob[6:8] = struct.pack("<H", 257)
	with pytest.raises(CorruptData):
		decode(bytes(blob))


def test_count_without_table():
	blob = bytearray(encode(b""))
	blob[8:16] = struct.pack("<Q", 3)
	with pytest.raises(CorruptData):
		decode(bytes(blob))


def test_zero_count_with_payload():
	blob = bytearray(encode(b"abracadabra"))
	blob[8:16] = struct.pack("<Q", 0)
	with pytest.raises(CorruptData):
		decode(bytes(blob))


def test_nonzero_flags_rejected():
	blob = bytearray(encode(b"abracadabra"))
	blob[5] = 0xFF
	with pytest.raises(CorruptData):
		decode(bytes(blob))


def test_duplicate_symbol_in_table():
	blob = bytearray(encode(b"ab" * 4))
	# second table entry takes the first entry's symbol
	blob[HDR_SIZE + 2] = blob[HDR_SIZE]
	with pytest.raises(CorruptData):
		decode(bytes(blob))


def test_inconsistent_code_lengths():
	blob = bytearray(encode(b"abracadabra"))
	# 'a' length 1 -> 2 leaves the code incomplete
	blob[HDR_SIZE + 1] = 2
	with pytest.raises(CorruptData):
		decode(bytes(blob))


def test_single_symbol_payload_with_one_bit():
	blob = bytearray(encode(b"AAAA"))
	blob[-1] = 0x80
	with pytest.raises(CorruptData):
		decode(bytes(blob))


def test_count_larger_than_payload():
	blob = bytearray(encode(b"AAAA"))
	blob[8:16] = struct.pack("<Q", 5)
	with pytest.raises(TruncatedStream):
		decode(bytes(blob))


def test_leftover_payload_bits():
	blob = bytearray(encode(b"AAAA"))
	blob[16:24] = struct.pack("<Q", 6)
	with pytest.raises(CorruptData):
		decode(bytes(blob))


def test_errors_are_value_errors():
	with pytest.raises(ValueError):
		decode(b"nope")
	assert issubclass(TruncatedStream, HuffmanError)
