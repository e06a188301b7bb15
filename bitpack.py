from errors import TruncatedStream

class BitWriter:
    def __init__(self):
        self._buf = bytearray()
        self._cur = 0
        self._nbits = 0  # bits currently in _cur (0..7)
        self.total_bits = 0

    def write_code(self, code: int, length: int):
        """Write 'length' bits of code (MSB-first)."""
        self._cur = (self._cur << length) | (code & ((1 << length) - 1))
        self._nbits += length
        self.total_bits += length
        while self._nbits >= 8:
            self._nbits -= 8
            self._buf.append((self._cur >> self._nbits) & 0xFF)
        self._cur &= (1 << self._nbits) - 1

    def write_bits(self, bits: str):
        """Write a '0'/'1' string."""
        if bits:
            self.write_code(int(bits, 2), len(bits))

    def finish(self) -> bytes:
        """Pad remaining bits with zeros."""
        if self._nbits > 0:
            self._buf.append(self._cur << (8 - self._nbits))
            self._cur = 0
            self._nbits = 0
        return bytes(self._buf)

class BitReader:
    """
    MSB-first reader over exactly `nbits` bits of `data`; padding in the
    last byte is never returned. Iterating starts from the first bit each
    time, read_bit() keeps its own cursor.
    """
    def __init__(self, data: bytes, nbits: int):
        if nbits < 0 or nbits > 8 * len(data):
            raise TruncatedStream(f"need {nbits} bits, buffer holds {8 * len(data)}")
        self.data = data
        self.nbits = nbits
        self.pos = 0

    def read_bit(self) -> int:
        if self.pos >= self.nbits:
            raise TruncatedStream("Unexpected end of bitstream")
        b = (self.data[self.pos >> 3] >> (7 - (self.pos & 7))) & 1
        self.pos += 1
        return b

    def __iter__(self):
        self.pos = 0
        data = self.data
        for k in range(self.nbits):
            self.pos = k + 1
            yield (data[k >> 3] >> (7 - (k & 7))) & 1
