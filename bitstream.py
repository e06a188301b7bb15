import struct
from typing import Dict
from errors import CorruptData, TruncatedStream

MAGIC = b"HUFF"   # 4 bytes
VERSION = 1       # 1 byte

# Header (little-endian):
# magic(4) version(1) flags(1) nsyms(u16)
# count(u64) nbits(u64)
HDR_FMT = "<4sBBHQQ"
HDR_SIZE = struct.calcsize(HDR_FMT)

# Code length table entry:
# symbol(u8) codelen(u8)
TBL_FMT = "<BB"
TBL_SIZE = struct.calcsize(TBL_FMT)

def write_header(f, *, nsyms: int, count: int, nbits: int, flags: int = 0):
    f.write(struct.pack(HDR_FMT, MAGIC, VERSION, flags, nsyms, count, nbits))

def read_header(f):
    data = f.read(HDR_SIZE)
    if len(data) != HDR_SIZE:
        raise TruncatedStream("Malformed stream: header too short")
    magic, ver, flags, nsyms, count, nbits = struct.unpack(HDR_FMT, data)
    if magic != MAGIC:
        raise CorruptData("Bad magic number (not HUFF)")
    if ver != VERSION:
        raise CorruptData(f"Unsupported version: {ver}")
    if flags != 0:
        raise CorruptData(f"Unsupported flags: 0x{flags:02x}")
    if nsyms > 256:
        raise CorruptData(f"Malformed stream: {nsyms} symbols in a byte alphabet")
    if count > 0 and nsyms == 0:
        raise CorruptData("Malformed stream: symbols counted but no code table")
    if count == 0 and (nsyms != 0 or nbits != 0):
        raise CorruptData("Malformed stream: code table or payload with zero symbols")
    return dict(flags=flags, nsyms=nsyms, count=count, nbits=nbits)

def write_table(f, lengths: Dict[int, int]):
    for sym, L in sorted(lengths.items()):
        if not (0 <= sym <= 255):
            raise ValueError("symbol out of byte range")
        if not (1 <= L <= 255):
            raise ValueError("code length out of range (1..255)")
        f.write(struct.pack(TBL_FMT, sym, L))

def read_table(f, nsyms: int) -> Dict[int, int]:
    lengths: Dict[int, int] = {}
    for _ in range(nsyms):
        data = f.read(TBL_SIZE)
        if len(data) != TBL_SIZE:
            raise TruncatedStream("Malformed stream: table truncated")
        sym, L = struct.unpack(TBL_FMT, data)
        if sym in lengths:
            raise CorruptData(f"Malformed stream: symbol {sym} listed twice")
        lengths[sym] = L
    return lengths
