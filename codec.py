import io
from typing import Dict, NamedTuple
from freq import count_bytes
from huffman import build_tree, build_codebook
from huff_canonical import (code_lengths, check_lengths, canonical_codes_from_lengths,
                            build_decode_tree, decode_symbols)
from bitpack import BitWriter, BitReader
from bitstream import write_header, read_header, write_table, read_table
from errors import CorruptData, TruncatedStream

class Container(NamedTuple):
    count: int
    nbits: int
    lengths: Dict[int, int]
    payload: bytes

def encode(data: bytes) -> bytes:
    """
    Compress `data` into a self-describing container:
    header, (symbol, code length) table, packed payload.
    Same input always gives the same bytes.
    """
    data = bytes(data)
    out = io.BytesIO()
    freqs = count_bytes(data)
    if not freqs:
        write_header(out, nsyms=0, count=0, nbits=0)
        return out.getvalue()

    tree = build_tree(freqs)
    lengths = code_lengths(build_codebook(tree))
    codes = canonical_codes_from_lengths(lengths)

    bw = BitWriter()
    for sym in data:
        code, L = codes[sym]
        bw.write_code(code, L)
    payload = bw.finish()

    write_header(out, nsyms=len(lengths), count=len(data), nbits=bw.total_bits)
    write_table(out, lengths)
    out.write(payload)
    return out.getvalue()

def read_container(blob: bytes) -> Container:
    """Parse and size-check a container without decoding the payload."""
    f = io.BytesIO(blob)
    h = read_header(f)
    lengths = read_table(f, h["nsyms"])
    payload_len = (h["nbits"] + 7) // 8
    payload = f.read(payload_len)
    if len(payload) != payload_len:
        raise TruncatedStream("Malformed stream: payload truncated")
    if f.read(1):
        raise CorruptData("Malformed stream: trailing bytes after payload")
    return Container(count=h["count"], nbits=h["nbits"], lengths=lengths, payload=payload)

def decode(blob: bytes) -> bytes:
    c = read_container(bytes(blob))
    if c.count == 0:
        return b""
    check_lengths(c.lengths)
    root = build_decode_tree(canonical_codes_from_lengths(c.lengths))
    br = BitReader(c.payload, c.nbits)
    syms = decode_symbols(root, br, c.count)
    if br.pos != c.nbits:
        raise CorruptData(f"Malformed stream: {c.nbits - br.pos} payload bits left over")
    return bytes(syms)
