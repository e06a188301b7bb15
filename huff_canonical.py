from typing import Dict, Iterable, List, Tuple
from huffman import Node
from errors import CorruptData, TruncatedStream

def code_lengths(codebook: Dict[int, str]) -> Dict[int, int]:
    return {sym: len(bits) for sym, bits in codebook.items()}

def check_lengths(lengths: Dict[int, int]):
    """
    Reject length sets that cannot come from a full binary tree
    (Kraft sum must be exactly 1, single symbol of length 1 excepted).
    """
    if not lengths:
        raise CorruptData("empty code length table")
    if any(L < 1 for L in lengths.values()):
        raise CorruptData("code length must be >= 1")
    if len(lengths) == 1:
        if next(iter(lengths.values())) != 1:
            raise CorruptData("single-symbol table must use a 1-bit code")
        return
    maxL = max(lengths.values())
    kraft = sum(1 << (maxL - L) for L in lengths.values())
    if kraft != 1 << maxL:
        raise CorruptData("code lengths do not describe a complete prefix code")

def canonical_codes_from_lengths(lengths: Dict[int, int]) -> Dict[int, Tuple[int, int]]:
    """
    Return mapping: sym -> (code_int, code_len), canonical Huffman.
    Canonical ordering: sort by (code_len, sym)
    """
    items = sorted(lengths.items(), key=lambda kv: (kv[1], kv[0]))
    code = 0
    prev_len = 0
    out: Dict[int, Tuple[int, int]] = {}
    for sym, L in items:
        code <<= (L - prev_len)
        out[sym] = (code, L)
        code += 1
        prev_len = L
    return out

def build_decode_tree(codes: Dict[int, Tuple[int, int]]) -> Node:
    """
    Rebuild a binary decode tree from canonical codes. A lone symbol
    becomes a single leaf; otherwise every internal node ends up with
    two children (guaranteed by check_lengths).
    """
    if len(codes) == 1:
        (sym,) = codes
        return Node(freq=0, sym=sym)
    root = Node(freq=0)
    for sym, (code, L) in codes.items():
        cur = root
        for i in range(L - 1, -1, -1):
            if cur.is_leaf():
                raise CorruptData("code table is not prefix-free")
            if (code >> i) & 1:
                if cur.right is None:
                    cur.right = Node(freq=0)
                cur = cur.right
            else:
                if cur.left is None:
                    cur.left = Node(freq=0)
                cur = cur.left
        if cur.left is not None or cur.right is not None or cur.is_leaf():
            raise CorruptData("code table is not prefix-free")
        cur.sym = sym
    return root

def decode_symbols(root: Node, bits: Iterable[int], count: int) -> List[int]:
    """
    Walk the decode tree once per bit, emitting a symbol at each leaf,
    until `count` symbols are out.
    """
    out: List[int] = []
    if count == 0:
        return out
    if root.is_leaf():
        for b in bits:
            if b != 0:
                raise CorruptData("Invalid Huffman code (corrupt stream)")
            out.append(root.sym)
            if len(out) == count:
                return out
        raise TruncatedStream(f"bitstream ended after {len(out)} of {count} symbols")
    cur = root
    for b in bits:
        cur = cur.right if b else cur.left
        if cur is None:
            raise CorruptData("Invalid Huffman code (corrupt stream)")
        if cur.is_leaf():
            out.append(cur.sym)
            if len(out) == count:
                return out
            cur = root
    raise TruncatedStream(f"bitstream ended after {len(out)} of {count} symbols")
