import argparse, os
from codec import encode, read_container
from freq import count_bytes
from metrics import entropy, avg_code_length, compression_ratio
from huff_canonical import canonical_codes_from_lengths

def _sym_repr(sym: int) -> str:
    ch = chr(sym)
    return repr(ch) if ch.isprintable() else f"0x{sym:02x}"

def dump_codes(c, freqs, preview: int = 64):
    codes = canonical_codes_from_lengths(c.lengths)
    for sym in sorted(codes, key=lambda s: (codes[s][1], s)):
        code, L = codes[sym]
        print(f"  {_sym_repr(sym):>6} count={freqs[sym]:<8} code={code:0{L}b}")
    bits = "".join(f"{b:08b}" for b in c.payload)[:min(c.nbits, preview)]
    more = "..." if c.nbits > preview else ""
    print(f"[encode] bitstream: {bits}{more}")

def main(argv=None):
    ap = argparse.ArgumentParser(description="Huffman-compress a file")
    ap.add_argument("--input", required=True, help="path to any file")
    ap.add_argument("--output", required=True, help="path to .huf")
    ap.add_argument("--dump", action="store_true", help="print the code table and bitstream")
    args = ap.parse_args(argv)

    with open(args.input, "rb") as f:
        data = f.read()

    blob = encode(data)

    os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
    with open(args.output, "wb") as f:
        f.write(blob)

    c = read_container(blob)
    freqs = count_bytes(data)
    print(f"[encode] wrote {args.output}")
    print(f"[encode] symbols={c.count}, distinct={len(c.lengths)}, payload={c.nbits} bits")
    print(f"[encode] entropy={entropy(freqs):.4f} avg_len={avg_code_length(freqs, c.lengths):.4f} bits/sym")
    print(f"[encode] {len(data)}B -> {len(blob)}B, ratio={compression_ratio(len(data), len(blob)):.3f}")
    if args.dump:
        dump_codes(c, freqs)

if __name__ == "__main__":
    main()
