import argparse, os
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
from freq import count_bytes
from huffman import build_tree, build_codebook
from huff_canonical import code_lengths

def plot_code_lengths(data: bytes, out_path: str):
    """Counts (top) and code lengths (bottom) per byte value, saved to out_path."""
    freqs = count_bytes(data)
    if not freqs:
        raise ValueError("nothing to plot for empty input")
    lengths = code_lengths(build_codebook(build_tree(freqs)))
    syms = np.array(sorted(freqs))
    counts = np.array([freqs[s] for s in syms])
    L = np.array([lengths[s] for s in syms])

    fig, (ax0, ax1) = plt.subplots(2, 1, figsize=(10, 5), sharex=True)
    ax0.bar(syms, counts, width=1.0)
    ax0.set_ylabel("count")
    ax0.set_title(f"{len(data)} bytes, {len(syms)} distinct symbols")
    ax1.bar(syms, L, width=1.0, color="tab:orange")
    ax1.set_ylabel("code length (bits)")
    ax1.set_xlabel("byte value")
    ax1.set_xlim(-1, 256)

    fig.tight_layout()
    os.makedirs(os.path.dirname(out_path) or ".", exist_ok=True)
    fig.savefig(out_path, dpi=150)
    plt.close(fig)

def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("--input", required=True, help="path to any file")
    ap.add_argument("--output", required=True, help="path to .png")
    args = ap.parse_args(argv)

    with open(args.input, "rb") as f:
        data = f.read()
    plot_code_lengths(data, args.output)
    print(f"[plot] wrote {args.output}")

if __name__ == "__main__":
    main()
