import argparse, os
from codec import decode

def main(argv=None):
    ap = argparse.ArgumentParser(description="Expand a .huf container")
    ap.add_argument("--input", required=True, help="path to .huf")
    ap.add_argument("--output", required=True, help="path to restored file")
    args = ap.parse_args(argv)

    with open(args.input, "rb") as f:
        blob = f.read()

    data = decode(blob)

    os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
    with open(args.output, "wb") as f:
        f.write(data)
    print(f"[decode] wrote {args.output} ({len(blob)}B -> {len(data)}B)")

if __name__ == "__main__":
    main()
