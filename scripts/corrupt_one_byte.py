import sys
from pathlib import Path

def main():
    if len(sys.argv) not in (2, 3):
        print("Usage: corrupt_one_byte.py <file> [offset]")
        raise SystemExit(2)

    p = Path(sys.argv[1])
    b = bytearray(p.read_bytes())

    # Default: flip the low bit of the maze type byte (after the 4-byte magic).
    # Types 1 and 2 become 0 and 3, neither of which is a known type.
    idx = int(sys.argv[2]) if len(sys.argv) == 3 else 4
    if idx >= len(b):
        print(f"Offset {idx} is past the end of a {len(b)}-byte file.")
        raise SystemExit(2)

    b[idx] ^= 0x01
    p.write_bytes(bytes(b))
    print(f"Corrupted 1 byte at offset {idx} in {p}")

if __name__ == "__main__":
    main()
