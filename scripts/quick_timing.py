#!/usr/bin/env python3
"""Quick timing of BigInt operations against native int."""

import argparse
import random
import sys
import time
from collections.abc import Callable
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from ubigint import BigInt


def timed(label: str, func: Callable[[], object], repeat: int) -> float:
    """Run func repeat times and print the mean in microseconds."""
    start = time.perf_counter()
    for _ in range(repeat):
        func()
    elapsed = (time.perf_counter() - start) / repeat
    print(f"  {label:<12} {elapsed * 1e6:10.1f}us")
    return elapsed


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--digits", type=int, default=1000, help="decimal digits per operand")
    parser.add_argument("--repeat", type=int, default=200, help="iterations per measurement")
    parser.add_argument("--seed", type=int, default=0)
    args = parser.parse_args()

    rng = random.Random(args.seed)
    a_text = "".join(rng.choice("0123456789") for _ in range(args.digits))
    b_text = "".join(rng.choice("0123456789") for _ in range(args.digits // 2))
    a, b = BigInt(a_text), BigInt(b_text)
    a_int, b_int = int(a_text), int(b_text)

    print(f"Operands: {args.digits} and {args.digits // 2} decimal digits")

    print("\nBigInt:")
    timed("parse", lambda: BigInt(a_text), args.repeat)
    big_add = timed("add", lambda: a + b, args.repeat)
    big_sub = timed("sub", lambda: a - b, args.repeat)
    timed("to_str", lambda: str(a), args.repeat)

    print("\nint:")
    timed("parse", lambda: int(a_text), args.repeat)
    int_add = timed("add", lambda: a_int + b_int, args.repeat)
    int_sub = timed("sub", lambda: a_int - b_int, args.repeat)
    timed("to_str", lambda: str(a_int), args.repeat)

    print(f"\nadd: {big_add / int_add:.0f}x slower, sub: {big_sub / int_sub:.0f}x slower")

    if str(a + b) != str(a_int + b_int) or str(a - b) != str(a_int - b_int):
        print("MISMATCH against int")
        sys.exit(1)


if __name__ == "__main__":
    main()
