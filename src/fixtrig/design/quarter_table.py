# design/quarter_table.py

from __future__ import annotations

import argparse
import math
import sys
from typing import List, Optional, Sequence

from fixtrig.tables import AMPLITUDE, SINE_TABLE, TABLE_SIZE, check_table


def generate_quarter_table(nodes: int = TABLE_SIZE + 1, amplitude: int = AMPLITUDE) -> List[int]:
    """
    Generates an integer table for a quarter-period of the sine function.
    Node i samples theta = i/(nodes-1) * pi/2, so the last node is the peak.
    """
    if nodes < 2:
        raise ValueError("nodes must be at least 2")
    if amplitude < 1:
        raise ValueError("amplitude must be at least 1")
    table = []
    for i in range(nodes):
        theta = i * (math.pi / 2) / (nodes - 1)
        table.append(round(amplitude * math.sin(theta)))
    return table


def max_interpolation_error(table: Sequence[int], amplitude: int, num_samples: int = 20000) -> float:
    """
    Maximum deviation of the linearly interpolated table from the exact sine
    over the quarter period, as a fraction of the amplitude.
    """
    nodes = len(table)
    max_abs_err = 0.0

    for k in range(num_samples + 1):
        theta = (k / num_samples) * (math.pi / 2)
        exact = amplitude * math.sin(theta)

        frac_idx = (k / num_samples) * (nodes - 1)
        idx_low = min(int(frac_idx), nodes - 2)
        weight = frac_idx - idx_low
        interp = table[idx_low] * (1.0 - weight) + table[idx_low + 1] * weight

        max_abs_err = max(max_abs_err, abs(interp - exact))

    return max_abs_err / amplitude


def format_table(table: Sequence[int], per_line: int = 6) -> str:
    """Python source for the table as a tuple literal."""
    lines = ["SINE_TABLE: Tuple[int, ...] = ("]
    for i in range(0, len(table), per_line):
        chunk = table[i:i + per_line]
        lines.append("    " + ", ".join(str(v) for v in chunk) + ",")
    lines.append(")")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Generate the integer quarter-sine table used by fixtrig.")
    p.add_argument("--nodes", type=int, default=TABLE_SIZE + 1,
                   help=f"Number of nodes including the sentinel (default: {TABLE_SIZE + 1}).")
    p.add_argument("--amplitude", type=int, default=AMPLITUDE,
                   help=f"Peak amplitude of the table (default: {AMPLITUDE}).")
    p.add_argument("--out-py", type=str, default="", help="Optional file to save the Python literal.")
    p.add_argument("--check", action="store_true",
                   help="Compare against the embedded SINE_TABLE and exit 1 on mismatch.")
    args = p.parse_args(argv)

    if args.nodes < 2:
        print("Error: Number of nodes must be at least 2.", file=sys.stderr)
        return 1
    if args.amplitude < 1:
        print("Error: Amplitude must be at least 1.", file=sys.stderr)
        return 1

    table = generate_quarter_table(args.nodes, args.amplitude)

    if args.check:
        try:
            check_table(table)
        except ValueError as e:
            print(f"Invalid table: {e}", file=sys.stderr)
            return 1
        if tuple(table) != SINE_TABLE:
            bad = [i for i, (a, b) in enumerate(zip(table, SINE_TABLE)) if a != b]
            print(f"Mismatch: generated table differs from SINE_TABLE "
                  f"(length {len(table)} vs {len(SINE_TABLE)}, differing indices {bad[:8]})",
                  file=sys.stderr)
            return 1
        print(f"OK: SINE_TABLE matches the generated table ({len(table)} entries)")
        return 0

    rel_error = max_interpolation_error(table, args.amplitude)
    error_line = f"# Maximum interpolation error: {rel_error:.3e} ({rel_error * 100.0:.6f}% of amplitude)"
    full_output = f"{format_table(table)}\n{error_line}"

    print(full_output)

    if args.out_py:
        with open(args.out_py, "w", encoding="utf-8") as f:
            f.write(full_output + "\n")
        print(f"\nSaved results to {args.out_py}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
