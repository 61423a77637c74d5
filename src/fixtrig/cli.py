from __future__ import annotations

import argparse
from fractions import Fraction
import sys
import importlib
import inspect

from fixtrig.angles import SCALE


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def parse_angle(s: str, *, radians: bool = False) -> int:
    """Fixed-point integer string, or a decimal radian string when `radians` is set."""
    if radians:
        # Fraction keeps decimal input exact; round half to even at 10^-18
        return round(Fraction(s) * SCALE)
    return int(s)


def format_fixed(v: int) -> str:
    """Render a 10^18 fixed-point integer as a signed decimal string."""
    sign = "-" if v < 0 else ""
    q, r = divmod(abs(v), SCALE)
    return f"{sign}{q}.{r:018d}"


def cmd_trig(name: str, argv: list[str]) -> int:
    from fixtrig import trig

    p = argparse.ArgumentParser(prog=f"fixtrig {name}", description=f"Fixed-point {name}(angle), scaled by 10^18")
    p.add_argument("angle", help="angle in radians * 10^18 (integer), or radians with --radians")
    p.add_argument("--radians", action="store_true", help="interpret ANGLE as a decimal number of radians")
    p.add_argument("--decimal", action="store_true", help="print the result as a decimal instead of an integer")
    args = p.parse_args(argv)

    try:
        angle = parse_angle(args.angle, radians=args.radians)
    except ValueError as e:
        print(f"Error: invalid angle {args.angle!r}: {e}", file=sys.stderr)
        return 2

    fn = getattr(trig, name)
    v = fn(angle)
    print(format_fixed(v) if args.decimal else v)
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="fixtrig", description="Integer-only fixed-point sine/cosine toolkit.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("sin", help="sin(angle) with angle in radians * 10^18")
    sub.add_parser("cos", help="cos(angle) with angle in radians * 10^18")

    # design tools
    sub.add_parser("quarter-table", help="Generate (or --check) the embedded quarter-sine table.")

    # diagnostics
    sub.add_parser("accuracy", help="Measure sin/cos error against float math (needs numpy).")

    args, rest = p.parse_known_args(argv)

    if args.cmd in ("sin", "cos"):
        return cmd_trig(args.cmd, rest)

    if args.cmd == "quarter-table":
        return _run_module_main("fixtrig.design.quarter_table", rest)

    if args.cmd == "accuracy":
        return _run_module_main("fixtrig.diagnostics.accuracy", rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
