#!/usr/bin/env python3
from __future__ import annotations

import argparse
import math
import sys
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from fixtrig.angles import SCALE, TWO_PI
from fixtrig.trig import cos, sin


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "fixtrig[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "fixtrig[diagnostics]"') from e


_FUNCS = {
    "sin": (sin, math.sin),
    "cos": (cos, math.cos),
}


@dataclass(frozen=True)
class AccuracyReport:
    func: str
    samples: int
    max_abs_error: float  # in 10^18 units
    rms_error: float
    worst_angle: int


def _check_args(samples: int, func: str) -> None:
    if func not in _FUNCS:
        raise ValueError(f"func must be one of {sorted(_FUNCS)}")
    if samples <= 0:
        raise ValueError("samples must be positive")


def sample_angles(samples: int) -> List[int]:
    """`samples` evenly spaced fixed-point angles over [0, TWO_PI)."""
    return [k * TWO_PI // samples for k in range(samples)]


def error_curve(angles: List[int], func: str = "sin"):
    """Signed error (fixed - exact) per angle, in 10^18 units, as a numpy array."""
    np = _need_numpy()
    fixed, exact = _FUNCS[func]
    got = np.array([fixed(a) for a in angles], dtype=np.float64)
    ref = np.array([exact(a / SCALE) * SCALE for a in angles], dtype=np.float64)
    return got - ref


def sweep(samples: int = 4096, func: str = "sin") -> Tuple[List[int], Any]:
    """(angles, signed error array) over one turn."""
    _check_args(samples, func)
    angles = sample_angles(samples)
    return angles, error_curve(angles, func)


def summarize(func: str, angles: List[int], err) -> AccuracyReport:
    np = _need_numpy()
    abs_err = np.abs(err)
    worst = int(np.argmax(abs_err))
    return AccuracyReport(
        func=func,
        samples=len(angles),
        max_abs_error=float(abs_err[worst]),
        rms_error=float(np.sqrt(np.mean(err**2))),
        worst_angle=angles[worst],
    )


def error_profile(samples: int = 4096, func: str = "sin") -> AccuracyReport:
    angles, err = sweep(samples, func)
    return summarize(func, angles, err)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Measure fixed-point sin/cos against float math.")
    p.add_argument("--samples", type=int, default=4096)
    p.add_argument("--func", choices=sorted(_FUNCS), default="sin")
    p.add_argument("--out-png", default="", help="Optional plot of the error curve")
    args = p.parse_args(argv)

    if args.samples <= 0:
        print("Error: Number of samples must be positive.", file=sys.stderr)
        return 1

    angles, err = sweep(args.samples, args.func)
    rep = summarize(args.func, angles, err)

    print(f"{rep.func}: {rep.samples} samples over [0, 2*pi)")
    print(f"  max |error| = {rep.max_abs_error:.3e} ({rep.max_abs_error / SCALE:.3e} absolute)")
    print(f"  rms error   = {rep.rms_error:.3e}")
    print(f"  worst angle = {rep.worst_angle} ({rep.worst_angle / SCALE:.9f} rad)")

    if args.out_png:
        np = _need_numpy()
        plt = _need_matplotlib()

        x = np.array(angles, dtype=np.float64) / SCALE

        fig, ax = plt.subplots(figsize=(12, 5))
        ax.plot(x, err / SCALE, lw=0.8)
        ax.set_title(f"fixtrig.{args.func} error (fixed - float)")
        ax.set_xlabel("angle (rad)")
        ax.set_ylabel("error")
        ax.grid(True, alpha=0.3)
        fig.tight_layout()
        fig.savefig(args.out_png, dpi=150)
        plt.close(fig)
        print(f"Saved plot to {args.out_png}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
