#!/usr/bin/env python3
from __future__ import annotations

import argparse


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "chronos-ephem[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "chronos-ephem[diagnostics]"') from e


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Plot ΔT (TT-UT) from chronos.reference.deltat.")
    p.add_argument("--y0", type=int, default=-1500, help="start year")
    p.add_argument("--y1", type=int, default=2100, help="end year")
    p.add_argument("--step", type=float, default=1.0, help="sampling step in years")
    p.add_argument("--out", default="deltat.png", help="output image filename")
    p.add_argument("--show-parabola", action="store_true", help="also plot the long-term parabola alone")
    p.add_argument("--show-table", action="store_true", help="scatter the tabulated breakpoints with error bars")
    args = p.parse_args(argv)

    if args.y1 < args.y0:
        raise SystemExit("--y1 must be >= --y0")

    np = _need_numpy()
    plt = _need_matplotlib()

    from chronos.reference import deltat as dt

    ys = np.arange(float(args.y0), float(args.y1) + 1e-12, float(args.step), dtype=float)
    model = np.array([dt.DELTA_T_MODEL.delta_t_seconds(float(y)) for y in ys], dtype=float)

    fig, ax = plt.subplots(figsize=(10, 5))
    ax.plot(ys, model, linewidth=2, label="model (era tables + parabola)")

    if args.show_parabola:
        para = np.array([dt.LONG_TERM.delta_t_seconds(float(y)) for y in ys], dtype=float)
        ax.plot(ys, para, linewidth=1.5, linestyle="--", label="parabola only")

    if args.show_table:
        for era, colour in ((dt.PRE_TELESCOPE_ERA, "tab:orange"), (dt.TELESCOPE_ERA, "tab:green")):
            knots = np.array(era.knots, dtype=float)
            ax.errorbar(knots[:, 0], knots[:, 1], yerr=knots[:, 2], fmt="o", ms=3, color=colour, alpha=0.7)

    ax.set_title("ΔT = TT − UT (seconds)")
    ax.set_xlabel("Year")
    ax.set_ylabel("ΔT (s)")
    ax.grid(True, alpha=0.3)
    ax.legend()
    fig.tight_layout()
    fig.savefig(args.out, dpi=200)
    print(f"Saved: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
