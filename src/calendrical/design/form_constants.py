"""
calendrical.design.form_constants
---------------------------------
Offline derivation of closed-form constants.

Given one cycle of month (or year) lengths, find the quasi-affine form
(a, b, r) with the smallest denominator b such that

    floor((a x + r) / b) == number of days before unit x

for every x of the cycle, then optionally push it through a Troesch map.

Example, the Gregorian months counted from March (February excluded):

    calendrical derive 31,30,31,30,31,31,30,31,30,31,31
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence

import numpy as np

from ..geometry.forms import QuasiAffineForm
from ..geometry.troesch import TroeschMap

logger = logging.getLogger(__name__)


def cumulative_days(lengths: Sequence[int]) -> np.ndarray:
    """Days before each unit: 0, l0, l0 + l1, ... (len(lengths) + 1 values)."""
    return np.concatenate(([0], np.cumsum(np.asarray(lengths, dtype=np.int64))))


def fit_form(lengths: Sequence[int], max_denominator: int = 64) -> Optional[QuasiAffineForm]:
    """Smallest-denominator form reproducing the cumulative lengths, or None."""
    if len(lengths) == 0:
        raise ValueError("Need at least one length")
    if min(lengths) <= 0:
        raise ValueError("Lengths must be positive")

    values = cumulative_days(lengths)
    x = np.arange(values.size, dtype=np.int64)
    lo, hi = min(lengths), max(lengths)

    for b in range(1, max_denominator + 1):
        r = np.arange(b, dtype=np.int64)[:, None]
        # a / b lies between the shortest and the longest unit.
        for a in range(b * lo, b * hi + 1):
            ok = np.all((a * x[None, :] + r) // b == values[None, :], axis=1)
            hits = np.flatnonzero(ok)
            if hits.size:
                form = QuasiAffineForm(a, b, int(hits[0]))
                logger.debug("fitted %s after trying b <= %s", form, b)
                return form
    return None


def parse_lengths(s: str) -> List[int]:
    out = [int(x) for x in s.replace(" ", "").split(",") if x]
    if not out:
        raise SystemExit("lengths must be a comma-separated list of integers")
    return out


def parse_troesch(s: str) -> TroeschMap:
    parts = s.split(",")
    if len(parts) != 3:
        raise SystemExit("--troesch expects SHEAR,COMPLEMENT,TRANSLATION, e.g. 30,1,2")
    shear, complement, translation = (int(p) for p in parts)
    return TroeschMap(shear, bool(complement), translation)


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(
        prog="calendrical derive",
        description="Fit a quasi-affine form to a cycle of month or year lengths.",
    )
    p.add_argument("lengths", help="Comma-separated lengths, e.g. 365,365,365,366")
    p.add_argument("--max-denominator", type=int, default=64)
    p.add_argument("--troesch", default=None, help="Apply a Troesch map SHEAR,COMPLEMENT,TRANSLATION")
    args = p.parse_args(argv)

    lengths = parse_lengths(args.lengths)
    form = fit_form(lengths, args.max_denominator)
    if form is None:
        print(f"No form with denominator <= {args.max_denominator} fits {lengths}")
        return 1

    print(f"Lengths   : {lengths}")
    print(f"Form      : floor(({form.a} x + {form.remainder}) / {form.b})")
    print(f"Slope     : {form.slope} ({float(form.slope):.6f} days per unit)")
    print(f"Codes     : {list(form.codes(0, len(lengths)))}")

    if args.troesch is not None:
        tmap = parse_troesch(args.troesch)
        try:
            image = tmap.apply(form)
        except ValueError as e:
            raise SystemExit(f"Troesch map not applicable: {e}")
        print(f"Troesch   : {tmap}")
        print(f"Image     : floor(({image.a} x + {image.remainder}) / {image.b})")
        print(f"Back      : {tmap.apply_back(image)}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
