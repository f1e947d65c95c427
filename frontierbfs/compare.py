"""Checks that compare a candidate result array with a reference one."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import Callable, Sequence, TypeVar

EPSILON = 0.00000000001

T = TypeVar("T")


@dataclass(frozen=True)
class Mismatch:
    """The first position at which two result arrays differ."""

    index: int
    expected: object
    found: object

    def __str__(self) -> str:
        return (
            f"*** Results disagree at {self.index} expected {self.expected} "
            f"found {self.found}"
        )


def _check_lengths(reference: Sequence, candidate: Sequence) -> None:
    if len(reference) != len(candidate):
        raise ValueError(
            f"result lengths differ: {len(reference)} and {len(candidate)}"
        )


def _mismatches(
    reference: Sequence[T],
    candidate: Sequence[T],
    differ: Callable[[T, T], bool],
):
    _check_lengths(reference, candidate)
    for index, (expected, found) in enumerate(zip(reference, candidate)):
        if differ(expected, found):
            yield Mismatch(index, expected, found)


def find_mismatch(reference: Sequence, candidate: Sequence) -> Mismatch | None:
    """Return the first position where the arrays differ, or None."""
    return next(_mismatches(reference, candidate, lambda a, b: a != b), None)


def _report(mismatch: Mismatch | None) -> bool:
    if mismatch is None:
        return True
    print(mismatch, file=sys.stderr)
    return False


def compare_arrays(reference: Sequence, candidate: Sequence) -> bool:
    """True if the arrays are equal; report the first difference on stderr."""
    return _report(find_mismatch(reference, candidate))


def compare_approx(reference: Sequence[float], candidate: Sequence[float]) -> bool:
    """True if every pair of values is within EPSILON of each other."""
    first = next(
        _mismatches(reference, candidate, lambda a, b: math.fabs(a - b) > EPSILON),
        None,
    )
    return _report(first)


def compare_radii_estimate(reference: Sequence[int], candidate: Sequence[int]) -> bool:
    """Check every value and the maximum; report each difference on stderr."""
    correct = True
    for mismatch in _mismatches(reference, candidate, lambda a, b: a != b):
        print(mismatch, file=sys.stderr)
        correct = False
    stu_max = max(candidate, default=-1)
    ref_max = max(reference, default=-1)
    stu_max = max(stu_max, -1)
    ref_max = max(ref_max, -1)
    if ref_max != stu_max:
        print(
            f"*** Radius estimates differ. Expected: {ref_max} Got: {stu_max}",
            file=sys.stderr,
        )
        correct = False
    return correct


def format_grid(values: Sequence[int]) -> str:
    """Lay values out in the largest square grid that fits, two digits each."""
    dim = math.isqrt(len(values))
    return "".join(
        "".join(f"{values[row * dim + col]:02d} " for col in range(dim)) + "\n"
        for row in range(dim)
    )