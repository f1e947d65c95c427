"""Scoring of search results against reference timings, and the score table."""

from __future__ import annotations

import math
from typing import Sequence

GRADE_GRAPHS = (
    "grid1000x1000.graph",
    "soc-livejournal1_68m.graph",
    "com-orkut_117m.graph",
    "random_500m.graph",
    "rmat_200m.graph",
)

SMALL_GRAPHS = frozenset(GRADE_GRAPHS[:3])

MAX_SCORES_SMALL = (2, 3, 3)
MAX_SCORES_LARGE = (7, 8, 8)
TOTAL_POINTS = 70

MAX_SCORE = 1.0
MAX_PERF_SCORE = 0.8 * MAX_SCORE
CORRECTNESS_SCORE = 0.2 * MAX_SCORE
_LOW_RATIO = 0.3
_HIGH_RATIO = 0.7

_SEPARATOR = "-" * 74
_NAME_WIDTH = 28
_TABLE_HEADER = "|   Top-Down    |   Bott-Up    |    Hybrid    |"


def compute_score(correct: bool, ref_time: float, stu_time: float) -> float:
    """Score one run between 0 and 1 from correctness and the speed ratio.

    A correct result earns the correctness share; the performance share grows
    linearly with ``ref_time / stu_time`` and is clamped to its maximum.
    """
    correctness = CORRECTNESS_SCORE if correct else 0.0
    if not correct:
        return correctness
    ratio = ref_time / stu_time if stu_time else math.inf
    slope = MAX_PERF_SCORE / (_HIGH_RATIO - _LOW_RATIO)
    offset = _LOW_RATIO * slope
    perf = ratio * slope - offset
    perf = min(max(perf, 0.0), MAX_PERF_SCORE)
    return correctness + perf


def max_scores_for(graph_name: str) -> tuple[int, int, int]:
    """Points available for top-down, bottom-up and hybrid on ``graph_name``."""
    return MAX_SCORES_SMALL if graph_name in SMALL_GRAPHS else MAX_SCORES_LARGE


def format_score_table(
    graph_names: Sequence[str], scores: Sequence[Sequence[float]]
) -> str:
    """Render the per-graph score table with its total line."""
    if len(graph_names) != len(scores):
        raise ValueError("one row of scores is needed for each graph")

    lines = ["", "", _SEPARATOR, "SCORES :" + " " * (_NAME_WIDTH - 8) + _TABLE_HEADER, _SEPARATOR]
    total = 0.0
    for name, row in zip(graph_names, scores):
        if len(row) != 3:
            raise ValueError(f"expected three scores for {name}, found {len(row)}")
        maxima = max_scores_for(name)
        weighted = [score * points for score, points in zip(row, maxima)]
        total += sum(weighted)
        cells = "".join(
            f"     {value:.2f} / {points} |" for value, points in zip(weighted, maxima)
        )
        lines.append(name + " " * max(0, _NAME_WIDTH - len(name)) + "| " + cells)
        lines.append(_SEPARATOR)

    lines.append("TOTAL" + " " * (59 - 5) + "|  " + f"{total:.2f} / {TOTAL_POINTS} |")
    lines.append(_SEPARATOR)
    return "\n".join(lines) + "\n"