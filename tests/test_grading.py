import pytest

from frontierbfs.grading import (
    GRADE_GRAPHS,
    MAX_SCORES_LARGE,
    MAX_SCORES_SMALL,
    compute_score,
    format_score_table,
    max_scores_for,
)


def test_equal_times_give_full_score():
    assert compute_score(True, 1.0, 1.0) == pytest.approx(1.0)


def test_incorrect_scores_zero():
    assert compute_score(False, 5.0, 1.0) == 0.0


def test_slow_correct_keeps_correctness_share():
    assert compute_score(True, 1.0, 100.0) == pytest.approx(0.2)


def test_zero_student_time_is_capped():
    assert compute_score(True, 1.0, 0.0) == pytest.approx(1.0)


@pytest.mark.parametrize("stu_time", [0.5, 1.0, 1.5, 2.0, 2.5, 3.0, 4.0, 10.0])
def test_score_bounds(stu_time):
    score = compute_score(True, 1.0, stu_time)
    assert 0.2 <= score <= 1.0


def test_score_is_monotonic_in_speed():
    times = [1.0, 1.5, 2.0, 2.5, 3.0, 3.5]
    values = [compute_score(True, 1.0, t) for t in times]
    assert values == sorted(values, reverse=True)


def test_max_scores_small_and_large():
    assert max_scores_for("grid1000x1000.graph") == MAX_SCORES_SMALL
    assert max_scores_for("com-orkut_117m.graph") == (2, 3, 3)
    assert max_scores_for("rmat_200m.graph") == (7, 8, 8)
    assert max_scores_for("other.graph") == MAX_SCORES_LARGE


def test_full_scores_total_seventy():
    table = format_score_table(list(GRADE_GRAPHS), [[1.0, 1.0, 1.0]] * len(GRADE_GRAPHS))
    total_line = [line for line in table.splitlines() if line.startswith("TOTAL")][0]
    assert total_line.endswith("|  70.00 / 70 |")


def test_table_layout():
    table = format_score_table(["grid1000x1000.graph"], [[1.0, 0.0, 0.5]])
    lines = table.split("\n")
    assert lines[0] == "" and lines[1] == ""
    assert lines[2] == "-" * 74
    assert lines[3] == "SCORES :" + " " * 20 + "|   Top-Down    |   Bott-Up    |    Hybrid    |"
    row = lines[5]
    assert row.startswith("grid1000x1000.graph" + " " * (28 - len("grid1000x1000.graph")) + "| ")
    assert "     2.00 / 2 |" in row
    assert "     0.00 / 3 |" in row
    assert table.endswith("-" * 74 + "\n")


def test_table_rejects_mismatched_rows():
    with pytest.raises(ValueError):
        format_score_table(["a.graph", "b.graph"], [[1.0, 1.0, 1.0]])