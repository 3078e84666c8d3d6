import pytest

from dsalgo.sorting import (
    MergeStep,
    bubble_sort,
    format_merge_trace,
    merge_sort,
    merge_sort_steps,
)

FIRST = [64, 34, 25, 12, 22, 11, 90]
SECOND = [38, 27, 43, 3, 9, 82, 10]


@pytest.mark.parametrize(
    "values",
    [FIRST, SECOND, [], [5], [2, 1], [3, 3, 1, 3], list(range(10, 0, -1)), [1, 2, 3]],
)
def test_sorts_match_builtin(values):
    assert bubble_sort(values) == sorted(values)
    assert merge_sort(values) == sorted(values)


def test_input_not_mutated():
    values = list(FIRST)
    bubble_sort(values)
    assert values == FIRST
    merge_sort(values)
    assert values == FIRST


def test_accepts_iterables():
    assert bubble_sort(iter(SECOND)) == sorted(SECOND)
    assert merge_sort(iter(SECOND)) == sorted(SECOND)


def test_steps_start_with_whole_range_split():
    steps = list(merge_sort_steps(SECOND))
    assert steps[0] == MergeStep("split", 0, len(SECOND) - 1, 0, tuple(SECOND))


def test_steps_end_with_whole_range_merge():
    steps = list(merge_sort_steps(SECOND))
    assert steps[-1] == MergeStep(
        "merge", 0, len(SECOND) - 1, 0, tuple(sorted(SECOND))
    )


def test_split_and_merge_counts():
    steps = list(merge_sort_steps(SECOND))
    splits = [s for s in steps if s.kind == "split"]
    merges = [s for s in steps if s.kind == "merge"]
    assert len(splits) == len(merges) == len(SECOND) - 1


def test_every_merge_is_sorted():
    for step in merge_sort_steps(FIRST):
        if step.kind == "merge":
            assert list(step.values) == sorted(step.values)
            assert len(step.values) == step.right - step.left + 1


def test_no_steps_for_trivial_input():
    assert list(merge_sort_steps([5])) == []
    assert list(merge_sort_steps([])) == []


def test_trace_first_line():
    lines = format_merge_trace(SECOND).splitlines()
    assert lines[0] == "分割: [0..6] 38 27 43 3 9 82 10"


def test_trace_last_line():
    lines = format_merge_trace(SECOND).splitlines()
    assert lines[-1] == "マージ: [0..6] 3 9 10 27 38 43 82"


def test_trace_indentation_follows_depth():
    lines = format_merge_trace(SECOND).splitlines()
    for line, step in zip(lines, merge_sort_steps(SECOND)):
        assert line.startswith("  " * step.depth)
        assert not line[2 * step.depth :].startswith(" ")