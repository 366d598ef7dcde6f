import pytest

from algorithms.bars import make_bars, is_sorted, BAR_COUNT, BAR_MIN, BAR_MAX
from algorithms.step import PAUSE_INTRO, PAUSE_STEP, PAUSE_NONE


def test_make_bars_shape():
    bars = make_bars(seed=3)
    assert len(bars) == BAR_COUNT
    assert all(BAR_MIN <= v <= BAR_MAX for v in bars)
    assert make_bars(seed=3) == bars


@pytest.mark.parametrize("algo", ["bubble", "merge"])
@pytest.mark.parametrize("seed", range(8))
def test_sort_produces_sorted_permutation(record, algo, seed):
    original = make_bars(seed=seed)
    rec = record(algo, data=list(original))
    assert rec.metrics.is_sorted
    assert sorted(original) == list(rec.run.data)
    assert list(rec.steps[-1].values) == sorted(original)


@pytest.mark.parametrize("algo", ["bubble", "merge"])
def test_sort_handles_duplicates_and_reverse_order(record, algo):
    data = [5, 3, 5, 1, 3, 9, 9, 0, 2, 2]
    rec = record(algo, data=list(data))
    assert list(rec.run.data) == sorted(data)
    rec = record(algo, data=list(range(20, 0, -1)))
    assert list(rec.run.data) == list(range(1, 21))


def test_bubble_shows_every_comparison(record):
    rec = record("bubble", seed=11)
    n = BAR_COUNT
    steps = rec.steps
    assert steps[0].pause == PAUSE_INTRO and steps[0].highlights == ()
    assert steps[-1].pause == PAUSE_NONE and steps[-1].highlights == ()
    comparisons = steps[1:-1]
    assert len(comparisons) == n * (n - 1) // 2
    assert all(s.pause == PAUSE_STEP for s in comparisons)
    assert comparisons[0].highlights == (0, 1)
    assert comparisons[n - 2].highlights == (n - 2, n - 1)
    assert comparisons[n - 1].highlights == (0, 1)


def test_bubble_does_not_stop_early_on_sorted_input(record):
    rec = record("bubble", data=[1, 2, 3, 4, 5])
    assert len(rec.steps) == 1 + 10 + 1


def test_merge_renders_every_write(record):
    rec = record("merge", data=[8, 7, 6, 5, 4, 3, 2, 1])
    writes = rec.steps[1:-1]
    # 8 elements, 3 merge levels, every element written once per level
    assert len(writes) == 24
    assert all(len(s.highlights) == 1 for s in writes)
    # the very first merge is a[0..1]
    assert [s.highlights[0] for s in writes[:2]] == [0, 1]
    assert writes[1].values[:2] == (7, 8)


def test_merge_keeps_equal_keys_in_order(record):
    rec = record("merge", data=[2, 1, 2, 1])
    assert list(rec.run.data) == [1, 1, 2, 2]


@pytest.mark.parametrize("data", [[], [42]])
def test_merge_trivial_ranges_do_not_render(record, data):
    rec = record("merge", data=list(data))
    assert [s.pause for s in rec.steps] == [PAUSE_INTRO, PAUSE_NONE]
    assert rec.log == ["Merge: start", "Merge: done"]


def test_sort_logs(record):
    assert record("bubble", seed=0).log == ["Bubble: start", "Bubble: done"]


def test_snapshots_are_independent_of_later_mutation(record):
    rec = record("bubble", data=[3, 2, 1])
    assert rec.steps[0].values == (3, 2, 1)
    assert rec.steps[-1].values == (1, 2, 3)


def test_is_sorted():
    assert is_sorted([])
    assert is_sorted([1, 1, 2])
    assert not is_sorted([2, 1])
