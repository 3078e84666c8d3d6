"""Activity selection and the fractional knapsack problem."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Activity:
    """An activity occupying the interval ``[start, finish]``."""

    start: int
    finish: int
    id: int


@dataclass(frozen=True)
class Item:
    """A divisible item for the knapsack."""

    weight: int
    value: int
    id: int

    @property
    def ratio(self) -> float:
        """Value per unit of weight."""
        return self.value / self.weight


@dataclass(frozen=True)
class KnapsackPick:
    """The share of one item placed in the knapsack."""

    item: Item
    fraction: float
    value: float


@dataclass(frozen=True)
class KnapsackResult:
    """Items in descending ratio order, what was taken, and the total value."""

    ordered_items: list[Item]
    picks: list[KnapsackPick] = field(default_factory=list)
    total_value: float = 0.0


def _by_finish(activities: Iterable[Activity]) -> list[Activity]:
    return sorted(activities, key=lambda activity: activity.finish)


def select_activities_greedy(activities: Iterable[Activity]) -> list[Activity]:
    """Pick non-overlapping activities by always taking the earliest finisher."""
    selected: list[Activity] = []
    for activity in _by_finish(activities):
        if not selected or activity.start >= selected[-1].finish:
            selected.append(activity)
    return selected


def count_activities_dp(activities: Iterable[Activity]) -> int:
    """The largest number of mutually compatible activities, by dynamic programming."""
    ordered = _by_finish(activities)
    best: list[int] = []
    for i, activity in enumerate(ordered):
        skip = best[i - 1] if i else 0
        take = 1 + next(
            (best[j] for j in range(i - 1, -1, -1) if ordered[j].finish <= activity.start),
            0,
        )
        best.append(max(skip, take))
    return best[-1] if best else 0


def fractional_knapsack(items: Iterable[Item], capacity: int) -> KnapsackResult:
    """Fill *capacity* greedily by value density, splitting the last item if needed."""
    pool = list(items)
    for item in pool:
        if item.weight <= 0:
            raise ValueError(f"item {item.id} must have a positive weight")
    ordered = sorted(pool, key=lambda item: item.ratio, reverse=True)
    picks: list[KnapsackPick] = []
    total = 0.0
    used = 0
    for item in ordered:
        if used + item.weight <= capacity:
            used += item.weight
            total += item.value
            picks.append(KnapsackPick(item, 1.0, float(item.value)))
            continue
        remaining = capacity - used
        if remaining > 0:
            fraction = remaining / item.weight
            share = item.value * fraction
            total += share
            picks.append(KnapsackPick(item, fraction, share))
        break
    return KnapsackResult(ordered, picks, total)