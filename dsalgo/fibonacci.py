"""Several ways of computing Fibonacci numbers, and a timer to compare them."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass


def fibonacci_naive(n: int) -> int:
    """Plain exponential-time recursion."""
    if n <= 1:
        return n
    return fibonacci_naive(n - 1) + fibonacci_naive(n - 2)


def fibonacci_memo(n: int) -> int:
    """Top-down recursion with memoisation."""
    memo: dict[int, int] = {}

    def fib(k: int) -> int:
        if k <= 1:
            return k
        if k not in memo:
            memo[k] = fib(k - 1) + fib(k - 2)
        return memo[k]

    return fib(n)


def fibonacci_dp(n: int) -> int:
    """Bottom-up tabulation."""
    if n <= 1:
        return n
    table = [0, 1]
    for i in range(2, n + 1):
        table.append(table[i - 1] + table[i - 2])
    return table[n]


def fibonacci_optimized(n: int) -> int:
    """Bottom-up iteration keeping only the last two values."""
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(2, n + 1):
        previous, current = current, previous + current
    return current


def fibonacci_sequence(n: int) -> list[int]:
    """The first *n* Fibonacci numbers, F(0) through F(n-1)."""
    return [fibonacci_optimized(i) for i in range(n)]


@dataclass(frozen=True)
class Timing:
    """The result of one timed Fibonacci computation."""

    n: int
    result: int
    seconds: float

    def __str__(self) -> str:
        return f"F({self.n}) = {self.result}, 実行時間: {self.seconds:f}秒"


def measure_time(func: Callable[[int], int], n: int) -> Timing:
    """Run ``func(n)`` and report its result and elapsed processor time."""
    start = time.process_time()
    result = func(n)
    elapsed = time.process_time() - start
    return Timing(n, result, elapsed)