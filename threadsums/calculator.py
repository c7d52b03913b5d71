"""Sum an array by splitting it into ranges that are added up on separate threads."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor

ARRAY_LENGTH = 100
DEFAULT_CHUNKS: tuple[tuple[int, int], ...] = ((0, 24), (25, 49), (50, 74), (75, 99))


def generate_array() -> list[int]:
    """Return the working array: one hundred ones."""
    return [1] * ARRAY_LENGTH


def format_array(arr: Sequence[int], start: int, end: int) -> str:
    """Render the elements from ``start`` up to (not including) ``end``, each followed by a space."""
    return "".join(f"{value} " for value in arr[start:end])


def sum_of(arr: Sequence[int], start: int, end: int) -> int:
    """Return the sum of ``arr[start]`` through ``arr[end]``, both ends included."""
    if start > end:
        return 0
    if start < 0 or end >= len(arr):
        raise IndexError(f"range {start}..{end} is outside an array of length {len(arr)}")
    return sum(arr[start : end + 1])


def threaded_sum(
    arr: Sequence[int], chunks: Iterable[tuple[int, int]] | None = None
) -> list[int]:
    """Sum each inclusive ``(start, end)`` range on its own thread.

    The partial sums come back in the order the ranges were given.
    """
    ranges = list(DEFAULT_CHUNKS if chunks is None else chunks)
    if not ranges:
        return []
    with ThreadPoolExecutor(max_workers=len(ranges)) as pool:
        futures = [pool.submit(sum_of, arr, start, end) for start, end in ranges]
        return [future.result() for future in futures]


def main(argv: Sequence[str] | None = None) -> int:
    """Run the threaded sum over the default array and report the result."""
    del argv  # the command takes no arguments
    arr = generate_array()
    print("threads calculating...")
    partials = threaded_sum(arr)
    for partial in partials:
        print(partial)
    print("threads calculation is over.")
    print("Calculating the sum of every thread...")
    print(f"Calculation is over, the sum of every thread is {sum(partials)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())