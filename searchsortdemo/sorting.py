"""Classic character sorting algorithms with timing and an interactive menu."""

from __future__ import annotations

import argparse
import os
import subprocess
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass

DEFAULT_NAME = "Jane Example Student"
DEFAULT_ID = "0420135"

_MENU = "\n".join(
    [
        "+===================+",
        "| Sorting Algorithm |",
        "+===================+",
        "| 1. Insertion Sort |",
        "| 2. Merge Sort     |",
        "| 3. Shell Sort     |",
        "| 4. Bubble Sort    |",
        "| 5. Quick Sort     |",
        "| 6. Selection Sort |",
        "| 7. Exit           |",
        "+===================+",
    ]
)


@dataclass(frozen=True)
class SortResult:
    """The outcome of a timed sort."""

    name: str
    before: str
    after: str
    seconds: float

    def __str__(self) -> str:
        return f"{self.name} took {self.seconds:.10f} seconds"


def insertion_sort(text: str) -> str:
    """Return ``text`` with its characters sorted by insertion sort."""
    chars = list(text)
    for i in range(1, len(chars)):
        key = chars[i]
        j = i - 1
        while j >= 0 and chars[j] > key:
            chars[j + 1] = chars[j]
            j -= 1
        chars[j + 1] = key
    return "".join(chars)


def _merge_sorted(left: list[str], right: list[str]) -> list[str]:
    merged: list[str] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def _merge_sort(chars: list[str]) -> list[str]:
    if len(chars) <= 1:
        return chars
    mid = (len(chars) - 1) // 2 + 1
    return _merge_sorted(_merge_sort(chars[:mid]), _merge_sort(chars[mid:]))


def merge_sort(text: str) -> str:
    """Return ``text`` with its characters sorted by merge sort."""
    return "".join(_merge_sort(list(text)))


def shell_sort(text: str) -> str:
    """Return ``text`` with its characters sorted by Shell sort with halving gaps."""
    chars = list(text)
    n = len(chars)
    gap = n // 2
    while gap > 0:
        for i in range(gap, n):
            temp = chars[i]
            j = i
            while j >= gap and chars[j - gap] > temp:
                chars[j] = chars[j - gap]
                j -= gap
            chars[j] = temp
        gap //= 2
    return "".join(chars)


def bubble_sort(text: str) -> str:
    """Return ``text`` with its characters sorted by bubble sort."""
    chars = list(text)
    n = len(chars)
    for i in range(n - 1):
        swapped = False
        for j in range(n - i - 1):
            if chars[j] > chars[j + 1]:
                chars[j], chars[j + 1] = chars[j + 1], chars[j]
                swapped = True
        if not swapped:
            break
    return "".join(chars)


def _partition(chars: list[str], low: int, high: int) -> int:
    pivot = chars[high]
    i = low - 1
    for j in range(low, high):
        if chars[j] <= pivot:
            i += 1
            chars[i], chars[j] = chars[j], chars[i]
    chars[i + 1], chars[high] = chars[high], chars[i + 1]
    return i + 1


def _quick_sort(chars: list[str], low: int, high: int) -> None:
    if low < high:
        pivot_index = _partition(chars, low, high)
        _quick_sort(chars, low, pivot_index - 1)
        _quick_sort(chars, pivot_index + 1, high)


def quick_sort(text: str) -> str:
    """Return ``text`` with its characters sorted by quicksort (last-element pivot)."""
    chars = list(text)
    _quick_sort(chars, 0, len(chars) - 1)
    return "".join(chars)


def selection_sort(text: str) -> str:
    """Return ``text`` with its characters sorted by selection sort."""
    chars = list(text)
    n = len(chars)
    for i in range(n - 1):
        min_index = min(range(i, n), key=chars.__getitem__)
        chars[i], chars[min_index] = chars[min_index], chars[i]
    return "".join(chars)


def time_sort(sort_func: Callable[[str], str], text: str, sort_name: str) -> SortResult:
    """Run ``sort_func`` on ``text`` and record how long it took."""
    start = time.perf_counter()
    after = sort_func(text)
    elapsed = time.perf_counter() - start
    return SortResult(name=sort_name, before=text, after=after, seconds=elapsed)


def clear_screen() -> None:
    """Clear the terminal window."""
    command = ["cmd", "/c", "cls"] if os.name == "nt" else ["clear"]
    try:
        subprocess.run(command, check=False)
    except OSError:
        pass


_CHOICES: dict[int, tuple[str, Callable[[str], str], str]] = {
    1: ("Insertion Sort", insertion_sort, DEFAULT_NAME),
    2: ("Merge Sort", merge_sort, DEFAULT_NAME),
    3: ("Shell Sort", shell_sort, DEFAULT_NAME),
    4: ("Bubble Sort", bubble_sort, DEFAULT_ID),
    5: ("Quick Sort", quick_sort, DEFAULT_ID),
    6: ("Selection Sort", selection_sort, DEFAULT_ID),
}


def _read_choice() -> int | None:
    answer = input("Masukkan Pilihan: ")
    try:
        return int(answer.strip())
    except ValueError:
        return None


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive sorting menu."""
    parser = argparse.ArgumentParser(
        prog="sorting",
        description="Interactive demonstration of classic sorting algorithms.",
    )
    parser.parse_args(argv)

    while True:
        print(_MENU)
        try:
            choice = _read_choice()
        except EOFError:
            return 0
        entry = _CHOICES.get(choice) if choice is not None else None
        if entry is not None:
            sort_name, sort_func, data = entry
            print(f"Data Sebelum Diurutkan: {data}")
            result = time_sort(sort_func, data, sort_name)
            print(result)
            print(f"Data Setelah Diurutkan: {result.after}")
        elif choice == 7:
            print("Terima Kasih")
        else:
            print("Opsi Tidak Valid. Silahkan Coba Lagi.")
        print("\nPress any key to continue...")
        try:
            input()
        except EOFError:
            return 0
        clear_screen()
        if choice == 7:
            return 0