"""Sequential and binary search over random integers, with an interactive menu."""

from __future__ import annotations

import argparse
import os
import random
import subprocess
from collections.abc import Sequence

_MENU = "\n".join(
    [
        "Pilih menu",
        "1. Sequential Searching",
        "2. Binary Searching",
        "3. Jelaskan Perbedaan Sequential Searching dan Binary Searching!",
        "4. Exit",
    ]
)

_EXPLANATION = "\n".join(
    [
        "",
        "PERBEDAAN SEQUENTIAL/LINEAR SEARCH DENGAN BINARY SEARCH",
        "SEQUENTIAL SEARCH: ",
        "> Melakukan pengecekan pada array melalui traversal indeks.",
        "> Jika elemen pada array yang dicari sama dengan elemen target, maka cetak nilai indeks.",
        "> Kompleksitas Waktu: O(n), karena penggunaan fungsi loop `for` untuk pencarian target secara traversal.",
        "> Kompleksitas Ruang: O(1), karena penggunaan memori konstan.",
        "LINEAR SEARCH tidak memiliki syarat tertentu.",
        "LINEAR SEARCH dapat diterapkan pada: ",
        "1. Data yang Tidak Terurut",
        "2. Data berukuran kecil",
        "3. Pencarian Node Pada Linked List",
        "",
        "BINARY SEARCH: ",
        "> Membagi array menjadi dua bagian melalui indeks tengah `mid`.",
        "> Bandingkan elemen tengah dengan elemen target.",
        "> Jika elemen tengah sama dengan elemen target, elemen pada array sudah ditemukan.",
        "> Jika elemen tengah kurang dari elemen target, cari di bagian kanan array.",
        "> Jika elemen tengah lebih dari elemen target, cari di bagian kiri array.",
        "> Ulangi kedua tahap di atas sehingga elemen target ditemukan.",
        "> Kompleksitas Waktu: O(log n), karena pembagian interval waktu pencarian.",
        "> Kompleksitas Ruang: O(1), karena penggunaan memori konstan.",
        "SYARAT BINARY SEARCH: array harus tersortir terlebih dahulu.",
        "BINARY SEARCH dapat diterapkan pada: ",
        "1. Machine Learning",
        "2. Computer Graphics (algoritma untuk ray tracing atau texture mapping)",
        "3. Pencarian data pada dataset besar",
    ]
)

_CONTINUE_PROMPT = "\nTekan sembarang tombol untuk melanjutkan..."
_TARGET_PROMPT = "Masukkan angka yang ingin dicari: "
_INVALID_NUMBER = "Error: Mohon masukkan bilangan bulat"


def sequential_search(nums: Sequence[int], target: int) -> list[int]:
    """Return every index at which ``target`` occurs, in ascending order."""
    return [index for index, value in enumerate(nums) if value == target]


def binary_search(nums: Sequence[int], target: int) -> int | None:
    """Return an index of ``target`` in the sorted ``nums``, or None if absent."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = low + (high - low) // 2
        value = nums[mid]
        if value == target:
            return mid
        if value < target:
            low = mid + 1
        else:
            high = mid - 1
    return None


def describe_sequential(target: int, indices: Sequence[int]) -> str:
    """Describe the outcome of a sequential search."""
    if not indices:
        return f"angka {target} tidak ditemukan pada array"
    positions = ", ".join(str(index) for index in indices)
    return (
        f"Angka {target} terdapat pada array sebanyak {len(indices)} Kali\n"
        f"Angka {target} ditemukan pada indeks: {positions}."
    )


def describe_binary(target: int, index: int | None) -> str:
    """Describe the outcome of a binary search."""
    if index is None:
        return f"angka {target} tidak ditemukan pada array"
    return f"angka {target} ditemukan pada indeks ke {index}"


def explanation() -> str:
    """Return the text contrasting sequential and binary search."""
    return _EXPLANATION


def generate_numbers(
    count: int, low: int, high: int, rng: random.Random | None = None
) -> list[int]:
    """Return ``count`` random integers drawn uniformly from ``low`` to ``high`` inclusive."""
    if count < 0:
        raise ValueError("count must not be negative")
    if low > high:
        raise ValueError("low must not exceed high")
    source = rng if rng is not None else random.Random()
    return [source.randint(low, high) for _ in range(count)]


def format_numbers(nums: Sequence[int]) -> str:
    """Render numbers as ``value[index]`` items separated by spaces."""
    return " ".join(f"{value}[{index}]" for index, value in enumerate(nums))


def clear_screen() -> None:
    """Clear the terminal window."""
    command = ["cmd", "/c", "cls"] if os.name == "nt" else ["clear"]
    try:
        subprocess.run(command, check=False)
    except OSError:
        pass


def _ask(prompt: str) -> str | None:
    try:
        return input(prompt)
    except EOFError:
        return None


def _parse_int(text: str) -> int | None:
    try:
        return int(text.strip())
    except ValueError:
        return None


class _EndOfInput(Exception):
    """Raised when standard input is exhausted."""


def _ask_int(prompt: str) -> int | None:
    answer = _ask(prompt)
    if answer is None:
        raise _EndOfInput
    return _parse_int(answer)


def _run_sequential(rng: random.Random) -> None:
    nums = generate_numbers(100, 1, 50, rng)
    print("Generating 100 numbers...")
    print(format_numbers(nums))
    target = _ask_int(_TARGET_PROMPT)
    if target is None:
        print(_INVALID_NUMBER)
        return
    print(describe_sequential(target, sequential_search(nums, target)))


def _run_binary(rng: random.Random) -> None:
    size = _ask_int("Masukkan ukuran vector: ")
    if size is None or size < 1:
        print("Error: Mohon masukkan bilangan di atas 0")
        return
    nums = sorted(generate_numbers(size, 1, 100, rng))
    print(f"Generating {size} numbers...")
    print(format_numbers(nums))
    target = _ask_int(_TARGET_PROMPT)
    if target is None:
        print(_INVALID_NUMBER)
        return
    print(describe_binary(target, binary_search(nums, target)))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive searching menu."""
    parser = argparse.ArgumentParser(
        prog="searching",
        description="Interactive demonstration of sequential and binary search.",
    )
    parser.parse_args(argv)
    rng = random.Random()

    try:
        while True:
            print(_MENU)
            choice = _ask_int("Pilih: ")
            if choice == 1:
                _run_sequential(rng)
            elif choice == 2:
                _run_binary(rng)
            elif choice == 3:
                print(explanation())
            elif choice == 4:
                print("\nTERIMA KASIH")
                return 0
            else:
                print("Opsi tidak terdefinisi, mohon masukkan ulang opsi")
            if _ask(_CONTINUE_PROMPT) is None:
                return 0
            clear_screen()
    except _EndOfInput:
        return 0