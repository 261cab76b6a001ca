import io
from unittest.mock import patch

import pytest
from hypothesis import given
from hypothesis import strategies as st

from searchsortdemo.sorting import (
    DEFAULT_ID,
    DEFAULT_NAME,
    SortResult,
    bubble_sort,
    clear_screen,
    insertion_sort,
    main,
    merge_sort,
    quick_sort,
    selection_sort,
    shell_sort,
    time_sort,
)


@given(text=st.text(max_size=200))
def test_sorts_agree_with_builtin(text):
    expected = "".join(sorted(text))
    assert insertion_sort(text) == expected
    assert merge_sort(text) == expected
    assert shell_sort(text) == expected
    assert bubble_sort(text) == expected
    assert quick_sort(text) == expected
    assert selection_sort(text) == expected


@given(text=st.text(max_size=100))
def test_sort_is_idempotent_and_preserves_characters(text):
    results = [
        (insertion_sort(text), insertion_sort(insertion_sort(text))),
        (merge_sort(text), merge_sort(merge_sort(text))),
        (shell_sort(text), shell_sort(shell_sort(text))),
        (bubble_sort(text), bubble_sort(bubble_sort(text))),
        (quick_sort(text), quick_sort(quick_sort(text))),
        (selection_sort(text), selection_sort(selection_sort(text))),
    ]
    for once, twice in results:
        assert twice == once
        assert sorted(once) == sorted(text)


@pytest.mark.parametrize("text", ["", "z"])
def test_sorts_handle_empty_and_single(text):
    assert insertion_sort(text) == text
    assert merge_sort(text) == text
    assert shell_sort(text) == text
    assert bubble_sort(text) == text
    assert quick_sort(text) == text
    assert selection_sort(text) == text


def test_sorts_pinned_example():
    assert insertion_sort("cba") == "abc"
    assert merge_sort("cba") == "abc"
    assert shell_sort("cba") == "abc"
    assert bubble_sort("cba") == "abc"
    assert quick_sort("cba") == "abc"
    assert selection_sort("cba") == "abc"


@pytest.mark.parametrize("data", [DEFAULT_NAME, DEFAULT_ID])
def test_sorts_agree_on_default_data(data):
    results = {
        insertion_sort(data),
        merge_sort(data),
        shell_sort(data),
        bubble_sort(data),
        quick_sort(data),
        selection_sort(data),
    }
    assert results == {"".join(sorted(data))}


def test_time_sort_records_result():
    result = time_sort(insertion_sort, DEFAULT_NAME, "Insertion Sort")
    assert result.before == DEFAULT_NAME
    assert result.after == insertion_sort(DEFAULT_NAME)
    assert result.name == "Insertion Sort"
    assert result.seconds >= 0


def test_sort_result_formats_ten_decimals():
    result = SortResult(name="Quick Sort", before="ba", after="ab", seconds=0.5)
    assert str(result) == "Quick Sort took 0.5000000000 seconds"


@patch("searchsortdemo.sorting.subprocess.run")
def test_clear_screen_invokes_command(run):
    result = clear_screen()
    assert result in (None, run.return_value)
    assert run.call_count == 1
    assert run.call_args.args[0][-1] in {"cls", "clear"}


def _run_main(monkeypatch, capsys, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    with patch("searchsortdemo.sorting.subprocess.run") as run:
        code = main([])
    return code, capsys.readouterr().out, run


@pytest.mark.parametrize(
    "choice, name, sort_func, data",
    [
        ("1", "Insertion Sort", insertion_sort, DEFAULT_NAME),
        ("2", "Merge Sort", merge_sort, DEFAULT_NAME),
        ("3", "Shell Sort", shell_sort, DEFAULT_NAME),
        ("4", "Bubble Sort", bubble_sort, DEFAULT_ID),
        ("5", "Quick Sort", quick_sort, DEFAULT_ID),
        ("6", "Selection Sort", selection_sort, DEFAULT_ID),
    ],
)
def test_main_runs_each_sort(monkeypatch, capsys, choice, name, sort_func, data):
    code, out, _ = _run_main(monkeypatch, capsys, f"{choice}\n\n7\n\n")
    assert code == 0
    assert f"Data Sebelum Diurutkan: {data}" in out
    assert f"Data Setelah Diurutkan: {sort_func(data)}" in out
    assert f"{name} took " in out


def test_main_invalid_option(monkeypatch, capsys):
    _, out, _ = _run_main(monkeypatch, capsys, "9\n\n7\n\n")
    assert "Opsi Tidak Valid. Silahkan Coba Lagi." in out


def test_main_exit_clears_once(monkeypatch, capsys):
    code, out, run = _run_main(monkeypatch, capsys, "7\n\n")
    assert code == 0
    assert "Terima Kasih" in out
    assert run.call_count == 1


def test_main_stops_at_end_of_input(monkeypatch, capsys):
    code, out, _ = _run_main(monkeypatch, capsys, "")
    assert code == 0
    assert "| Sorting Algorithm |" in out