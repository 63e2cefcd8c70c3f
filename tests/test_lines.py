# tests/test_lines.py
import pytest

from maxfile.utils.lines import count_non_empty_lines
from maxfile.utils.indexing import index_of_max

# --- Test 1: Line counting ---

@pytest.mark.parametrize("text, expected", [
    ("", 0),
    ("\n", 0),
    ("a\nb", 2),
    ("a\n\nb", 2),
    ("a\nb\n", 2),
])
def test_count_non_empty_lines(text, expected):
    assert count_non_empty_lines(text) == expected

def test_carriage_return_is_not_stripped():
    # A line holding only '\r' has length 1
    assert count_non_empty_lines("\r\n\r\n") == 2
    assert count_non_empty_lines("a\r\nb\r\n") == 2

def test_whitespace_only_lines_count():
    assert count_non_empty_lines("  \n\t\n") == 2

# --- Test 2: Index of max ---

def test_index_of_max_first_of_ties():
    assert index_of_max([3, 1, 3, 2]) == 0

def test_index_of_max_single_value():
    assert index_of_max([0]) == 0

def test_index_of_max_last_position():
    assert index_of_max([1, 2, 5]) == 2

def test_index_of_max_floats_and_negatives():
    assert index_of_max([-3.5, -1.0, -2.0]) == 1

@pytest.mark.parametrize("values", [
    [5, 5, 5],
    [0, 7, 2, 7, 1],
    [2, 9, 9, 4, 9],
    [1],
])
def test_index_of_max_is_smallest_index_of_largest(values):
    i = index_of_max(values)
    assert all(values[i] >= v for v in values)
    assert all(values[j] < values[i] for j in range(i))

def test_index_of_max_empty_raises():
    with pytest.raises(ValueError):
        index_of_max([])
