import pytest

from algolab.stack_algos import (
    has_redundant_brackets,
    insert_at_bottom,
    insert_sorted,
    middle_element,
    next_smaller,
    reverse_stack,
    sort_stack,
)


@pytest.mark.parametrize(
    "expression, expected",
    [
        ("((a+b))", True),
        ("(a+b)", False),
        ("(a)", True),
        ("a+b", False),
        ("((a+b)*c)", False),
        ("(a*(b))", True),
    ],
)
def test_has_redundant_brackets(expression, expected):
    assert has_redundant_brackets(expression) is expected


def test_unmatched_closing_bracket_raises():
    with pytest.raises(ValueError):
        has_redundant_brackets("a+b)")


def test_insert_at_bottom_places_element_first():
    stack = [10, 20, 30]
    result = insert_at_bottom(stack, 25)
    assert result == [25, 10, 20, 30]
    assert stack == [10, 20, 30]


def test_insert_at_bottom_of_empty_stack():
    assert insert_at_bottom([], 7) == [7]


def test_reverse_stack_reverses_order():
    stack = [10, 20, 2, 30, 40, 5]
    assert reverse_stack(stack) == stack[::-1]


def test_reverse_stack_twice_is_identity():
    stack = [3, 1, 4, 1, 5]
    assert reverse_stack(reverse_stack(stack)) == stack


def test_insert_sorted_keeps_order():
    result = insert_sorted([2, 5, 10, 20, 30, 40], 25)
    assert result == [2, 5, 10, 20, 25, 30, 40]


def test_insert_sorted_into_empty_stack():
    assert insert_sorted([], 25) == [25]


def test_sort_stack_puts_largest_on_top():
    stack = [10, 20, 2, 30, 40, 5]
    result = sort_stack(stack)
    assert result == sorted(stack)
    assert result[-1] == 40


def test_sort_stack_keeps_duplicates():
    stack = [4, 1, 4, 2, 1]
    assert sort_stack(stack) == sorted(stack)


def test_middle_element_even_size():
    assert middle_element([10, 20, 30, 40, 50, 60, 70, 80]) == 50


def test_middle_element_odd_size():
    assert middle_element([10, 20, 30, 40, 50]) == 30


def test_middle_element_single_item():
    assert middle_element([10]) == 10


def test_middle_element_empty_raises():
    with pytest.raises(IndexError):
        middle_element([])


def test_next_smaller_source_example():
    assert next_smaller([8, 4, 6, 2, 3]) == [4, 2, 2, -1, -1]


def test_next_smaller_last_is_always_missing():
    values = [5, 9, 1, 7]
    result = next_smaller(values)
    assert len(result) == len(values)
    assert result[-1] == -1


def test_next_smaller_increasing_has_none():
    assert next_smaller([1, 2, 3, 4]) == [-1, -1, -1, -1]


def test_next_smaller_values_are_not_greater():
    values = [8, 9, 7, 4, 5, 6]
    for value, found in zip(values, next_smaller(values)):
        assert found == -1 or found <= value


def test_next_smaller_empty():
    assert next_smaller([]) == []