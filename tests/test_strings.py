import pytest

from cpkit.strings import apply_reversals, char_at_position


def test_apply_reversals_two_segments():
    assert apply_reversals("abcd", [1, 3], [2, 4], [1, 3]) == "badc"


def test_apply_reversals_three_segments():
    assert apply_reversals("abcde", [1, 2, 3], [1, 2, 5], [1, 2, 3]) == "abedc"


def test_single_query_reverses_between_mirror_points():
    s = "abcdef"
    expected = s[:1] + s[1:5][::-1] + s[5:]
    assert apply_reversals(s, [1], [6], [2]) == expected


def test_mirrored_query_is_the_same_reversal():
    s = "abcdefgh"
    assert apply_reversals(s, [1], [8], [3]) == apply_reversals(s, [1], [8], [6])


def test_repeated_query_cancels_out():
    s = "programming"
    assert apply_reversals(s, [1], [len(s)], [4, 4]) == s


def test_no_queries_leaves_string_unchanged():
    assert apply_reversals("hello", [1, 3], [2, 5], []) == "hello"


def test_result_is_a_permutation_of_input():
    s = "competitive"
    result = apply_reversals(s, [1, 5], [4, 11], [2, 6, 9, 1, 7])
    assert sorted(result) == sorted(s)
    assert len(result) == len(s)


def test_query_outside_segments_raises():
    with pytest.raises(ValueError):
        apply_reversals("abcd", [1, 3], [2, 4], [5])


def test_mismatched_segment_lists_raise():
    with pytest.raises(ValueError):
        apply_reversals("abcd", [1, 3], [4], [1])


@pytest.mark.parametrize(("s", "pos", "expected"), [("cab", 6, "a"), ("abcd", 9, "b"), ("x", 1, "x")])
def test_char_at_position_examples(s, pos, expected):
    assert char_at_position(s, pos) == expected


def test_first_block_is_the_string_itself():
    s = "zebra"
    assert "".join(char_at_position(s, p) for p in range(1, len(s) + 1)) == s


def test_sorted_string_yields_prefix_chain():
    s = "abcd"
    chain = "".join(s[:k] for k in range(len(s), 0, -1))
    total = len(s) * (len(s) + 1) // 2
    assert "".join(char_at_position(s, p) for p in range(1, total + 1)) == chain


def test_last_position_is_minimum_character():
    s = "dbca"
    total = len(s) * (len(s) + 1) // 2
    assert char_at_position(s, total) == min(s)


@pytest.mark.parametrize("pos", [0, 7, -1])
def test_position_out_of_range_raises(pos):
    with pytest.raises(ValueError):
        char_at_position("cab", pos)


def test_empty_string_raises():
    with pytest.raises(ValueError):
        char_at_position("", 1)