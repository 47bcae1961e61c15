import pytest

from algobasis.leetcode import move_zeroes, reverse_words, super_egg_drop, super_egg_drop_dp


@pytest.mark.parametrize(
    "text, expected",
    [
        ("the sky is blue", "blue is sky the"),
        ("  hello world!  ", "world! hello"),
        ("a good   example", "example good a"),
    ],
)
def test_reverse_words_examples(text, expected):
    assert reverse_words(text) == expected


def test_reverse_words_blank_input_gives_empty():
    assert reverse_words("") == ""
    assert reverse_words("     ") == ""


def test_reverse_words_twice_normalises_spacing():
    text = "  one   two three "
    assert reverse_words(reverse_words(text)) == " ".join(text.split())


def test_move_zeroes_example():
    nums = [0, 1, 0, 3, 12]
    same = nums
    assert move_zeroes(nums) is None
    assert same == [1, 3, 12, 0, 0]


def test_move_zeroes_keeps_items_and_order():
    nums = [4, 0, 0, 7, -2, 0, 9]
    original = list(nums)
    move_zeroes(nums)
    assert sorted(nums) == sorted(original)
    nonzero = [x for x in original if x != 0]
    assert nums[: len(nonzero)] == nonzero
    assert all(x == 0 for x in nums[len(nonzero):])


def test_move_zeroes_all_zero_and_empty():
    zeros = [0, 0, 0]
    move_zeroes(zeros)
    assert zeros == [0, 0, 0]
    empty: list[int] = []
    move_zeroes(empty)
    assert empty == []


@pytest.mark.parametrize("k, n, expected", [(1, 2, 2), (2, 6, 3), (3, 14, 4)])
def test_super_egg_drop_examples(k, n, expected):
    assert super_egg_drop(k, n) == expected
    assert super_egg_drop_dp(k, n) == expected


def test_one_egg_needs_every_floor():
    assert super_egg_drop(1, 37) == 37
    assert super_egg_drop_dp(1, 37) == 37


def test_zero_floors_needs_no_moves():
    assert super_egg_drop(3, 0) == 0


@pytest.mark.parametrize("k, n", [(10, 100), (2, 100), (4, 5000), (100, 10000)])
def test_methods_agree(k, n):
    assert super_egg_drop(k, n) == super_egg_drop_dp(k, n)


def test_more_eggs_never_need_more_moves():
    results = [super_egg_drop(k, 200) for k in range(1, 8)]
    assert results == sorted(results, reverse=True)


@pytest.mark.parametrize("k, n", [(0, 5), (2, -1)])
def test_super_egg_drop_rejects_bad_input(k, n):
    with pytest.raises(ValueError):
        super_egg_drop(k, n)


@pytest.mark.parametrize("k, n", [(0, 5), (2, 0)])
def test_super_egg_drop_dp_rejects_bad_input(k, n):
    with pytest.raises(ValueError):
        super_egg_drop_dp(k, n)