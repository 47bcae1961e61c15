from algobasis.search import iterative_search, recursive_search


def test_finds_every_element():
    haystack = list(range(0, 200, 2))
    assert all(iterative_search(haystack, value) for value in haystack)
    assert all(recursive_search(haystack, value) for value in haystack)


def test_misses_absent_elements():
    haystack = list(range(0, 200, 2))
    assert not any(iterative_search(haystack, value) for value in range(1, 200, 2))
    assert not any(recursive_search(haystack, value) for value in range(1, 200, 2))
    assert iterative_search(haystack, -1) is False
    assert recursive_search(haystack, -1) is False
    assert iterative_search(haystack, 500) is False
    assert recursive_search(haystack, 500) is False


def test_empty_and_single():
    assert iterative_search([], 3) is False
    assert recursive_search([], 3) is False
    assert iterative_search([3], 3) is True
    assert recursive_search([3], 3) is True
    assert iterative_search([3], 4) is False
    assert recursive_search([3], 4) is False


def test_both_agree_on_large_ordered_array():
    haystack = list(range(10_000))
    for needle in (0, 777, 9_999, 10_000, -5):
        assert iterative_search(haystack, needle) == recursive_search(haystack, needle)