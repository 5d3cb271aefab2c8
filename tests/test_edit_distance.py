import pytest

from link_verdict.scoring.edit_distance import edit_distance


def test_empty_inputs_return_other_length():
    assert edit_distance("", "abc") == 3
    assert edit_distance("abc", "") == 3
    assert edit_distance("", "") == 0


def test_identical_strings_have_zero_distance():
    assert edit_distance("paypal.com", "paypal.com") == 0


@pytest.mark.parametrize(
    ("a", "b", "expected"),
    [
        ("kitten", "sitting", 3),
        ("flaw", "lawn", 2),
        ("gooogle.com", "google.com", 1),
        ("amazon.com", "arnazon.com", 2),
        ("abc", "xyz", 3),
    ],
)
def test_known_distances(a, b, expected):
    assert edit_distance(a, b) == expected
    assert edit_distance(b, a) == expected
