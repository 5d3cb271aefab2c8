from link_verdict.policy.lists import DEFAULT_POPULAR_DOMAINS
from link_verdict.scoring.typosquat import find_lookalike, normalize_hostname


def test_normalize_replaces_digit_homoglyphs_and_strips_symbols():
    assert normalize_hostname("go0gle.com") == "google.com"
    assert normalize_hostname("m1cr0s0ft.com") == "mlcrosoft.com"
    assert normalize_hostname("3bay.com") == "ebay.com"
    assert normalize_hostname("pay-pa1.com") == "paypal.com"


def test_near_miss_is_flagged():
    assert find_lookalike("gooogle.com", DEFAULT_POPULAR_DOMAINS) == "google.com"
    assert find_lookalike("arnazon.com", DEFAULT_POPULAR_DOMAINS) == "amazon.com"


def test_exact_match_after_normalization_is_not_flagged():
    assert find_lookalike("go0gle.com", DEFAULT_POPULAR_DOMAINS) is None
    assert find_lookalike("github.com", DEFAULT_POPULAR_DOMAINS) is None


def test_short_unrelated_host_is_not_flagged():
    assert find_lookalike("abc.io", DEFAULT_POPULAR_DOMAINS) is None


def test_first_qualifying_domain_wins():
    assert find_lookalike("gooogle.com", ["google.com", "gooogle.co"]) == "google.com"
    assert find_lookalike("gooogle.com", ["gooogle.co", "google.com"]) == "gooogle.co"


def test_ratio_boundary_is_inclusive():
    assert find_lookalike("abcdefxx", ["abcdefgh"]) == "abcdefgh"
    assert find_lookalike("abcdexxx", ["abcdefgh"]) is None
