import pytest

from argtree.diagnostics import close_matches, edit_distance, suggest


@pytest.mark.parametrize(
    "source, target, expected",
    [
        ("", "", 0),
        ("abc", "", 3),
        ("", "abc", 3),
        ("verbose", "verbose", 0),
        ("verbos", "verbose", 1),
        ("vrebose", "verbose", 2),
        ("kitten", "sitting", 3),
        ("flaw", "lawn", 2),
        ("config", "confgi", 2),
    ],
)
def test_edit_distance(source, target, expected):
    assert edit_distance(source, target) == expected
    assert edit_distance(target, source) == expected


def test_suggest_within_bound():
    assert suggest("verbos", ["verbose", "name", "config"]) == "verbose"
    assert suggest("cnfig", ["verbose", "name", "config"]) == "config"


def test_suggest_beyond_bound():
    assert suggest("xyzzy", ["verbose", "name", "config"]) is None
    assert suggest("verb", ["verbose"]) is None


def test_suggest_requires_distance_below_name_length():
    assert suggest("x", ["v"]) is None
    assert suggest("ab", ["xy"]) is None
    assert suggest("ab", ["ac"]) == "ac"


def test_suggest_tie_goes_to_first_candidate():
    assert suggest("serv", ["serve", "servo"]) == "serve"
    assert suggest("serv", ["servo", "serve"]) == "servo"


def test_suggest_empty_candidates():
    assert suggest("anything", []) is None


def test_close_matches_ordering():
    candidates = ["status", "start", "stop", "restart"]
    assert close_matches("stat", candidates) == ["start", "status", "stop"]


def test_close_matches_custom_distance():
    assert close_matches("verbos", ["verbose"], max_distance=0) == []
