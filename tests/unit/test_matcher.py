import os

import pytest

from domains.file_queue.processors import PatternMatcher
from domains.file_queue.processors.matcher import validate_pattern


@pytest.mark.parametrize(
    "pattern, name, expected",
    [
        ("*", "anything.bin", True),
        ("*.csv", "a.csv", True),
        ("*.csv", "a.csv.bak", False),
        ("report-?.txt", "report-1.txt", True),
        ("report-?.txt", "report-10.txt", False),
        ("job[0-9].txt", "job4.txt", True),
        ("job[0-9].txt", "jobx.txt", False),
        ("job[!0-9].txt", "jobx.txt", True),
        ("*.TXT", "a.txt", False),
        ("*.txt", ".hidden.txt", True),
    ],
)
def test_glob_semantics_on_file_names(pattern, name, expected):
    matcher = PatternMatcher(pattern)

    assert matcher.matches(os.path.join("queue", "incoming", name)) is expected


def test_pattern_without_separator_ignores_directories():
    matcher = PatternMatcher("in*")

    assert not matcher.match_full_path
    assert not matcher.matches(os.path.join("incoming", "job.txt"))
    assert matcher.matches(os.path.join("incoming", "input.txt"))


def test_pattern_with_separator_matches_whole_path():
    matcher = PatternMatcher("*" + os.sep + "incoming" + os.sep + "*.txt")

    assert matcher.match_full_path
    assert matcher.matches(os.path.join("", "srv", "incoming", "job.txt"))
    assert not matcher.matches(os.path.join("", "srv", "outgoing", "job.txt"))


@pytest.mark.parametrize("pattern", ["[abc", "job[0-9.txt", "*.[", "[!", "[]", "[!]"])
def test_unterminated_character_class_is_rejected(pattern):
    with pytest.raises(ValueError, match="unterminated character class"):
        validate_pattern(pattern)

    with pytest.raises(ValueError):
        PatternMatcher(pattern)


@pytest.mark.parametrize(
    "pattern, name",
    [
        ("[]]x", "]x"),
        ("[!]]x", "ax"),
        ("job[0-9].txt", "job4.txt"),
        ("]*", "]x"),
    ],
)
def test_closing_bracket_forms_are_accepted(pattern, name):
    validate_pattern(pattern)

    assert PatternMatcher(pattern).matches(name)
