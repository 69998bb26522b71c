"""
Glob pattern matching for queue entries.

Decides whether a file in the watched directory should be handed to the
command. Matching is case-sensitive shell-glob (``*``, ``?``, ``[...]``,
``[!...]``) on every platform.
"""

import fnmatch
import os
import re


def validate_pattern(pattern: str) -> None:
    """
    Reject globs with an unterminated character class.

    ``fnmatch`` would silently treat ``[abc`` as literal text.

    Raises:
        ValueError: If a ``[`` has no closing ``]``
    """
    i, n = 0, len(pattern)
    while i < n:
        if pattern[i] == "[":
            j = i + 1
            if j < n and pattern[j] == "!":
                j += 1
            # A leading "]" is a member of the class, not its end
            if j < n and pattern[j] == "]":
                j += 1
            end = pattern.find("]", j)
            if end == -1:
                raise ValueError(f"Invalid pattern {pattern!r}: unterminated character class at position {i}")
            i = end
        i += 1


class PatternMatcher:
    """Match file names (or full paths) against a configured glob."""

    def __init__(self, pattern: str = "*"):
        """
        Initialize matcher.

        Args:
            pattern: Shell glob. A pattern containing a path separator is
                matched against the whole path, otherwise against the name.
        """
        validate_pattern(pattern)
        self.pattern = pattern
        self.match_full_path = os.sep in pattern or bool(os.altsep and os.altsep in pattern)
        self._regex = re.compile(fnmatch.translate(pattern))

    def matches(self, path: str) -> bool:
        """
        Check a textual path against the pattern.

        Args:
            path: Entry path as text

        Returns:
            True if the path is eligible for processing
        """
        subject = path if self.match_full_path else os.path.basename(path)
        return self._regex.match(subject) is not None

    def __repr__(self) -> str:
        return f"PatternMatcher({self.pattern!r})"
