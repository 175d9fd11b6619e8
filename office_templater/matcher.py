"""Tag pattern compilation and first-occurrence search."""

from __future__ import annotations

import re
from dataclasses import dataclass

from office_templater.errors import MalformedPatternError


@dataclass(frozen=True, slots=True)
class TagMatch:
    """One occurrence of a tag in a logical string."""

    offset: int
    length: int

    @property
    def end(self) -> int:
        return self.offset + self.length


def compile_tag(pattern: str, *, literal: bool = False) -> re.Pattern[str]:
    """Compile a tag for matching.

    Tags are regular expressions by default. ``{{name}}`` compiles as a
    literal because braces without a repeat count are not quantifiers.
    Pass ``literal=True`` for tags that contain other metacharacters.

    A pattern that matches the empty string (``x*``, ``a?``) is rejected
    here, before any text is touched.
    """
    if not pattern:
        raise MalformedPatternError(pattern, "empty pattern")
    try:
        compiled = re.compile(re.escape(pattern) if literal else pattern)
    except re.error as e:
        raise MalformedPatternError(pattern, str(e)) from e
    reject_empty_match(compiled)
    return compiled


def reject_empty_match(compiled: re.Pattern[str]) -> None:
    if compiled.fullmatch("") is not None:
        raise MalformedPatternError(compiled.pattern, "pattern matches an empty string")


def find_first(text: str, compiled: re.Pattern[str]) -> TagMatch | None:
    """Return the leftmost occurrence of the tag, or None.

    Raises MalformedPatternError for an empty match, which would otherwise
    be found again at the same place forever. Lookarounds can still produce
    one even though ``compile_tag`` accepted the pattern.
    """
    m = compiled.search(text)
    if m is None:
        return None
    if m.end() == m.start():
        raise MalformedPatternError(compiled.pattern, "pattern matches an empty string")
    return TagMatch(m.start(), m.end() - m.start())
