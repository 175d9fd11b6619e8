"""
Write one tag replacement back into a paragraph's fragments.

The match is found in the concatenated text, but the edit has to land in
the individual fragments so each keeps its own formatting. The walk starts
in the fragment holding the first matched character and moves a cursor
forward, one character at a time, tracking ``done``: how many replacement
characters have been written (equivalently, how many matched characters
have been consumed, while they advance together).

  * Replacement characters left and this is the last matched character:
    the rest of the replacement is inserted here in one go, so any surplus
    lands in the fragment holding the end of the tag.
  * Replacement characters left otherwise: overwrite in place.
  * Replacement exhausted but matched characters left: delete them, up to
    the end of the current fragment, and continue in the next one.

Fragments before the match, and after the one where the walk resolves,
are never written.
"""

from __future__ import annotations

import logging

from office_templater.index import LogicalText
from office_templater.matcher import TagMatch

logger = logging.getLogger(__name__)


def _first_fragment(logical: LogicalText, offset: int) -> int:
    for i, entry in enumerate(logical.entries):
        if entry.start_offset <= offset <= entry.end_offset:
            return i
    raise IndexError(f"offset {offset} is outside the paragraph text")


def splice(logical: LogicalText, match: TagMatch, replacement: str) -> list[int]:
    """Replace ``match`` with ``replacement`` across the fragments of ``logical``.

    ``logical`` must be the snapshot the match was computed from. Every new
    fragment content is computed before any fragment is written, so an
    exception leaves the paragraph as it was.

    Returns the positions of the fragments whose content changed.
    """
    length = match.length
    total = len(replacement)
    first = _first_fragment(logical, match.offset)
    k = match.offset - logical.entries[first].start_offset
    done = 0
    pending: list[tuple[int, str]] = []

    for entry in logical.entries[first:]:
        if done >= total and done >= length:
            break
        chars = list(entry.content)
        while k < len(chars):
            if done < total:
                if done >= length - 1:
                    remains = replacement[done:]
                    chars[k : k + 1] = remains
                    done += len(remains)
                    break
                chars[k] = replacement[done]
            elif done < length:
                remains = min(length - done, len(chars) - k)
                del chars[k : k + remains]
                done += remains
                break
            else:
                break
            k += 1
            done += 1

        content = "".join(chars)
        if content != entry.content:
            pending.append((entry.position, content))
        k = 0

    fragments = {e.position: e.fragment for e in logical.entries}
    for position, content in pending:
        fragments[position].set_content(content)

    logger.debug(
        "spliced %d chars at %d with %d chars into fragments %s",
        length,
        match.offset,
        total,
        [p for p, _ in pending],
    )
    return [p for p, _ in pending]
