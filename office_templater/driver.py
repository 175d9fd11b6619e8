"""Apply one tag to paragraphs until no occurrence is left."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable

from office_templater.config import get_settings
from office_templater.errors import ParagraphSubstitutionError, SubstitutionLimitError
from office_templater.fragments import Paragraph
from office_templater.index import build_logical_index
from office_templater.matcher import compile_tag, find_first, reject_empty_match
from office_templater.splice import splice

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TagReport:
    """Outcome of one tag applied to a sequence of paragraphs.

    ``counts[i]`` is the number of replacements made in paragraph ``i``;
    a zero means the tag was not found there. The report is truthy when
    at least one replacement happened.
    """

    tag: str
    counts: tuple[int, ...]

    @property
    def total(self) -> int:
        return sum(self.counts)

    def __bool__(self) -> bool:
        return self.total > 0


def _resolve_tag(tag: str | re.Pattern[str], literal: bool | None) -> re.Pattern[str]:
    if isinstance(tag, re.Pattern):
        reject_empty_match(tag)
        return tag
    if literal is None:
        literal = get_settings().literal_tags
    return compile_tag(tag, literal=literal)


def replace_in_paragraph(
    paragraph: Paragraph,
    tag: str | re.Pattern[str],
    replacement: str,
    *,
    literal: bool | None = None,
    max_passes: int | None = None,
) -> int:
    """Replace every occurrence of ``tag`` in ``paragraph``, left to right.

    The paragraph is re-indexed and re-searched after each replacement, so
    a replacement value that itself contains the tag is replaced again.
    ``max_passes`` caps that; exceeding it raises SubstitutionLimitError.
    ``literal`` defaults to the ``literal_tags`` setting.

    Returns the number of replacements made.
    """
    compiled = _resolve_tag(tag, literal)
    if max_passes is None:
        max_passes = get_settings().max_passes_per_paragraph

    count = 0
    while True:
        logical = build_logical_index(paragraph)
        match = find_first(logical.text, compiled)
        if match is None:
            return count
        if count >= max_passes:
            raise SubstitutionLimitError(compiled.pattern, max_passes)
        splice(logical, match, replacement)
        count += 1


def replace_in_paragraphs(
    paragraphs: Iterable[Paragraph],
    tag: str | re.Pattern[str],
    replacement: str,
    *,
    literal: bool | None = None,
    max_passes: int | None = None,
) -> TagReport:
    """Run ``replace_in_paragraph`` over paragraphs in document order.

    The tag is compiled before any paragraph is touched, so a malformed
    pattern raises MalformedPatternError with nothing changed. A failure
    inside a paragraph, including an empty match from a lookaround, stops
    the run and is raised as ParagraphSubstitutionError naming the
    paragraph's position.
    """
    compiled = _resolve_tag(tag, literal)
    if max_passes is None:
        max_passes = get_settings().max_passes_per_paragraph

    counts: list[int] = []
    for position, paragraph in enumerate(paragraphs):
        try:
            counts.append(
                replace_in_paragraph(
                    paragraph, compiled, replacement, max_passes=max_passes
                )
            )
        except Exception as e:
            logger.error("tag %r failed in paragraph %d: %s", compiled.pattern, position, e)
            raise ParagraphSubstitutionError(position, e) from e

    report = TagReport(compiled.pattern, tuple(counts))
    logger.debug(
        "tag %r: %d replacements across %d paragraphs",
        report.tag,
        report.total,
        len(counts),
    )
    return report
