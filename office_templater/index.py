"""Logical text of a paragraph and the offset range each fragment covers in it."""

from __future__ import annotations

from dataclasses import dataclass

from office_templater.fragments import Fragment, Paragraph


@dataclass(frozen=True, slots=True)
class FragmentIndex:
    """Where one fragment sits in the paragraph's concatenated text.

    Only valid until the next mutation of any fragment in the paragraph.
    """

    fragment: Fragment
    position: int
    start_offset: int
    content: str

    @property
    def end_offset(self) -> int:
        return self.start_offset + len(self.content)


@dataclass(frozen=True, slots=True)
class LogicalText:
    """Snapshot of a paragraph: concatenated text plus per-fragment ranges."""

    text: str
    entries: tuple[FragmentIndex, ...]


def build_logical_index(paragraph: Paragraph) -> LogicalText:
    """Concatenate fragments in order, recording each fragment's start offset.

    No separator is inserted between fragments. An empty paragraph yields
    an empty string and no entries.
    """
    parts: list[str] = []
    entries: list[FragmentIndex] = []
    offset = 0
    for position, fragment in enumerate(paragraph.fragments()):
        content = fragment.get_content()
        entries.append(FragmentIndex(fragment, position, offset, content))
        parts.append(content)
        offset += len(content)
    return LogicalText("".join(parts), tuple(entries))


def paragraph_text(paragraph: Paragraph) -> str:
    return "".join(f.get_content() for f in paragraph.fragments())
