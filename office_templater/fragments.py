"""
Paragraph and text-fragment model.

A paragraph's visible text is stored as several fragments (runs, in Office
terms), each with its own formatting. The engine only needs to read and
write fragment text in order, so it depends on two small protocols:

  Paragraph.fragments() -> ordered fragments
  Fragment.get_content() / Fragment.set_content(text)

Two implementations live here: plain in-memory fragments, and fragments
backed by an lxml text element (``a:t`` in slides, ``w:t`` in documents).
"""

from __future__ import annotations

from typing import Callable, Protocol, Sequence

import lxml.etree as ET

XML_SPACE = "{http://www.w3.org/XML/1998/namespace}space"


class Fragment(Protocol):
    def get_content(self) -> str: ...

    def set_content(self, content: str) -> None: ...


class Paragraph(Protocol):
    def fragments(self) -> Sequence[Fragment]: ...


class TextFragment:
    """Mutable in-memory run of text."""

    __slots__ = ("content",)

    def __init__(self, content: str = "") -> None:
        self.content = content

    def get_content(self) -> str:
        return self.content

    def set_content(self, content: str) -> None:
        self.content = content

    def __repr__(self) -> str:
        return f"TextFragment({self.content!r})"


class TextParagraph:
    """Ordered list of in-memory fragments."""

    def __init__(self, contents: Sequence[str] = ()) -> None:
        self._fragments = [TextFragment(c) for c in contents]

    def fragments(self) -> list[TextFragment]:
        return self._fragments

    def contents(self) -> list[str]:
        return [f.content for f in self._fragments]

    def __repr__(self) -> str:
        return f"TextParagraph({self.contents()!r})"


class XmlTextFragment:
    """A text element inside a paragraph's XML.

    ``preserve_space`` marks WordprocessingML, where leading or trailing
    whitespace is dropped by readers unless ``xml:space="preserve"`` is set.
    """

    __slots__ = ("element", "preserve_space")

    def __init__(self, element: ET._Element, *, preserve_space: bool = False) -> None:
        self.element = element
        self.preserve_space = preserve_space

    def get_content(self) -> str:
        return self.element.text or ""

    def set_content(self, content: str) -> None:
        self.element.text = content
        if self.preserve_space and content != content.strip():
            self.element.set(XML_SPACE, "preserve")


class XmlParagraph:
    """A paragraph element whose fragments are picked by ``select_texts``.

    ``select_texts`` is usually a compiled ``ET.XPath``.
    """

    def __init__(
        self,
        element: ET._Element,
        select_texts: Callable[[ET._Element], list],
        *,
        preserve_space: bool = False,
    ) -> None:
        self.element = element
        self._select_texts = select_texts
        self._preserve_space = preserve_space

    def fragments(self) -> list[XmlTextFragment]:
        return [
            XmlTextFragment(t, preserve_space=self._preserve_space)
            for t in self._select_texts(self.element)
        ]
