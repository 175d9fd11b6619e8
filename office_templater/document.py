"""
Word templates on top of python-docx.

Word splits text into ``w:r`` runs whenever formatting, spell-check state
or language changes, so a tag like ``{FirstName}`` often arrives as

    <w:r><w:t>{First</w:t></w:r>
    <w:r><w:rPr><w:b/></w:rPr><w:t>Name}</w:t></w:r>

Paragraphs are visited in the body first (tables included, at their
position in the flow), then in each section's own headers and footers.
"""

from __future__ import annotations

import logging
import re
from typing import IO, Iterator

import lxml.etree as ET
from docx import Document

from office_templater.driver import TagReport, replace_in_paragraphs
from office_templater.errors import TemplateOpenError
from office_templater.fragments import XmlParagraph
from office_templater.index import paragraph_text

logger = logging.getLogger(__name__)

_NS = {"w": "http://schemas.openxmlformats.org/wordprocessingml/2006/main"}
_PARAGRAPHS = ET.XPath(".//w:p", namespaces=_NS)
_ALL_TEXTS = ET.XPath(".//w:t", namespaces=_NS)
_OWNER = ET.XPath("ancestor::w:p[1]", namespaces=_NS)


def _own_texts(p: ET._Element) -> list[ET._Element]:
    """Every ``w:t`` whose nearest enclosing paragraph is ``p``.

    Runs wrapped in ``w:hyperlink``, ``w:ins``, ``w:sdt``, ``w:smartTag``,
    ``w:customXml`` or ``w:fldSimple`` belong to the paragraph. Paragraphs
    nested in text boxes are visited on their own.
    """
    return [t for t in _ALL_TEXTS(p) if _OWNER(t)[0] is p]


class DocxTemplate:
    """An open word-processing document whose tags can be filled in."""

    def __init__(self, document) -> None:
        self.document = document

    @classmethod
    def open(cls, source: str | IO[bytes]) -> "DocxTemplate":
        try:
            return cls(Document(source))
        except Exception as e:
            raise TemplateOpenError(source, e) from e

    def save(self, target: str | IO[bytes]) -> None:
        self.document.save(target)

    def _areas(self) -> Iterator[ET._Element]:
        yield self.document.element.body
        for section in self.document.sections:
            for part in (
                section.header,
                section.first_page_header,
                section.even_page_header,
                section.footer,
                section.first_page_footer,
                section.even_page_footer,
            ):
                # A linked header/footer is the previous section's definition.
                if not part.is_linked_to_previous:
                    yield part._element

    def paragraphs(self) -> list[XmlParagraph]:
        return [
            XmlParagraph(p, _own_texts, preserve_space=True)
            for area in self._areas()
            for p in _PARAGRAPHS(area)
        ]

    def get_all_text(self) -> list[str]:
        return [paragraph_text(p) for p in self.paragraphs()]

    def replace_tag(
        self,
        tag: str | re.Pattern[str],
        replacement: str,
        *,
        literal: bool | None = None,
    ) -> TagReport:
        report = replace_in_paragraphs(self.paragraphs(), tag, replacement, literal=literal)
        logger.info("replaced %d occurrence(s) of %r", report.total, report.tag)
        return report
