"""
PowerPoint templates on top of python-pptx.

A slide's paragraphs are every ``a:p`` in the slide part, in document
order: text boxes, placeholders, table cells and grouped shapes alike.
Their fragments are the ``a:t`` elements of runs and fields.

    <a:p>
      <a:r><a:rPr lang="en-US"/><a:t>Another tag: {{bonj</a:t></a:r>
      <a:r><a:rPr lang="en-US"/><a:t>our}} le monde !</a:t></a:r>
    </a:p>
"""

from __future__ import annotations

import io
import logging
import re
from typing import IO, Iterator

import lxml.etree as ET
from pptx import Presentation
from pptx.oxml.ns import qn
from pptx.parts.image import Image
from pptx.shapes.group import GroupShape
from pptx.slide import Slide
from pptx.table import Table
from pptx.util import Emu

from office_templater.driver import TagReport, replace_in_paragraphs
from office_templater.errors import (
    AssetNotFoundError,
    InvalidMediaReferenceError,
    SlideNotFoundError,
    TableShapeError,
    TemplateOpenError,
)
from office_templater.fragments import XmlParagraph
from office_templater.index import paragraph_text

logger = logging.getLogger(__name__)

_NS = {
    "a": "http://schemas.openxmlformats.org/drawingml/2006/main",
    "p": "http://schemas.openxmlformats.org/presentationml/2006/main",
}
_PARAGRAPHS = ET.XPath(".//a:p", namespaces=_NS)
_TEXTS = ET.XPath(".//a:t", namespaces=_NS)
_PICTURES = ET.XPath(".//p:pic", namespaces=_NS)
_BLIP = ET.XPath("./p:blipFill/a:blip", namespaces=_NS)

# Height given to appended table rows, in EMU.
ROW_HEIGHT = Emu(370840)

_MEDIA_ALIASES = {"image/jpg": "image/jpeg", "image/x-ms-bmp": "image/bmp"}


class PptxTable:
    """A table on a slide that rows can be appended to."""

    def __init__(self, table: Table) -> None:
        self.table = table

    @property
    def column_count(self) -> int:
        return len(self.table.columns)

    def append_row(self, *cells: str) -> None:
        """Append a row of plain-text cells; missing trailing cells are left empty."""
        columns = self.column_count
        if len(cells) > columns:
            raise TableShapeError(columns, len(cells))
        tr = self.table._tbl.add_tr(ROW_HEIGHT)
        for _ in range(columns):
            tr.add_tc()
        row = len(self.table.rows) - 1
        for col, text in enumerate(cells):
            self.table.cell(row, col).text = text


class PptxTemplate:
    """An open presentation whose slides can be filled in."""

    def __init__(self, presentation) -> None:
        self.presentation = presentation

    @classmethod
    def open(cls, source: str | IO[bytes]) -> "PptxTemplate":
        try:
            return cls(Presentation(source))
        except Exception as e:
            raise TemplateOpenError(source, e) from e

    def save(self, target: str | IO[bytes]) -> None:
        self.presentation.save(target)

    def count_slides(self) -> int:
        return len(self.presentation.slides)

    def _slide(self, slide_index: int) -> Slide:
        count = self.count_slides()
        if not 0 <= slide_index < count:
            raise SlideNotFoundError(slide_index, count)
        return self.presentation.slides[slide_index]

    def paragraphs(self, slide_index: int) -> list[XmlParagraph]:
        slide = self._slide(slide_index)
        return [XmlParagraph(p, _TEXTS) for p in _PARAGRAPHS(slide._element)]

    def get_all_text(self, slide_index: int) -> list[str]:
        """Text of every paragraph on the slide.

        Paragraphs with no text (empty table cells, blank lines) are kept as
        empty strings so positions line up with the slide's structure.
        """
        return [paragraph_text(p) for p in self.paragraphs(slide_index)]

    def replace_tag(
        self,
        slide_index: int,
        tag: str | re.Pattern[str],
        replacement: str,
        *,
        literal: bool | None = None,
    ) -> TagReport:
        report = replace_in_paragraphs(
            self.paragraphs(slide_index), tag, replacement, literal=literal
        )
        logger.info(
            "slide %d: replaced %d occurrence(s) of %r", slide_index, report.total, report.tag
        )
        return report

    def replace_tag_in_all_slides(
        self,
        tag: str | re.Pattern[str],
        replacement: str,
        *,
        literal: bool | None = None,
    ) -> list[TagReport]:
        return [
            self.replace_tag(i, tag, replacement, literal=literal)
            for i in range(self.count_slides())
        ]

    def replace_picture(
        self,
        slide_index: int,
        tag: str,
        picture: IO[bytes],
        media_type: str,
    ) -> int:
        """Point every picture whose name or description contains ``tag`` at a new image.

        The tag is searched literally in the picture's non-visual properties
        (``p:nvPicPr``), which is where PowerPoint keeps the alt text.
        Tagged pictures without an embedded image (linked media) are
        skipped. Returns the number of pictures repointed.
        """
        slide = self._slide(slide_index)
        media_type = _MEDIA_ALIASES.get(media_type.lower(), media_type.lower())
        if not media_type.startswith("image/"):
            raise InvalidMediaReferenceError(media_type, "not an image media type")

        if picture.seekable():
            picture.seek(0)
        blob = picture.read()
        try:
            image = Image.from_blob(blob)
            detected = image.content_type
        except Exception as e:
            raise InvalidMediaReferenceError(media_type, f"unreadable image: {e}") from e
        if detected != media_type:
            raise InvalidMediaReferenceError(media_type, f"image data is {detected}")

        blips = []
        for pic in _PICTURES(slide._element):
            if tag not in ET.tostring(pic.find(qn("p:nvPicPr")), encoding="unicode"):
                continue
            # Linked media has no embedded blip to repoint.
            blips.extend(_BLIP(pic))
        if not blips:
            raise AssetNotFoundError(slide_index, tag)

        _, r_id = slide.part.get_or_add_image_part(io.BytesIO(blob))
        for blip in blips:
            blip.set(qn("r:embed"), r_id)
        logger.info("slide %d: %d picture(s) tagged %r now use %s", slide_index, len(blips), tag, r_id)
        return len(blips)

    def find_tables(self, slide_index: int, tag: str) -> list[PptxTable]:
        """Tables on the slide whose text contains ``tag``.

        ``tag`` is a plain substring here, not a regular expression as in
        ``replace_tag``: pass ``{{rows}}``, not ``\\{\\{rows\\}\\}``.
        """
        tables = []
        for shape in _walk_shapes(self._slide(slide_index).shapes):
            if not getattr(shape, "has_table", False):
                continue
            text = "".join(t.text or "" for t in _TEXTS(shape.table._tbl))
            if tag in text:
                tables.append(PptxTable(shape.table))
        return tables


def _walk_shapes(shapes) -> Iterator:
    for shape in shapes:
        if isinstance(shape, GroupShape):
            yield from _walk_shapes(shape.shapes)
        else:
            yield shape
