"""Shared fixtures: small presentations and documents built in memory."""
from __future__ import annotations

import io

import pytest
from docx import Document
from PIL import Image as PILImage
from pptx import Presentation
from pptx.util import Inches

from office_templater.config import get_settings
from office_templater.presentation import PptxTemplate

BLANK_LAYOUT = 6


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def add_text_slide(prs, paragraphs: list[list[str]]):
    """Add a slide with one text box; each inner list is one paragraph's runs."""
    slide = prs.slides.add_slide(prs.slide_layouts[BLANK_LAYOUT])
    box = slide.shapes.add_textbox(Inches(1), Inches(1), Inches(6), Inches(2))
    tf = box.text_frame
    for i, runs in enumerate(paragraphs):
        p = tf.paragraphs[0] if i == 0 else tf.add_paragraph()
        for text in runs:
            p.add_run().text = text
    return slide


def png_bytes(color: str, size: tuple[int, int] = (4, 4)) -> bytes:
    buf = io.BytesIO()
    PILImage.new("RGB", size, color).save(buf, "PNG")
    return buf.getvalue()


@pytest.fixture
def presentation():
    return Presentation()


@pytest.fixture
def template(presentation) -> PptxTemplate:
    return PptxTemplate(presentation)


@pytest.fixture
def document():
    return Document()


@pytest.fixture
def text_slide(presentation):
    def _make(paragraphs: list[list[str]]):
        return add_text_slide(presentation, paragraphs)

    return _make


@pytest.fixture
def png():
    return png_bytes
