"""Fill ``{{tag}}`` placeholders in PowerPoint and Word templates without losing run formatting."""

from office_templater.driver import TagReport, replace_in_paragraph, replace_in_paragraphs
from office_templater.errors import (
    AssetNotFoundError,
    InvalidMediaReferenceError,
    MalformedPatternError,
    ParagraphSubstitutionError,
    SlideNotFoundError,
    SubstitutionLimitError,
    TableShapeError,
    TemplateOpenError,
    TemplaterError,
)
from office_templater.fragments import TextFragment, TextParagraph
from office_templater.index import build_logical_index, paragraph_text

__all__ = [
    "AssetNotFoundError",
    "InvalidMediaReferenceError",
    "MalformedPatternError",
    "ParagraphSubstitutionError",
    "SlideNotFoundError",
    "SubstitutionLimitError",
    "TableShapeError",
    "TagReport",
    "TemplateOpenError",
    "TemplaterError",
    "TextFragment",
    "TextParagraph",
    "build_logical_index",
    "paragraph_text",
    "replace_in_paragraph",
    "replace_in_paragraphs",
]
