"""
Typed exceptions raised by the templating engine and its document adapters.

Every error carries a stable ``code`` so callers (the CLI, a web handler)
can map failures without matching on message text.
"""

from __future__ import annotations


class TemplaterError(Exception):
    """Base class for every templating failure."""

    code: str = "TEMPLATER_ERROR"


class MalformedPatternError(TemplaterError):
    """The tag is not a usable regular expression."""

    code = "MALFORMED_PATTERN"

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"Invalid tag pattern {pattern!r}: {reason}")
        self.pattern = pattern
        self.reason = reason


class SubstitutionLimitError(TemplaterError):
    """A paragraph kept matching after the configured number of passes."""

    code = "SUBSTITUTION_LIMIT"

    def __init__(self, pattern: str, max_passes: int) -> None:
        super().__init__(
            f"Tag {pattern!r} still matches after {max_passes} replacements; "
            "the replacement value probably contains the tag"
        )
        self.pattern = pattern
        self.max_passes = max_passes


class ParagraphSubstitutionError(TemplaterError):
    """Substitution failed inside one paragraph; later paragraphs were not touched."""

    code = "PARAGRAPH_FAILED"

    def __init__(self, paragraph_index: int, original_error: Exception) -> None:
        super().__init__(
            f"Substitution failed in paragraph {paragraph_index}: {original_error}"
        )
        self.paragraph_index = paragraph_index
        self.original_error = original_error


class TemplateOpenError(TemplaterError):
    """The template container could not be opened."""

    code = "OPEN_FAILED"

    def __init__(self, source: object, original_error: Exception | None = None) -> None:
        super().__init__(f"Cannot open template {source!r}: {original_error}")
        self.source = source
        self.original_error = original_error


class SlideNotFoundError(TemplaterError):
    code = "SLIDE_NOT_FOUND"

    def __init__(self, slide_index: int, slide_count: int) -> None:
        super().__init__(
            f"Slide index {slide_index} out of range (presentation has {slide_count})"
        )
        self.slide_index = slide_index
        self.slide_count = slide_count


class AssetNotFoundError(TemplaterError):
    """No picture on the slide references the tag."""

    code = "ASSET_NOT_FOUND"

    def __init__(self, slide_index: int, tag: str) -> None:
        super().__init__(f"No picture tagged {tag!r} on slide {slide_index}")
        self.slide_index = slide_index
        self.tag = tag


class InvalidMediaReferenceError(TemplaterError):
    """The replacement image is unreadable or its media type is wrong."""

    code = "INVALID_MEDIA"

    def __init__(self, media_type: str, reason: str) -> None:
        super().__init__(f"Invalid media {media_type!r}: {reason}")
        self.media_type = media_type
        self.reason = reason


class TableShapeError(TemplaterError):
    code = "TABLE_SHAPE"

    def __init__(self, columns: int, cells: int) -> None:
        super().__init__(f"Row has {cells} cells but the table has {columns} columns")
        self.columns = columns
        self.cells = cells
