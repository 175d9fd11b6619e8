"""
Generate edge-case .pptx files with minimal or no text.

Tests:
- Presentation with one blank slide (no paragraphs at all)
- Slide whose only text box holds empty paragraphs
- Slide with braces that never form a tag

Replacing any tag in these must report zero matches and change nothing.
"""

from pathlib import Path

from pptx import Presentation
from pptx.util import Inches

out_dir = Path("templates")
out_dir.mkdir(parents=True, exist_ok=True)


def _blank_slide(prs):
    return prs.slides.add_slide(prs.slide_layouts[6])


def _box(slide):
    return slide.shapes.add_textbox(Inches(1), Inches(1), Inches(6), Inches(2)).text_frame


# 1. One slide, nothing on it
prs1 = Presentation()
_blank_slide(prs1)
prs1.save(str(out_dir / "empty_slide.pptx"))
print("Saved empty_slide.pptx")

# 2. Only blank paragraphs
prs2 = Presentation()
tf = _box(_blank_slide(prs2))
tf.add_paragraph()
tf.add_paragraph()
prs2.save(str(out_dir / "blank_paragraphs.pptx"))
print("Saved blank_paragraphs.pptx")

# 3. Braces but no tags
prs3 = Presentation()
tf = _box(_blank_slide(prs3))
tf.text = "This has {{  }} empty braces."
for line in ["And some { } with just a space.", "Also lone {{ and lone }} without pairs."]:
    tf.add_paragraph().text = line
prs3.save(str(out_dir / "invalid_tags.pptx"))
print("Saved invalid_tags.pptx")
