"""
Generate a .pptx with non-ASCII text in tags and replacement targets.

Offsets are counted in characters, so accented Latin letters, Norwegian
æøå and emoji around a tag must not shift where the replacement lands.
"""

from pathlib import Path

from pptx import Presentation
from pptx.util import Inches

prs = Presentation()
slide = prs.slides.add_slide(prs.slide_layouts[6])
tf = slide.shapes.add_textbox(Inches(1), Inches(1), Inches(8), Inches(3)).text_frame

lines = [
    ["Kjære {{Fornavn}}, velkommen til {{Bedriftsnavn}}."],
    ["Hei {{Ølt", "ype}}, vi har {{Størrelse}} på lager."],
    ["🎉 Dear {{First Name}} 🎉"],
    ["Reference: {{Case2024Id}}"],
]

for i, runs in enumerate(lines):
    p = tf.paragraphs[0] if i == 0 else tf.add_paragraph()
    for text in runs:
        p.add_run().text = text

out_path = Path("templates/unicode_placeholders.pptx")
out_path.parent.mkdir(parents=True, exist_ok=True)
prs.save(str(out_path))
print(f"Saved to {out_path}")
