"""
Generate a .pptx with tags inside and across formatted runs.

Each formatting change creates a new run boundary (<a:rPr> per <a:r>).
This checks that replacement keeps every run's properties:
- Bold run holding a whole tag
- Tag split across bold/red and italic runs
- Tag split across runs with different font sizes
- Tag split character by character (worst case)
"""

from pathlib import Path

from pptx import Presentation
from pptx.dml.color import RGBColor
from pptx.util import Inches, Pt

prs = Presentation()
slide = prs.slides.add_slide(prs.slide_layouts[6])
tf = slide.shapes.add_textbox(Inches(1), Inches(1), Inches(8), Inches(3)).text_frame

# Case 1: tag entirely inside a bold run
p1 = tf.paragraphs[0]
p1.add_run().text = "Bold tag: "
r = p1.add_run()
r.text = "{{bold_field}}"
r.font.bold = True

# Case 2: tag split across bold/red and italic runs
p2 = tf.add_paragraph()
p2.add_run().text = "Mixed formatting: "
r1 = p2.add_run()
r1.text = "{{mixed"
r1.font.bold = True
r1.font.color.rgb = RGBColor(0xFF, 0x00, 0x00)
r2 = p2.add_run()
r2.text = "_format}}"
r2.font.italic = True

# Case 3: underline + size changes inside one tag
p3 = tf.add_paragraph()
p3.add_run().text = "Styled: "
r3a = p3.add_run()
r3a.text = "{{under"
r3a.font.underline = True
r3a.font.size = Pt(14)
r3b = p3.add_run()
r3b.text = "lined"
r3b.font.size = Pt(10)
p3.add_run().text = "_field}}"

# Case 4: one run per character
p4 = tf.add_paragraph()
p4.add_run().text = "Char split: "
for ch in "{{ABC}}":
    run = p4.add_run()
    run.text = ch
    run.font.bold = ch in "{}"

out_path = Path("templates/formatted_runs.pptx")
out_path.parent.mkdir(parents=True, exist_ok=True)
prs.save(str(out_path))
print(f"Saved to {out_path}")
