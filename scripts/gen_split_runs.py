"""
Generate a .pptx where tags are split across multiple <a:r> runs.

PowerPoint splits text like {{bonjour}} into separate runs whenever the
language, spell-check state or formatting changes mid-word. For example:
  Run 1: "Another tag: {{bonj"
  Run 2: "our}} le monde !"

office_templater must rewrite both runs without merging them.
"""

from pathlib import Path

from pptx import Presentation
from pptx.util import Inches
import lxml.etree as ET

prs = Presentation()
slide = prs.slides.add_slide(prs.slide_layouts[6])
box = slide.shapes.add_textbox(Inches(1), Inches(1), Inches(8), Inches(2))
tf = box.text_frame

# Each inner list is one paragraph, each string one run.
paragraphs = [
    ["Hello this is a tag: {{hello}}"],
    ["Another tag: {{bonj", "our}} le monde !"],
    ["words ", "{{hello}}", "|{{hel", "lo}}|", "{{hola}}", ", world!"],
    ["A tag {{ho{{hola}}la}} inside a sentence"],
]

for i, runs in enumerate(paragraphs):
    p = tf.paragraphs[0] if i == 0 else tf.add_paragraph()
    for text in runs:
        p.add_run().text = text

print("Generated XML for the split paragraph:")
print(ET.tostring(tf.paragraphs[1]._p, pretty_print=True).decode())

out_path = Path("templates/split_runs.pptx")
out_path.parent.mkdir(parents=True, exist_ok=True)
prs.save(str(out_path))
print(f"\nSaved to {out_path}")
