"""
Generate a .pptx with pictures tagged through their alt text.

replace_picture() looks for the tag in <p:nvPicPr>, which is where
PowerPoint stores the picture's name and description.
"""

import io
from pathlib import Path

from PIL import Image
from pptx import Presentation
from pptx.oxml.ns import qn
from pptx.util import Inches


def _png(color):
    buf = io.BytesIO()
    Image.new("RGB", (64, 64), color).save(buf, "PNG")
    buf.seek(0)
    return buf


prs = Presentation()
slide = prs.slides.add_slide(prs.slide_layouts[6])

for i, (tag, color) in enumerate([("{{picture1png}}", "red"), ("untagged", "gray")]):
    pic = slide.shapes.add_picture(_png(color), Inches(1 + 3 * i), Inches(1), Inches(2))
    pic._element.find(qn("p:nvPicPr")).find(qn("p:cNvPr")).set("descr", tag)

out_path = Path("templates/picture_placeholders.pptx")
out_path.parent.mkdir(parents=True, exist_ok=True)
prs.save(str(out_path))
print(f"Saved to {out_path}")
