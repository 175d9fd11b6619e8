"""
Generate a .pptx with tags inside table cells.

Every cell paragraph is a slide paragraph of its own, so get_all_text()
reports empty cells as "" and replace_tag() reaches into cells. The
{{rows}} marker lets find_tables() locate the table for append_row().
"""

from pathlib import Path

from pptx import Presentation
from pptx.util import Inches

prs = Presentation()
slide = prs.slides.add_slide(prs.slide_layouts[6])
slide.shapes.add_textbox(Inches(1), Inches(0.5), Inches(6), Inches(0.5)).text_frame.text = "Table template"

table = slide.shapes.add_table(3, 2, Inches(1), Inches(1.5), Inches(6), Inches(1.5)).table
table.cell(0, 0).text = "Label {{rows}}"
table.cell(0, 1).text = "Value"
table.cell(1, 0).text = "Name"
table.cell(1, 1).text = "{{table_name}}"
table.cell(2, 0).text = "City"
table.cell(2, 1).text = "{{table_city}}"

out_path = Path("templates/table_placeholders.pptx")
out_path.parent.mkdir(parents=True, exist_ok=True)
prs.save(str(out_path))
print(f"Saved to {out_path}")
