"""
Generate a .docx with tags across all document areas:
body paragraphs (one split across runs), tables, headers, and footers.

get_all_text() lists them body first, then headers and footers.
"""

from pathlib import Path

from docx import Document

doc = Document()

header = doc.sections[0].header
header.is_linked_to_previous = False
header.paragraphs[0].text = "Doc: {{doc_title}}"

footer = doc.sections[0].footer
footer.is_linked_to_previous = False
footer.paragraphs[0].text = "Page {{page_num}}"

p = doc.add_paragraph()
for text in ["Hello ", "{{body_", "name}}"]:
    p.add_run(text)

table = doc.add_table(rows=1, cols=2)
table.cell(0, 0).text = "{{cell_label}}"
table.cell(0, 1).text = "{{cell_value}}"

out_path = Path("templates/combined_areas.docx")
out_path.parent.mkdir(parents=True, exist_ok=True)
doc.save(str(out_path))
print(f"Saved to {out_path}")
