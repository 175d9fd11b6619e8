"""
Generate a .docx with tags in headers and footers over two sections.

Section 1 owns its header and footer. Section 2 owns a first-page header
but inherits (links) the regular header, so DocxTemplate must visit the
inherited definition once, not once per section.
"""

from pathlib import Path

from docx import Document
from docx.enum.section import WD_SECTION

doc = Document()
doc.add_paragraph("Section one body {{body_one}}")

first = doc.sections[0]
first.header.is_linked_to_previous = False
first.header.paragraphs[0].text = "Header: {{header_title}}"
first.footer.is_linked_to_previous = False
first.footer.paragraphs[0].text = "Footer: {{footer_page}}"

second = doc.add_section(WD_SECTION.NEW_PAGE)
second.different_first_page_header_footer = True
second.first_page_header.is_linked_to_previous = False
second.first_page_header.paragraphs[0].text = "Cover: {{cover_title}}"
doc.add_paragraph("Section two body")

out_path = Path("templates/header_footer_placeholders.docx")
out_path.parent.mkdir(parents=True, exist_ok=True)
doc.save(str(out_path))
print(f"Saved to {out_path}")
