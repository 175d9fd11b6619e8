"""Tests for office_templater.document against python-docx documents."""
import io

from docx.oxml import parse_xml
from docx.shared import RGBColor

from office_templater.document import DocxTemplate
from office_templater.fragments import XML_SPACE

W = 'xmlns:w="http://schemas.openxmlformats.org/wordprocessingml/2006/main"'


def _non_empty(texts: list[str]) -> list[str]:
    return [t for t in texts if t]


def test_split_runs(document) -> None:
    p = document.add_paragraph()
    for text in ["Hello ", "{First", "Name}", ", welcome to ", "{Company", "Name}!"]:
        p.add_run(text)
    template = DocxTemplate(document)

    assert template.replace_tag("{FirstName}", "Ada").total == 1
    assert template.replace_tag("{CompanyName}", "Initech").total == 1

    assert p.text == "Hello Ada, welcome to Initech!"
    assert len(p.runs) == 6


def test_formatting_survives(document) -> None:
    p = document.add_paragraph()
    p.add_run("Mixed formatting: ")
    r1 = p.add_run("{Mixed")
    r1.bold = True
    r1.font.color.rgb = RGBColor(0xFF, 0x00, 0x00)
    r2 = p.add_run("Format}")
    r2.italic = True

    DocxTemplate(document).replace_tag("{MixedFormat}", "a much longer value")

    assert [r.text for r in p.runs] == ["Mixed formatting: ", "a much", " longer value"]
    assert p.text == "Mixed formatting: a much longer value"
    assert p.runs[1].bold is True
    assert p.runs[1].font.color.rgb == RGBColor(0xFF, 0x00, 0x00)
    assert p.runs[2].italic is True


def test_all_areas_in_order(document) -> None:
    header = document.sections[0].header
    header.is_linked_to_previous = False
    header.paragraphs[0].text = "Doc: {doc_title}"
    footer = document.sections[0].footer
    footer.is_linked_to_previous = False
    footer.paragraphs[0].text = "Page {page_num}"
    document.add_paragraph("Hello {body_name}")
    table = document.add_table(rows=1, cols=2)
    table.cell(0, 0).text = "{cell_label}"
    table.cell(0, 1).text = "{cell_value}"

    template = DocxTemplate(document)
    assert _non_empty(template.get_all_text()) == [
        "Hello {body_name}",
        "{cell_label}",
        "{cell_value}",
        "Doc: {doc_title}",
        "Page {page_num}",
    ]

    report = template.replace_tag(r"\{[a-z_]+\}", "X")
    assert report.total == 5
    assert _non_empty(template.get_all_text()) == ["Hello X", "X", "X", "Doc: X", "Page X"]


def test_linked_header_is_skipped(document) -> None:
    document.add_paragraph("body")
    assert _non_empty(DocxTemplate(document).get_all_text()) == ["body"]
    assert document.sections[0].header.is_linked_to_previous


def test_trailing_space_is_preserved(document) -> None:
    p = document.add_paragraph("Hello {x}")
    DocxTemplate(document).replace_tag("{x}", "")

    t = p.runs[0]._r.find(
        "{http://schemas.openxmlformats.org/wordprocessingml/2006/main}t"
    )
    assert t.text == "Hello "
    assert t.get(XML_SPACE) == "preserve"


def test_braces_without_tag(document) -> None:
    document.add_paragraph("Also lone { and lone } without pairs.")
    report = DocxTemplate(document).replace_tag("{name}", "x")
    assert not report


def test_save_and_reopen(document) -> None:
    document.add_paragraph("Kjære {Fornavn}, velkommen til {Bedriftsnavn}.")
    template = DocxTemplate(document)
    template.replace_tag("{Fornavn}", "Åse")
    template.replace_tag("{Bedriftsnavn}", "Øl & Co")

    buf = io.BytesIO()
    template.save(buf)
    buf.seek(0)
    assert _non_empty(DocxTemplate.open(buf).get_all_text()) == [
        "Kjære Åse, velkommen til Øl & Co."
    ]


def test_runs_inside_wrappers_belong_to_paragraph(document) -> None:
    p = document.add_paragraph("Dear {{na")
    p._p.append(parse_xml(
        f'<w:ins {W} w:id="1" w:author="rev">'
        '<w:r><w:t xml:space="preserve">me}} hi</w:t></w:r></w:ins>'
    ))
    p._p.append(parse_xml(
        f'<w:sdt {W}><w:sdtContent>'
        '<w:r><w:t xml:space="preserve"> {{city}}</w:t></w:r></w:sdtContent></w:sdt>'
    ))
    template = DocxTemplate(document)
    assert _non_empty(template.get_all_text()) == ["Dear {{name}} hi {{city}}"]

    assert template.replace_tag("{{name}}", "Ada").total == 1
    assert template.replace_tag("{{city}}", "Oslo").total == 1
    assert _non_empty(template.get_all_text()) == ["Dear Ada hi Oslo"]


def test_text_box_paragraph_is_separate(document) -> None:
    p = document.add_paragraph("Outer ")
    p._p.append(parse_xml(
        f'<w:r {W} xmlns:v="urn:schemas-microsoft-com:vml">'
        "<w:pict><v:shape><v:textbox><w:txbxContent>"
        "<w:p><w:r><w:t>Box {{city}}</w:t></w:r></w:p>"
        "</w:txbxContent></v:textbox></v:shape></w:pict></w:r>"
    ))
    template = DocxTemplate(document)
    assert _non_empty(template.get_all_text()) == ["Outer ", "Box {{city}}"]

    report = template.replace_tag("{{city}}", "Oslo")
    assert report.total == 1
    assert _non_empty(template.get_all_text()) == ["Outer ", "Box Oslo"]


def test_literal_tags_setting(document, monkeypatch) -> None:
    monkeypatch.setenv("OFFICE_TEMPLATER_LITERAL_TAGS", "true")
    document.add_paragraph("Total: [price] (incl. tax)")
    template = DocxTemplate(document)
    assert template.replace_tag("[price]", "42").total == 1
    assert template.replace_tag("(incl. tax)", "").total == 1
    assert _non_empty(template.get_all_text()) == ["Total: 42 "]
