"""Shared fixtures: framed-table XML built with python-pptx."""

from lxml import etree as ET
from pptx import Presentation
from pptx.util import Inches

import pytest

from tableframe.logger import FragmentLogger


@pytest.fixture
def logger() -> FragmentLogger:
    """Fresh logger with an empty warning list."""
    return FragmentLogger()


@pytest.fixture
def table_xml() -> str:
    """<a:tbl> element of a 2x3 table created by python-pptx, serialized with its namespace declarations."""
    prs = Presentation()
    slide = prs.slides.add_slide(prs.slide_layouts[6])
    frame = slide.shapes.add_table(2, 3, Inches(1), Inches(1), Inches(4), Inches(1))
    frame.table.cell(0, 0).text = "Region"
    frame.table.cell(1, 0).text = "North"
    tbl = frame.table._tbl
    return ET.tostring(tbl, encoding="unicode")


@pytest.fixture
def table_file(tmp_path, table_xml: str):
    """table_xml written to a UTF-8 file."""
    path = tmp_path / "tbl.xml"
    path.write_text(table_xml, encoding="utf-8")
    return path
