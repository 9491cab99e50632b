"""
Integration tests: frame a real python-pptx table and read it back with lxml.
"""
from __future__ import annotations

from lxml import etree as ET

from tableframe.analysis import check_well_formed, collect_shape_ids, parse_fragment
from tableframe.config import NS_DRAWINGML, NS_PRESENTATIONML
from tableframe.ooxml import (
    close_graphic_frame,
    close_group_frame,
    open_graphic_frame,
    open_group_frame,
)


def _a(tag_name: str) -> str:
    return f'{{{NS_DRAWINGML}}}{tag_name}'


def _p(tag_name: str) -> str:
    return f'{{{NS_PRESENTATIONML}}}{tag_name}'


def test_group_frame_around_table(table_xml: str, logger) -> None:
    xml = open_group_frame(False, 6, 36.0, 72.0) + table_xml + close_group_frame()
    assert check_well_formed(xml, logger=logger)

    root = parse_fragment(xml)
    tbl = root.find(f'.//{_a("graphicData")}/{_a("tbl")}')
    assert tbl is not None
    texts = [t.text for t in tbl.iter(_a('t'))]
    assert "Region" in texts
    assert "North" in texts
    assert len(tbl.findall(_a('tr'))) == 2
    assert collect_shape_ids(xml) == [6, 6]


def test_standalone_group_frame_around_table(table_xml: str) -> None:
    xml = open_group_frame(True, 2, 0.0, 0.0) + table_xml + close_group_frame()
    root = ET.fromstring(xml.encode("utf-8"))
    assert root.tag == _p('spTree')
    off = root.find(f'{_p("graphicFrame")}/{_p("xfrm")}/{_a("off")}')
    assert off.get('x') == "0"
    assert root.find(f'.//{_a("tbl")}') is not None


def test_graphic_frame_around_table(table_xml: str) -> None:
    xml = open_graphic_frame(11, 1.0, 2.0) + table_xml + close_graphic_frame()
    root = parse_fragment(xml)
    frame = root[0]
    assert frame.tag == _p('graphicFrame')
    off = frame.find(f'{_p("xfrm")}/{_a("off")}')
    assert (off.get('x'), off.get('y')) == ("12700", "25400")
    assert frame.find(f'{_a("graphic")}/{_a("graphicData")}/{_a("tbl")}') is not None
