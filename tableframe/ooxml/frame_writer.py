"""
Table frame fragment module

Emits the opening and closing halves of the spTree / graphicFrame elements that host a
DrawingML table on a slide. The opening halves are left unclosed on purpose: callers append
their own <a:tbl> content and then the matching close fragment.

    xml = open_group_frame(False, 3, 72.0, 36.0) + tbl_xml + close_group_frame()

All functions are pure; identical arguments always produce identical text.
"""
from ..config import (
    NS_DRAWINGML,
    NS_PRESENTATIONML,
    NS_RELATIONSHIPS,
    TABLE_GRAPHIC_URI,
    XML_DECLARATION,
)
from ..geom.units import format_emu


def _sptree_start(standalone: bool) -> str:
    """Opening <p:spTree> tag, with declarations when the fragment is a document of its own"""
    if not standalone:
        return '<p:spTree>'
    # The trailing space before '>' is part of the emitted byte sequence
    return (
        XML_DECLARATION
        + f'<p:spTree xmlns:a="{NS_DRAWINGML}" '
        + f'xmlns:r="{NS_RELATIONSHIPS}" '
        + f'xmlns:p="{NS_PRESENTATIONML}" >'
    )


def _group_properties(shape_id: int) -> str:
    """Non-visual group properties and an all-zero group transform"""
    return (
        '<p:nvGrpSpPr>'
        f'<p:cNvPr id="{shape_id}" name="table{shape_id}"/>'
        '<p:cNvGrpSpPr/>'
        '<p:nvPr/>'
        '</p:nvGrpSpPr>'
        '<p:grpSpPr>'
        '<a:xfrm>'
        '<a:off x="0" y="0"/>'
        '<a:ext cx="0" cy="0"/>'
        '<a:chOff x="0" y="0"/>'
        '<a:chExt cx="0" cy="0"/>'
        '</a:xfrm>'
        '</p:grpSpPr>'
    )


def open_graphic_frame(shape_id: int, offx: float, offy: float) -> str:
    """
    Open a graphicFrame for a table, without any enclosing shape tree.

    Args:
        shape_id: Shape id, unique within the slide (not checked)
        offx: Horizontal offset in points
        offy: Vertical offset in points

    Returns:
        Unclosed fragment ending inside <a:graphicData>
    """
    return (
        '<p:graphicFrame>'
        '<p:nvGraphicFramePr>'
        f'<p:cNvPr id="{shape_id}" name="nvGraphicFrame {shape_id}"/>'
        '<p:cNvGraphicFramePr><a:graphicFrameLocks noGrp="true"/></p:cNvGraphicFramePr>'
        '<p:nvPr/>'
        '</p:nvGraphicFramePr>'
        '<p:xfrm rot="0">'
        f'<a:off x="{format_emu(offx)}" y="{format_emu(offy)}"/>'
        '</p:xfrm>'
        '<a:graphic>'
        f'<a:graphicData uri="{TABLE_GRAPHIC_URI}">'
    )


def open_group_frame(standalone: bool, shape_id: int, offx: float, offy: float) -> str:
    """
    Open a shape tree holding a single table graphicFrame.

    Args:
        standalone: Prefix with the XML declaration and the a/r/p namespace declarations
        shape_id: Shape id, used for both the group and the frame
        offx: Horizontal offset of the frame in points
        offy: Vertical offset of the frame in points

    Returns:
        Unclosed fragment ending inside <a:graphicData>
    """
    return _sptree_start(standalone) + _group_properties(shape_id) + open_graphic_frame(shape_id, offx, offy)


def close_graphic_frame() -> str:
    """Close the elements opened by open_graphic_frame"""
    return '</a:graphicData></a:graphic></p:graphicFrame>'


def close_group_frame() -> str:
    """Close the elements opened by open_group_frame"""
    return close_graphic_frame() + '</p:spTree>'
