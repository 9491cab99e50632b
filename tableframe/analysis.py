"""
Fragment analysis module

Checks frame arguments before emission and verifies that assembled fragments parse
"""
import math
from typing import List, Optional, Set, Tuple

from lxml import etree as ET

from .config import EMU_PER_POINT, NSMAP_ALL, NS_DRAWINGML, NS_PRESENTATIONML
from .geom.units import emu_to_pt
from .logger import FragmentLogger, get_logger


def _wrap(xml: str) -> str:
    """Wrap a fragment in a root element binding the a/r/p prefixes"""
    decls = ' '.join(f'xmlns:{prefix}="{uri}"' for prefix, uri in NSMAP_ALL.items())
    return f'<fragment {decls}>{xml}</fragment>'


def parse_fragment(xml: str):
    """
    Parse an assembled (balanced) fragment.

    A fragment starting with an XML declaration carries its own namespace declarations
    and is parsed as a document; anything else is parsed inside a wrapper element.

    Raises:
        lxml.etree.XMLSyntaxError: If the fragment is not well-formed
    """
    if xml.lstrip().startswith('<?xml'):
        # lxml refuses str input that carries an encoding declaration
        return ET.fromstring(xml.encode('utf-8'))
    return ET.fromstring(_wrap(xml))


def check_well_formed(xml: str, logger: Optional[FragmentLogger] = None,
                      element_id: Optional[int] = None) -> bool:
    """
    Return True if the fragment parses.

    Args:
        xml: Fragment text (open + content + close)
        logger: FragmentLogger receiving a warning on failure (default logger if None)
        element_id: Shape id reported with the warning
    """
    try:
        parse_fragment(xml)
    except ET.XMLSyntaxError as e:
        logger = logger or get_logger()
        logger.warn_malformed_fragment(element_id, str(e), getattr(e, 'lineno', None))
        return False
    return True


def check_frame_args(shape_id: int, offx: float, offy: float,
                     logger: Optional[FragmentLogger] = None,
                     seen_ids: Optional[Set[int]] = None) -> bool:
    """
    Check arguments for open_group_frame/open_graphic_frame.

    The emitters accept anything; this only reports what would produce an unusable slide.
    An offset is non-finite when its EMU value is, so 1e305 pt is reported like inf.
    When seen_ids is given, shape_id is added to it.

    Returns:
        True if the arguments are usable
    """
    logger = logger or get_logger()
    ok = True
    for axis, value in (('offx', offx), ('offy', offy)):
        if not math.isfinite(value * EMU_PER_POINT):
            logger.warn_non_finite_offset(shape_id, axis, value)
            ok = False
    if seen_ids is not None:
        if shape_id in seen_ids:
            logger.warn_duplicate_id(shape_id)
            ok = False
        seen_ids.add(shape_id)
    return ok


def collect_shape_ids(xml: str) -> List[int]:
    """Return every p:cNvPr id in the fragment, in document order"""
    root = parse_fragment(xml)
    ids = []
    for el in root.iter(f'{{{NS_PRESENTATIONML}}}cNvPr'):
        value = el.get('id')
        if value is not None:
            ids.append(int(value))
    return ids


def read_frame_offsets(xml: str) -> List[Tuple[float, float]]:
    """
    Return the (x, y) offset in points of every graphicFrame in the fragment.

    Reads p:graphicFrame/p:xfrm/a:off, so the zeroed group transform is not included.
    """
    root = parse_fragment(xml)
    offsets = []
    path = f'{{{NS_PRESENTATIONML}}}xfrm/{{{NS_DRAWINGML}}}off'
    for frame in root.iter(f'{{{NS_PRESENTATIONML}}}graphicFrame'):
        off = frame.find(path)
        if off is not None:
            offsets.append((emu_to_pt(int(off.get('x'))), emu_to_pt(int(off.get('y')))))
    return offsets
