"""
Unit conversion module

Points <-> EMU, backed by python-pptx length types
"""
import math

from pptx.util import Emu, Pt  # type: ignore[import]

from ..config import EMU_PER_POINT


def pt_to_emu(value: float) -> int:
    """
    Convert points to EMU.

    Truncates toward zero, so -0.00001 pt becomes 0 and -1.5 pt becomes -19050.
    Raises OverflowError/ValueError when value * 12700 is not finite.
    """
    return int(Pt(value))


def emu_to_pt(emu: int) -> float:
    """Convert EMU to points"""
    return Emu(emu).pt


def format_emu(value: float) -> str:
    """
    Format a point value as EMU attribute text.

    When the EMU value is not finite (inf/nan input, or a product past the float range)
    its float text ('inf', '-inf', 'nan') is written instead of raising.
    """
    emu = value * EMU_PER_POINT
    if not math.isfinite(emu):
        return str(emu)
    return str(pt_to_emu(value))
