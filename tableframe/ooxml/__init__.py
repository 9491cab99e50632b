"""
OOXML fragment emitters for placing DrawingML tables on presentation slides.
"""
from .frame_writer import (
    close_graphic_frame,
    close_group_frame,
    open_graphic_frame,
    open_group_frame,
)

__all__ = [
    "close_graphic_frame",
    "close_group_frame",
    "open_graphic_frame",
    "open_group_frame",
]
