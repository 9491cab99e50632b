"""
Configuration module

Namespace URIs, unit constants and emitter settings
"""
from dataclasses import dataclass

# 1 pt = 12700 EMU (914400 EMU per inch / 72 pt per inch)
EMU_PER_POINT = 12700

# XML namespaces
NS_DRAWINGML = 'http://schemas.openxmlformats.org/drawingml/2006/main'
NS_RELATIONSHIPS = 'http://schemas.openxmlformats.org/officeDocument/2006/relationships'
NS_PRESENTATIONML = 'http://schemas.openxmlformats.org/presentationml/2006/main'
NSMAP_ALL = {'a': NS_DRAWINGML, 'r': NS_RELATIONSHIPS, 'p': NS_PRESENTATIONML}

# graphicData uri for DrawingML tables
TABLE_GRAPHIC_URI = 'http://schemas.openxmlformats.org/drawingml/2006/table'

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'


@dataclass
class EmitterConfig:
    """Settings for the command line and QA helpers"""
    # Prefix the group fragment with the XML declaration and namespace declarations
    standalone: bool = False
    # Emit only the graphicFrame pair (no enclosing spTree)
    frame_only: bool = False
    # Record a warning when an offset is inf/nan
    warn_non_finite: bool = True
    # Parse the assembled fragment with lxml before writing it
    check_well_formed: bool = False


default_config = EmitterConfig()
