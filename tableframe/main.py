"""
CLI entry point

Wraps DrawingML table XML in a slide graphicFrame (optionally inside a shape tree)
"""
import sys
import argparse
from pathlib import Path
from typing import Optional

from tableframe.analysis import check_frame_args, check_well_formed, read_frame_offsets
from tableframe.config import EmitterConfig, default_config
from tableframe.logger import FragmentLogger
from tableframe.ooxml import (
    close_graphic_frame,
    close_group_frame,
    open_graphic_frame,
    open_group_frame,
)


def build_fragment(shape_id: int, offx: float, offy: float, table_xml: str = "",
                   config: Optional[EmitterConfig] = None) -> str:
    """Assemble open + table_xml + close for the pair selected by config (default_config if None)"""
    config = config or default_config
    if config.frame_only:
        return open_graphic_frame(shape_id, offx, offy) + table_xml + close_graphic_frame()
    return open_group_frame(config.standalone, shape_id, offx, offy) + table_xml + close_group_frame()


def main():
    """Main function"""
    parser = argparse.ArgumentParser(
        description='Wrap DrawingML table XML in a presentation graphicFrame',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  tableframe 4 --offx 72 --offy 144 --table tbl.xml
  tableframe 4 --standalone --table tbl.xml -o sptree.xml
  tableframe 4 --frame-only --table tbl.xml --check
        """
    )
    parser.add_argument('id', type=int, help='Shape id (unique within the slide)')
    parser.add_argument('--offx', type=float, default=0.0, help='Horizontal offset in points (default: 0)')
    parser.add_argument('--offy', type=float, default=0.0, help='Vertical offset in points (default: 0)')
    parser.add_argument('--standalone', action='store_true',
                        help='Prefix the shape tree with the XML declaration and namespace declarations')
    parser.add_argument('--frame-only', dest='frame_only', action='store_true',
                        help='Emit only the graphicFrame, without the enclosing p:spTree')
    parser.add_argument('--table', type=str, default=None,
                        help='File holding the <a:tbl> XML to place inside the frame')
    parser.add_argument('-c', '--check', action='store_true',
                        help='Verify that the assembled XML is well-formed')
    parser.add_argument('-o', '--output', type=str, default=None,
                        help='Write to this file instead of stdout')

    args = parser.parse_args()

    if args.standalone and args.frame_only:
        parser.error("--standalone cannot be combined with --frame-only")

    config = EmitterConfig(
        standalone=args.standalone,
        frame_only=args.frame_only,
        check_well_formed=args.check,
    )
    logger = FragmentLogger(warn_non_finite=config.warn_non_finite)

    table_xml = ""
    if args.table:
        table_path = Path(args.table)
        if not table_path.exists():
            logger.error(f"Table file not found: {table_path}")
            sys.exit(1)
        table_xml = table_path.read_text(encoding='utf-8')

    args_ok = check_frame_args(args.id, args.offx, args.offy, logger=logger)
    xml = build_fragment(args.id, args.offx, args.offy, table_xml, config=config)

    if config.check_well_formed and not check_well_formed(xml, logger=logger, element_id=args.id):
        logger.error(f"Generated XML is not well-formed (id={args.id})")
        for warning in logger.get_warnings():
            print(f"  - {warning.message}")
        sys.exit(1)

    if config.check_well_formed and args_ok:
        for x_pt, y_pt in read_frame_offsets(xml):
            logger.info(f"Checked frame {args.id} at x={x_pt:g}pt y={y_pt:g}pt")

    if args.output:
        output_path = Path(args.output)
        output_path.write_text(xml, encoding='utf-8')
        logger.info(f"Saved {output_path} ({len(xml)} characters)")
    else:
        sys.stdout.write(xml)
        sys.stdout.write("\n")

    # Display warnings
    warnings = logger.get_warnings()
    if warnings:
        print(f"\nWarnings ({len(warnings)}):", file=sys.stderr)
        for warning in warnings:
            print(f"  - {warning.message}", file=sys.stderr)


if __name__ == "__main__":
    main()
