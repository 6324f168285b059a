"""C2C Chart - Corner-to-corner crochet chart designer.

This package holds the grid model and the exports of a C2C crochet chart:
paint cells or sample an image into the grid, then produce a chart image,
a JSON snapshot, a printable page or row-by-row written instructions.

Example:
    from c2c_chart import GridStore, generate_instructions

    store = GridStore(width=3, height=2)
    store.set_cell(1, 2, "#FF0000")

    for row in generate_instructions(store).rows:
        print(row)

For exports, snapshot the grid first so every view reports the same rows:

    from c2c_chart import build_export_record, format_instructions

    record = build_export_record(store, "medium")
    text = format_instructions(record)

For debug logging, enable with:

    import logging
    logging.getLogger("c2c_chart").setLevel(logging.DEBUG)
    logging.basicConfig(level=logging.DEBUG)
"""
import logging

# Package logger - disabled by default, enable with logging.getLogger("c2c_chart").setLevel(logging.DEBUG)
logger = logging.getLogger("c2c_chart")
logger.addHandler(logging.NullHandler())
from .cli import (
    ProcessingResult,
    main,
    process_chart,
    process_chart_bytes,
    process_chart_bytes_with_record,
)
from .config import (
    BACKGROUND,
    YARN_TYPES,
    C2CChartError,
    Config,
    DecodeError,
    OutOfBounds,
    clamp_dimension,
)
from .diagonal import diagonal_cells, diagonal_count, diagonal_index
from .export import (
    ExportRecord,
    build_export_record,
    format_instructions,
    load_grid,
    record_from_json,
    record_to_json,
    render_png,
    render_printable_html,
)
from .grid import GridStore
from .instructions import (
    ColorLegend,
    ColorRun,
    InstructionRow,
    InstructionSet,
    build_legend,
    encode_runs,
    generate_instructions,
)
from .palette import DEFAULT_PALETTE, Palette, load_palette
from .pattern import render_chart
from .resample import import_image, sample_image, sample_image_bytes

__all__ = [
    "BACKGROUND",
    "YARN_TYPES",
    "C2CChartError",
    "Config",
    "DecodeError",
    "OutOfBounds",
    "clamp_dimension",
    "ProcessingResult",
    "main",
    "process_chart",
    "process_chart_bytes",
    "process_chart_bytes_with_record",
    # Grid and import
    "GridStore",
    "import_image",
    "sample_image",
    "sample_image_bytes",
    # Diagonals and instructions
    "diagonal_cells",
    "diagonal_count",
    "diagonal_index",
    "ColorLegend",
    "ColorRun",
    "InstructionRow",
    "InstructionSet",
    "build_legend",
    "encode_runs",
    "generate_instructions",
    # Palettes
    "DEFAULT_PALETTE",
    "Palette",
    "load_palette",
    # Exports
    "ExportRecord",
    "build_export_record",
    "format_instructions",
    "load_grid",
    "record_from_json",
    "record_to_json",
    "render_chart",
    "render_png",
    "render_printable_html",
]

__version__ = "1.0.0"
