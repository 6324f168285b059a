"""Command-line interface for the C2C chart tool."""
from __future__ import annotations

import logging
import os
import sys
import time
from dataclasses import dataclass
from typing import List, Optional, Sequence

logger = logging.getLogger("c2c_chart")

from .config import (
    OUTPUT_FORMATS,
    C2CChartError,
    Config,
    clamp_dimension,
    yarn_display_name,
)
from .export import (
    ExportRecord,
    build_export_record,
    format_instructions,
    load_grid,
    record_to_json,
    render_png,
    render_printable_html,
)
from .grid import GridStore
from .instructions import InstructionSet, generate_instructions
from .palette import Palette, load_palette
from .resample import import_image

_EXTENSION_FORMATS = {
    ".png": "png",
    ".json": "json",
    ".txt": "txt",
    ".html": "html",
    ".htm": "html",
}


@dataclass
class ProcessingResult:
    """Result of chart processing including the exported snapshot."""

    output_bytes: bytes
    record: ExportRecord
    instructions: InstructionSet


def resolve_output_format(config: Config) -> str:
    """Pick the output format from the config or the output file extension.

    Raises:
        C2CChartError: If no supported format can be determined.
    """
    if config.output_format:
        return config.output_format
    ext = os.path.splitext(config.output_path)[1].lower()
    try:
        return _EXTENSION_FORMATS[ext]
    except KeyError:
        raise C2CChartError(
            f"Cannot infer output format from '{config.output_path}'; "
            f"use --format {'|'.join(OUTPUT_FORMATS)}"
        ) from None


def load_store(input_bytes: bytes, config: Config, is_json: bool = False) -> GridStore:
    """Build the chart grid from a JSON export or by sampling an image.

    JSON exports keep their own dimensions; images are sampled into a
    ``config.width x config.height`` grid.
    """
    if is_json:
        try:
            text = input_bytes.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise C2CChartError(f"Chart JSON is not valid UTF-8: {exc}") from exc
        return load_grid(text)

    store = GridStore(config.width, config.height)
    import_image(store, input_bytes)
    return store


def encode_output(
    record: ExportRecord,
    instructions: InstructionSet,
    output_format: str,
    config: Config,
) -> bytes:
    """Encode a snapshot in the requested output format."""
    if output_format == "png":
        return render_png(
            record,
            cell_size=config.cell_size,
            show_numbers=config.show_numbers,
            show_diagonals=config.show_diagonals,
        )
    if output_format == "json":
        return record_to_json(record).encode("utf-8")
    if output_format == "txt":
        return format_instructions(record, instructions).encode("utf-8")
    if output_format == "html":
        return render_printable_html(
            record,
            show_numbers=config.show_numbers,
            show_diagonals=config.show_diagonals,
            instruction_set=instructions,
        ).encode("utf-8")
    raise C2CChartError(f"Unsupported output format: {output_format}")


def process_chart_bytes(
    input_bytes: bytes,
    config: Optional[Config] = None,
    is_json: bool = False,
    output_format: str = "png",
) -> bytes:
    """Process input bytes into an export in the given format.

    Args:
        input_bytes: Input image bytes, or a JSON export when ``is_json``.
        config: Configuration options. Uses defaults if None.
        is_json: Treat the input as a JSON chart export.
        output_format: One of ``png``, ``json``, ``txt``, ``html``.

    Returns:
        Encoded output bytes.
    """
    result = process_chart_bytes_with_record(
        input_bytes, config, is_json=is_json, output_format=output_format
    )
    return result.output_bytes


def process_chart_bytes_with_record(
    input_bytes: bytes,
    config: Optional[Config] = None,
    is_json: bool = False,
    output_format: str = "png",
) -> ProcessingResult:
    """Process input bytes and return the output with its snapshot."""
    config = config or Config()
    palette: Optional[Palette] = load_palette(config.palette) if config.palette else None

    t0 = time.perf_counter()
    store = load_store(input_bytes, config, is_json=is_json)
    t1 = time.perf_counter()

    record = build_export_record(store, config.yarn_type)
    instructions = generate_instructions(store, palette)
    t2 = time.perf_counter()

    output_bytes = encode_output(record, instructions, output_format, config)
    t3 = time.perf_counter()

    if config.timing:
        print(
            "Timing (s): "
            f"load={t1 - t0:.4f}, "
            f"instructions={t2 - t1:.4f}, "
            f"encode={t3 - t2:.4f}, "
            f"total={t3 - t0:.4f}"
        )

    return ProcessingResult(
        output_bytes=output_bytes,
        record=record,
        instructions=instructions,
    )


def process_chart(config: Config) -> None:
    """Process a chart file.

    Args:
        config: Configuration with input/output paths.
    """
    output_format = resolve_output_format(config)
    is_json = config.input_path.lower().endswith(".json")

    print(f"Processing: {config.input_path}")
    with open(config.input_path, "rb") as f:
        input_bytes = f.read()

    result = process_chart_bytes_with_record(
        input_bytes, config, is_json=is_json, output_format=output_format
    )
    with open(config.output_path, "wb") as f:
        f.write(result.output_bytes)

    record = result.record
    print(
        f"Chart: {record.width}x{record.height} blocks, "
        f"{len(result.instructions.legend)} colors, "
        f"{len(result.instructions.rows)} rows"
    )
    print(f"Saved to: {config.output_path}")


def _read_dimension(name: str, raw: str) -> int:
    value = clamp_dimension(raw)
    try:
        valid = int(raw) == value
    except ValueError:
        valid = False
    if not valid:
        print(f"Warning: invalid {name} '{raw}', using {value}")
    return value


def parse_args(argv: Sequence[str]) -> Config:
    """Parse command-line arguments.

    Args:
        argv: Command-line arguments (including program name).

    Returns:
        Configured Config instance.

    Raises:
        C2CChartError: If arguments are invalid.
    """
    args = list(argv[1:])
    config = Config()
    debug = False
    positional: List[str] = []

    def take_value(i: int) -> str:
        if i + 1 >= len(args):
            raise C2CChartError(_usage_message())
        return args[i + 1]

    i = 0
    while i < len(args):
        arg = args[i]
        if arg == "--width":
            config.width = _read_dimension("width", take_value(i))
            i += 2
        elif arg == "--height":
            config.height = _read_dimension("height", take_value(i))
            i += 2
        elif arg == "--yarn":
            config.yarn_type = take_value(i).lower()
            i += 2
        elif arg == "--format":
            config.output_format = take_value(i).lower()
            i += 2
        elif arg == "--palette":
            config.palette = take_value(i)
            i += 2
        elif arg == "--cell-size":
            raw = take_value(i)
            try:
                config.cell_size = int(raw)
            except ValueError:
                raise C2CChartError(f"Invalid cell-size value: '{raw}'")
            if config.cell_size <= 0:
                raise C2CChartError("cell-size must be a positive integer")
            i += 2
        elif arg == "--no-numbers":
            config.show_numbers = False
            i += 1
        elif arg == "--no-diagonals":
            config.show_diagonals = False
            i += 1
        elif arg == "--timing":
            config.timing = True
            i += 1
        elif arg == "--debug":
            debug = True
            i += 1
        elif arg.startswith("--"):
            raise C2CChartError(f"Unknown option: {arg}\n{_usage_message()}")
        else:
            positional.append(arg)
            i += 1

    if len(positional) != 2:
        raise C2CChartError(_usage_message())
    config.input_path, config.output_path = positional

    yarn_display_name(config.yarn_type)
    if config.output_format is not None and config.output_format not in OUTPUT_FORMATS:
        raise C2CChartError(
            f"format must be one of: {', '.join(OUTPUT_FORMATS)}"
        )

    # Enable debug logging if requested
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(name)s: %(message)s"
        )
        logging.getLogger("c2c_chart").setLevel(logging.DEBUG)

    return config


def _usage_message() -> str:
    """Return usage message string."""
    return (
        "Usage: python c2c_chart.py input.(png|json) output.(png|json|txt|html) "
        "[--width N] [--height N] [--yarn ID] [--format png|json|txt|html] "
        "[--palette CSV] [--cell-size N] [--no-numbers] [--no-diagonals] "
        "[--timing] [--debug]"
    )


def main(argv: Sequence[str]) -> int:
    """Main entry point.

    Args:
        argv: Command-line arguments.

    Returns:
        Exit code (0 for success, 1 for error).
    """
    try:
        config = parse_args(argv)
        process_chart(config)
        return 0
    except C2CChartError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"File error: {exc}", file=sys.stderr)
        return 1
