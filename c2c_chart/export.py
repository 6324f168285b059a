"""Export snapshots and their output encodings.

Every view (JSON, written instructions, printable HTML, PNG) is built from
one ExportRecord and, where rows are needed, one InstructionSet, so the
numbers and color groups they report always agree.
"""
from __future__ import annotations

import datetime as dt
import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from jinja2 import Environment, select_autoescape

from .config import C2CChartError, yarn_display_name
from .diagonal import diagonal_index
from .grid import Grid, GridStore
from .instructions import InstructionSet, generate_instructions
from .palette import Palette
from .pattern import column_labels, render_chart_bytes, row_labels

logger = logging.getLogger("c2c_chart")

FORMAT_TAG = "c2c_crochet"


@dataclass(frozen=True)
class ExportRecord:
    """Immutable snapshot of a chart and its export settings."""

    grid: Tuple[Tuple[str, ...], ...]
    width: int
    height: int
    yarn_type: str
    timestamp: str
    format_tag: str = FORMAT_TAG

    @property
    def rows(self) -> Grid:
        return [list(row) for row in self.grid]

    def to_store(self) -> GridStore:
        return GridStore.from_rows(self.grid)


def _utc_timestamp() -> str:
    now = dt.datetime.now(dt.timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_export_record(
    store: GridStore, yarn_type: str, timestamp: Optional[str] = None
) -> ExportRecord:
    """Snapshot the store's grid together with the yarn weight.

    Raises:
        C2CChartError: If the yarn type is unknown.
    """
    yarn_display_name(yarn_type)
    record = ExportRecord(
        grid=tuple(tuple(row) for row in store.to_list()),
        width=store.width,
        height=store.height,
        yarn_type=yarn_type,
        timestamp=timestamp or _utc_timestamp(),
    )
    logger.debug(f"Snapshot {record.width}x{record.height} chart ({yarn_type})")
    return record


def record_to_dict(record: ExportRecord) -> Dict[str, Any]:
    return {
        "grid": record.rows,
        "size": {"width": record.width, "height": record.height},
        "yarnType": record.yarn_type,
        "type": record.format_tag,
        "timestamp": record.timestamp,
    }


def record_to_json(record: ExportRecord) -> str:
    """Encode a record as the structured JSON export."""
    return json.dumps(record_to_dict(record), indent=2)


def record_from_dict(data: Dict[str, Any]) -> ExportRecord:
    """Rebuild a record from decoded JSON, validating the grid.

    Raises:
        C2CChartError: If the data is not a C2C chart export.
    """
    if not isinstance(data, dict):
        raise C2CChartError("Chart export must be a JSON object")
    if data.get("type") != FORMAT_TAG:
        raise C2CChartError(f"Not a C2C chart export (type={data.get('type')!r})")

    try:
        rows = data["grid"]
        size = data["size"]
        width = int(size["width"])
        height = int(size["height"])
    except (KeyError, TypeError, ValueError) as exc:
        raise C2CChartError(f"Invalid chart export: {exc}") from exc

    if not isinstance(rows, list) or not all(isinstance(row, list) for row in rows):
        raise C2CChartError("Invalid chart export: grid must be a list of rows")

    store = GridStore.from_rows(rows)
    if store.dimensions != (width, height):
        raise C2CChartError(
            f"Grid is {store.width}x{store.height} but size says {width}x{height}"
        )

    yarn_type = data.get("yarnType", "medium")
    yarn_display_name(yarn_type)
    timestamp = data.get("timestamp") or _utc_timestamp()
    return build_export_record(store, yarn_type, timestamp=str(timestamp))


def record_from_json(text: str) -> ExportRecord:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise C2CChartError(f"Invalid chart JSON: {exc}") from exc
    return record_from_dict(data)


def load_grid(text: str) -> GridStore:
    """Reconstruct a GridStore from a JSON export."""
    return record_from_json(text).to_store()


def _instructions_for(
    record: ExportRecord,
    instruction_set: Optional[InstructionSet],
    palette: Optional[Palette],
) -> InstructionSet:
    if instruction_set is None:
        return generate_instructions(record.rows, palette)
    if (instruction_set.width, instruction_set.height) != (record.width, record.height):
        raise C2CChartError("Instructions do not match the exported grid")
    return instruction_set


def format_instructions(
    record: ExportRecord,
    instruction_set: Optional[InstructionSet] = None,
    palette: Optional[Palette] = None,
) -> str:
    """Render the written row-by-row instructions as plain text."""
    instructions = _instructions_for(record, instruction_set, palette)

    lines: List[str] = [
        "C2C CROCHET PATTERN - WRITTEN INSTRUCTIONS",
        "",
        f"Pattern Size: {record.width} × {record.height} blocks",
        f"Yarn Weight: {yarn_display_name(record.yarn_type)}",
        "",
        "COLOR KEY:",
    ]
    for entry in instructions.legend:
        lines.append(f"{entry.label}: [HEX: {entry.color}]")
    lines += [
        "",
        "BASIC C2C STITCHES:",
        "Starting chain: ch 6",
        "First block: dc in 4th ch from hook and in next 2 ch",
        "Chain between blocks: ch 6",
        "Standard block: dc in 4th ch from hook and in next 2 ch, "
        "slip stitch to corner ch-3 space of previous row, ch 3",
        "Decreasing: slip stitch across the top of the last block, "
        "do not make a new block",
        "",
        "PATTERN INSTRUCTIONS:",
        "Note: Start in the bottom-right corner and work diagonally toward the top-left.",
        "",
    ]

    # A 1x1 chart has no increase rows and opens straight into decreasing
    transition = instructions.transition_index
    for i, row in enumerate(instructions.rows):
        if i == 0:
            lines.append("DECREASING SECTION:" if row.is_decreasing else "INCREASING SECTION:")
        elif i == transition:
            lines += ["", "DECREASING SECTION:"]
        lines.append(str(row))

    lines += ["", "Finish off and weave in ends.", ""]
    return "\n".join(lines)


_PRINTABLE_TEMPLATE = """<html>
  <head>
    <title>C2C Crochet Chart</title>
    <style>
      body { font-family: Arial, sans-serif; padding: 20px; }
      .grid-container { margin: 20px 0; }
      .row { display: flex; }
      .cell { width: 20px; height: 20px; border: 1px solid #ccc; }
      .diagonal-0 { box-shadow: inset 0 0 0 20px rgba(200, 200, 200, 0.1); }
      .diagonal-1 { box-shadow: inset 0 0 0 20px rgba(200, 200, 200, 0.2); }
      .number { width: 20px; height: 20px; display: flex; align-items: center;
                justify-content: center; font-size: 10px; color: #666; }
      .info { margin-bottom: 20px; font-size: 14px; }
      .instructions { margin-top: 30px; font-size: 14px; line-height: 1.5; }
      table.color-key { border-collapse: collapse; margin-top: 20px; }
      table.color-key td { border: 1px solid #ddd; padding: 8px; }
      .color-sample { width: 20px; height: 20px; display: inline-block; border: 1px solid #ddd; }
    </style>
  </head>
  <body>
    <h1>C2C (Corner to Corner) Crochet Chart</h1>
    <div class="info">
      <p><strong>Yarn Weight:</strong> {{ yarn_name }}</p>
      <p><strong>Grid Size:</strong> {{ width }} &times; {{ height }}</p>
      <p><strong>Date Created:</strong> {{ created }}</p>
    </div>
    <div class="grid-container">
      {% if show_numbers %}
      <div class="row"><div class="number"></div>
        {% for label in col_labels %}<div class="number">{{ label }}</div>{% endfor %}
      </div>
      {% endif %}
      {% for row in chart_rows %}
      <div class="row">
        {% if show_numbers %}<div class="number">{{ row.label }}</div>{% endif %}
        {% for cell in row.cells %}<div class="cell{% if show_diagonals %} diagonal-{{ cell.band }}{% endif %}" style="background-color: {{ cell.color }}"></div>{% endfor %}
      </div>
      {% endfor %}
    </div>
    {% if legend %}
    <h2>Color Key</h2>
    <table class="color-key">
      <tr><th>Color</th><th>Sample</th><th>Hex</th></tr>
      {% for entry in legend %}
      <tr>
        <td>{{ entry.label }}</td>
        <td><div class="color-sample" style="background-color: {{ entry.color }}"></div></td>
        <td>{{ entry.color }}</td>
      </tr>
      {% endfor %}
    </table>
    {% endif %}
    <div class="instructions">
      <h2>How to Read This C2C Chart</h2>
      <p>Corner to corner crochet works diagonally, starting from one corner and working to the opposite corner. Each square represents one "block" or "tile" in your work.</p>
      <p><strong>Starting:</strong> Begin at the bottom-right corner and work diagonally towards the top-left.</p>
      <p><strong>Increasing:</strong> Add one block at the beginning of each row until you reach the maximum width of the pattern.</p>
      <p><strong>Decreasing:</strong> After reaching the maximum width, decrease one block at the beginning of each row until you reach the opposite corner.</p>
      <p><strong>Color Changes:</strong> Change yarn color at the end of a block before making the chain for the next block.</p>
      <p><strong>Reading the Chart:</strong> Each diagonal line represents one row of blocks. The shaded diagonal lines help you see which blocks are worked together in one row.</p>
    </div>
    <button onclick="window.print()">Print Pattern</button>
  </body>
</html>
"""

_env = Environment(autoescape=select_autoescape(default_for_string=True))


def render_printable_html(
    record: ExportRecord,
    show_numbers: bool = True,
    show_diagonals: bool = True,
    instruction_set: Optional[InstructionSet] = None,
    palette: Optional[Palette] = None,
) -> str:
    """Render the printable chart page: chart, color key and reading guide."""
    instructions = _instructions_for(record, instruction_set, palette)

    labels = row_labels(record.height)
    chart_rows = []
    for y, row in enumerate(record.grid):
        chart_rows.append({
            "label": labels[y],
            "cells": [
                {
                    "color": color,
                    "band": diagonal_index(y, x, record.width, record.height) % 2,
                }
                for x, color in enumerate(row)
            ],
        })

    template = _env.from_string(_PRINTABLE_TEMPLATE)
    return template.render(
        yarn_name=yarn_display_name(record.yarn_type),
        width=record.width,
        height=record.height,
        created=record.timestamp[:10],
        show_numbers=show_numbers,
        show_diagonals=show_diagonals,
        col_labels=column_labels(record.width),
        chart_rows=chart_rows,
        legend=instructions.legend.entries,
    )


def render_png(
    record: ExportRecord,
    cell_size: int = 20,
    show_numbers: bool = True,
    show_diagonals: bool = True,
) -> bytes:
    """Render the chart image for a snapshot as PNG bytes."""
    return render_chart_bytes(
        record.rows,
        cell_size=cell_size,
        show_numbers=show_numbers,
        show_diagonals=show_diagonals,
    )


def default_filename(record: ExportRecord, output_format: str) -> str:
    """Return the conventional download name for an export format."""
    if output_format == "txt":
        return f"c2c-instructions-{record.yarn_type}.txt"
    return f"c2c-chart-{record.yarn_type}.{output_format}"
