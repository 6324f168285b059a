"""Script entry point for the C2C chart tool.

Run directly to convert an image or JSON export into a chart:

    python c2c_chart.py design.png chart.txt --width 30 --height 30

For library use, import from the c2c_chart package:

    from c2c_chart import GridStore, generate_instructions
"""
from __future__ import annotations

import sys

from c2c_chart import main

if __name__ == "__main__":
    sys.exit(main(sys.argv))
