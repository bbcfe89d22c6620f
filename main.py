#!/usr/bin/env python3
"""
catenc CLI entry point.

Usage:
    python main.py encode --input data.csv --column city --output codes.csv
    python main.py decode --vocab vocab.json 0 3 7
    python main.py schemes
"""

import sys

from catenc.cli import main


if __name__ == "__main__":
    sys.exit(main())
