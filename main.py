#!/usr/bin/env python3
"""
Main script to generate the daily multilingual news reels.
Uses the SOLID pipeline in src/news_reels; run from project root.
"""

import sys
from pathlib import Path

# Package lives in src; allow running without installing
_SRC = Path(__file__).resolve().parent / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))


def main() -> int:
    from news_reels.cli import main as cli_main

    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
