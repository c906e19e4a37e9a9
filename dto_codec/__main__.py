#!/usr/bin/env python3
"""
DTO Codec - Main Entry Point

This module allows the package to be run as a script:
    python -m dto_codec
"""

# Local imports
from dto_codec.adapters.cli.main import main

if __name__ == "__main__":
    raise SystemExit(main())
