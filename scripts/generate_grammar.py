#!/usr/bin/env python3
"""
C# ANTLR4 Grammar Generator

Reads a JSON snapshot of the syntax tree model and writes the grammar the
node types describe.

Usage:
    python scripts/generate_grammar.py SCHEMA [--config scripts/config.json] [--output DIR/FILE.g4] [--check]
"""

import sys
from pathlib import Path

from syntax_grammar.cli import main

CONFIG_PATH = Path(__file__).resolve().parent / "config.json"

if __name__ == "__main__":
    argv = sys.argv[1:]
    if "--config" not in argv and CONFIG_PATH.exists():
        argv += ["--config", str(CONFIG_PATH)]
    sys.exit(main(argv))
