"""Command-line entry point.

Usage:
    python scripts/generate_grammar.py SCHEMA [--config PATH] [--output PATH] [--check]
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import analysis
from .config import DEFAULT_CONFIG, load_config
from .errors import GrammarError
from .generator import GrammarGenerator
from .schema_io import load_tree


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate an ANTLR4 grammar from a syntax tree model"
    )
    parser.add_argument("schema", type=Path, help="JSON snapshot of the tree model")
    parser.add_argument("--config", type=Path, help="Path to config.json")
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Output .g4 file (default: grammar/<grammar_name>.g4)",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Verify the written grammar has no undefined or duplicate rules",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config) if args.config else DEFAULT_CONFIG
        output = args.output or Path("grammar") / f"{config.grammar_name}.g4"

        print("Syntax Grammar Generator")
        print(f"  Schema:     {args.schema}")
        print(f"  Output:     {output}")
        print()

        print("Step 1: Loading tree model...")
        tree = load_tree(args.schema)
        print(f"  Types: {len(tree.types)}")
        print()

        print("Step 2: Generating grammar...")
        generator = GrammarGenerator(tree, config)
        grammar = generator.run()
        print(f"  Rules: {len(analysis.parse_rule_blocks(grammar))}")
        print()
    except GrammarError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(grammar + "\n")
    except OSError as e:
        print(f"Error: Cannot write {output}: {e}", file=sys.stderr)
        return 1
    print(f"  Grammar: {output} ({len(grammar)} bytes)")

    if args.check:
        print()
        print("Step 3: Checking grammar...")
        ok = True
        for name in analysis.duplicate_rules(grammar):
            print(f"  ❌ Duplicate rule: {name}")
            ok = False
        for name, missing in sorted(analysis.undefined_references(grammar).items()):
            print(f"  ❌ {name} references undefined: {', '.join(sorted(missing))}")
            ok = False
        cycles = analysis.find_cycles(analysis.rule_dependencies(grammar), max_depth=3)
        print(f"  Short cycles (depth <= 3): {len(cycles)}")
        if not ok:
            return 1
        print("  ✅ All rule references resolve")

    print()
    print("Done!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
