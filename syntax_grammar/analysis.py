"""Read a generated grammar back and inspect its rule graph.

Used to sanity-check output: every referenced rule must be defined, every
rule defined once. Short cycles are reported for information; recursion
between rules is normal in a language grammar.
"""

from __future__ import annotations

import re
from typing import Dict, List, Set, Tuple

_RULE_NAME = re.compile(r"^([a-z][a-z0-9_]*)\s*$")
_LITERAL = re.compile(r"'(?:\\.|[^'\\])*'")
_COMMENT = re.compile(r"/\*.*?\*/")
_REFERENCE = re.compile(r"\b([a-z][a-z0-9_]*)\b")


def parse_rule_blocks(text: str) -> List[Tuple[str, List[str]]]:
    """Split grammar text into ``(rule name, production texts)`` in order."""
    blocks: List[Tuple[str, List[str]]] = []
    current = None
    for line in text.split("\n"):
        stripped = line.strip()
        if current is None:
            m = _RULE_NAME.match(stripped)
            if m and not line.startswith(" "):
                current = (m.group(1), [])
                blocks.append(current)
            continue
        if stripped == ";":
            current = None
        elif stripped.startswith((":", "|")):
            current[1].append(stripped[1:].strip())
    return blocks


def duplicate_rules(text: str) -> List[str]:
    """Names that head more than one rule block."""
    counts: Dict[str, int] = {}
    for name, _ in parse_rule_blocks(text):
        counts[name] = counts.get(name, 0) + 1
    return sorted(name for name, count in counts.items() if count > 1)


def production_references(production: str) -> Set[str]:
    """Rule names referenced by one production's text."""
    stripped = _COMMENT.sub(" ", _LITERAL.sub(" ", production))
    return set(_REFERENCE.findall(stripped))


def rule_dependencies(text: str) -> Dict[str, Set[str]]:
    """Map each rule to the rules its productions reference."""
    rules: Dict[str, Set[str]] = {}
    for name, productions in parse_rule_blocks(text):
        deps = rules.setdefault(name, set())
        for production in productions:
            deps.update(production_references(production))
    return rules


def undefined_references(text: str) -> Dict[str, Set[str]]:
    """Map each rule to the referenced rules that the grammar never defines."""
    rules = rule_dependencies(text)
    missing = {}
    for name, deps in rules.items():
        undefined = {d for d in deps if d not in rules}
        if undefined:
            missing[name] = undefined
    return missing


def find_cycles(rules: Dict[str, Set[str]], max_depth: int = 7) -> List[List[str]]:
    """Find short rule cycles, shortest first.

    Each cycle is listed once (whatever rule it was found from) as a path
    that starts and ends on the same rule.
    """
    all_cycles = []
    for start in sorted(rules):
        stack = [(start, [start])]
        visited: Set[str] = set()
        while stack:
            node, path = stack.pop()
            for neighbor in sorted(rules.get(node, ())):
                if neighbor == start:
                    cycle = path + [neighbor]
                    cycle_key = " -> ".join(sorted(set(cycle[:-1])))
                    if cycle_key not in visited:
                        all_cycles.append(cycle)
                        visited.add(cycle_key)
                elif neighbor not in path and neighbor in rules and len(path) < max_depth:
                    stack.append((neighbor, path + [neighbor]))

    unique: Dict[Tuple[str, ...], List[str]] = {}
    for c in all_cycles:
        key = tuple(sorted(set(c[:-1])))
        if key not in unique or len(c) < len(unique[key]):
            unique[key] = c
    return sorted(unique.values(), key=lambda c: (len(c), c))
