"""Generate an ANTLR4 grammar from a syntax tree model.

Each concrete node type becomes a rule whose single production spells out its
children. Each type with a base type also becomes an alternative of the base
rule, so ``statement`` ends up as ``block | break_statement | ...``. The
rules are then printed in a stable order: the major sections first, each
followed depth-first by the rules it pulls in, then everything else
alphabetically.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Dict, Iterator, List, Optional, Sequence, Set, Tuple

from .config import DEFAULT_CONFIG, GrammarConfig
from .errors import (
    EmptyRuleError,
    GrammarError,
    NormalizationCollisionError,
    SchemaError,
    UnmappedTokenKindError,
    UnresolvedRuleError,
)
from .model import Choice, Constituent, Field, Tree, TreeType
from .model import Sequence as SequenceNode
from .naming import normalize
from .production import Production

logger = logging.getLogger(__name__)

EOF_MARKER = "EOF"
EPSILON = "/* epsilon */"
HEADER = "// <auto-generated />\ngrammar {name};"


class GrammarGenerator:
    """Turns a :class:`Tree` into grammar text. One instance, one run."""

    def __init__(self, tree: Tree, config: Optional[GrammarConfig] = None):
        self.config = config or DEFAULT_CONFIG

        names = tree.type_names()
        duplicates = sorted(n for n, count in Counter(names).items() if count > 1)
        if duplicates:
            raise SchemaError(f"Duplicate type names: {', '.join(duplicates)}")
        if self.config.modifier_rule in names:
            raise SchemaError(
                f"Type name {self.config.modifier_rule!r} is reserved for modifiers"
            )

        # Node types refer to a pseudo-element 'Modifier' through their
        # 'Modifiers' lists. Synthesize it so those lists get a real rule.
        keywords = self._modifier_keywords()
        modifier = TreeType(
            name=self.config.modifier_rule,
            children=(
                Field(
                    name=self.config.modifier_rule,
                    type=self.config.token_type,
                    kinds=keywords,
                ),
            )
            if keywords
            else (),
        )

        self.nodes: Tuple[TreeType, ...] = tuple(
            t for t in tree.types if t.name != self.config.root_type
        ) + (modifier,)
        self.rules: Dict[str, List[Production]] = {n.name: [] for n in self.nodes}
        self._done = False

    def _modifier_keywords(self) -> Tuple[str, ...]:
        keywords = []
        for modifier in self.config.declaration_modifiers:
            keyword = modifier + self.config.keyword_suffix
            if keyword in self.config.token_texts and keyword not in keywords:
                keywords.append(keyword)
        return tuple(keywords)

    # ------------------------------------------------------------------
    # Entry point
    # ------------------------------------------------------------------

    def run(self) -> str:
        """Build the rule table and serialize it."""
        if self._done:
            raise GrammarError("GrammarGenerator.run() may only be called once")
        self._done = True

        for node in self.nodes:
            self._add_node(node)

        # The grammar bottoms out in a few lexical rules. Give each of them a
        # comment production so no rule refers to a rule that doesn't exist.
        for name in self.config.lexical_tokens:
            if not self.rules.get(name):
                self.rules[name] = [Production(self.config.lexical_placeholder)]

        logger.debug("Built %d rules from %d types", len(self.rules), len(self.nodes))
        return self._generate_result()

    def _add_node(self, node: TreeType) -> None:
        # A type with a base is a valid production of the base.
        if node.base is not None and node.base != self.config.root_type:
            self._add_productions(node.base, [self._rule_reference(node.name)])

        if not node.is_node or not node.children:
            return

        # Convert a rule of `a: (x | y | z)` into:
        # a: x
        #  | y
        #  | z;
        children = node.children
        if (
            len(children) == 1
            and isinstance(children[0], Field)
            and children[0].is_token(self.config.token_type)
            and len(children[0].kinds) > 1
        ):
            token_field = children[0]
            productions = [
                self._process_children(
                    [Field(name=token_field.name, type=self.config.token_type, kinds=(k,))],
                    " ",
                )
                for k in token_field.kinds
            ]
            # Dropped kinds (end of directive, ...) add nothing to the rule.
            productions = [p for p in productions if p.text]
        else:
            productions = [self._process_children(children, " ")]
        self._add_productions(node.name, productions)

    def _add_productions(self, name: str, productions: List[Production]) -> None:
        """Append to a rule, skipping productions whose text it already has."""
        try:
            existing = self.rules[name]
        except KeyError:
            raise UnresolvedRuleError(name) from None
        for production in productions:
            if production not in existing:
                existing.append(production)

    # ------------------------------------------------------------------
    # Productions
    # ------------------------------------------------------------------

    def _process_children(
        self, children: Sequence[Constituent], delim: str
    ) -> Production:
        """Return the production for ``children`` joined by ``delim``.

        Children that render as nothing (bool fields, dropped tokens) are
        left out entirely.
        """
        parts = [p for p in (self._process_child(c) for c in children) if p.text]
        references: List[str] = []
        for part in parts:
            references.extend(part.rule_references)
        return Production.of(delim.join(p.text for p in parts), references)

    def _process_child(self, child: Constituent) -> Production:
        if isinstance(child, Choice):
            return self._process_children(child.children, " | ").parenthesize()
        if isinstance(child, SequenceNode):
            return self._process_children(child.children, " ").parenthesize()
        if isinstance(child, Field):
            production = self._field_type(child)
            if child.optional and production.text:
                production = production.with_suffix("?")
            return production
        raise TypeError(f"Unexpected child: {child!r}")

    def _field_type(self, field: Field) -> Production:
        cfg = self.config
        # 'bool' fields are the few boolean properties of directive trivia.
        # They have no syntax.
        if field.type == cfg.bool_type:
            return Production("")
        if field.type == cfg.root_type:
            return self._node_field(field)
        if _generic_argument(field.type, cfg.separated_list_type) is not None:
            return self._separated_list_field(field)
        if _generic_argument(field.type, cfg.list_type) is not None:
            return self._list_field(field)
        if field.is_token(cfg.token_type):
            return self._token_field(field)
        return self._rule_reference(field.type)

    def _node_field(self, field: Field) -> Production:
        # A field typed as the root node names its one concrete kind.
        if len(field.kinds) != 1:
            raise SchemaError(
                f"Field {field.name!r} of type {field.type} must declare exactly one kind"
            )
        return self._rule_reference(field.kinds[0] + self.config.syntax_suffix)

    def _separated_list_field(self, field: Field) -> Production:
        element = self._rule_reference(
            _generic_argument(field.type, self.config.separated_list_type)
        )
        result = element.with_suffix(f" (',' {element})*")
        if field.allow_trailing_separator:
            result = result.with_suffix(" ','?")
        if field.min_count is not None:
            return result
        return result.parenthesize().with_suffix("?")

    def _list_field(self, field: Field) -> Production:
        suffix = "+" if field.min_count is not None else "*"
        return self._list_element(field).with_suffix(suffix)

    def _list_element(self, field: Field) -> Production:
        cfg = self.config
        # Token lists we want to be precise about. `Commas` should not show
        # up as `token*`, which would allow virtually any token.
        if field.name == cfg.commas_field:
            return Production("','")
        if field.name == cfg.modifiers_field:
            return self._rule_reference(cfg.modifier_rule)
        if field.name == cfg.tokens_field:
            return Production(self._normalize(cfg.token_rule))
        if field.name == cfg.text_tokens_field:
            return Production(self._normalize(cfg.text_token_rule))
        return self._rule_reference(_generic_argument(field.type, cfg.list_type))

    def _token_field(self, field: Field) -> Production:
        if not field.kinds:
            return Production(self._token_text(self._token_kind(field.name)))
        # Kinds may share a spelling ('"' closes both strings and interpolations).
        texts = sorted({t for t in (self._token_text(k) for k in field.kinds) if t})
        production = Production(" | ".join(texts))
        if len(texts) > 1:
            return production.parenthesize()
        return production

    def _token_kind(self, name: str) -> str:
        if name == self.config.identifier_field:
            return self.config.identifier_kind
        return name

    def _token_text(self, kind: str) -> str:
        """Return the grammar spelling of a token kind ('' for nothing)."""
        cfg = self.config
        if kind not in cfg.token_texts:
            raise UnmappedTokenKindError(kind)

        if kind == cfg.end_of_file_kind:
            # ANTLR's own marker: the production consumes the whole file.
            return EOF_MARKER
        if kind in cfg.dropped_kinds:
            return ""
        if kind in cfg.omitted_kinds:
            return EPSILON

        # Lexical kinds map to a rule declared as "see lexical specification".
        if kind in cfg.lexical_tokens:
            return self._normalize(kind)

        text = cfg.token_texts[kind]
        if not text:
            raise UnmappedTokenKindError(kind)
        return quote(text)

    def _rule_reference(self, name: str) -> Production:
        if name not in self.rules:
            raise UnresolvedRuleError(name)
        return Production(self._normalize(name), (name,))

    def _normalize(self, name: str) -> str:
        return normalize(name, self.config.syntax_suffix)

    # ------------------------------------------------------------------
    # Emission
    # ------------------------------------------------------------------

    def _generate_result(self) -> str:
        self._check_normalized_names()

        # Once a rule has been emitted it is never emitted again, even when
        # another rule references it.
        seen: Set[str] = set()
        normalized_rules: List[Tuple[str, List[str]]] = []
        referenced: Set[str] = set()

        for section in self.config.major_sections:
            if section not in self.rules:
                logger.debug("Major section %s not in schema, skipping", section)
                continue
            self._add_normalized_rules(section, seen, normalized_rules, referenced)

        # Anything not reached from the sections, alphabetically.
        for name in sorted(self.rules):
            self._add_normalized_rules(name, seen, normalized_rules, referenced)

        for name in sorted(referenced):
            if not self.rules[name]:
                raise EmptyRuleError(self._normalize(name))

        header = HEADER.format(name=self.config.grammar_name)
        return header + "".join(
            format_rule(name, productions) for name, productions in normalized_rules
        )

    def _add_normalized_rules(
        self,
        start: str,
        seen: Set[str],
        normalized_rules: List[Tuple[str, List[str]]],
        referenced: Set[str],
    ) -> None:
        """Emit ``start`` and, depth-first, the rules its productions use.

        Major sections met along the way are left for their own turn, which
        keeps each section's rules together in the output.
        """
        stack: List[Iterator[str]] = [iter((start,))]
        while stack:
            name = next(stack[-1], None)
            if name is None:
                stack.pop()
                continue
            if name in seen:
                continue
            seen.add(name)

            # Alphabetical, so Syntax.xml ordering changes don't churn output.
            ordered = sorted(self.rules[name], key=lambda p: p.text)
            if ordered:
                normalized_rules.append((self._normalize(name), [p.text for p in ordered]))
            else:
                logger.debug("Rule %s has no productions, skipping", name)

            references = [r for p in ordered for r in p.rule_references]
            referenced.update(references)
            stack.append(
                iter([r for r in references if r not in self.config.major_sections])
            )

    def _check_normalized_names(self) -> None:
        owners: Dict[str, Set[str]] = {}
        for name in self.rules:
            owners.setdefault(self._normalize(name), set()).add(name)
        for normalized, names in sorted(owners.items()):
            if len(names) > 1:
                raise NormalizationCollisionError(normalized, names)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _generic_argument(type_name: str, generic: str) -> Optional[str]:
    """Return ``T`` for ``generic<T>``, otherwise None."""
    prefix = generic + "<"
    if type_name.startswith(prefix) and type_name.endswith(">"):
        return type_name[len(prefix):-1]
    return None


def quote(text: str) -> str:
    """Quote a token spelling as an ANTLR literal."""
    if text == "'":
        return "'\\''"
    return "'" + text.replace("\\", "\\\\") + "'"


def format_rule(name: str, productions: Sequence[str]) -> str:
    if not productions:
        raise EmptyRuleError(name)
    return "\n\n" + name + "\n  : " + "\n  | ".join(productions) + "\n  ;"


def generate_grammar(tree: Tree, config: Optional[GrammarConfig] = None) -> str:
    """Generate the grammar text for ``tree``."""
    return GrammarGenerator(tree, config).run()
