"""Builders for small tree models."""

from syntax_grammar import DEFAULT_CONFIG, Field, Tree, TreeType, analysis, generate_grammar
from syntax_grammar.model import ABSTRACT_NODE

ROOT = "CSharpSyntaxNode"


def token(name, *kinds, optional=False):
    return Field(name=name, type="SyntaxToken", kinds=tuple(kinds), optional=optional)


def field(name, type_name, **kwargs):
    return Field(name=name, type=type_name, **kwargs)


def node(name, *children, base=ROOT):
    return TreeType(name=name, base=base, children=tuple(children))


def abstract(name, base=ROOT):
    return TreeType(name=name, base=base, kind=ABSTRACT_NODE)


def tree(*types):
    return Tree(root=ROOT, types=(TreeType(name=ROOT, kind=ABSTRACT_NODE),) + types)


def generate(*types, **overrides):
    config = DEFAULT_CONFIG.replace(**overrides) if overrides else None
    return generate_grammar(tree(*types), config)


def rules(text):
    return dict(analysis.parse_rule_blocks(text))


def rule_names(text):
    return [name for name, _ in analysis.parse_rule_blocks(text)]
