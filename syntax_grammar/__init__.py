"""Generate ANTLR4 grammars from syntax tree models."""

from .config import DEFAULT_CONFIG, GrammarConfig, load_config
from .errors import (
    ConfigError,
    EmptyRuleError,
    GrammarError,
    NormalizationCollisionError,
    SchemaError,
    UnmappedTokenKindError,
    UnresolvedRuleError,
)
from .generator import GrammarGenerator, generate_grammar
from .model import Choice, Field, Sequence, Tree, TreeType
from .naming import normalize
from .production import Production
from .schema_io import load_tree, tree_from_dict

__version__ = "0.1.0"

__all__ = [
    "Choice",
    "ConfigError",
    "DEFAULT_CONFIG",
    "EmptyRuleError",
    "Field",
    "GrammarConfig",
    "GrammarError",
    "GrammarGenerator",
    "NormalizationCollisionError",
    "Production",
    "SchemaError",
    "Sequence",
    "Tree",
    "TreeType",
    "UnmappedTokenKindError",
    "UnresolvedRuleError",
    "generate_grammar",
    "load_config",
    "load_tree",
    "normalize",
    "tree_from_dict",
]
