"""Generator settings.

All of the fixed lists the generator relies on live in :class:`GrammarConfig`
so a run is a function of ``(tree, config)`` alone. The defaults describe C#;
``load_config`` overlays a JSON file on top of them.
"""

from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Tuple, Union

from . import csharp
from .errors import ConfigError


@dataclass(frozen=True)
class GrammarConfig:
    grammar_name: str = csharp.GRAMMAR_NAME
    root_type: str = csharp.ROOT_TYPE
    syntax_suffix: str = "Syntax"

    # Field type names
    bool_type: str = "bool"
    token_type: str = "SyntaxToken"
    list_type: str = "SyntaxList"
    separated_list_type: str = "SeparatedSyntaxList"

    # Synthesized modifier rule
    modifier_rule: str = "Modifier"
    keyword_suffix: str = "Keyword"
    declaration_modifiers: Tuple[str, ...] = csharp.DECLARATION_MODIFIERS

    # Emission layout
    major_sections: Tuple[str, ...] = csharp.MAJOR_SECTIONS
    lexical_tokens: Tuple[str, ...] = csharp.LEXICAL_TOKENS
    lexical_placeholder: str = "/* see lexical specification */"

    # Token kinds with special renderings
    token_texts: Mapping[str, str] = field(
        default_factory=lambda: dict(csharp.TOKEN_TEXTS)
    )
    identifier_field: str = "Identifier"
    identifier_kind: str = "IdentifierToken"
    end_of_file_kind: str = "EndOfFileToken"
    dropped_kinds: Tuple[str, ...] = (
        "EndOfDocumentationCommentToken",
        "EndOfDirectiveToken",
    )
    omitted_kinds: Tuple[str, ...] = (
        "OmittedTypeArgumentToken",
        "OmittedArraySizeExpressionToken",
    )

    # Token lists that get a precise element instead of a generic token*
    commas_field: str = "Commas"
    modifiers_field: str = "Modifiers"
    tokens_field: str = "Tokens"
    text_tokens_field: str = "TextTokens"
    token_rule: str = "Token"
    text_token_rule: str = "XmlTextLiteralToken"

    def replace(self, **overrides: Any) -> "GrammarConfig":
        """Return a copy with ``overrides`` applied.

        Sequences are stored as tuples. ``token_texts`` is merged into the
        current table rather than replacing it.
        """
        known = {f.name for f in dataclasses.fields(self)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

        values: Dict[str, Any] = {}
        for key, value in overrides.items():
            current = getattr(self, key)
            if key == "token_texts":
                if not isinstance(value, Mapping):
                    raise ConfigError("token_texts must be an object")
                merged = dict(current)
                merged.update({str(k): str(v) for k, v in value.items()})
                values[key] = merged
            elif isinstance(current, tuple):
                if isinstance(value, str) or not isinstance(value, (list, tuple)):
                    raise ConfigError(f"{key} must be a list of strings")
                values[key] = tuple(str(v) for v in value)
            else:
                if not isinstance(value, str):
                    raise ConfigError(f"{key} must be a string")
                values[key] = value
        return dataclasses.replace(self, **values)


DEFAULT_CONFIG = GrammarConfig()


def load_config(
    path: Union[str, Path], base: GrammarConfig = DEFAULT_CONFIG
) -> GrammarConfig:
    """Read a JSON object of overrides and apply it to ``base``."""
    try:
        with open(path) as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must contain a JSON object")
    return base.replace(**data)
