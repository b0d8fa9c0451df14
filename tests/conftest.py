import json
from pathlib import Path

import pytest

from syntax_grammar import DEFAULT_CONFIG, load_tree

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def sample_schema_path() -> Path:
    return DATA_DIR / "sample_schema.json"


@pytest.fixture
def sample_schema(sample_schema_path: Path) -> dict:
    return json.loads(sample_schema_path.read_text())


@pytest.fixture
def sample_tree(sample_schema_path: Path):
    return load_tree(sample_schema_path)


@pytest.fixture
def small_config():
    """Keeps the synthesized rules to one modifier and one lexical token."""
    return DEFAULT_CONFIG.replace(
        declaration_modifiers=["Static"],
        lexical_tokens=["IdentifierToken"],
        major_sections=["StatementSyntax"],
    )
