"""Tests for the command-line entry point."""

import json

from syntax_grammar import analysis
from syntax_grammar.cli import main


def test_generate(sample_schema_path, tmp_path, capsys) -> None:
    output = tmp_path / "out" / "csharp.g4"
    assert main([str(sample_schema_path), "--output", str(output), "--check"]) == 0

    text = output.read_text()
    assert text.startswith("// <auto-generated />\ngrammar csharp;\n\ncompilation_unit\n")
    assert text.endswith("  ;\n")
    assert analysis.undefined_references(text) == {}

    out = capsys.readouterr().out
    assert "Step 3: Checking grammar..." in out
    assert "All rule references resolve" in out


def test_config_file(sample_schema_path, tmp_path) -> None:
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"grammar_name": "mini"}))
    output = tmp_path / "mini.g4"
    assert main([str(sample_schema_path), "--config", str(config), "-o", str(output)]) == 0
    assert "grammar mini;" in output.read_text()


def test_default_output_path(sample_schema_path, tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    assert main([str(sample_schema_path)]) == 0
    assert (tmp_path / "grammar" / "csharp.g4").exists()


def test_generation_error(sample_schema, tmp_path, capsys) -> None:
    sample_schema["types"].append(
        {"name": "BrokenSyntax", "children": [{"name": "Target", "type": "MissingSyntax"}]}
    )
    schema = tmp_path / "schema.json"
    schema.write_text(json.dumps(sample_schema))
    output = tmp_path / "out.g4"

    assert main([str(schema), "-o", str(output)]) == 1
    assert not output.exists()
    assert "No rule found with name: MissingSyntax" in capsys.readouterr().err


def test_bad_config(sample_schema_path, tmp_path, capsys) -> None:
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"nope": True}))
    assert main([str(sample_schema_path), "--config", str(config), "-o", str(tmp_path / "x.g4")]) == 1
    assert "Unknown configuration keys: nope" in capsys.readouterr().err


def test_unwritable_output(sample_schema_path, tmp_path, capsys) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("")

    assert main([str(sample_schema_path), "-o", str(blocker / "out.g4")]) == 1
    assert "Error: Cannot write" in capsys.readouterr().err
