"""Tests for the command-line interface."""

import json
from pathlib import Path

import pytest
import yaml

from schema_names.cli import main
from schema_names.load_schema_definition import load_schema_definition


def test_resolve_command(capsys: pytest.CaptureFixture[str]) -> None:
    """Verify that a resolved name is printed with its parts."""
    assert main(["resolve", "X", "--namespace", "org.foo"]) == 0
    out = capsys.readouterr().out
    assert "full name: org.foo.X" in out
    assert "namespace:  org.foo" in out
    assert "short name: X" in out


def test_resolve_command_invalid(capsys: pytest.CaptureFixture[str]) -> None:
    """Verify that an invalid name exits with status 1."""
    assert main(["resolve", "&X"]) == 1
    assert "invalid_name" in capsys.readouterr().err


def test_resolve_command_relaxed(capsys: pytest.CaptureFixture[str]) -> None:
    """Verify that --relaxed allows a leading dot in the namespace."""
    assert main(["--relaxed", "resolve", "X", "--namespace", ".org.foo"]) == 0
    assert "full name: .org.foo.X" in capsys.readouterr().out


def test_relaxed_from_config(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Verify that relaxed validation can be enabled from a config file."""
    config_file = tmp_path / "config.yml"
    config_file.write_text(yaml.dump({"validation": {"relaxed": True}}))
    argv = ["--config", str(config_file), "resolve", "X", "--enclosing", ".a"]
    assert main(argv) == 0
    assert "full name: .a.X" in capsys.readouterr().out


def test_check_command(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Verify that a schema definition file is resolved with its aliases."""
    schema_file = tmp_path / "record.json"
    schema_file.write_text(
        json.dumps(
            {
                "type": "record",
                "name": "User",
                "namespace": "com.example",
                "aliases": ["Person"],
                "fields": [],
            }
        )
    )
    assert main(["check", str(schema_file)]) == 0
    out = capsys.readouterr().out
    assert "full name: com.example.User" in out
    assert "alias: com.example.Person" in out


def test_check_command_missing_name(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Verify that a definition without a name is reported."""
    schema_file = tmp_path / "record.yml"
    schema_file.write_text(yaml.dump({"type": "record", "fields": []}))
    assert main(["check", str(schema_file)]) == 1
    assert "missing_name_field" in capsys.readouterr().err


def test_check_command_bad_alias(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Verify that an invalid alias is reported."""
    schema_file = tmp_path / "record.yml"
    schema_file.write_text(yaml.dump({"name": "User", "aliases": ["9Person"]}))
    assert main(["check", str(schema_file)]) == 1
    assert "invalid_name" in capsys.readouterr().err


def test_load_schema_definition_rejects_non_mapping(tmp_path: Path) -> None:
    """Verify that a document that is not a mapping is rejected."""
    schema_file = tmp_path / "list.yml"
    schema_file.write_text(yaml.dump(["not", "a", "mapping"]))
    with pytest.raises(ValueError):
        load_schema_definition(schema_file)
