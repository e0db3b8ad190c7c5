"""Unit tests for the configuration loader."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from svg_to_ts.core.exceptions import ConfigurationError
from svg_to_ts.io.config_loader import load_config
from svg_to_ts.models.options import Delimiter


def test_single_yaml_mapping(tmp_path: Path) -> None:
    cfg = tmp_path / "svg-to-ts.yaml"
    cfg.write_text(
        "srcFiles:\n"
        "  - icons/*.svg\n"
        "outputDirectory: dist\n"
        "prefix: md\n"
        "delimiter: SNAKE\n"
        "modelFileName: model\n"
    )

    [options] = load_config(cfg)

    assert options.src_files == ["icons/*.svg"]
    assert options.output_directory == "dist"
    assert options.prefix == "md"
    assert options.delimiter is Delimiter.SNAKE
    assert options.model_file_name == "model"


def test_json_list_of_conversions(tmp_path: Path) -> None:
    cfg = tmp_path / "svg-to-ts.json"
    cfg.write_text(
        json.dumps(
            [
                {"outputDirectory": "dist/a", "prefix": "a"},
                {"outputDirectory": "dist/b", "prefix": "b"},
            ]
        )
    )

    options = load_config(cfg)

    assert [o.output_directory for o in options] == ["dist/a", "dist/b"]


def test_conversions_key_merges_shared_defaults(tmp_path: Path) -> None:
    cfg = tmp_path / "svg-to-ts.yml"
    cfg.write_text(
        "interfaceName: AppIcon\n"
        "compileSources: true\n"
        "conversions:\n"
        "  - outputDirectory: dist/solid\n"
        "  - outputDirectory: dist/outline\n"
        "    compileSources: false\n"
    )

    solid, outline = load_config(cfg)

    assert solid.interface_name == outline.interface_name == "AppIcon"
    assert solid.compile_sources is True
    assert outline.compile_sources is False


def test_rc_file_is_json(tmp_path: Path) -> None:
    cfg = tmp_path / ".svgtotsrc"
    cfg.write_text('{"outputDirectory": "out"}')
    [options] = load_config(cfg)
    assert options.output_directory == "out"


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="not found"):
        load_config(tmp_path / "nope.yaml")


def test_unsupported_extension(tmp_path: Path) -> None:
    cfg = tmp_path / "config.toml"
    cfg.write_text("")
    with pytest.raises(ConfigurationError, match="Unsupported extension"):
        load_config(cfg)


def test_syntax_error(tmp_path: Path) -> None:
    cfg = tmp_path / "bad.json"
    cfg.write_text("{not json")
    with pytest.raises(ConfigurationError, match="Cannot parse"):
        load_config(cfg)


def test_scalar_document_rejected(tmp_path: Path) -> None:
    cfg = tmp_path / "scalar.yaml"
    cfg.write_text("just a string\n")
    with pytest.raises(ConfigurationError, match="must be a mapping or a list"):
        load_config(cfg)


def test_empty_list_rejected(tmp_path: Path) -> None:
    cfg = tmp_path / "empty.json"
    cfg.write_text("[]")
    with pytest.raises(ConfigurationError, match="No conversions"):
        load_config(cfg)


def test_non_mapping_entry_rejected(tmp_path: Path) -> None:
    cfg = tmp_path / "list.json"
    cfg.write_text('[{"outputDirectory": "a"}, "b"]')
    with pytest.raises(ConfigurationError, match="must be a mapping"):
        load_config(cfg)


def test_invalid_values_name_the_entry(tmp_path: Path) -> None:
    cfg = tmp_path / "invalid.json"
    cfg.write_text('[{"outputDirectory": "a"}, {"interfaceName": "not-valid"}]')
    with pytest.raises(ConfigurationError, match="Invalid conversion #2"):
        load_config(cfg)


def test_undecodable_file(tmp_path: Path) -> None:
    cfg = tmp_path / "latin1.json"
    cfg.write_bytes(b'{"prefix": "\xe9"}')
    with pytest.raises(ConfigurationError, match="Cannot read latin1.json"):
        load_config(cfg)


def test_unreadable_file(tmp_path: Path) -> None:
    cfg = tmp_path / "svg-to-ts.yaml"
    cfg.write_text("prefix: md\n")
    with patch.object(Path, "read_text", side_effect=PermissionError("denied")):
        with pytest.raises(ConfigurationError, match="Cannot read svg-to-ts.yaml"):
            load_config(cfg)


def test_conversion_mode_keys(tmp_path: Path) -> None:
    cfg = tmp_path / "svg-to-ts.json"
    cfg.write_text('{"optimizeForLazyLoading": false, "fileName": "icons"}')
    [options] = load_config(cfg)
    assert options.optimize_for_lazy_loading is False
    assert options.file_name == "icons"
