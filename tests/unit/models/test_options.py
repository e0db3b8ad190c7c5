"""Unit tests for ConversionOptions and IconDefinition."""

import pytest
from pydantic import ValidationError

from svg_to_ts.models import ConversionOptions, Delimiter, IconDefinition


class TestConversionOptionsDefaults:
    def test_defaults(self):
        options = ConversionOptions()
        assert options.src_files == ["*.svg"]
        assert options.output_directory == "./dist"
        assert options.icons_folder_name == "build"
        assert options.barrel_file_name == "index"
        assert options.delimiter is Delimiter.KEBAB
        assert options.model_file_name is None
        assert options.additional_model_output_path is None
        assert options.export_complete_icon_set is False
        assert options.compile_sources is False
        assert options.optimize_for_lazy_loading is True
        assert options.file_name == "my-icons"

    def test_icons_directory(self):
        options = ConversionOptions(output_directory="dist", icons_folder_name="icons")
        assert options.icons_directory == "dist/icons"


class TestConversionOptionsAliases:
    def test_camel_case_keys_accepted(self):
        options = ConversionOptions.model_validate(
            {
                "srcFiles": ["icons/*.svg"],
                "outputDirectory": "out",
                "iconsFolderName": "icons",
                "barrelFileName": "main",
                "modelFileName": "model",
                "additionalModelOutputPath": "shared",
                "exportCompleteIconSet": True,
                "compileSources": True,
                "delimiter": "CAMEL",
                "optimizeForLazyLoading": False,
                "fileName": "icons",
            }
        )
        assert options.src_files == ["icons/*.svg"]
        assert options.output_directory == "out"
        assert options.barrel_file_name == "main"
        assert options.additional_model_output_path == "shared"
        assert options.export_complete_icon_set is True
        assert options.compile_sources is True
        assert options.delimiter is Delimiter.CAMEL
        assert options.optimize_for_lazy_loading is False
        assert options.file_name == "icons"

    def test_unknown_key_rejected(self):
        with pytest.raises(ValidationError):
            ConversionOptions.model_validate({"outputDir": "dist"})

    def test_frozen(self):
        options = ConversionOptions()
        with pytest.raises(ValidationError):
            options.output_directory = "elsewhere"  # type: ignore[misc]


class TestConversionOptionsValidation:
    @pytest.mark.parametrize(
        "field",
        ["output_directory", "icons_folder_name", "barrel_file_name", "file_name"],
    )
    def test_blank_names_rejected(self, field):
        with pytest.raises(ValidationError):
            ConversionOptions(**{field: "  "})

    @pytest.mark.parametrize("value", ["My-Icon", "1Icon", ""])
    def test_interface_name_must_be_identifier(self, value):
        with pytest.raises(ValidationError):
            ConversionOptions(interface_name=value)

    def test_empty_src_files_rejected(self):
        with pytest.raises(ValidationError):
            ConversionOptions(src_files=[])

    def test_blank_model_file_name_means_none(self):
        options = ConversionOptions(model_file_name="", additional_model_output_path="")
        assert options.model_file_name is None
        assert options.additional_model_output_path is None

    def test_invalid_delimiter(self):
        with pytest.raises(ValidationError):
            ConversionOptions(delimiter="PASCAL")


class TestIconDefinition:
    def test_derived_names(self):
        definition = IconDefinition(
            prefix="md",
            filename_without_ending="home",
            variable_name="mdHome",
            type_name="md-home",
            data="<svg/>",
        )
        assert definition.icon_key == "md-home"
        assert definition.generated_file_name == "md-home.icon"

    def test_requires_file_name(self):
        with pytest.raises(ValidationError):
            IconDefinition(
                prefix="md",
                filename_without_ending="",
                variable_name="md",
                type_name="md-",
                data="<svg/>",
            )
