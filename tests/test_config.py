"""Tests for config loading."""

import pytest

from resume_validator.config import ValidatorConfig, load_config


class TestConfig:
    def test_defaults(self):
        config = ValidatorConfig()
        assert config.languages == ("en", "ar")
        assert config.verbose is False
        assert config.resolved_data_dir is None

    def test_load_config_defaults(self, tmp_path):
        """Loading from non-existent path returns defaults."""
        config = load_config(tmp_path / "nonexistent.yaml")
        assert config == ValidatorConfig()

    def test_load_config_from_yaml(self, tmp_path):
        yaml_path = tmp_path / "resume-validator.yaml"
        yaml_path.write_text("validator:\n  languages: [en, fr]\n  verbose: true\n")
        config = load_config(yaml_path)
        assert config.languages == ("en", "fr")
        assert config.verbose is True

    def test_resolved_data_dir(self):
        config = ValidatorConfig(data_dir="~/site/_data")
        assert "~" not in str(config.resolved_data_dir)

    def test_frozen_config(self):
        config = ValidatorConfig()
        with pytest.raises(AttributeError):
            config.verbose = True

    def test_empty_languages_rejected(self, tmp_path):
        yaml_path = tmp_path / "bad.yaml"
        yaml_path.write_text("validator:\n  languages: []\n")
        with pytest.raises(ValueError, match="languages"):
            load_config(yaml_path)

    def test_invalid_language_code_rejected(self):
        with pytest.raises(ValueError, match="invalid code"):
            ValidatorConfig(languages=("en", 3))

    def test_scalar_languages_rejected(self, tmp_path):
        yaml_path = tmp_path / "bad.yaml"
        yaml_path.write_text("validator:\n  languages: en,ar\n")
        with pytest.raises(ValueError, match="languages must be a list"):
            load_config(yaml_path)

    def test_non_mapping_file_rejected(self, tmp_path):
        yaml_path = tmp_path / "bad.yaml"
        yaml_path.write_text("- a\n- b\n")
        with pytest.raises(ValueError, match="mapping"):
            load_config(yaml_path)

    def test_non_mapping_validator_section_rejected(self, tmp_path):
        yaml_path = tmp_path / "bad.yaml"
        yaml_path.write_text("validator: [en, ar]\n")
        with pytest.raises(ValueError, match="validator must be a mapping"):
            load_config(yaml_path)
