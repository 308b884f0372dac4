"""Test weight table and config loading and validation."""

import pytest
from pathlib import Path

from phraseline.model.loader import (
    load_config, load_model, load_model_from_string, validate_table, ModelLoadError,
)
from phraseline.model.schema import Language, SegmenterConfig, WeightTableModel
from phraseline.runtime.parser import Parser


class TestModelLoading:
    """Test model loading from JSON/YAML files and strings."""

    def test_load_valid_model_from_string(self, sample_model_json):
        """Test loading valid model from JSON string."""
        table = load_model_from_string(sample_model_json)

        assert set(table) == {"UW4", "BW2", "TW1"}
        assert table["UW4"]["a"] == 10000
        assert table["TW1"]["bcd"] == -200

    def test_load_valid_model_from_file(self, temp_model_file):
        """Test loading valid model from file."""
        table = load_model(temp_model_file)

        assert len(table) == 3
        assert table["BW2"]["ea"] == 500

    def test_load_yaml_model(self, tmp_path):
        """Test loading a YAML model file."""
        path = tmp_path / "model.yaml"
        path.write_text("UW4:\n  a: 10000\nBW1:\n  ab: -3\n", encoding="utf-8")

        table = load_model(path)
        assert table == {"UW4": {"a": 10000}, "BW1": {"ab": -3}}

    def test_load_yaml_from_string(self):
        """Test loading YAML content from a string."""
        table = load_model_from_string("UW3:\n  は: 42\n", fmt="yaml")
        assert table["UW3"]["は"] == 42

    def test_loaded_table_is_read_only(self, sample_model_json):
        """Test that loaded tables cannot be modified."""
        table = load_model_from_string(sample_model_json)
        with pytest.raises(TypeError):
            table["UW4"]["a"] = 1

    def test_empty_model(self):
        """Test that an empty mapping is a valid model."""
        assert load_model_from_string("{}") == {}

    def test_load_invalid_json(self):
        """Test loading malformed JSON."""
        with pytest.raises(ModelLoadError, match="Invalid JSON"):
            load_model_from_string('{"UW4": {"a": 1}')

    def test_load_invalid_yaml(self):
        """Test loading malformed YAML."""
        invalid_yaml = """
        invalid: yaml: content:
          - missing: bracket
        """
        with pytest.raises(ModelLoadError, match="Invalid YAML"):
            load_model_from_string(invalid_yaml, fmt="yaml")

    def test_unsupported_format(self):
        """Test an unknown format name."""
        with pytest.raises(ModelLoadError, match="Unsupported model format"):
            load_model_from_string("{}", fmt="toml")

    def test_top_level_must_be_mapping(self):
        """Test that a list is rejected."""
        with pytest.raises(ModelLoadError, match="must contain a mapping"):
            load_model_from_string("[1, 2, 3]")

    def test_group_must_be_mapping(self):
        """Test that a group holding a scalar is rejected."""
        with pytest.raises(ModelLoadError, match="validation failed"):
            load_model_from_string('{"UW4": 5}')

    @pytest.mark.parametrize("weight", ["1.5", "true", "\"12\"", "null"])
    def test_weights_must_be_integers(self, weight):
        """Test that non-integer weights are rejected."""
        with pytest.raises(ModelLoadError, match="validation failed"):
            load_model_from_string('{"UW4": {"a": %s}}' % weight)

    def test_weights_must_fit_int64(self):
        """Test the signed 64-bit range."""
        assert load_model_from_string('{"UW4": {"a": 9223372036854775807}}')["UW4"]["a"] == 2 ** 63 - 1
        with pytest.raises(ModelLoadError, match="validation failed"):
            load_model_from_string('{"UW4": {"a": 9223372036854775808}}')

    @pytest.mark.parametrize("content,match", [
        ('{"UW1": {"x": %d, "y": %d, "z": %d}}' % ((2 ** 63 - 1,) * 3), "positive weights"),
        ('{"UW1": {"x": %d}, "UW2": {"y": 1}}' % (2 ** 63 - 1), "positive weights"),
        ('{"UW1": {"x": %d}, "TW4": {"abc": -1}}' % (-(2 ** 63)), "negative weights"),
    ])
    def test_weight_sums_must_fit_int64(self, content, match):
        """Test tables whose weight sums leave the int64 range are rejected."""
        with pytest.raises(ModelLoadError, match=match):
            load_model_from_string(content)

    def test_table_at_range_edge_loads_and_parses(self):
        """Test the largest accepted sums still score without raising."""
        table = load_model_from_string(
            '{"UW3": {"a": %d}, "UW4": {"b": %d}}' % (2 ** 63 - 1, -(2 ** 63))
        )
        parser = Parser(table)

        assert parser.base_score == 0
        assert parser.parse("ac") == ["a", "c"]
        assert parser.parse("ab") == ["ab"]
        assert parser.score_positions("ac").tolist() == [2 ** 63 - 1]

    def test_load_nonexistent_file(self):
        """Test loading from non-existent file."""
        with pytest.raises(ModelLoadError, match="not found"):
            load_model(Path("/does/not/exist.json"))

    def test_error_names_the_file(self, tmp_path):
        """Test that file errors include the path."""
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ModelLoadError, match="broken.json"):
            load_model(path)

    def test_soft_issues_are_logged(self, test_logger):
        """Test that unknown groups and bad widths warn but load."""
        table = validate_table(
            {"UW4": {"ab": 1}, "QQ1": {"x": 2}},
            source="test",
            logger=test_logger,
        )

        assert table["QQ1"]["x"] == 2
        warnings = [kv["issue"] for level, msg, kv in test_logger.messages if level == "warn"]
        assert any("QQ1" in issue for issue in warnings)
        assert any("UW4" in issue for issue in warnings)
        infos = [(msg, kv) for level, msg, kv in test_logger.messages if level == "info"]
        assert infos == [("model_loaded", {"source": "test", "groups": 2, "total_weight": 3})]


class TestWeightTableSchema:
    """Test the weight table schema helpers."""

    def test_total_and_counts(self, sample_table):
        """Test total weight and per-group counts."""
        model = WeightTableModel.model_validate(sample_table)
        assert model.total_weight() == 10300
        assert model.entry_counts() == {"UW4": 1, "BW2": 1, "TW1": 1}

    def test_clean_table_has_no_issues(self, sample_table):
        """Test that a well-formed table reports nothing."""
        assert WeightTableModel.model_validate(sample_table).validate_groups() == []

    def test_issues(self):
        """Test each kind of soft issue."""
        model = WeightTableModel.model_validate({
            "ZZ": {"a": 1},
            "UW1": {"": 1},
            "TW2": {"ab": 1, "abc": 2},
        })
        issues = model.validate_groups()
        assert len(issues) == 3
        assert "Unknown feature groups" in issues[0]
        assert "empty n-gram" in issues[1]
        assert "TW2" in issues[2]


class TestConfigLoading:
    """Test segmenter configuration loading."""

    def test_defaults(self):
        """Test configuration defaults."""
        config = SegmenterConfig()
        assert config.language == Language.JAPANESE
        assert config.models_dir is None
        assert config.delimiter == "\n"

    def test_load_config(self, tmp_path):
        """Test loading a YAML config file."""
        path = tmp_path / "phraseline.yaml"
        path.write_text(
            "language: ZH_HANT\nmodels_dir: /opt/models\ndelimiter: \" | \"\n",
            encoding="utf-8",
        )

        config = load_config(path)
        assert config.language == Language.TRADITIONAL_CHINESE
        assert config.models_dir == Path("/opt/models")
        assert config.delimiter == " | "

    def test_empty_config_file(self, tmp_path):
        """Test that an empty file gives defaults."""
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(path) == SegmenterConfig()

    def test_unknown_language(self, tmp_path):
        """Test that an unsupported language fails validation."""
        path = tmp_path / "bad.yaml"
        path.write_text("language: ko\n", encoding="utf-8")
        with pytest.raises(ModelLoadError, match="validation failed"):
            load_config(path)

    def test_extra_fields_forbidden(self, tmp_path):
        """Test that extra fields are forbidden."""
        path = tmp_path / "extra.yaml"
        path.write_text("language: ja\nthreshold: 3\n", encoding="utf-8")
        with pytest.raises(ModelLoadError, match="validation failed"):
            load_config(path)

    def test_config_must_be_mapping(self, tmp_path):
        """Test that a YAML list is rejected."""
        path = tmp_path / "list.yaml"
        path.write_text("- ja\n- th\n", encoding="utf-8")
        with pytest.raises(ModelLoadError, match="must contain a YAML mapping"):
            load_config(path)

    def test_missing_config(self):
        """Test loading a config that does not exist."""
        with pytest.raises(ModelLoadError, match="not found"):
            load_config("/does/not/exist.yaml")
